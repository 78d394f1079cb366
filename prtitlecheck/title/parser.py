"""Split a title into its Conventional Commits components."""
from typing import Optional

from ..models import TitleComponents
from .rules import extract_type, find_scope_group


def parse_title(title: str) -> Optional[TitleComponents]:
    """Parse ``title`` into components, or return None if it has no usable shape.

    The header (text before the first colon) may only hold the type, one
    ``(...)`` group and ``!`` markers. Anything else, such as a space before
    the colon, rejects the whole title. Misplaced ``!`` markers still parse
    so the breaking change rule can report them.
    """
    commit_type = extract_type(title)
    if commit_type is None:
        return None

    colon_index = title.find(':')
    if colon_index == -1:
        return None

    header = title[:colon_index]
    scope_match = find_scope_group(header)

    expected_header = commit_type + (scope_match.group(0) if scope_match else '')
    if header.replace('!', '') != expected_header:
        return None

    return TitleComponents(
        type=commit_type,
        scope=scope_match.group(1) if scope_match else None,
        is_breaking_change='!' in header,
        description=title[colon_index + 1:],
    )
