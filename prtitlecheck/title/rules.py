"""Rule tables and predicates for Conventional Commits titles.

Every check the validator performs is one small function here. Each takes the
raw title, a parsed component, or a piece of the description and returns a
boolean or an extracted value, so rules can be tested on their own.
"""
import re
from typing import Dict, Optional

from ..models import CommitType, ErrorCode, ValidationError

ALLOWED_TYPES = tuple(commit_type.value for commit_type in CommitType)

MAX_DESCRIPTION_LENGTH = 50

NON_IMPERATIVE_WORDS = frozenset({
    "added", "adds", "adding",
    "updated", "updates", "updating",
    "fixed", "fixes", "fixing",
    "removed", "removes", "removing",
    "deleted", "deletes", "deleting",
})

_NON_DISPLAYABLE = re.compile(r'[^\x20-\x7E]')
_LEADING_TYPE = re.compile(r'^([a-zA-Z]+)')
_SCOPE_GROUP = re.compile(r'\(([^)]*)\)')
_UPPERCASE = re.compile(r'[A-Z]')
_STRICT_SCOPE = re.compile(r'[a-z0-9_-]+')
_LENIENT_SCOPE = re.compile(r'[a-zA-Z0-9_-]+')
_BREAKING_HEADER = re.compile(r'^[a-z]+(\([^)]*\))?!:', re.IGNORECASE)
_MULTIPLE_SPACES = re.compile(r':\s{2,}')

ERROR_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.INVALID_FORMAT: "Title format is incorrect. Expected format: <type>[optional scope][optional !]: <description>",
    ErrorCode.INVALID_TYPE: f"Type must be one of: {', '.join(ALLOWED_TYPES)}",
    ErrorCode.TYPE_NOT_LOWERCASE: "Type must be lowercase",
    ErrorCode.EMPTY_SCOPE: "Scope cannot be empty. Either provide a scope or omit the parentheses",
    ErrorCode.INVALID_SCOPE_FORMAT: "Scope format is incorrect. Scope should only contain lowercase letters, numbers, hyphens, and underscores",
    ErrorCode.SCOPE_NOT_LOWERCASE: "Scope must be lowercase (strict mode)",
    ErrorCode.INVALID_BREAKING_CHANGE_POSITION: "Breaking change marker (!) must be placed after the scope (or type if no scope) and before the colon",
    ErrorCode.MISSING_DESCRIPTION: "Description is required after the colon and space",
    ErrorCode.DESCRIPTION_TOO_LONG: "Description must not exceed {max_length} characters",
    ErrorCode.DESCRIPTION_NOT_LOWERCASE: "Description must start with a lowercase letter (strict mode)",
    ErrorCode.DESCRIPTION_ENDS_WITH_PERIOD: "Description must not end with a period (strict mode)",
    ErrorCode.DESCRIPTION_HAS_LEADING_SPACE: "Description must not start with a space",
    ErrorCode.DESCRIPTION_HAS_TRAILING_SPACE: "Description must not end with a space",
    ErrorCode.MISSING_SPACE_AFTER_COLON: "There must be exactly one space after the colon",
    ErrorCode.MULTIPLE_SPACES_AFTER_COLON: "There must be exactly one space after the colon, not multiple spaces",
    ErrorCode.NON_ASCII_CHARACTERS: "Title must only contain displayable ASCII characters (range: 32-126)",
    ErrorCode.NON_IMPERATIVE_MOOD: 'Description should use imperative mood (e.g., "add" not "added" or "adds")',
}

ERROR_EXAMPLES: Dict[ErrorCode, str] = {
    ErrorCode.INVALID_FORMAT: "feat(auth): add user login",
    ErrorCode.INVALID_TYPE: "feat: add new feature",
    ErrorCode.TYPE_NOT_LOWERCASE: "feat: add new feature",
    ErrorCode.EMPTY_SCOPE: "feat(auth): add user login",
    ErrorCode.INVALID_SCOPE_FORMAT: "feat(user-auth): add login",
    ErrorCode.SCOPE_NOT_LOWERCASE: "feat(auth): add user login",
    ErrorCode.INVALID_BREAKING_CHANGE_POSITION: "feat(api)!: breaking change",
    ErrorCode.MISSING_DESCRIPTION: "feat: add new feature",
    ErrorCode.DESCRIPTION_TOO_LONG: "feat: add user authentication",
    ErrorCode.DESCRIPTION_NOT_LOWERCASE: "feat: add user authentication",
    ErrorCode.DESCRIPTION_ENDS_WITH_PERIOD: "feat: add user authentication",
    ErrorCode.DESCRIPTION_HAS_LEADING_SPACE: "feat: add user authentication",
    ErrorCode.DESCRIPTION_HAS_TRAILING_SPACE: "feat: add user authentication",
    ErrorCode.MISSING_SPACE_AFTER_COLON: "feat: add new feature",
    ErrorCode.MULTIPLE_SPACES_AFTER_COLON: "feat: add new feature",
    ErrorCode.NON_ASCII_CHARACTERS: "feat: add user authentication",
    ErrorCode.NON_IMPERATIVE_MOOD: 'feat: add feature (not "added" or "adds")',
}


def make_error(code: ErrorCode, max_length: int = MAX_DESCRIPTION_LENGTH) -> ValidationError:
    """Build the error for ``code`` from the message and example tables."""
    return ValidationError(
        code=code,
        message=ERROR_MESSAGES[code].format(max_length=max_length),
        example=ERROR_EXAMPLES[code],
    )


# Character set

def has_non_displayable_chars(title: str) -> bool:
    return _NON_DISPLAYABLE.search(title) is not None


# Structure

def extract_type(title: str) -> Optional[str]:
    match = _LEADING_TYPE.match(title)
    return match.group(1) if match else None


def find_scope_group(header: str) -> Optional["re.Match[str]"]:
    """Return the first ``(...)`` group in the text before the colon."""
    return _SCOPE_GROUP.search(header)


# Type

def has_uppercase(text: str) -> bool:
    return _UPPERCASE.search(text) is not None


def is_allowed_type(commit_type: str) -> bool:
    return commit_type.lower() in ALLOWED_TYPES


# Scope

def is_valid_scope_format(scope: str, strict: bool = True) -> bool:
    pattern = _STRICT_SCOPE if strict else _LENIENT_SCOPE
    return pattern.fullmatch(scope) is not None


# Breaking change marker

def is_breaking_marker_well_placed(title: str) -> bool:
    """``!`` must directly follow the type or its scope and precede the colon."""
    return _BREAKING_HEADER.match(title) is not None


def has_marker_after_colon(title: str) -> bool:
    colon_index = title.find(':')
    return colon_index != -1 and '!' in title[colon_index + 1:]


# Spacing

def has_space_after_colon(title: str) -> bool:
    return ': ' in title


def has_multiple_spaces_after_colon(title: str) -> bool:
    return _MULTIPLE_SPACES.search(title) is not None


# Description

def strip_separator_space(description: str) -> str:
    """Drop the single space that belongs to the ``: `` separator."""
    if description.startswith(' '):
        return description[1:]
    return description


def is_blank(text: str) -> bool:
    return not text.strip()


def starts_with_space(text: str) -> bool:
    return text.startswith(' ')


def ends_with_space(text: str) -> bool:
    return text.endswith(' ')


def exceeds_length(text: str, max_length: int) -> bool:
    return len(text) > max_length


def starts_with_lowercase(text: str) -> bool:
    return bool(text) and 'a' <= text[0] <= 'z'


def ends_with_period(text: str) -> bool:
    return text.endswith('.')


def first_word(text: str) -> str:
    return text.split(' ')[0]


def is_non_imperative(word: str) -> bool:
    # Lexical heuristic: only the listed verb forms are caught.
    return word.lower() in NON_IMPERATIVE_WORDS
