"""Title validation as a chain of rule handlers.

Each handler owns one group of rules and adds its findings to a shared
``TitleCheck``. The chain always runs to the end so that every violation is
reported. The structure handler is the one exception: when a title cannot be
parsed there are no components left to check, so it halts the chain.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from ..models import ErrorCode, TitleComponents, ValidationError
from . import rules
from .parser import parse_title


@dataclass
class TitleCheck:
    """State for a single validation run."""
    title: str
    components: Optional[TitleComponents] = None
    description: Optional[str] = None
    errors: List[ValidationError] = field(default_factory=list)
    halted: bool = False


class ValidationHandler(ABC):
    """Abstract base class for validation handlers."""

    def __init__(self, next_handler: Optional['ValidationHandler'] = None):
        self.next_handler = next_handler

    def handle(self, check: TitleCheck) -> List[ValidationError]:
        """Run this handler, then the rest of the chain unless halted."""
        check.errors.extend(self.validate(check))
        if check.halted or not self.next_handler:
            return check.errors
        return self.next_handler.handle(check)

    @abstractmethod
    def validate(self, check: TitleCheck) -> List[ValidationError]:
        """Return the violations this handler finds."""
        pass


class CharacterSetHandler(ValidationHandler):
    """Only displayable ASCII is allowed anywhere in the title."""

    def validate(self, check: TitleCheck) -> List[ValidationError]:
        if rules.has_non_displayable_chars(check.title):
            return [rules.make_error(ErrorCode.NON_ASCII_CHARACTERS)]
        return []


class StructureHandler(ValidationHandler):
    """Parses the title and halts the chain when that is impossible."""

    def validate(self, check: TitleCheck) -> List[ValidationError]:
        check.components = parse_title(check.title)
        if check.components is None:
            check.halted = True
            return [rules.make_error(ErrorCode.INVALID_FORMAT)]
        return []


class TypeHandler(ValidationHandler):
    """Type must be lowercase and one of the allowed types."""

    def validate(self, check: TitleCheck) -> List[ValidationError]:
        commit_type = check.components.type
        errors = []
        if rules.has_uppercase(commit_type):
            errors.append(rules.make_error(ErrorCode.TYPE_NOT_LOWERCASE))
        if not rules.is_allowed_type(commit_type):
            errors.append(rules.make_error(ErrorCode.INVALID_TYPE))
        return errors


class ScopeHandler(ValidationHandler):
    """Validates the optional scope."""

    def __init__(self, strict: bool = True, next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.strict = strict

    def validate(self, check: TitleCheck) -> List[ValidationError]:
        scope = check.components.scope
        if scope is None:
            return []
        if scope == '':
            return [rules.make_error(ErrorCode.EMPTY_SCOPE)]

        errors = []
        if self.strict and rules.has_uppercase(scope):
            errors.append(rules.make_error(ErrorCode.SCOPE_NOT_LOWERCASE))
        if not rules.is_valid_scope_format(scope, strict=self.strict):
            errors.append(rules.make_error(ErrorCode.INVALID_SCOPE_FORMAT))
        return errors


class BreakingChangeHandler(ValidationHandler):
    """The ``!`` marker belongs right before the colon and nowhere else."""

    def validate(self, check: TitleCheck) -> List[ValidationError]:
        if check.components.is_breaking_change:
            misplaced = not rules.is_breaking_marker_well_placed(check.title)
        else:
            misplaced = rules.has_marker_after_colon(check.title)
        if misplaced:
            return [rules.make_error(ErrorCode.INVALID_BREAKING_CHANGE_POSITION)]
        return []


class SpacingHandler(ValidationHandler):
    """Exactly one space separates the colon from the description."""

    def validate(self, check: TitleCheck) -> List[ValidationError]:
        errors = []
        if not rules.has_space_after_colon(check.title):
            errors.append(rules.make_error(ErrorCode.MISSING_SPACE_AFTER_COLON))
        if rules.has_multiple_spaces_after_colon(check.title):
            errors.append(rules.make_error(ErrorCode.MULTIPLE_SPACES_AFTER_COLON))
        return errors


class DescriptionHandler(ValidationHandler):
    """Presence, surrounding spaces and length of the description."""

    def __init__(self, max_length: int = rules.MAX_DESCRIPTION_LENGTH, next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.max_length = max_length

    def validate(self, check: TitleCheck) -> List[ValidationError]:
        description = rules.strip_separator_space(check.components.description)
        if rules.is_blank(description):
            return [rules.make_error(ErrorCode.MISSING_DESCRIPTION)]

        check.description = description
        errors = []
        if rules.starts_with_space(description):
            errors.append(rules.make_error(ErrorCode.DESCRIPTION_HAS_LEADING_SPACE))
        if rules.ends_with_space(description):
            errors.append(rules.make_error(ErrorCode.DESCRIPTION_HAS_TRAILING_SPACE))
        if rules.exceeds_length(description, self.max_length):
            errors.append(rules.make_error(ErrorCode.DESCRIPTION_TOO_LONG, self.max_length))
        return errors


class StrictStyleHandler(ValidationHandler):
    """Case, punctuation and mood of the description (strict mode only)."""

    def validate(self, check: TitleCheck) -> List[ValidationError]:
        if check.description is None:
            return []

        description = check.description.strip()
        errors = []
        if not rules.starts_with_lowercase(description):
            errors.append(rules.make_error(ErrorCode.DESCRIPTION_NOT_LOWERCASE))
        if rules.ends_with_period(description):
            errors.append(rules.make_error(ErrorCode.DESCRIPTION_ENDS_WITH_PERIOD))
        if rules.is_non_imperative(rules.first_word(description)):
            errors.append(rules.make_error(ErrorCode.NON_IMPERATIVE_MOOD))
        return errors


def create_validation_chain(strict: bool = True, max_description_length: int = rules.MAX_DESCRIPTION_LENGTH) -> ValidationHandler:
    """Create the validation chain in reporting order."""
    style = StrictStyleHandler() if strict else None
    description = DescriptionHandler(max_description_length, style)
    spacing = SpacingHandler(description)
    breaking_change = BreakingChangeHandler(spacing)
    scope = ScopeHandler(strict, breaking_change)
    commit_type = TypeHandler(scope)
    structure = StructureHandler(commit_type)
    character_set = CharacterSetHandler(structure)

    return character_set
