"""Shared models for pr-title-check."""
from typing import List, Optional
from dataclasses import dataclass
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

class CommitType(str, Enum):
    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    BUILD = "build"
    CI = "ci"
    CHORE = "chore"
    REVERT = "revert"

class ErrorCode(str, Enum):
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_TYPE = "INVALID_TYPE"
    TYPE_NOT_LOWERCASE = "TYPE_NOT_LOWERCASE"
    EMPTY_SCOPE = "EMPTY_SCOPE"
    INVALID_SCOPE_FORMAT = "INVALID_SCOPE_FORMAT"
    SCOPE_NOT_LOWERCASE = "SCOPE_NOT_LOWERCASE"
    INVALID_BREAKING_CHANGE_POSITION = "INVALID_BREAKING_CHANGE_POSITION"
    MISSING_DESCRIPTION = "MISSING_DESCRIPTION"
    DESCRIPTION_TOO_LONG = "DESCRIPTION_TOO_LONG"
    DESCRIPTION_NOT_LOWERCASE = "DESCRIPTION_NOT_LOWERCASE"
    DESCRIPTION_ENDS_WITH_PERIOD = "DESCRIPTION_ENDS_WITH_PERIOD"
    DESCRIPTION_HAS_LEADING_SPACE = "DESCRIPTION_HAS_LEADING_SPACE"
    DESCRIPTION_HAS_TRAILING_SPACE = "DESCRIPTION_HAS_TRAILING_SPACE"
    MISSING_SPACE_AFTER_COLON = "MISSING_SPACE_AFTER_COLON"
    MULTIPLE_SPACES_AFTER_COLON = "MULTIPLE_SPACES_AFTER_COLON"
    NON_ASCII_CHARACTERS = "NON_ASCII_CHARACTERS"
    NON_IMPERATIVE_MOOD = "NON_IMPERATIVE_MOOD"

@dataclass(frozen=True)
class TitleComponents:
    """Pieces of a title split at the first colon.

    ``description`` keeps its surrounding whitespace so spacing rules can
    inspect it. ``scope`` is ``None`` when there were no parentheses and
    ``""`` for ``()``.
    """
    type: str
    scope: Optional[str]
    is_breaking_change: bool
    description: str

class ValidationError(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    message: str
    example: str = ""

class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: List[ValidationError] = Field(default_factory=list, description="Violations in the order they were checked")

    @property
    def codes(self) -> List[ErrorCode]:
        return [error.code for error in self.errors]
