"""Conventional Commits title validator."""
from typing import TYPE_CHECKING

from ..models import ValidationResult
from .rules import MAX_DESCRIPTION_LENGTH
from .validation import TitleCheck, create_validation_chain

if TYPE_CHECKING:
    from ..config import Config

class TitleValidator:
    """Validates titles against Conventional Commits v1.0.0.

    Settings are fixed at construction, so one instance can be shared and
    reused freely. ``validate`` never raises for a malformed title; every
    problem comes back as an error in the result.
    """

    def __init__(self, strict: bool = True, max_description_length: int = MAX_DESCRIPTION_LENGTH):
        if isinstance(max_description_length, bool) or not isinstance(max_description_length, int):
            raise ValueError(f"max_description_length must be an integer, got {max_description_length!r}")
        if max_description_length <= 0:
            raise ValueError(f"max_description_length must be positive, got {max_description_length}")
        self._strict = bool(strict)
        self._max_description_length = max_description_length
        self._validation_chain = create_validation_chain(self._strict, max_description_length)

    @classmethod
    def from_config(cls, config: 'Config') -> 'TitleValidator':
        return cls(strict=config.strict, max_description_length=config.max_description_length)

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def max_description_length(self) -> int:
        return self._max_description_length

    def validate(self, title: str) -> ValidationResult:
        """Validate a title and collect every violation found."""
        errors = self._validation_chain.handle(TitleCheck(title=title))
        return ValidationResult(is_valid=not errors, errors=errors)
