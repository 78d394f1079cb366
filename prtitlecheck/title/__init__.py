"""Title parsing and validation package."""

from .parser import parse_title
from .validation import (
    ValidationHandler,
    TitleCheck,
    create_validation_chain,
)
from .validator import TitleValidator

__all__ = [
    'parse_title',
    'ValidationHandler',
    'TitleCheck',
    'create_validation_chain',
    'TitleValidator',
]
