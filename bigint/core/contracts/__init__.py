"""
Contract Validation Module

Валидация входных контрактов BigInteger (десятичная запись).
"""

from .validators import (
    DECIMAL_LITERAL_PATTERN,
    ParseError,
    is_valid_decimal_literal,
    split_decimal_literal,
    validate_decimal_literal,
)

__all__ = [
    # Exceptions
    "ParseError",
    # Format
    "DECIMAL_LITERAL_PATTERN",
    # Functions
    "split_decimal_literal",
    "validate_decimal_literal",
    "is_valid_decimal_literal",
]
