"""
Decimal Literal Contract Validators

Валидация десятичной записи целого числа перед разбором в limbs.

Допустимый формат:
- необязательный знак '+' или '-'
- одна или более ASCII-цифр 0-9
- никаких пробелов, разделителей и прочих символов

Любое нарушение формата → ParseError (fail-fast, без fallback).
"""

import re
from typing import Final, Tuple

# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParseError(ValueError):
    """Некорректная десятичная запись: пустая строка, одиночный знак, посторонние символы."""

    pass


# =============================================================================
# FORMAT
# =============================================================================

DECIMAL_LITERAL_PATTERN: Final[re.Pattern] = re.compile(r"([+-]?)([0-9]+)")


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


def split_decimal_literal(text: str) -> Tuple[bool, str]:
    """
    Проверка формата и разделение на знак и цифры.

    Args:
        text: Десятичная запись (например, '-00123')

    Returns:
        (negative, digits): флаг минуса и строка цифр без знака.
        Ведущие нули сохраняются — их убирает нормализация.

    Raises:
        TypeError: Если text не str
        ParseError: Если формат нарушен

    Examples:
        >>> split_decimal_literal("-123")
        (True, '123')
        >>> split_decimal_literal("+7")
        (False, '7')
    """
    if not isinstance(text, str):
        raise TypeError(f"decimal literal must be str, got {type(text).__name__}")

    match = DECIMAL_LITERAL_PATTERN.fullmatch(text)
    if match is None:
        if text in ("", "+", "-"):
            raise ParseError(f"decimal literal has no digits: {text!r}")
        raise ParseError(f"invalid decimal literal: {text!r}")

    sign, digits = match.groups()
    return sign == "-", digits


def validate_decimal_literal(text: str) -> None:
    """
    Валидация десятичной записи.

    Raises:
        ParseError: Если формат нарушен
    """
    split_decimal_literal(text)


def is_valid_decimal_literal(text: str) -> bool:
    """Проверка валидности десятичной записи без exception."""
    try:
        split_decimal_literal(text)
    except (ParseError, TypeError):
        return False
    return True
