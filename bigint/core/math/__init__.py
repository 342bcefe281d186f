"""
Core math modules для bigint

Арифметика магнитуд в limbs по основанию 10^9.
"""

# Limbs: представление, нормализация, аддитивные примитивы
from bigint.core.math.limbs import (
    BASE,
    BASE_DIGITS,
    Limbs,
    Ordering,
    add_magnitude,
    compare_magnitude,
    is_zero_magnitude,
    multiply_small,
    normalize_limbs,
    shift_limbs,
    sub_magnitude,
)

# Karatsuba
from bigint.core.math.karatsuba import (
    KARATSUBA_THRESHOLD,
    multiply_magnitude,
    multiply_schoolbook,
)

# Division
from bigint.core.math.division import (
    DivisionByZeroError,
    divide_magnitude,
)

__all__ = [
    # Limbs — constants
    "BASE",
    "BASE_DIGITS",
    # Limbs — types
    "Limbs",
    "Ordering",
    # Limbs — functions
    "normalize_limbs",
    "is_zero_magnitude",
    "compare_magnitude",
    "add_magnitude",
    "sub_magnitude",
    "multiply_small",
    "shift_limbs",
    # Karatsuba
    "KARATSUBA_THRESHOLD",
    "multiply_schoolbook",
    "multiply_magnitude",
    # Division
    "DivisionByZeroError",
    "divide_magnitude",
]
