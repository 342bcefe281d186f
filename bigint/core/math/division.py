"""
Division — Длинное деление магнитуд

Деление «столбиком» по limbs: на каждом шаге следующий limb делимого
приписывается к текущему остатку, а очередной limb частного находится
бинарным поиском по [0, BASE).

Сложность: O(log BASE) умножений-и-сравнений на каждый limb частного,
каждое O(len(b)); итого O(len(a) · len(b) · log BASE).

Знаковая логика (floor-семантика) живёт в BigInteger; здесь только
магнитуды.
"""

import logging
from typing import Sequence, Tuple

from bigint.core.math.limbs import (
    BASE,
    Limbs,
    Ordering,
    compare_magnitude,
    is_zero_magnitude,
    multiply_small,
    normalize_limbs,
    sub_magnitude,
)

LOG = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZeroError(ZeroDivisionError):
    """Делитель равен нулю в операциях //, /, %, divmod."""

    pass


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def _largest_multiplier(current: Sequence[int], divisor: Sequence[int]) -> int:
    """
    Бинарный поиск наибольшего d ∈ [0, BASE) такого, что d · divisor <= current.
    """
    left, right = 0, BASE - 1
    while left < right:
        mid = (left + right + 1) // 2
        if compare_magnitude(multiply_small(divisor, mid), current) is Ordering.GREATER:
            right = mid - 1
        else:
            left = mid
    return left


def divide_magnitude(a: Sequence[int], b: Sequence[int]) -> Tuple[Limbs, Limbs]:
    """
    Деление магнитуд с остатком (усечение, оба операнда неотрицательны).

    Args:
        a: Делимое (каноническая магнитуда)
        b: Делитель (каноническая магнитуда, != 0)

    Returns:
        (quotient, remainder): нормализованные магнитуды,
        a = quotient · b + remainder, 0 <= remainder < b

    Raises:
        DivisionByZeroError: Если b == 0

    Examples:
        >>> divide_magnitude([456], [123])
        ([3], [87])
    """
    if is_zero_magnitude(b):
        raise DivisionByZeroError("division by zero")

    if compare_magnitude(a, b) is Ordering.LESS:
        return [0], normalize_limbs(list(a))

    LOG.debug("Long division: %d / %d limbs", len(a), len(b))

    quotient = [0] * len(a)
    current: Limbs = [0]

    for i in range(len(a) - 1, -1, -1):
        # current = current · BASE + a[i]
        current.insert(0, a[i])
        normalize_limbs(current)

        digit = _largest_multiplier(current, b)
        quotient[i] = digit
        if digit:
            current = sub_magnitude(current, multiply_small(b, digit))

    return normalize_limbs(quotient), current
