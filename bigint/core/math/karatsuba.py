"""
Karatsuba — Умножение магнитуд

Модуль реализует умножение магнитуд в представлении limbs:
- Schoolbook O(n·m) для малых операндов
- Karatsuba O(n^1.585) для операндов длиннее порога

ФОРМУЛЫ:
    a = a1 · B^mid + a0
    b = b1 · B^mid + b0

    z0 = a0 · b0
    z2 = a1 · b1
    z1 = (a0 + a1) · (b0 + b1) - z0 - z2

    a · b = z0 + z1 · B^mid + z2 · B^(2·mid)

Порог KARATSUBA_THRESHOLD — настраиваемый параметр (баланс накладных
расходов рекурсии и асимптотического выигрыша), а не фундаментальная
константа. Результат не зависит от порога.
"""

import logging
from typing import Final, Sequence, Tuple

from bigint.core.math.limbs import (
    BASE,
    Limbs,
    add_magnitude,
    is_zero_magnitude,
    normalize_limbs,
    shift_limbs,
    sub_magnitude,
)

LOG = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Если хотя бы у одного операнда limbs <= порога → schoolbook
KARATSUBA_THRESHOLD: Final[int] = 50


# =============================================================================
# SCHOOLBOOK
# =============================================================================


def multiply_schoolbook(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """
    Школьное умножение столбиком.

    Свёртка в буфер длины len(a) + len(b) с переносом через каждую позицию.

    Args:
        a: Каноническая магнитуда
        b: Каноническая магнитуда

    Returns:
        Нормализованная магнитуда a · b
    """
    result = [0] * (len(a) + len(b))

    for i, limb_a in enumerate(a):
        if limb_a == 0:
            continue
        carry = 0
        j = 0
        while j < len(b) or carry:
            current = result[i + j] + carry
            if j < len(b):
                current += limb_a * b[j]
            carry, result[i + j] = divmod(current, BASE)
            j += 1

    return normalize_limbs(result)


# =============================================================================
# KARATSUBA
# =============================================================================


def _split(limbs: Sequence[int], mid: int) -> Tuple[Limbs, Limbs]:
    """Разбиение магнитуды на (low, high) по позиции mid."""
    low = normalize_limbs(list(limbs[:mid]))
    high = normalize_limbs(list(limbs[mid:]))
    return low, high


def _karatsuba(a: Sequence[int], b: Sequence[int], threshold: int) -> Limbs:
    if len(a) <= threshold or len(b) <= threshold:
        return multiply_schoolbook(a, b)

    mid = max(len(a), len(b)) // 2

    a0, a1 = _split(a, mid)
    b0, b1 = _split(b, mid)

    z0 = _karatsuba(a0, b0, threshold)
    z2 = _karatsuba(a1, b1, threshold)
    z1 = _karatsuba(add_magnitude(a0, a1), add_magnitude(b0, b1), threshold)
    z1 = sub_magnitude(sub_magnitude(z1, z0), z2)

    result = z0
    # Нулевые слагаемые пропускаются
    if not is_zero_magnitude(z1):
        result = add_magnitude(result, shift_limbs(z1, mid))
    if not is_zero_magnitude(z2):
        result = add_magnitude(result, shift_limbs(z2, 2 * mid))

    return result


def multiply_magnitude(
    a: Sequence[int],
    b: Sequence[int],
    threshold: int = KARATSUBA_THRESHOLD,
) -> Limbs:
    """
    Умножение магнитуд (Karatsuba со schoolbook fallback).

    Args:
        a: Каноническая магнитуда
        b: Каноническая магнитуда
        threshold: Порог перехода на schoolbook (в limbs, >= 1)

    Returns:
        Нормализованная магнитуда a · b

    Raises:
        ValueError: Если threshold < 1

    Examples:
        >>> multiply_magnitude([123], [456])
        [56088]
        >>> multiply_magnitude([0, 1], [0, 1])
        [0, 0, 1]
    """
    if threshold < 1:
        raise ValueError(f"threshold must be >= 1, got {threshold}")

    if len(a) > threshold and len(b) > threshold:
        LOG.debug(
            "Karatsuba multiply: %d x %d limbs (threshold=%d)",
            len(a),
            len(b),
            threshold,
        )

    return _karatsuba(a, b, threshold)
