"""
Limbs — Канонический формат магнитуды и аддитивные примитивы

Магнитуда хранится как список limbs по основанию BASE = 10^9,
младший limb первым (little-endian по limbs).

Модуль обеспечивает:
- Нормализацию (удаление старших нулевых limbs)
- Сравнение магнитуд без учёта знака
- Сложение с переносом (carry) и вычитание с заёмом (borrow)
- Умножение магнитуды на один limb
- Сдвиг на целое число limbs (умножение на BASE^k)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый limb ∈ [0, BASE)
2. Список никогда не пустой (ноль = [0])
3. Нет старших нулевых limbs, кроме канонического [0]
4. Все функции возвращают новый список и не мутируют аргументы
"""

from enum import Enum
from typing import Final, List, Sequence

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления limbs
BASE: Final[int] = 1_000_000_000

# Количество десятичных цифр в одном limb (BASE = 10^BASE_DIGITS)
BASE_DIGITS: Final[int] = 9

Limbs = List[int]


class Ordering(int, Enum):
    """Результат сравнения магнитуд."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_limbs(limbs: Limbs) -> Limbs:
    """
    Приведение списка limbs к каноническому виду (in place).

    Удаляет старшие нулевые limbs, пока не останется ненулевой старший limb
    или ровно один limb [0]. Пустой список превращается в [0].

    Args:
        limbs: Список limbs (мутируется)

    Returns:
        Тот же список (для удобства цепочек)

    Examples:
        >>> normalize_limbs([5, 0, 0])
        [5]
        >>> normalize_limbs([0, 0])
        [0]
        >>> normalize_limbs([])
        [0]
    """
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)
    return limbs


def is_zero_magnitude(limbs: Sequence[int]) -> bool:
    """Магнитуда в каноническом виде равна нулю."""
    return len(limbs) == 1 and limbs[0] == 0


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitude(a: Sequence[int], b: Sequence[int]) -> Ordering:
    """
    Сравнение абсолютных значений (знак игнорируется).

    Сначала сравниваются длины (в каноническом виде более длинная магнитуда
    больше), при равной длине — limbs от старшего к младшему.

    Args:
        a: Каноническая магнитуда
        b: Каноническая магнитуда

    Returns:
        Ordering.LESS / Ordering.EQUAL / Ordering.GREATER
    """
    if len(a) != len(b):
        return Ordering.LESS if len(a) < len(b) else Ordering.GREATER

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return Ordering.LESS if a[i] < b[i] else Ordering.GREATER

    return Ordering.EQUAL


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitude(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """
    Сложение магнитуд с распространением переноса.

    Результат может быть на один limb длиннее самого длинного операнда.

    Examples:
        >>> add_magnitude([999999999], [1])
        [0, 1]
    """
    result: Limbs = []
    carry = 0
    size = max(len(a), len(b))

    for i in range(size):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        if total >= BASE:
            result.append(total - BASE)
            carry = 1
        else:
            result.append(total)
            carry = 0

    if carry:
        result.append(carry)

    return normalize_limbs(result)


def sub_magnitude(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """
    Вычитание магнитуд с распространением заёма.

    Предусловие: |a| >= |b|.

    Args:
        a: Уменьшаемое (большая магнитуда)
        b: Вычитаемое

    Returns:
        Нормализованная магнитуда |a| - |b|

    Raises:
        ValueError: Если |a| < |b| (нарушено предусловие)

    Examples:
        >>> sub_magnitude([0, 1], [1])
        [999999999]
    """
    if compare_magnitude(a, b) is Ordering.LESS:
        raise ValueError("sub_magnitude requires |a| >= |b|")

    result: Limbs = []
    borrow = 0

    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]
        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return normalize_limbs(result)


# =============================================================================
# УМНОЖЕНИЕ НА LIMB / СДВИГ
# =============================================================================


def multiply_small(a: Sequence[int], multiplier: int) -> Limbs:
    """
    Умножение магнитуды на один limb.

    Args:
        a: Каноническая магнитуда
        multiplier: Множитель, 0 <= multiplier < BASE

    Returns:
        Нормализованная магнитуда a * multiplier

    Raises:
        ValueError: Если multiplier вне [0, BASE)
    """
    if not 0 <= multiplier < BASE:
        raise ValueError(f"multiplier must be in [0, {BASE}), got {multiplier}")

    if multiplier == 0:
        return [0]

    result: Limbs = []
    carry = 0
    for limb in a:
        carry, digit = divmod(limb * multiplier + carry, BASE)
        result.append(digit)
    if carry:
        result.append(carry)

    return normalize_limbs(result)


def shift_limbs(a: Sequence[int], count: int) -> Limbs:
    """
    Умножение магнитуды на BASE^count (сдвиг на count limbs).

    Ноль не сдвигается — иначе появились бы старшие нулевые limbs.
    """
    if count < 0:
        raise ValueError(f"shift count must be non-negative, got {count}")
    if is_zero_magnitude(a):
        return [0]
    return [0] * count + list(a)
