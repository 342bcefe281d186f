"""
Property-based тесты BigInteger (hypothesis)

Оракул — встроенный int Python.

Проверяемые свойства:
1. Round-trip десятичной записи
2. Коммутативность и ассоциативность + и *
3. Аддитивная обратимость
4. Тождество floor-деления и границы остатка
5. Эквивалентность Karatsuba/schoolbook при любом пороге
6. Полнота порядка
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from bigint import ArithmeticConfig, BigInteger, DivisionByZeroError
from bigint.core.math.karatsuba import multiply_magnitude, multiply_schoolbook
from bigint.core.math.limbs import BASE


# Числа до ~60 limbs: по обе стороны порога Karatsuba
integers = st.integers(min_value=-(10**540), max_value=10**540)
small_integers = st.integers(min_value=-(10**60), max_value=10**60)


# =============================================================================
# ДЕСЯТИЧНАЯ ЗАПИСЬ
# =============================================================================


@given(integers)
def test_str_matches_int(value: int) -> None:
    assert str(BigInteger(value)) == str(value)


@given(st.sampled_from(["", "+", "-"]), st.text(alphabet="0123456789", min_size=1, max_size=80))
def test_parse_round_trip(sign: str, digits: str) -> None:
    text = sign + digits
    assert int(str(BigInteger(text))) == int(text)
    assert BigInteger(text) == int(text)


# =============================================================================
# АЛГЕБРАИЧЕСКИЕ СВОЙСТВА
# =============================================================================


@given(integers, integers)
def test_add_matches_int(a: int, b: int) -> None:
    assert int(BigInteger(a) + BigInteger(b)) == a + b
    assert int(BigInteger(a) - BigInteger(b)) == a - b


@given(integers, integers)
def test_commutativity(a: int, b: int) -> None:
    x, y = BigInteger(a), BigInteger(b)
    assert x + y == y + x
    assert x * y == y * x


@given(small_integers, small_integers, small_integers)
def test_associativity(a: int, b: int, c: int) -> None:
    x, y, z = BigInteger(a), BigInteger(b), BigInteger(c)
    assert (x + y) + z == x + (y + z)
    assert (x * y) * z == x * (y * z)


@given(integers)
def test_additive_inverse(a: int) -> None:
    result = BigInteger(a) + BigInteger(a).negate()
    assert result == BigInteger(0)
    assert not result.is_negative()


@given(integers, integers)
def test_multiply_matches_int(a: int, b: int) -> None:
    assert int(BigInteger(a) * BigInteger(b)) == a * b


# =============================================================================
# FLOOR-ДЕЛЕНИЕ
# =============================================================================


@given(integers, integers)
@settings(max_examples=60)
def test_floor_division_identity(a: int, b: int) -> None:
    x, y = BigInteger(a), BigInteger(b)
    if b == 0:
        with pytest.raises(DivisionByZeroError):
            x // y
        return

    q, r = x // y, x % y
    assert x == y * q + r
    assert abs(r) < abs(y)
    if not r.is_zero():
        assert r.is_negative() == y.is_negative()
    assert int(q) == a // b
    assert int(r) == a % b


# =============================================================================
# KARATSUBA
# =============================================================================


limb_lists = st.lists(st.integers(min_value=0, max_value=BASE - 1), min_size=1, max_size=70).map(
    lambda limbs: limbs + [1]
)


@given(limb_lists, limb_lists, st.integers(min_value=1, max_value=80))
@settings(max_examples=60)
def test_karatsuba_independent_of_threshold(a: list, b: list, threshold: int) -> None:
    assert multiply_magnitude(a, b, threshold=threshold) == multiply_schoolbook(a, b)


@given(integers, integers, st.integers(min_value=1, max_value=64))
@settings(max_examples=40)
def test_signed_multiply_independent_of_threshold(a: int, b: int, threshold: int) -> None:
    config = ArithmeticConfig(karatsuba_threshold=threshold)
    assert int(BigInteger(a).multiply(BigInteger(b), config=config)) == a * b


# =============================================================================
# ПОРЯДОК
# =============================================================================


@given(integers, integers)
def test_ordering_totality(a: int, b: int) -> None:
    x, y = BigInteger(a), BigInteger(b)
    assert [x < y, x == y, x > y].count(True) == 1
    assert (x < y) == (a < b)
    assert (x <= y) == (a <= b)
    assert (x >= y) == (a >= b)
