"""
Тесты для Division — длинное деление магнитуд

Проверяемые инварианты:
1. a = q · b + r, 0 <= r < b
2. Бинарный поиск limb частного на границах [0, BASE)
3. Деление на ноль → DivisionByZeroError
"""

import random

import pytest

from bigint.core.math.division import DivisionByZeroError, divide_magnitude
from bigint.core.math.limbs import BASE


def to_limbs(value: int) -> list:
    limbs = []
    while value:
        value, limb = divmod(value, BASE)
        limbs.append(limb)
    return limbs or [0]


# =============================================================================
# ТЕСТЫ: divide_magnitude
# =============================================================================


class TestDivideMagnitude:
    """Тесты divide_magnitude"""

    def test_simple(self) -> None:
        assert divide_magnitude([456], [123]) == ([3], [87])

    def test_exact(self) -> None:
        assert divide_magnitude([56088], [456]) == ([123], [0])

    def test_dividend_smaller(self) -> None:
        """|a| < |b| → (0, a)"""
        assert divide_magnitude([5], [0, 1]) == ([0], [5])

    def test_zero_dividend(self) -> None:
        assert divide_magnitude([0], [7]) == ([0], [0])

    def test_quotient_limb_max(self) -> None:
        """Limb частного = BASE - 1 (верхняя граница бинарного поиска)"""
        a = (BASE - 1) * BASE + 5
        q, r = divide_magnitude(to_limbs(a), to_limbs(BASE))
        assert (q, r) == (to_limbs(BASE - 1), [5])

    def test_quotient_with_inner_zero_limbs(self) -> None:
        a = 7 * BASE**3 + 3
        q, r = divide_magnitude(to_limbs(a), [7])
        assert q == to_limbs(BASE**3)
        assert r == [3]

    @pytest.mark.parametrize("seed", range(8))
    def test_random_against_int(self, seed: int) -> None:
        rng = random.Random(seed)
        a = rng.getrandbits(rng.randrange(1, 400))
        b = rng.getrandbits(rng.randrange(1, 200)) or 1
        q, r = divide_magnitude(to_limbs(a), to_limbs(b))
        assert q == to_limbs(a // b)
        assert r == to_limbs(a % b)

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            divide_magnitude([1], [0])

    def test_division_by_zero_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            divide_magnitude([0], [0])
