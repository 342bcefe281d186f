"""
Тесты для LimbVector — валидированное представление BigInteger

Проверяет:
1. Создание и валидацию модели Pydantic
2. Инварианты канонической формы
3. Immutability (frozen=True)
4. Конверсию BigInteger <-> LimbVector
"""

import pytest
from pydantic import ValidationError

from bigint import BigInteger, LimbVector
from bigint.core.math.limbs import BASE


class TestLimbVector:
    """Тесты для модели LimbVector"""

    def test_valid(self) -> None:
        vector = LimbVector(negative=True, limbs=(5, 1))
        assert vector.limbs == (5, 1)
        assert vector.negative is True
        assert not vector.is_zero()

    def test_zero(self) -> None:
        vector = LimbVector(limbs=(0,))
        assert vector.is_zero()
        assert vector.negative is False

    def test_list_input_coerced_to_tuple(self) -> None:
        assert LimbVector(limbs=[1, 2]).limbs == (1, 2)

    def test_empty_limbs_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LimbVector(limbs=())

    def test_limb_out_of_range(self) -> None:
        with pytest.raises(ValidationError, match="outside"):
            LimbVector(limbs=(BASE,))
        with pytest.raises(ValidationError, match="outside"):
            LimbVector(limbs=(-1,))

    def test_leading_zero_rejected(self) -> None:
        with pytest.raises(ValidationError, match="most significant limb"):
            LimbVector(limbs=(1, 0))

    def test_negative_zero_rejected(self) -> None:
        with pytest.raises(ValidationError, match="zero cannot be negative"):
            LimbVector(negative=True, limbs=(0,))

    def test_frozen(self) -> None:
        vector = LimbVector(limbs=(1,))
        with pytest.raises(ValidationError):
            vector.negative = True


class TestBigIntegerConversion:
    """BigInteger <-> LimbVector"""

    def test_to_limb_vector(self) -> None:
        vector = BigInteger(-(2 * BASE + 3)).to_limb_vector()
        assert vector == LimbVector(negative=True, limbs=(3, 2))

    def test_from_limb_vector(self) -> None:
        vector = LimbVector(negative=True, limbs=(3, 2))
        assert BigInteger.from_limb_vector(vector) == BigInteger(-(2 * BASE + 3))

    def test_from_limbs(self) -> None:
        assert BigInteger.from_limbs([0, 0, 1]) == BigInteger(BASE**2)

    def test_from_limbs_rejects_non_canonical(self) -> None:
        with pytest.raises(ValidationError):
            BigInteger.from_limbs([1, 0])

    def test_round_trip(self) -> None:
        value = BigInteger("-123456789987654321123456789")
        assert BigInteger.from_limb_vector(value.to_limb_vector()) == value

    def test_json(self) -> None:
        vector = BigInteger(-5).to_limb_vector()
        assert LimbVector.model_validate_json(vector.model_dump_json()) == vector
