"""
LimbVector — Валидированное представление BigInteger

Immutable Pydantic модель, описывающая внутреннее представление числа:
знак и магнитуду в limbs (BASE = 10^9, младший limb первым).

Используется для построения BigInteger из «сырых» limbs и для экспорта
представления наружу. Все инварианты канонической формы проверяются
валидаторами; нарушение → pydantic.ValidationError.
"""

from typing import Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from bigint.core.math.limbs import BASE


class LimbVector(BaseModel):
    """
    Каноническое представление знакового целого.

    Инварианты:
    1. limbs не пустой
    2. каждый limb ∈ [0, BASE)
    3. нет старших нулевых limbs, кроме канонического (0,)
    4. ноль всегда неотрицательный
    """

    negative: bool = Field(default=False, description="Флаг знака (False для нуля)")
    limbs: Tuple[int, ...] = Field(
        ..., min_length=1, description="Магнитуда: limbs по основанию 10^9, младший первым"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("limbs")
    @classmethod
    def validate_limb_range(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        """Каждый limb в диапазоне [0, BASE)."""
        for index, limb in enumerate(v):
            if not 0 <= limb < BASE:
                raise ValueError(f"limb[{index}]={limb} outside [0, {BASE})")
        return v

    @model_validator(mode="after")
    def validate_canonical_form(self) -> "LimbVector":
        """Нет старших нулей, нет отрицательного нуля."""
        if len(self.limbs) > 1 and self.limbs[-1] == 0:
            raise ValueError(f"most significant limb is zero: {self.limbs}")
        if self.negative and self.is_zero():
            raise ValueError("zero cannot be negative")
        return self

    def is_zero(self) -> bool:
        return self.limbs == (0,)
