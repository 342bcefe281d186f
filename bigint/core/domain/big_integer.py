"""
BigInteger — Знаковое целое произвольной точности

Value type поверх магнитуды в limbs (BASE = 10^9) и флага знака.

Операции:
- Сложение / вычитание (через знаковую логику поверх add/sub_magnitude)
- Умножение (Karatsuba со schoolbook fallback)
- Floor-деление и остаток (знак остатка = знак делителя)
- Полный порядок сравнений
- Десятичный ввод/вывод

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Магнитуда всегда в канонической форме (normalize_limbs)
2. Ноль никогда не отрицательный
3. Бинарные операторы возвращают новый экземпляр;
   составные (+=, -=, *=, //=, /=, %=) мутируют получателя и возвращают его
4. a == b * (a // b) + a % b, 0 <= |a % b| < |b|, sign(a % b) == sign(b)

Из-за мутирующих составных операторов тип не hashable.
"""

from typing import Optional, Sequence, Tuple, Union

from bigint.core.config import DEFAULT_ARITHMETIC_CONFIG, ArithmeticConfig
from bigint.core.contracts.validators import split_decimal_literal
from bigint.core.domain.limb_vector import LimbVector
from bigint.core.math.division import DivisionByZeroError, divide_magnitude
from bigint.core.math.karatsuba import multiply_magnitude
from bigint.core.math.limbs import (
    BASE,
    BASE_DIGITS,
    Limbs,
    Ordering,
    add_magnitude,
    compare_magnitude,
    is_zero_magnitude,
    normalize_limbs,
    sub_magnitude,
)

Operand = Union["BigInteger", int]


class BigInteger:
    """
    Знаковое целое произвольной точности.

    Конструктор принимает int, десятичную строку или другой BigInteger
    (копия). Без аргументов — ноль.

    Examples:
        >>> BigInteger("123") + BigInteger(456)
        BigInteger('579')
        >>> BigInteger(10) // -3
        BigInteger('-4')
    """

    __slots__ = ("_limbs", "_negative")

    # Мутабельный через составные операторы → не hashable
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Union["BigInteger", int, str] = 0):
        if isinstance(value, BigInteger):
            self._limbs: Limbs = list(value._limbs)
            self._negative: bool = value._negative
        elif isinstance(value, str):
            self._limbs, self._negative = _parse_decimal(value)
        elif isinstance(value, int):
            self._limbs, self._negative = _limbs_from_int(value)
        else:
            raise TypeError(
                f"BigInteger() argument must be int, str or BigInteger, "
                f"got {type(value).__name__}"
            )

    # =========================================================================
    # АЛЬТЕРНАТИВНЫЕ КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def _from_parts(cls, limbs: Limbs, negative: bool) -> "BigInteger":
        """Сборка из магнитуды с нормализацией (без копирования limbs)."""
        result = cls.__new__(cls)
        result._limbs = normalize_limbs(limbs)
        result._negative = negative and not is_zero_magnitude(result._limbs)
        return result

    @classmethod
    def parse(cls, text: str) -> "BigInteger":
        """
        Разбор десятичной записи.

        Raises:
            ParseError: Пустая строка, одиночный знак или посторонние символы
        """
        return cls(text)

    @classmethod
    def from_limb_vector(cls, vector: LimbVector) -> "BigInteger":
        """Построение из валидированного представления."""
        return cls._from_parts(list(vector.limbs), vector.negative)

    @classmethod
    def from_limbs(cls, limbs: Sequence[int], negative: bool = False) -> "BigInteger":
        """
        Построение из сырых limbs (младший первым).

        Raises:
            pydantic.ValidationError: Если limbs не в канонической форме
        """
        return cls.from_limb_vector(LimbVector(negative=negative, limbs=tuple(limbs)))

    def to_limb_vector(self) -> LimbVector:
        return LimbVector(negative=self._negative, limbs=tuple(self._limbs))

    def copy(self) -> "BigInteger":
        return BigInteger(self)

    __copy__ = copy

    def __deepcopy__(self, memo) -> "BigInteger":
        return BigInteger(self)

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def limbs(self) -> Tuple[int, ...]:
        """Магнитуда (копия), младший limb первым."""
        return tuple(self._limbs)

    def is_negative(self) -> bool:
        return self._negative

    def is_zero(self) -> bool:
        return is_zero_magnitude(self._limbs)

    # =========================================================================
    # АДДИТИВНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def negate(self) -> "BigInteger":
        """Смена знака; ноль остаётся неотрицательным."""
        return BigInteger._from_parts(list(self._limbs), not self._negative)

    def add(self, other: Operand) -> "BigInteger":
        """
        Знаковое сложение.

        Одинаковые знаки → сумма магнитуд с общим знаком.
        Разные знаки → из большей магнитуды вычитается меньшая,
        знак берётся у операнда с большей магнитудой.
        """
        other = _coerce(other)

        if self._negative == other._negative:
            return BigInteger._from_parts(
                add_magnitude(self._limbs, other._limbs), self._negative
            )

        order = compare_magnitude(self._limbs, other._limbs)
        if order is Ordering.EQUAL:
            return BigInteger()
        if order is Ordering.GREATER:
            return BigInteger._from_parts(
                sub_magnitude(self._limbs, other._limbs), self._negative
            )
        return BigInteger._from_parts(
            sub_magnitude(other._limbs, self._limbs), other._negative
        )

    def subtract(self, other: Operand) -> "BigInteger":
        """a - b = a + (-b)."""
        return self.add(_coerce(other).negate())

    # =========================================================================
    # МУЛЬТИПЛИКАТИВНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def multiply(
        self, other: Operand, config: Optional[ArithmeticConfig] = None
    ) -> "BigInteger":
        """
        Знаковое умножение.

        Args:
            other: Множитель
            config: Конфигурация (порог Karatsuba); по умолчанию
                DEFAULT_ARITHMETIC_CONFIG

        Returns:
            Произведение; знак = XOR знаков, ноль неотрицательный
        """
        other = _coerce(other)
        config = config or DEFAULT_ARITHMETIC_CONFIG
        magnitude = multiply_magnitude(
            self._limbs, other._limbs, threshold=config.karatsuba_threshold
        )
        return BigInteger._from_parts(magnitude, self._negative != other._negative)

    def floor_divide(self, other: Operand) -> "BigInteger":
        """
        Floor-деление: частное округляется к минус бесконечности.

        Магнитудное деление даёт усечённое частное. Если знаки разные
        и деление неточное, магнитуда частного увеличивается на 1.
        При |a| < |b| это даёт 0 или -1 (для a != 0 с разными знаками).

        Raises:
            DivisionByZeroError: Если делитель равен нулю
        """
        divisor = _coerce(other)
        if divisor.is_zero():
            raise DivisionByZeroError("integer division or modulo by zero")

        signs_differ = self._negative != divisor._negative
        quotient, remainder = divide_magnitude(self._limbs, divisor._limbs)

        if signs_differ and not is_zero_magnitude(remainder):
            quotient = add_magnitude(quotient, [1])

        return BigInteger._from_parts(quotient, signs_differ)

    def mod(self, other: Operand) -> "BigInteger":
        """
        Остаток floor-деления: a % b = a - (a // b) * b.

        Знак ненулевого остатка совпадает со знаком делителя.

        Raises:
            DivisionByZeroError: Если делитель равен нулю
        """
        return self.divmod(other)[1]

    def divmod(self, other: Operand) -> Tuple["BigInteger", "BigInteger"]:
        """(a // b, a % b) с однократным вычислением частного."""
        divisor = _coerce(other)
        quotient = self.floor_divide(divisor)
        return quotient, self.subtract(quotient.multiply(divisor))

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: Operand) -> Ordering:
        """Полный порядок: отрицательные < неотрицательных, затем магнитуды."""
        other = _coerce(other)

        if self._negative != other._negative:
            return Ordering.LESS if self._negative else Ordering.GREATER

        order = compare_magnitude(self._limbs, other._limbs)
        if self._negative:
            # Для отрицательных большая магнитуда — меньшее число
            return Ordering(-order.value)
        return order

    def __eq__(self, other: object) -> bool:
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self._negative == other._negative and self._limbs == other._limbs

    def __lt__(self, other: object) -> bool:
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __gt__(self, other: object) -> bool:
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return other < self

    def __le__(self, other: object) -> bool:
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return not other < self

    def __ge__(self, other: object) -> bool:
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return not self < other

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __pos__(self) -> "BigInteger":
        return BigInteger(self)

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __abs__(self) -> "BigInteger":
        return BigInteger._from_parts(list(self._limbs), False)

    def __add__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return other.multiply(self)

    def __floordiv__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self.floor_divide(other)

    def __rfloordiv__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return other.floor_divide(self)

    # Целочисленный тип: "/" — то же floor-деление
    __truediv__ = __floordiv__
    __rtruediv__ = __rfloordiv__

    def __mod__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self.mod(other)

    def __rmod__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return other.mod(self)

    def __divmod__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self.divmod(other)

    def __rdivmod__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return other.divmod(self)

    # =========================================================================
    # СОСТАВНЫЕ ОПЕРАТОРЫ (мутируют получателя)
    # =========================================================================

    def _assign(self, result: "BigInteger") -> "BigInteger":
        self._limbs = result._limbs
        self._negative = result._negative
        return self

    def __iadd__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self._assign(self.add(other))

    def __isub__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self._assign(self.subtract(other))

    def __imul__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self._assign(self.multiply(other))

    def __ifloordiv__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self._assign(self.floor_divide(other))

    __itruediv__ = __ifloordiv__

    def __imod__(self, other):
        other = _as_operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self._assign(self.mod(other))

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = value * BASE + limb
        return -value if self._negative else value

    def __str__(self) -> str:
        parts = ["-"] if self._negative else []
        parts.append(str(self._limbs[-1]))
        parts.extend(str(limb).zfill(BASE_DIGITS) for limb in reversed(self._limbs[:-1]))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"


# =============================================================================
# HELPERS
# =============================================================================


def _parse_decimal(text: str) -> Tuple[Limbs, bool]:
    """Десятичная запись → (limbs, negative); цифры режутся по 9 справа."""
    negative, digits = split_decimal_literal(text)

    limbs: Limbs = []
    for end in range(len(digits), 0, -BASE_DIGITS):
        limbs.append(int(digits[max(0, end - BASE_DIGITS):end]))

    normalize_limbs(limbs)
    return limbs, negative and not is_zero_magnitude(limbs)


def _limbs_from_int(value: int) -> Tuple[Limbs, bool]:
    negative = value < 0
    value = abs(value)

    limbs: Limbs = []
    while value:
        value, limb = divmod(value, BASE)
        limbs.append(limb)

    return normalize_limbs(limbs), negative


def _as_operand(value: object):
    """BigInteger/int → BigInteger, иначе NotImplemented (для операторов)."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int):
        return BigInteger(value)
    return NotImplemented


def _coerce(value: Operand) -> BigInteger:
    """Приведение аргумента именованной операции к BigInteger."""
    if isinstance(value, BigInteger):
        return value
    return BigInteger(value)
