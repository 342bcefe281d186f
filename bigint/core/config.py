"""
Конфигурация арифметики BigInteger.

Immutable конфигурация передаётся явно в операции, которые её принимают;
операторы используют DEFAULT_ARITHMETIC_CONFIG.
"""

from dataclasses import dataclass

from bigint.core.math.karatsuba import KARATSUBA_THRESHOLD


@dataclass(frozen=True)
class ArithmeticConfig:
    """Конфигурация арифметического движка.

    Порог Karatsuba влияет только на производительность, не на результат.
    """

    # Операнды с limbs <= порога умножаются schoolbook
    karatsuba_threshold: int = KARATSUBA_THRESHOLD

    def __post_init__(self) -> None:
        if self.karatsuba_threshold < 1:
            raise ValueError(
                f"karatsuba_threshold must be >= 1, got {self.karatsuba_threshold}"
            )


DEFAULT_ARITHMETIC_CONFIG = ArithmeticConfig()
