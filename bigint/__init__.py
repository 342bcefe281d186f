"""
bigint — arbitrary-precision signed integers.

Exact addition, subtraction, Karatsuba multiplication, floor division and
modulo over base 10^9 limbs, with decimal string and stream I/O.
"""

from bigint.core.config import DEFAULT_ARITHMETIC_CONFIG, ArithmeticConfig
from bigint.core.contracts import ParseError
from bigint.core.domain import BigInteger, LimbVector
from bigint.core.io import iter_big_integers, read_big_integer, write_big_integer
from bigint.core.math import DivisionByZeroError

__all__ = [
    "BigInteger",
    "LimbVector",
    "ArithmeticConfig",
    "DEFAULT_ARITHMETIC_CONFIG",
    "ParseError",
    "DivisionByZeroError",
    "read_big_integer",
    "iter_big_integers",
    "write_big_integer",
]

__version__ = "0.1.0"
