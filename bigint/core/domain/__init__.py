"""
Domain models and value objects.

Contains the BigInteger value type and its validated representation.
"""

from bigint.core.domain.big_integer import BigInteger
from bigint.core.domain.limb_vector import LimbVector

__all__ = [
    "BigInteger",
    "LimbVector",
]
