"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the library:
limb arithmetic, the BigInteger value type, input contracts and stream I/O.
"""
