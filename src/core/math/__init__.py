"""
Core math modules

Точная целочисленная и рациональная арифметика произвольной точности.
"""

# Errors
from src.core.math.errors import (
    BigNumError,
    DivisionByZero,
    InvalidFormat,
    ZeroDenominator,
)

# BigInt
from src.core.math.bigint import (
    BASE,
    ONE,
    TEN,
    ZERO,
    BigInt,
    multiply_karatsuba,
    multiply_schoolbook,
)

# Rational
from src.core.math.rational import (
    IntegerLike,
    Rational,
    gcd,
)

__all__ = [
    # Errors
    "BigNumError",
    "DivisionByZero",
    "InvalidFormat",
    "ZeroDenominator",
    # BigInt — Constants
    "BASE",
    "ONE",
    "TEN",
    "ZERO",
    # BigInt — Types
    "BigInt",
    # BigInt — Functions
    "multiply_karatsuba",
    "multiply_schoolbook",
    # Rational
    "IntegerLike",
    "Rational",
    "gcd",
]
