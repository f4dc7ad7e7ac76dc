"""
Domain models and value objects.

Contains serialized forms of BigInt and Rational values.
"""

from src.core.domain.numbers import (
    DECIMAL_INTEGER_PATTERN,
    IntegerPayload,
    RationalPayload,
)

__all__ = [
    "DECIMAL_INTEGER_PATTERN",
    "IntegerPayload",
    "RationalPayload",
]
