"""
Numbers — Сериализуемые модели значений BigInt и Rational

Immutable Pydantic модели для передачи чисел между слоями (JSON, API).
Числа хранятся в каноническом десятичном виде: без ведущих нулей,
без "-0", знак '-' только у отрицательных значений.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.bigint import BigInt
from src.core.math.rational import Rational

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Формат десятичного целого (совпадает с форматом разбора BigInt)
DECIMAL_INTEGER_PATTERN: Final[str] = r"^-?[0-9]+$"


def _require_canonical(v: str) -> str:
    """Проверка канонической формы: str(BigInt(v)) == v."""
    canonical = str(BigInt(v))
    if canonical != v:
        raise ValueError(f"{v!r} is not in canonical form (expected {canonical!r})")
    return v


# =============================================================================
# INTEGER PAYLOAD
# =============================================================================


class IntegerPayload(BaseModel):
    """Каноническое десятичное представление BigInt."""

    value: str = Field(
        ..., pattern=DECIMAL_INTEGER_PATTERN, description="Десятичное целое (например, '-42')"
    )

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_canonical(cls, v: str) -> str:
        return _require_canonical(v)

    @classmethod
    def from_bigint(cls, value: BigInt) -> "IntegerPayload":
        return cls(value=str(value))

    def to_bigint(self) -> BigInt:
        return BigInt(self.value)


# =============================================================================
# RATIONAL PAYLOAD
# =============================================================================


class RationalPayload(BaseModel):
    """
    Десятичное представление дроби numerator/denominator.

    Числитель и знаменатель канонические; знаменатель не ноль.
    Payload не обязан быть несократимым: to_rational() нормализует.
    """

    numerator: str = Field(..., pattern=DECIMAL_INTEGER_PATTERN, description="Числитель")
    denominator: str = Field(
        ..., pattern=DECIMAL_INTEGER_PATTERN, description="Знаменатель (не ноль)"
    )

    model_config = {"frozen": True}

    @field_validator("numerator")
    @classmethod
    def validate_numerator(cls, v: str) -> str:
        return _require_canonical(v)

    @field_validator("denominator")
    @classmethod
    def validate_denominator(cls, v: str) -> str:
        _require_canonical(v)
        if v == "0":
            raise ValueError("denominator cannot be zero")
        return v

    @classmethod
    def from_rational(cls, value: Rational[BigInt]) -> "RationalPayload":
        return cls(numerator=str(value.numerator), denominator=str(value.denominator))

    def to_rational(self) -> Rational[BigInt]:
        return Rational(BigInt(self.numerator), BigInt(self.denominator))
