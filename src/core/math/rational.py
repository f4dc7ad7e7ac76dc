"""
Rational — Точная дробь над произвольным целочисленным типом

Rational[T] хранит пару (numerator, denominator) типа T в несократимом
виде. T — любой тип с набором возможностей IntegerLike: BigInt или
встроенный int.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator != T("0")
2. gcd(|numerator|, |denominator|) == T("1")
3. denominator > T("0"): знак хранится только в numerator
4. Каждая операция возвращает новую нормализованную дробь

ФОРМУЛЫ:
    a/b + c/d = (a*d + c*b) / (b*d)
    a/b - c/d = (a*d - c*b) / (b*d)
    a/b * c/d = (a*c) / (b*d)
    a/b / c/d = (a*d) / (b*c),  c != 0
"""

from functools import total_ordering
from typing import Generic, Protocol, TypeVar

from src.core.math.errors import DivisionByZero, ZeroDenominator

# =============================================================================
# INTEGER-LIKE PROTOCOL
# =============================================================================


class IntegerLike(Protocol):
    """
    Набор возможностей, требуемый от T.

    - Конструирование из десятичной строки: T("0"), T("-1")
    - Арифметика: +, -, *, // и % (точные на неотрицательных операндах)
    - Сравнение: ==, <
    - Модуль: abs()
    """

    def __init__(self, text: str) -> None: ...

    def __eq__(self, other: object) -> bool: ...

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def __floordiv__(self, other): ...

    def __mod__(self, other): ...

    def __lt__(self, other) -> bool: ...

    def __abs__(self): ...


T = TypeVar("T", bound=IntegerLike)


def _literal(sample: T, text: str) -> T:
    """Константа типа T из десятичной строки (T("0"), T("-1"))."""
    return type(sample)(text)


def gcd(a: T, b: T) -> T:
    """
    Наибольший общий делитель алгоритмом Евклида.

    gcd(a, 0) = a;  gcd(a, b) = gcd(b, a % b)

    Реализован циклом: глубина стека не зависит от размера операндов.

    Args:
        a: Неотрицательное значение
        b: Неотрицательное значение

    Returns:
        НОД(a, b) того же типа
    """
    zero = _literal(a, "0")
    while b != zero:
        a, b = b, a % b
    return a


# =============================================================================
# RATIONAL
# =============================================================================


@total_ordering
class Rational(Generic[T]):
    """
    Неизменяемая точная дробь numerator/denominator.

    Examples:
        >>> str(Rational(BigInt("3"), BigInt("4")) + Rational(BigInt("5"), BigInt("6")))
        '19/12'
        >>> str(Rational(6, -8))
        '-3/4'
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: T, denominator: T):
        """
        Создание и нормализация дроби.

        Args:
            numerator: Числитель
            denominator: Знаменатель (не ноль)

        Raises:
            ZeroDenominator: Если denominator равен нулю
            TypeError: Если numerator и denominator разных типов
        """
        if type(numerator) is not type(denominator):
            raise TypeError(
                f"numerator and denominator must share a type, got "
                f"{type(numerator).__name__} and {type(denominator).__name__}"
            )

        zero = _literal(denominator, "0")
        if denominator == zero:
            raise ZeroDenominator(f"Denominator cannot be zero (numerator={numerator})")

        divisor = gcd(abs(numerator), abs(denominator))
        numerator = numerator // divisor
        denominator = denominator // divisor

        if denominator < zero:
            minus_one = _literal(denominator, "-1")
            numerator = numerator * minus_one
            denominator = denominator * minus_one

        object.__setattr__(self, "_numerator", numerator)
        object.__setattr__(self, "_denominator", denominator)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Rational is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Rational is immutable")

    def __reduce__(self):
        return (Rational, (self._numerator, self._denominator))

    @property
    def numerator(self) -> T:
        return self._numerator

    @property
    def denominator(self) -> T:
        """Знаменатель, всегда положительный."""
        return self._denominator

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: "Rational[T]") -> "Rational[T]":
        if not isinstance(other, Rational):
            return NotImplemented
        return Rational(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def __sub__(self, other: "Rational[T]") -> "Rational[T]":
        if not isinstance(other, Rational):
            return NotImplemented
        return Rational(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def __mul__(self, other: "Rational[T]") -> "Rational[T]":
        if not isinstance(other, Rational):
            return NotImplemented
        return Rational(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def __truediv__(self, other: "Rational[T]") -> "Rational[T]":
        """
        Raises:
            DivisionByZero: Если числитель делителя равен нулю
        """
        if not isinstance(other, Rational):
            return NotImplemented
        if other._numerator == _literal(other._numerator, "0"):
            raise DivisionByZero(f"Cannot divide {self} by zero")
        return Rational(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def __neg__(self) -> "Rational[T]":
        return Rational(self._numerator * _literal(self._numerator, "-1"), self._denominator)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        # Обе дроби нормализованы: равенство структурное
        return self._numerator == other._numerator and self._denominator == other._denominator

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    def __lt__(self, other: "Rational[T]") -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        # Знаменатели положительны, поэтому знак неравенства сохраняется
        return self._numerator * other._denominator < other._numerator * self._denominator

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator!r}, {self._denominator!r})"
