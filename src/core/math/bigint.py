"""
BigInt — Знаковое целое произвольной точности

Представление:
- digits: десятичные цифры модуля, младшая цифра первой (little-endian)
- negative: флаг знака

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits никогда не пуст
2. Нет ведущих (старших) нулей, кроме канонического нуля (0,)
3. Ноль никогда не отрицательный
4. Экземпляры неизменяемы: каждая операция возвращает новый объект

Операции:
- Разбор десятичной строки ("-?[0-9]+")
- Сложение/вычитание через вспомогательные операции над модулями
- Умножение: школьный алгоритм и Карацуба (результаты совпадают)
- Деление столбиком с остатком (усечение к нулю, остаток со знаком делимого)
- Сравнение, модуль, выделение поддиапазона цифр, сдвиг на n разрядов

Глубина рекурсии Карацубы — около log2(n) уровней для n цифр
(≈17 для 100 000 цифр, предела Calculator по умолчанию).
"""

from functools import total_ordering
from typing import Final, Sequence

from src.core.math.errors import DivisionByZero, InvalidFormat

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание представления (только десятичное)
BASE: Final[int] = 10

# Допустимые символы цифр (только ASCII, без unicode-цифр)
DIGIT_CHARS: Final[str] = "0123456789"

_ZERO_DIGITS: Final[tuple[int, ...]] = (0,)


# =============================================================================
# ОПЕРАЦИИ НАД МОДУЛЯМИ (little-endian последовательности цифр)
# =============================================================================


def _trim(digits: Sequence[int]) -> tuple[int, ...]:
    """Удаление старших нулей; пустая последовательность → (0,)."""
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    if end == 0:
        return _ZERO_DIGITS
    return tuple(digits[:end])


def _abs_less(lhs: Sequence[int], rhs: Sequence[int]) -> bool:
    """
    |lhs| < |rhs| для нормализованных модулей.

    Сначала по длине, затем от старшей цифры к младшей.
    """
    if len(lhs) != len(rhs):
        return len(lhs) < len(rhs)

    for i in range(len(lhs) - 1, -1, -1):
        if lhs[i] != rhs[i]:
            return lhs[i] < rhs[i]

    return False


def _add_abs(lhs: Sequence[int], rhs: Sequence[int]) -> list[int]:
    """Поразрядная сумма модулей с переносом."""
    result: list[int] = []
    carry = 0

    for i in range(max(len(lhs), len(rhs))):
        digit_l = lhs[i] if i < len(lhs) else 0
        digit_r = rhs[i] if i < len(rhs) else 0
        total = digit_l + digit_r + carry
        result.append(total % BASE)
        carry = total // BASE

    if carry:
        result.append(carry)

    return result


def _sub_abs(larger: Sequence[int], smaller: Sequence[int]) -> list[int]:
    """
    Поразрядная разность модулей с заёмом.

    Вызывающий гарантирует |larger| >= |smaller|.
    """
    result: list[int] = []
    borrow = 0

    for i in range(len(larger)):
        diff = larger[i] - (smaller[i] if i < len(smaller) else 0) - borrow
        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return result


def _mul_abs(lhs: Sequence[int], rhs: Sequence[int]) -> list[int]:
    """Школьное умножение модулей в буфер длины len(lhs) + len(rhs)."""
    result = [0] * (len(lhs) + len(rhs))

    for i, digit_l in enumerate(lhs):
        if digit_l == 0:
            continue
        carry = 0
        for j, digit_r in enumerate(rhs):
            current = result[i + j] + digit_l * digit_r + carry
            result[i + j] = current % BASE
            carry = current // BASE
        k = i + len(rhs)
        while carry:
            current = result[k] + carry
            result[k] = current % BASE
            carry = current // BASE
            k += 1

    return result


def _divmod_abs(
    dividend: Sequence[int], divisor: Sequence[int]
) -> tuple[list[int], tuple[int, ...]]:
    """
    Деление модулей столбиком.

    Цифры делимого обрабатываются от старшей к младшей:
    remainder = remainder * 10 + digit, затем делитель вычитается,
    пока remainder >= divisor. Число вычитаний (0-9, т.к. remainder
    всегда < 10 * divisor) — очередная цифра частного.

    Returns:
        (цифры частного little-endian без нормализации, нормализованный остаток)
    """
    quotient_msb_first: list[int] = []
    remainder: tuple[int, ...] = _ZERO_DIGITS

    for digit in reversed(dividend):
        remainder = _trim((digit,) + remainder)
        count = 0
        while not _abs_less(remainder, divisor):
            remainder = _trim(_sub_abs(remainder, divisor))
            count += 1
        quotient_msb_first.append(count)

    quotient_msb_first.reverse()
    return quotient_msb_first, remainder


def _parse(text: str) -> tuple[tuple[int, ...], bool]:
    """Разбор "-?[0-9]+" в (цифры little-endian, negative)."""
    if not isinstance(text, str):
        raise InvalidFormat(text, f"expected str, got {type(text).__name__}")

    if not text:
        raise InvalidFormat(text, "empty string")

    negative = text[0] == "-"
    body = text[1:] if negative else text

    if not body:
        raise InvalidFormat(text, "no digits after sign")

    for ch in body:
        if ch not in DIGIT_CHARS:
            raise InvalidFormat(text, f"invalid character {ch!r}")

    digits = _trim([ord(ch) - ord("0") for ch in reversed(body)])
    return digits, negative and digits != _ZERO_DIGITS


# =============================================================================
# BIGINT
# =============================================================================


@total_ordering
class BigInt:
    """
    Неизменяемое знаковое целое произвольной точности.

    Создаётся из десятичной строки: BigInt("-12345").
    Все арифметические операторы возвращают новый экземпляр.

    Examples:
        >>> str(BigInt("36423452523432434") + BigInt("-18423432424542345"))
        '18000020098890089'
        >>> str(BigInt("-7") % BigInt("3"))
        '-1'
    """

    __slots__ = ("_digits", "_negative")

    def __init__(self, text: str = "0"):
        """
        Args:
            text: Десятичная строка с необязательным ведущим '-'

        Raises:
            InvalidFormat: Пустая строка, нет цифр или недопустимый символ
        """
        digits, negative = _parse(text)
        object.__setattr__(self, "_digits", digits)
        object.__setattr__(self, "_negative", negative)

    @classmethod
    def _from_magnitude(cls, digits: Sequence[int], negative: bool = False) -> "BigInt":
        """Сборка из цифр модуля с нормализацией (нули, знак нуля)."""
        instance = object.__new__(cls)
        trimmed = _trim(digits)
        object.__setattr__(instance, "_digits", trimmed)
        object.__setattr__(instance, "_negative", negative and trimmed != _ZERO_DIGITS)
        return instance

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("BigInt is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("BigInt is immutable")

    def __reduce__(self):
        return (BigInt, (str(self),))

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def digits(self) -> tuple[int, ...]:
        """Цифры модуля, младшая первой."""
        return self._digits

    @property
    def negative(self) -> bool:
        return self._negative

    @property
    def is_zero(self) -> bool:
        return self._digits == _ZERO_DIGITS

    def __bool__(self) -> bool:
        return not self.is_zero

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def abs_less(self, other: "BigInt") -> bool:
        """|self| < |other| (знак игнорируется)."""
        return _abs_less(self._digits, other._digits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self._negative == other._negative and self._digits == other._digits

    def __hash__(self) -> int:
        return hash((self._negative, self._digits))

    def __lt__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented

        if self._negative != other._negative:
            return self._negative

        # Оба отрицательные: больший модуль = меньшее значение
        if self._negative:
            return _abs_less(other._digits, self._digits)

        return _abs_less(self._digits, other._digits)

    # -------------------------------------------------------------------------
    # Сложение и вычитание
    # -------------------------------------------------------------------------

    def __add__(self, other: "BigInt") -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented

        if self._negative == other._negative:
            return BigInt._from_magnitude(_add_abs(self._digits, other._digits), self._negative)

        if _abs_less(self._digits, other._digits):
            return BigInt._from_magnitude(_sub_abs(other._digits, self._digits), other._negative)

        return BigInt._from_magnitude(_sub_abs(self._digits, other._digits), self._negative)

    def __sub__(self, other: "BigInt") -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented

        if self._negative != other._negative:
            return BigInt._from_magnitude(_add_abs(self._digits, other._digits), self._negative)

        if _abs_less(self._digits, other._digits):
            return BigInt._from_magnitude(
                _sub_abs(other._digits, self._digits), not self._negative
            )

        return BigInt._from_magnitude(_sub_abs(self._digits, other._digits), self._negative)

    # -------------------------------------------------------------------------
    # Умножение
    # -------------------------------------------------------------------------

    def __mul__(self, other: "BigInt") -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        return multiply_schoolbook(self, other)

    def karatsuba(self, other: "BigInt") -> "BigInt":
        """Произведение алгоритмом Карацубы (см. multiply_karatsuba)."""
        return multiply_karatsuba(self, other)

    # -------------------------------------------------------------------------
    # Деление
    # -------------------------------------------------------------------------

    def __divmod__(self, other: "BigInt") -> tuple["BigInt", "BigInt"]:
        """
        Частное и остаток за один проход деления столбиком.

        Частное усекается к нулю, знак частного — XOR знаков операндов.
        Остаток имеет знак делимого: self == other * q + r.

        Raises:
            DivisionByZero: Если делитель равен нулю
        """
        if not isinstance(other, BigInt):
            return NotImplemented

        if other.is_zero:
            raise DivisionByZero(f"Cannot divide {self} by zero")

        quotient, remainder = _divmod_abs(self._digits, other._digits)
        return (
            BigInt._from_magnitude(quotient, self._negative != other._negative),
            BigInt._from_magnitude(remainder, self._negative),
        )

    def __truediv__(self, other: "BigInt") -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        return divmod(self, other)[0]

    # Целочисленное деление BigInt всегда усекающее (к нулю), не floor
    __floordiv__ = __truediv__

    def __mod__(self, other: "BigInt") -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        return divmod(self, other)[1]

    # -------------------------------------------------------------------------
    # Унарные операции
    # -------------------------------------------------------------------------

    def abs(self) -> "BigInt":
        """Модуль числа (неотрицательная копия)."""
        if not self._negative:
            return self
        return BigInt._from_magnitude(self._digits, False)

    def __abs__(self) -> "BigInt":
        return self.abs()

    def __neg__(self) -> "BigInt":
        return BigInt._from_magnitude(self._digits, not self._negative)

    # -------------------------------------------------------------------------
    # Операции над разрядами
    # -------------------------------------------------------------------------

    def get_sub_range(self, start: int, end: int) -> "BigInt":
        """
        Модуль, составленный из цифр [start, end) (младшая цифра = индекс 0).

        Знак не переносится, результат всегда неотрицательный.
        end за пределами длины обрезается; пустой диапазон → 0.

        Raises:
            ValueError: Если start < 0 или end < start
        """
        if start < 0 or end < start:
            raise ValueError(f"Invalid digit range [{start}, {end})")
        return BigInt._from_magnitude(self._digits[start:end], False)

    def shift_left(self, positions: int) -> "BigInt":
        """
        Умножение на 10^positions дописыванием младших нулей.

        Ноль возвращается без изменений. Знак сохраняется.

        Raises:
            ValueError: Если positions < 0
        """
        if positions < 0:
            raise ValueError(f"Shift must be non-negative, got {positions}")
        if self.is_zero or positions == 0:
            return self
        return BigInt._from_magnitude((0,) * positions + self._digits, self._negative)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        sign = "-" if self._negative else ""
        return sign + "".join(DIGIT_CHARS[d] for d in reversed(self._digits))

    def __repr__(self) -> str:
        return f"BigInt('{self}')"


# =============================================================================
# КОНСТАНТЫ ЗНАЧЕНИЙ
# =============================================================================

ZERO: Final[BigInt] = BigInt("0")
ONE: Final[BigInt] = BigInt("1")
TEN: Final[BigInt] = BigInt("10")


# =============================================================================
# АЛГОРИТМЫ УМНОЖЕНИЯ
# =============================================================================


def multiply_schoolbook(x: BigInt, y: BigInt) -> BigInt:
    """
    Школьное умножение.

    Знак результата — XOR знаков операндов; нулевой результат
    всегда неотрицательный.

    Examples:
        >>> str(multiply_schoolbook(BigInt("123"), BigInt("456")))
        '56088'
    """
    return BigInt._from_magnitude(_mul_abs(x.digits, y.digits), x.negative != y.negative)


def multiply_karatsuba(x: BigInt, y: BigInt) -> BigInt:
    """
    Умножение Карацубы (разделяй и властвуй).

    Алгоритм:
        half = max(len(x), len(y)) // 2
        x = high_x * 10^half + low_x,  y = high_y * 10^half + low_y
        P1 = high_x * high_y
        P2 = low_x * low_y
        P3 = (high_x + low_x) * (high_y + low_y) - P1 - P2
        x * y = P1 * 10^(2*half) + P3 * 10^half + P2

    База рекурсии: один из операндов из одной цифры → школьное умножение.
    Ноль возвращается сразу (иначе рекурсия вырождается).
    Результат совпадает с multiply_schoolbook для любых входов.

    Examples:
        >>> str(multiply_karatsuba(BigInt("123"), BigInt("-456")))
        '-56088'
    """
    if x.is_zero or y.is_zero:
        return ZERO

    len_x = len(x.digits)
    len_y = len(y.digits)

    if len_x == 1 or len_y == 1:
        return multiply_schoolbook(x, y)

    half = max(len_x, len_y) // 2

    # Части берутся по модулю, знак применяется в конце.
    # У короткого операнда (длина <= half) старшая часть пустая, т.е. 0
    high_x = x.get_sub_range(min(half, len_x), len_x)
    low_x = x.get_sub_range(0, half)
    high_y = y.get_sub_range(min(half, len_y), len_y)
    low_y = y.get_sub_range(0, half)

    p1 = multiply_karatsuba(high_x, high_y)
    p2 = multiply_karatsuba(low_x, low_y)
    p3 = multiply_karatsuba(high_x + low_x, high_y + low_y) - p1 - p2

    magnitude = p1.shift_left(2 * half) + p3.shift_left(half) + p2
    return BigInt._from_magnitude(magnitude.digits, x.negative != y.negative)
