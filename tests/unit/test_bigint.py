"""
Тесты для модуля BigInt

Проверяет:
1. Разбор десятичных строк и каноническое представление
2. Сравнение (по модулю и со знаком)
3. Сложение/вычитание со всеми комбинациями знаков
4. Школьное умножение и Карацубу (совпадение результатов)
5. Деление столбиком с усечением к нулю
6. Выделение поддиапазона цифр и сдвиг
7. Неизменяемость и алгебраические свойства
"""

import copy
import pickle
import random

import pytest

from src.core.math.bigint import (
    ONE,
    TEN,
    ZERO,
    BigInt,
    multiply_karatsuba,
    multiply_schoolbook,
)
from src.core.math.errors import BigNumError, DivisionByZero, InvalidFormat


def _random_int(rng: random.Random, max_digits: int) -> int:
    """Случайное целое со случайной длиной и знаком."""
    digits = rng.randint(1, max_digits)
    value = rng.randint(0, 10**digits - 1)
    return -value if rng.random() < 0.5 else value


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Эталонное деление с усечением к нулю."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - b * q


# =============================================================================
# РАЗБОР И ПРЕДСТАВЛЕНИЕ
# =============================================================================


class TestParsing:
    """Тесты конструирования из строки"""

    def test_positive_number(self) -> None:
        """Цифры хранятся младшей первой"""
        x = BigInt("1234")
        assert x.digits == (4, 3, 2, 1)
        assert x.negative is False

    def test_negative_number(self) -> None:
        """Ведущий '-' задаёт отрицательный знак"""
        x = BigInt("-56")
        assert x.digits == (6, 5)
        assert x.negative is True

    def test_leading_zeros_trimmed(self) -> None:
        """Ведущие нули удаляются"""
        assert BigInt("000123").digits == (3, 2, 1)
        assert str(BigInt("-000123")) == "-123"

    def test_negative_zero_is_canonical_zero(self) -> None:
        """'-0' и '-000' дают неотрицательный ноль"""
        for text in ("0", "-0", "000", "-000"):
            x = BigInt(text)
            assert x.digits == (0,)
            assert x.negative is False
            assert x == ZERO

    def test_default_is_zero(self) -> None:
        """Конструктор без аргументов даёт ноль"""
        assert BigInt() == ZERO

    def test_empty_string_rejected(self) -> None:
        """Пустая строка → InvalidFormat"""
        with pytest.raises(InvalidFormat, match="empty string"):
            BigInt("")

    def test_invalid_character_rejected(self) -> None:
        """Недопустимый символ → InvalidFormat"""
        with pytest.raises(InvalidFormat, match="invalid character 'a'"):
            BigInt("12a3")

    def test_lone_minus_rejected(self) -> None:
        """Знак без цифр → InvalidFormat"""
        with pytest.raises(InvalidFormat, match="no digits"):
            BigInt("-")

    def test_other_formats_rejected(self) -> None:
        """'+', пробелы, '_', префиксы, unicode-цифры запрещены"""
        for text in ("+5", " 5", "5 ", "1_000", "0x10", "--5", "5-", "١٢٣", "1.5"):
            with pytest.raises(InvalidFormat):
                BigInt(text)

    def test_non_string_rejected(self) -> None:
        """Не-строка → InvalidFormat"""
        with pytest.raises(InvalidFormat, match="expected str"):
            BigInt(123)  # type: ignore[arg-type]

    def test_invalid_format_carries_text(self) -> None:
        """InvalidFormat содержит исходную строку и совместим с ValueError"""
        with pytest.raises(ValueError) as exc_info:
            BigInt("12a3")
        assert isinstance(exc_info.value, BigNumError)
        assert exc_info.value.text == "12a3"


class TestPrintableForm:
    """Тесты строкового представления"""

    def test_roundtrip_canonical_strings(self) -> None:
        """Инвариант: str(BigInt(s)) == s для канонических строк"""
        for text in ("0", "7", "-7", "10", "-100", "36423452523432434", "-18423432424542345"):
            assert str(BigInt(text)) == text

    def test_roundtrip_random(self) -> None:
        """Инвариант round-trip на случайных значениях"""
        rng = random.Random(1)
        for _ in range(200):
            text = str(_random_int(rng, 80))
            assert str(BigInt(text)) == text

    def test_repr(self) -> None:
        assert repr(BigInt("-42")) == "BigInt('-42')"

    def test_constants(self) -> None:
        """Предвычисленные константы"""
        assert str(ZERO) == "0"
        assert str(ONE) == "1"
        assert str(TEN) == "10"


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


class TestComparison:
    """Тесты сравнения"""

    def test_abs_less_by_length(self) -> None:
        """Сначала сравнивается длина"""
        assert BigInt("99").abs_less(BigInt("100"))
        assert not BigInt("100").abs_less(BigInt("99"))

    def test_abs_less_ignores_sign(self) -> None:
        """Сравнение по модулю игнорирует знак"""
        assert BigInt("-5").abs_less(BigInt("7"))
        assert BigInt("5").abs_less(BigInt("-7"))
        assert not BigInt("-7").abs_less(BigInt("5"))

    def test_abs_less_equal_magnitudes(self) -> None:
        """Равные модули: не меньше"""
        assert not BigInt("-12").abs_less(BigInt("12"))

    def test_equality_requires_sign_and_magnitude(self) -> None:
        assert BigInt("12") == BigInt("12")
        assert BigInt("12") != BigInt("-12")
        assert BigInt("12") != BigInt("13")

    def test_equality_with_other_types(self) -> None:
        """Сравнение с не-BigInt не равно"""
        assert BigInt("5") != 5
        assert BigInt("5") != "5"

    def test_less_mixed_signs(self) -> None:
        """Отрицательное меньше неотрицательного"""
        assert BigInt("-1000") < BigInt("1")
        assert not BigInt("1") < BigInt("-1000")

    def test_less_both_negative(self) -> None:
        """Оба отрицательные: больший модуль меньше"""
        assert BigInt("-100") < BigInt("-99")
        assert not BigInt("-99") < BigInt("-100")

    def test_less_both_non_negative(self) -> None:
        assert BigInt("99") < BigInt("100")
        assert BigInt("0") < BigInt("1")

    def test_derived_orderings(self) -> None:
        assert BigInt("5") <= BigInt("5")
        assert BigInt("6") > BigInt("5")
        assert BigInt("-5") >= BigInt("-6")

    def test_ordering_matches_int(self) -> None:
        """Порядок совпадает с порядком int"""
        rng = random.Random(2)
        values = [_random_int(rng, 6) for _ in range(60)]
        ordered = sorted(BigInt(str(v)) for v in values)
        assert [str(x) for x in ordered] == [str(v) for v in sorted(values)]

    def test_ordering_with_other_types_raises(self) -> None:
        with pytest.raises(TypeError):
            BigInt("5") < 5  # noqa: B015

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(BigInt("-0")) == hash(BigInt("0"))
        assert len({BigInt("7"), BigInt("007"), BigInt("-7")}) == 2


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


class TestAddition:
    """Тесты сложения"""

    def test_large_mixed_sign_sum(self) -> None:
        """Сценарий: сумма чисел разных знаков"""
        result = BigInt("36423452523432434") + BigInt("-18423432424542345")
        assert str(result) == "18000020098890089"

    def test_same_sign_keeps_sign(self) -> None:
        assert str(BigInt("-5") + BigInt("-7")) == "-12"
        assert str(BigInt("5") + BigInt("7")) == "12"

    def test_carry_propagation(self) -> None:
        assert str(BigInt("999999") + BigInt("1")) == "1000000"

    def test_larger_magnitude_on_right(self) -> None:
        """|a| < |b|: знак b"""
        assert str(BigInt("3") + BigInt("-10")) == "-7"
        assert str(BigInt("-3") + BigInt("10")) == "7"

    def test_larger_magnitude_on_left(self) -> None:
        """|a| >= |b|: знак a"""
        assert str(BigInt("10") + BigInt("-3")) == "7"
        assert str(BigInt("-10") + BigInt("3")) == "-7"

    def test_opposites_give_non_negative_zero(self) -> None:
        result = BigInt("-123") + BigInt("123")
        assert result == ZERO
        assert result.negative is False

    def test_unsupported_operand_type(self) -> None:
        with pytest.raises(TypeError):
            BigInt("1") + 1  # type: ignore[operator]


class TestSubtraction:
    """Тесты вычитания"""

    def test_different_signs_add_magnitudes(self) -> None:
        """Разные знаки: сложение модулей, знак a"""
        assert str(BigInt("5") - BigInt("-7")) == "12"
        assert str(BigInt("-5") - BigInt("7")) == "-12"

    def test_same_sign_smaller_left(self) -> None:
        """Одинаковые знаки, |a| < |b|: знак инвертируется"""
        assert str(BigInt("3") - BigInt("10")) == "-7"
        assert str(BigInt("-3") - BigInt("-10")) == "7"

    def test_same_sign_larger_left(self) -> None:
        assert str(BigInt("10") - BigInt("3")) == "7"
        assert str(BigInt("-10") - BigInt("-3")) == "-7"

    def test_borrow_propagation(self) -> None:
        assert str(BigInt("1000000") - BigInt("1")) == "999999"

    def test_self_subtraction_is_zero(self) -> None:
        result = BigInt("-987654321") - BigInt("-987654321")
        assert result == ZERO
        assert result.negative is False

    def test_large_difference(self) -> None:
        result = BigInt("36423452523432434") - BigInt("-18423432424542345")
        assert str(result) == "54846884947974779"

    def test_matches_int_random(self) -> None:
        """Сложение и вычитание совпадают с int"""
        rng = random.Random(3)
        for _ in range(300):
            a, b = _random_int(rng, 40), _random_int(rng, 40)
            x, y = BigInt(str(a)), BigInt(str(b))
            assert str(x + y) == str(a + b)
            assert str(x - y) == str(a - b)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


class TestSchoolbookMultiplication:
    """Тесты школьного умножения"""

    def test_basic_product(self) -> None:
        assert str(multiply_schoolbook(BigInt("123"), BigInt("456"))) == "56088"
        assert str(BigInt("123") * BigInt("456")) == "56088"

    def test_sign_is_xor(self) -> None:
        assert str(BigInt("-12") * BigInt("3")) == "-36"
        assert str(BigInt("12") * BigInt("-3")) == "-36"
        assert str(BigInt("-12") * BigInt("-3")) == "36"

    def test_zero_product_is_non_negative(self) -> None:
        result = BigInt("-12345") * ZERO
        assert result == ZERO
        assert result.negative is False

    def test_large_product(self) -> None:
        result = BigInt("36423452523432434") * BigInt("-18423432424542345")
        assert str(result) == str(36423452523432434 * -18423432424542345)

    def test_matches_int_random(self) -> None:
        rng = random.Random(4)
        for _ in range(150):
            a, b = _random_int(rng, 40), _random_int(rng, 40)
            assert str(BigInt(str(a)) * BigInt(str(b))) == str(a * b)


class TestKaratsuba:
    """Тесты умножения Карацубы"""

    def test_basic_product(self) -> None:
        assert str(multiply_karatsuba(BigInt("123"), BigInt("456"))) == "56088"
        assert str(BigInt("123").karatsuba(BigInt("456"))) == "56088"

    def test_zero_short_circuit(self) -> None:
        """Ноль возвращается сразу и неотрицательный"""
        assert multiply_karatsuba(ZERO, BigInt("-99999")) == ZERO
        assert multiply_karatsuba(BigInt("-99999"), ZERO).negative is False

    def test_single_digit_base_case(self) -> None:
        assert str(multiply_karatsuba(BigInt("7"), BigInt("-123456789"))) == "-864197523"

    def test_sign_is_xor(self) -> None:
        assert str(multiply_karatsuba(BigInt("-123"), BigInt("456"))) == "-56088"
        assert str(multiply_karatsuba(BigInt("-123"), BigInt("-456"))) == "56088"

    def test_unbalanced_lengths(self) -> None:
        """Операнды сильно разной длины (старшая часть короткого = 0)"""
        a = 12345678901234567890
        b = 97
        assert str(multiply_karatsuba(BigInt(str(a)), BigInt(str(b)))) == str(a * b)

    def test_short_operand_first(self) -> None:
        """Короткий операнд слева: половина считается по длинному"""
        assert str(multiply_karatsuba(BigInt("12"), BigInt("1234567890"))) == "14814814680"
        assert str(multiply_karatsuba(BigInt("-1234567890"), BigInt("12"))) == "-14814814680"

    def test_every_length_pair(self) -> None:
        """Все сочетания длин 1..13 цифр"""
        rng = random.Random(9)
        for len_a in range(1, 14):
            for len_b in range(1, 14):
                a = rng.randint(10 ** (len_a - 1), 10**len_a - 1)
                b = rng.randint(10 ** (len_b - 1), 10**len_b - 1)
                assert str(multiply_karatsuba(BigInt(str(a)), BigInt(str(b)))) == str(a * b)

    def test_all_nines(self) -> None:
        """Максимальные переносы"""
        a = 10**50 - 1
        assert str(multiply_karatsuba(BigInt(str(a)), BigInt(str(a)))) == str(a * a)

    def test_powers_of_ten(self) -> None:
        """Внутренние нулевые части"""
        a, b = 10**30, 10**17 + 1
        assert str(multiply_karatsuba(BigInt(str(a)), BigInt(str(b)))) == str(a * b)

    def test_matches_schoolbook_random(self) -> None:
        """Инвариант: karatsuba(a, b) == schoolbook(a, b)"""
        rng = random.Random(5)
        for _ in range(60):
            x = BigInt(str(_random_int(rng, 60)))
            y = BigInt(str(_random_int(rng, 60)))
            assert multiply_karatsuba(x, y) == multiply_schoolbook(x, y)

    def test_matches_int_large(self) -> None:
        rng = random.Random(6)
        for _ in range(5):
            a = rng.randint(10**150, 10**200)
            b = -rng.randint(10**120, 10**180)
            assert str(multiply_karatsuba(BigInt(str(a)), BigInt(str(b)))) == str(a * b)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


class TestDivision:
    """Тесты деления столбиком"""

    def test_quotient_and_remainder(self) -> None:
        """Сценарий: 100 / 7 = 14, 100 % 7 = 2"""
        assert str(BigInt("100") / BigInt("7")) == "14"
        assert str(BigInt("100") % BigInt("7")) == "2"

    def test_remainder_follows_dividend_sign(self) -> None:
        """Сценарий: -7 % 3 = -1"""
        assert str(BigInt("-7") % BigInt("3")) == "-1"
        assert str(BigInt("7") % BigInt("-3")) == "1"
        assert str(BigInt("-7") % BigInt("-3")) == "-1"

    def test_quotient_truncates_toward_zero(self) -> None:
        assert str(BigInt("-7") / BigInt("3")) == "-2"
        assert str(BigInt("7") / BigInt("-3")) == "-2"
        assert str(BigInt("-7") / BigInt("-3")) == "2"

    def test_floordiv_is_truncating(self) -> None:
        """// совпадает с / (усечение, не floor)"""
        assert BigInt("-7") // BigInt("3") == BigInt("-2")

    def test_divmod(self) -> None:
        q, r = divmod(BigInt("-100"), BigInt("7"))
        assert (str(q), str(r)) == ("-14", "-2")

    def test_small_dividend(self) -> None:
        """|a| < |b|: частное 0, остаток a"""
        q, r = divmod(BigInt("-5"), BigInt("12"))
        assert q == ZERO and q.negative is False
        assert str(r) == "-5"

    def test_exact_division_zero_remainder(self) -> None:
        r = BigInt("-144") % BigInt("12")
        assert r == ZERO
        assert r.negative is False

    def test_zero_dividend(self) -> None:
        assert BigInt("0") / BigInt("-5") == ZERO
        assert BigInt("0") % BigInt("-5") == ZERO

    def test_division_by_zero(self) -> None:
        """a / 0 и a % 0 → DivisionByZero"""
        for text in ("0", "1", "-1", "123456789"):
            with pytest.raises(DivisionByZero):
                BigInt(text) / ZERO
            with pytest.raises(DivisionByZero):
                BigInt(text) % ZERO
            with pytest.raises(ZeroDivisionError):
                divmod(BigInt(text), BigInt("-0"))

    def test_division_invariant_random(self) -> None:
        """Инвариант: b * (a / b) + a % b == a, знак остатка = знак a"""
        rng = random.Random(7)
        for _ in range(200):
            a = _random_int(rng, 40)
            b = _random_int(rng, 20) or 1
            x, y = BigInt(str(a)), BigInt(str(b))
            q, r = x / y, x % y
            assert y * q + r == x
            assert r.is_zero or r.negative == x.negative
            assert (str(q), str(r)) == tuple(str(v) for v in _trunc_divmod(a, b))


# =============================================================================
# РАЗРЯДНЫЕ ОПЕРАЦИИ
# =============================================================================


class TestSubRangeAndShift:
    """Тесты get_sub_range и shift_left"""

    def test_sub_range_low_and_high(self) -> None:
        x = BigInt("-987654")
        assert str(x.get_sub_range(0, 3)) == "654"
        assert str(x.get_sub_range(3, 6)) == "987"

    def test_sub_range_drops_sign_and_zeros(self) -> None:
        """Знак не переносится, ведущие нули удаляются"""
        part = BigInt("-1000200").get_sub_range(0, 4)
        assert str(part) == "200"
        assert part.negative is False

    def test_sub_range_clipped_and_empty(self) -> None:
        x = BigInt("12345")
        assert str(x.get_sub_range(2, 100)) == "123"
        assert x.get_sub_range(10, 20) == ZERO
        assert x.get_sub_range(2, 2) == ZERO

    def test_sub_range_invalid(self) -> None:
        with pytest.raises(ValueError):
            BigInt("123").get_sub_range(-1, 2)
        with pytest.raises(ValueError):
            BigInt("123").get_sub_range(2, 1)

    def test_shift_left(self) -> None:
        assert str(BigInt("123").shift_left(3)) == "123000"
        assert str(BigInt("-5").shift_left(2)) == "-500"
        assert str(BigInt("5").shift_left(0)) == "5"

    def test_shift_left_zero_unchanged(self) -> None:
        assert ZERO.shift_left(10) == ZERO
        assert ZERO.shift_left(10).digits == (0,)

    def test_shift_left_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            BigInt("5").shift_left(-1)


# =============================================================================
# НЕИЗМЕНЯЕМОСТЬ И УНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


class TestImmutability:
    """Тесты неизменяемости"""

    def test_attribute_assignment_rejected(self) -> None:
        x = BigInt("42")
        with pytest.raises(AttributeError):
            x._digits = (1,)  # type: ignore[misc]
        with pytest.raises(AttributeError):
            x.extra = 1  # type: ignore[attr-defined]
        assert str(x) == "42"

    def test_operands_unchanged(self) -> None:
        a, b = BigInt("-123"), BigInt("45")
        for _ in (a + b, a - b, a * b, a / b, a % b, a.karatsuba(b), -a, a.abs()):
            pass
        assert str(a) == "-123"
        assert str(b) == "45"

    def test_abs_and_neg(self) -> None:
        assert str(BigInt("-9").abs()) == "9"
        assert str(abs(BigInt("-9"))) == "9"
        assert str(-BigInt("9")) == "-9"
        assert (-ZERO).negative is False

    def test_bool(self) -> None:
        assert not ZERO
        assert BigInt("-1")

    def test_pickle_and_copy(self) -> None:
        x = BigInt("-123456789012345678901234567890")
        assert pickle.loads(pickle.dumps(x)) == x
        assert copy.deepcopy(x) == x


class TestAlgebraicProperties:
    """Алгебраические свойства"""

    @pytest.fixture
    def samples(self) -> list[BigInt]:
        rng = random.Random(8)
        return [BigInt(str(_random_int(rng, 30))) for _ in range(12)]

    def test_commutativity(self, samples: list[BigInt]) -> None:
        for a in samples:
            for b in samples:
                assert a + b == b + a
                assert a * b == b * a

    def test_associativity(self, samples: list[BigInt]) -> None:
        for a, b, c in zip(samples, samples[1:], samples[2:]):
            assert (a + b) + c == a + (b + c)
            assert (a * b) * c == a * (b * c)

    def test_identities(self, samples: list[BigInt]) -> None:
        for a in samples:
            assert a + ZERO == a
            assert a * ONE == a
            product = a * ZERO
            assert product == ZERO and product.negative is False
