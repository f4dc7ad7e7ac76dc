"""
Errors — Иерархия исключений точной арифметики

Все ошибки обнаруживаются немедленно в точке операции и передаются
непосредственному вызывающему коду. Частичных результатов нет:
операция либо возвращает валидное нормализованное значение, либо
бросает исключение без побочных эффектов.

Виды ошибок:
- InvalidFormat: некорректная десятичная строка
- DivisionByZero: деление/остаток на ноль, деление дроби на ноль
- ZeroDenominator: дробь с нулевым знаменателем (частный случай DivisionByZero)
"""


class BigNumError(Exception):
    """Базовое исключение для BigInt и Rational."""

    pass


class InvalidFormat(BigNumError, ValueError):
    """
    Некорректная десятичная строка.

    Допустимый формат: необязательный ведущий '-' и одна или более
    ASCII-цифр '0'-'9'. Пробелы, '+', '_', префиксы оснований запрещены.

    Attributes:
        text: Исходная строка (или объект), которую не удалось разобрать
    """

    def __init__(self, text: object, reason: str):
        self.text = text
        super().__init__(f"Invalid number {text!r}: {reason}")


class DivisionByZero(BigNumError, ZeroDivisionError):
    """Деление или взятие остатка по нулевому делителю."""

    pass


class ZeroDenominator(DivisionByZero):
    """Попытка создать дробь с нулевым знаменателем."""

    pass
