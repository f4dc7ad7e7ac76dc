"""Calculator: вычисление арифметических запросов над BigInt и Rational

Внешний слой для ядра точной арифметики:
- Разбор пользовательского ввода (десятичные строки) в BigInt / Rational[BigInt]
- Выполнение одной бинарной операции (add/subtract/multiply/divide/modulo)
- Выбор алгоритма умножения целых (schoolbook / karatsuba)
- Форматирование результата в каноническую строку

Ошибки ядра (InvalidFormat, DivisionByZero) не пробрасываются наружу:
результат содержит вид ошибки и ошибочный ввод. Частичных результатов нет.
"""

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Final

from pydantic import BaseModel, Field

from src.core.contracts import validate_arithmetic_request
from src.core.math.bigint import BigInt, multiply_karatsuba, multiply_schoolbook
from src.core.math.errors import DivisionByZero, InvalidFormat, ZeroDenominator
from src.core.math.rational import Rational


# =============================================================================
# CONSTANTS
# =============================================================================

# Предел длины операнда (в цифрах) по умолчанию
MAX_OPERAND_DIGITS_DEFAULT: Final[int] = 100_000

# Знаменатель rational-операнда, если он не задан
DEFAULT_DENOMINATOR: Final[str] = "1"


# =============================================================================
# ENUMS
# =============================================================================


class ArithmeticOperation(str, Enum):
    """Бинарная операция"""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    MODULO = "modulo"


class OperandKind(str, Enum):
    """Тип операндов"""

    INTEGER = "integer"
    RATIONAL = "rational"


class MultiplicationStrategy(str, Enum):
    """Алгоритм умножения целых"""

    SCHOOLBOOK = "schoolbook"
    KARATSUBA = "karatsuba"


class ErrorKind(str, Enum):
    """Вид ошибки в результате"""

    INVALID_FORMAT = "invalid_format"
    DIVISION_BY_ZERO = "division_by_zero"
    OPERAND_TOO_LARGE = "operand_too_large"
    UNSUPPORTED_OPERATION = "unsupported_operation"


_SYMBOLS: Final[Dict[ArithmeticOperation, str]] = {
    ArithmeticOperation.ADD: "+",
    ArithmeticOperation.SUBTRACT: "-",
    ArithmeticOperation.MULTIPLY: "*",
    ArithmeticOperation.DIVIDE: "/",
    ArithmeticOperation.MODULO: "%",
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OperandTooLarge(ValueError):
    """Операнд длиннее CalculatorConfig.max_operand_digits."""

    def __init__(self, text: str, limit: int):
        self.text = text
        super().__init__(f"Operand has more than {limit} digits")


# =============================================================================
# REQUEST / RESULT MODELS
# =============================================================================


class Operand(BaseModel):
    """
    Операнд запроса в виде сырых строк.

    Формат не проверяется здесь: разбор выполняет BigInt, и его
    InvalidFormat возвращается в результате вместе с ошибочным вводом.
    """

    numerator: str = Field(..., description="Десятичное целое или числитель")
    denominator: str | None = Field(
        default=None, description="Знаменатель (только для kind=rational)"
    )

    model_config = {"frozen": True}

    def text(self) -> str:
        """Ввод в виде 'n' или 'n/d'."""
        if self.denominator is None:
            return self.numerator
        return f"{self.numerator}/{self.denominator}"


class ArithmeticRequest(BaseModel):
    """Запрос на вычисление lhs <operation> rhs."""

    request_id: int = Field(..., ge=0, description="Идентификатор запроса")
    operation: ArithmeticOperation = Field(..., description="Операция")
    kind: OperandKind = Field(default=OperandKind.INTEGER, description="Тип операндов")
    lhs: Operand
    rhs: Operand

    model_config = {"frozen": True}


class ArithmeticResult(BaseModel):
    """
    Результат вычисления.

    success=True: value содержит каноническую строку ('-42', '19/12').
    success=False: error_kind и offending_input описывают ошибку.
    """

    request_id: int = Field(..., ge=0)
    success: bool
    operation: ArithmeticOperation
    kind: OperandKind
    value: str | None = None
    error_kind: ErrorKind | None = None
    offending_input: str | None = None
    details: str = ""

    model_config = {"frozen": True}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора.

    Школьное умножение и деление столбиком квадратичны по времени,
    поэтому длина ввода ограничена.
    """

    multiplication_strategy: MultiplicationStrategy = MultiplicationStrategy.KARATSUBA

    # Максимальная длина операнда в десятичных цифрах (без знака)
    max_operand_digits: int = MAX_OPERAND_DIGITS_DEFAULT


# =============================================================================
# CALCULATOR
# =============================================================================


class Calculator:
    """Калькулятор точной арифметики.

    Порядок обработки:
    1. Проверка поддержки операции для типа операндов
    2. Разбор операндов (длина, формат, нулевой знаменатель)
    3. Вычисление
    4. Форматирование результата
    """

    def __init__(self, config: CalculatorConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or CalculatorConfig()

    def evaluate(self, request: ArithmeticRequest) -> ArithmeticResult:
        """Вычисление запроса.

        Args:
            request: запрос калькулятора

        Returns:
            ArithmeticResult со значением либо с описанием ошибки
        """
        if request.kind == OperandKind.RATIONAL and request.operation == ArithmeticOperation.MODULO:
            return self._failed_result(
                request,
                ErrorKind.UNSUPPORTED_OPERATION,
                offending_input=None,
                details="modulo is not defined for rational operands",
            )

        # 1. Разбор операндов
        operands = []
        for operand in (request.lhs, request.rhs):
            try:
                if request.kind == OperandKind.INTEGER:
                    operands.append(self._parse_integer_operand(operand))
                else:
                    operands.append(self._parse_rational_operand(operand))
            except OperandTooLarge as e:
                return self._failed_result(request, ErrorKind.OPERAND_TOO_LARGE, e.text, str(e))
            except InvalidFormat as e:
                return self._failed_result(
                    request, ErrorKind.INVALID_FORMAT, str(e.text), str(e)
                )
            except ZeroDenominator as e:
                return self._failed_result(
                    request, ErrorKind.DIVISION_BY_ZERO, operand.text(), str(e)
                )
        lhs, rhs = operands

        # 2. Вычисление
        try:
            value = self._operation(request)(lhs, rhs)
        except DivisionByZero as e:
            return self._failed_result(
                request, ErrorKind.DIVISION_BY_ZERO, request.rhs.text(), str(e)
            )

        symbol = _SYMBOLS[request.operation]
        return ArithmeticResult(
            request_id=request.request_id,
            success=True,
            operation=request.operation,
            kind=request.kind,
            value=str(value),
            details=f"{request.lhs.text()} {symbol} {request.rhs.text()} = {value}",
        )

    def evaluate_payload(self, data: Dict[str, Any]) -> ArithmeticResult:
        """Вычисление запроса из JSON-совместимого dict.

        Raises:
            jsonschema.ValidationError: Если data не соответствует arithmetic_request
        """
        validate_arithmetic_request(data)
        return self.evaluate(ArithmeticRequest.model_validate(data))

    # -------------------------------------------------------------------------
    # Разбор операндов
    # -------------------------------------------------------------------------

    def _parse_integer(self, text: str) -> BigInt:
        digit_count = len(text) - 1 if text.startswith("-") else len(text)
        if digit_count > self.config.max_operand_digits:
            raise OperandTooLarge(text, self.config.max_operand_digits)
        return BigInt(text)

    def _parse_integer_operand(self, operand: Operand) -> BigInt:
        if operand.denominator is not None:
            raise InvalidFormat(operand.text(), "denominator is not allowed for integer operands")
        return self._parse_integer(operand.numerator)

    def _parse_rational_operand(self, operand: Operand) -> Rational[BigInt]:
        numerator = self._parse_integer(operand.numerator)
        denominator = self._parse_integer(
            DEFAULT_DENOMINATOR if operand.denominator is None else operand.denominator
        )
        return Rational(numerator, denominator)

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def _operation(self, request: ArithmeticRequest) -> Callable[[Any, Any], Any]:
        if request.operation == ArithmeticOperation.MULTIPLY and request.kind == OperandKind.INTEGER:
            if self.config.multiplication_strategy == MultiplicationStrategy.KARATSUBA:
                return multiply_karatsuba
            return multiply_schoolbook

        return {
            ArithmeticOperation.ADD: operator.add,
            ArithmeticOperation.SUBTRACT: operator.sub,
            ArithmeticOperation.MULTIPLY: operator.mul,
            ArithmeticOperation.DIVIDE: operator.truediv,
            ArithmeticOperation.MODULO: operator.mod,
        }[request.operation]

    def _failed_result(
        self,
        request: ArithmeticRequest,
        error_kind: ErrorKind,
        offending_input: str | None,
        details: str,
    ) -> ArithmeticResult:
        """Результат с ошибкой."""
        return ArithmeticResult(
            request_id=request.request_id,
            success=False,
            operation=request.operation,
            kind=request.kind,
            error_kind=error_kind,
            offending_input=offending_input,
            details=details,
        )
