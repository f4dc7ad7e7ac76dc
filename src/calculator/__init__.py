"""Calculator — внешний слой над ядром точной арифметики.

Разбор десятичного ввода, выполнение операции, форматирование результата
и отображение ошибок ядра в результат запроса.
"""

from .evaluator import (
    MAX_OPERAND_DIGITS_DEFAULT,
    ArithmeticOperation,
    ArithmeticRequest,
    ArithmeticResult,
    Calculator,
    CalculatorConfig,
    ErrorKind,
    MultiplicationStrategy,
    Operand,
    OperandKind,
    OperandTooLarge,
)

__all__ = [
    "MAX_OPERAND_DIGITS_DEFAULT",
    "ArithmeticOperation",
    "ArithmeticRequest",
    "ArithmeticResult",
    "Calculator",
    "CalculatorConfig",
    "ErrorKind",
    "MultiplicationStrategy",
    "Operand",
    "OperandKind",
    "OperandTooLarge",
]
