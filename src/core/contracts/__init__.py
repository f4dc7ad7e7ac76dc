"""
Contract Validation Module

JSON Schema контракты запроса и результата калькулятора
и правила, проверяемые поверх схем.
"""

from .validators import (
    SCHEMA_DIR,
    ArithmeticRequestValidator,
    ArithmeticResultValidator,
    ContractValidator,
    SchemaLoader,
    validate_arithmetic_request,
    validate_arithmetic_result,
)

__all__ = [
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ArithmeticRequestValidator",
    "ArithmeticResultValidator",
    # Functions
    "validate_arithmetic_request",
    "validate_arithmetic_result",
]
