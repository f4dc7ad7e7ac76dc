"""
Contracts — JSON Schema контракты калькулятора

Payload проверяется в два этапа:
1. Структура: JSON Schema Draft 2020-12 (schema/*.json рядом с модулем)
2. Правила калькулятора, которые схема не выражает:
   - arithmetic_request: denominator допустим только при kind=rational
   - arithmetic_result: форма value соответствует kind ('n' или 'n/d');
     offending_input задан у всех ошибок, кроме unsupported_operation,
     и отсутствует у успешного результата

Второй этап выполняется только для структурно валидных данных.
Ошибки обоих этапов — jsonschema.ValidationError с путём к полю.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

# =============================================================================
# CONSTANTS
# =============================================================================

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

OPERAND_FIELDS: Final[tuple[str, ...]] = ("lhs", "rhs")

# Ошибки, не связанные с конкретным вводом
ERRORS_WITHOUT_INPUT: Final[frozenset[str]] = frozenset({"unsupported_operation"})


def _rule_violation(message: str, path: tuple[str, ...], instance: Any) -> ValidationError:
    return ValidationError(message, path=path, instance=instance)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema файлов.

    Каждая схема проходит meta-validation при первой загрузке.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: Если файла <schema_name>.json нет
            ValueError: Если схема не проходит meta-validation
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")
        schema = json.loads(path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Схема контракта плюс правила калькулятора поверх неё.

    Подклассы задают schema_name и переопределяют rule_errors().
    """

    schema_name: str = ""

    def __init__(self, loader: SchemaLoader | None = None):
        self.schema = (loader or _SCHEMA_LOADER).load_schema(self.schema_name)
        self._schema_validator = Draft202012Validator(self.schema)

    def rule_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Нарушения правил калькулятора; data уже структурно валидна."""
        return iter(())

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        structural = list(self._schema_validator.iter_errors(data))
        if structural:
            yield from structural
        else:
            yield from self.rule_errors(data)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение (структура, затем правила)
        """
        self._schema_validator.validate(data)
        for error in self.rule_errors(data):
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return next(self.iter_errors(data), None) is None


class ArithmeticRequestValidator(ContractValidator):
    """arithmetic_request: знаменатель только у дробей."""

    schema_name = "arithmetic_request"

    def rule_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        if data["kind"] == "rational":
            return
        for side in OPERAND_FIELDS:
            denominator = data[side].get("denominator")
            if denominator is not None:
                yield _rule_violation(
                    f"denominator {denominator!r} is only allowed for kind 'rational'",
                    (side, "denominator"),
                    denominator,
                )


class ArithmeticResultValidator(ContractValidator):
    """arithmetic_result: value и offending_input согласованы с kind и исходом."""

    schema_name = "arithmetic_result"

    def rule_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        value = data["value"]
        if value is not None:
            is_fraction = "/" in value
            if data["kind"] == "integer" and is_fraction:
                yield _rule_violation(
                    f"integer result {value!r} must not have a denominator", ("value",), value
                )
            if data["kind"] == "rational" and not is_fraction:
                yield _rule_violation(
                    f"rational result {value!r} must have the form 'n/d'", ("value",), value
                )

        offending_input = data["offending_input"]
        if data["success"]:
            if offending_input is not None:
                yield _rule_violation(
                    "successful result must not carry offending_input",
                    ("offending_input",),
                    offending_input,
                )
        elif offending_input is None and data["error_kind"] not in ERRORS_WITHOUT_INPUT:
            yield _rule_violation(
                f"error {data['error_kind']!r} requires offending_input",
                ("offending_input",),
                offending_input,
            )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_REQUEST_VALIDATOR = ArithmeticRequestValidator()
_RESULT_VALIDATOR = ArithmeticResultValidator()


def validate_arithmetic_request(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если запрос нарушает arithmetic_request
    """
    _REQUEST_VALIDATOR.validate(data)


def validate_arithmetic_result(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если результат нарушает arithmetic_result
    """
    _RESULT_VALIDATOR.validate(data)
