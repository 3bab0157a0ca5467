"""
Tests for the cell_result JSON Schema contract

Покрывает:
- Загрузку и кэширование валидатора
- Валидные payload (число, строка, bool, ошибка)
- Нарушения инварианта value XOR error, enum, additionalProperties
- Payload, который адаптер реально отдаёт хост-движку
"""

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    CELL_RESULT_SCHEMA,
    cell_result_errors,
    load_validator,
    validate_cell_result,
)
from src.core.domain import XLError
from src.functions import XLFunctionAdapter


@pytest.fixture
def adapter():
    """Адаптер с конфигурацией по умолчанию."""
    return XLFunctionAdapter()


# =============================================================================
# ЗАГРУЗКА
# =============================================================================


class TestLoadValidator:
    """Тесты load_validator"""

    def test_cell_result_schema(self):
        validator = load_validator(CELL_RESULT_SCHEMA)
        assert validator.schema["title"] == "CellResult"

    def test_cached(self):
        assert load_validator(CELL_RESULT_SCHEMA) is load_validator(CELL_RESULT_SCHEMA)

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            load_validator("does_not_exist")


# =============================================================================
# КОНТРАКТ
# =============================================================================


class TestCellResultContract:
    """Тесты validate_cell_result / cell_result_errors"""

    def test_number_value_valid(self):
        validate_cell_result({"function": "COMBIN", "value": 10.0, "error": None})

    def test_string_and_bool_values_valid(self):
        validate_cell_result({"function": "BASE", "value": "FF", "error": None})
        validate_cell_result({"function": "ISEVEN", "value": True, "error": None})

    def test_error_valid(self):
        validate_cell_result({"function": "ARABIC", "value": None, "error": "#VALUE!"})

    def test_both_null_invalid(self):
        with pytest.raises(ValidationError):
            validate_cell_result({"function": "FACT", "value": None, "error": None})

    def test_both_set_invalid(self):
        with pytest.raises(ValidationError):
            validate_cell_result({"function": "FACT", "value": 1.0, "error": "#NUM!"})

    def test_unknown_error_literal_invalid(self):
        with pytest.raises(ValidationError):
            validate_cell_result({"function": "FACT", "value": None, "error": "#BOGUS!"})

    def test_lowercase_function_invalid(self):
        with pytest.raises(ValidationError):
            validate_cell_result({"function": "fact", "value": 1.0, "error": None})

    def test_additional_properties_invalid(self):
        with pytest.raises(ValidationError):
            validate_cell_result({"function": "FACT", "value": 1.0, "error": None, "details": ""})

    def test_errors_listed(self):
        assert cell_result_errors({"function": "FACT", "value": 1.0, "error": None}) == []
        assert cell_result_errors({"function": "FACT", "value": None, "error": None})


# =============================================================================
# PAYLOAD АДАПТЕРА
# =============================================================================


class TestAdapterPayloads:
    """Payload адаптера соответствует контракту"""

    def test_value_payload(self, adapter):
        assert adapter.evaluate_payload("COMBIN", 5, 2) == {
            "function": "COMBIN",
            "value": 10.0,
            "error": None,
        }

    def test_error_payload(self, adapter):
        assert adapter.evaluate_payload("combin", 2, 5) == {
            "function": "COMBIN",
            "value": None,
            "error": XLError.NUMBER_INVALID.value,
        }

    def test_text_payloads(self, adapter):
        assert adapter.evaluate_payload("BASE", 255.0, 16.0)["value"] == "FF"
        assert adapter.evaluate_payload("ARABIC", "ABC")["error"] == "#VALUE!"
        assert adapter.evaluate_payload("ISODD", 3)["value"] is True
