"""
Cell Result Contract

Результат вызова функции отдаётся хост-движку как dict
{"function": ..., "value": ..., "error": ...}. Перед передачей dict
проверяется по schema/cell_result.json (JSON Schema draft 2020-12):
- ровно одно из value / error заполнено
- error только из литералов XLError
- лишние поля запрещены
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"

CELL_RESULT_SCHEMA = "cell_result"


# =============================================================================
# ЗАГРУЗКА СХЕМ
# =============================================================================


@lru_cache(maxsize=None)
def load_validator(schema_name: str) -> Draft202012Validator:
    """
    Валидатор для схемы из schema/ (кэшируется на процесс).

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-validation
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

    return Draft202012Validator(schema)


# =============================================================================
# CELL RESULT
# =============================================================================


def validate_cell_result(payload: Dict[str, Any]) -> None:
    """
    Проверка payload результата функции.

    Raises:
        ValidationError: Если payload не соответствует контракту
    """
    load_validator(CELL_RESULT_SCHEMA).validate(payload)


def cell_result_errors(payload: Dict[str, Any]) -> List[str]:
    """Все нарушения контракта в виде сообщений (пустой список → валиден)."""
    validator = load_validator(CELL_RESULT_SCHEMA)
    return sorted(error.message for error in validator.iter_errors(payload))
