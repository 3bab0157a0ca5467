"""
Contract Validation Module

JSON Schema контракт результата функции, передаваемого хост-движку.
"""

from .validators import (
    CELL_RESULT_SCHEMA,
    cell_result_errors,
    load_validator,
    validate_cell_result,
)

__all__ = [
    "CELL_RESULT_SCHEMA",
    "load_validator",
    "validate_cell_result",
    "cell_result_errors",
]
