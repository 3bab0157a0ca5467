"""
CheckedResult — Результат вычисления с проверкой

Immutable Pydantic модель: либо конечное числовое значение, либо XLError.
Адаптер функций переводит его в payload ячейки (contracts/schema/cell_result.json).
"""

import math
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.errors import XLError


# =============================================================================
# CHECKED RESULT MODEL
# =============================================================================


class CheckedResult(BaseModel):
    """
    Tagged union: value XOR error.

    Immutable модель (frozen=True). Инварианты:
    - заполнено ровно одно из полей value / error
    - value всегда конечное (NaN/Inf недопустимы)
    """

    value: Optional[float] = Field(None, description="Числовой результат (конечный)")
    error: Optional[XLError] = Field(None, description="Ошибка ячейки (#NUM!, ...)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("value")
    @classmethod
    def validate_value_finite(cls, v: Optional[float]) -> Optional[float]:
        """NaN/Inf не могут быть успешным результатом"""
        if v is not None and not math.isfinite(v):
            raise ValueError(f"value must be finite, got {v}")
        return v

    @model_validator(mode="after")
    def validate_exactly_one(self) -> "CheckedResult":
        """Ровно один вариант union заполнен"""
        if (self.value is None) == (self.error is None):
            raise ValueError(
                f"exactly one of value/error must be set, got value={self.value}, error={self.error}"
            )
        return self

    @classmethod
    def success(cls, value: float) -> "CheckedResult":
        """Успешный результат."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: XLError) -> "CheckedResult":
        """Результат с ошибкой."""
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None
