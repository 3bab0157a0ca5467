"""XL Function Adapter — встроенные функции таблицы поверх core

Адаптер показывает контракт вызова со стороны формульного движка:
- Числовые функции возвращают сырой float; NaN/Inf → #NUM!
- combin_checked возвращает CheckedResult; ошибка пробрасывается как есть
- InvalidArgumentError (римские числа, основания) → #VALUE!
- BASE принимает float-операнды ячеек; дробные и NaN/Inf → #VALUE!
- serialize() проверяет payload по контракту cell_result перед передачей хосту

Поддерживаемые функции:
    RADIANS, DEGREES,
    ASINH, ACOSH, ATANH, ACOTH, SECH, CSCH, COTH,
    COMBIN, FACT,
    ISEVEN, ISODD,
    ARABIC, BASE

Адаптер stateless: один экземпляр можно разделять между потоками.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from src.core.contracts import validate_cell_result
from src.core.domain.checked_result import CheckedResult
from src.core.domain.errors import InvalidArgumentError, XLError
from src.core.math.angles import degrees_to_radians, radians_to_degrees
from src.core.math.combinatorics import combin_checked, factorial
from src.core.math.hyperbolic import acosh, acoth, asinh, atanh, coth, csch, sech
from src.core.math.numerical_safeguards import is_valid_float
from src.core.math.parity import is_even, is_odd
from src.core.numerals.radix import change_base
from src.core.numerals.roman import roman_to_arabic

logger = logging.getLogger(__name__)

CellValue = Union[float, int, str, bool]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FunctionAdapterConfig:
    """Конфигурация адаптера функций."""

    # NaN/Inf от числовых функций превращаются в #NUM!.
    # False → сырое значение отдаётся движку как есть
    map_non_finite_to_error: bool = True


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class FunctionResult:
    """Результат вызова функции."""

    function_name: str

    # Ровно одно из value / error заполнено
    value: Optional[CellValue]
    error: Optional[XLError]

    # Детали
    details: str

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_payload(self) -> dict[str, Any]:
        """Сериализованная форма для хост-движка (см. cell_result.json)."""
        return {
            "function": self.function_name,
            "value": self.value,
            "error": self.error.value if self.error is not None else None,
        }


# =============================================================================
# ADAPTER
# =============================================================================


def _whole_number(value: Any, name: str) -> int:
    """Операнд ячейки → int; дробный, нечисловой или NaN/Inf → InvalidArgumentError"""
    if isinstance(value, int):
        return value
    if not isinstance(value, float) or not is_valid_float(value) or value % 1 != 0:
        raise InvalidArgumentError(f"{name} must be a whole number, got {value!r}")
    return int(value)


def _base(number: Any, radix: Any) -> str:
    """BASE(number, radix): операнды ячеек приходят как float"""
    return change_base(_whole_number(number, "number"), _whole_number(radix, "radix"))


_FUNCTIONS: dict[str, Callable[..., Any]] = {
    "RADIANS": degrees_to_radians,
    "DEGREES": radians_to_degrees,
    "ASINH": asinh,
    "ACOSH": acosh,
    "ATANH": atanh,
    "ACOTH": acoth,
    "SECH": sech,
    "CSCH": csch,
    "COTH": coth,
    "COMBIN": combin_checked,
    "FACT": factorial,
    "ISEVEN": is_even,
    "ISODD": is_odd,
    "ARABIC": roman_to_arabic,
    "BASE": _base,
}


class XLFunctionAdapter:
    """Адаптер встроенных функций таблицы.

    Порядок обработки:
    1. Поиск функции по имени (регистр не важен); неизвестное имя → KeyError
    2. Вызов core функции; InvalidArgumentError → #VALUE!
    3. CheckedResult → value или его XLError
    4. Нечисловой результат (str/bool/int) отдаётся как есть
    5. Float: NaN/Inf → #NUM! (если map_non_finite_to_error)
    """

    def __init__(self, config: FunctionAdapterConfig | None = None):
        self.config = config or FunctionAdapterConfig()

    @staticmethod
    def supported_functions() -> list[str]:
        """Имена поддерживаемых функций в алфавитном порядке."""
        return sorted(_FUNCTIONS)

    def evaluate(self, name: str, *args: Any) -> FunctionResult:
        """Вычисление функции name(*args).

        Args:
            name: Имя функции таблицы (например, "COMBIN")
            *args: Уже вычисленные скалярные операнды

        Returns:
            FunctionResult со значением или ошибкой ячейки

        Raises:
            KeyError: если функция не поддерживается
        """
        function_name = name.upper()
        if function_name not in _FUNCTIONS:
            raise KeyError(f"Unsupported function: {name}")

        func = _FUNCTIONS[function_name]

        try:
            raw = func(*args)
        except InvalidArgumentError as e:
            logger.debug("%s%r → %s: %s", function_name, args, XLError.INCOMPATIBLE_VALUE.value, e)
            return FunctionResult(
                function_name=function_name,
                value=None,
                error=XLError.INCOMPATIBLE_VALUE,
                details=str(e),
            )

        if isinstance(raw, CheckedResult):
            if raw.is_error:
                logger.debug("%s%r → %s", function_name, args, raw.error.value)
                return FunctionResult(
                    function_name=function_name,
                    value=None,
                    error=raw.error,
                    details="checked computation failed",
                )
            return FunctionResult(
                function_name=function_name,
                value=raw.value,
                error=None,
                details="",
            )

        if isinstance(raw, float) and not math.isfinite(raw) and self.config.map_non_finite_to_error:
            logger.debug("%s%r → %s (non-finite %s)", function_name, args, XLError.NUMBER_INVALID.value, raw)
            return FunctionResult(
                function_name=function_name,
                value=None,
                error=XLError.NUMBER_INVALID,
                details=f"non-finite result: {raw}",
            )

        return FunctionResult(
            function_name=function_name,
            value=raw,
            error=None,
            details="",
        )

    def serialize(self, result: FunctionResult) -> dict[str, Any]:
        """Payload результата, проверенный по контракту cell_result.

        Raises:
            jsonschema.ValidationError: если результат нарушает контракт
        """
        payload = result.to_payload()
        validate_cell_result(payload)
        return payload

    def evaluate_payload(self, name: str, *args: Any) -> dict[str, Any]:
        """evaluate() + serialize(): то, что получает хост-движок."""
        return self.serialize(self.evaluate(name, *args))
