"""Functions — встроенные функции таблицы поверх core.

Адаптер сопоставляет имена функций (COMBIN, FACT, ARABIC, BASE, ...)
с core-реализациями и переводит их сигналы ошибок в XLError.
"""

from .adapter import FunctionAdapterConfig, FunctionResult, XLFunctionAdapter

__all__ = [
    "FunctionAdapterConfig",
    "FunctionResult",
    "XLFunctionAdapter",
]
