"""
Errors — Таксономия ошибок формульного движка

Два канала ошибок:
1. XLError — значение ошибки ячейки (#NUM!, #VALUE!, ...), возвращается
   внутри CheckedResult или формируется адаптером функций
2. InvalidArgumentError — исключение для нарушений контракта вызова
   (невалидный текст римского числа, основание вне 2..36 и т.п.)
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class XLError(str, Enum):
    """
    Значение ошибки ячейки.

    Значения enum совпадают с литералами ошибок, которые видит пользователь.
    """

    NUMBER_INVALID = "#NUM!"
    INCOMPATIBLE_VALUE = "#VALUE!"
    DIVISION_BY_ZERO = "#DIV/0!"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgumentError(ValueError):
    """
    Аргумент вне контракта функции.

    Бросается декодером римских чисел и кодировщиком оснований.
    Не заменяется числовым sentinel (0, NaN): вызывающий обязан обработать
    ошибку явно.
    """
