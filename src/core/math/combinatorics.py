"""
Combinatorics — Сочетания и факториал с защитой от переполнения

Модуль обеспечивает:
- C(n, k) через итеративное мультипликативное накопление
  result = Π_{i=1..k} (n - i + 1) / i
  вместо n! / (k! (n-k)!), чтобы промежуточные факториалы не переполнялись
- Валидирующую обёртку combin_checked → CheckedResult
- Факториал с насыщением до +Inf

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакой рекурсии: вредоносный вход не может исчерпать стек
2. Переполнение детектируется после вычисления (Inf/NaN → #NUM!)
3. Размер задачи ограничен INT32_MAX (как в хост-таблице)
4. Как только аккумулятор стал Inf, вычисление прекращается
"""

import logging
import math
from dataclasses import dataclass

from src.core.domain.checked_result import CheckedResult
from src.core.domain.errors import XLError
from src.core.math.numerical_safeguards import (
    INT32_MAX,
    floor_float,
    is_valid_float,
    truncate_toward_zero,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CombinLimits:
    """Ограничения размера задачи для combin_checked."""

    # Операнд не помещается в int → столько умножений хост не допускает
    max_operand: float = float(INT32_MAX)


# =============================================================================
# СОЧЕТАНИЯ
# =============================================================================


def combin(n: float, k: float) -> float:
    """
    Число сочетаний C(n, k) без валидации.

    Args:
        n: Целое неотрицательное (как float)
        k: Целое неотрицательное (как float), k <= n

    Returns:
        C(n, k); может быть +Inf при переполнении

    Examples:
        >>> combin(5.0, 2.0)
        10.0
        >>> combin(10.0, 0.0)
        1.0
    """
    if k == 0:
        return 1.0

    result = 1.0
    i = 1
    while i <= k:
        result *= n
        result /= i

        # Inf * x / i остаётся Inf: дальнейшие итерации ничего не меняют
        if math.isinf(result):
            return result

        i += 1
        n -= 1

    return result


def combin_checked(
    number: float,
    number_chosen: float,
    limits: CombinLimits | None = None,
) -> CheckedResult:
    """
    C(number, number_chosen) с валидацией входов.

    Порядок проверок:
    1. Отрицательный вход → #NUM!
    2. floor() обоих входов (дробная часть отбрасывается)
    3. Операнд >= limits.max_operand → #NUM!
    4. n < k → #NUM!
    5. Результат Inf/NaN → #NUM!

    Args:
        number: Количество элементов
        number_chosen: Размер выборки
        limits: Ограничения размера задачи (default: CombinLimits())

    Returns:
        CheckedResult со значением или XLError.NUMBER_INVALID

    Examples:
        >>> combin_checked(5, 2).value
        10.0
        >>> combin_checked(2, 5).error
        <XLError.NUMBER_INVALID: '#NUM!'>
    """
    limits = limits or CombinLimits()

    if number < 0 or number_chosen < 0:
        logger.debug("combin_checked rejected negative input: %s, %s", number, number_chosen)
        return CheckedResult.failure(XLError.NUMBER_INVALID)

    n = floor_float(number)
    k = floor_float(number_chosen)

    # NaN не проходит ни одно сравнение ниже и дал бы NaN в combin()
    if not is_valid_float(n) or not is_valid_float(k):
        logger.debug("combin_checked rejected non-finite input: %s, %s", number, number_chosen)
        return CheckedResult.failure(XLError.NUMBER_INVALID)

    if n >= limits.max_operand or k >= limits.max_operand:
        logger.debug("combin_checked rejected operand above %s: %s, %s", limits.max_operand, n, k)
        return CheckedResult.failure(XLError.NUMBER_INVALID)

    if n < k:
        logger.debug("combin_checked rejected n < k: %s < %s", n, k)
        return CheckedResult.failure(XLError.NUMBER_INVALID)

    combinations = combin(n, k)
    if not is_valid_float(combinations):
        logger.debug("combin_checked overflow: C(%s, %s) = %s", n, k, combinations)
        return CheckedResult.failure(XLError.NUMBER_INVALID)

    return CheckedResult.success(combinations)


# =============================================================================
# ФАКТОРИАЛ
# =============================================================================


def factorial(n: float) -> float:
    """
    Факториал с насыщением до +Inf.

    n усекается к нулю, произведение накапливается итеративно по убыванию.
    Для n <= 1 (и NaN) возвращается 1.

    Examples:
        >>> factorial(5)
        120.0
        >>> factorial(5.9)
        120.0
        >>> factorial(0)
        1.0
        >>> factorial(1e9)
        inf
    """
    n = truncate_toward_zero(n)
    result = 1.0

    while n > 1:
        result *= n
        n -= 1

        # n может быть очень большим, останавливаемся на Inf
        if math.isinf(result):
            return result

    return result
