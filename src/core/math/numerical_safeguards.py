"""
Numerical Safeguards — IEEE-754 Math Primitives

Модуль приводит стандартный `math` к семантике IEEE-754, которую ожидает
формульный движок:
- log/sqrt вне области определения возвращают NaN, а не ValueError
- Деление на ноль даёт ±Inf (или NaN для 0/0), а не ZeroDivisionError
- cosh/sinh при переполнении насыщаются до ±Inf, а не OverflowError
- trunc/floor пропускают NaN/Inf без изменений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не бросает исключений на float входах
2. NaN на входе → NaN на выходе (кроме явно оговорённых случаев)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ГРАНИЦЫ
# =============================================================================

# Максимум 32-bit signed integer.
# Ограничивает число умножений в комбинаторике (как в хост-таблице)
INT32_MAX: Final[int] = 2**31 - 1

# Максимум 64-bit signed integer.
# Верхняя граница для кодирования в произвольное основание
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def to_float(value: float) -> float:
    """
    Приведение к float с насыщением до ±Inf.

    float(10**400) бросает OverflowError; здесь результат ±Inf.

    Examples:
        >>> to_float(3)
        3.0
        >>> to_float(-10**400)
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Целое, не помещающееся в double, невалидно.

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(to_float(value))


# =============================================================================
# IEEE-754 АРИФМЕТИКА
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754.

    В отличие от оператора `/` не бросает ZeroDivisionError:
    - x / ±0 → ±Inf (знак = sign(x) * sign(denominator), учитывая -0.0)
    - 0 / 0 и NaN / 0 → NaN

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(-2.0, 0.0)
        -inf
        >>> math.isnan(ieee_divide(0.0, 0.0))
        True
    """
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)

    return numerator / denominator


def ieee_log(value: float) -> float:
    """
    Натуральный логарифм с семантикой IEEE-754.

    Args:
        value: Аргумент логарифма

    Returns:
        - NaN если value < 0 или NaN
        - -Inf если value == ±0
        - +Inf если value == +Inf
        - math.log(value) иначе

    Examples:
        >>> ieee_log(1.0)
        0.0
        >>> ieee_log(0.0)
        -inf
        >>> math.isnan(ieee_log(-1.0))
        True
    """
    if math.isnan(value) or value < 0.0:
        return math.nan
    if value == 0.0:
        return -math.inf
    return math.log(value)


def ieee_sqrt(value: float) -> float:
    """
    Квадратный корень с семантикой IEEE-754: NaN для отрицательных аргументов.

    Examples:
        >>> ieee_sqrt(4.0)
        2.0
        >>> math.isnan(ieee_sqrt(-4.0))
        True
    """
    if value < 0.0:
        return math.nan
    return math.sqrt(value)


def ieee_cosh(value: float) -> float:
    """
    Гиперболический косинус с насыщением до +Inf при переполнении.

    math.cosh(1000.0) бросает OverflowError; здесь результат +Inf.
    """
    try:
        return math.cosh(value)
    except OverflowError:
        return math.inf


def ieee_sinh(value: float) -> float:
    """
    Гиперболический синус с насыщением до ±Inf при переполнении.
    """
    try:
        return math.sinh(value)
    except OverflowError:
        return math.copysign(math.inf, value)


# =============================================================================
# ОКРУГЛЕНИЕ К ЦЕЛОМУ
# =============================================================================


def truncate_toward_zero(value: float) -> float:
    """
    Отбрасывание дробной части (округление к нулю) без потери NaN/Inf.

    math.trunc бросает ValueError/OverflowError на NaN/Inf; здесь они
    возвращаются как есть.

    Examples:
        >>> truncate_toward_zero(2.9)
        2.0
        >>> truncate_toward_zero(-2.9)
        -2.0
        >>> truncate_toward_zero(float('inf'))
        inf
    """
    value = to_float(value)
    if not is_valid_float(value):
        return value
    return float(math.trunc(value))


def floor_float(value: float) -> float:
    """
    Округление вниз без потери NaN/Inf.

    Examples:
        >>> floor_float(2.9)
        2.0
        >>> floor_float(-2.1)
        -3.0
    """
    value = to_float(value)
    if not is_valid_float(value):
        return value
    return float(math.floor(value))
