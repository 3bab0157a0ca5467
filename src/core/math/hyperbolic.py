"""
Hyperbolic — Обратные и обратно-реципрокные гиперболические функции

Модуль вычисляет функции напрямую по логарифмическим формулам
(без итеративного решения):

    asinh(x) = ln(x + sqrt(x² + 1))
    acosh(x) = ln(x + sqrt(x² - 1))        x ≥ 1
    atanh(x) = ln((1 + x) / (1 - x)) / 2   |x| < 1

    acoth(x) = atanh(1/x)
    asech(x) = acosh(1/x)
    acsch(x) = asinh(1/x)

    sech(x) = 1 / cosh(x)
    csch(x) = 1 / sinh(x)
    coth(x) = cosh(x) / sinh(x)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не бросает исключений
2. Выход за область определения → NaN или ±Inf (IEEE-754)
3. Реципрокные формы вычисляются подстановкой 1/x в базовую форму;
   при x = 0 Inf распространяется через базовую формулу
"""

from src.core.math.numerical_safeguards import (
    ieee_cosh,
    ieee_divide,
    ieee_log,
    ieee_sinh,
    ieee_sqrt,
)

# =============================================================================
# БАЗОВЫЕ ФОРМЫ
# =============================================================================


def asinh(x: float) -> float:
    """
    Обратный гиперболический синус, определён для всех вещественных x.

    Examples:
        >>> asinh(0.0)
        0.0
    """
    return ieee_log(x + ieee_sqrt(x * x + 1.0))


def acosh(x: float) -> float:
    """
    Обратный гиперболический косинус.

    Для x < 1 аргумент корня отрицателен (или логарифма) → NaN.

    Examples:
        >>> acosh(1.0)
        0.0
        >>> import math; math.isnan(acosh(0.5))
        True
    """
    return ieee_log(x + ieee_sqrt((x * x) - 1.0))


def atanh(x: float) -> float:
    """
    Обратный гиперболический тангенс.

    Returns:
        - конечное значение для |x| < 1
        - +Inf при x = 1, -Inf при x = -1 (деление на ноль в аргументе log)
        - NaN при |x| > 1

    Examples:
        >>> atanh(0.0)
        0.0
        >>> atanh(1.0)
        inf
    """
    return ieee_log(ieee_divide(1.0 + x, 1.0 - x)) / 2.0


# =============================================================================
# РЕЦИПРОКНЫЕ ФОРМЫ
# =============================================================================


def acoth(x: float) -> float:
    """Обратный гиперболический котангенс: atanh(1/x)"""
    return atanh(ieee_divide(1.0, x))


def asech(x: float) -> float:
    """Обратный гиперболический секанс: acosh(1/x)"""
    return acosh(ieee_divide(1.0, x))


def acsch(x: float) -> float:
    """Обратный гиперболический косеканс: asinh(1/x)"""
    return asinh(ieee_divide(1.0, x))


# =============================================================================
# ПРЯМЫЕ РЕЦИПРОКНЫЕ ФУНКЦИИ
# =============================================================================


def sech(x: float) -> float:
    """
    Гиперболический секанс: 1 / cosh(x).

    Конечен везде; для больших |x| стремится к 0.
    """
    return ieee_divide(1.0, ieee_cosh(x))


def csch(x: float) -> float:
    """
    Гиперболический косеканс: 1 / sinh(x).

    При x = 0 → ±Inf.
    """
    return ieee_divide(1.0, ieee_sinh(x))


def coth(x: float) -> float:
    """
    Гиперболический котангенс: cosh(x) / sinh(x).

    При x = 0 → ±Inf; для больших |x| (Inf / Inf) → NaN.
    """
    return ieee_divide(ieee_cosh(x), ieee_sinh(x))
