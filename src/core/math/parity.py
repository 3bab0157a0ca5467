"""
Parity — Проверка чётности для целых и вещественных значений

Вещественный вариант требует одновременно:
1. отсутствия дробной части (value % 1 == 0, точное сравнение без epsilon)
2. value % 2 == 0 (even) / value % 2 != 0 (odd)

Проверка только value % 2 ненадёжна для чисел, очень близких к целому
после деления, поэтому дробная часть проверяется отдельно и первой.
Значение с дробной частью не является ни чётным, ни нечётным.
"""


# =============================================================================
# ЦЕЛЫЕ
# =============================================================================


def is_even_int(value: int) -> bool:
    """Чётность целого: |value mod 2| == 0"""
    return abs(value % 2) == 0


def is_odd_int(value: int) -> bool:
    """Нечётность целого: |value mod 2| != 0"""
    return abs(value % 2) != 0


# =============================================================================
# ВЕЩЕСТВЕННЫЕ
# =============================================================================


def is_even_float(value: float) -> bool:
    """
    Чётность вещественного.

    Examples:
        >>> is_even_float(4.0)
        True
        >>> is_even_float(4.5)
        False
    """
    has_no_fraction = value % 1 == 0
    is_even = value % 2 == 0
    return has_no_fraction and is_even


def is_odd_float(value: float) -> bool:
    """
    Нечётность вещественного.

    Examples:
        >>> is_odd_float(3.0)
        True
        >>> is_odd_float(3.5)
        False
    """
    has_no_fraction = value % 1 == 0
    is_odd = value % 2 != 0
    return has_no_fraction and is_odd


# =============================================================================
# ДИСПЕТЧЕРИЗАЦИЯ
# =============================================================================


def is_even(value: int | float) -> bool:
    """Чётность: int → целочисленная проверка, иначе вещественная"""
    if isinstance(value, int):
        return is_even_int(value)
    return is_even_float(value)


def is_odd(value: int | float) -> bool:
    """Нечётность: int → целочисленная проверка, иначе вещественная"""
    if isinstance(value, int):
        return is_odd_int(value)
    return is_odd_float(value)
