"""
Angles — Конверсия угловых единиц

Единственный допустимый способ преобразований между:
- degrees (градусы, полный оборот = 360)
- radians (радианы, полный оборот = 2π)
- grads (грады, полный оборот = 400)

Функции линейные, без валидации: NaN/Inf проходят через арифметику без
изменений, исключения не бросаются.
"""

import math


def degrees_to_radians(degrees: float) -> float:
    """Градусы → радианы: (π / 180) * degrees"""
    return (math.pi / 180.0) * degrees


def radians_to_degrees(radians: float) -> float:
    """Радианы → градусы: (180 / π) * radians"""
    return (180.0 / math.pi) * radians


def grads_to_radians(grads: float) -> float:
    """Грады → радианы: (grads / 200) * π"""
    return (grads / 200.0) * math.pi


def radians_to_grads(radians: float) -> float:
    """Радианы → грады: (radians / π) * 200"""
    return (radians / math.pi) * 200.0


def degrees_to_grads(degrees: float) -> float:
    """Градусы → грады: degrees / 9 * 10"""
    return (degrees / 9.0) * 10.0


def grads_to_degrees(grads: float) -> float:
    """Грады → градусы: grads / 10 * 9"""
    return (grads / 10.0) * 9.0
