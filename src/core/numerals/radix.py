"""
Radix — Кодирование неотрицательного целого в основание 2..36

Цифры: 0-9, затем A-Z для значений 10..35.
"""

from typing import Final

from src.core.domain.errors import InvalidArgumentError
from src.core.math.numerical_safeguards import INT64_MAX

RADIX_MIN: Final[int] = 2
RADIX_MAX: Final[int] = 36

DIGITS: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def change_base(number: int, radix: int) -> str:
    """
    Запись числа в системе счисления с основанием radix.

    Остатки от деления добавляются перед ранее полученными цифрами,
    пока частное не станет 0.

    Args:
        number: Неотрицательное 64-bit целое
        radix: Основание, 2..36

    Returns:
        Строковое представление (старший разряд первым); "0" для нуля

    Raises:
        InvalidArgumentError: если number < 0, number > INT64_MAX
            или radix вне [2, 36]

    Examples:
        >>> change_base(255, 16)
        'FF'
        >>> change_base(0, 2)
        '0'
        >>> change_base(35, 36)
        'Z'
    """
    if number < 0:
        raise InvalidArgumentError(f"number must be greater or equal to 0, got {number}")
    if number > INT64_MAX:
        raise InvalidArgumentError(f"number must fit into 64-bit integer, got {number}")
    if radix < RADIX_MIN:
        raise InvalidArgumentError(f"radix must be greater or equal to {RADIX_MIN}, got {radix}")
    if radix > RADIX_MAX:
        raise InvalidArgumentError(f"radix must be smaller than or equal to {RADIX_MAX}, got {radix}")

    if number == 0:
        return "0"

    digits: list[str] = []
    remaining = number

    while remaining > 0:
        remaining, digit = divmod(remaining, radix)
        digits.insert(0, DIGITS[digit])

    return "".join(digits)
