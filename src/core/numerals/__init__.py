"""
Numerals — Текстовые представления целых чисел.

Римские числа (декодирование) и позиционная запись в основаниях 2..36.
"""

from src.core.numerals.radix import DIGITS, RADIX_MAX, RADIX_MIN, change_base
from src.core.numerals.roman import ROMAN_SYMBOLS, roman_to_arabic

__all__ = [
    # Roman
    "ROMAN_SYMBOLS",
    "roman_to_arabic",
    # Radix
    "DIGITS",
    "RADIX_MIN",
    "RADIX_MAX",
    "change_base",
]
