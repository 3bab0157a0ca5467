"""
Roman — Декодер римских чисел

Алгоритм: слева направо ищем первое совпадение префикса остатка текста
с упорядоченной таблицей символов (двухбуквенные вычитательные формы
стоят перед однобуквенными, которые являются их префиксом: "CM" перед "C").
Сравнение регистронезависимое.

Декодер НЕ проверяет каноничность записи: "MMMMM", "IIII" и прочие
строки, совпадающие по префиксам, принимаются и декодируются.
Это существующий контракт, а не дефект.
"""

from typing import Final

from src.core.domain.errors import InvalidArgumentError

# =============================================================================
# ТАБЛИЦА СИМВОЛОВ
# =============================================================================

# Порядок значим: первое совпадение выигрывает
ROMAN_SYMBOLS: Final[tuple[tuple[str, int], ...]] = (
    ("m", 1000),
    ("cm", 900),
    ("d", 500),
    ("cd", 400),
    ("c", 100),
    ("xc", 90),
    ("l", 50),
    ("xl", 40),
    ("x", 10),
    ("ix", 9),
    ("v", 5),
    ("iv", 4),
    ("i", 1),
)


# =============================================================================
# ДЕКОДЕР
# =============================================================================


def roman_to_arabic(text: str) -> int:
    """
    Декодирование римского числа в целое.

    Args:
        text: Римское число (регистр не важен), пустая строка допустима

    Returns:
        Целое значение; 0 для пустой строки

    Raises:
        InvalidArgumentError: если остаток текста не совпадает ни с одним
            символом таблицы

    Examples:
        >>> roman_to_arabic("XIV")
        14
        >>> roman_to_arabic("mcmxciv")
        1994
        >>> roman_to_arabic("")
        0
    """
    total = 0
    position = 0

    while position < len(text):
        for symbol, value in ROMAN_SYMBOLS:
            end = position + len(symbol)
            if text[position:end].lower() == symbol:
                total += value
                position = end
                break
        else:
            raise InvalidArgumentError("text is not a valid roman number")

    return total
