"""
Format Patterns — Классификаторы строк на регулярных выражениях

Набор фиксированных скомпилированных паттернов:
- natural / integer / real / numeric: числовые литералы
- slug: URL-safe токен из строчных букв, цифр и одиночных дефисов
- value expression: разбор "left <op> right" по границе оператора сравнения
- invalid character: поиск символов вне {буква, цифра, '-', '_', '.'}

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Числовые паттерны и slug сопоставляются со всей строкой (fullmatch):
   "12abc" не является natural, "12\\n" тоже
2. Классификаторы никогда не бросают исключений: несовпадение = False / None
3. Поиск невалидных символов Unicode-aware: \\w в str-паттернах покрывает
   буквы и цифры любых письменностей
"""

import re
from typing import Final, NamedTuple


# =============================================================================
# ПАТТЕРНЫ
# =============================================================================

NATURAL_EXPRESSION: Final[re.Pattern[str]] = re.compile(r"^[0-9][0-9]*$")

# Опциональный ведущий '-', затем цифры
INTEGER_EXPRESSION: Final[re.Pattern[str]] = re.compile(r"^-?[0-9][0-9]*$")

# Точка обязательна, цифры после неё опциональны ("3." валидно)
REAL_EXPRESSION: Final[re.Pattern[str]] = re.compile(r"^-?[0-9][0-9]*\.[0-9]*$")

# Объединение integer и real
NUMERIC_EXPRESSION: Final[re.Pattern[str]] = re.compile(r"^-?[0-9][0-9]*\.?[0-9]*$")

SLUG_EXPRESSION: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

# Группы: левая часть (lazy), оператор из [<=>]+, остаток
VALUE_EXPRESSION: Final[re.Pattern[str]] = re.compile(r"^(.*?)([<=>]+)(.*)$")

# Всё, что не буква, не цифра и не один из '-', '_', '.'
INVALID_CHARACTER_EXPRESSION: Final[re.Pattern[str]] = re.compile(r"[^\w\-.]")


# =============================================================================
# ЧИСЛОВЫЕ КЛАССИФИКАТОРЫ
# =============================================================================


def is_natural(text: str) -> bool:
    """
    Натуральное число: одна или более ASCII-цифр, без знака.

    Examples:
        >>> is_natural("007")
        True
        >>> is_natural("-3")
        False
    """
    return NATURAL_EXPRESSION.fullmatch(text) is not None


def is_integer_text(text: str) -> bool:
    """Целое: опциональный '-' и цифры ("-42", "42"; не "4.2", не "--1")."""
    return INTEGER_EXPRESSION.fullmatch(text) is not None


def is_real_text(text: str) -> bool:
    """Вещественное с обязательной точкой ("3.14", "3."; не "3")."""
    return REAL_EXPRESSION.fullmatch(text) is not None


def is_numeric_text(text: str) -> bool:
    """Integer или real ("3", "-3.14"; не "3.14.15")."""
    return NUMERIC_EXPRESSION.fullmatch(text) is not None


def is_slug(text: str) -> bool:
    """
    Slug: сегменты [a-z0-9]+, разделённые одиночными дефисами.

    Отклоняются заглавные буквы, ведущий/замыкающий дефис и пустые сегменты.
    """
    return SLUG_EXPRESSION.fullmatch(text) is not None


# =============================================================================
# ВЫРАЖЕНИЯ СРАВНЕНИЯ
# =============================================================================


class ComparisonExpression(NamedTuple):
    """Результат разбора выражения сравнения."""

    left: str
    operator: str
    right: str


def parse_comparison_expression(text: str) -> ComparisonExpression | None:
    """
    Разбор строки на левый операнд, оператор и правый операнд.

    Левая часть захватывается лениво, поэтому оператором становится первая
    непрерывная серия символов из '<', '=', '>'. Операнды не валидируются:
    это задача вызывающего кода (например, через is_numeric_text).

    Args:
        text: Исходная строка (однострочная)

    Returns:
        ComparisonExpression или None, если оператора нет

    Examples:
        >>> parse_comparison_expression("age>=18")
        ComparisonExpression(left='age', operator='>=', right='18')
        >>> parse_comparison_expression("age") is None
        True
    """
    match = VALUE_EXPRESSION.fullmatch(text)
    if match is None:
        return None

    left, operator, right = match.groups()
    return ComparisonExpression(left=left, operator=operator, right=right)


# =============================================================================
# НЕВАЛИДНЫЕ СИМВОЛЫ
# =============================================================================


def find_invalid_characters(text: str) -> list[str]:
    """
    Все символы строки, не входящие в допустимый набор, в порядке появления.

    Examples:
        >>> find_invalid_characters("café_2024.v1")
        []
        >>> find_invalid_characters("a b/c")
        [' ', '/']
    """
    return INVALID_CHARACTER_EXPRESSION.findall(text)


def has_invalid_characters(text: str) -> bool:
    """True, если в строке есть хотя бы один недопустимый символ."""
    return INVALID_CHARACTER_EXPRESSION.search(text) is not None


def strip_invalid_characters(text: str, replacement: str = "") -> str:
    """
    Замена каждого недопустимого символа на replacement.

    Args:
        text: Исходная строка
        replacement: Подстановка (default: удаление)

    Returns:
        Санитизированная строка
    """
    return INVALID_CHARACTER_EXPRESSION.sub(lambda _: replacement, text)
