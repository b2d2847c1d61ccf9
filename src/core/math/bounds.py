"""
Numeric Bounds — Границы точной целочисленной арифметики и угловые константы

Публикует пороги диапазона целых чисел, в котором арифметика в IEEE-754
double precision гарантированно точна: ±(2**53 - 1).

Модуль ничего не ограничивает (clamp) сам: вызывающий код сравнивает свои
значения с границами до того, как полагаться на точность.
"""

import math
from typing import Final

# =============================================================================
# ГРАНИЦЫ ЦЕЛЫХ ЧИСЕЛ
# =============================================================================

# Наибольшее целое, точно представимое в double: 2**53 - 1
MAXIMUM_INTEGER: Final[int] = 9_007_199_254_740_991

# Симметрично относительно нуля
MINIMUM_INTEGER: Final[int] = -9_007_199_254_740_991


# =============================================================================
# УГЛОВЫЕ КОНСТАНТЫ
# =============================================================================

HALF_PI: Final[float] = math.pi * 0.5

PI: Final[float] = math.pi

TWO_PI: Final[float] = math.pi * 2

# Множители конверсии: radians = degrees * DEGREES_TO_RADIANS
DEGREES_TO_RADIANS: Final[float] = math.pi / 180

RADIANS_TO_DEGREES: Final[float] = 180 / math.pi


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_safe_integer(value: object) -> bool:
    """
    Проверка, является ли значение целым в безопасном диапазоне.

    Принимаются int (кроме bool) и целочисленные конечные float.

    Args:
        value: Проверяемое значение

    Returns:
        True если MINIMUM_INTEGER <= value <= MAXIMUM_INTEGER и value целое

    Examples:
        >>> is_safe_integer(2**53 - 1)
        True
        >>> is_safe_integer(2**53)
        False
        >>> is_safe_integer(3.0)
        True
        >>> is_safe_integer(3.5)
        False
    """
    if isinstance(value, bool):
        return False

    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return False
    elif not isinstance(value, int):
        return False

    return MINIMUM_INTEGER <= value <= MAXIMUM_INTEGER


def validate_safe_integer(value: object, name: str) -> None:
    """
    Валидация, что значение является целым в безопасном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если значение не целое или вне [MINIMUM_INTEGER, MAXIMUM_INTEGER]
    """
    if not is_safe_integer(value):
        raise ValueError(
            f"{name} must be an integer within [{MINIMUM_INTEGER}, {MAXIMUM_INTEGER}], "
            f"got {value!r}"
        )
