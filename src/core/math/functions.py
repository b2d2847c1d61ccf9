"""
Math Functions — Числовые операции стандартной библиотеки под общими именами

Прямые ссылки на math / random / builtins: своей логики модуль не добавляет,
контракты и исключения (ValueError, TypeError, OverflowError) совпадают с
исходными функциями.
"""

import math
import random


# =============================================================================
# ПРОВЕРКИ И ПРЕОБРАЗОВАНИЯ
# =============================================================================

is_nan = math.isnan

get_real = float

get_integer = int

get_number = float


def is_integer(value: object) -> bool:
    """
    Проверка, является ли значение целым числом.

    int (кроме bool) и float с нулевой дробной частью; NaN/Inf дают False.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    return False


# =============================================================================
# АРИФМЕТИКА И ОКРУГЛЕНИЕ
# =============================================================================

get_minimum_real = min

get_maximum_real = max

get_positive_real = abs

get_floor_integer = math.floor

get_ceil_integer = math.ceil

# Банковское округление (round half to even), как у builtins.round
get_round_integer = round

get_square_root = math.sqrt

get_hypotenuse = math.hypot

get_power = math.pow

get_exponential = math.exp

get_logarithm = math.log

get_logarithm10 = math.log10


def get_sign(value: float) -> float:
    """
    Знак числа: 1.0, -1.0 или само значение для 0.0 / -0.0 / NaN.

    Examples:
        >>> get_sign(-3.5)
        -1.0
        >>> get_sign(0.0)
        0.0
    """
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return value


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================

get_cosinus = math.cos

get_sinus = math.sin

get_tangent = math.tan

get_arc_cosinus = math.acos

get_arc_sinus = math.asin

get_arc_tangent = math.atan

get_arc_tangent2 = math.atan2


# =============================================================================
# СЛУЧАЙНЫЕ ЧИСЛА
# =============================================================================

# Равномерно в [0.0, 1.0)
get_random = random.random
