"""
Core math modules

Границы точной целочисленной арифметики, угловые константы и числовые
операции стандартной библиотеки.
"""

# Numeric Bounds
from src.core.math.bounds import (
    # Integer bounds
    MAXIMUM_INTEGER,
    MINIMUM_INTEGER,
    # Angle constants
    DEGREES_TO_RADIANS,
    HALF_PI,
    PI,
    RADIANS_TO_DEGREES,
    TWO_PI,
    # Validation
    is_safe_integer,
    validate_safe_integer,
)

# Math Functions
from src.core.math.functions import (
    get_arc_cosinus,
    get_arc_sinus,
    get_arc_tangent,
    get_arc_tangent2,
    get_ceil_integer,
    get_cosinus,
    get_exponential,
    get_floor_integer,
    get_hypotenuse,
    get_integer,
    get_logarithm,
    get_logarithm10,
    get_maximum_real,
    get_minimum_real,
    get_number,
    get_positive_real,
    get_power,
    get_random,
    get_real,
    get_round_integer,
    get_sign,
    get_sinus,
    get_square_root,
    get_tangent,
    is_integer,
    is_nan,
)

__all__ = [
    # Numeric Bounds — Integer bounds
    "MINIMUM_INTEGER",
    "MAXIMUM_INTEGER",
    # Numeric Bounds — Angle constants
    "HALF_PI",
    "PI",
    "TWO_PI",
    "DEGREES_TO_RADIANS",
    "RADIANS_TO_DEGREES",
    # Numeric Bounds — Validation
    "is_safe_integer",
    "validate_safe_integer",
    # Math Functions — Checks and conversions
    "is_nan",
    "is_integer",
    "get_real",
    "get_integer",
    "get_number",
    # Math Functions — Arithmetic and rounding
    "get_minimum_real",
    "get_maximum_real",
    "get_positive_real",
    "get_sign",
    "get_floor_integer",
    "get_ceil_integer",
    "get_round_integer",
    "get_square_root",
    "get_hypotenuse",
    "get_power",
    "get_exponential",
    "get_logarithm",
    "get_logarithm10",
    # Math Functions — Trigonometry
    "get_cosinus",
    "get_sinus",
    "get_tangent",
    "get_arc_cosinus",
    "get_arc_sinus",
    "get_arc_tangent",
    "get_arc_tangent2",
    # Math Functions — Random
    "get_random",
]
