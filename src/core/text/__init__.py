"""
Core text modules

Классификаторы форматов строк и текстовые/JSON операции.
"""

# Format Patterns
from src.core.text.patterns import (
    # Compiled patterns
    INTEGER_EXPRESSION,
    INVALID_CHARACTER_EXPRESSION,
    NATURAL_EXPRESSION,
    NUMERIC_EXPRESSION,
    REAL_EXPRESSION,
    SLUG_EXPRESSION,
    VALUE_EXPRESSION,
    # Comparison expressions
    ComparisonExpression,
    parse_comparison_expression,
    # Classifiers
    is_integer_text,
    is_natural,
    is_numeric_text,
    is_real_text,
    is_slug,
    # Invalid characters
    find_invalid_characters,
    has_invalid_characters,
    strip_invalid_characters,
)

# Text Functions
from src.core.text.functions import (
    URI_RESERVED_CHARACTERS,
    get_decoded_uri,
    get_encoded_uri,
    get_folded_text,
    get_json_object,
    get_json_text,
    get_lower_text,
    get_text,
    get_upper_text,
)

__all__ = [
    # Format Patterns — Compiled patterns
    "NATURAL_EXPRESSION",
    "INTEGER_EXPRESSION",
    "REAL_EXPRESSION",
    "NUMERIC_EXPRESSION",
    "SLUG_EXPRESSION",
    "VALUE_EXPRESSION",
    "INVALID_CHARACTER_EXPRESSION",
    # Format Patterns — Classifiers
    "is_natural",
    "is_integer_text",
    "is_real_text",
    "is_numeric_text",
    "is_slug",
    # Format Patterns — Comparison expressions
    "ComparisonExpression",
    "parse_comparison_expression",
    # Format Patterns — Invalid characters
    "find_invalid_characters",
    "has_invalid_characters",
    "strip_invalid_characters",
    # Text Functions
    "URI_RESERVED_CHARACTERS",
    "get_text",
    "get_lower_text",
    "get_upper_text",
    "get_folded_text",
    "get_encoded_uri",
    "get_decoded_uri",
    "get_json_text",
    "get_json_object",
]
