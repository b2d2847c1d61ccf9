"""
Domain primitives.

Contains the canonical null values for identifiers, dates and times.
"""

from src.core.domain.nulls import (
    MINIMUM_PLAUSIBLE_YEAR,
    NULL_DATE,
    NULL_DATE_TIME,
    NULL_TIME,
    NULL_TUID,
    NULL_TUID_CHARACTER,
    NULL_TUID_LENGTH,
    NULL_UUID,
    DateFields,
    DateTimeFields,
    TimeFields,
    is_null_date,
    is_null_date_time,
    is_null_time,
    is_null_tuid,
    is_null_uuid,
    is_plausible_date,
)

__all__ = [
    # Identifiers
    "NULL_TUID",
    "NULL_TUID_CHARACTER",
    "NULL_TUID_LENGTH",
    "NULL_UUID",
    # Date/time models
    "DateFields",
    "TimeFields",
    "DateTimeFields",
    # Date/time null values
    "NULL_DATE",
    "NULL_TIME",
    "NULL_DATE_TIME",
    "MINIMUM_PLAUSIBLE_YEAR",
    # Checks
    "is_null_tuid",
    "is_null_uuid",
    "is_null_date",
    "is_null_time",
    "is_null_date_time",
    "is_plausible_date",
]
