"""
Тесты для модуля Null Values

Проверяет:
1. Форму null-идентификаторов (TUID, UUID)
2. Значения и неизменяемость NULL_DATE / NULL_TIME / NULL_DATE_TIME
3. Покомпонентное сравнение через is_null_*
4. Ограничения полей моделей даты и времени
5. Конверсию в datetime и обратно
6. Правдоподобие даты (null-дата никогда не проходит)
"""

import uuid
from datetime import date, datetime, time

import pytest
from pydantic import ValidationError

from src.core.domain import (
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
from src.core.text import INVALID_CHARACTER_EXPRESSION


# =============================================================================
# ИДЕНТИФИКАТОРЫ
# =============================================================================


class TestNullIdentifiers:
    """Тесты для NULL_TUID и NULL_UUID"""

    def test_tuid_is_repeated_character(self) -> None:
        """TUID состоит из одного символа, повторённого N раз"""
        assert NULL_TUID == "AAAAAAAAAAAAAAAAAAAAAA"
        assert len(NULL_TUID) == NULL_TUID_LENGTH == 22
        assert set(NULL_TUID) == {NULL_TUID_CHARACTER}

    def test_tuid_contains_only_allowed_characters(self) -> None:
        """TUID не содержит символов, которые санитизация бы вырезала"""
        assert INVALID_CHARACTER_EXPRESSION.search(NULL_TUID) is None

    def test_uuid_is_nil_uuid(self) -> None:
        """NULL_UUID совпадает с nil UUID стандартной библиотеки"""
        assert NULL_UUID == str(uuid.UUID(int=0))
        assert [len(group) for group in NULL_UUID.split("-")] == [8, 4, 4, 4, 12]

    def test_is_null_tuid_exact_match(self) -> None:
        """Сравнение TUID — точное совпадение строки"""
        assert is_null_tuid("A" * 22)
        assert not is_null_tuid("A" * 21)
        assert not is_null_tuid("a" * 22)
        assert not is_null_tuid("")

    def test_is_null_uuid_exact_match(self) -> None:
        """Другие формы записи nil UUID null не считаются"""
        assert is_null_uuid("00000000-0000-0000-0000-000000000000")
        assert not is_null_uuid("00000000000000000000000000000000")
        assert not is_null_uuid("{00000000-0000-0000-0000-000000000000}")
        assert not is_null_uuid(str(uuid.uuid4()))


# =============================================================================
# ДАТА И ВРЕМЯ
# =============================================================================


class TestNullDateTime:
    """Тесты для NULL_DATE, NULL_TIME и NULL_DATE_TIME"""

    def test_null_date_values(self) -> None:
        """NULL_DATE = {1000, 1, 1}"""
        assert NULL_DATE.model_dump() == {"year": 1000, "month": 1, "day": 1}

    def test_null_time_values(self) -> None:
        """NULL_TIME — все поля равны нулю"""
        assert NULL_TIME.model_dump() == {
            "hour": 0,
            "minute": 0,
            "second": 0,
            "millisecond": 0,
            "microsecond": 0,
        }

    def test_null_date_time_is_concatenation(self) -> None:
        """NULL_DATE_TIME = поля NULL_DATE + поля NULL_TIME"""
        expected = {**NULL_DATE.model_dump(), **NULL_TIME.model_dump()}
        assert NULL_DATE_TIME.model_dump() == expected
        assert list(NULL_DATE_TIME.model_dump()) == [
            "year",
            "month",
            "day",
            "hour",
            "minute",
            "second",
            "millisecond",
            "microsecond",
        ]

    def test_null_date_time_splits_back(self) -> None:
        """Половины NULL_DATE_TIME равны NULL_DATE и NULL_TIME"""
        assert NULL_DATE_TIME.date_fields() == NULL_DATE
        assert NULL_DATE_TIME.time_fields() == NULL_TIME

    def test_values_are_frozen(self) -> None:
        """Null-значения нельзя изменить"""
        with pytest.raises(ValidationError):
            NULL_DATE.year = 2000  # type: ignore[misc]

        with pytest.raises(ValidationError):
            NULL_TIME.hour = 1  # type: ignore[misc]

        with pytest.raises(ValidationError):
            NULL_DATE_TIME.day = 2  # type: ignore[misc]

    def test_values_stable_across_reads(self) -> None:
        """Повторное чтение возвращает тот же объект"""
        from src.core.domain import nulls

        assert nulls.NULL_DATE is NULL_DATE
        assert nulls.NULL_TIME is NULL_TIME
        assert nulls.NULL_DATE_TIME is NULL_DATE_TIME

    def test_is_null_date_compares_fields(self) -> None:
        """Равная по полям дата считается null, даже если это другой объект"""
        assert is_null_date(DateFields(year=1000, month=1, day=1))
        assert not is_null_date(DateFields(year=1000, month=1, day=2))
        assert not is_null_date(DateFields(year=2024, month=1, day=1))

    def test_is_null_time_compares_fields(self) -> None:
        """Любое ненулевое поле делает время не-null"""
        zero = dict(hour=0, minute=0, second=0, millisecond=0, microsecond=0)
        assert is_null_time(TimeFields(**zero))
        assert not is_null_time(TimeFields(**{**zero, "microsecond": 1}))
        assert not is_null_time(TimeFields(**{**zero, "hour": 23}))

    def test_is_null_date_time_compares_fields(self) -> None:
        """Null дата-время требует null даты и null времени"""
        assert is_null_date_time(DateTimeFields.combine(NULL_DATE, NULL_TIME))
        other_time = TimeFields(hour=12, minute=0, second=0, millisecond=0, microsecond=0)
        assert not is_null_date_time(DateTimeFields.combine(NULL_DATE, other_time))


class TestFieldConstraints:
    """Тесты ограничений полей"""

    @pytest.mark.parametrize(
        "fields",
        [
            {"year": 0, "month": 1, "day": 1},
            {"year": 2024, "month": 0, "day": 1},
            {"year": 2024, "month": 13, "day": 1},
            {"year": 2024, "month": 1, "day": 0},
            {"year": 2024, "month": 1, "day": 32},
        ],
    )
    def test_date_out_of_range_rejected(self, fields: dict) -> None:
        """Поля даты вне естественных диапазонов отклоняются"""
        with pytest.raises(ValidationError):
            DateFields(**fields)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("hour", 24),
            ("minute", 60),
            ("second", 60),
            ("millisecond", 1000),
            ("microsecond", 1000),
            ("hour", -1),
        ],
    )
    def test_time_out_of_range_rejected(self, field: str, value: int) -> None:
        """Поля времени вне естественных диапазонов отклоняются"""
        fields = dict(hour=0, minute=0, second=0, millisecond=0, microsecond=0)
        fields[field] = value
        with pytest.raises(ValidationError):
            TimeFields(**fields)

    def test_time_upper_bounds_accepted(self) -> None:
        """Верхние границы включительно"""
        value = TimeFields(hour=23, minute=59, second=59, millisecond=999, microsecond=999)
        assert value.hour == 23
        assert value.microsecond == 999

    def test_date_time_bounds_match_parts(self) -> None:
        """Поля DateTimeFields повторяют ограничения DateFields и TimeFields в том же порядке"""
        parts = {**DateFields.model_fields, **TimeFields.model_fields}
        combined = DateTimeFields.model_fields
        assert list(combined) == list(parts)
        for name, field in parts.items():
            assert combined[name].metadata == field.metadata, name
            assert combined[name].annotation == field.annotation, name


class TestDatetimeConversion:
    """Тесты конверсии в datetime и обратно"""

    def test_from_time_splits_microseconds(self) -> None:
        """microsecond stdlib раскладывается на millisecond + microsecond"""
        fields = TimeFields.from_time(time(13, 45, 30, 123456))
        assert fields.millisecond == 123
        assert fields.microsecond == 456
        assert fields.to_time() == time(13, 45, 30, 123456)

    def test_date_conversion(self) -> None:
        """DateFields <-> datetime.date"""
        fields = DateFields.from_date(date(2024, 2, 29))
        assert fields == DateFields(year=2024, month=2, day=29)
        assert fields.to_date() == date(2024, 2, 29)

    def test_null_date_converts_to_stdlib(self) -> None:
        """Год 1000 представим в datetime.date"""
        assert NULL_DATE.to_date() == date(1000, 1, 1)
        assert NULL_DATE_TIME.to_datetime() == datetime(1000, 1, 1)

    def test_datetime_conversion(self) -> None:
        """DateTimeFields <-> datetime.datetime"""
        value = datetime(2024, 6, 1, 8, 30, 15, 7)
        fields = DateTimeFields.from_datetime(value)
        assert fields.millisecond == 0
        assert fields.microsecond == 7
        assert fields.to_datetime() == value

    def test_impossible_calendar_date_raises_on_conversion(self) -> None:
        """31 февраля проходит ограничения полей, но не конверсию"""
        fields = DateFields(year=2024, month=2, day=31)
        with pytest.raises(ValueError):
            fields.to_date()


# =============================================================================
# ПРАВДОПОДОБИЕ ДАТЫ
# =============================================================================


class TestPlausibleDate:
    """Тесты для is_plausible_date"""

    def test_null_date_is_not_plausible(self) -> None:
        """NULL_DATE никогда не проходит проверку"""
        assert not is_plausible_date(NULL_DATE)
        assert not is_plausible_date(NULL_DATE_TIME.date_fields())

    def test_regular_date_is_plausible(self) -> None:
        """Обычная дата проходит проверку"""
        assert is_plausible_date(DateFields(year=2024, month=2, day=29))

    def test_minimum_year_boundary(self) -> None:
        """Граница — первый год после null-года"""
        assert MINIMUM_PLAUSIBLE_YEAR == NULL_DATE.year + 1
        assert is_plausible_date(DateFields(year=MINIMUM_PLAUSIBLE_YEAR, month=1, day=1))
        assert not is_plausible_date(DateFields(year=999, month=12, day=31))

    def test_nonexistent_date_is_not_plausible(self) -> None:
        """Несуществующая календарная дата отклоняется без исключения"""
        assert not is_plausible_date(DateFields(year=2023, month=2, day=29))
        assert not is_plausible_date(DateFields(year=2024, month=4, day=31))
