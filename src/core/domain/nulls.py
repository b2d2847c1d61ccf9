"""
Null Values — Канонические null-значения для идентификаторов, дат и времени

Единственное определение "нет значения" для общих domain-типов:
- TUID и UUID идентификаторы (строки фиксированной формы)
- Дата {year, month, day}
- Время {hour, minute, second, millisecond, microsecond}
- Дата-время (объединение полей даты и времени)

Проверка "является ли значение null" выполняется сравнением с опубликованной
константой: точное совпадение строки для идентификаторов, покомпонентное
равенство для составных типов. Операции "создать null X" нет.

КОНВЕНЦИЯ (не проверяется при конструировании):
1. Год 1000 никогда не является реальной бизнес-датой
2. UUID из одних нулей является зарезервированным nil UUID
"""

from datetime import date, datetime, time
from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# ИДЕНТИФИКАТОРЫ
# =============================================================================

# Символ-заполнитель и длина null TUID (22 символа base64url = 16 байт)
NULL_TUID_CHARACTER: Final[str] = "A"
NULL_TUID_LENGTH: Final[int] = 22

NULL_TUID: Final[str] = NULL_TUID_CHARACTER * NULL_TUID_LENGTH

# nil UUID в каноническом текстовом виде 8-4-4-4-12
NULL_UUID: Final[str] = "00000000-0000-0000-0000-000000000000"


# =============================================================================
# МОДЕЛИ ДАТЫ И ВРЕМЕНИ
# =============================================================================


class DateFields(BaseModel):
    """
    Календарная дата как структура {year, month, day}.

    Ограничения полей соответствуют естественным диапазонам; существование
    даты в календаре (например, 31 февраля) здесь не проверяется.
    """

    year: int = Field(..., ge=1, description="Год")
    month: int = Field(..., ge=1, le=12, description="Месяц 1-12")
    day: int = Field(..., ge=1, le=31, description="День 1-31")

    model_config = {"frozen": True}

    @classmethod
    def from_date(cls, value: date) -> "DateFields":
        """Построение из datetime.date."""
        return cls(year=value.year, month=value.month, day=value.day)

    def to_date(self) -> date:
        """
        Конверсия в datetime.date.

        Raises:
            ValueError: Если тройка не является календарной датой
        """
        return date(self.year, self.month, self.day)


class TimeFields(BaseModel):
    """
    Время суток с точностью до микросекунды.

    В отличие от datetime.time, доли секунды хранятся двумя полями:
    millisecond (0-999) и microsecond (0-999).
    """

    hour: int = Field(..., ge=0, le=23, description="Час 0-23")
    minute: int = Field(..., ge=0, le=59, description="Минута 0-59")
    second: int = Field(..., ge=0, le=59, description="Секунда 0-59")
    millisecond: int = Field(..., ge=0, le=999, description="Миллисекунда 0-999")
    microsecond: int = Field(..., ge=0, le=999, description="Микросекунда 0-999")

    model_config = {"frozen": True}

    @classmethod
    def from_time(cls, value: time) -> "TimeFields":
        """
        Построение из datetime.time.

        microsecond из stdlib (0-999999) раскладывается на millisecond и
        microsecond. tzinfo отбрасывается.
        """
        millisecond, microsecond = divmod(value.microsecond, 1000)
        return cls(
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            millisecond=millisecond,
            microsecond=microsecond,
        )

    def to_time(self) -> time:
        """Конверсия в naive datetime.time."""
        return time(
            self.hour,
            self.minute,
            self.second,
            self.millisecond * 1000 + self.microsecond,
        )


class DateTimeFields(BaseModel):
    """
    Дата и время одной структурой: поля DateFields, затем поля TimeFields.
    """

    year: int = Field(..., ge=1, description="Год")
    month: int = Field(..., ge=1, le=12, description="Месяц 1-12")
    day: int = Field(..., ge=1, le=31, description="День 1-31")
    hour: int = Field(..., ge=0, le=23, description="Час 0-23")
    minute: int = Field(..., ge=0, le=59, description="Минута 0-59")
    second: int = Field(..., ge=0, le=59, description="Секунда 0-59")
    millisecond: int = Field(..., ge=0, le=999, description="Миллисекунда 0-999")
    microsecond: int = Field(..., ge=0, le=999, description="Микросекунда 0-999")

    model_config = {"frozen": True}

    @classmethod
    def combine(cls, date_part: DateFields, time_part: TimeFields) -> "DateTimeFields":
        """Покомпонентная конкатенация даты и времени."""
        return cls(**date_part.model_dump(), **time_part.model_dump())

    @classmethod
    def from_datetime(cls, value: datetime) -> "DateTimeFields":
        """Построение из datetime.datetime (tzinfo отбрасывается)."""
        return cls.combine(DateFields.from_date(value.date()), TimeFields.from_time(value.time()))

    def date_fields(self) -> DateFields:
        return DateFields(year=self.year, month=self.month, day=self.day)

    def time_fields(self) -> TimeFields:
        return TimeFields(
            hour=self.hour,
            minute=self.minute,
            second=self.second,
            millisecond=self.millisecond,
            microsecond=self.microsecond,
        )

    def to_datetime(self) -> datetime:
        """
        Конверсия в naive datetime.datetime.

        Raises:
            ValueError: Если дата не существует в календаре
        """
        return datetime.combine(self.date_fields().to_date(), self.time_fields().to_time())


# =============================================================================
# NULL-КОНСТАНТЫ
# =============================================================================

NULL_DATE: Final[DateFields] = DateFields(year=1000, month=1, day=1)

NULL_TIME: Final[TimeFields] = TimeFields(
    hour=0,
    minute=0,
    second=0,
    millisecond=0,
    microsecond=0,
)

NULL_DATE_TIME: Final[DateTimeFields] = DateTimeFields.combine(NULL_DATE, NULL_TIME)

# Минимальный год, который может считаться реальной датой
MINIMUM_PLAUSIBLE_YEAR: Final[int] = NULL_DATE.year + 1


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_null_tuid(value: str) -> bool:
    """Точное сравнение строки с NULL_TUID."""
    return value == NULL_TUID


def is_null_uuid(value: str) -> bool:
    """
    Точное сравнение строки с NULL_UUID.

    Регистр и форма не нормализуются: "{00000000-...}" или строка без
    дефисов null не считаются.
    """
    return value == NULL_UUID


def is_null_date(value: DateFields) -> bool:
    """Покомпонентное сравнение с NULL_DATE."""
    return value == NULL_DATE


def is_null_time(value: TimeFields) -> bool:
    """Покомпонентное сравнение с NULL_TIME."""
    return value == NULL_TIME


def is_null_date_time(value: DateTimeFields) -> bool:
    """Покомпонентное сравнение с NULL_DATE_TIME."""
    return value == NULL_DATE_TIME


def is_plausible_date(value: DateFields) -> bool:
    """
    Проверка, может ли значение быть реальной датой.

    Дата правдоподобна, если:
    - тройка {year, month, day} существует в календаре
    - year >= MINIMUM_PLAUSIBLE_YEAR

    NULL_DATE эту проверку никогда не проходит. Сам модуль её не применяет:
    это эталонная проверка для вызывающего кода.

    Args:
        value: Проверяемая дата

    Returns:
        True если дата существует и лежит вне зарезервированного диапазона

    Examples:
        >>> is_plausible_date(DateFields(year=2024, month=2, day=29))
        True
        >>> is_plausible_date(DateFields(year=2023, month=2, day=29))
        False
        >>> is_plausible_date(NULL_DATE)
        False
    """
    if value.year < MINIMUM_PLAUSIBLE_YEAR:
        return False

    try:
        value.to_date()
    except ValueError:
        return False

    return True
