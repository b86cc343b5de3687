"""
Data models for the holiday calendar.
Rules are loaded from rules.yaml, holidays are computed per query.
"""

from datetime import date
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

# Leap-year dates are rejected: a fixed holiday must exist every year.
_NON_LEAP_YEAR = 2001


def format_date(d: date) -> str:
    """Formats a date as zero-padded DD/MM/YYYY."""
    return f"{d.day:02d}/{d.month:02d}/{d.year:04d}"


class FixedDate(BaseModel):
    """A month/day pair repeating every year."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @model_validator(mode="after")
    def validate_calendar_date(self) -> "FixedDate":
        try:
            date(_NON_LEAP_YEAR, self.month, self.day)
        except ValueError:
            raise ValueError(
                f"{self.month:02d}/{self.day:02d} is not a date in every year"
            ) from None
        return self

    def in_year(self, year: int) -> date:
        return date(year, self.month, self.day)


class EasterOffset(BaseModel):
    """Signed number of days from Easter Sunday of the same year."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    days: int


class HolidayRule(BaseModel):
    """One entry of the legal holiday calendar."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    anchor: Union[FixedDate, EasterOffset]
    shift_to_monday: bool = False

    @property
    def is_movable(self) -> bool:
        """True for feasts defined relative to Easter Sunday."""
        return isinstance(self.anchor, EasterOffset)


class Holiday(BaseModel):
    """A holiday observed on a concrete date."""
    model_config = ConfigDict(frozen=True)

    date: date
    name: str
    # Copied from the rule, it does not say whether the date actually moved.
    observed_shift: bool

    @field_serializer("date")
    def serialize_date(self, value: date) -> str:
        return format_date(value)

    def __str__(self) -> str:
        return f"{format_date(self.date)} - {self.name}"

    def to_dict(self) -> dict[str, str | bool]:
        """Serialize to dictionary for API responses."""
        return self.model_dump(mode="json")


class YearHolidays(BaseModel):
    """All holidays of one year, in rule order."""
    model_config = ConfigDict(frozen=True)

    year: int
    holidays: tuple[Holiday, ...]

    def to_dict(self) -> dict:
        """Serialize to dictionary for API responses."""
        return {
            "year": self.year,
            "holidays": [holiday.to_dict() for holiday in self.holidays],
        }
