"""
Holiday engine for Colombian public holidays (Law 51 of 1983).
"""

import logging
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Annotated, Optional

import yaml
from pydantic import Field, StrictInt, TypeAdapter, validate_call

from .models import Holiday, HolidayRule, YearHolidays

logger = logging.getLogger(__name__)

RULES_PATH = Path(__file__).with_name("rules.yaml")

# Bounds of datetime.date
MIN_YEAR = date.min.year
MAX_YEAR = date.max.year

Year = Annotated[StrictInt, Field(ge=MIN_YEAR, le=MAX_YEAR)]

_rules_adapter = TypeAdapter(list[HolidayRule])


def load_rules(path: Path | str = RULES_PATH) -> tuple[HolidayRule, ...]:
    """Load and validate a rule table from YAML."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return tuple(_rules_adapter.validate_python(data))


HOLIDAY_RULES: tuple[HolidayRule, ...] = load_rules()


@validate_call
def easter_sunday(year: Year) -> date:
    """Computes Easter Sunday with a simplified golden-number formula.

    This is not the corrected Gregorian computus and differs from it in some
    years (1981 gives April 26 instead of April 19). Holiday lists depend on
    this exact formula, so it is kept as is.
    """
    c = (19 * (year % 19) + 24) % 30
    d = 22 + c + ((2 * (year % 4) + 4 * (year % 7) + 6 * c + 5) % 7)
    if 1 <= d <= 31:
        return date(year, 3, d)
    return date(year, 4, d - 31)


def next_monday(d: date) -> date:
    """Rolls a date forward to the nearest Monday, Mondays are kept."""
    while d.weekday() != 0:
        d += timedelta(days=1)
    return d


def _holidays_for_year(year: int, easter: date) -> tuple[Holiday, ...]:
    """Resolve every rule against one year, given that year's Easter Sunday."""
    holidays = []
    for rule in HOLIDAY_RULES:
        if rule.is_movable:
            observed = easter + timedelta(days=rule.anchor.days)
        else:
            observed = rule.anchor.in_year(year)

        if rule.shift_to_monday:
            observed = next_monday(observed)

        holidays.append(
            Holiday(date=observed, name=rule.name, observed_shift=rule.shift_to_monday)
        )
    return tuple(holidays)


@validate_call
def get_holidays_by_year(year: Year) -> tuple[Holiday, ...]:
    """Returns the 18 holidays of a year in rule order (not sorted by date)."""
    return _holidays_for_year(year, easter_sunday(year))


@validate_call
def get_holidays_by_year_interval(
    year_start: StrictInt, year_end: StrictInt
) -> list[YearHolidays]:
    """Returns holidays for every year in [year_start, year_end).

    An empty interval gives an empty list.
    """
    result: list[YearHolidays] = []
    for year in range(year_start, year_end):
        easter = easter_sunday(year)
        result.append(YearHolidays(year=year, holidays=_holidays_for_year(year, easter)))

    logger.debug("Computed holidays for %d year(s) from %d", len(result), year_start)
    return result


class HolidayChecker:
    """Checks if a date is a holiday."""

    def is_holiday(self, d: date | datetime) -> bool:
        """Checks if date is a holiday."""
        return self.get_holiday_name(d) is not None

    def get_holiday_name(self, d: date | datetime) -> Optional[str]:
        """Returns holiday name or None.

        When two holidays fall on the same day the first one in rule order wins.
        """
        if isinstance(d, datetime):
            d = d.date()

        for holiday in get_holidays_by_year(d.year):
            if holiday.date == d:
                return holiday.name
        return None

    def next_holiday(self, after: date | datetime | None = None) -> Holiday:
        """Returns the first holiday strictly after a date (default: today)."""
        if isinstance(after, datetime):
            after = after.date()
        after = after or date.today()

        # Año Nuevo guarantees a hit in the following year
        for year in (after.year, after.year + 1):
            upcoming = [h for h in get_holidays_by_year(year) if h.date > after]
            if upcoming:
                return min(upcoming, key=lambda h: h.date)

        raise ValueError(f"No holiday found after {after.isoformat()}")
