"""
MCP tool implementations for the holiday calendar.
This module contains the tool wrappers around the holiday engine.
"""

import logging
from datetime import date as Date
from typing import Annotated, Dict, List

from pydantic import Field, ValidationError

from . import holidays
from .holidays import HolidayChecker
from .models import format_date

logger = logging.getLogger(__name__)

holiday_checker = HolidayChecker()


def get_holidays_by_year(
    year: Annotated[
        int,
        Field(
            description="Calendar year to compute holidays for, e.g. 2025. Must be between 1 and 9999."
        ),
    ],
) -> List[Dict[str, str | bool]] | Dict[str, str]:
    """Get the 18 Colombian public holidays of a year under Law 51 of 1983. Holidays are returned in legal order (not sorted by date), each with its date as DD/MM/YYYY, its name, and observed_shift telling whether the rule moves it to the following Monday."""
    try:
        return [holiday.to_dict() for holiday in holidays.get_holidays_by_year(year)]
    except ValidationError as e:
        logger.error("Invalid year %r: %s", year, e)
        return {"error": f"Invalid year: {e}"}
    except Exception as e:
        logger.error("Error computing holidays for %r: %s", year, e)
        return {"error": f"Unexpected error: {e}"}


def get_holidays_by_year_interval(
    year_start: Annotated[
        int, Field(description="First year of the interval (included).")
    ],
    year_end: Annotated[
        int,
        Field(
            description="Year after the last one of the interval (excluded). If it is not greater than year_start the result is empty."
        ),
    ],
) -> List[Dict] | Dict[str, str]:
    """Get Colombian public holidays for every year from year_start up to, but not including, year_end. Returns one entry per year with the year and its 18 holidays in legal order."""
    try:
        return [
            year_holidays.to_dict()
            for year_holidays in holidays.get_holidays_by_year_interval(
                year_start, year_end
            )
        ]
    except ValidationError as e:
        logger.error("Invalid interval %r-%r: %s", year_start, year_end, e)
        return {"error": f"Invalid interval: {e}"}
    except Exception as e:
        logger.error("Error computing holidays for %r-%r: %s", year_start, year_end, e)
        return {"error": f"Unexpected error: {e}"}


def get_easter_sunday(
    year: Annotated[int, Field(description="Calendar year, between 1 and 9999.")],
) -> Dict[str, str | int]:
    """Get the Easter Sunday date used as anchor for the movable Colombian holidays (Holy Thursday, Good Friday, Ascension, Corpus Christi, Sacred Heart). Returns the year and the date as DD/MM/YYYY."""
    try:
        easter = holidays.easter_sunday(year)
        return {"year": year, "date": format_date(easter)}
    except ValidationError as e:
        logger.error("Invalid year %r: %s", year, e)
        return {"error": f"Invalid year: {e}"}
    except Exception as e:
        logger.error("Error computing Easter Sunday for %r: %s", year, e)
        return {"error": f"Unexpected error: {e}"}


def check_holiday(
    date: Annotated[
        str,
        Field(description="ISO 8601 date to check. Format: YYYY-MM-DD, e.g. 2025-07-20"),
    ],
) -> Dict[str, str | bool | None]:
    """Check whether a date is a Colombian public holiday. Returns the date, is_holiday, and the holiday name (null when it is a regular day)."""
    try:
        d = Date.fromisoformat(date)
        name = holiday_checker.get_holiday_name(d)
        return {"date": d.isoformat(), "is_holiday": name is not None, "name": name}
    except ValueError as e:
        logger.error("Invalid date %r: %s", date, e)
        return {"error": f"Invalid date: {e}"}


def get_next_holiday(
    after: Annotated[
        str,
        Field(
            description="Optional ISO 8601 date (YYYY-MM-DD). The first holiday strictly after it is returned. Defaults to today.",
            default="",
        ),
    ] = "",
) -> Dict[str, str | bool]:
    """Get the next Colombian public holiday after a date (today by default), with its date as DD/MM/YYYY and its name."""
    try:
        start = Date.fromisoformat(after) if after else None
        return holiday_checker.next_holiday(start).to_dict()
    except ValueError as e:
        logger.error("Invalid date %r: %s", after, e)
        return {"error": f"Invalid date: {e}"}


__all__ = [
    "get_holidays_by_year",
    "get_holidays_by_year_interval",
    "get_easter_sunday",
    "check_holiday",
    "get_next_holiday",
]
