"""
Colombian Holidays MCP package initialization.
"""

from fastmcp import FastMCP
from pydantic import ValidationError

from .holidays import (
    HOLIDAY_RULES,
    HolidayChecker,
    easter_sunday,
    get_holidays_by_year,
    get_holidays_by_year_interval,
    next_monday,
)
from .models import EasterOffset, FixedDate, Holiday, HolidayRule, YearHolidays
from . import tools

# Initialize FastMCP instance
mcp = FastMCP(
    name="Colombian Holidays",
    instructions="Computes Colombian public holidays (Law 51 of 1983) for a year or a range of years, and checks whether a date is a holiday.",
)

# Register tools
mcp.tool(tools.get_holidays_by_year)
mcp.tool(tools.get_holidays_by_year_interval)
mcp.tool(tools.get_easter_sunday)
mcp.tool(tools.check_holiday)
mcp.tool(tools.get_next_holiday)

__all__ = [
    "mcp",
    "HOLIDAY_RULES",
    "HolidayChecker",
    "ValidationError",
    "easter_sunday",
    "next_monday",
    "get_holidays_by_year",
    "get_holidays_by_year_interval",
    "EasterOffset",
    "FixedDate",
    "Holiday",
    "HolidayRule",
    "YearHolidays",
]
