"""Pure calendar calculations — no UI dependencies.

Months are 0-based here (0 = January .. 11 = December). Only
:class:`selection.SelectedDate` uses 1-based months.
"""

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date

from errors import InvalidArgumentError

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# None is a blank cell, an int is a day of the month.
DayCell = int | None
WeekRow = list[DayCell]
MonthGrid = list[WeekRow]


def _check_month(month: int) -> None:
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidArgumentError(f"month must be an int, got {month!r}")
    if not 0 <= month <= 11:
        raise InvalidArgumentError(f"month must be in 0..11, got {month}")


def _check_year(year: int) -> None:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidArgumentError(f"year must be an int, got {year!r}")
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidArgumentError(f"year must be in {MINYEAR}..{MAXYEAR}, got {year}")


@dataclass(frozen=True)
class CalendarPeriod:
    """One displayed calendar page."""

    year: int
    month: int

    def __post_init__(self) -> None:
        _check_year(self.year)
        _check_month(self.month)

    @classmethod
    def from_date(cls, d: date) -> "CalendarPeriod":
        return cls(d.year, d.month - 1)

    @property
    def label(self) -> str:
        """Header text, e.g. ``"January 2016"``."""
        return f"{calendar.month_name[self.month + 1]} {self.year}"

    def shift(self, months: int) -> "CalendarPeriod":
        """Return the period *months* later (earlier when negative)."""
        year, month = divmod(self.year * 12 + self.month + months, 12)
        return CalendarPeriod(year, month)

    def contains(self, d: date) -> bool:
        return d.year == self.year and d.month == self.month + 1


def days_in_month(year: int, month: int) -> int:
    _check_year(year)
    _check_month(month)
    return calendar.monthrange(year, month + 1)[1]


def available_days(year: int, month: int) -> list[tuple[int, int]]:
    """Return ``(day, weekday)`` for every day of the month, Monday = 0."""
    return [
        (day, date(year, month + 1, day).weekday())
        for day in range(1, days_in_month(year, month) + 1)
    ]


def build_grid(year: int, month: int) -> MonthGrid:
    """Return the week-major grid for the given month.

    Each row has 7 cells, Monday first. The number of rows (4 to 6)
    depends on how the month falls across weeks.
    """
    days = available_days(year, month)

    grid: MonthGrid = []
    idx = 0
    while idx < len(days):
        row: WeekRow = []
        for col in range(7):
            if idx < len(days) and days[idx][1] == col:
                row.append(days[idx][0])
                idx += 1
            else:
                row.append(None)
        grid.append(row)
    return grid
