"""Month-by-month navigation state for a single picker."""

import logging
from datetime import date

from calendar_logic import CalendarPeriod

logger = logging.getLogger(__name__)


class NavigationState:
    """Owns the displayed period and the "today" reference.

    Pure state: nothing here renders. Callers read :meth:`current`
    after a transition and redraw themselves.
    """

    def __init__(self, period: CalendarPeriod | None = None,
                 today: date | None = None) -> None:
        self._today = today
        self._period = period or CalendarPeriod.from_date(self.today)

    @property
    def today(self) -> date:
        """The injected date if one was given, otherwise the live clock."""
        return self._today or date.today()

    def current(self) -> CalendarPeriod:
        return self._period

    def advance(self) -> CalendarPeriod:
        return self._move(1)

    def retreat(self) -> CalendarPeriod:
        return self._move(-1)

    def jump_to(self, period: CalendarPeriod) -> CalendarPeriod:
        logger.debug("jump %s -> %s", self._period.label, period.label)
        self._period = period
        return self._period

    def go_today(self) -> CalendarPeriod:
        return self.jump_to(CalendarPeriod.from_date(self.today))

    def is_today(self, day: int | None) -> bool:
        """True if *day* of the displayed period is today (day-of-month)."""
        if day is None:
            return False
        today = self.today
        return self._period.contains(today) and day == today.day

    def _move(self, months: int) -> CalendarPeriod:
        new = self._period.shift(months)
        logger.debug("navigate %s -> %s", self._period.label, new.label)
        self._period = new
        return new
