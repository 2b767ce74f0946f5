"""Map a clicked grid cell back to a concrete date."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

from calendar_logic import DayCell
from navigation import NavigationState

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "{month}/{day}/{year}"


@dataclass(frozen=True)
class SelectedDate:
    """A chosen date. Unlike CalendarPeriod, ``month`` is 1-based."""

    year: int
    month: int
    day: int

    def as_date(self) -> date:
        return date(self.year, self.month, self.day)

    def format(self, template: str = DEFAULT_DATE_FORMAT) -> str:
        return template.format(year=self.year, month=self.month, day=self.day)


DateCallback = Callable[[str, SelectedDate], None]


class SelectionDispatcher:
    """Turns cell clicks into host callback invocations."""

    def __init__(self, widget_id: str, callback: DateCallback,
                 navigation: NavigationState) -> None:
        self.widget_id = widget_id
        self._callback = callback
        self._navigation = navigation

    def dispatch(self, cell: DayCell) -> SelectedDate | None:
        """Invoke the callback for a filled cell; blank cells are ignored."""
        if cell is None:
            logger.debug("%s: blank cell clicked, ignored", self.widget_id)
            return None
        period = self._navigation.current()
        selected = SelectedDate(period.year, period.month + 1, cell)
        logger.info("%s: selected %s", self.widget_id, selected.format())
        self._callback(self.widget_id, selected)
        return selected
