"""Single-month date picker widget (tkinter)."""

import logging
import tkinter as tk
from datetime import date
from tkinter import font as tkfont

from calendar_logic import DAY_ABBR, CalendarPeriod, DayCell, build_grid
from navigation import NavigationState
from selection import DateCallback, SelectionDispatcher

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#0078D4"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
WEEKEND_FG = "#CC0000"


class DatePicker:
    """Calendar for one input field.

    Every navigation destroys the calendar frame and builds a new one
    from a freshly computed grid.
    """

    def __init__(self, parent: tk.Misc, widget_id: str, callback: DateCallback,
                 period: CalendarPeriod | None = None,
                 today: date | None = None,
                 highlight_today: bool = True) -> None:
        self.widget_id = widget_id
        self.navigation = NavigationState(period, today)
        self.dispatcher = SelectionDispatcher(widget_id, callback, self.navigation)
        self.highlight_today = highlight_today

        self._parent = parent
        self._setup_fonts()
        self._visible = False

        self.calendar: tk.Frame | None = None
        self.header_label: tk.Label | None = None
        self.today_button: tk.Label | None = None
        self.day_cells: list[list[tk.Label]] = []

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self._parent)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(root=self._parent, family=base, size=9)
        self.font_bold = tkfont.Font(root=self._parent, family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(root=self._parent, family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(root=self._parent, family=base, size=12, weight="bold")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self, period: CalendarPeriod | None = None) -> None:
        """Build the calendar for *period* (default: current) and show it."""
        if period is not None:
            self.navigation.jump_to(period)
        self._rebuild()
        self.show()

    def _rebuild(self) -> None:
        if self.calendar is not None:
            self.calendar.destroy()
        period = self.navigation.current()
        self.calendar = tk.Frame(self._parent, bg=GRID_BG)
        self._build_header(period)
        self._build_table(period)
        if self._visible:
            self.calendar.pack(padx=6, pady=4)

    def _build_header(self, period: CalendarPeriod) -> None:
        header = tk.Frame(self.calendar, bg=HEADER_BG)
        header.grid(row=0, column=0, columnspan=7, sticky="we", pady=(0, 2))

        btn_prev = tk.Label(
            header, text="◀", font=self.font_nav, bg=HEADER_BG, cursor="hand2"
        )
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self.retreat())

        btn_next = tk.Label(
            header, text="▶", font=self.font_nav, bg=HEADER_BG, cursor="hand2"
        )
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self.advance())

        self.today_button = tk.Label(
            header, text="Today", font=self.font_bold, bg=HEADER_BG, fg=ACCENT,
            cursor="hand2",
        )
        self.today_button.pack(side="right", padx=6)
        self.today_button.bind("<Button-1>", lambda _e: self.go_today())

        self.header_label = tk.Label(
            header, text=period.label, font=self.font_header, bg=HEADER_BG, fg="#333333",
        )
        self.header_label.pack(side="left", expand=True)

    def _build_table(self, period: CalendarPeriod) -> None:
        for col, abbr in enumerate(DAY_ABBR):
            fg = WEEKEND_FG if col >= 5 else "#333333"
            tk.Label(
                self.calendar, text=abbr, font=self.font_bold, bg=GRID_BG, fg=fg, width=3,
            ).grid(row=1, column=col)

        self.day_cells = []
        for r, week in enumerate(build_grid(period.year, period.month)):
            row_cells: list[tk.Label] = []
            for c, day in enumerate(week):
                cell = self._make_cell(day, c >= 5)
                cell.grid(row=r + 2, column=c)
                row_cells.append(cell)
            self.day_cells.append(row_cells)

    def _make_cell(self, day: DayCell, is_weekend: bool) -> tk.Label:
        if day is None:
            return tk.Label(self.calendar, text="", font=self.font_normal,
                            bg=GRID_BG, width=3)
        is_today = self.highlight_today and self.navigation.is_today(day)
        if is_today:
            bg, fg, font = ACCENT, "white", self.font_bold
        else:
            bg, fg, font = GRID_BG, WEEKEND_FG if is_weekend else "black", self.font_normal
        cell = tk.Label(self.calendar, text=str(day), font=font, bg=bg, fg=fg,
                        width=3, cursor="hand2")
        cell.bind("<Button-1>", lambda _e, d=day: self.select(d))
        return cell

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def select(self, cell: DayCell) -> None:
        self.dispatcher.dispatch(cell)

    def advance(self) -> None:
        self.navigation.advance()
        self._rerender()

    def retreat(self) -> None:
        self.navigation.retreat()
        self._rerender()

    def go_today(self) -> None:
        self.navigation.go_today()
        self._rerender()

    def _rerender(self) -> None:
        self._rebuild()
        # a re-rendered calendar is always visible
        self.show()

    # ------------------------------------------------------------------
    # Show / Hide
    # ------------------------------------------------------------------
    @property
    def is_visible(self) -> bool:
        return self._visible

    def show(self) -> None:
        if self.calendar is None:
            self._rebuild()
        if not self._visible:
            self.calendar.pack(padx=6, pady=4)
            self._visible = True

    def hide(self) -> None:
        if self.calendar is not None and self._visible:
            self.calendar.pack_forget()
        self._visible = False
