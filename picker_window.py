"""Host window: date input fields that open a picker on focus."""

import logging
import tkinter as tk

from date_picker import GRID_BG, DatePicker
from selection import SelectedDate
from settings import load_settings

logger = logging.getLogger(__name__)


class PickerWindow:
    """A form of date fields, each owning its own lazily created picker."""

    def __init__(self, root: tk.Tk | None = None,
                 settings: dict | None = None) -> None:
        self.root = root or tk.Tk()
        self.root.title("Mini Date Picker")
        self.root.configure(bg=GRID_BG)

        self.settings = settings if settings is not None else load_settings()
        self._date_format: str = self.settings["date_format"]

        # Host-owned lookup: widget id -> input / picker
        self.entries: dict[str, tk.Entry] = {}
        self._containers: dict[str, tk.Frame] = {}
        self.pickers: dict[str, DatePicker] = {}

        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(padx=12, pady=8)
        for i, name in enumerate(self.settings["fields"]):
            widget_id = f"date-picker-{i}"
            container = tk.Frame(outer, bg=GRID_BG)
            container.pack(fill="x", pady=4)
            tk.Label(container, text=name, bg=GRID_BG, anchor="w").pack(fill="x")
            entry = tk.Entry(container, width=14)
            entry.pack(fill="x")
            entry.bind("<FocusIn>", lambda _e, w=widget_id: self.on_focus(w))
            self.entries[widget_id] = entry
            self._containers[widget_id] = container

        self.root.bind("<Escape>", lambda _e: self.hide_pickers())
        self.root.protocol("WM_DELETE_WINDOW", self.hide)

    # ------------------------------------------------------------------
    # Picker lifecycle
    # ------------------------------------------------------------------
    def on_focus(self, widget_id: str) -> DatePicker:
        picker = self.pickers.get(widget_id)
        if picker is None:
            logger.debug("creating picker %s", widget_id)
            picker = DatePicker(
                self._containers[widget_id], widget_id, self._on_date_selected,
                highlight_today=self.settings["highlight_today"],
            )
            self.pickers[widget_id] = picker
            picker.render()
        picker.show()
        return picker

    def _on_date_selected(self, widget_id: str, selected: SelectedDate) -> None:
        entry = self.entries[widget_id]
        entry.delete(0, "end")
        entry.insert(0, selected.format(self._date_format))
        self.pickers[widget_id].hide()

    def hide_pickers(self) -> None:
        for picker in self.pickers.values():
            picker.hide()

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.root.deiconify()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self.hide_pickers()
        self.root.withdraw()
