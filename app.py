#!/usr/bin/env python3
"""Arbetstid TUI application."""

from __future__ import annotations

import logging
from datetime import date

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import DataTable, Footer, Static

from config import configure_logging, load_config
from models import Config, WorkDayRecord
from screens import WizardScreen
from storage import RecordStore
from utils import format_short_date, month_totals, parse_date_key, shift_month
from widgets import CalendarLegend, CalendarTable, MonthHeader, MonthlySummary, SummaryTable


log = logging.getLogger(__name__)


class ArbetstidApp(App):
    """Calendar and monthly overview over one session's work-day records."""

    TITLE = "Arbetstid"
    SUB_TITLE = "Registrera dina arbetstimmar och resor"

    CSS = """
    Screen {
        background: $surface;
    }

    #month-header {
        height: auto;
        background: $primary;
        color: $text;
        padding: 0 1;
        text-style: bold;
    }

    #calendar-table {
        height: auto;
        margin: 1 2;
    }

    #calendar-legend {
        height: auto;
        padding: 0 2;
        color: $text-muted;
    }

    #monthly-summary {
        height: auto;
        padding: 1 2;
        color: $text;
    }

    #summary-table {
        height: 1fr;
        margin: 0 2;
    }

    #summary-empty {
        height: auto;
        padding: 2 2;
        color: $text-muted;
        text-align: center;
    }

    .hidden {
        display: none;
    }

    DataTable > .datatable--cursor {
        background: $secondary;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Avsluta"),
        Binding("k", "calendar_view", "Kalender"),
        Binding("o", "summary_view", "Översikt"),
        Binding("p", "prev_month", "◄ Månad"),
        Binding("n", "next_month", "Månad ►"),
        Binding("t", "goto_today", "Idag"),
    ]

    def __init__(self, config: Config | None = None, store: RecordStore | None = None):
        super().__init__()
        self.app_config = config or Config()

        # View mode: "calendar" or "summary"
        self.view_mode = self.app_config.start_view

        # Reference month, shared by both views
        today = date.today()
        self.current_year = today.year
        self.current_month = today.month

        self.store = store if store is not None else RecordStore()

        # Date open in the wizard, None while browsing
        self.editing_date: date | None = None

    def compose(self) -> ComposeResult:
        yield MonthHeader(self.current_year, self.current_month, id="month-header")
        # Calendar view widgets
        yield Container(CalendarTable(id="calendar-table"), id="calendar-container")
        yield CalendarLegend(id="calendar-legend")
        # Summary view widgets (hidden by default)
        yield MonthlySummary(id="monthly-summary", classes="hidden")
        yield Container(SummaryTable(id="summary-table"), id="summary-container", classes="hidden")
        yield Static("Inga registreringar denna månad", id="summary-empty", classes="hidden")
        yield Footer()

    def on_mount(self):
        self.query_one("#calendar-table", CalendarTable).setup_columns()
        self.query_one("#summary-table", SummaryTable).setup_columns(self.app_config.notes_width)
        self._set_view_mode(self.view_mode)
        if self.view_mode == "calendar":
            self._select_date(date.today())

    def _refresh_display(self):
        header = self.query_one("#month-header", MonthHeader)
        label = "KALENDER" if self.view_mode == "calendar" else "ÖVERSIKT"
        header.update_display(self.current_year, self.current_month, label)

        if self.view_mode == "calendar":
            self._refresh_calendar_display()
        elif self.view_mode == "summary":
            self._refresh_summary_display()

    def _refresh_calendar_display(self):
        table = self.query_one("#calendar-table", CalendarTable)
        table.show_month(self.current_year, self.current_month, self.store)

    def _refresh_summary_display(self):
        entries = self.store.month_entries(self.current_year, self.current_month)

        summary = self.query_one("#monthly-summary", MonthlySummary)
        summary.update_display(month_totals(entries))

        table = self.query_one("#summary-table", SummaryTable)
        table.show_entries(entries, self.app_config.notes_width)

        # Empty state replaces the table
        container = self.query_one("#summary-container")
        empty = self.query_one("#summary-empty", Static)
        if entries:
            container.remove_class("hidden")
            empty.add_class("hidden")
        else:
            container.add_class("hidden")
            empty.remove_class("hidden")

    def _set_view_mode(self, mode: str):
        """Switch between view modes and toggle widget visibility."""
        self.view_mode = mode

        calendar_widgets = ["#calendar-container", "#calendar-legend"]
        summary_widgets = ["#monthly-summary", "#summary-container", "#summary-empty"]

        for widget_id in calendar_widgets:
            widget = self.query_one(widget_id)
            if mode == "calendar":
                widget.remove_class("hidden")
            else:
                widget.add_class("hidden")

        for widget_id in summary_widgets:
            if mode != "summary":
                self.query_one(widget_id).add_class("hidden")
        if mode == "summary":
            self.query_one("#monthly-summary").remove_class("hidden")

        self.refresh_bindings()
        self._refresh_display()

        if mode == "calendar":
            self.query_one("#calendar-table", DataTable).focus()
        elif mode == "summary":
            self.query_one("#summary-table", DataTable).focus()

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Hide the binding for the view already shown."""
        if action == "calendar_view":
            return self.view_mode != "calendar"
        elif action == "summary_view":
            return self.view_mode != "summary"
        return True

    def action_calendar_view(self):
        self._set_view_mode("calendar")

    def action_summary_view(self):
        self._set_view_mode("summary")

    def _navigate_to_month(self, year: int, month: int):
        self.current_year = year
        self.current_month = month
        self._refresh_display()

    def action_prev_month(self):
        self._navigate_to_month(*shift_month(self.current_year, self.current_month, -1))

    def action_next_month(self):
        self._navigate_to_month(*shift_month(self.current_year, self.current_month, 1))

    def action_goto_today(self):
        today = date.today()
        self._navigate_to_month(today.year, today.month)
        if self.view_mode == "calendar":
            self._select_date(today)

    def _select_date(self, target: date):
        """Move the calendar cursor to a date in the shown month."""
        table = self.query_one("#calendar-table", CalendarTable)
        cell = table.cell_for(target)
        if cell:
            table.move_cursor(row=cell[0], column=cell[1])

    def on_data_table_cell_selected(self, event: DataTable.CellSelected) -> None:
        """Handle Enter/click on a calendar day."""
        if self.view_mode != "calendar" or event.control.id != "calendar-table":
            return
        table = self.query_one("#calendar-table", CalendarTable)
        selected = table.day_at(event.coordinate.row, event.coordinate.column)
        if selected:
            self._open_wizard(selected)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Handle Enter/click on a summary row to edit that day."""
        if self.view_mode != "summary" or event.control.id != "summary-table":
            return
        if event.row_key:
            self._open_wizard(parse_date_key(str(event.row_key.value)))

    def _open_wizard(self, d: date) -> None:
        self.editing_date = d
        existing = self.store.get(d)
        previous = self.store.most_recent_before(d)
        log.debug(
            "Opening wizard for %s (existing=%s, previous=%s)",
            d, existing is not None, previous.date if previous else None,
        )
        self.push_screen(WizardScreen(d, existing, previous), self._on_wizard_complete)

    def _on_wizard_complete(self, result: WorkDayRecord | None) -> None:
        """Store a saved record; a cancelled wizard changes nothing."""
        self.editing_date = None
        if result:
            self.store.put(result)
            log.info("Saved record for %s", result.date.isoformat())
            self.notify(f"Sparat {format_short_date(result.date)}")
        self._refresh_display()
        if self.view_mode == "calendar" and result:
            self._select_date(result.date)


def main():
    import sys

    config = load_config()
    if len(sys.argv) > 1 and sys.argv[1] == "--config-info":
        print(f"Start view:  {config.start_view}")
        print(f"Notes width: {config.notes_width}")
        print(f"Log level:   {config.log_level}")
        return

    configure_logging(config)
    app = ArbetstidApp(config)
    app.run()


if __name__ == "__main__":
    main()
