"""Custom widgets for the calendar and summary views."""

from __future__ import annotations

from datetime import date

from textual.widgets import DataTable, Static
from rich.text import Text

from models import WorkDayRecord
from storage import RecordStore
from utils import (
    WEEKDAY_ABBR,
    MonthTotals,
    date_key,
    format_hours,
    format_location,
    format_month_title,
    format_setup,
    format_short_date,
    is_today,
    month_grid,
    truncate,
)


RECORDED_STYLE = "bold white on #39ac63"
TODAY_STYLE = "bold reverse"


class MonthHeader(Static):
    """Shows the month title between clickable navigation arrows."""

    def __init__(self, year: int, month: int, **kwargs):
        super().__init__(**kwargs)
        self.year = year
        self.month = month
        self.left_arrow_pos = 0
        self.right_arrow_pos = 0

    def update_display(self, year: int, month: int, label: str = ""):
        self.year = year
        self.month = month
        title = format_month_title(year, month).capitalize()
        if label:
            title = f"{label}: {title}"

        nav = f"◄  {title}  ►"
        self.left_arrow_pos = 0
        self.right_arrow_pos = len(nav) - 1

        text = Text()
        text.append("◄", style="bold")
        text.append(f"  {title}  ", style="bold")
        text.append("►", style="bold")
        self.update(text)

    def on_click(self, event) -> None:
        """Handle clicks on the arrows for month navigation."""
        click_col = event.x

        if self.left_arrow_pos <= click_col < self.left_arrow_pos + 2:
            self.app.action_prev_month()  # type: ignore[attr-defined]
        elif self.right_arrow_pos <= click_col < self.right_arrow_pos + 2:
            self.app.action_next_month()  # type: ignore[attr-defined]


def day_cell(day: int, has_entry: bool, is_current_day: bool) -> Text:
    """Render one calendar day; recorded days are green, today is highlighted."""
    if has_entry:
        text = Text(f" {day:>2} ✓ ", style=RECORDED_STYLE)
    else:
        text = Text(f" {day:>2}", style="")
        text.append(" + ", style="dim")
    if is_current_day:
        text.stylize(TODAY_STYLE)
    return text


class CalendarTable(DataTable):
    """Month grid of days, one row per week starting on Sunday."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.year = 0
        self.month = 0
        self.grid: list[list[int | None]] = []

    def setup_columns(self) -> None:
        self.cursor_type = "cell"
        for name in WEEKDAY_ABBR:
            self.add_column(name, width=6)

    def show_month(self, year: int, month: int, store: RecordStore, today: date | None = None) -> None:
        self.year = year
        self.month = month
        self.grid = month_grid(year, month)

        self.clear()
        for week in self.grid:
            row = []
            for day in week:
                if day is None:
                    row.append(Text(""))
                    continue
                d = date(year, month, day)
                row.append(day_cell(day, store.has_entry(d), is_today(d, today)))
            self.add_row(*row, height=2)

    def day_at(self, row: int, column: int) -> date | None:
        """Date for a grid cell, or None for a blank cell."""
        if not (0 <= row < len(self.grid)) or not (0 <= column < 7):
            return None
        day = self.grid[row][column]
        if day is None:
            return None
        return date(self.year, self.month, day)

    def cell_for(self, d: date) -> tuple[int, int] | None:
        """Grid (row, column) of a date in the shown month."""
        for row_idx, week in enumerate(self.grid):
            for col_idx, day in enumerate(week):
                if day is not None and date(self.year, self.month, day) == d:
                    return row_idx, col_idx
        return None


class CalendarLegend(Static):
    """Explains the calendar cell styles."""

    def on_mount(self) -> None:
        text = Text()
        text.append("  ", style=TODAY_STYLE)
        text.append(" Idag    ")
        text.append("  ", style=RECORDED_STYLE)
        text.append(" Registrerad    ")
        text.append("+", style="dim")
        text.append(" Ej registrerad")
        self.update(text)


class MonthlySummary(Static):
    """Shows entry count, total hours and travel hours for a month."""

    def update_display(self, totals: MonthTotals):
        text = Text()
        text.append("Dagar registrerade  ", style="bold")
        text.append(f"{totals.entries:>6}\n")
        text.append("Totala timmar       ", style="bold")
        text.append(f"{format_hours(totals.hours):>6} tim\n")

        # Travel dims when there is none
        travel_line = f"{format_hours(totals.travel):>6} tim"
        text.append("Resetimmar          ", style="bold" if totals.travel else "dim")
        text.append(travel_line, style="" if totals.travel else "dim")

        self.update(text)


def summary_row(record: WorkDayRecord, notes_width: int = 40) -> list[Text]:
    """Cells for one entry in the monthly summary table."""
    travel = record.travel
    return [
        Text(format_short_date(record.date).capitalize()),
        Text(date_key(record.date), style="dim"),
        Text(format_setup(record)),
        Text(f"{record.hours_worked} tim" if record.hours_worked else "-"),
        Text(f"{record.travel_hours} tim" if travel > 0 else ""),
        Text(format_location(record)),
        Text(truncate(record.notes, notes_width) if record.notes else "", style="italic"),
    ]


class SummaryTable(DataTable):
    """One row per entry, newest first; rows are keyed by ISO date."""

    def setup_columns(self, notes_width: int = 40) -> None:
        self.cursor_type = "row"
        self.add_column("Dag", width=14)
        self.add_column("Datum", width=10)
        self.add_column("Kategori", width=20)
        self.add_column("Timmar", width=9)
        self.add_column("Resa", width=9)
        self.add_column("Plats", width=24)
        self.add_column("Anteckningar", width=notes_width)

    def show_entries(self, entries: list[WorkDayRecord], notes_width: int = 40) -> None:
        self.clear()
        for record in entries:
            self.add_row(*summary_row(record, notes_width), key=date_key(record.date))
