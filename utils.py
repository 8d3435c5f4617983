"""Utility functions for calendar grids, date formatting and month totals."""

from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from models import WorkDayRecord


WEEKDAY_NAMES = ["söndag", "måndag", "tisdag", "onsdag", "torsdag", "fredag", "lördag"]
WEEKDAY_ABBR = ["Sön", "Mån", "Tis", "Ons", "Tor", "Fre", "Lör"]
MONTH_NAMES = [
    "januari", "februari", "mars", "april", "maj", "juni",
    "juli", "augusti", "september", "oktober", "november", "december",
]


def sunday_weekday(d: date) -> int:
    """Weekday index with 0 = Sunday .. 6 = Saturday."""
    return (d.weekday() + 1) % 7


def first_weekday(year: int, month: int) -> int:
    """Number of blank cells before day 1 in a Sunday-first week."""
    return sunday_weekday(date(year, month, 1))


def days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def month_grid(year: int, month: int) -> list[list[int | None]]:
    """Get the month as rows of 7 cells, None for cells outside the month."""
    cells: list[int | None] = [None] * first_weekday(year, month)
    cells.extend(range(1, days_in_month(year, month) + 1))
    while len(cells) % 7:
        cells.append(None)
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by delta months, wrapping across years."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def is_today(d: date, today: date | None = None) -> bool:
    return d == (today or date.today())


def date_key(d: date) -> str:
    return d.isoformat()


def parse_date_key(key: str) -> date:
    return date.fromisoformat(key)


def format_long_date(d: date) -> str:
    """e.g. 'måndag 10 juni'."""
    return f"{WEEKDAY_NAMES[sunday_weekday(d)]} {d.day} {MONTH_NAMES[d.month - 1]}"


def format_short_date(d: date) -> str:
    """e.g. 'mån 10 juni'."""
    return f"{WEEKDAY_ABBR[sunday_weekday(d)].lower()} {d.day} {MONTH_NAMES[d.month - 1]}"


def format_month_title(year: int, month: int) -> str:
    return f"{MONTH_NAMES[month - 1]} {year}"


def format_hours(value: Decimal) -> str:
    return f"{float(value):.1f}"


@dataclass
class MonthTotals:
    entries: int = 0
    hours: Decimal = Decimal("0")
    travel: Decimal = Decimal("0")


def month_totals(records: Iterable[WorkDayRecord]) -> MonthTotals:
    totals = MonthTotals()
    for record in records:
        totals.entries += 1
        totals.hours += record.worked
        totals.travel += record.travel
    return totals


def format_location(record: WorkDayRecord) -> str:
    """From/to locations, joined with an arrow when both are set."""
    if record.location_from and record.location_to:
        return f"{record.location_from} → {record.location_to}"
    return record.location_from or record.location_to


def format_setup(record: WorkDayRecord) -> str:
    """Category and project label, empty when neither is set."""
    parts = [p for p in (record.category_name, record.project) if p]
    return " · ".join(parts)


def truncate(text: str, width: int) -> str:
    text = " ".join(text.split())
    if len(text) <= width:
        return text
    return text[:max(width - 1, 0)] + "…"
