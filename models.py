from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal, InvalidOperation


# Larger values count as zero
MAX_HOURS = Decimal("1000000")


def _to_hours(value: str) -> Decimal | None:
    try:
        hours = Decimal(value.strip().replace(",", "."))
    except InvalidOperation:
        return None
    if not hours.is_finite() or hours.copy_abs() >= MAX_HOURS:
        return None
    return hours


def parse_hours(value: str | None) -> Decimal:
    """Parse an hours field; empty, unparsable or absurd text counts as zero."""
    if not value:
        return Decimal("0")
    hours = _to_hours(value)
    return Decimal("0") if hours is None else hours


def is_number(value: str) -> bool:
    """True if text parses as a usable number of hours."""
    return _to_hours(value) is not None


@dataclass
class WorkDayRecord:
    date: date
    category_id: int = 0
    category_name: str = ""
    project: str = ""
    hours_worked: str = ""
    travel_hours: str = ""
    location_from: str = ""
    location_to: str = ""
    notes: str = ""

    @property
    def worked(self) -> Decimal:
        """Hours worked as decimal."""
        return parse_hours(self.hours_worked)

    @property
    def travel(self) -> Decimal:
        """Travel hours as decimal."""
        return parse_hours(self.travel_hours)

    @property
    def has_setup(self) -> bool:
        return bool(self.category_id) and bool(self.project)

    def get(self, field_id: str) -> str:
        """Text value of an entry field by id."""
        return getattr(self, field_id) or ""

    def replace(self, **changes) -> WorkDayRecord:
        return replace(self, **changes)


@dataclass(frozen=True)
class WorkCategory:
    id: int
    name: str


@dataclass
class Config:
    start_view: str = "calendar"
    notes_width: int = 40
    log_level: str = "WARNING"
