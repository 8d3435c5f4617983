from __future__ import annotations

import logging
from datetime import date

from models import WorkDayRecord


log = logging.getLogger(__name__)


class RecordStore:
    """In-memory mapping of date to work-day record for one session."""

    def __init__(self, records: list[WorkDayRecord] | None = None):
        self._records: dict[date, WorkDayRecord] = {}
        for record in records or []:
            self.put(record)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, d: object) -> bool:
        return d in self._records

    def get(self, d: date) -> WorkDayRecord | None:
        return self._records.get(d)

    def has_entry(self, d: date) -> bool:
        return d in self._records

    def put(self, record: WorkDayRecord) -> RecordStore:
        """Insert or overwrite the record for its date."""
        action = "Overwriting" if record.date in self._records else "Adding"
        log.debug("%s record for %s", action, record.date.isoformat())
        self._records[record.date] = record
        return self

    def most_recent_before(self, d: date) -> WorkDayRecord | None:
        """Get the record with the latest date strictly before d."""
        best: date | None = None
        for stored in self._records:
            if stored < d and (best is None or stored > best):
                best = stored
        if best is None:
            return None
        return self._records[best]

    def month_entries(self, year: int, month: int) -> list[WorkDayRecord]:
        """Get all records for a month, newest first."""
        entries = [
            r for r in self._records.values()
            if r.date.year == year and r.date.month == month
        ]
        entries.sort(key=lambda r: r.date, reverse=True)
        return entries
