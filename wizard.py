"""Entry wizard state machine.

The wizard collects one WorkDayRecord in two phases: a setup step where a
category and project are chosen, then one step per field that applies to the
chosen category. Which fields apply is declared in FIELDS, so the step
sequence can be worked out without any UI.

Copying from the previous day is done with the pure functions copy_setup,
copy_entire and copy_field; EntryWizard only wraps them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from catalog import category_name
from models import WorkDayRecord


log = logging.getLogger(__name__)

SETUP = "setup"
FIELD = "field"
SAVED = "saved"
CANCELLED = "cancelled"

ALL_CATEGORIES = frozenset({1, 2, 3, 4})
FIELD_CATEGORIES = frozenset({1, 2, 3})


@dataclass(frozen=True)
class FieldSpec:
    id: str
    label: str
    kind: str
    placeholder: str
    categories: frozenset[int]


FIELDS = [
    FieldSpec("hours_worked", "Arbetade timmar", "number", "8.0", ALL_CATEGORIES),
    FieldSpec("travel_hours", "Resetimmar", "number", "0.0", FIELD_CATEGORIES),
    FieldSpec("location_from", "Från plats", "text", "Hemmet / Depån", FIELD_CATEGORIES),
    FieldSpec("location_to", "Till plats", "text", "Avverkningsplats", FIELD_CATEGORIES),
    FieldSpec("notes", "Anteckningar", "textarea", "Eventuella anteckningar för dagen...", ALL_CATEGORIES),
]


def applicable_fields(category_id: int) -> list[FieldSpec]:
    """Fields shown for a category, in master order."""
    return [f for f in FIELDS if category_id in f.categories]


def copy_setup(current: WorkDayRecord, previous: WorkDayRecord) -> WorkDayRecord:
    """Take category and project from the previous record, nothing else."""
    return current.replace(
        category_id=previous.category_id,
        category_name=previous.category_name,
        project=previous.project,
    )


def copy_entire(previous: WorkDayRecord, d: date) -> WorkDayRecord:
    """Duplicate the previous record onto date d."""
    return previous.replace(date=d)


def can_copy_field(previous: WorkDayRecord | None, field_id: str) -> bool:
    return previous is not None and bool(previous.get(field_id))


def copy_field(current: WorkDayRecord, previous: WorkDayRecord, field_id: str) -> WorkDayRecord:
    """Take one field's value from the previous record."""
    return current.replace(**{field_id: previous.get(field_id)})


class EntryWizard:
    """Step sequencing for entering or editing one day's record."""

    def __init__(
        self,
        d: date,
        existing: WorkDayRecord | None = None,
        previous: WorkDayRecord | None = None,
    ):
        self.date = d
        self.previous = previous
        self.record = existing.replace(date=d) if existing else WorkDayRecord(date=d)
        self.editing = existing is not None
        self.step = 0
        # Editing jumps straight to the fields, unless there is nothing to show
        if self.editing and self.fields:
            self.phase = FIELD
        else:
            self.phase = SETUP

    @property
    def fields(self) -> list[FieldSpec]:
        return applicable_fields(self.record.category_id)

    @property
    def current_field(self) -> FieldSpec | None:
        if self.phase != FIELD:
            return None
        return self.fields[self.step]

    @property
    def is_last_step(self) -> bool:
        return self.phase == FIELD and self.step == len(self.fields) - 1

    @property
    def can_proceed(self) -> bool:
        """True once setup has both selections and at least one field applies."""
        return self.record.has_setup and bool(self.fields)

    @property
    def has_previous(self) -> bool:
        return self.previous is not None

    @property
    def can_copy_current_field(self) -> bool:
        field = self.current_field
        return field is not None and can_copy_field(self.previous, field.id)

    @property
    def progress(self) -> float:
        """Fraction of field steps reached, 0 while in setup."""
        if self.phase != FIELD:
            return 0.0
        return (self.step + 1) / len(self.fields)

    def select_category(self, category_id: int) -> None:
        self.record = self.record.replace(
            category_id=category_id,
            category_name=category_name(category_id),
        )
        log.debug("Category %s gives %d field steps", category_id, len(self.fields))

    def select_project(self, project: str) -> None:
        self.record = self.record.replace(project=project)

    def set_value(self, value: str) -> None:
        """Set the value of the field for the current step."""
        field = self.current_field
        if field is None:
            return
        self.record = self.record.replace(**{field.id: value})

    def value(self) -> str:
        field = self.current_field
        return self.record.get(field.id) if field else ""

    def next(self) -> WorkDayRecord | None:
        """Advance one step; returns the record when the last step completes."""
        if self.phase == SETUP:
            if not self.can_proceed:
                return None
            self.phase = FIELD
            self.step = 0
        elif self.phase == FIELD:
            if self.is_last_step:
                return self._save()
            self.step += 1
        log.debug("Wizard for %s at %s step %d", self.date, self.phase, self.step)
        return None

    def back(self) -> None:
        if self.phase != FIELD:
            return
        if self.step == 0:
            self.phase = SETUP
        else:
            self.step -= 1

    def cancel(self) -> None:
        self.phase = CANCELLED

    def copy_previous_setup(self) -> bool:
        if self.phase != SETUP or self.previous is None:
            return False
        self.record = copy_setup(self.record, self.previous)
        return True

    def copy_previous_entry(self) -> WorkDayRecord | None:
        """Copy the whole previous record and save it straight away."""
        if self.phase != SETUP or self.previous is None:
            return None
        self.record = copy_entire(self.previous, self.date)
        return self._save()

    def copy_previous_field(self) -> bool:
        field = self.current_field
        if field is None or not can_copy_field(self.previous, field.id):
            return False
        self.record = copy_field(self.record, self.previous, field.id)
        return True

    def _save(self) -> WorkDayRecord:
        self.record = self.record.replace(date=self.date)
        self.phase = SAVED
        log.debug("Wizard for %s saved", self.date)
        return self.record
