"""Screens for the time registration wizard."""

from __future__ import annotations

from datetime import date

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Input, Label, ProgressBar, Select, TextArea

from catalog import list_categories, list_projects
from models import WorkDayRecord, is_number
from utils import format_long_date
from wizard import FIELD, SETUP, EntryWizard


class WizardScreen(Screen[WorkDayRecord | None]):
    """Step-by-step entry of one day's record.

    Dismisses with the completed record on save, or None when cancelled.
    """

    CSS = """
    WizardScreen {
        align: center middle;
        background: $primary-background;
    }

    #wizard-dialog {
        width: 72;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: thick $primary;
    }

    #wizard-caption {
        width: 100%;
        text-align: center;
        color: $text-muted;
    }

    #wizard-date {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #wizard-progress {
        width: 100%;
        margin-bottom: 0;
    }

    #wizard-step {
        width: 100%;
        text-align: center;
        color: $text-muted;
        margin-bottom: 1;
    }

    .field-label {
        height: 1;
        margin-top: 1;
        color: $text-muted;
    }

    #field-label {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #setup-pane Select, #field-pane Input, #field-pane TextArea {
        width: 100%;
    }

    #field-textarea {
        height: 6;
    }

    .copy-buttons {
        width: 100%;
        height: auto;
        margin-top: 1;
    }

    .copy-buttons Button, #copy-field {
        width: 1fr;
        margin: 0 1;
    }

    .wizard-buttons {
        width: 100%;
        height: auto;
        margin-top: 1;
        align: center middle;
    }

    .wizard-buttons Button {
        width: auto;
        min-width: 14;
        margin: 0 2;
    }

    .hidden {
        display: none;
    }
    """

    BINDINGS = [
        Binding("escape", "escape", "Tillbaka/Avbryt"),
    ]

    def __init__(
        self,
        d: date,
        existing: WorkDayRecord | None = None,
        previous: WorkDayRecord | None = None,
    ):
        super().__init__()
        self.wizard = EntryWizard(d, existing, previous)

    def compose(self) -> ComposeResult:
        caption = "Redigerar" if self.wizard.editing else "Registrerar för"
        with Vertical(id="wizard-dialog"):
            yield Label(caption, id="wizard-caption")
            yield Label(format_long_date(self.wizard.date).capitalize(), id="wizard-date")
            yield ProgressBar(total=100, show_eta=False, show_percentage=False, id="wizard-progress")
            yield Label("", id="wizard-step")

            # Setup: category and project
            with Vertical(id="setup-pane"):
                yield Label("Kategori", classes="field-label")
                yield Select(
                    [(c.name, c.id) for c in list_categories()],
                    prompt="Välj kategori",
                    id="category-select",
                )
                yield Label("Projekt", classes="field-label")
                yield Select(
                    [(p, p) for p in list_projects()],
                    prompt="Välj projekt",
                    id="project-select",
                )
                with Horizontal(classes="copy-buttons"):
                    yield Button("Kopiera kategori & projekt", id="copy-setup")
                    yield Button("Kopiera hela föregående dag", id="copy-entry")
                with Horizontal(classes="wizard-buttons"):
                    yield Button("Nästa ►", variant="primary", id="setup-next")
                    yield Button("Avbryt", variant="default", id="setup-cancel")

            # One field at a time
            with Vertical(id="field-pane", classes="hidden"):
                yield Label("", id="field-label")
                yield Input(id="field-input")
                yield TextArea(id="field-textarea", classes="hidden")
                yield Button("Kopiera från föregående dag", id="copy-field")
                with Horizontal(classes="wizard-buttons"):
                    yield Button("Nästa ►", variant="primary", id="field-next")
                    yield Button("◄ Tillbaka", variant="default", id="field-back")

    def on_mount(self) -> None:
        self._sync_selects()
        self._refresh()

    def _sync_selects(self) -> None:
        """Show the record's category and project in the setup selects."""
        record = self.wizard.record
        if record.category_id in {c.id for c in list_categories()}:
            self.query_one("#category-select", Select).value = record.category_id
        if record.project in list_projects():
            self.query_one("#project-select", Select).value = record.project

    def _refresh(self) -> None:
        """Update panes, buttons and progress for the wizard's current state."""
        wizard = self.wizard
        setup_pane = self.query_one("#setup-pane")
        field_pane = self.query_one("#field-pane")
        step_label = self.query_one("#wizard-step", Label)
        progress = self.query_one("#wizard-progress", ProgressBar)

        progress.update(progress=wizard.progress * 100)

        field = wizard.current_field
        if wizard.phase == SETUP:
            setup_pane.remove_class("hidden")
            field_pane.add_class("hidden")
            step_label.update("Välj kategori och projekt")
            self.query_one("#setup-next", Button).disabled = not wizard.can_proceed
            self.query_one("#copy-setup", Button).disabled = not wizard.has_previous
            self.query_one("#copy-entry", Button).disabled = not wizard.has_previous
            self.query_one("#category-select", Select).focus()
        elif field is not None:
            setup_pane.add_class("hidden")
            field_pane.remove_class("hidden")
            step_label.update(f"Steg {wizard.step + 1} av {len(wizard.fields)}")
            self.query_one("#field-label", Label).update(field.label)

            field_input = self.query_one("#field-input", Input)
            field_textarea = self.query_one("#field-textarea", TextArea)
            if field.kind == "textarea":
                field_input.add_class("hidden")
                field_textarea.remove_class("hidden")
                field_textarea.load_text(wizard.value())
                field_textarea.focus()
            else:
                field_textarea.add_class("hidden")
                field_input.remove_class("hidden")
                field_input.value = wizard.value()
                field_input.placeholder = field.placeholder
                field_input.focus()

            self.query_one("#copy-field", Button).disabled = not wizard.can_copy_current_field
            next_label = "Spara ✓" if wizard.is_last_step else "Nästa ►"
            self.query_one("#field-next", Button).label = next_label

    def _commit_input(self) -> None:
        """Store the text as typed as the current field's value."""
        field = self.wizard.current_field
        if field is None:
            return
        if field.kind == "textarea":
            value = self.query_one("#field-textarea", TextArea).text
        else:
            value = self.query_one("#field-input", Input).value
        if field.kind == "number" and value.strip() and not is_number(value):
            self.app.notify(f"{field.label}: ogiltigt tal räknas som 0", severity="warning")
        self.wizard.set_value(value)

    def on_select_changed(self, event: Select.Changed) -> None:
        """Pass selections to the wizard; a cleared select unsets its value."""
        if event.select.id == "category-select":
            self.wizard.select_category(event.value if isinstance(event.value, int) else 0)
        elif event.select.id == "project-select":
            self.wizard.select_project(event.value if isinstance(event.value, str) else "")
        if self.wizard.phase == SETUP:
            self.query_one("#setup-next", Button).disabled = not self.wizard.can_proceed

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter moves to the next field, or saves on the last one."""
        if event.input.id == "field-input":
            self.action_next()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id in ("setup-next", "field-next"):
            self.action_next()
        elif button_id == "field-back":
            self.action_back()
        elif button_id == "setup-cancel":
            self.action_cancel()
        elif button_id == "copy-setup":
            self._copy_setup()
        elif button_id == "copy-entry":
            self._copy_entry()
        elif button_id == "copy-field":
            self._copy_field()

    def action_next(self) -> None:
        self._commit_input()
        result = self.wizard.next()
        if result is not None:
            self.dismiss(result)
            return
        self._refresh()

    def action_back(self) -> None:
        self._commit_input()
        self.wizard.back()
        self._refresh()

    def action_cancel(self) -> None:
        self.wizard.cancel()
        self.dismiss(None)

    def action_escape(self) -> None:
        """Step back from a field, or leave the wizard from setup."""
        if self.wizard.phase == FIELD:
            self.action_back()
        else:
            self.action_cancel()

    def _copy_setup(self) -> None:
        if not self.wizard.copy_previous_setup():
            self.app.notify("Ingen föregående dag att kopiera från", severity="warning")
            return
        self._sync_selects()
        self._refresh()

    def _copy_entry(self) -> None:
        result = self.wizard.copy_previous_entry()
        if result is None:
            self.app.notify("Ingen föregående dag att kopiera från", severity="warning")
            return
        self.dismiss(result)

    def _copy_field(self) -> None:
        if not self.wizard.copy_previous_field():
            self.app.notify("Inget värde att kopiera", severity="warning")
            return
        self._refresh()
