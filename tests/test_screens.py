"""Tests for the screens module."""

from __future__ import annotations

import asyncio
from datetime import date

from textual.app import App
from textual.widgets import Button, Input, Select, TextArea

from screens import WizardScreen
from wizard import FIELD, SETUP


class TestWizardScreen:
    """Tests for the WizardScreen."""

    def test_init_new_entry(self):
        screen = WizardScreen(date(2024, 6, 10))

        assert screen.wizard.date == date(2024, 6, 10)
        assert screen.wizard.editing is False
        assert screen.wizard.phase == SETUP
        assert screen.wizard.has_previous is False

    def test_init_with_existing_entry(self, sample_record):
        screen = WizardScreen(sample_record.date, existing=sample_record)

        assert screen.wizard.editing is True
        assert screen.wizard.phase == FIELD
        assert screen.wizard.record == sample_record

    def test_init_with_previous_entry(self, sample_record):
        screen = WizardScreen(date(2024, 6, 11), previous=sample_record)

        assert screen.wizard.previous == sample_record
        assert screen.wizard.has_previous is True
        assert screen.wizard.record.date == date(2024, 6, 11)

    def test_bindings_defined(self):
        screen = WizardScreen(date(2024, 6, 10))

        binding_keys = [getattr(b, "key", None) for b in screen.BINDINGS]

        assert "escape" in binding_keys


class WizardHost(App):
    """Pushes one WizardScreen on mount and collects what it dismisses with."""

    def __init__(self, screen: WizardScreen):
        super().__init__()
        self.wizard_screen = screen
        self.results: list = []

    def on_mount(self) -> None:
        self.push_screen(self.wizard_screen, self.results.append)


def run_wizard(screen: WizardScreen, interact) -> list:
    """Drive the screen headless and return the dismiss results."""
    app = WizardHost(screen)

    async def run():
        async with app.run_test() as pilot:
            await pilot.pause()
            await interact(screen, pilot)
            await pilot.pause()

    asyncio.run(run())
    return app.results


class TestWizardScreenSetup:
    """Pilot tests for the setup step."""

    def test_next_disabled_until_both_selected(self):
        screen = WizardScreen(date(2024, 6, 10))

        async def interact(screen, pilot):
            next_button = screen.query_one("#setup-next", Button)
            assert next_button.disabled

            screen.query_one("#category-select", Select).value = 2
            await pilot.pause()
            assert next_button.disabled

            screen.query_one("#project-select", Select).value = "LG456"
            await pilot.pause()
            assert not next_button.disabled

            next_button.press()
            await pilot.pause()
            assert screen.wizard.phase == FIELD

        assert run_wizard(screen, interact) == []

    def test_clearing_category_unsets_it(self):
        screen = WizardScreen(date(2024, 6, 10))

        async def interact(screen, pilot):
            category = screen.query_one("#category-select", Select)
            category.value = 2
            screen.query_one("#project-select", Select).value = "LG456"
            await pilot.pause()
            assert not screen.query_one("#setup-next", Button).disabled

            category.clear()
            await pilot.pause()
            assert screen.wizard.record.category_id == 0
            assert screen.wizard.fields == []
            assert screen.query_one("#setup-next", Button).disabled

        run_wizard(screen, interact)

    def test_clearing_project_unsets_it(self):
        screen = WizardScreen(date(2024, 6, 10))

        async def interact(screen, pilot):
            project = screen.query_one("#project-select", Select)
            screen.query_one("#category-select", Select).value = 2
            project.value = "LG456"
            await pilot.pause()

            project.clear()
            await pilot.pause()
            assert screen.wizard.record.project == ""
            assert screen.query_one("#setup-next", Button).disabled

            screen.query_one("#setup-next", Button).press()
            await pilot.pause()
            assert screen.wizard.phase == SETUP

        run_wizard(screen, interact)

    def test_copy_buttons_disabled_without_previous(self):
        screen = WizardScreen(date(2024, 6, 10))

        async def interact(screen, pilot):
            assert screen.query_one("#copy-setup", Button).disabled
            assert screen.query_one("#copy-entry", Button).disabled

        run_wizard(screen, interact)

    def test_copy_entire_previous_day_dismisses(self, sample_record):
        screen = WizardScreen(date(2024, 6, 11), previous=sample_record)

        async def interact(screen, pilot):
            screen.query_one("#copy-entry", Button).press()

        results = run_wizard(screen, interact)

        assert results == [sample_record.replace(date=date(2024, 6, 11))]

    def test_copy_setup_fills_selects(self, sample_record):
        screen = WizardScreen(date(2024, 6, 11), previous=sample_record)

        async def interact(screen, pilot):
            screen.query_one("#copy-setup", Button).press()
            await pilot.pause()
            assert screen.query_one("#category-select", Select).value == 2
            assert screen.query_one("#project-select", Select).value == "LG456"
            assert not screen.query_one("#setup-next", Button).disabled
            assert screen.wizard.phase == SETUP

        run_wizard(screen, interact)

    def test_cancel_dismisses_with_none(self):
        screen = WizardScreen(date(2024, 6, 10))

        async def interact(screen, pilot):
            screen.query_one("#setup-cancel", Button).press()

        assert run_wizard(screen, interact) == [None]


class TestWizardScreenFields:
    """Pilot tests for the field steps."""

    def test_input_value_is_kept_as_typed(self):
        screen = WizardScreen(date(2024, 6, 10))

        async def interact(screen, pilot):
            screen.query_one("#category-select", Select).value = 2
            screen.query_one("#project-select", Select).value = "LG456"
            await pilot.pause()
            screen.query_one("#setup-next", Button).press()
            await pilot.pause()

            screen.query_one("#field-input", Input).value = "7.5"
            screen.query_one("#field-next", Button).press()
            await pilot.pause()
            assert screen.wizard.record.hours_worked == "7.5"
            assert screen.wizard.step == 1

            screen.query_one("#field-next", Button).press()
            await pilot.pause()
            screen.query_one("#field-input", Input).value = " Depot "
            screen.query_one("#field-next", Button).press()
            await pilot.pause()
            assert screen.wizard.record.location_from == " Depot "

            await pilot.press("escape")
            await pilot.pause()
            assert screen.wizard.current_field.id == "location_from"
            assert screen.query_one("#field-input", Input).value == " Depot "

        assert run_wizard(screen, interact) == []

    def test_notes_use_text_area(self, training_record):
        screen = WizardScreen(training_record.date, existing=training_record)
        notes = "  Motorsågskurs\nDag två "

        async def interact(screen, pilot):
            screen.query_one("#field-next", Button).press()
            await pilot.pause()
            assert screen.wizard.current_field.id == "notes"
            assert screen.query_one("#field-input", Input).has_class("hidden")

            textarea = screen.query_one("#field-textarea", TextArea)
            assert not textarea.has_class("hidden")
            assert textarea.text == "Motorsågskurs"

            textarea.load_text(notes)
            screen.query_one("#field-next", Button).press()

        results = run_wizard(screen, interact)

        assert results == [training_record.replace(notes=notes)]

    def test_copy_field_button(self, sample_record):
        screen = WizardScreen(date(2024, 6, 11), previous=sample_record)

        async def interact(screen, pilot):
            screen.query_one("#copy-setup", Button).press()
            await pilot.pause()
            screen.query_one("#setup-next", Button).press()
            await pilot.pause()

            screen.query_one("#copy-field", Button).press()
            await pilot.pause()
            assert screen.wizard.record.hours_worked == "7.5"
            assert screen.query_one("#field-input", Input).value == "7.5"

        run_wizard(screen, interact)

    def test_escape_from_first_field_returns_to_setup(self, sample_record):
        screen = WizardScreen(sample_record.date, existing=sample_record)

        async def interact(screen, pilot):
            assert screen.wizard.phase == FIELD
            await pilot.press("escape")
            await pilot.pause()
            assert screen.wizard.phase == SETUP
            assert not screen.query_one("#setup-pane").has_class("hidden")
            assert screen.query_one("#field-pane").has_class("hidden")

        assert run_wizard(screen, interact) == []
