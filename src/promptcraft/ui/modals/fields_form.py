"""Modal form collecting a group of free-text fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Button, Footer, Input, Label, Static, TextArea

from promptcraft.keybindings import FIELDS_FORM_BINDINGS
from promptcraft.ui.modals.base import PromptcraftModalScreen

if TYPE_CHECKING:
    from collections.abc import Sequence

    from textual.app import ComposeResult

    from promptcraft.core.models import FieldSpec


class FieldsFormModal(PromptcraftModalScreen[dict[str, str]]):
    """Edit a group of fields.

    Returns:
        dict[str, str]: Field values keyed by field name
        None: User cancelled
    """

    BINDINGS = FIELDS_FORM_BINDINGS

    def __init__(self, title: str, fields: Sequence[FieldSpec]) -> None:
        super().__init__()
        self._title = title
        self._fields = list(fields)

    def compose(self) -> ComposeResult:
        with Vertical(id="fields-form-container", classes="modal-container"):
            yield Label(self._title, classes="modal-title", markup=False)
            with VerticalScroll(classes="form-body"):
                for spec in self._fields:
                    yield Label(spec.label, classes="field-label", markup=False)
                    if spec.description:
                        yield Static(spec.description, classes="field-description", markup=False)
                    if spec.multiline:
                        yield TextArea(
                            text=spec.default,
                            placeholder=spec.placeholder,
                            id=f"field-{spec.name}",
                            classes="field-textarea",
                        )
                        yield Static(
                            self._counter_text(spec, len(spec.default)),
                            id=f"counter-{spec.name}",
                            classes="field-counter",
                            markup=False,
                        )
                    else:
                        yield Input(
                            value=spec.default,
                            placeholder=spec.placeholder,
                            max_length=spec.max_length,
                            id=f"field-{spec.name}",
                            classes="field-input",
                        )
            yield Button("Continue", id="submit-btn", variant="primary")
        yield Footer()

    def on_mount(self) -> None:
        if self._fields:
            self.query_one(f"#field-{self._fields[0].name}").focus()

    @staticmethod
    def _counter_text(spec: FieldSpec, length: int) -> str:
        return f"{length}/{spec.max_length}"

    def over_limit_fields(self) -> list[FieldSpec]:
        """Multiline fields whose text exceeds the field limit."""
        return [
            spec
            for spec in self._fields
            if spec.multiline
            and len(self.query_one(f"#field-{spec.name}", TextArea).text) > spec.max_length
        ]

    def collect_values(self) -> dict[str, str]:
        """Read the current field values, clipped to each field's limit."""
        values: dict[str, str] = {}
        for spec in self._fields:
            widget = self.query_one(f"#field-{spec.name}")
            text = widget.text if isinstance(widget, TextArea) else widget.value
            values[spec.name] = text[: spec.max_length]
        return values

    def action_submit(self) -> None:
        too_long = self.over_limit_fields()
        if too_long:
            for spec in too_long:
                self.notify(
                    f"{spec.label} is limited to {spec.max_length} characters",
                    severity="warning",
                )
            return
        self.dismiss(self.collect_values())

    @on(TextArea.Changed)
    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        name = (event.text_area.id or "").removeprefix("field-")
        spec = next((spec for spec in self._fields if spec.name == name), None)
        if spec is None:
            return
        length = len(event.text_area.text)
        counter = self.query_one(f"#counter-{name}", Static)
        counter.update(self._counter_text(spec, length))
        counter.set_class(length > spec.max_length, "-over-limit")

    @on(Input.Submitted)
    def on_input_submitted(self) -> None:
        self.focus_next()

    @on(Button.Pressed, "#submit-btn")
    def on_submit(self) -> None:
        self.action_submit()
