"""Modal for picking any number of options."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.containers import Vertical
from textual.content import Content
from textual.widgets import Button, Footer, Label, SelectionList
from textual.widgets.selection_list import Selection

from promptcraft.keybindings import SELECT_MANY_BINDINGS
from promptcraft.ui.modals.base import PromptcraftModalScreen

if TYPE_CHECKING:
    from collections.abc import Sequence

    from textual.app import ComposeResult

    from promptcraft.core.models import Option


class SelectManyModal(PromptcraftModalScreen[list[str]]):
    """Toggle options with space, confirm with the button or ctrl+s.

    Returns:
        list[str]: Selected values, in option order
        None: User cancelled
    """

    BINDINGS = SELECT_MANY_BINDINGS

    def __init__(self, title: str, options: Sequence[Option]) -> None:
        super().__init__()
        self._title = title
        self._options = list(options)

    def compose(self) -> ComposeResult:
        with Vertical(id="select-many-container", classes="modal-container"):
            yield Label(self._title, classes="modal-title", markup=False)
            yield SelectionList[int](
                *(
                    Selection(Content(option.label), index)
                    for index, option in enumerate(self._options)
                ),
                id="select-many-list",
            )
            yield Button("Continue", id="submit-btn", variant="primary")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#select-many-list", SelectionList).focus()

    def selected_values(self) -> list[str]:
        selection_list: SelectionList[int] = self.query_one("#select-many-list", SelectionList)
        # SelectionList reports in toggle order; keep display order instead.
        return [self._options[index].value for index in sorted(selection_list.selected)]

    def action_submit(self) -> None:
        self.dismiss(self.selected_values())

    @on(Button.Pressed, "#submit-btn")
    def on_submit(self) -> None:
        self.action_submit()
