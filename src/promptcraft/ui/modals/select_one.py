"""Modal for picking exactly one option."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.containers import Vertical
from textual.content import Content
from textual.widgets import Footer, Label, OptionList
from textual.widgets.option_list import Option as ListOption

from promptcraft.keybindings import SELECT_ONE_BINDINGS
from promptcraft.ui.modals.base import PromptcraftModalScreen

if TYPE_CHECKING:
    from collections.abc import Sequence

    from textual.app import ComposeResult

    from promptcraft.core.models import Option


class SelectOneModal(PromptcraftModalScreen[str]):
    """Pick one option; the default value starts highlighted.

    Returns:
        str: Value of the chosen option
        None: User cancelled
    """

    BINDINGS = SELECT_ONE_BINDINGS

    def __init__(self, title: str, options: Sequence[Option], default: str | None = None) -> None:
        super().__init__()
        self._title = title
        self._options = list(options)
        self._default = default

    @property
    def default_index(self) -> int:
        for index, option in enumerate(self._options):
            if option.value == self._default:
                return index
        return 0

    def compose(self) -> ComposeResult:
        with Vertical(id="select-one-container", classes="modal-container"):
            yield Label(self._title, classes="modal-title", markup=False)
            yield OptionList(
                *(
                    ListOption(Content(option.label), id=f"option-{index}")
                    for index, option in enumerate(self._options)
                ),
                id="select-one-list",
            )
        yield Footer()

    def on_mount(self) -> None:
        option_list = self.query_one("#select-one-list", OptionList)
        if self._options:
            option_list.highlighted = self.default_index
        option_list.focus()

    @on(OptionList.OptionSelected, "#select-one-list")
    def on_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(self._options[event.option_index].value)
