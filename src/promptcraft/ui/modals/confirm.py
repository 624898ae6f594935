"""Yes/no confirmation modal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Label

from promptcraft.keybindings import CONFIRM_BINDINGS
from promptcraft.ui.modals.base import PromptcraftModalScreen

if TYPE_CHECKING:
    from textual.app import ComposeResult


class ConfirmModal(PromptcraftModalScreen[bool]):
    """Ask a yes/no question.

    Returns:
        bool: The answer
        None: User cancelled
    """

    BINDINGS = CONFIRM_BINDINGS

    def __init__(self, prompt: str, affirmative: str = "Yes!", negative: str = "No!") -> None:
        super().__init__()
        self._prompt = prompt
        self._affirmative = affirmative
        self._negative = negative

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-container", classes="modal-container"):
            yield Label(self._prompt, classes="modal-title", markup=False)
            with Horizontal(id="confirm-buttons"):
                yield Button(self._affirmative, id="yes-btn", variant="success")
                yield Button(self._negative, id="no-btn", variant="error")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#no-btn", Button).focus()

    def action_answer(self, answer: bool) -> None:
        self.dismiss(answer)

    @on(Button.Pressed, "#yes-btn")
    def on_yes(self) -> None:
        self.action_answer(True)

    @on(Button.Pressed, "#no-btn")
    def on_no(self) -> None:
        self.action_answer(False)
