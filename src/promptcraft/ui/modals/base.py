"""Base modal class for Promptcraft modals."""

from __future__ import annotations

from typing import Generic, TypeVar

from textual.screen import ModalScreen

ResultT = TypeVar("ResultT")


class PromptcraftModalScreen(ModalScreen[ResultT | None], Generic[ResultT]):
    """Modal that dismisses with ``None`` when cancelled.

    The session treats a ``None`` result as a user abort.
    """

    def action_cancel(self) -> None:
        self.dismiss(None)
