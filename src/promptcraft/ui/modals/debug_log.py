"""Modal showing the captured session log."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.containers import Vertical
from textual.widgets import Footer, Label, RichLog

from promptcraft.debug_log import clear_log_buffer, log_buffer
from promptcraft.keybindings import DEBUG_LOG_BINDINGS
from promptcraft.ui.modals.base import PromptcraftModalScreen

if TYPE_CHECKING:
    from textual.app import ComposeResult

LEVEL_STYLES = {
    "DEBUG": "dim",
    "INFO": "",
    "WARNING": "yellow",
    "ERROR": "bold red",
}


class DebugLogModal(PromptcraftModalScreen[None]):
    """Read-only view of the log ring buffer."""

    BINDINGS = DEBUG_LOG_BINDINGS

    def compose(self) -> ComposeResult:
        with Vertical(id="debug-log-container", classes="modal-container"):
            yield Label("Debug Log", classes="modal-title")
            yield RichLog(id="debug-log", wrap=True)
        yield Footer()

    def on_mount(self) -> None:
        output = self.query_one("#debug-log", RichLog)
        for entry in list(log_buffer):
            output.write(Text(entry.format(), style=LEVEL_STYLES.get(entry.level, "")))

    def action_clear(self) -> None:
        clear_log_buffer()
        self.query_one("#debug-log", RichLog).clear()
