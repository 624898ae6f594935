"""Main Promptcraft TUI application."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import App
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, LoadingIndicator, Static

from promptcraft.config import PromptcraftConfig
from promptcraft.constants import CANCELLED_MESSAGE
from promptcraft.core.models import FinalPrompt
from promptcraft.core.session import SessionController
from promptcraft.debug_log import log, setup_debug_logging
from promptcraft.errors import CollaboratorError, SessionAborted
from promptcraft.keybindings import APP_BINDINGS
from promptcraft.ui.collaborator import TextualCollaborator
from promptcraft.ui.modals import DebugLogModal
from promptcraft.ui.widgets import Transcript

if TYPE_CHECKING:
    from textual.app import ComposeResult


class PromptcraftApp(App[FinalPrompt | None]):
    """Promptcraft TUI - compose a structured prompt step by step.

    The app exits with the confirmed ``FinalPrompt`` as its return value,
    ``None`` and return code 0 when the user cancels, or return code 1 when a
    screen fails.
    """

    TITLE = "Promptcraft"
    CSS_PATH = "styles/promptcraft.tcss"

    BINDINGS = APP_BINDINGS

    def __init__(self, config: PromptcraftConfig | None = None) -> None:
        super().__init__()
        self.config = config or PromptcraftConfig()
        self.controller = SessionController(TextualCollaborator(self), self.config.session)

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="session-container"):
            yield Transcript(id="transcript")
            with Horizontal(id="busy-row"):
                yield LoadingIndicator(id="busy-indicator")
                yield Static("", id="busy-label", markup=False)
        yield Footer()

    @property
    def transcript(self) -> Transcript:
        return self.query_one("#transcript", Transcript)

    def on_mount(self) -> None:
        setup_debug_logging()
        self.hide_busy()
        self.run_worker(self._run_session(), name="session", exclusive=True)

    async def _run_session(self) -> None:
        try:
            final = await self.controller.run()
        except SessionAborted:
            log.info("Session cancelled")
            self.exit(None, return_code=0, message=CANCELLED_MESSAGE)
            return
        except CollaboratorError as e:
            log.error("Session failed", error=str(e))
            self.exit(None, return_code=1, message=f"Uh oh: {e}")
            return

        log.info("Prompt confirmed", cycles=self.controller.cycles)
        self.exit(final)

    def show_busy(self, label: str) -> None:
        self.query_one("#busy-label", Static).update(label)
        self.query_one("#busy-row").display = True

    def hide_busy(self) -> None:
        self.query_one("#busy-row").display = False

    def action_cancel_session(self) -> None:
        self.exit(None, return_code=0, message=CANCELLED_MESSAGE)

    def action_show_debug_log(self) -> None:
        if isinstance(self.screen, DebugLogModal):
            return
        self.push_screen(DebugLogModal())
