"""Session collaborator backed by Textual modal screens."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from promptcraft.core.session import DisplayTone
from promptcraft.debug_log import log
from promptcraft.errors import CollaboratorError, SessionAborted
from promptcraft.ui.modals import ConfirmModal, FieldsFormModal, SelectManyModal, SelectOneModal

if TYPE_CHECKING:
    from collections.abc import Sequence

    from textual.screen import Screen

    from promptcraft.app import PromptcraftApp
    from promptcraft.core.models import FieldSpec, Option


class TextualCollaborator:
    """Pushes one modal per request and waits for its dismiss result.

    A ``None`` result means the user cancelled. Every call must run inside
    the app's session worker.
    """

    def __init__(self, app: PromptcraftApp) -> None:
        self._app = app

    async def _ask(self, screen: Screen[Any]) -> Any:
        try:
            result = await self._app.push_screen_wait(screen)
        except Exception as e:
            log.error("Screen failed", screen=type(screen).__name__, error=str(e))
            raise CollaboratorError(str(e)) from e
        if result is None:
            raise SessionAborted
        return result

    async def collect_fields(self, title: str, fields: Sequence[FieldSpec]) -> dict[str, str]:
        return await self._ask(FieldsFormModal(title, fields))

    async def select_one(
        self, title: str, options: Sequence[Option], default: str | None = None
    ) -> str:
        return await self._ask(SelectOneModal(title, options, default))

    async def select_many(self, title: str, options: Sequence[Option]) -> list[str]:
        return await self._ask(SelectManyModal(title, options))

    async def confirm(self, prompt: str) -> bool:
        return await self._ask(ConfirmModal(prompt))

    def display(self, text: str, tone: DisplayTone = DisplayTone.PLAIN) -> None:
        self._app.transcript.write_line(text, tone)

    async def pause(self, seconds: float, label: str = "") -> None:
        self._app.show_busy(label)
        try:
            await asyncio.sleep(seconds)
        finally:
            self._app.hide_busy()
