"""Test doubles for the session collaborator."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from promptcraft.core.session import DisplayTone

if TYPE_CHECKING:
    from collections.abc import Sequence

    from promptcraft.core.models import FieldSpec, Option


class _AcceptDefaults:
    def __repr__(self) -> str:
        return "ACCEPT_DEFAULTS"


# Answer a form or single select with whatever the session pre-filled.
ACCEPT_DEFAULTS: Any = _AcceptDefaults()


@dataclass
class Call:
    kind: str
    title: str = ""
    fields: list[FieldSpec] = field(default_factory=list)
    options: list[Option] = field(default_factory=list)
    default: str | None = None


class ScriptedCollaborator:
    """Replays canned answers in order and records every request.

    An answer that is an exception instance is raised instead of returned.
    """

    def __init__(self, *answers: Any) -> None:
        self._answers = deque(answers)
        self.calls: list[Call] = []
        self.lines: list[tuple[str, DisplayTone]] = []
        self.pauses: list[tuple[float, str]] = []

    def _answer(self, call: Call) -> Any:
        self.calls.append(call)
        if not self._answers:
            msg = f"Unexpected {call.kind} request: {call.title!r}"
            raise AssertionError(msg)
        answer = self._answers.popleft()
        if isinstance(answer, BaseException):
            raise answer
        return answer

    @property
    def kinds(self) -> list[str]:
        return [call.kind for call in self.calls]

    @property
    def remaining(self) -> int:
        return len(self._answers)

    def calls_of(self, kind: str) -> list[Call]:
        return [call for call in self.calls if call.kind == kind]

    def displayed(self) -> list[str]:
        return [text for text, _ in self.lines]

    async def collect_fields(self, title: str, fields: Sequence[FieldSpec]) -> dict[str, str]:
        answer = self._answer(Call("collect_fields", title=title, fields=list(fields)))
        if answer is ACCEPT_DEFAULTS:
            return {spec.name: spec.default for spec in fields}
        return answer

    async def select_one(
        self, title: str, options: Sequence[Option], default: str | None = None
    ) -> str:
        answer = self._answer(
            Call("select_one", title=title, options=list(options), default=default)
        )
        if answer is ACCEPT_DEFAULTS:
            return default or ""
        return answer

    async def select_many(self, title: str, options: Sequence[Option]) -> list[str]:
        return self._answer(Call("select_many", title=title, options=list(options)))

    async def confirm(self, prompt: str) -> bool:
        return self._answer(Call("confirm", title=prompt))

    def display(self, text: str, tone: DisplayTone = DisplayTone.PLAIN) -> None:
        self.lines.append((text, tone))

    async def pause(self, seconds: float, label: str = "") -> None:
        self.pauses.append((seconds, label))


def initial_answer(
    goal: str = "",
    return_format: str = "",
    warnings: str = "",
    context_dump: str = "",
) -> dict[str, str]:
    """Values for the initial four-field form."""
    return {
        "goal": goal,
        "return_format": return_format,
        "warnings": warnings,
        "context_dump": context_dump,
    }
