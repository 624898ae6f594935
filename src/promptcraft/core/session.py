"""Session control flow: collect, classify, enrich, confirm, restart."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from promptcraft.config import RestartPolicy, SessionSettings
from promptcraft.constants import (
    GUIDANCE_PAUSE_MESSAGE,
    INITIAL_FIELDS,
    PREPARING_MESSAGE,
    RESTART_MESSAGE,
    SEPARATOR,
)
from promptcraft.core.classifier import classify, matched_keyword
from promptcraft.core.guidance import guidance
from promptcraft.core.models import Archetype, FieldSpec, FinalPrompt, Option, PromptDraft
from promptcraft.core.suggestions import suggest
from promptcraft.core.warnings import merge_warnings
from promptcraft.debug_log import log
from promptcraft.errors import CollaboratorError, SessionAborted

if TYPE_CHECKING:
    from collections.abc import Sequence


class SessionState(StrEnum):
    """States of the compose session."""

    COLLECT_INITIAL = "CollectInitial"
    CLASSIFY = "Classify"
    GUIDANCE_AND_ENRICH = "GuidanceAndEnrich"
    CONFIRM = "Confirm"
    RESTART = "Restart"
    FINALIZE = "Finalize"
    CANCELLED = "Cancelled"


class DisplayTone(StrEnum):
    """Visual intent of a displayed line. Styling is up to the collaborator."""

    PLAIN = "plain"
    HEADING = "heading"
    TIP = "tip"
    SUCCESS = "success"
    NOTICE = "notice"
    FAINT = "faint"


class Collaborator(Protocol):
    """Input and output surface consumed by the session.

    Every blocking method raises ``SessionAborted`` when the user cancels and
    ``CollaboratorError`` for any other failure.
    """

    async def collect_fields(self, title: str, fields: Sequence[FieldSpec]) -> dict[str, str]: ...

    async def select_one(
        self, title: str, options: Sequence[Option], default: str | None = None
    ) -> str: ...

    async def select_many(self, title: str, options: Sequence[Option]) -> list[str]: ...

    async def confirm(self, prompt: str) -> bool: ...

    def display(self, text: str, tone: DisplayTone = DisplayTone.PLAIN) -> None: ...

    async def pause(self, seconds: float, label: str = "") -> None: ...


class SessionController:
    """Drives one compose session until a prompt is confirmed or the user aborts.

    Exactly one ``PromptDraft`` is live at a time. Each cycle starts from a
    fresh draft, so selections and confirmation never leak across restarts.
    """

    def __init__(
        self,
        collaborator: Collaborator,
        settings: SessionSettings | None = None,
    ) -> None:
        self._collaborator = collaborator
        self._settings = settings or SessionSettings()
        self.state = SessionState.COLLECT_INITIAL
        self.draft: PromptDraft | None = None
        self.cycles = 0

    @property
    def settings(self) -> SessionSettings:
        return self._settings

    def _enter(self, state: SessionState, **details: object) -> None:
        self.state = state
        log.debug("Session state", state=str(state), cycle=self.cycles, **details)

    async def run(self) -> FinalPrompt:
        """Run cycles until confirmation.

        Raises:
            SessionAborted: The user cancelled at any collection step.
            CollaboratorError: A collaborator failed; no prompt is produced.
        """
        previous: PromptDraft | None = None
        try:
            while True:
                self.cycles += 1
                draft = await self._collect_initial(previous)
                self.draft = draft

                archetype = self._classify(draft)
                if archetype.is_known:
                    await self._guide_and_enrich(draft, archetype)
                else:
                    self._collaborator.display(SEPARATOR, DisplayTone.FAINT)

                if await self._confirm(draft):
                    return await self._finalize(draft)
                previous = await self._restart(draft)
        except SessionAborted:
            self._enter(SessionState.CANCELLED)
            raise
        except CollaboratorError as e:
            log.error(
                "Collaborator failed", state=str(self.state), cycle=self.cycles, error=str(e)
            )
            raise

    def initial_fields(self, previous: PromptDraft | None = None) -> list[FieldSpec]:
        """Build the initial form, pre-filled from ``previous`` under the prefill policy."""
        prefill = previous is not None and self._settings.restart_policy is RestartPolicy.PREFILL
        return [
            FieldSpec(
                name=name,
                label=label,
                placeholder=placeholder,
                max_length=self._settings.max_field_length,
                default=getattr(previous, name) if prefill else "",
                multiline=multiline,
            )
            for name, label, placeholder, multiline in INITIAL_FIELDS
        ]

    async def _collect_initial(self, previous: PromptDraft | None) -> PromptDraft:
        self._enter(SessionState.COLLECT_INITIAL)
        self._collaborator.display("Step 1: Initial Prompt Details", DisplayTone.HEADING)
        fields = self.initial_fields(previous)
        values = await self._collaborator.collect_fields("Initial Prompt Details", fields)
        limit = self._settings.max_field_length
        return PromptDraft(**{spec.name: values.get(spec.name, "")[:limit] for spec in fields})

    def _classify(self, draft: PromptDraft) -> Archetype:
        archetype = classify(draft.goal)
        self._enter(
            SessionState.CLASSIFY, archetype=str(archetype), keyword=matched_keyword(draft.goal)
        )
        return archetype

    async def _guide_and_enrich(self, draft: PromptDraft, archetype: Archetype) -> None:
        self._enter(SessionState.GUIDANCE_AND_ENRICH, archetype=str(archetype))
        collaborator = self._collaborator

        await collaborator.pause(self._settings.pause_seconds, GUIDANCE_PAUSE_MESSAGE)
        collaborator.display("Prompt Guidance:", DisplayTone.SUCCESS)
        for tip in guidance(archetype):
            collaborator.display(f"- {tip}", DisplayTone.TIP)

        suggestions = suggest(archetype, draft.goal, draft.return_format)

        collaborator.display("Step 2: Refine Prompt (Optional)", DisplayTone.HEADING)
        collaborator.display(f"Detected Intent: {archetype}", DisplayTone.NOTICE)
        collaborator.display(
            "We detected a potential intent. You can refine the Goal, Return Format, "
            "and add common Warnings below.",
            DisplayTone.FAINT,
        )

        refined = await collaborator.collect_fields(
            "Refine Prompt",
            [
                FieldSpec(
                    name="goal",
                    label="Refined Goal",
                    max_length=self._settings.max_field_length,
                    default=suggestions.suggested_goal,
                    description="Suggested goal based on detection. Edit as needed.",
                )
            ],
        )
        limit = self._settings.max_field_length
        draft.goal = refined.get("goal", suggestions.suggested_goal)[:limit]

        draft.return_format = await collaborator.select_one(
            "Suggested Return Format",
            suggestions.format_options,
            default=suggestions.default_format,
        )
        draft.selected_warnings = list(
            await collaborator.select_many(
                "Add Common Warnings (Optional)", suggestions.warning_options
            )
        )
        log.debug(
            "Enrichment applied",
            return_format=draft.return_format,
            selected_warnings=draft.selected_warnings,
        )

    async def _confirm(self, draft: PromptDraft) -> bool:
        self._enter(SessionState.CONFIRM)
        self._collaborator.display("Step 3: Confirm Generation", DisplayTone.HEADING)
        draft.confirmed = await self._collaborator.confirm("Generate prompt with current details?")
        return draft.confirmed

    async def _restart(self, draft: PromptDraft) -> PromptDraft:
        self._enter(SessionState.RESTART, policy=str(self._settings.restart_policy))
        draft.confirmed = False
        draft.selected_warnings = []
        self._collaborator.display(RESTART_MESSAGE, DisplayTone.NOTICE)
        await self._collaborator.pause(self._settings.pause_seconds, RESTART_MESSAGE)
        return draft

    async def _finalize(self, draft: PromptDraft) -> FinalPrompt:
        self._enter(SessionState.FINALIZE)
        await self._collaborator.pause(self._settings.pause_seconds, PREPARING_MESSAGE)
        return FinalPrompt(
            goal=draft.goal,
            return_format=draft.return_format,
            warnings=merge_warnings(draft.warnings, draft.selected_warnings),
            context_dump=draft.context_dump,
        )
