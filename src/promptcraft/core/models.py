"""Domain models for prompt composition."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from promptcraft.constants import FIELD_MAX_LENGTH


class Archetype(StrEnum):
    """Detected task type of a prompt goal."""

    SUMMARIZATION = "Summarization"
    QUESTION_ANSWERING = "QuestionAnswering"
    UNKNOWN = "Unknown"

    @property
    def is_known(self) -> bool:
        return self is not Archetype.UNKNOWN


@dataclass(frozen=True, slots=True)
class Option:
    """A selectable (label, value) pair."""

    label: str
    value: str


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Description of a free-text field handed to the form collaborator."""

    name: str
    label: str
    placeholder: str = ""
    max_length: int = FIELD_MAX_LENGTH
    default: str = ""
    description: str = ""
    multiline: bool = False


@dataclass(slots=True)
class PromptDraft:
    """Working state of a single session cycle.

    ``selected_warnings`` only receives entries when an archetype was detected
    and the enrichment step ran.
    """

    goal: str = ""
    return_format: str = ""
    warnings: str = ""
    context_dump: str = ""
    selected_warnings: list[str] = field(default_factory=list)
    confirmed: bool = False


@dataclass(frozen=True, slots=True)
class SuggestionSet:
    """Enrichment suggestions computed for one cycle."""

    suggested_goal: str
    format_options: tuple[Option, ...] = ()
    warning_options: tuple[Option, ...] = ()
    default_format: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.format_options and not self.warning_options


@dataclass(frozen=True, slots=True)
class FinalPrompt:
    """Confirmed prompt, ready to be emitted."""

    goal: str
    return_format: str
    warnings: str
    context_dump: str

    def sections(self) -> list[tuple[str, str]]:
        """Return (label, content) pairs in output order."""
        return [
            ("Goal:", self.goal),
            ("Return Format:", self.return_format),
            ("Warnings:", self.warnings),
            ("Context Dump:", self.context_dump),
        ]

    def render(self) -> str:
        """Render as plain text, one labeled section per block."""
        return "".join(f"{label}\n{content}\n\n" for label, content in self.sections())
