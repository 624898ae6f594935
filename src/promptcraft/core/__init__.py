"""Core prompt composition logic for Promptcraft."""

from promptcraft.core.classifier import classify
from promptcraft.core.guidance import guidance
from promptcraft.core.models import (
    Archetype,
    FieldSpec,
    FinalPrompt,
    Option,
    PromptDraft,
    SuggestionSet,
)
from promptcraft.core.session import Collaborator, DisplayTone, SessionController, SessionState
from promptcraft.core.suggestions import suggest
from promptcraft.core.warnings import merge_warnings

__all__ = [
    "Archetype",
    "Collaborator",
    "DisplayTone",
    "FieldSpec",
    "FinalPrompt",
    "Option",
    "PromptDraft",
    "SessionController",
    "SessionState",
    "SuggestionSet",
    "classify",
    "guidance",
    "merge_warnings",
    "suggest",
]
