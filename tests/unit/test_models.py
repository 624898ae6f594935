"""Tests for domain models."""

from __future__ import annotations

import pytest

from promptcraft.core.models import Archetype, FinalPrompt, PromptDraft

pytestmark = pytest.mark.unit


def test_final_prompt_renders_sections_in_order():
    final = FinalPrompt(
        goal="Summarize", return_format="Bullets", warnings="- Avoid jargon", context_dump="docs"
    )
    assert final.render() == (
        "Goal:\nSummarize\n\n"
        "Return Format:\nBullets\n\n"
        "Warnings:\n- Avoid jargon\n\n"
        "Context Dump:\ndocs\n\n"
    )


def test_final_prompt_keeps_empty_sections():
    rendered = FinalPrompt(goal="g", return_format="", warnings="", context_dump="").render()
    assert [line for line in rendered.splitlines() if line.endswith(":")] == [
        "Goal:",
        "Return Format:",
        "Warnings:",
        "Context Dump:",
    ]


def test_new_draft_has_no_selections():
    draft = PromptDraft(goal="g")
    assert draft.selected_warnings == []
    assert draft.confirmed is False
    assert PromptDraft().selected_warnings is not draft.selected_warnings


def test_archetype_values():
    assert [archetype.value for archetype in Archetype] == [
        "Summarization",
        "QuestionAnswering",
        "Unknown",
    ]
    assert not Archetype.UNKNOWN.is_known
    assert Archetype.SUMMARIZATION.is_known
