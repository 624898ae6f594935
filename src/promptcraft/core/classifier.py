"""Keyword-based goal classification."""

from __future__ import annotations

from promptcraft.core.models import Archetype

# Checked first: a question phrasing wins over any summarization wording.
QA_KEYWORDS: tuple[str, ...] = (
    "what is",
    "explain",
    "how does",
    "list",
    "compare",
    "does it",
    "can i",
    "where",
    "who",
    "when",
    "why",
)

SUMMARIZATION_KEYWORDS: tuple[str, ...] = (
    "summarize",
    "summary",
    "overview",
    "tldr",
    "key points",
    "abstract",
    "give me the gist",
)

_KEYWORD_TABLE: tuple[tuple[Archetype, tuple[str, ...]], ...] = (
    (Archetype.QUESTION_ANSWERING, QA_KEYWORDS),
    (Archetype.SUMMARIZATION, SUMMARIZATION_KEYWORDS),
)


def _first_match(goal: str | None) -> tuple[Archetype, str | None]:
    lowered = (goal or "").lower()
    for archetype, keywords in _KEYWORD_TABLE:
        for keyword in keywords:
            if keyword in lowered:
                return archetype, keyword
    return Archetype.UNKNOWN, None


def classify(goal: str | None) -> Archetype:
    """Classify a goal into an archetype.

    Args:
        goal: Free-text goal as typed by the user.

    Returns:
        The first archetype whose keyword list has a substring hit, or
        ``Archetype.UNKNOWN`` when nothing matches.
    """
    archetype, _ = _first_match(goal)
    return archetype


def matched_keyword(goal: str | None) -> str | None:
    """Return the keyword that decided the classification, if any."""
    _, keyword = _first_match(goal)
    return keyword
