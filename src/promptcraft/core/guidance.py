"""Advisory tips shown for each archetype."""

from __future__ import annotations

from promptcraft.core.models import Archetype

GUIDANCE: dict[Archetype, tuple[str, ...]] = {
    Archetype.SUMMARIZATION: (
        "Tip: Consider specifying desired length (e.g., 'one paragraph', 'bullet points').",
        "Tip: Mention the target audience if applicable.",
        "Tip: Focus on specific aspects if needed (e.g., 'summarize security controls').",
    ),
    Archetype.QUESTION_ANSWERING: (
        "Tip: Ensure your question is specific for better answers.",
        "Tip: Use terminology likely found in the provided context.",
        "Tip: If asking about multiple things, consider separate prompts.",
    ),
}


def guidance(archetype: Archetype) -> tuple[str, ...]:
    """Return the tips for an archetype (empty for ``UNKNOWN``)."""
    return GUIDANCE.get(archetype, ())
