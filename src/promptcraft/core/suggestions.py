"""Archetype-specific enrichment suggestions.

Each known archetype contributes a rewritten goal plus candidate return
formats and warnings. The user's original return format is always offered:
either it already matches a suggestion, or a ``Keep`` option is appended for it.
"""

from __future__ import annotations

from dataclasses import dataclass

from promptcraft.core.models import Archetype, Option, SuggestionSet

SUMMARIZATION_GOAL = (
    "Summarize the key requirements and obligations mentioned in the provided documents."
)

QA_GOAL_TEMPLATE = "Based only on the provided documents, answer the question: {goal}"

KEEP_ORIGINAL_LABEL = "Keep: {format}"
KEEP_EMPTY_LABEL = "Keep original (empty)"


@dataclass(frozen=True, slots=True)
class _ArchetypeSuggestions:
    goal_template: str
    formats: tuple[Option, ...]
    warnings: tuple[Option, ...]


_SUGGESTIONS: dict[Archetype, _ArchetypeSuggestions] = {
    Archetype.SUMMARIZATION: _ArchetypeSuggestions(
        goal_template=SUMMARIZATION_GOAL,
        formats=(
            Option("Bulleted list of key points", "Bulleted list of key points"),
            Option("Concise paragraph overview", "Concise paragraph overview"),
        ),
        warnings=(
            Option("Focus only on actionable requirements", "Focus on requirements"),
            Option("Avoid technical jargon where possible", "Avoid jargon"),
        ),
    ),
    Archetype.QUESTION_ANSWERING: _ArchetypeSuggestions(
        goal_template=QA_GOAL_TEMPLATE,
        formats=(
            Option("Direct answer", "Direct answer"),
            Option("Answer with citations to relevant sections", "Answer with citations"),
            Option("Extract relevant quotes supporting the answer", "Extract relevant quotes"),
        ),
        warnings=(
            Option("Do not infer information not explicitly present", "Do not infer"),
            Option("Cite the source section(s) for the answer", "Cite sources"),
            Option("If the answer is not found, state that clearly", "State if not found"),
        ),
    ),
}


def build_format_options(
    suggested: tuple[Option, ...], original_format: str
) -> tuple[Option, ...]:
    """Add the user's original format to the suggestions and move it first.

    Args:
        suggested: Fixed format suggestions for the archetype.
        original_format: Return format typed in the initial form.

    Returns:
        The options to offer. A non-empty original format always ends up as
        the first option; the empty placeholder stays last.
    """
    options = list(suggested)
    if not any(option.value == original_format for option in options):
        if original_format:
            options.append(
                Option(KEEP_ORIGINAL_LABEL.format(format=original_format), original_format)
            )
        else:
            options.append(Option(KEEP_EMPTY_LABEL, ""))

    if original_format:
        index = next(i for i, option in enumerate(options) if option.value == original_format)
        if index > 0:
            options.insert(0, options.pop(index))
    return tuple(options)


def suggest(archetype: Archetype, original_goal: str, original_format: str) -> SuggestionSet:
    """Compute the enrichment suggestions for a cycle.

    ``UNKNOWN`` yields the original goal and no options, which tells the
    caller to skip enrichment.
    """
    spec = _SUGGESTIONS.get(archetype)
    if spec is None:
        return SuggestionSet(suggested_goal=original_goal)

    format_options = build_format_options(spec.formats, original_format)
    default_format = original_format if original_format else spec.formats[0].value
    return SuggestionSet(
        suggested_goal=spec.goal_template.format(goal=original_goal),
        format_options=format_options,
        warning_options=spec.warnings,
        default_format=default_format,
    )
