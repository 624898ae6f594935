"""Merge manually typed warnings with selected suggestions."""

from __future__ import annotations

from collections.abc import Sequence


def merge_warnings(manual: str, selected: Sequence[str]) -> str:
    """Combine manual warnings with selected warning suggestions.

    Always merge from the user's original warnings. Merging a previous result
    again with the same selections duplicates the bullet lines.

    Args:
        manual: Warnings typed by the user, returned as-is when nothing is selected.
        selected: Suggested warnings the user opted into, in display order.

    Returns:
        The manual text followed by one ``- `` bullet per selection.
    """
    if not selected:
        return manual

    merged = manual
    if merged:
        merged += "\n"
    for warning in selected:
        merged += f"- {warning}\n"
    return merged.strip()
