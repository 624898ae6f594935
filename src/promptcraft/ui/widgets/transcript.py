"""Scrolling transcript of session output."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import RichLog

from promptcraft.core.session import DisplayTone

TONE_STYLES: dict[DisplayTone, str] = {
    DisplayTone.PLAIN: "",
    DisplayTone.HEADING: "bold",
    DisplayTone.TIP: "dim",
    DisplayTone.SUCCESS: "bold green",
    DisplayTone.NOTICE: "yellow",
    DisplayTone.FAINT: "dim",
}


class Transcript(RichLog):
    """Read-only log of everything the session displayed.

    Lines are also kept as plain text so they can be inspected without
    rendering.
    """

    def __init__(self, *, id: str | None = None, classes: str | None = None) -> None:
        super().__init__(wrap=True, markup=False, highlight=False, id=id, classes=classes)
        self.entries: list[tuple[str, DisplayTone]] = []

    def write_line(self, text: str, tone: DisplayTone = DisplayTone.PLAIN) -> None:
        self.entries.append((text, tone))
        self.write(Text(text, style=TONE_STYLES[tone]))

    def plain_text(self) -> str:
        return "\n".join(text for text, _ in self.entries)
