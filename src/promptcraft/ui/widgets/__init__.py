"""Widget components for the Promptcraft TUI."""

from promptcraft.ui.widgets.transcript import Transcript

__all__ = ["Transcript"]
