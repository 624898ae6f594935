"""Key bindings for the Promptcraft TUI."""

from __future__ import annotations

from textual.binding import Binding, BindingType

APP_BINDINGS: list[BindingType] = [
    Binding("ctrl+q", "cancel_session", "Quit", priority=True),
    Binding("f12", "show_debug_log", "Debug log", priority=True),
]

FIELDS_FORM_BINDINGS: list[BindingType] = [
    Binding("escape", "cancel", "Cancel"),
    Binding("ctrl+s", "submit", "Continue", priority=True),
]

SELECT_ONE_BINDINGS: list[BindingType] = [
    Binding("escape", "cancel", "Cancel"),
]

SELECT_MANY_BINDINGS: list[BindingType] = [
    Binding("escape", "cancel", "Cancel"),
    Binding("ctrl+s", "submit", "Continue", priority=True),
]

CONFIRM_BINDINGS: list[BindingType] = [
    Binding("escape", "cancel", "Cancel"),
    Binding("y", "answer(True)", "Yes"),
    Binding("n", "answer(False)", "No"),
]

DEBUG_LOG_BINDINGS: list[BindingType] = [
    Binding("escape", "cancel", "Close"),
    Binding("c", "clear", "Clear"),
]
