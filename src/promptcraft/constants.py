"""Constants shared across Promptcraft."""

from __future__ import annotations

DEFAULT_CONFIG_PATH = ".promptcraft/config.toml"

FIELD_MAX_LENGTH = 500
DEFAULT_PAUSE_SECONDS = 1.0

CANCELLED_MESSAGE = "Operation cancelled by user."
RESTART_MESSAGE = "Restarting prompt generation..."
PREPARING_MESSAGE = "Preparing your prompt..."
GUIDANCE_PAUSE_MESSAGE = "Analyzing your goal..."

SEPARATOR = "---"

# (name, label, placeholder, multiline) for the initial form, in display order
INITIAL_FIELDS: tuple[tuple[str, str, str, bool], ...] = (
    ("goal", "Goal", "e.g., Summarize the key requirements", False),
    ("return_format", "Return Format", "e.g., Bulleted list", False),
    ("warnings", "Warnings", "e.g., Exclude information about XYZ", False),
    (
        "context_dump",
        "Context Dump",
        "e.g., Paste relevant sections of compliance docs here",
        True,
    ),
)
