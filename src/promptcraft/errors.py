"""Exception hierarchy for Promptcraft sessions."""

from __future__ import annotations


class PromptcraftError(Exception):
    """Base class for Promptcraft errors."""


class SessionAborted(PromptcraftError):
    """The user cancelled the session. Not a failure."""


class CollaboratorError(PromptcraftError):
    """An input or display collaborator failed for a reason other than abort."""


class ConfigError(PromptcraftError):
    """The configuration file could not be read or validated."""
