"""Configuration loading for Promptcraft.

Settings live in a TOML file (``.promptcraft/config.toml`` by default)::

    [session]
    restart_policy = "prefill"   # or "clear"
    pause_seconds = 1.0
    max_field_length = 500
"""

from __future__ import annotations

import tomllib
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from promptcraft.constants import DEFAULT_PAUSE_SECONDS, FIELD_MAX_LENGTH
from promptcraft.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


class RestartPolicy(StrEnum):
    """What the initial form shows after the user declines confirmation."""

    PREFILL = "prefill"  # previous cycle's values as defaults
    CLEAR = "clear"  # empty fields


class SessionSettings(BaseModel):
    """Settings for the compose session."""

    model_config = ConfigDict(extra="forbid")

    restart_policy: RestartPolicy = RestartPolicy.PREFILL
    pause_seconds: float = Field(default=DEFAULT_PAUSE_SECONDS, ge=0)
    max_field_length: int = Field(default=FIELD_MAX_LENGTH, gt=0)


class PromptcraftConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    session: SessionSettings = Field(default_factory=SessionSettings)

    @classmethod
    def load(cls, path: Path) -> PromptcraftConfig:
        """Load configuration from a TOML file.

        A missing file yields the defaults.

        Raises:
            ConfigError: If the file is not valid TOML or fails validation.
        """
        if not path.exists():
            return cls()

        try:
            data = tomllib.loads(path.read_text())
        except (OSError, tomllib.TOMLDecodeError) as e:
            msg = f"Could not read config {path}: {e}"
            raise ConfigError(msg) from e

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            msg = f"Invalid config {path}: {e}"
            raise ConfigError(msg) from e

    def with_session_overrides(self, **overrides: Any) -> PromptcraftConfig:
        """Return a copy with non-None session overrides applied (e.g. CLI flags)."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        try:
            session = SessionSettings.model_validate({**self.session.model_dump(), **updates})
        except ValidationError as e:
            msg = f"Invalid session override: {e}"
            raise ConfigError(msg) from e
        return self.model_copy(update={"session": session})
