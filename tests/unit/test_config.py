"""Tests for configuration loading."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from promptcraft.config import PromptcraftConfig, RestartPolicy
from promptcraft.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit


def test_missing_file_yields_defaults(tmp_path: Path):
    config = PromptcraftConfig.load(tmp_path / "absent.toml")
    assert config.session.restart_policy is RestartPolicy.PREFILL
    assert config.session.pause_seconds == 1.0
    assert config.session.max_field_length == 500


def test_loads_session_section(tmp_path: Path):
    path = tmp_path / "config.toml"
    path.write_text(
        '[session]\nrestart_policy = "clear"\npause_seconds = 0\nmax_field_length = 80\n'
    )
    config = PromptcraftConfig.load(path)
    assert config.session.restart_policy is RestartPolicy.CLEAR
    assert config.session.pause_seconds == 0
    assert config.session.max_field_length == 80


@pytest.mark.parametrize(
    "content",
    [
        "[session\n",
        '[session]\nrestart_policy = "sometimes"\n',
        "[session]\npause_seconds = -1\n",
        "[session]\nmax_field_length = 0\n",
        "[session]\nunknown = true\n",
        "[other]\nvalue = 1\n",
    ],
)
def test_invalid_files_raise_config_error(tmp_path: Path, content: str):
    path = tmp_path / "config.toml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        PromptcraftConfig.load(path)


class TestOverrides:
    def test_none_values_are_ignored(self):
        config = PromptcraftConfig()
        assert config.with_session_overrides(restart_policy=None, pause_seconds=None) is config

    def test_overrides_apply(self):
        config = PromptcraftConfig().with_session_overrides(restart_policy="clear", pause_seconds=0)
        assert config.session.restart_policy is RestartPolicy.CLEAR
        assert config.session.pause_seconds == 0

    def test_original_is_unchanged(self):
        original = PromptcraftConfig()
        original.with_session_overrides(pause_seconds=3)
        assert original.session.pause_seconds == 1.0

    def test_invalid_override_raises(self):
        with pytest.raises(ConfigError):
            PromptcraftConfig().with_session_overrides(pause_seconds=-2)
