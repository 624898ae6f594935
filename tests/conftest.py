"""Pytest fixtures for Promptcraft tests."""

from __future__ import annotations

import pytest

from promptcraft.app import PromptcraftApp
from promptcraft.config import PromptcraftConfig, RestartPolicy, SessionSettings
from promptcraft.debug_log import clear_log_buffer


@pytest.fixture(autouse=True)
def _clean_log_buffer():
    clear_log_buffer()
    yield
    clear_log_buffer()


@pytest.fixture
def settings() -> SessionSettings:
    """Session settings without courtesy pauses."""
    return SessionSettings(pause_seconds=0)


@pytest.fixture
def clear_settings() -> SessionSettings:
    return SessionSettings(pause_seconds=0, restart_policy=RestartPolicy.CLEAR)


@pytest.fixture
def app() -> PromptcraftApp:
    """TUI app configured for tests."""
    return PromptcraftApp(PromptcraftConfig(session=SessionSettings(pause_seconds=0)))
