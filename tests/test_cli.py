"""Tests for the command line entry point in plain mode."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from promptcraft import __version__
from promptcraft.__main__ import cli
from promptcraft.constants import CANCELLED_MESSAGE, DEFAULT_CONFIG_PATH, RESTART_MESSAGE
from promptcraft.core.suggestions import SUMMARIZATION_GOAL


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _compose(runner: CliRunner, text: str, *args: str):
    return runner.invoke(cli, ["compose", "--plain", "--pause", "0", *args], input=text)


class TestVersion:
    def test_version_flag(self, runner: CliRunner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert result.output.strip() == f"promptcraft {__version__}"


class TestPlainSession:
    def test_unknown_goal_prints_sections(self, runner: CliRunner):
        result = _compose(runner, "Write a haiku\nPlain text\n\nctx\n\ny\n")

        assert result.exit_code == 0, result.output
        assert result.output.endswith(
            "Goal:\nWrite a haiku\n\n"
            "Return Format:\nPlain text\n\n"
            "Warnings:\n\n\n"
            "Context Dump:\nctx\n\n"
        )
        assert "Detected Intent" not in result.output

    def test_summarization_with_selected_warning(self, runner: CliRunner):
        # A blank line ends the context; Enter accepts the refined goal; "2" picks
        # the second format and warning
        result = _compose(runner, "Summarize the findings\n\n\nctx\n\n\n2\n2\ny\n")

        assert result.exit_code == 0, result.output
        assert "Detected Intent: Summarization" in result.output
        assert "Keep original (empty)" in result.output
        assert "Return Format:\nConcise paragraph overview\n\n" in result.output
        assert "Warnings:\n- Avoid jargon\n\n" in result.output

    def test_multiline_context_stays_in_its_field(self, runner: CliRunner):
        result = _compose(
            runner, "Summarize the findings\n\n\nsection A\nsection B\n\n\n\n\ny\n"
        )

        assert result.exit_code == 0, result.output
        assert f"Goal:\n{SUMMARIZATION_GOAL}\n\n" in result.output
        assert "Return Format:\nBulleted list of key points\n\n" in result.output
        assert result.output.endswith("Context Dump:\nsection A\nsection B\n\n")

    def test_blank_line_keeps_prefilled_multiline_context(self, runner: CliRunner):
        result = _compose(
            runner, "Write a haiku\n\n\nline one\nline two\n\nn\n\n\n\n\ny\n"
        )

        assert result.exit_code == 0, result.output
        assert "Current value (blank line keeps it):\nline one\nline two" in result.output
        assert result.output.endswith("Context Dump:\nline one\nline two\n\n")

    def test_long_multiline_context_is_clipped_with_notice(self, runner: CliRunner):
        with runner.isolated_filesystem():
            Path("config.toml").write_text("[session]\nmax_field_length = 8\n")
            result = _compose(
                runner, "Write\n\n\nabcdef\nghijkl\n\ny\n", "--config", "config.toml"
            )

        assert result.exit_code == 0, result.output
        assert "Context Dump clipped to 8 characters" in result.output
        assert result.output.endswith("Context Dump:\nabcdef\ng\n\n")

    def test_out_of_range_choice_reprompts(self, runner: CliRunner):
        result = _compose(runner, "Summarize the findings\n\n\n\n\n9\n1\n\ny\n")

        assert result.exit_code == 0, result.output
        assert "Return Format:\nBulleted list of key points\n\n" in result.output

    def test_end_of_input_cancels(self, runner: CliRunner):
        result = _compose(runner, "Write a haiku\n")

        assert result.exit_code == 0
        assert CANCELLED_MESSAGE in result.output
        assert "Goal:\n" not in result.output

    def test_declined_confirmation_prefills_next_cycle(self, runner: CliRunner):
        result = _compose(runner, "Write a haiku\nPlain text\n\nctx\n\nn\n\n\n\n\ny\n")

        assert result.exit_code == 0, result.output
        assert RESTART_MESSAGE in result.output
        assert "[Write a haiku]" in result.output
        assert "Goal:\nWrite a haiku\n\n" in result.output
        assert "Context Dump:\nctx\n\n" in result.output

    def test_clear_policy_starts_from_empty_form(self, runner: CliRunner):
        result = _compose(
            runner,
            "Write a haiku\n\n\n\nn\nWrite a limerick\n\n\n\ny\n",
            "--restart-policy",
            "clear",
        )

        assert result.exit_code == 0, result.output
        assert "[Write a haiku]" not in result.output
        assert "Goal:\nWrite a limerick\n\n" in result.output


class TestConfig:
    def test_invalid_config_fails(self, runner: CliRunner):
        with runner.isolated_filesystem():
            Path("bad.toml").write_text('[session]\nrestart_policy = "sometimes"\n')
            result = runner.invoke(cli, ["compose", "--plain", "--config", "bad.toml"])

        assert result.exit_code == 1
        assert "Invalid config" in result.output

    def test_default_command_reads_default_config(self, runner: CliRunner):
        with runner.isolated_filesystem():
            path = Path(DEFAULT_CONFIG_PATH)
            path.parent.mkdir(parents=True)
            path.write_text("[session]\npause_seconds = 0\n")
            result = runner.invoke(cli, [], input="Write a haiku\n\n\n\ny\n")

        assert result.exit_code == 0, result.output
        assert "Goal:\nWrite a haiku\n\n" in result.output
