"""CLI entry point for Promptcraft."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from promptcraft import __version__
from promptcraft.config import PromptcraftConfig, RestartPolicy
from promptcraft.constants import CANCELLED_MESSAGE, DEFAULT_CONFIG_PATH
from promptcraft.core.models import FinalPrompt
from promptcraft.errors import CollaboratorError, ConfigError, SessionAborted

# Content color of the rendered prompt (xterm 212)
CONTENT_COLOR = (255, 135, 215)


def render_styled(final: FinalPrompt) -> str:
    """Render the final prompt with bold labels and colored content."""
    return "".join(
        f"{click.style(label, bold=True)}\n{click.style(content, fg=CONTENT_COLOR)}\n\n"
        for label, content in final.sections()
    )


def _run_plain(config: PromptcraftConfig) -> FinalPrompt:
    from promptcraft.console import ConsoleCollaborator
    from promptcraft.core.session import SessionController

    controller = SessionController(ConsoleCollaborator(), config.session)
    try:
        return asyncio.run(controller.run())
    except SessionAborted:
        click.echo(f"\n{CANCELLED_MESSAGE}")
        sys.exit(0)
    except CollaboratorError as e:
        click.echo(f"Uh oh: {e}", err=True)
        sys.exit(1)


def _run_tui(config: PromptcraftConfig) -> FinalPrompt:
    # Import here to avoid slow startup for --help/--version
    from promptcraft.app import PromptcraftApp

    app = PromptcraftApp(config)
    final = app.run()
    if app.return_code:
        sys.exit(app.return_code)
    if final is None:
        sys.exit(0)
    return final


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Compose structured LLM prompts interactively."""
    if version:
        click.echo(f"promptcraft {__version__}")
        ctx.exit(0)

    # Run the compose session by default if no subcommand
    if ctx.invoked_subcommand is None:
        ctx.invoke(compose)


@cli.command()
@click.option(
    "--config",
    "config_path",
    default=DEFAULT_CONFIG_PATH,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to config file",
)
@click.option(
    "--restart-policy",
    type=click.Choice([policy.value for policy in RestartPolicy]),
    default=None,
    help="Pre-fill or clear the form after declining confirmation",
)
@click.option(
    "--pause",
    "pause_seconds",
    type=click.FloatRange(min=0),
    default=None,
    help="Seconds to pause before guidance and final output",
)
@click.option("--plain", is_flag=True, help="Use line prompts instead of the TUI")
def compose(
    config_path: Path,
    restart_policy: str | None,
    pause_seconds: float | None,
    plain: bool,
) -> None:
    """Run an interactive compose session (default command)."""
    try:
        config = PromptcraftConfig.load(config_path).with_session_overrides(
            restart_policy=restart_policy,
            pause_seconds=pause_seconds,
        )
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    # Fall back to line prompts when stdin is not a terminal
    if plain or not sys.stdin.isatty():
        final = _run_plain(config)
    else:
        final = _run_tui(config)

    click.echo(render_styled(final), nl=False)


if __name__ == "__main__":
    cli()
