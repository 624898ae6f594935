"""Plain line-prompt collaborator for terminals without a TUI."""

from __future__ import annotations

import asyncio
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import click

from promptcraft.core.session import DisplayTone
from promptcraft.errors import CollaboratorError, SessionAborted

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from promptcraft.core.models import FieldSpec, Option

TONE_STYLES: dict[DisplayTone, dict[str, Any]] = {
    DisplayTone.PLAIN: {},
    DisplayTone.HEADING: {"bold": True},
    DisplayTone.TIP: {"dim": True},
    DisplayTone.SUCCESS: {"fg": "green", "bold": True},
    DisplayTone.NOTICE: {"fg": "yellow"},
    DisplayTone.FAINT: {"dim": True},
}

MULTILINE_HINT = "(several lines allowed; finish with an empty line)"


@contextmanager
def _interaction() -> Iterator[None]:
    """Translate click prompt failures into session errors."""
    try:
        yield
    except click.Abort as e:
        raise SessionAborted from e
    except OSError as e:
        raise CollaboratorError(str(e)) from e


def _limit(max_length: int) -> Callable[[str], str]:
    def convert(value: str) -> str:
        if len(value) > max_length:
            msg = f"at most {max_length} characters allowed (got {len(value)})"
            raise click.BadParameter(msg)
        return value

    return convert


def parse_choices(value: str, count: int) -> list[int]:
    """Parse ``"1, 3"`` into sorted zero-based indexes.

    Raises:
        click.BadParameter: On a non-number or an out-of-range choice.
    """
    indexes: set[int] = set()
    for part in value.replace(",", " ").split():
        if not part.isdigit() or not 1 <= int(part) <= count:
            msg = f"{part!r} is not a number between 1 and {count}"
            raise click.BadParameter(msg)
        indexes.add(int(part) - 1)
    return sorted(indexes)


def _prompt_lines(spec: FieldSpec) -> str:
    """Read lines until a blank one. A blank first line keeps the default."""
    if spec.default:
        click.echo(click.style(f"Current value (blank line keeps it):\n{spec.default}", dim=True))
    click.echo(click.style(MULTILINE_HINT, dim=True))
    lines: list[str] = []
    text, suffix = spec.label, ": "
    while line := click.prompt(text, default="", show_default=False, prompt_suffix=suffix):
        lines.append(line)
        text, suffix = "", "> "
    if not lines:
        return spec.default

    value = "\n".join(lines)
    if len(value) > spec.max_length:
        click.echo(
            click.style(f"{spec.label} clipped to {spec.max_length} characters", fg="yellow")
        )
        value = value[: spec.max_length]
    return value


def _echo_options(options: Sequence[Option]) -> None:
    for number, option in enumerate(options, 1):
        click.echo(f"  {number}) {option.label}")


class ConsoleCollaborator:
    """Collect input with ``click.prompt`` and friends.

    Ctrl+C or end of input aborts the session.
    """

    async def collect_fields(self, title: str, fields: Sequence[FieldSpec]) -> dict[str, str]:
        click.echo(click.style(title, bold=True))
        values: dict[str, str] = {}
        for spec in fields:
            if spec.description:
                click.echo(click.style(spec.description, dim=True))
            with _interaction():
                if spec.multiline:
                    values[spec.name] = _prompt_lines(spec)
                else:
                    values[spec.name] = click.prompt(
                        spec.label,
                        default=spec.default,
                        show_default=bool(spec.default),
                        value_proc=_limit(spec.max_length),
                    )
        return values

    async def select_one(
        self, title: str, options: Sequence[Option], default: str | None = None
    ) -> str:
        if not options:
            return default or ""
        click.echo(click.style(title, bold=True))
        _echo_options(options)
        default_number = next(
            (number for number, option in enumerate(options, 1) if option.value == default), 1
        )
        with _interaction():
            number = click.prompt(
                "Choose", type=click.IntRange(1, len(options)), default=default_number
            )
        return options[number - 1].value

    async def select_many(self, title: str, options: Sequence[Option]) -> list[str]:
        if not options:
            return []
        click.echo(click.style(title, bold=True))
        _echo_options(options)
        with _interaction():
            indexes = click.prompt(
                "Choose (comma-separated, blank for none)",
                default="",
                show_default=False,
                value_proc=lambda value: parse_choices(value, len(options)),
            )
        return [options[index].value for index in indexes]

    async def confirm(self, prompt: str) -> bool:
        with _interaction():
            return click.confirm(prompt, default=False)

    def display(self, text: str, tone: DisplayTone = DisplayTone.PLAIN) -> None:
        click.echo(click.style(text, **TONE_STYLES[tone]))

    async def pause(self, seconds: float, label: str = "") -> None:
        if label:
            click.echo(click.style(label, dim=True))
        await asyncio.sleep(seconds)
