"""Status-line output for the command-line tools.

Colored marks on a terminal, plain text otherwise. Errors go to stderr.
"""

from __future__ import annotations

import rich.console
import rich.markup

_RULE = "═" * 63


def _console(*, stderr: bool = False) -> rich.console.Console:
    # Built per call so redirected/captured streams are picked up.
    return rich.console.Console(stderr=stderr, soft_wrap=True, highlight=False)


def header(title: str) -> None:
    out = _console()
    out.print(f"[blue]{_RULE}[/blue]")
    out.print(f"[blue]{rich.markup.escape(title)}[/blue]")
    out.print(f"[blue]{_RULE}[/blue]")


def success(message: str) -> None:
    _console().print(f"[green]✓[/green] {rich.markup.escape(message)}")


def error(message: str) -> None:
    _console(stderr=True).print(f"[red]✗[/red] {rich.markup.escape(message)}")


def warning(message: str) -> None:
    _console().print(f"[yellow]⚠[/yellow] {rich.markup.escape(message)}")


def info(message: str) -> None:
    _console().print(f"[blue]ℹ[/blue] {rich.markup.escape(message)}")


def section(title: str, lines: list[str], *, style: str = "yellow") -> None:
    """Print a titled block of indented lines followed by a blank line."""
    out = _console()
    out.print(f"[{style}]{rich.markup.escape(title)}[/{style}]")
    for line in lines:
        out.print(f"  {rich.markup.escape(line)}")
    out.print()
