"""
vitebridge CLI - terminal output.

Thin wrappers over click.style so commands never format ANSI themselves.
click honours NO_COLOR and TERM=dumb.
"""

from __future__ import annotations

import shutil
from typing import Optional, Sequence

import click

_RULE = "─"
_CHECK = "✓"
_CROSS = "✗"


def _width() -> int:
    columns = shutil.get_terminal_size((80, 24)).columns
    return max(40, min(columns, 120))


def success(message: str) -> None:
    click.secho(message, fg="green")


def error(message: str) -> None:
    # stdout, so scripted callers see it alongside --json output
    click.secho(message, fg="red")


def warning(message: str) -> None:
    click.secho(message, fg="yellow")


def section(title: str, *, width: Optional[int] = None) -> None:
    """
    Print a titled rule::

        ── Manifest ─────────────────────────
    """
    fill = max(4, (width or _width()) - len(title) - 6)
    click.secho(f"{_RULE * 2} {title} {_RULE * fill}", fg="cyan", bold=True)


def kv(key: str, value: str, *, key_width: int = 20) -> None:
    """Print ``key: value`` with values lined up in one column."""
    label = f"{key}:".ljust(key_width)
    click.echo(f"  {label}{click.style(str(value), fg='cyan')}")


def table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    """
    Print rows under a header, each column padded to its widest cell::

        Kind    Handle        URL
        ─────── ───────────── ──────────────────
        module  theme/main    /dist/assets/main-4f2a.js
    """
    cols = [
        max([len(h)] + [len(str(row[i])) for row in rows if i < len(row)]) + 2
        for i, h in enumerate(headers)
    ]

    head = "".join(h.ljust(cols[i]) for i, h in enumerate(headers))
    click.secho(f"  {head}", fg="cyan", bold=True)
    click.secho("  " + " ".join(_RULE * (c - 1) for c in cols), dim=True)

    for row in rows:
        line = "".join(str(cell).ljust(cols[i]) for i, cell in enumerate(row[:len(cols)]))
        click.echo(f"  {line.rstrip()}")
