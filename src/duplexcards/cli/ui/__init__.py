#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

"""Console output for the CLI: one themed console per stream."""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import contextmanager
from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from ...core.models import Card

THEME = Theme(
    {
        "card.index": "dim",
        "card.front": "bold",
        "card.translation": "cyan",
        "progress": "dim",
        "done": "green",
        "summary": "cyan",
    }
)


@dataclass
class Consoles:
    out: Console
    err: Console
    animations: bool = True


def make_consoles() -> Consoles:
    return Consoles(out=Console(theme=THEME), err=Console(stderr=True, theme=THEME))


CONSOLES = make_consoles()
console = CONSOLES.out
console_err = CONSOLES.err


def configure_ui(
    *,
    no_color: bool,
    no_animations: bool,
    consoles: Consoles | None = None,
) -> None:
    consoles = consoles or CONSOLES
    consoles.animations = not no_animations
    consoles.out.no_color = no_color
    consoles.err.no_color = no_color


@contextmanager
def status(message: str, *, quiet: bool, consoles: Consoles | None = None):
    """Show ``message`` with a spinner while the block runs.

    Without animations the message is printed once; ``quiet`` prints nothing.
    """
    consoles = consoles or CONSOLES
    if quiet:
        yield None
        return
    if not consoles.animations:
        consoles.out.print(Text(message, style="progress"))
        yield None
        return
    spinner = Spinner("dots", text=Text(message, style="progress"))
    with Live(spinner, console=consoles.out, refresh_per_second=12) as live:
        try:
            yield live
        finally:
            live.update(Text(f"✓ {message}", style="done"), refresh=True)


def build_cards_table(cards: Sequence[Card], *, title: str | None = None) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAD)
    table.add_column("#", style="card.index", justify="right", no_wrap=True)
    table.add_column("Front", style="card.front")
    table.add_column("Secondary")
    table.add_column("Translation", style="card.translation")
    for number, card in enumerate(cards, start=1):
        table.add_row(str(number), card.primary, card.secondary, card.translation)
    return table


def build_summary(lines: Sequence[str]) -> Table:
    grid = Table.grid(padding=(0, 1))
    grid.add_column(no_wrap=True)
    grid.add_column()
    for line in lines:
        grid.add_row("-", Text(line))
    return grid


def print_completion_panel(title: str, lines: Sequence[str], *, quiet: bool) -> None:
    if quiet:
        return
    console.print(
        Panel(
            build_summary(lines),
            title=title,
            title_align="left",
            border_style="summary",
            box=box.ROUNDED,
            padding=(1, 2),
        )
    )


__all__ = [
    "CONSOLES",
    "THEME",
    "Consoles",
    "build_cards_table",
    "build_summary",
    "configure_ui",
    "console",
    "console_err",
    "make_consoles",
    "print_completion_panel",
    "status",
]
