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

"""Root ``duplexcards`` command: global options shared by every subcommand."""

from __future__ import annotations

from dataclasses import asdict, dataclass

import typer
from rich.markup import escape

from . import command_registry
from .core.common import _get_version, _paper_callback
from .startup import run_startup
from .ui import console, console_err

app = typer.Typer(
    add_completion=False,
    help=(
        "Turn a word list into printable double-sided flashcard sheets.\n\n"
        "Eight cards per page; every front page is followed by its mirrored back."
    ),
)


@dataclass(frozen=True)
class GlobalOptions:
    config: str | None = None
    paper: str | None = None
    debug: bool = False
    quiet: bool = False
    no_color: bool = False
    no_animations: bool = False


def _show_version(value: bool) -> None:
    if not value:
        return
    console.print(f"duplexcards {_get_version()}")
    raise typer.Exit()


@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        metavar="TOML",
        help="Layout config to use instead of the user or packaged default.",
        rich_help_panel="Layout",
    ),
    paper: str | None = typer.Option(
        None,
        "--paper",
        metavar="SIZE",
        help="Packaged paper config: A4 or Letter.",
        callback=_paper_callback,
        rich_help_panel="Layout",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", help="Print errors only.", rich_help_panel="Output"
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Plain, uncolored console output.", rich_help_panel="Output"
    ),
    no_animations: bool = typer.Option(
        False,
        "--no-animations",
        help="Print progress as plain lines instead of a spinner.",
        rich_help_panel="Output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Raise errors with a full traceback.",
        rich_help_panel="Troubleshooting",
    ),
    init_config: bool = typer.Option(
        False,
        "--init-config",
        is_eager=True,
        help="Write the A4 and Letter configs to the user config directory, then exit.",
        rich_help_panel="Layout",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        is_eager=True,
        callback=_show_version,
        help="Print the installed version.",
        rich_help_panel="Troubleshooting",
    ),
) -> None:
    options = GlobalOptions(
        config=config,
        paper=paper,
        debug=debug,
        quiet=quiet,
        no_color=no_color,
        no_animations=no_animations,
    )
    try:
        done = run_startup(
            quiet=options.quiet,
            no_color=options.no_color,
            no_animations=options.no_animations,
            debug=options.debug,
            init_config=init_config,
        )
    except OSError as exc:
        console_err.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2)
    if done:
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console_err.print(
            "[red]Error:[/red] missing command (build or check). "
            "See `duplexcards --help`."
        )
        raise typer.Exit(code=2)
    ctx.ensure_object(dict)
    ctx.obj.update(asdict(options))


command_registry.register(app)


def main() -> None:
    app()
