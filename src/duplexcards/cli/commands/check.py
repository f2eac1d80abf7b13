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

from __future__ import annotations

import functools

import typer

from ...config import load_app_config
from ...render.pages import page_count
from ..core.common import (
    _apply_ui_defaults,
    _ctx_value,
    _paper_callback,
    _resolve_config_and_paper,
    _run_cli,
)
from ..core.log import _warn
from ..io.inputs import _load_cards
from ..ui import build_cards_table, console, print_completion_panel

_CHECK_HELP = (
    "Parse a card list and show what would be printed, without rendering.\n\n"
    "Examples:\n"
    "  duplexcards check words.txt\n"
    "  cat words.txt | duplexcards check -"
)


def register(app: typer.Typer) -> None:
    app.command(help=_CHECK_HELP)(check)


def _run_check(
    *,
    input_path: str,
    config_value: str | None,
    paper_value: str | None,
    quiet_value: bool,
) -> None:
    cards = _load_cards(input_path)
    config = load_app_config(config_value, paper_size=paper_value)
    quiet_value = _apply_ui_defaults(config.ui, quiet=quiet_value)
    per_page = config.sheet_spec().geometry().per_page
    pages = page_count(len(cards), per_page)

    if not config.font.path:
        for number, card in enumerate(cards, start=1):
            if not _is_latin1(card.primary, card.secondary, card.translation):
                _warn(
                    f"card {number} has characters outside Latin-1; "
                    "set font.path in the config to a TTF font that covers them",
                    quiet=quiet_value,
                )
    if not quiet_value:
        console.print(build_cards_table(cards, title="Cards"))
    padding = pages // 2 * per_page - len(cards)
    print_completion_panel(
        "Card list OK",
        [
            f"Cards: {len(cards)}",
            f"Pages: {pages} ({config.paper_size}, {per_page} cards per page)",
            f"Empty cells on the last sheet: {padding}",
        ],
        quiet=quiet_value,
    )


def _is_latin1(*values: str) -> bool:
    try:
        for value in values:
            value.encode("latin-1")
    except UnicodeEncodeError:
        return False
    return True


def check(
    ctx: typer.Context,
    input_path: str = typer.Argument(
        ...,
        metavar="INPUT",
        help="Card list file, or '-' to read from stdin.",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Use a custom TOML configuration file.",
        rich_help_panel="Config",
    ),
    paper: str | None = typer.Option(
        None,
        "--paper",
        "-p",
        help="Paper size override: A4 (default) or Letter.",
        callback=_paper_callback,
        rich_help_panel="Config",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only report errors.",
        rich_help_panel="Behavior",
    ),
) -> None:
    config_value, paper_value = _resolve_config_and_paper(ctx, config, paper)
    quiet_value = quiet or bool(_ctx_value(ctx, "quiet"))
    _run_cli(
        functools.partial(
            _run_check,
            input_path=input_path,
            config_value=config_value,
            paper_value=paper_value,
            quiet_value=quiet_value,
        ),
        debug=bool(_ctx_value(ctx, "debug")),
    )
