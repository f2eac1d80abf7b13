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
from pathlib import Path
from typing import cast

import typer

from ...config import OutputFormat, load_app_config
from ...render.service import RenderService
from ..core.common import (
    _apply_ui_defaults,
    _ctx_value,
    _format_callback,
    _paper_callback,
    _resolve_config_and_paper,
    _run_cli,
    _script_callback,
)
from ..io.inputs import _load_cards
from ..io.outputs import _write_output
from ..ui import print_completion_panel, status

_BUILD_HELP = (
    "Build a printable double-sided flashcard sheet.\n\n"
    "Each input line holds three fields separated by ';' (or ',' when no ';'\n"
    "is present): front text, secondary text, translation. Empty lines and\n"
    "lines starting with '#' are skipped.\n\n"
    "Print the result double-sided, flipping on the long edge.\n\n"
    "Examples:\n"
    "  duplexcards build words.txt\n"
    "  duplexcards build words.txt -o verbs.pdf --paper LETTER\n"
    "  duplexcards build words.txt --format html --script cjk\n"
    "  cat words.txt | duplexcards build -"
)


def register(app: typer.Typer) -> None:
    app.command(help=_BUILD_HELP)(build)


def _run_build(
    *,
    input_path: str,
    output: Path | None,
    output_format: str | None,
    script: str | None,
    config_value: str | None,
    paper_value: str | None,
    quiet_value: bool,
) -> None:
    cards = _load_cards(input_path)
    config = load_app_config(config_value, paper_size=paper_value)
    quiet_value = _apply_ui_defaults(config.ui, quiet=quiet_value)
    service = RenderService(config)
    resolved_format = cast(OutputFormat, output_format or config.output.format)
    output_path = output or Path(service.default_output_name(resolved_format))

    with status(
        f"{len(cards)} cards, generating {resolved_format.upper()}...", quiet=quiet_value
    ):
        result = service.render(cards, output_format=resolved_format, script=script)
    _write_output(output_path, result.data, quiet=quiet_value)

    sheets = result.page_count // 2
    print_completion_panel(
        "Flashcards ready",
        [
            f"Saved to {output_path}",
            f"Cards: {result.card_count}",
            f"Pages: {result.page_count} ({sheets} {'sheet' if sheets == 1 else 'sheets'})",
            "Print double-sided and flip on the long edge.",
        ],
        quiet=quiet_value,
    )


def build(
    ctx: typer.Context,
    input_path: str = typer.Argument(
        ...,
        metavar="INPUT",
        help="Card list file, or '-' to read from stdin.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (default: output.filename from the config).",
        rich_help_panel="Outputs",
    ),
    output_format: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: pdf or html (default: from the config).",
        callback=_format_callback,
        rich_help_panel="Outputs",
    ),
    script: str | None = typer.Option(
        None,
        "--script",
        help="Front size table: latin or cjk (default: from the config).",
        callback=_script_callback,
        rich_help_panel="Layout",
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
        help="Suppress progress output.",
        rich_help_panel="Behavior",
    ),
) -> None:
    config_value, paper_value = _resolve_config_and_paper(ctx, config, paper)
    quiet_value = quiet or bool(_ctx_value(ctx, "quiet"))
    _run_cli(
        functools.partial(
            _run_build,
            input_path=input_path,
            output=output,
            output_format=output_format,
            script=script,
            config_value=config_value,
            paper_value=paper_value,
            quiet_value=quiet_value,
        ),
        debug=bool(_ctx_value(ctx, "debug")),
    )
