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

import sys
from pathlib import Path

from ...core.errors import InputEmptyError
from ...core.models import Card
from ...formats import decode_card_list, parse_cards

STDIN_MARKER = "-"


def _read_input_bytes(raw: str) -> bytes:
    if raw == STDIN_MARKER:
        return sys.stdin.buffer.read()
    path = Path(raw).expanduser()
    if not path.exists():
        raise ValueError(f"input file not found: {path}")
    if path.is_dir():
        raise ValueError(f"input path is a directory: {path}")
    return path.read_bytes()


def _input_label(raw: str) -> str:
    return "stdin" if raw == STDIN_MARKER else str(Path(raw).expanduser())


def _load_cards(raw: str) -> list[Card]:
    """Read and parse a card list; an input without a single valid line is an error."""
    cards = parse_cards(decode_card_list(_read_input_bytes(raw)))
    if not cards:
        raise InputEmptyError(
            f"{_input_label(raw)} contains no valid lines (expected 3 fields per line)"
        )
    return cards
