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

"""Delimited card lists.

One card per line, three fields: headword, pronunciation, translation.
Fields are separated by ``;`` when the line contains one, otherwise by
``,``. Anything after the second separator belongs to the translation and is
joined back with the same separator.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from ..core.models import Card

# Only LF and CRLF end a line; other Unicode breaks stay inside a field.
_LINE_BREAK = re.compile(r"\r?\n")

COMMENT_PREFIX = "#"
PREFERRED_SEPARATOR = ";"
FALLBACK_SEPARATOR = ","
FIELD_COUNT = 3


def detect_separator(line: str) -> str:
    if PREFERRED_SEPARATOR in line:
        return PREFERRED_SEPARATOR
    return FALLBACK_SEPARATOR


def parse_line(raw: str) -> Card | None:
    line = raw.strip()
    if not line or line.startswith(COMMENT_PREFIX):
        return None
    separator = detect_separator(line)
    parts = [part.strip() for part in line.split(separator)]
    if len(parts) < FIELD_COUNT:
        return None
    primary = parts[0]
    if not primary:
        return None
    translation = separator.join(parts[FIELD_COUNT - 1 :]).strip()
    return Card(primary=primary, secondary=parts[1], translation=translation)


def iter_cards(lines: Iterable[str]) -> Iterator[Card]:
    for raw in lines:
        card = parse_line(raw)
        if card is not None:
            yield card


def parse_cards(text: str) -> list[Card]:
    return list(iter_cards(_LINE_BREAK.split(text.removeprefix("\ufeff"))))


def decode_card_list(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ValueError(f"card list is not valid UTF-8 (byte {exc.start})") from exc


__all__ = [
    "decode_card_list",
    "detect_separator",
    "iter_cards",
    "parse_cards",
    "parse_line",
]
