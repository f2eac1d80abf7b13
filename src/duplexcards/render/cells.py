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

from .types import DrawText, Rect, TextMeasure

DEFAULT_LINE_GAP = 8.0


def layout_centered(
    rect: Rect,
    measure: TextMeasure,
    text: str,
    size: float,
) -> DrawText | None:
    content = (text or "").strip()
    if not content:
        return None
    text_w = measure(content, size)
    return DrawText(
        content=content,
        x=rect.x + (rect.width - text_w) / 2,
        y=rect.y + (rect.height - size) / 2,
        size=size,
    )


def layout_two_lines(
    rect: Rect,
    measure: TextMeasure,
    first: str,
    first_size: float,
    second: str,
    second_size: float,
    *,
    gap: float = DEFAULT_LINE_GAP,
) -> tuple[DrawText, ...]:
    """Center a two-line block (first above second) inside ``rect``.

    A missing line contributes neither height nor the gap, so a single
    present line lands exactly where :func:`layout_centered` puts it.
    """
    first = (first or "").strip()
    second = (second or "").strip()
    lines = [(text, size) for text, size in ((first, first_size), (second, second_size)) if text]
    if not lines:
        return ()

    total_h = sum(size for _text, size in lines) + gap * (len(lines) - 1)
    cursor = rect.y + (rect.height + total_h) / 2
    placed: list[DrawText] = []
    for position, (text, size) in enumerate(lines):
        if position:
            cursor -= gap
        cursor -= size
        text_w = measure(text, size)
        placed.append(
            DrawText(content=text, x=rect.x + (rect.width - text_w) / 2, y=cursor, size=size)
        )
    return tuple(placed)
