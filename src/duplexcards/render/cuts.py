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

from .geometry import SheetGeometry
from .types import DrawLine

DEFAULT_CUT_LINE_WIDTH = 0.3


def cut_lines(
    x0: float,
    y0: float,
    width: float,
    height: float,
    cols: int,
    rows: int,
    cell_w: float,
    cell_h: float,
    gutter: float,
    *,
    thickness: float = DEFAULT_CUT_LINE_WIDTH,
) -> tuple[DrawLine, ...]:
    """Cut guides through the middle of every gutter, spanning the usable area."""
    lines: list[DrawLine] = []
    for i in range(1, cols):
        x = x0 + i * (cell_w + gutter) - gutter / 2
        lines.append(DrawLine(start=(x, y0), end=(x, y0 + height), thickness=thickness))
    for j in range(1, rows):
        y = y0 + j * (cell_h + gutter) - gutter / 2
        lines.append(DrawLine(start=(x0, y), end=(x0 + width, y), thickness=thickness))
    return tuple(lines)


def sheet_cut_lines(
    geometry: SheetGeometry,
    *,
    thickness: float = DEFAULT_CUT_LINE_WIDTH,
) -> tuple[DrawLine, ...]:
    return cut_lines(
        geometry.margin,
        geometry.margin,
        geometry.usable_w,
        geometry.usable_h,
        geometry.cols,
        geometry.rows,
        geometry.cell_w,
        geometry.cell_h,
        geometry.gutter,
        thickness=thickness,
    )
