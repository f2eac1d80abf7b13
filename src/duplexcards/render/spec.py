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

from dataclasses import dataclass, field, replace

from .cells import DEFAULT_LINE_GAP
from .cuts import DEFAULT_CUT_LINE_WIDTH
from .geometry import PAPER_SIZES_PT, SheetGeometry, paper_size_pt
from .text import FRONT_SCALE, SECONDARY_SCALE, TRANSLATION_SCALE, FontScale

GRID_COLS = 2
GRID_ROWS = 4
DEFAULT_MARGIN_PT = 28.0
DEFAULT_GUTTER_PT = 12.0
DEFAULT_BORDER_WIDTH = 0.6


@dataclass(frozen=True)
class PageSpec:
    size: str = "A4"
    margin: float = DEFAULT_MARGIN_PT
    gutter: float = DEFAULT_GUTTER_PT
    width: float | None = None
    height: float | None = None

    def dimensions(self) -> tuple[float, float]:
        if self.width and self.height:
            return (float(self.width), float(self.height))
        return paper_size_pt(self.size)


@dataclass(frozen=True)
class StrokeSpec:
    border_width: float = DEFAULT_BORDER_WIDTH
    cut_line_width: float = DEFAULT_CUT_LINE_WIDTH


@dataclass(frozen=True)
class TextSpec:
    front: FontScale = FRONT_SCALE
    secondary: FontScale = SECONDARY_SCALE
    translation: FontScale = TRANSLATION_SCALE
    line_gap: float = DEFAULT_LINE_GAP


@dataclass(frozen=True)
class SheetSpec:
    page: PageSpec = field(default_factory=PageSpec)
    strokes: StrokeSpec = field(default_factory=StrokeSpec)
    text: TextSpec = field(default_factory=TextSpec)

    def geometry(self) -> SheetGeometry:
        page_w, page_h = self.page.dimensions()
        return SheetGeometry(
            page_w=page_w,
            page_h=page_h,
            margin=float(self.page.margin),
            gutter=float(self.page.gutter),
            cols=GRID_COLS,
            rows=GRID_ROWS,
        )

    def with_front_scale(self, scale: FontScale) -> "SheetSpec":
        return replace(self, text=replace(self.text, front=scale))


def sheet_spec(paper_size: str = "A4") -> SheetSpec:
    key = paper_size.strip().upper()
    if key not in PAPER_SIZES_PT:
        raise ValueError(f"unknown paper size: {paper_size}")
    return SheetSpec(page=PageSpec(size=key))
