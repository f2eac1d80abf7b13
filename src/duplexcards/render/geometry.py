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

from dataclasses import dataclass

from ..core.models import Side
from .types import Rect

# Tolerance for coordinate comparisons
COORDINATE_EPSILON = 0.01


@dataclass(frozen=True)
class SheetGeometry:
    page_w: float
    page_h: float
    margin: float
    gutter: float
    cols: int
    rows: int

    def __post_init__(self) -> None:
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError("grid needs at least one column and one row")
        if self.margin < 0 or self.gutter < 0:
            raise ValueError("margin and gutter must not be negative")
        if self.cell_w <= 0 or self.cell_h <= 0:
            raise ValueError("page too small for the grid")

    @property
    def per_page(self) -> int:
        return self.cols * self.rows

    @property
    def usable_w(self) -> float:
        return self.page_w - 2 * self.margin

    @property
    def usable_h(self) -> float:
        return self.page_h - 2 * self.margin

    @property
    def cell_w(self) -> float:
        return (self.usable_w - (self.cols - 1) * self.gutter) / self.cols

    @property
    def cell_h(self) -> float:
        return (self.usable_h - (self.rows - 1) * self.gutter) / self.rows

    def slot(self, index: int) -> tuple[int, int]:
        if not 0 <= index < self.per_page:
            raise IndexError(f"slot index out of range: {index}")
        return divmod(index, self.cols)

    def effective_col(self, side: Side, col: int) -> int:
        # Flipping the sheet on its long edge reverses columns, never rows.
        if side is Side.BACK:
            return self.cols - 1 - col
        return col

    def cell_rect(self, side: Side, row: int, col: int) -> Rect:
        if not 0 <= row < self.rows:
            raise IndexError(f"row out of range: {row}")
        if not 0 <= col < self.cols:
            raise IndexError(f"column out of range: {col}")
        placed_col = self.effective_col(side, col)
        x = self.margin + placed_col * (self.cell_w + self.gutter)
        y = self.page_h - self.margin - (row + 1) * self.cell_h - row * self.gutter
        return Rect(x=x, y=y, width=self.cell_w, height=self.cell_h)


PAPER_SIZES_PT: dict[str, tuple[float, float]] = {
    "A4": (595.28, 841.89),
    "LETTER": (612.0, 792.0),
}


def paper_size_pt(name: str) -> tuple[float, float]:
    key = name.strip().upper()
    try:
        return PAPER_SIZES_PT[key]
    except KeyError:
        raise ValueError(f"unknown paper size: {name}") from None
