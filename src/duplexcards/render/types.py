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

"""Render instructions and the drawing-surface contract.

All coordinates are in points with the origin at the bottom-left corner of
the page. Text positions are baselines.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Protocol, Union

from ..core.models import Side

# (content, size) -> width in points, using the surface's font.
TextMeasure = Callable[[str, float], float]

Point = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2


@dataclass(frozen=True)
class DrawRect:
    rect: Rect
    border_width: float


@dataclass(frozen=True)
class DrawLine:
    start: Point
    end: Point
    thickness: float


@dataclass(frozen=True)
class DrawText:
    content: str
    x: float
    y: float
    size: float


Instruction = Union[DrawRect, DrawLine, DrawText]


@dataclass(frozen=True)
class CellJob:
    index: int
    row: int
    col: int
    border: DrawRect
    texts: tuple[DrawText, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.texts


@dataclass(frozen=True)
class PageJob:
    side: Side
    batch_index: int
    width: float
    height: float
    cuts: tuple[DrawLine, ...]
    cells: tuple[CellJob, ...]

    def instructions(self) -> Iterator[Instruction]:
        yield from self.cuts
        for cell in self.cells:
            yield cell.border
            yield from cell.texts

    def cell(self, index: int) -> CellJob:
        for cell in self.cells:
            if cell.index == index:
                return cell
        raise IndexError(f"no cell with index {index}")


class DrawingSurface(Protocol):
    def new_page(self, width: float, height: float) -> None: ...

    def mark_side(self, side: str) -> None: ...

    def draw_rectangle(
        self, x: float, y: float, width: float, height: float, border_width: float
    ) -> None: ...

    def draw_line(self, start: Point, end: Point, thickness: float) -> None: ...

    def draw_text(self, content: str, x: float, y: float, size: float) -> None: ...

    def measure_text_width(self, content: str, size: float) -> float: ...

    def save(self) -> bytes: ...
