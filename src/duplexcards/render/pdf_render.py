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

from fpdf import FPDF

from .fonts import FontSpec, load_font, string_width
from .types import Point

DOCUMENT_TITLE = "Flashcards"
DOCUMENT_CREATOR = "duplexcards"


class PdfSurface:
    """Drawing surface backed by fpdf2.

    fpdf2 measures y downwards from the top of the page; callers use
    bottom-left coordinates, so every y is flipped against the page height.
    """

    def __init__(self, font: FontSpec | None = None, *, title: str = DOCUMENT_TITLE) -> None:
        self._pdf = FPDF(unit="pt")
        self._pdf.set_auto_page_break(False)
        self._pdf.set_margins(0, 0, 0)
        self._pdf.set_title(title)
        self._pdf.set_creator(DOCUMENT_CREATOR)
        self._family = load_font(self._pdf, font or FontSpec())
        self._page_h = 0.0
        self._sides: list[str] = []

    @property
    def page_count(self) -> int:
        return self._pdf.page

    @property
    def sides(self) -> tuple[str, ...]:
        return tuple(self._sides)

    def new_page(self, width: float, height: float) -> None:
        self._pdf.add_page(format=(width, height))
        self._page_h = height
        self._pdf.set_draw_color(0, 0, 0)
        self._pdf.set_text_color(0, 0, 0)

    def mark_side(self, side: str) -> None:
        self._sides.append(side)

    def draw_rectangle(
        self, x: float, y: float, width: float, height: float, border_width: float
    ) -> None:
        self._require_page()
        self._pdf.set_line_width(border_width)
        self._pdf.rect(x, self._page_h - y - height, width, height, style="D")

    def draw_line(self, start: Point, end: Point, thickness: float) -> None:
        self._require_page()
        self._pdf.set_line_width(thickness)
        self._pdf.line(start[0], self._page_h - start[1], end[0], self._page_h - end[1])

    def draw_text(self, content: str, x: float, y: float, size: float) -> None:
        self._require_page()
        self._pdf.set_font(self._family, size=size)
        self._pdf.text(x, self._page_h - y, content)

    def measure_text_width(self, content: str, size: float) -> float:
        return string_width(self._pdf, self._family, content, size)

    def save(self) -> bytes:
        return bytes(self._pdf.output())

    def _require_page(self) -> None:
        if self._pdf.page == 0:
            raise RuntimeError("new_page() must be called before drawing")
