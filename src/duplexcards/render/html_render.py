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

"""HTML print preview: one SVG per page, sized in points.

Text widths come from fpdf2 font metrics so that placement matches the PDF
output; the browser must render the same font for the centering to hold.
"""

from __future__ import annotations

from pathlib import Path
from typing import cast

from .fonts import FontSpec, css_font_family, metrics_pdf, resolve_font_path, string_width
from .templating import DEFAULT_SHEET_TEMPLATE_PATH, data_uri_for_path, render_template
from .types import Point

EMBEDDED_FONT_NAME = "DuplexcardsFont"
DOCUMENT_TITLE = "Flashcards"


class HtmlSurface:
    def __init__(
        self,
        font: FontSpec | None = None,
        *,
        title: str = DOCUMENT_TITLE,
        template_path: str | Path = DEFAULT_SHEET_TEMPLATE_PATH,
    ) -> None:
        self._font = font or FontSpec()
        self._metrics, self._family = metrics_pdf(self._font)
        self._font_path = resolve_font_path(self._font)
        self._title = title
        self._template_path = Path(template_path)
        self._pages: list[dict[str, object]] = []

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def new_page(self, width: float, height: float) -> None:
        self._pages.append({"width": width, "height": height, "side": "", "items": []})

    def mark_side(self, side: str) -> None:
        self._current()["side"] = side

    def draw_rectangle(
        self, x: float, y: float, width: float, height: float, border_width: float
    ) -> None:
        page_h = self._page_height()
        self._items().append(
            {
                "kind": "rect",
                "x": x,
                "y": page_h - y - height,
                "width": width,
                "height": height,
                "stroke": border_width,
            }
        )

    def draw_line(self, start: Point, end: Point, thickness: float) -> None:
        page_h = self._page_height()
        self._items().append(
            {
                "kind": "line",
                "x1": start[0],
                "y1": page_h - start[1],
                "x2": end[0],
                "y2": page_h - end[1],
                "stroke": thickness,
            }
        )

    def draw_text(self, content: str, x: float, y: float, size: float) -> None:
        page_h = self._page_height()
        self._items().append(
            {"kind": "text", "x": x, "y": page_h - y, "size": size, "content": content}
        )

    def measure_text_width(self, content: str, size: float) -> float:
        return string_width(self._metrics, self._family, content, size)

    def save(self) -> bytes:
        first = self._pages[0] if self._pages else {"width": 0.0, "height": 0.0}
        context: dict[str, object] = {
            "title": self._title,
            "page_width": first["width"],
            "page_height": first["height"],
            "pages": self._pages,
            "font_src": data_uri_for_path(self._font_path) if self._font_path else None,
            "embedded_font_name": EMBEDDED_FONT_NAME,
            "font_family_css": css_font_family(self._font, embedded_name=EMBEDDED_FONT_NAME),
        }
        return render_template(self._template_path, context).encode("utf-8")

    def _current(self) -> dict[str, object]:
        if not self._pages:
            raise RuntimeError("new_page() must be called before drawing")
        return self._pages[-1]

    def _items(self) -> list[dict[str, object]]:
        return cast(list, self._current()["items"])

    def _page_height(self) -> float:
        return float(cast(float, self._current()["height"]))
