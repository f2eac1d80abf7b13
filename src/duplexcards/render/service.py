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

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import PurePath

from ..config import AppConfig, OutputFormat
from ..core.errors import InputEmptyError
from ..core.models import Card
from .fonts import FontSpec
from .html_render import HtmlSurface
from .pages import paginate
from .pdf_render import PdfSurface
from .spec import SheetSpec
from .types import DrawingSurface, DrawLine, DrawRect, DrawText, PageJob

OUTPUT_SUFFIXES: dict[OutputFormat, str] = {"pdf": ".pdf", "html": ".html"}


@dataclass(frozen=True)
class RenderResult:
    data: bytes
    format: OutputFormat
    card_count: int
    page_count: int


def create_surface(output_format: OutputFormat, font: FontSpec | None = None) -> DrawingSurface:
    if output_format == "pdf":
        return PdfSurface(font)
    if output_format == "html":
        return HtmlSurface(font)
    raise ValueError(f"unsupported output format: {output_format}")


def replay(jobs: Iterable[PageJob], surface: DrawingSurface) -> int:
    pages = 0
    for job in jobs:
        surface.new_page(job.width, job.height)
        surface.mark_side(job.side.value)
        for instruction in job.instructions():
            if isinstance(instruction, DrawRect):
                rect = instruction.rect
                surface.draw_rectangle(
                    rect.x, rect.y, rect.width, rect.height, instruction.border_width
                )
            elif isinstance(instruction, DrawLine):
                surface.draw_line(instruction.start, instruction.end, instruction.thickness)
            elif isinstance(instruction, DrawText):
                surface.draw_text(instruction.content, instruction.x, instruction.y, instruction.size)
        pages += 1
    return pages


def render_cards(
    cards: Sequence[Card], spec: SheetSpec, surface: DrawingSurface
) -> tuple[bytes, int]:
    """Draw every page of ``cards`` on ``surface``; return the document and its page count."""
    if not cards:
        raise InputEmptyError()
    jobs = paginate(cards, spec, surface.measure_text_width)
    pages = replay(jobs, surface)
    return surface.save(), pages


def output_filename(filename: str, output_format: OutputFormat) -> str:
    path = PurePath(filename)
    return str(path.with_suffix(OUTPUT_SUFFIXES[output_format]))


@dataclass(frozen=True)
class RenderService:
    config: AppConfig

    def sheet_spec(self, *, script: str | None = None) -> SheetSpec:
        return self.config.sheet_spec(script=script)

    def render(
        self,
        cards: Sequence[Card],
        *,
        output_format: OutputFormat | None = None,
        script: str | None = None,
    ) -> RenderResult:
        resolved_format = output_format or self.config.output.format
        spec = self.sheet_spec(script=script)
        surface = create_surface(resolved_format, self.config.font)
        data, pages = render_cards(cards, spec, surface)
        return RenderResult(
            data=data,
            format=resolved_format,
            card_count=len(cards),
            page_count=pages,
        )

    def default_output_name(self, output_format: OutputFormat | None = None) -> str:
        return output_filename(
            self.config.output.filename, output_format or self.config.output.format
        )
