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

"""Pagination of a card list into front/back page jobs.

Every batch of ``cols * rows`` cards yields a front page followed directly by
its back page. Printers pair consecutive pages when printing duplex along the
long edge, so this order must not change.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

from ..core.models import EMPTY_CARD, Card, Side
from .cells import layout_centered, layout_two_lines
from .cuts import sheet_cut_lines
from .geometry import SheetGeometry
from .spec import SheetSpec
from .text import pick_size
from .types import CellJob, DrawRect, DrawText, PageJob, TextMeasure


def batches(cards: Sequence[Card], size: int) -> Iterator[tuple[Card, ...]]:
    if size <= 0:
        raise ValueError("batch size must be positive")
    for start in range(0, len(cards), size):
        batch = tuple(cards[start : start + size])
        if len(batch) < size:
            batch = batch + (EMPTY_CARD,) * (size - len(batch))
        yield batch


def page_count(card_count: int, per_page: int) -> int:
    if card_count <= 0:
        return 0
    return 2 * math.ceil(card_count / per_page)


def _front_texts(
    card: Card, cell: DrawRect, spec: SheetSpec, measure: TextMeasure
) -> tuple[DrawText, ...]:
    size = pick_size(card.primary, spec.text.front)
    placed = layout_centered(cell.rect, measure, card.primary, size)
    return (placed,) if placed is not None else ()


def _back_texts(
    card: Card, cell: DrawRect, spec: SheetSpec, measure: TextMeasure
) -> tuple[DrawText, ...]:
    return layout_two_lines(
        cell.rect,
        measure,
        card.secondary,
        pick_size(card.secondary, spec.text.secondary),
        card.translation,
        pick_size(card.translation, spec.text.translation),
        gap=spec.text.line_gap,
    )


def build_page(
    side: Side,
    batch: Sequence[Card],
    *,
    batch_index: int,
    geometry: SheetGeometry,
    spec: SheetSpec,
    measure: TextMeasure,
) -> PageJob:
    if len(batch) != geometry.per_page:
        raise ValueError(f"batch must hold exactly {geometry.per_page} cards")
    texts_for = _front_texts if side is Side.FRONT else _back_texts
    cells: list[CellJob] = []
    for index, card in enumerate(batch):
        row, col = geometry.slot(index)
        border = DrawRect(
            rect=geometry.cell_rect(side, row, col),
            border_width=spec.strokes.border_width,
        )
        cells.append(
            CellJob(
                index=index,
                row=row,
                col=col,
                border=border,
                texts=texts_for(card, border, spec, measure),
            )
        )
    return PageJob(
        side=side,
        batch_index=batch_index,
        width=geometry.page_w,
        height=geometry.page_h,
        cuts=sheet_cut_lines(geometry, thickness=spec.strokes.cut_line_width),
        cells=tuple(cells),
    )


def paginate(
    cards: Sequence[Card],
    spec: SheetSpec,
    measure: TextMeasure,
) -> list[PageJob]:
    geometry = spec.geometry()
    jobs: list[PageJob] = []
    for batch_index, batch in enumerate(batches(cards, geometry.per_page)):
        for side in (Side.FRONT, Side.BACK):
            jobs.append(
                build_page(
                    side,
                    batch,
                    batch_index=batch_index,
                    geometry=geometry,
                    spec=spec,
                    measure=measure,
                )
            )
    return jobs
