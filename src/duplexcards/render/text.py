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

"""Length-based font size selection.

Sizes come from a step table keyed on the number of characters, not on the
measured width: glyph widths differ per font and script, and a coarse table
keeps card faces visually consistent. Long text may therefore still overflow
its cell; nothing here measures it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class FontScale:
    max_size: float
    min_size: float
    steps: tuple[tuple[int, float], ...]

    def __post_init__(self) -> None:
        if self.min_size <= 0:
            raise ValueError("min_size must be positive")
        if self.min_size > self.max_size:
            raise ValueError("min_size must not exceed max_size")
        previous_length = 0
        previous_size = float("inf")
        for max_length, size in self.steps:
            if max_length <= previous_length:
                raise ValueError("step lengths must be positive and increasing")
            if size > previous_size:
                raise ValueError("step sizes must not increase with length")
            previous_length = max_length
            previous_size = size

    def clamp(self, size: float) -> float:
        return max(self.min_size, min(self.max_size, size))


def font_scale(
    max_size: float,
    min_size: float,
    steps: Sequence[Sequence[float]],
) -> FontScale:
    return FontScale(
        max_size=float(max_size),
        min_size=float(min_size),
        steps=tuple((int(length), float(size)) for length, size in steps),
    )


def pick_size(text: str, scale: FontScale) -> float:
    stripped = (text or "").strip()
    if not stripped:
        return scale.min_size
    length = len(stripped)
    for max_length, size in scale.steps:
        if length <= max_length:
            return scale.clamp(size)
    return scale.min_size


FRONT_SCALE = font_scale(30, 18, ((10, 30), (16, 24), (24, 20)))
SECONDARY_SCALE = font_scale(16, 11, ((10, 16), (16, 11), (24, 11)))
TRANSLATION_SCALE = font_scale(20, 12, ((10, 20), (16, 14), (24, 12)))

# Headwords in scripts with wide glyphs are short; one or two characters get the largest size.
CJK_FRONT_SCALE = font_scale(44, 20, ((2, 44), (10, 36), (16, 28)))

FRONT_SCALES: dict[str, FontScale] = {
    "latin": FRONT_SCALE,
    "cjk": CJK_FRONT_SCALE,
}


def front_scale_for_script(script: str) -> FontScale:
    key = script.strip().lower()
    try:
        return FRONT_SCALES[key]
    except KeyError:
        raise ValueError(f"unknown script: {script} (expected latin or cjk)") from None
