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
from pathlib import Path

from fpdf import FPDF

from ..core.errors import AssetMissingError

DEFAULT_FONT_FAMILY = "helvetica"
CORE_FONT_FAMILIES = frozenset({"courier", "helvetica", "times"})
# fpdf2 also reserves these names; add_font is a no-op for them.
RESERVED_FONT_FAMILIES = CORE_FONT_FAMILIES | {"symbol", "zapfdingbats"}
CSS_CORE_FAMILIES = {
    "courier": "'Courier New', Courier, monospace",
    "helvetica": "Helvetica, Arial, sans-serif",
    "times": "'Times New Roman', Times, serif",
}
FONT_MISSING_HINT = (
    "install the TTF file at that path or clear font.path in the config "
    "to use the built-in Helvetica"
)


@dataclass(frozen=True)
class FontSpec:
    family: str = DEFAULT_FONT_FAMILY
    path: Path | None = None

    @property
    def is_core(self) -> bool:
        return self.path is None


def resolve_font_path(font: FontSpec) -> Path | None:
    if font.path is None:
        return None
    path = Path(font.path).expanduser()
    if not path.is_file():
        raise AssetMissingError(str(path), hint=FONT_MISSING_HINT)
    return path


def embedded_family(font: FontSpec, path: Path) -> str:
    """Family name a TTF is registered under.

    fpdf2 ignores ``add_font`` for a core family name, so a file configured
    next to ``family = "helvetica"`` is registered under its file stem.
    """
    family = font.family.strip().lower()
    if family and family not in RESERVED_FONT_FAMILIES:
        return family
    stem = path.stem.strip().lower() or "embedded"
    if stem in RESERVED_FONT_FAMILIES:
        return f"{stem}-embedded"
    return stem


def load_font(pdf: FPDF, font: FontSpec) -> str:
    """Register ``font`` with ``pdf`` and return the family name to select it."""
    family = font.family.strip().lower()
    path = resolve_font_path(font)
    if path is None:
        if family not in CORE_FONT_FAMILIES:
            raise ValueError(
                f"font family {font.family!r} needs font.path "
                f"(built-in families: {', '.join(sorted(CORE_FONT_FAMILIES))})"
            )
        return family
    family = embedded_family(font, path)
    pdf.add_font(family, fname=str(path))
    return family


def css_font_family(font: FontSpec, *, embedded_name: str) -> str:
    if font.is_core:
        return CSS_CORE_FAMILIES.get(font.family.strip().lower(), "sans-serif")
    return f"'{embedded_name}'"


def metrics_pdf(font: FontSpec) -> tuple[FPDF, str]:
    pdf = FPDF(unit="pt")
    family = load_font(pdf, font)
    return pdf, family


def string_width(pdf: FPDF, family: str, content: str, size: float) -> float:
    pdf.set_font(family, size=size)
    return float(pdf.get_string_width(content))
