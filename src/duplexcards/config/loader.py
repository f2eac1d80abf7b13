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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, cast

from ..render.fonts import DEFAULT_FONT_FAMILY, FontSpec
from ..render.geometry import PAPER_SIZES_PT
from ..render.spec import PageSpec, SheetSpec, StrokeSpec, TextSpec
from ..render.text import (
    FRONT_SCALES,
    SECONDARY_SCALE,
    TRANSLATION_SCALE,
    FontScale,
    font_scale,
    front_scale_for_script,
)
from .installer import DEFAULT_PAPER_SIZE, resolve_config_path

OutputFormat = Literal["pdf", "html"]
OUTPUT_FORMATS: tuple[OutputFormat, ...] = ("pdf", "html")
DEFAULT_OUTPUT_FILENAME = "flashcards.pdf"
DEFAULT_SCRIPT = "latin"


@dataclass(frozen=True)
class OutputDefaults:
    filename: str = DEFAULT_OUTPUT_FILENAME
    format: OutputFormat = "pdf"


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False
    no_animations: bool = False


@dataclass(frozen=True)
class AppConfig:
    source_path: Path
    paper_size: str
    page: PageSpec
    strokes: StrokeSpec
    font: FontSpec
    script: str = DEFAULT_SCRIPT
    front_scale: FontScale | None = None
    secondary_scale: FontScale = SECONDARY_SCALE
    translation_scale: FontScale = TRANSLATION_SCALE
    line_gap: float = 8.0
    output: OutputDefaults = field(default_factory=OutputDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)

    def sheet_spec(self, *, script: str | None = None) -> SheetSpec:
        if script is None and self.front_scale is not None:
            front = self.front_scale
        else:
            front = front_scale_for_script(script or self.script)
        return SheetSpec(
            page=self.page,
            strokes=self.strokes,
            text=TextSpec(
                front=front,
                secondary=self.secondary_scale,
                translation=self.translation_scale,
                line_gap=self.line_gap,
            ),
        )


def load_app_config(path: str | Path | None = None, *, paper_size: str | None = None) -> AppConfig:
    config_path = resolve_config_path(path, paper_size=paper_size)
    data = _load_toml(config_path)

    page_cfg = _get_dict(data, "page")
    resolved_paper_size = _parse_paper_size(page_cfg.get("size"), field="page.size")
    page = PageSpec(
        size=resolved_paper_size,
        margin=_parse_non_negative(page_cfg.get("margin"), field="page.margin", default=28.0),
        gutter=_parse_non_negative(page_cfg.get("gutter"), field="page.gutter", default=12.0),
        width=_parse_optional_positive(page_cfg.get("width"), field="page.width"),
        height=_parse_optional_positive(page_cfg.get("height"), field="page.height"),
    )
    if (page.width is None) != (page.height is None):
        raise ValueError("page.width and page.height must be set together")
    strokes = StrokeSpec(
        border_width=_parse_non_negative(
            page_cfg.get("border_width"), field="page.border_width", default=0.6
        ),
        cut_line_width=_parse_non_negative(
            page_cfg.get("cut_line_width"), field="page.cut_line_width", default=0.3
        ),
    )

    text_cfg = _get_dict(data, "text")
    script = _parse_script(text_cfg.get("script"), field="text.script")
    front_cfg = _get_nested_dict(data, "text", "front")
    config = AppConfig(
        source_path=config_path,
        paper_size=resolved_paper_size,
        page=page,
        strokes=strokes,
        font=_parse_font(_get_dict(data, "font"), base_dir=config_path.parent),
        script=script,
        front_scale=_parse_scale(front_cfg, field="text.front") if front_cfg else None,
        secondary_scale=_parse_scale(
            _get_nested_dict(data, "text", "secondary"),
            field="text.secondary",
            default=SECONDARY_SCALE,
        ),
        translation_scale=_parse_scale(
            _get_nested_dict(data, "text", "translation"),
            field="text.translation",
            default=TRANSLATION_SCALE,
        ),
        line_gap=_parse_non_negative(text_cfg.get("line_gap"), field="text.line_gap", default=8.0),
        output=_parse_output_defaults(_get_dict(data, "output")),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )
    # Surface grid errors (page too small, margins too wide) at load time.
    config.sheet_spec().geometry()
    return config


def _parse_font(cfg: dict[str, object], *, base_dir: Path) -> FontSpec:
    family = _parse_optional_unset_str(cfg.get("family"), field="font.family")
    raw_path = _parse_optional_unset_str(cfg.get("path"), field="font.path")
    font_path = None
    if raw_path:
        font_path = Path(raw_path).expanduser()
        if not font_path.is_absolute():
            font_path = base_dir / font_path
    return FontSpec(family=(family or DEFAULT_FONT_FAMILY).lower(), path=font_path)


def _parse_scale(
    cfg: dict[str, object],
    *,
    field: str,
    default: FontScale | None = None,
) -> FontScale:
    if not cfg and default is not None:
        return default
    max_size = _parse_optional_positive(cfg.get("max_size"), field=f"{field}.max_size")
    min_size = _parse_optional_positive(cfg.get("min_size"), field=f"{field}.min_size")
    if max_size is None or min_size is None:
        if default is None:
            raise ValueError(f"{field} needs max_size and min_size")
        max_size = default.max_size if max_size is None else max_size
        min_size = default.min_size if min_size is None else min_size
    steps_value = cfg.get("steps")
    if steps_value is None:
        steps = [] if default is None else list(default.steps)
    else:
        steps = _parse_steps(steps_value, field=f"{field}.steps")
    try:
        return font_scale(max_size, min_size, steps)
    except ValueError as exc:
        raise ValueError(f"{field}: {exc}") from exc


def _parse_steps(value: object, *, field: str) -> list[tuple[int, float]]:
    if not isinstance(value, list):
        raise ValueError(f"{field} must be a list of [max_length, size] pairs")
    steps: list[tuple[int, float]] = []
    for entry in value:
        if not isinstance(entry, list) or len(entry) != 2:
            raise ValueError(f"{field} must be a list of [max_length, size] pairs")
        length = _parse_int_strict(entry[0], field=field)
        size = _parse_optional_positive(entry[1], field=field)
        if size is None:
            raise ValueError(f"{field} sizes must be positive numbers")
        steps.append((length, size))
    return steps


def _parse_output_defaults(cfg: dict[str, object]) -> OutputDefaults:
    filename = _parse_optional_unset_str(cfg.get("filename"), field="output.filename")
    output_format = _parse_optional_unset_str(cfg.get("format"), field="output.format")
    if output_format is not None:
        output_format = output_format.lower()
        if output_format not in OUTPUT_FORMATS:
            raise ValueError("output.format must be 'pdf' or 'html'")
    return OutputDefaults(
        filename=filename or DEFAULT_OUTPUT_FILENAME,
        format=cast(OutputFormat, output_format or "pdf"),
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
        no_animations=_parse_bool(
            cfg.get("no_animations"), field="ui.no_animations", default=False
        ),
    )


def _parse_paper_size(value: object, *, field: str) -> str:
    if value is None:
        return DEFAULT_PAPER_SIZE
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    key = value.strip().upper() or DEFAULT_PAPER_SIZE
    if key not in PAPER_SIZES_PT:
        raise ValueError(f"{field} must be one of: {', '.join(PAPER_SIZES_PT)}")
    return key


def _parse_script(value: object, *, field: str) -> str:
    if value is None:
        return DEFAULT_SCRIPT
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    key = value.strip().lower() or DEFAULT_SCRIPT
    if key not in FRONT_SCALES:
        raise ValueError(f"{field} must be one of: {', '.join(FRONT_SCALES)}")
    return key


def _load_toml(path: Path) -> dict[str, object]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid config file {path}: {exc}") from exc


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _get_nested_dict(data: dict[str, object], *keys: str) -> dict[str, object]:
    current: dict[str, object] = data
    for key in keys:
        value = current.get(key)
        if not isinstance(value, dict):
            return {}
        current = value
    return current


def _parse_optional_unset_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError(f"{field} must be an integer")
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")


def _parse_float_strict(value: object, *, field: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as exc:
            raise ValueError(f"{field} must be a number") from exc
    raise ValueError(f"{field} must be a number")


def _parse_non_negative(value: object, *, field: str, default: float) -> float:
    if value is None:
        return default
    parsed = _parse_float_strict(value, field=field)
    if parsed < 0:
        raise ValueError(f"{field} must not be negative")
    return parsed


def _parse_optional_positive(value: object, *, field: str) -> float | None:
    if value is None:
        return None
    parsed = _parse_float_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be a positive number")
    return parsed
