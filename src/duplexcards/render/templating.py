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

import base64
import mimetypes
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

TEMPLATES_ROOT = Path(__file__).parent.parent / "templates"
DEFAULT_SHEET_TEMPLATE_PATH = TEMPLATES_ROOT / "sheet.html.j2"

# mimetypes has no entry for fonts on some platforms
_FONT_MIME_TYPES = {
    ".ttf": "font/ttf",
    ".otf": "font/otf",
}


@lru_cache(maxsize=16)
def data_uri_for_path(path: Path) -> str:
    payload = path.read_bytes()
    mime_type = _FONT_MIME_TYPES.get(path.suffix.lower())
    if mime_type is None:
        mime_type, _encoding = mimetypes.guess_type(path.name)
    if not mime_type:
        mime_type = "application/octet-stream"
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def _format_pt(value: object) -> str:
    return f"{float(value):.2f}".rstrip("0").rstrip(".")


@lru_cache(maxsize=16)
def _get_env(template_dir: Path) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        auto_reload=True,
    )
    env.filters["pt"] = _format_pt
    return env


def render_template(path: str | Path, context: dict[str, object]) -> str:
    template_path = Path(path)
    env = _get_env(template_path.parent.resolve())
    template = env.get_template(template_path.name)
    return template.render(**context)
