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


class InputEmptyError(ValueError):
    """Raised when the input contains no usable card lines."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "input contains no valid lines (expected 3 fields per line)"
        )


class AssetMissingError(FileNotFoundError):
    """Raised when a required font file cannot be found."""

    def __init__(self, path: str, *, hint: str) -> None:
        super().__init__(f"font file not found: {path}; {hint}")
        self.path = path
        self.hint = hint
