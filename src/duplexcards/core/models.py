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
from enum import Enum


class Side(str, Enum):
    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True)
class Card:
    primary: str
    secondary: str = ""
    translation: str = ""

    @property
    def is_blank(self) -> bool:
        return not (self.primary or self.secondary or self.translation)

    def to_dict(self) -> dict[str, str]:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "translation": self.translation,
        }


# Padding for the last, partially filled batch.
EMPTY_CARD = Card(primary="")
