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

"""Input formats."""

from .card_list import (
    decode_card_list,
    detect_separator,
    iter_cards,
    parse_cards,
    parse_line,
)

__all__ = [
    "decode_card_list",
    "detect_separator",
    "iter_cards",
    "parse_cards",
    "parse_line",
]
