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

import unittest

from duplexcards.render.cuts import DEFAULT_CUT_LINE_WIDTH, cut_lines, sheet_cut_lines
from duplexcards.render.spec import sheet_spec


class TestCutLines(unittest.TestCase):
    def test_guides_bisect_gutters(self) -> None:
        lines = cut_lines(10.0, 20.0, 210.0, 330.0, 2, 3, 100.0, 100.0, 10.0, thickness=0.5)
        self.assertEqual(len(lines), 1 + 2)
        vertical, first_h, second_h = lines
        self.assertEqual(vertical.start, (115.0, 20.0))
        self.assertEqual(vertical.end, (115.0, 350.0))
        self.assertEqual(first_h.start, (10.0, 125.0))
        self.assertEqual(first_h.end, (220.0, 125.0))
        self.assertEqual(second_h.start, (10.0, 235.0))
        self.assertEqual({line.thickness for line in lines}, {0.5})

    def test_single_cell_has_no_guides(self) -> None:
        self.assertEqual(cut_lines(0.0, 0.0, 100.0, 100.0, 1, 1, 100.0, 100.0, 0.0), ())

    def test_sheet_guides(self) -> None:
        geometry = sheet_spec().geometry()
        lines = sheet_cut_lines(geometry)
        self.assertEqual(len(lines), (geometry.cols - 1) + (geometry.rows - 1))
        vertical = lines[0]
        self.assertAlmostEqual(vertical.start[0], 28.0 + geometry.cell_w + 6.0)
        self.assertAlmostEqual(vertical.start[1], 28.0)
        self.assertAlmostEqual(vertical.end[1], geometry.page_h - 28.0)
        for line in lines:
            self.assertEqual(line.thickness, DEFAULT_CUT_LINE_WIDTH)


if __name__ == "__main__":
    unittest.main()
