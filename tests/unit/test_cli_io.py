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

import os
import unittest
from unittest import mock

from duplexcards.cli.io.inputs import _load_cards
from duplexcards.cli.io.outputs import _write_output
from duplexcards.core.errors import InputEmptyError
from tests.test_support import SAMPLE_CARD_LIST, temp_directory, temp_files


class TestWriteOutput(unittest.TestCase):
    def test_creates_parent_directories(self) -> None:
        with temp_directory() as tmp:
            target = tmp / "out" / "deck.pdf"
            _write_output(target, b"%PDF-1.3", quiet=True)
            self.assertEqual(target.read_bytes(), b"%PDF-1.3")
            self.assertEqual(os.listdir(tmp / "out"), ["deck.pdf"])

    def test_failed_write_keeps_existing_file(self) -> None:
        with temp_directory() as tmp:
            target = tmp / "deck.pdf"
            target.write_bytes(b"previous deck")
            with mock.patch(
                "duplexcards.cli.io.outputs.os.replace", side_effect=OSError("disk full")
            ):
                with self.assertRaises(OSError):
                    _write_output(target, b"new deck", quiet=True)
            self.assertEqual(target.read_bytes(), b"previous deck")
            self.assertEqual(os.listdir(tmp), ["deck.pdf"])

    def test_failed_write_leaves_no_file(self) -> None:
        with temp_directory() as tmp:
            target = tmp / "deck.pdf"
            with mock.patch(
                "duplexcards.cli.io.outputs.os.replace", side_effect=OSError("disk full")
            ):
                with self.assertRaises(OSError):
                    _write_output(target, b"new deck", quiet=True)
            self.assertEqual(os.listdir(tmp), [])

    def test_directory_target(self) -> None:
        with temp_directory() as tmp:
            with self.assertRaises(ValueError):
                _write_output(tmp, b"data", quiet=True)


class TestLoadCards(unittest.TestCase):
    def test_reads_file(self) -> None:
        with temp_files(**{"cards.txt": SAMPLE_CARD_LIST}) as paths:
            cards = _load_cards(str(paths["cards.txt"]))
        self.assertEqual([card.primary for card in cards], ["cat", "house"])

    def test_empty_file_names_the_source(self) -> None:
        with temp_files(**{"cards.txt": "# header only\n"}) as paths:
            with self.assertRaises(InputEmptyError) as ctx:
                _load_cards(str(paths["cards.txt"]))
        self.assertIn("cards.txt contains no valid lines", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
