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

from duplexcards.core.errors import AssetMissingError, InputEmptyError
from duplexcards.core.models import EMPTY_CARD, Card, Side


class TestModels(unittest.TestCase):
    def test_empty_card(self) -> None:
        self.assertTrue(EMPTY_CARD.is_blank)
        self.assertFalse(Card("cat").is_blank)
        self.assertEqual(EMPTY_CARD.to_dict(), {"primary": "", "secondary": "", "translation": ""})

    def test_cards_are_immutable(self) -> None:
        card = Card("cat", "kæt", "kot")
        with self.assertRaises(AttributeError):
            card.primary = "dog"  # type: ignore[misc]

    def test_side_values(self) -> None:
        self.assertEqual([side.value for side in Side], ["front", "back"])


class TestErrors(unittest.TestCase):
    def test_input_empty_is_a_value_error(self) -> None:
        exc = InputEmptyError()
        self.assertIsInstance(exc, ValueError)
        self.assertIn("no valid lines", str(exc))
        self.assertEqual(str(InputEmptyError("stdin is empty")), "stdin is empty")

    def test_asset_missing_carries_hint(self) -> None:
        exc = AssetMissingError("/fonts/Noto.ttf", hint="install it")
        self.assertIsInstance(exc, FileNotFoundError)
        self.assertEqual(exc.path, "/fonts/Noto.ttf")
        self.assertEqual(exc.hint, "install it")
        self.assertEqual(str(exc), "font file not found: /fonts/Noto.ttf; install it")


if __name__ == "__main__":
    unittest.main()
