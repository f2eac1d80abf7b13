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
from pathlib import Path
from unittest import mock

from fpdf.errors import FPDFException
from typer.testing import CliRunner

from duplexcards.cli import app
from tests.test_support import (
    FIXTURE_FONT,
    POLISH_CARD_LIST,
    SAMPLE_CARD_LIST,
    is_valid_pdf,
    isolated_config_home,
    pdf_page_count,
    pdf_page_size,
    temp_files,
)


class TestBuildCommand(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        patcher = mock.patch("duplexcards.cli.app.run_startup", return_value=False)
        patcher.start()
        self.addCleanup(patcher.stop)
        config_home = isolated_config_home()
        config_home.__enter__()
        self.addCleanup(config_home.__exit__, None, None, None)

    def test_build_pdf(self) -> None:
        with temp_files(**{"cards.txt": SAMPLE_CARD_LIST}) as paths:
            output = paths["_dir"] / "deck.pdf"
            result = self.runner.invoke(
                app, ["build", str(paths["cards.txt"]), "-o", str(output)]
            )
            self.assertEqual(result.exit_code, 0, result.output)
            data = output.read_bytes()
        self.assertTrue(is_valid_pdf(data))
        self.assertEqual(pdf_page_count(data), 2)
        self.assertIn("Flashcards ready", result.output)
        self.assertIn("Cards: 2", result.output)

    def test_build_html(self) -> None:
        with temp_files(**{"cards.txt": SAMPLE_CARD_LIST}) as paths:
            output = paths["_dir"] / "deck.html"
            result = self.runner.invoke(
                app,
                ["build", str(paths["cards.txt"]), "--format", "html", "-o", str(output)],
            )
            self.assertEqual(result.exit_code, 0, result.output)
            html = output.read_text(encoding="utf-8")
        self.assertTrue(html.startswith("<!DOCTYPE html>"))
        self.assertEqual(html.count('<svg class="page"'), 2)

    def test_build_default_output_name(self) -> None:
        with self.runner.isolated_filesystem():
            Path("cards.txt").write_text(SAMPLE_CARD_LIST, encoding="utf-8")
            result = self.runner.invoke(app, ["--quiet", "build", "cards.txt"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertTrue(Path("flashcards.pdf").is_file())
            result = self.runner.invoke(app, ["--quiet", "build", "cards.txt", "-f", "html"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertTrue(Path("flashcards.html").is_file())
        self.assertNotIn("Flashcards ready", result.output)

    def test_build_quiet_from_config(self) -> None:
        with self.runner.isolated_filesystem():
            Path("cards.txt").write_text(SAMPLE_CARD_LIST, encoding="utf-8")
            Path("quiet.toml").write_text("[ui]\nquiet = true\n", encoding="utf-8")
            result = self.runner.invoke(
                app, ["build", "cards.txt", "-c", "quiet.toml", "-o", "deck.pdf"]
            )
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertTrue(Path("deck.pdf").is_file())
        self.assertNotIn("Flashcards ready", result.output)

    def test_build_from_stdin(self) -> None:
        with self.runner.isolated_filesystem():
            result = self.runner.invoke(
                app, ["build", "-", "-o", "stdin.pdf"], input=SAMPLE_CARD_LIST
            )
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(pdf_page_count(Path("stdin.pdf").read_bytes()), 2)

    def test_build_letter_paper(self) -> None:
        with temp_files(**{"cards.txt": SAMPLE_CARD_LIST}) as paths:
            output = paths["_dir"] / "letter.pdf"
            result = self.runner.invoke(
                app,
                ["--paper", "letter", "build", str(paths["cards.txt"]), "-o", str(output)],
            )
            self.assertEqual(result.exit_code, 0, result.output)
            width, height = pdf_page_size(output.read_bytes())
        self.assertAlmostEqual(width, 612.0, places=1)
        self.assertAlmostEqual(height, 792.0, places=1)

    def test_empty_input_is_an_error(self) -> None:
        with self.runner.isolated_filesystem():
            Path("cards.txt").write_text("# nothing here\n\nonly;two\n", encoding="utf-8")
            result = self.runner.invoke(app, ["build", "cards.txt", "-o", "deck.pdf"])
            self.assertEqual(result.exit_code, 2)
            self.assertFalse(Path("deck.pdf").exists())
        self.assertIn("Error:", result.output)
        self.assertIn("cards.txt contains no valid lines", result.output)

    def test_missing_input_file(self) -> None:
        with self.runner.isolated_filesystem():
            result = self.runner.invoke(app, ["build", "missing.txt"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("input file not found: missing.txt", result.output)

    def test_render_failure_writes_nothing(self) -> None:
        with temp_files(**{"cards.txt": SAMPLE_CARD_LIST}) as paths:
            output = paths["_dir"] / "deck.pdf"
            with mock.patch(
                "duplexcards.cli.commands.build.RenderService.render",
                side_effect=FPDFException("font cache corrupt"),
            ):
                result = self.runner.invoke(
                    app, ["build", str(paths["cards.txt"]), "-o", str(output)]
                )
            self.assertEqual(result.exit_code, 2)
            self.assertFalse(output.exists())
        self.assertIn("font cache corrupt", result.output)

    def test_non_latin1_text_needs_a_font(self) -> None:
        with temp_files(**{"cards.txt": POLISH_CARD_LIST}) as paths:
            output = paths["_dir"] / "deck.pdf"
            result = self.runner.invoke(
                app, ["build", str(paths["cards.txt"]), "-o", str(output)]
            )
            self.assertEqual(result.exit_code, 2)
            self.assertFalse(output.exists())
        self.assertIn("Error:", result.output)
        self.assertIn('"ł"', result.output)

    def test_non_latin1_text_with_embedded_font(self) -> None:
        config = f"[font]\nfamily = \"helvetica\"\npath = '{FIXTURE_FONT}'\n"
        with temp_files(**{"cards.txt": POLISH_CARD_LIST, "config.toml": config}) as paths:
            output = paths["_dir"] / "deck.pdf"
            result = self.runner.invoke(
                app,
                [
                    "--config",
                    str(paths["config.toml"]),
                    "build",
                    str(paths["cards.txt"]),
                    "-o",
                    str(output),
                ],
            )
            self.assertEqual(result.exit_code, 0, result.output)
            data = output.read_bytes()
        self.assertTrue(is_valid_pdf(data))
        self.assertEqual(pdf_page_count(data), 2)
        self.assertIn(b"/FontFile2", data)

    def test_missing_font_file(self) -> None:
        config = '[font]\nfamily = "noto"\npath = "NotoSans.ttf"\n'
        with temp_files(**{"cards.txt": SAMPLE_CARD_LIST, "config.toml": config}) as paths:
            result = self.runner.invoke(
                app,
                [
                    "--config",
                    str(paths["config.toml"]),
                    "build",
                    str(paths["cards.txt"]),
                    "-o",
                    str(paths["_dir"] / "deck.pdf"),
                ],
            )
        self.assertEqual(result.exit_code, 2)
        self.assertIn("font file not found", result.output)

    def test_invalid_format(self) -> None:
        result = self.runner.invoke(app, ["build", "cards.txt", "--format", "docx"])
        self.assertEqual(result.exit_code, 2)

    def test_config_and_paper_are_exclusive(self) -> None:
        with temp_files(**{"cards.txt": SAMPLE_CARD_LIST, "config.toml": "[page]\n"}) as paths:
            result = self.runner.invoke(
                app,
                [
                    "--config",
                    str(paths["config.toml"]),
                    "build",
                    str(paths["cards.txt"]),
                    "--paper",
                    "A4",
                ],
            )
        self.assertEqual(result.exit_code, 2)

    def test_debug_reraises(self) -> None:
        with temp_files(**{"cards.txt": "\n"}) as paths:
            result = self.runner.invoke(app, ["--debug", "build", str(paths["cards.txt"])])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIsInstance(result.exception, ValueError)


class TestCheckCommand(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        patcher = mock.patch("duplexcards.cli.app.run_startup", return_value=False)
        patcher.start()
        self.addCleanup(patcher.stop)
        config_home = isolated_config_home()
        config_home.__enter__()
        self.addCleanup(config_home.__exit__, None, None, None)

    def test_check_reports_cards_and_pages(self) -> None:
        cards = "\n".join(f"w{i};s{i};t{i}" for i in range(9))
        with temp_files(**{"cards.txt": cards}) as paths:
            result = self.runner.invoke(app, ["check", str(paths["cards.txt"])])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Cards: 9", result.output)
        self.assertIn("Pages: 4", result.output)
        self.assertIn("Empty cells on the last sheet: 7", result.output)
        self.assertIn("w8", result.output)

    def test_check_does_not_write_files(self) -> None:
        with self.runner.isolated_filesystem():
            Path("cards.txt").write_text(SAMPLE_CARD_LIST, encoding="utf-8")
            result = self.runner.invoke(app, ["check", "cards.txt"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(sorted(os.listdir(".")), ["cards.txt"])

    def test_check_warns_about_non_latin1_text(self) -> None:
        with temp_files(**{"cards.txt": "猫;māo;cat\n"}) as paths:
            result = self.runner.invoke(app, ["check", str(paths["cards.txt"])])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Warning:", result.output)

    def test_check_empty_input(self) -> None:
        result = self.runner.invoke(app, ["check", "-"], input="# only a comment\n")
        self.assertEqual(result.exit_code, 2)
        self.assertIn("stdin contains no valid lines", result.output)


if __name__ == "__main__":
    unittest.main()
