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
from unittest import mock

from duplexcards.cli import startup
from tests.test_support import isolated_config_home


class TestCliStartup(unittest.TestCase):
    def test_run_startup_flow_matrix(self) -> None:
        cases = (
            {"name": "init-config-exits", "init_config": True, "quiet": False, "prints": 1},
            {"name": "init-config-quiet", "init_config": True, "quiet": True, "prints": 0},
            {"name": "normal-run", "init_config": False, "quiet": False, "prints": 0},
        )
        for case in cases:
            with self.subTest(case=case["name"]):
                with (
                    mock.patch.object(startup, "configure_ui") as configure_ui,
                    mock.patch.object(
                        startup, "init_user_config", return_value="/tmp/duplexcards"
                    ) as init_user_config,
                    mock.patch.object(startup, "console") as console,
                ):
                    result = startup.run_startup(
                        quiet=case["quiet"],
                        no_color=True,
                        no_animations=False,
                        debug=False,
                        init_config=case["init_config"],
                    )
                self.assertEqual(result, case["init_config"])
                configure_ui.assert_called_once_with(no_color=True, no_animations=False)
                self.assertEqual(init_user_config.call_count, int(case["init_config"]))
                self.assertEqual(console.print.call_count, case["prints"])

    def test_debug_installs_rich_traceback(self) -> None:
        with (
            mock.patch.object(startup, "configure_ui"),
            mock.patch.object(startup, "install_rich_traceback") as install,
        ):
            startup.run_startup(
                quiet=True, no_color=False, no_animations=False, debug=True, init_config=False
            )
        install.assert_called_once_with(show_locals=True)

    def test_init_config_creates_files(self) -> None:
        with isolated_config_home() as config_home:
            with mock.patch.object(startup, "configure_ui"):
                result = startup.run_startup(
                    quiet=True,
                    no_color=False,
                    no_animations=False,
                    debug=False,
                    init_config=True,
                )
            self.assertTrue(result)
            self.assertTrue((config_home / "duplexcards" / "a4.toml").is_file())
            self.assertTrue((config_home / "duplexcards" / "letter.toml").is_file())


if __name__ == "__main__":
    unittest.main()
