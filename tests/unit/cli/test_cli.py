"""CLI argument handling, render mode and selection output.

Verifies how ``dropselect.cli.main`` builds options and initial selections,
and what it prints after an interactive session.
"""

from __future__ import annotations

import io
import json
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dropselect import Option, cli
from dropselect.runtime.app import SessionResult

A = Option("Alpha", "a")
B = Option("Beta", 2)


def _run_main(argv: list[str], *, multiple_default: bool = False, theme: str | None = None) -> str:
    stdout = io.StringIO()
    with mock.patch("dropselect.cli.load_default_multiple", return_value=multiple_default), mock.patch(
        "dropselect.cli.load_theme_name", return_value=theme
    ), mock.patch.object(sys, "stdout", stdout):
        cli.main(argv)
    return stdout.getvalue()


class RenderModeTests(unittest.TestCase):
    def test_render_prints_closed_control(self) -> None:
        output = _run_main(["--render", "--no-color", "--max-cols", "30", "Alpha=a", "Beta=2", "--value", "Beta"])

        lines = output.splitlines()
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].startswith("▌ Beta"))

    def test_render_open_lists_every_option(self) -> None:
        output = _run_main(["--render", "--open", "--no-color", "--max-cols", "30", "-m", "A", "B", "--value", "B"])

        lines = output.splitlines()
        self.assertEqual(len(lines), 3)
        self.assertEqual(lines[2].rstrip(), "  ✓ B")

    def test_render_with_color_uses_theme_from_config(self) -> None:
        output = _run_main(["--render", "--max-cols", "30", "A"], theme="ocean")

        self.assertIn("\033[", output)


class InteractiveModeTests(unittest.TestCase):
    def test_accepted_single_selection_prints_value(self) -> None:
        with mock.patch("dropselect.cli.run_select", return_value=SessionResult(True, B, 1)) as run_select:
            output = _run_main(["Alpha=a", "Beta=2"])

        self.assertEqual(output, "2\n")
        args, kwargs = run_select.call_args
        self.assertEqual(args[0], [A, B])
        self.assertFalse(kwargs["multiple"])
        self.assertIsNone(kwargs["initial"])

    def test_accepted_multiple_selection_prints_json(self) -> None:
        with mock.patch("dropselect.cli.run_select", return_value=SessionResult(True, (A, B), 2)):
            output = _run_main(["--json", "-m", "Alpha=a", "Beta=2"])

        self.assertEqual(json.loads(output), [{"label": "Alpha", "value": "a"}, {"label": "Beta", "value": 2}])

    def test_abort_exits_with_130_and_prints_nothing(self) -> None:
        with mock.patch("dropselect.cli.run_select", return_value=SessionResult(False, A, 0)):
            with self.assertRaises(SystemExit) as ctx:
                _run_main(["Alpha=a"])

        self.assertEqual(ctx.exception.code, 130)

    def test_config_default_enables_multiple_mode(self) -> None:
        with mock.patch("dropselect.cli.run_select", return_value=SessionResult(True, (), 0)) as run_select:
            output = _run_main(["Alpha=a", "--value", "a"], multiple_default=True)

        self.assertEqual(output, "")
        self.assertTrue(run_select.call_args.kwargs["multiple"])
        self.assertEqual(run_select.call_args.kwargs["initial"], (A,))

    def test_options_file_is_appended_after_positional_options(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "options.txt"
            path.write_text("# fruit\nBeta=2\n\n", encoding="utf-8")
            with mock.patch("dropselect.cli.run_select", return_value=SessionResult(True, None, 0)) as run_select:
                output = _run_main(["Alpha=a", "--file", str(path)])

        self.assertEqual(output, "")
        self.assertEqual(run_select.call_args.args[0], [A, B])


class ArgumentErrorTests(unittest.TestCase):
    def _assert_exit(self, argv: list[str], message: str) -> None:
        with self.assertRaises(SystemExit) as ctx:
            _run_main(argv)
        self.assertIn(message, str(ctx.exception.code))

    def test_no_options(self) -> None:
        self._assert_exit([], "At least one option")

    def test_duplicate_options(self) -> None:
        self._assert_exit(["A", "A"], "Duplicate option")

    def test_unknown_initial_value(self) -> None:
        self._assert_exit(["A", "--value", "Z"], "Unknown initial value")

    def test_two_values_without_multiple(self) -> None:
        self._assert_exit(["A", "B", "--value", "A", "--value", "B"], "Only one --value")

    def test_missing_options_file(self) -> None:
        self._assert_exit(["--file", "/nonexistent/dropselect-options.txt"], "Cannot read options file")

    def test_empty_label_is_rejected_by_argparse(self) -> None:
        stderr = io.StringIO()
        with mock.patch.object(sys, "stderr", stderr), self.assertRaises(SystemExit) as ctx:
            _run_main(["=x"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("option label must not be empty", stderr.getvalue())


class FormatSelectionTests(unittest.TestCase):
    def test_plain_output(self) -> None:
        self.assertEqual(cli.format_selection(None), "")
        self.assertEqual(cli.format_selection(A), "a\n")
        self.assertEqual(cli.format_selection((A, B)), "a\n2\n")

    def test_json_output(self) -> None:
        self.assertEqual(cli.format_selection(None, as_json=True), "null\n")
        self.assertEqual(json.loads(cli.format_selection(B, as_json=True)), {"label": "Beta", "value": 2})
        self.assertEqual(cli.format_selection((), as_json=True), "[]\n")


class PersistDefaultsTests(unittest.TestCase):
    def test_save_theme_stores_given_theme(self) -> None:
        with mock.patch("dropselect.cli.save_theme_name") as save_theme:
            _run_main(["--render", "--no-color", "--theme", "ocean", "--save-theme", "A"])

        save_theme.assert_called_once_with("ocean")

    def test_save_theme_without_theme_is_rejected(self) -> None:
        with mock.patch("dropselect.cli.save_theme_name") as save_theme, self.assertRaises(SystemExit) as ctx:
            _run_main(["--render", "--save-theme", "A"])

        self.assertIn("--save-theme requires --theme", str(ctx.exception.code))
        save_theme.assert_not_called()

    def test_save_default_multiple_stores_resolved_mode(self) -> None:
        cases = (
            (["-m"], False, True),
            (["--single"], True, False),
            ([], True, True),
        )
        for flags, configured, expected in cases:
            with self.subTest(flags=flags, configured=configured):
                with mock.patch("dropselect.cli.save_default_multiple") as save_multiple:
                    _run_main(
                        ["--render", "--no-color", "--save-default-multiple", *flags, "A"],
                        multiple_default=configured,
                    )
                save_multiple.assert_called_once_with(expected)

    def test_nothing_is_saved_without_save_flags(self) -> None:
        with mock.patch("dropselect.cli.save_theme_name") as save_theme, mock.patch(
            "dropselect.cli.save_default_multiple"
        ) as save_multiple:
            _run_main(["--render", "--no-color", "--theme", "ocean", "-m", "A"])

        save_theme.assert_not_called()
        save_multiple.assert_not_called()


class SessionOptionsTests(unittest.TestCase):
    def test_open_flag_starts_session_with_list_open(self) -> None:
        with mock.patch("dropselect.cli.run_select", return_value=SessionResult(True, None, 0)) as run_select:
            _run_main(["--open", "A"])
        self.assertTrue(run_select.call_args.kwargs["start_open"])

        with mock.patch("dropselect.cli.run_select", return_value=SessionResult(True, None, 0)) as run_select:
            _run_main(["A"])
        self.assertFalse(run_select.call_args.kwargs["start_open"])

    def test_single_flag_overrides_config_default(self) -> None:
        with mock.patch("dropselect.cli.run_select", return_value=SessionResult(True, None, 0)) as run_select:
            _run_main(["--single", "A"], multiple_default=True)

        self.assertFalse(run_select.call_args.kwargs["multiple"])

    def test_change_count_is_logged(self) -> None:
        with mock.patch("dropselect.cli.run_select", return_value=SessionResult(True, B, 2)):
            with self.assertLogs("dropselect.cli", level="DEBUG") as logs:
                _run_main(["Alpha=a", "Beta=2"])

        self.assertIn("session accepted after 2 committed change(s)", logs.output[0])
