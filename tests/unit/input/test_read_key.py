"""Regression tests for raw-key decoding.

Covers ESC timing, arrow sequences, Enter variants and SGR mouse reports.
These tests protect interactive input handling in raw terminal mode.
"""

from __future__ import annotations

import os
import time
import unittest

from dropselect.input import reader as reader_mod


def _read_all(payload: bytes, count: int) -> list[str]:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, payload)
        return [reader_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
    finally:
        os.close(read_fd)
        os.close(write_fd)


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        reader_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        reader_mod._PENDING_BYTES.clear()

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        started = time.monotonic()
        keys = _read_all(b"\x1b", 1)
        elapsed = time.monotonic() - started

        self.assertEqual(keys, ["ESC"])
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(_read_all(b"\x1b[A\x1b[B\x1b[C\x1b[D", 4), ["UP", "DOWN", "RIGHT", "LEFT"])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(_read_all(b"\x1bq", 2), ["ESC", "q"])

    def test_enter_tab_and_space_tokens(self) -> None:
        self.assertEqual(_read_all(b"\r\n\t ", 4), ["ENTER_CR", "ENTER_LF", "TAB", " "])

    def test_ctrl_c_is_returned_as_raw_byte(self) -> None:
        self.assertEqual(_read_all(b"\x03", 1), ["\x03"])

    def test_timeout_returns_empty_token(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            key = reader_mod.read_key(read_fd, timeout_ms=10)
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "")

    def test_sgr_left_press_and_release(self) -> None:
        keys = _read_all(b"\x1b[<0;5;2M\x1b[<0;5;2m", 2)

        self.assertEqual(keys, ["MOUSE_LEFT_DOWN:5:2", "MOUSE_LEFT_UP:5:2"])

    def test_sgr_motion_without_button_is_move(self) -> None:
        self.assertEqual(_read_all(b"\x1b[<35;7;3M", 1), ["MOUSE_MOVE:7:3"])

    def test_sgr_wheel_events(self) -> None:
        self.assertEqual(
            _read_all(b"\x1b[<64;1;1M\x1b[<65;1;1M", 2),
            ["MOUSE_WHEEL_UP:1:1", "MOUSE_WHEEL_DOWN:1:1"],
        )

    def test_malformed_sgr_payload_degrades_to_esc(self) -> None:
        self.assertEqual(_read_all(b"\x1b[<0;x;1M", 1), ["ESC"])


class ParseMouseColRowTests(unittest.TestCase):
    def test_parses_col_and_row(self) -> None:
        self.assertEqual(reader_mod.parse_mouse_col_row("MOUSE_LEFT_DOWN:12:4"), (12, 4))

    def test_malformed_tokens_yield_none(self) -> None:
        for token in ("MOUSE", "MOUSE_LEFT_DOWN:1", "MOUSE_LEFT_DOWN:a:b"):
            with self.subTest(token=token):
                self.assertEqual(reader_mod.parse_mouse_col_row(token), (None, None))
