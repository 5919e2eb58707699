"""Multi-select controller behavior.

Membership toggling always reports the full tuple, never a delta, and the
reported values are fresh immutable tuples.
"""

from __future__ import annotations

import unittest

from dropselect import Mode, Option, SelectionController

A = Option("Alpha", "a")
B = Option("Beta", "b")
C = Option("Gamma", "c")


class MultipleSelectTests(unittest.TestCase):
    def setUp(self) -> None:
        self.changes: list[object] = []
        self.controller = SelectionController.multiple([A, B], self.changes.append)

    def test_starts_with_empty_tuple(self) -> None:
        self.assertIs(self.controller.mode, Mode.MULTIPLE)
        self.assertEqual(self.controller.selection, ())

    def test_add_add_remove_scenario(self) -> None:
        self.controller.select_option(A)
        self.controller.select_option(B)
        self.controller.select_option(A)

        self.assertEqual(self.changes, [(A,), (A, B), (B,)])
        self.assertEqual(self.controller.selection, (B,))

    def test_toggle_twice_restores_set_and_notifies_twice(self) -> None:
        controller = SelectionController.multiple([A, B, C], self.changes.append, [B])

        controller.select_option(C)
        controller.select_option(C)

        self.assertEqual(controller.selection, (B,))
        self.assertEqual(self.changes, [(B, C), (B,)])

    def test_removal_preserves_order_of_remaining_members(self) -> None:
        controller = SelectionController.multiple([A, B, C], self.changes.append, [A, B, C])

        controller.select_option(B)

        self.assertEqual(controller.selection, (A, C))

    def test_reported_value_is_not_aliased_with_later_state(self) -> None:
        self.controller.select_option(A)
        first = self.changes[0]

        self.controller.select_option(B)

        self.assertEqual(first, (A,))

    def test_clear_reports_empty_tuple(self) -> None:
        controller = SelectionController.multiple([A, B, C], self.changes.append, [A, C])

        controller.clear_selection()

        self.assertEqual(self.changes, [()])
        self.assertEqual(controller.selection, ())
        self.assertFalse(controller.is_selected(A))

    def test_clear_of_empty_selection_is_silent(self) -> None:
        self.controller.clear_selection()

        self.assertEqual(self.changes, [])

    def test_initial_duplicates_collapse(self) -> None:
        controller = SelectionController.multiple([A, B], self.changes.append, [A, A, B])

        self.assertEqual(controller.selection, (A, B))

    def test_single_option_as_initial_multiple_value_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            SelectionController.multiple([A, B], self.changes.append, A)  # type: ignore[arg-type]
