# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the command registry."""

import types
import unittest
import unittest.mock

from test_utils import RecordingAction

from yshell.lib.shell.registry import (
    AllocationError,
    CommandEntry,
    CommandRegistry,
    RegistryError,
)


class CommandRegistryTests(unittest.TestCase):
    """Tests for CommandRegistry registration and lookup."""

    def setUp(self) -> None:
        self.calls: list = []

    def _action(self, label: str) -> RecordingAction:
        return RecordingAction(label, self.calls)

    def test_register_prepends(self) -> None:
        registry = CommandRegistry()
        registry.register("exit", self._action("exit"))
        registry.register("print", self._action("print"))
        self.assertEqual([e.name for e in registry], ["print", "exit"])

    def test_duplicates_are_kept(self) -> None:
        registry = CommandRegistry()
        first = self._action("first")
        second = self._action("second")
        registry.register("print", first)
        registry.register("print", second)
        self.assertEqual(len(registry), 2)
        self.assertEqual(list(registry.find_all("print")), [second, first])

    def test_find_all_is_lazy(self) -> None:
        registry = CommandRegistry()
        registry.register("print", self._action("print"))
        found = registry.find_all("print")
        self.assertIsInstance(found, types.GeneratorType)

    def test_find_all_skips_other_names(self) -> None:
        registry = CommandRegistry()
        p = self._action("print")
        registry.register("print", p)
        registry.register("exit", self._action("exit"))
        self.assertEqual(list(registry.find_all("print")), [p])

    def test_find_all_is_case_sensitive(self) -> None:
        registry = CommandRegistry()
        registry.register("Print", self._action("Print"))
        self.assertEqual(list(registry.find_all("print")), [])

    def test_find_all_unknown_name(self) -> None:
        registry = CommandRegistry()
        registry.register("print", self._action("print"))
        self.assertEqual(list(registry.find_all("nope")), [])
        self.assertEqual(list(registry.find_all("")), [])

    def test_find_all_uses_snapshot(self) -> None:
        registry = CommandRegistry()
        registry.register("print", self._action("a"))
        found = registry.find_all("print")
        first = next(found)
        registry.register("print", self._action("b"))
        self.assertEqual(first.label, "a")
        self.assertEqual(list(found), [])

    def test_names_distinct_in_traversal_order(self) -> None:
        registry = CommandRegistry()
        registry.register("exit", self._action("exit"))
        registry.register("print", self._action("p1"))
        registry.register("print", self._action("p2"))
        self.assertEqual(registry.names(), ["print", "exit"])

    def test_non_string_name_rejected(self) -> None:
        registry = CommandRegistry()
        with self.assertRaises(RegistryError):
            registry.register(42, self._action("x"))  # type: ignore[arg-type]
        self.assertEqual(len(registry), 0)

    def test_action_without_invoke_rejected(self) -> None:
        registry = CommandRegistry()
        with self.assertRaises(RegistryError):
            registry.register("print", object())  # type: ignore[arg-type]
        self.assertEqual(len(registry), 0)

    def test_allocation_failure_leaves_registry_intact(self) -> None:
        registry = CommandRegistry()
        existing = self._action("exit")
        registry.register("exit", existing)
        with unittest.mock.patch(
            "yshell.lib.shell.registry.CommandEntry", side_effect=MemoryError
        ):
            with self.assertRaises(AllocationError) as ctx:
                registry.register("print", self._action("print"))
        self.assertIsInstance(ctx.exception, RegistryError)
        self.assertEqual(len(registry), 1)
        self.assertEqual(list(registry.find_all("exit")), [existing])

    def test_entries_are_command_entries(self) -> None:
        registry = CommandRegistry()
        action = self._action("print")
        registry.register("print", action)
        self.assertEqual(list(registry), [CommandEntry("print", action)])
