# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for ShellSession and the default registry."""

import unittest
from io import StringIO

from test_utils import RecordingAction

from yshell.lib.core.config import ShellSettings
from yshell.lib.shell.actions import ExitAction, PrintAction
from yshell.lib.shell.session import ShellSession, create_session, default_registry


class DefaultRegistryTests(unittest.TestCase):
    """Tests for default_registry()."""

    def test_print_visited_before_exit(self) -> None:
        registry = default_registry()
        self.assertEqual([e.name for e in registry], ["print", "exit"])

    def test_builtin_action_types(self) -> None:
        registry = default_registry()
        self.assertIsInstance(next(registry.find_all("print")), PrintAction)
        self.assertIsInstance(next(registry.find_all("exit")), ExitAction)


class ShellSessionTests(unittest.TestCase):
    """Tests for ShellSession."""

    def test_prompt_uses_start_path(self) -> None:
        session = create_session()
        self.assertEqual(session.current_path, "/")
        self.assertEqual(session.render_prompt(), "/> ")

    def test_prompt_custom_start_path(self) -> None:
        session = create_session(ShellSettings(start_path="/home"))
        self.assertEqual(session.render_prompt(), "/home> ")

    def test_prompt_colored(self) -> None:
        session = create_session()
        self.assertEqual(session.render_prompt(True), "\x1b[34m/\x1b[0m> ")

    def test_execute_print(self) -> None:
        out = StringIO()
        session = create_session(stream=out)
        session.execute("PRINT hello   world\n")
        self.assertEqual(out.getvalue(), "hello world\n")

    def test_execute_exit(self) -> None:
        session = create_session(stream=StringIO())
        with self.assertRaises(SystemExit) as ctx:
            session.execute("exit\n")
        self.assertEqual(ctx.exception.code, 0)

    def test_execute_unknown_and_empty(self) -> None:
        out = StringIO()
        session = create_session(stream=out)
        session.execute("unknown a b\n")
        session.execute("\n")
        session.execute("    ")
        self.assertEqual(out.getvalue(), "")

    def test_execute_uses_session_delimiter(self) -> None:
        out = StringIO()
        session = create_session(ShellSettings(delimiter=","), stream=out)
        session.execute("print,a,,b\n")
        self.assertEqual(out.getvalue(), "a b\n")

    def test_extra_handler_fans_out_with_builtin(self) -> None:
        out = StringIO()
        calls: list = []
        session = create_session(stream=out)
        session.registry.register("print", RecordingAction("extra", calls))
        session.execute("print x")
        self.assertEqual(calls, [("extra", ("x",))])
        self.assertEqual(out.getvalue(), "x\n")

    def test_sessions_do_not_share_state(self) -> None:
        a = ShellSession(registry=default_registry(), current_path="/a")
        b = ShellSession(registry=default_registry())
        self.assertEqual(a.render_prompt(), "/a> ")
        self.assertEqual(b.render_prompt(), "/> ")
        self.assertIsNot(a.registry, b.registry)
