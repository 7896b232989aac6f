import io
import os
import sys
import tempfile
import unittest
from unittest.mock import patch, MagicMock

import runner
from command import Command
from shell_state import ShellState


class TestRunner(unittest.TestCase):
    def setUp(self):
        self.state = ShellState(env={"USER": "bruce"})
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.cwd = os.getcwd()
        os.chdir(self.tmpdir.name)
        self.addCleanup(lambda: os.chdir(self.cwd))

    # Builtins Tests
    def test_builtin_receives_args_and_state(self):
        fake_builtin = MagicMock(return_value="done")

        with patch.object(runner, "BUILTINS", {"foo": fake_builtin}):
            result = runner.dispatch(Command("foo", ["a", "b"]), self.state)

        self.assertEqual("done", result)
        fake_builtin.assert_called_once_with(["a", "b"], self.state)

    def test_builtin_match_is_case_sensitive(self):
        with patch.object(runner, "BUILTINS", {"foo": MagicMock(return_value="x")}), \
                patch.object(runner, "execute_external", return_value="ext") as mock_ext:
            result = runner.dispatch(Command("FOO", []), self.state)

        self.assertEqual("ext", result)
        mock_ext.assert_called_once_with(["FOO"])

    def test_unknown_verb_goes_external_with_all_tokens(self):
        with patch.object(runner, "execute_external", return_value="out") as mock_ext:
            result = runner.execute_line("frobnicate -x y", self.state)

        self.assertEqual("out", result)
        mock_ext.assert_called_once_with(["frobnicate", "-x", "y"])

    def test_empty_line(self):
        self.assertEqual("No command entered", runner.execute_line("   ", self.state))

    def test_alias_is_resolved_once(self):
        self.state.add_alias("a", "b")
        self.state.add_alias("b", "ls")
        with patch.object(runner, "execute_external", return_value="") as mock_ext:
            runner.execute_line("a", self.state)
        mock_ext.assert_called_once_with(["b"])

    def test_alias_to_builtin(self):
        self.state.add_alias("where", "pwd")
        self.assertEqual(os.getcwd(), runner.execute_line("where", self.state))

    def test_expansion_reaches_builtin(self):
        self.assertEqual("hi bruce", runner.execute_line("echo hi $USER", self.state))

    # External Commands Tests
    def test_external_success_returns_stdout(self):
        completed = MagicMock(returncode=0, stdout="hello\n", stderr="warn\n")
        with patch.object(runner.subprocess, "run", return_value=completed) as mock_run:
            result = runner.execute_external(["echo", "hello"])

        self.assertEqual("hello\n", result)
        args, kwargs = mock_run.call_args
        self.assertEqual(["echo", "hello"], args[0])
        self.assertIsNone(kwargs["stdin"])
        self.assertTrue(kwargs["capture_output"])

    def test_external_failure_returns_stderr(self):
        completed = MagicMock(returncode=2, stdout="partial", stderr="boom\n")
        with patch.object(runner.subprocess, "run", return_value=completed):
            self.assertEqual("boom\n", runner.execute_external(["false"]))

    def test_external_not_found(self):
        with patch.object(runner.subprocess, "run", side_effect=FileNotFoundError(2, "No such file or directory")):
            with self.assertLogs("runner", level="ERROR"):
                result = runner.execute_external(["definitely-not-a-command"])
        self.assertIn("Command 'definitely-not-a-command' not found", result)

    def test_external_not_found_suggests_builtin(self):
        with patch.object(runner.subprocess, "run", side_effect=FileNotFoundError(2, "No such file or directory")):
            with self.assertLogs("runner", level="ERROR"):
                result = runner.execute_external(["mkdri"])
        self.assertIn("Did you mean 'mkdir'?", result)

    def test_external_permission_error(self):
        with patch.object(runner.subprocess, "run", side_effect=PermissionError(13, "Permission denied")):
            with self.assertLogs("runner", level="ERROR"):
                result = runner.execute_external(["./script"])
        self.assertTrue(result.startswith("Failed to execute command:"))
        self.assertIn("Permission denied", result)

    @unittest.skipUnless(sys.platform.startswith(("linux", "darwin")), "needs a POSIX userland")
    def test_external_real_process(self):
        self.assertEqual("real\n", runner.execute_external(["echo", "real"]))

    @unittest.skipUnless(sys.platform.startswith(("linux", "darwin")), "needs a POSIX userland")
    def test_external_real_missing_binary(self):
        with self.assertLogs("runner", level="ERROR"):
            result = runner.execute_external(["no-such-binary-for-batcave-tests"])
        self.assertIn("not found", result)

    # Timing Tests
    def test_execute_command_reports_slow_commands(self):
        out = io.StringIO()
        with patch.object(runner, "execute_line", return_value="ok"), \
                patch("shell_state.time.monotonic", side_effect=[1.0, 3.5]), \
                patch("sys.stdout", out):
            result = runner.execute_command("sleep 2", self.state)

        self.assertEqual("ok", result)
        self.assertEqual("Command took 2.50s\n", out.getvalue())

    def test_execute_command_quiet_for_fast_commands(self):
        out = io.StringIO()
        with patch.object(runner, "execute_line", return_value="ok"), \
                patch("shell_state.time.monotonic", side_effect=[1.0, 1.5]), \
                patch("sys.stdout", out):
            runner.execute_command("pwd", self.state)

        self.assertEqual("", out.getvalue())
        self.assertIsNone(self.state.command_started)

    def test_execute_command_clears_timer_on_error(self):
        with patch.object(runner, "execute_line", side_effect=RuntimeError("x")):
            with self.assertRaises(RuntimeError):
                runner.execute_command("x", self.state)
        self.assertIsNone(self.state.command_started)


if __name__ == "__main__":
    unittest.main()
