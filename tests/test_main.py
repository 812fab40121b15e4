"""Tests for main.py entry point: exit codes when interrupted or piped."""

import io
import sys

import pytest

import main


class _ClosedStdout(io.StringIO):
    def fileno(self):
        return 1


@pytest.fixture
def no_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["pipeline-logs"])


class TestMainExit:
    def test_returns_run_exit_code(self, monkeypatch, no_argv):
        monkeypatch.setattr(main, "run", lambda args: 1)
        with pytest.raises(SystemExit) as exc:
            main.main()
        assert exc.value.code == 1

    def test_keyboard_interrupt_exits_cleanly(self, monkeypatch, no_argv):
        def interrupted(args):
            raise KeyboardInterrupt

        monkeypatch.setattr(main, "run", interrupted)
        with pytest.raises(SystemExit) as exc:
            main.main()
        assert exc.value.code == 0

    def test_interrupt_while_reading_stdin(self, monkeypatch, no_argv):
        def interrupted():
            raise KeyboardInterrupt

        monkeypatch.setattr(main, "read_stdin", interrupted)
        with pytest.raises(SystemExit) as exc:
            main.main()
        assert exc.value.code == 0

    def test_broken_pipe_exits_cleanly(self, monkeypatch, no_argv):
        def broken(args):
            raise BrokenPipeError

        redirected = []
        monkeypatch.setattr(main, "run", broken)
        monkeypatch.setattr(main.os, "dup2", lambda fd, fd2: redirected.append(fd2))
        monkeypatch.setattr(sys, "stdout", _ClosedStdout())
        with pytest.raises(SystemExit) as exc:
            main.main()
        assert exc.value.code == 0
        assert redirected == [1]
