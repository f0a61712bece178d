import pathlib
import subprocess
import sys

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from yurf_task.predicate import is_visible  # noqa: E402

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="requires a POSIX shell")


def test_absent_predicate_is_visible_without_spawning(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("no process should be started")

    monkeypatch.setattr(subprocess, "run", fail)

    assert is_visible(None) is True


def test_exit_status_decides_visibility():
    assert is_visible("exit 0") is True
    assert is_visible("true") is True
    assert is_visible("exit 1") is False
    assert is_visible("exit 2") is False


def test_missing_executable_hides_the_task():
    assert is_visible("definitely-not-an-installed-command-4c1e") is False


def test_signal_death_hides_the_task():
    assert is_visible("kill -9 $$") is False


def test_unspawnable_shell_hides_the_task(tmp_path):
    assert is_visible("true", shell=str(tmp_path / "no-such-shell")) is False


def test_predicate_runs_detached_with_null_streams(monkeypatch):
    calls = []

    def fake_run(argv, **kwargs):
        calls.append((argv, kwargs))
        return subprocess.CompletedProcess(argv, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)

    assert is_visible("test -x /bin/sh") is True

    ((argv, kwargs),) = calls
    assert argv == ["sh", "-c", "test -x /bin/sh"]
    assert kwargs["process_group"] == 0
    assert kwargs["stdin"] is subprocess.DEVNULL
    assert kwargs["stdout"] is subprocess.DEVNULL
    assert kwargs["stderr"] is subprocess.DEVNULL


def test_predicate_output_is_discarded(capfd):
    assert is_visible("echo noisy; echo louder >&2") is True

    captured = capfd.readouterr()
    assert captured.out == ""
    assert captured.err == ""
