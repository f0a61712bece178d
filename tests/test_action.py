import pathlib
import subprocess
import sys
import time

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from yurf_task.action import ActionExecutor, execute  # noqa: E402
from yurf_task.errors import ActionError  # noqa: E402
from yurf_task.models import TaskItem  # noqa: E402

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="requires a POSIX shell")


def _wait_for(path: pathlib.Path, timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if path.exists():
            return True
        time.sleep(0.05)
    return False


def test_execute_runs_command_through_shell(tmp_path):
    marker = tmp_path / "marker"

    execute(TaskItem(name="touch", command=f"echo started > '{marker}'"))

    assert _wait_for(marker)
    assert marker.read_text(encoding="utf-8").strip() == "started"


def test_execute_does_not_wait_for_completion():
    started = time.monotonic()

    execute(TaskItem(name="slow", command="sleep 5"))

    assert time.monotonic() - started < 2.0


def test_unspawnable_shell_raises_action_error(tmp_path):
    executor = ActionExecutor(shell=str(tmp_path / "no-such-shell"))

    with pytest.raises(ActionError) as exc:
        executor.execute(TaskItem(name="x", command="true"))

    assert str(exc.value) == "failed to start the selected app"
    assert isinstance(exc.value.__cause__, OSError)


def test_failing_command_is_not_reported():
    execute(TaskItem(name="fails", command="exit 7"))


def test_execute_spawns_detached(monkeypatch):
    calls = []

    class FakePopen:
        pid = 4242

        def __init__(self, argv, **kwargs):
            calls.append((argv, kwargs))

    monkeypatch.setattr(subprocess, "Popen", FakePopen)

    execute(TaskItem(name="browser", command="firefox"))

    ((argv, kwargs),) = calls
    assert argv == ["sh", "-c", "firefox"]
    assert kwargs["process_group"] == 0
    assert kwargs["stdout"] is subprocess.DEVNULL
    assert kwargs["stderr"] is subprocess.DEVNULL
