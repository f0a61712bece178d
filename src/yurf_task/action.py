"""Execution of the task picked by the user."""

from __future__ import annotations

import logging
import subprocess

from .errors import ActionError
from .models import TaskItem
from .process import DEFAULT_SHELL, detached_options, shell_argv

logger = logging.getLogger(__name__)


class ActionExecutor:
    """Starts a task's command and returns without waiting for it."""

    def __init__(self, *, shell: str = DEFAULT_SHELL) -> None:
        self._shell = shell

    def execute(self, item: TaskItem) -> None:
        try:
            process = subprocess.Popen(shell_argv(item.command, shell=self._shell), **detached_options())
        except OSError as exc:
            raise ActionError(item.command) from exc
        logger.info("Started task '%s' (pid %s)", item.name, process.pid)


def execute(item: TaskItem) -> None:
    """Fire-and-forget execution with the default shell."""

    ActionExecutor().execute(item)


__all__ = ["ActionExecutor", "execute"]
