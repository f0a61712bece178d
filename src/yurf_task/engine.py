"""Facade exposing both launcher capabilities for one configuration."""

from __future__ import annotations

from typing import Iterator

from .action import ActionExecutor
from .config import TaskConfig
from .models import TaskItem
from .predicate import is_visible
from .process import DEFAULT_SHELL
from .source import Predicate, TaskSource


class Task:
    """Task plugin: an ``ItemSource`` and an ``ItemAction`` in one object."""

    def __init__(
        self,
        config: TaskConfig,
        *,
        predicate: Predicate = is_visible,
        shell: str = DEFAULT_SHELL,
    ) -> None:
        self._source = TaskSource(config, predicate=predicate)
        self._executor = ActionExecutor(shell=shell)

    @property
    def config(self) -> TaskConfig:
        return self._source.config

    def items(self) -> Iterator[TaskItem]:
        return self._source.items()

    def execute(self, item: TaskItem) -> None:
        self._executor.execute(item)


__all__ = ["Task"]
