"""Lazy, filtered sequence of tasks handed to the launcher."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional

from .config import TaskConfig, load_tasks
from .models import TaskItem
from .predicate import is_visible

Predicate = Callable[[Optional[str]], bool]


def _filtered(tasks: Iterable[TaskItem], predicate: Predicate) -> Iterator[TaskItem]:
    for task in tasks:
        if predicate(task.show_if):
            yield task


def list_tasks(config: TaskConfig, predicate: Predicate = is_visible) -> Iterator[TaskItem]:
    """Load every configured file now and return a single-pass iterator.

    Load errors are raised from this call. Predicates are evaluated one at a
    time as the iterator is consumed, so each ``next()`` may block for as
    long as the predicate subprocesses it has to run.
    """

    tasks = load_tasks(config.paths)
    return _filtered(tasks, predicate)


class TaskSource:
    """Item source bound to a task configuration."""

    def __init__(self, config: TaskConfig, *, predicate: Predicate = is_visible) -> None:
        self._config = config
        self._predicate = predicate

    @property
    def config(self) -> TaskConfig:
        return self._config

    def items(self) -> Iterator[TaskItem]:
        return list_tasks(self._config, self._predicate)


__all__ = ["Predicate", "TaskSource", "list_tasks"]
