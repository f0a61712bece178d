"""Task source and action for the yurf launcher."""

from importlib import metadata

from .action import ActionExecutor, execute
from .config import TaskConfig, default_path, load_tasks
from .engine import Task
from .errors import (
    ActionError,
    ConfigDirError,
    ReadTaskFileError,
    TaskError,
    TomlError,
    YurfTaskError,
)
from .models import TaskItem
from .ports import ItemAction, ItemSource
from .predicate import is_visible
from .source import TaskSource, list_tasks

__all__ = [
    "__version__",
    "ActionError",
    "ActionExecutor",
    "ConfigDirError",
    "ItemAction",
    "ItemSource",
    "ReadTaskFileError",
    "Task",
    "TaskConfig",
    "TaskError",
    "TaskItem",
    "TaskSource",
    "TomlError",
    "YurfTaskError",
    "default_path",
    "execute",
    "is_visible",
    "list_tasks",
    "load_tasks",
]


def __getattr__(name: str):
    if name == "__version__":
        return metadata.version("yurf-task")
    raise AttributeError(name)
