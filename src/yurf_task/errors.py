"""Custom exceptions for the yurf task plugin."""

from __future__ import annotations

import pathlib
from typing import Optional


class YurfTaskError(RuntimeError):
    """Base class for every error raised by this package."""


class TaskError(YurfTaskError):
    """Raised when the task list cannot be loaded."""


class ConfigDirError(TaskError):
    """Raised when the platform configuration directory cannot be resolved."""

    def __init__(self) -> None:
        super().__init__("Could not find config directory")


class ReadTaskFileError(TaskError):
    """Raised when a task file cannot be read."""

    def __init__(self, path: pathlib.Path, cause: BaseException) -> None:
        super().__init__(f"failed to read task config file: {path}: {cause}")
        self.path = path


class TomlError(TaskError):
    """Raised when a task file does not parse as a task definition."""

    def __init__(self, path: pathlib.Path, cause: BaseException) -> None:
        super().__init__(f"failed to parse the toml: {path}: {cause}")
        self.path = path


class ActionError(YurfTaskError):
    """Raised when the selected task cannot be started."""

    def __init__(self, command: Optional[str] = None) -> None:
        super().__init__("failed to start the selected app")
        self.command = command
