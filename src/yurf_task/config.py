"""Loading of task files and resolution of their default location."""

from __future__ import annotations

import dataclasses
import logging
import os
import pathlib
import sys
import tomllib
from typing import Iterable, List, Optional, Tuple

from pydantic import ValidationError

from .errors import ConfigDirError, ReadTaskFileError, TomlError
from .models import TaskFile, TaskItem

logger = logging.getLogger(__name__)

ENV_PREFIX = "YURF_TASK"
APP_DIR = "yurf"
TASK_FILE = "task.toml"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env_paths(name: str) -> List[pathlib.Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return []
    return [pathlib.Path(part).expanduser() for part in raw.split(os.pathsep) if part.strip()]


def config_dir() -> Optional[pathlib.Path]:
    """Return the per-user configuration directory, or ``None`` if unknown."""

    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg and os.path.isabs(xdg):
        return pathlib.Path(xdg)

    if sys.platform == "win32":
        appdata = os.getenv("APPDATA")
        return pathlib.Path(appdata) if appdata else None

    try:
        home = pathlib.Path.home()
    except RuntimeError:
        return None

    if sys.platform == "darwin":
        return home / "Library" / "Application Support"
    return home / ".config"


def default_path() -> pathlib.Path:
    """Return ``<config dir>/yurf/task.toml``."""

    base = config_dir()
    if base is None:
        raise ConfigDirError()
    return base / APP_DIR / TASK_FILE


@dataclasses.dataclass(frozen=True, slots=True)
class TaskConfig:
    """Ordered list of task files to load."""

    paths: Tuple[pathlib.Path, ...] = ()

    @classmethod
    def of(cls, paths: Iterable[str | os.PathLike[str]]) -> "TaskConfig":
        return cls(paths=tuple(pathlib.Path(p) for p in paths))

    @classmethod
    def default(cls) -> "TaskConfig":
        return cls(paths=(default_path(),))

    @classmethod
    def from_env(cls) -> "TaskConfig":
        """Use ``$YURF_TASK_FILES`` when set, otherwise the default path."""

        paths = _env_paths(_k("FILES"))
        if paths:
            return cls(paths=tuple(paths))
        return cls.default()


def load_task_file(path: pathlib.Path) -> List[TaskItem]:
    """Read and parse a single task file."""

    try:
        # Decode bytes directly so carriage returns reach the TOML parser as written.
        text = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadTaskFileError(path, exc) from exc

    try:
        payload = tomllib.loads(text)
        parsed = TaskFile.model_validate(payload)
    except (tomllib.TOMLDecodeError, ValidationError) as exc:
        raise TomlError(path, exc) from exc

    logger.debug("Loaded %d task(s) from %s", len(parsed.task), path)
    return parsed.task


def load_tasks(paths: Iterable[pathlib.Path]) -> List[TaskItem]:
    """Load every file in order and concatenate their tasks.

    The first unreadable or malformed file aborts the whole load.
    """

    tasks: List[TaskItem] = []
    for path in paths:
        tasks.extend(load_task_file(pathlib.Path(path)))
    return tasks


__all__ = [
    "TaskConfig",
    "config_dir",
    "default_path",
    "load_task_file",
    "load_tasks",
]
