"""Subprocess options shared by predicates and actions."""

from __future__ import annotations

import subprocess
import sys
from typing import Any, Dict, List

DEFAULT_SHELL = "sh"


def shell_argv(command: str, *, shell: str = DEFAULT_SHELL) -> List[str]:
    return [shell, "-c", command]


def detached_options() -> Dict[str, Any]:
    """Keyword arguments that silence the child and move it to its own group.

    A separate process group keeps terminal job-control signals aimed at the
    launcher away from the child.
    """

    options: Dict[str, Any] = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
    }
    if sys.platform == "win32":
        options["creationflags"] = subprocess.CREATE_NEW_PROCESS_GROUP
    else:
        options["process_group"] = 0
    return options


__all__ = ["DEFAULT_SHELL", "detached_options", "shell_argv"]
