"""Visibility predicates evaluated through the shell."""

from __future__ import annotations

import logging
import subprocess
from typing import Optional

from .process import DEFAULT_SHELL, detached_options, shell_argv

logger = logging.getLogger(__name__)


def is_visible(show_if: Optional[str], *, shell: str = DEFAULT_SHELL) -> bool:
    """Return whether a task guarded by ``show_if`` should be listed.

    Blocks until the predicate exits. Only a normal exit with status 0 counts
    as visible; a failure to spawn is treated the same as a false predicate.
    """

    if show_if is None:
        return True

    try:
        completed = subprocess.run(shell_argv(show_if, shell=shell), check=False, **detached_options())
    except OSError as exc:
        logger.debug("Predicate %r could not be started: %s", show_if, exc)
        return False

    visible = completed.returncode == 0
    logger.debug("Predicate %r exited with %s", show_if, completed.returncode)
    return visible


__all__ = ["is_visible"]
