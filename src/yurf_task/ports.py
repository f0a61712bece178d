"""Capabilities handed to the launcher host.

The host depends on these Protocols rather than on concrete classes, so a
different source or action can be injected without touching the host.
"""

from __future__ import annotations

from typing import Iterator, Protocol

from .models import TaskItem


class ItemSource(Protocol):
    """Produces the items the host should offer for selection.

    Each pull of the returned iterator may block.
    """

    def items(self) -> Iterator[TaskItem]: ...


class ItemAction(Protocol):
    """Consumes the item the user picked and triggers its effect."""

    def execute(self, item: TaskItem) -> None: ...


__all__ = ["ItemAction", "ItemSource"]
