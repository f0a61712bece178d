"""Command line interface for the yurf task plugin."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Iterable, List, Optional

from .action import ActionExecutor
from .config import TaskConfig, default_path, load_tasks
from .errors import ActionError, TaskError
from .models import TaskItem
from .predicate import is_visible
from .source import list_tasks

LOG_LEVEL_ENV = "YURF_TASK_LOG_LEVEL"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yurf-task", description="yurf task launcher")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output, including predicate results",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def _add_config_argument(target: argparse.ArgumentParser) -> None:
        target.add_argument(
            "-c",
            "--config",
            action="append",
            dest="paths",
            metavar="PATH",
            help="Task file to load (can be used multiple times; defaults to $YURF_TASK_FILES "
            "or the default path)",
        )

    list_parser = subparsers.add_parser("list", help="Print the tasks that are currently visible")
    _add_config_argument(list_parser)
    list_parser.add_argument("--json", action="store_true", help="Emit tasks as JSON")
    list_parser.add_argument(
        "--all",
        action="store_true",
        help="Skip show_if predicates and list every task",
    )

    run_parser = subparsers.add_parser("run", help="Start the visible task with the given name")
    _add_config_argument(run_parser)
    run_parser.add_argument("name", help="Name of the task to start")

    subparsers.add_parser("path", help="Print the default task file path")

    return parser


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "WARNING").strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _resolve_config(paths: Optional[List[str]]) -> TaskConfig:
    if paths:
        return TaskConfig.of(paths)
    return TaskConfig.from_env()


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "path":
        try:
            print(default_path())
        except TaskError as exc:
            parser.error(str(exc))
        return 0

    try:
        config = _resolve_config(args.paths)
    except TaskError as exc:
        parser.error(str(exc))

    if args.command == "list":
        return _handle_list(parser, config, as_json=args.json, show_all=args.all)
    return _handle_run(parser, config, args.name)


def _handle_list(
    parser: argparse.ArgumentParser,
    config: TaskConfig,
    *,
    as_json: bool,
    show_all: bool,
) -> int:
    predicate = (lambda _show_if: True) if show_all else is_visible
    try:
        tasks = list_tasks(config, predicate)
    except TaskError as exc:
        parser.error(str(exc))

    if as_json:
        _print_json(tasks)
    else:
        _print_human(tasks)
    return 0


def _handle_run(parser: argparse.ArgumentParser, config: TaskConfig, name: str) -> int:
    try:
        tasks = load_tasks(config.paths)
    except TaskError as exc:
        parser.error(str(exc))

    # Only predicates of tasks carrying the requested name are evaluated.
    selected = next((task for task in tasks if task.name == name and is_visible(task.show_if)), None)
    if selected is None:
        print(f"No visible task named '{name}'.", file=sys.stderr)
        return 1

    try:
        ActionExecutor().execute(selected)
    except ActionError as exc:
        logging.getLogger(__name__).error("%s: %s", exc, exc.__cause__)
        return 1
    return 0


def _print_json(tasks: Iterable[TaskItem]) -> None:
    print(json.dumps([task.model_dump() for task in tasks], indent=2))


def _print_human(tasks: Iterable[TaskItem]) -> None:
    # Print as items arrive so slow predicates do not hold back earlier tasks.
    for task in tasks:
        print(task.name, flush=True)


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    raise SystemExit(main())
