"""
Container runtime data fetcher.

This module turns runtime CLI output into dockpeek records. It provides:
  - parse_json_lines(): decode newline-delimited JSON into records
  - RuntimeBackend: the four fetch operations used by the dashboard

Every fetch returns a `(value, error)` pair. Errors from the command runner are
caught, logged and returned alongside an empty default so the UI can keep
running with an empty pane.

Argument templates are fixed:
  - containers: ps --format json
  - images:     images --format json
  - logs:       logs <id>
  - inspect:    inspect <id>
"""

import functools
import json
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from .model import ContainerRecord, ImageRecord
from .runner import CommandError, CommandRunner

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fetch_safe(default_return: Any) -> Callable:
    """
    Decorator for fetch methods that turns CommandError into `(default, error)`.

    The wrapped method returns its value only; the wrapper pairs it with
    `None` on success.

    Usage:
        @fetch_safe(default_return=[])
        def fetch_containers(self) -> List[ContainerRecord]:
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Tuple[Any, Optional[CommandError]]:
            try:
                return func(*args, **kwargs), None
            except CommandError as e:
                logger.error(f"Fetch failed in {func.__name__}: {e}", exc_info=True)
                # Fresh copy so callers never share a mutable default.
                return type(default_return)(default_return), e
        return wrapper
    return decorator


def parse_json_lines(text: str, factory: Callable[[Dict[str, Any]], T]) -> List[T]:
    """
    Decode one JSON object per line into records built by `factory`.

    Blank lines are skipped. Lines that are not valid JSON objects are logged
    and dropped; they never fail the whole parse.
    """
    records: List[T] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            logger.warning(f"Skipping malformed JSON on line {lineno}: {e}")
            continue
        if not isinstance(data, dict):
            logger.warning(f"Skipping non-object JSON on line {lineno}: {line[:80]}")
            continue
        records.append(factory(data))
    return records


class RuntimeBackend:
    def __init__(self, runner: Optional[CommandRunner] = None):
        self.runner = runner or CommandRunner()

    @fetch_safe(default_return=[])
    def fetch_containers(self) -> List[ContainerRecord]:
        output = self.runner.run(["ps", "--format", "json"])
        containers = parse_json_lines(output, ContainerRecord.from_json)
        logger.info(f"Fetched {len(containers)} containers")
        return containers

    @fetch_safe(default_return=[])
    def fetch_images(self) -> List[ImageRecord]:
        output = self.runner.run(["images", "--format", "json"])
        images = parse_json_lines(output, ImageRecord.from_json)
        logger.info(f"Fetched {len(images)} images")
        return images

    @fetch_safe(default_return="")
    def fetch_logs(self, container_id: str) -> str:
        return self.runner.run(["logs", container_id], merge_stderr=True)

    @fetch_safe(default_return="")
    def fetch_inspect(self, item_id: str) -> str:
        return self.runner.run(["inspect", item_id])
