"""
Data models and structures for dockpeek.

This module defines the dataclasses shared by the fetcher, the panes and the
application loop:
  - ContainerRecord / ImageRecord: one row of `docker ps` / `docker images`
  - FocusState: which pane currently receives input
  - LayoutDimensions: pane sizes derived from the terminal size
  - KeyEvent / ResizeEvent: the two event kinds the dashboard consumes

Records are frozen: a fetch replaces the whole list, rows are never edited.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union


@dataclass(frozen=True)
class ContainerRecord:
    id: str
    name: str
    image: str
    status: str
    state: str  # free-form from the runtime: running, exited, created...

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ContainerRecord":
        return cls(
            id=str(data.get("ID", "")),
            name=str(data.get("Names", "")),
            image=str(data.get("Image", "")),
            status=str(data.get("Status", "")),
            state=str(data.get("State", "")),
        )


@dataclass(frozen=True)
class ImageRecord:
    id: str
    repository: str
    tag: str
    size: str  # human readable, as printed by the runtime

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ImageRecord":
        return cls(
            id=str(data.get("ID", "")),
            repository=str(data.get("Repository", "")),
            tag=str(data.get("Tag", "")),
            size=str(data.get("Size", "")),
        )


class FocusState(Enum):
    CONTAINERS = 0
    IMAGES = 1
    DETAILS = 2


@dataclass(frozen=True)
class LayoutDimensions:
    list_width: int
    list_height: int
    detail_width: int
    detail_height: int
    container_columns: Tuple[int, ...]
    image_columns: Tuple[int, ...]


@dataclass(frozen=True)
class KeyEvent:
    key: str


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


Event = Union[KeyEvent, ResizeEvent]
