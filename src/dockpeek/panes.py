"""
Pane models: the container table, the image table and the detail viewport.

A pane owns its data and one widget. Record sets arrive whole from a fetch and
are mapped to display rows here; cursor and scroll handling stay inside the
widget.
"""

import logging
from typing import Callable, Generic, Optional, Sequence, Tuple, TypeVar

from rich.text import Text

from .config import Theme
from .model import ContainerRecord, ImageRecord
from .widgets import TableWidget, Viewport

logger = logging.getLogger(__name__)

R = TypeVar("R")

DETAIL_PLACEHOLDER = "Select a container or image"

CONTAINER_COLUMNS = ("ID", "Name", "Status", "Image", "State")
IMAGE_COLUMNS = ("ID", "Repository", "Tag", "Size")


def container_row(c: ContainerRecord) -> Tuple[str, ...]:
    return (c.id, c.name, c.status, c.image, c.state)


def image_row(i: ImageRecord) -> Tuple[str, ...]:
    return (i.id, i.repository, i.tag, i.size)


class TablePane(Generic[R]):
    def __init__(self, title: str, column_titles: Sequence[str],
                 to_row: Callable[[R], Tuple[str, ...]], focused: bool = False):
        self.title = title
        self.column_titles = tuple(column_titles)
        self.to_row = to_row
        self.records: Tuple[R, ...] = ()
        self.table = TableWidget(
            columns=[(t, 0) for t in self.column_titles], focused=focused
        )

    def set_content(self, records: Sequence[R]) -> None:
        self.records = tuple(records)
        self.table.set_rows([self.to_row(r) for r in self.records])
        logger.debug(f"{self.title}: {len(self.records)} rows")

    def resize(self, column_widths: Sequence[int], height: int) -> None:
        self.table.set_columns(list(zip(self.column_titles, column_widths)))
        self.table.set_height(height)

    def focus(self) -> None:
        self.table.focus()

    def blur(self) -> None:
        self.table.blur()

    def handle_key(self, key: str) -> bool:
        return self.table.update(key)

    def selected_index(self) -> Optional[int]:
        return self.table.selected_index()

    def selected_record(self) -> Optional[R]:
        index = self.table.selected_index()
        if index is None:
            return None
        return self.records[index]

    def render(self, theme: Theme) -> Text:
        if not self.records:
            text = self.table.view(header_style=theme.table_header)
            text.append("\n")
            text.append("(no items)", style=theme.hint)
            return text
        return self.table.view(
            header_style=theme.table_header, selected_style=theme.selected_row
        )


def container_pane() -> TablePane[ContainerRecord]:
    return TablePane("Containers", CONTAINER_COLUMNS, container_row, focused=True)


def image_pane() -> TablePane[ImageRecord]:
    return TablePane("Images", IMAGE_COLUMNS, image_row)


class DetailPane:
    title = "Details"

    def __init__(self):
        self.viewport = Viewport()
        self.viewport.set_content(DETAIL_PLACEHOLDER)
        self.source = ""  # what the content was fetched for, e.g. "logs web"

    @property
    def content(self) -> str:
        return self.viewport.content

    def set_content(self, text: str, source: str = "") -> None:
        self.viewport.set_content(text)
        self.source = source

    def resize(self, width: int, height: int) -> None:
        self.viewport.resize(width, height)

    def handle_key(self, key: str) -> bool:
        return self.viewport.update(key)

    def render(self, theme: Theme) -> Text:
        return self.viewport.view()
