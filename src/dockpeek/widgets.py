"""
Table and viewport primitives.

Both widgets keep their own cursor/scroll position and render to a
`rich.text.Text`. They know nothing about records or focus rules; panes hold
an instance and forward calls to it.

Table keys:     up/k, down/j, pageup/b, pagedown/f, ctrl+u, ctrl+d, home/g, end/G
Viewport keys:  same set, plus space for page down
"""

from typing import List, Optional, Sequence, Tuple

from rich.cells import cell_len, set_cell_size
from rich.text import Text

ELLIPSIS = "…"


def fit_cell(value: str, width: int) -> str:
    """Truncate to leave one column of gap, then pad to exactly `width` terminal cells."""
    if width <= 0:
        return ""
    room = width - 1
    if cell_len(value) > room:
        value = set_cell_size(value, room - 1) + ELLIPSIS if room > 1 else set_cell_size(value, room)
    return set_cell_size(value, width)


class TableWidget:
    def __init__(self, columns: Sequence[Tuple[str, int]] = (), height: int = 0,
                 focused: bool = False):
        self.columns: List[Tuple[str, int]] = list(columns)
        self.rows: List[Tuple[str, ...]] = []
        self.height = height  # header line included
        self.focused = focused
        self.cursor = 0
        self.offset = 0

    @property
    def body_height(self) -> int:
        return max(0, self.height - 1)

    def _page(self) -> int:
        return max(1, self.body_height)

    def set_rows(self, rows: Sequence[Tuple[str, ...]]) -> None:
        self.rows = list(rows)
        if not self.rows:
            self.cursor = 0
            self.offset = 0
            return
        self.cursor = min(self.cursor, len(self.rows) - 1)
        self._scroll_to_cursor()

    def set_columns(self, columns: Sequence[Tuple[str, int]]) -> None:
        self.columns = list(columns)

    def set_height(self, height: int) -> None:
        self.height = max(0, height)
        self._scroll_to_cursor()

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def selected_index(self) -> Optional[int]:
        if not self.rows:
            return None
        return self.cursor

    def move(self, delta: int) -> None:
        if not self.rows:
            return
        self.cursor = max(0, min(len(self.rows) - 1, self.cursor + delta))
        self._scroll_to_cursor()

    def goto_top(self) -> None:
        self.move(-len(self.rows))

    def goto_bottom(self) -> None:
        self.move(len(self.rows))

    def _scroll_to_cursor(self) -> None:
        visible = self._page()
        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor >= self.offset + visible:
            self.offset = self.cursor - visible + 1
        self.offset = max(0, min(self.offset, max(0, len(self.rows) - visible)))

    def update(self, key: str) -> bool:
        """Apply a navigation key. Returns True if the key was understood."""
        if not self.focused:
            return False
        page = self._page()
        if key in ("up", "k"):
            self.move(-1)
        elif key in ("down", "j"):
            self.move(1)
        elif key in ("pageup", "b"):
            self.move(-page)
        elif key in ("pagedown", "f"):
            self.move(page)
        elif key == "ctrl+u":
            self.move(-max(1, page // 2))
        elif key == "ctrl+d":
            self.move(max(1, page // 2))
        elif key in ("home", "g"):
            self.goto_top()
        elif key in ("end", "G"):
            self.goto_bottom()
        else:
            return False
        return True

    def view(self, header_style: str = "bold", selected_style: str = "reverse") -> Text:
        text = Text(no_wrap=True, overflow="crop")
        header = "".join(fit_cell(title, width) for title, width in self.columns)
        text.append(header, style=header_style)

        visible = self.rows[self.offset: self.offset + self.body_height]
        for i, row in enumerate(visible):
            text.append("\n")
            line = "".join(
                fit_cell(value, width) for value, (_, width) in zip(row, self.columns)
            )
            if self.offset + i == self.cursor:
                text.append(line, style=selected_style)
            else:
                text.append(line)
        return text


class Viewport:
    def __init__(self, width: int = 0, height: int = 0):
        self.width = width
        self.height = height
        self.lines: List[str] = []
        self.y_offset = 0

    def set_content(self, content: str) -> None:
        self.lines = content.splitlines()
        self.y_offset = 0

    @property
    def content(self) -> str:
        return "\n".join(self.lines)

    @property
    def max_offset(self) -> int:
        return max(0, len(self.lines) - self.height)

    def resize(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self.y_offset = min(self.y_offset, self.max_offset)

    def scroll(self, delta: int) -> None:
        self.y_offset = max(0, min(self.max_offset, self.y_offset + delta))

    def at_top(self) -> bool:
        return self.y_offset <= 0

    def at_bottom(self) -> bool:
        return self.y_offset >= self.max_offset

    def scroll_percent(self) -> float:
        if self.max_offset == 0:
            return 1.0
        return self.y_offset / self.max_offset

    def update(self, key: str) -> bool:
        page = max(1, self.height)
        if key in ("up", "k"):
            self.scroll(-1)
        elif key in ("down", "j"):
            self.scroll(1)
        elif key in ("pageup", "b"):
            self.scroll(-page)
        elif key in ("pagedown", "f", "space"):
            self.scroll(page)
        elif key == "ctrl+u":
            self.scroll(-max(1, page // 2))
        elif key == "ctrl+d":
            self.scroll(max(1, page // 2))
        elif key in ("home", "g"):
            self.y_offset = 0
        elif key in ("end", "G"):
            self.y_offset = self.max_offset
        else:
            return False
        return True

    def view(self) -> Text:
        visible = self.lines[self.y_offset: self.y_offset + self.height]
        # Container output may carry colour escapes; turn them into styles.
        rendered = [Text.from_ansi(line, no_wrap=True, overflow="crop") for line in visible]
        if self.width > 0:
            for line in rendered:
                line.truncate(self.width)
        return Text("\n", no_wrap=True, overflow="crop").join(rendered)
