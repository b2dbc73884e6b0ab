"""
Rich rendering of the dashboard frame.

Layout of a frame:
  - left column: Containers panel above Images panel
  - right column: Details panel
  - bottom line: key hints and the last status/error message

Border colour marks the focused pane. It is derived from the focus state on
every render and never stored. All colours come from the Theme passed in.
"""

from typing import TYPE_CHECKING, Dict

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import Theme
from .model import FocusState
from .widgets import Viewport

if TYPE_CHECKING:
    from .state import Dashboard

MIN_WIDTH = 20
MIN_HEIGHT = 10

HINTS = "tab: switch pane  enter: details  r: refresh  q: quit"


def focus_styles(focus: FocusState, theme: Theme) -> Dict[FocusState, str]:
    return {
        pane: theme.focused_border if pane == focus else theme.blurred_border
        for pane in FocusState
    }


def pane_panel(body: RenderableType, title: str, border_style: str, theme: Theme,
               width: int, height: int, subtitle: str = "") -> Panel:
    return Panel(
        body,
        title=Text(f" {title} ", style=theme.title),
        title_align="left",
        subtitle=Text(subtitle, style=theme.hint) if subtitle else None,
        subtitle_align="right",
        box=box.ROUNDED,
        border_style=border_style,
        width=width + 4,
        height=height + 2,
        padding=(0, 1),
    )


def draw_footer(state: "Dashboard", theme: Theme) -> Text:
    footer = Text(HINTS, style=theme.hint, no_wrap=True, overflow="ellipsis")
    if state.message:
        footer.append("  ")
        footer.append(state.message, style=theme.error)
    return footer


def scroll_label(viewport: Viewport) -> str:
    if viewport.at_top() and viewport.at_bottom():
        return "all"
    if viewport.at_top():
        return "top"
    if viewport.at_bottom():
        return "end"
    return f"{int(viewport.scroll_percent() * 100)}%"


def render_frame(state: "Dashboard", theme: Theme) -> RenderableType:
    width, height = state.size
    if width < MIN_WIDTH or height < MIN_HEIGHT:
        return Text("Terminal too small!", style=theme.error)

    layout = state.layout
    borders = focus_styles(state.focus.state, theme)

    containers = pane_panel(
        state.containers.render(theme), state.containers.title,
        borders[FocusState.CONTAINERS], theme,
        layout.list_width, layout.list_height,
        subtitle=str(len(state.containers.records)),
    )
    images = pane_panel(
        state.images.render(theme), state.images.title,
        borders[FocusState.IMAGES], theme,
        layout.list_width, layout.list_height,
        subtitle=str(len(state.images.records)),
    )

    details = state.details
    detail_title = details.title
    if details.source:
        detail_title += f": {details.source}"
    detail_panel = pane_panel(
        details.render(theme), detail_title,
        borders[FocusState.DETAILS], theme,
        layout.detail_width, layout.detail_height,
        subtitle=scroll_label(details.viewport),
    )

    grid = Table.grid(padding=(0, 1))
    grid.add_column()
    grid.add_column()
    grid.add_row(Group(containers, images), detail_panel)
    return Group(grid, draw_footer(state, theme))
