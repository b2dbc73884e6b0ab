"""Textual host for the dashboard."""

from __future__ import annotations

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from .model import Event, KeyEvent, ResizeEvent
from .state import Dashboard


class DockpeekApp(App[None]):
    TITLE = "dockpeek"

    CSS = """
    Screen {
      overflow: hidden;
    }

    #frame {
      width: 100%;
      height: 100%;
    }
    """

    # Textual binds these itself (focus chain, help-quit); priority bindings
    # route them to the dashboard first.
    BINDINGS = [
        Binding("tab", "dispatch_key('tab')", "Switch pane", show=False, priority=True),
        Binding("enter", "dispatch_key('enter')", "Details", show=False, priority=True),
        Binding("ctrl+c", "dispatch_key('ctrl+c')", "Quit", show=False, priority=True),
    ]

    def __init__(self, dashboard: Dashboard) -> None:
        super().__init__()
        self.dashboard = dashboard

    def compose(self) -> ComposeResult:
        yield Static("", id="frame", markup=False)

    def on_mount(self) -> None:
        self.forward(ResizeEvent(self.size.width, self.size.height))

    def on_resize(self, event: events.Resize) -> None:
        self.forward(ResizeEvent(event.size.width, event.size.height))

    async def on_key(self, event: events.Key) -> None:
        event.stop()
        self.forward(KeyEvent(event.key))

    def action_dispatch_key(self, key: str) -> None:
        self.forward(KeyEvent(key))

    def forward(self, event: Event) -> None:
        if not self.dashboard.update(event):
            self.exit()
            return
        self.query_one("#frame", Static).update(self.dashboard.view())


def run(dashboard: Dashboard) -> int:
    app = DockpeekApp(dashboard)
    app.run()
    return app.return_code or 0
