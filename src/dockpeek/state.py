"""
Application state and the update/view cycle.

The Dashboard is the single state value of the program: focus, the three panes,
the current layout and a status message. It consumes one event at a time:

  - ResizeEvent: recompute the layout and resize the panes (data untouched)
  - KeyEvent:
      quit keys      -> stop the loop
      tab / enter    -> FocusController
      refresh key    -> refetch containers and images
      anything else  -> the focused pane

Fetches run inline and block until the runtime CLI returns. Nothing here
touches the terminal; textual_app.py hosts the Dashboard and displays view().
"""

import logging
from typing import Optional, Tuple

from rich.console import RenderableType

from .backend import RuntimeBackend
from .config import AppConfig
from .focus import FocusController
from .layout import DEFAULT_SIZE, compute_layout
from .model import Event, KeyEvent, LayoutDimensions, ResizeEvent
from .panes import DetailPane, container_pane, image_pane
from .ui import render_frame

logger = logging.getLogger(__name__)


class Dashboard:
    def __init__(self, backend: RuntimeBackend, config: Optional[AppConfig] = None,
                 size: Tuple[int, int] = DEFAULT_SIZE):
        self.backend = backend
        self.config = config or AppConfig()
        self.containers = container_pane()
        self.images = image_pane()
        self.details = DetailPane()
        self.focus = FocusController(
            backend, self.containers, self.images, self.details,
            keys=self.config.keybindings,
        )
        self.message = ""
        self.size = size
        self.layout: LayoutDimensions = compute_layout(*size)
        self._apply_layout()

    def load(self) -> None:
        """Fetch containers and images, replacing whatever the panes held."""
        errors = []

        containers, err = self.backend.fetch_containers()
        self.containers.set_content(containers)
        if err is not None:
            errors.append(f"containers: {err}")

        images, err = self.backend.fetch_images()
        self.images.set_content(images)
        if err is not None:
            errors.append(f"images: {err}")

        self.message = "; ".join(errors)

    def update(self, event: Event) -> bool:
        """Apply one event. Returns False when the application should exit."""
        if isinstance(event, ResizeEvent):
            self.resize(event.width, event.height)
            return True
        if isinstance(event, KeyEvent):
            return self._handle_key(event.key)
        raise TypeError(f"Unsupported event: {event!r}")

    def resize(self, width: int, height: int) -> None:
        logger.debug(f"Resize: {width}x{height}")
        self.size = (width, height)
        self.layout = compute_layout(width, height)
        self._apply_layout()

    def _apply_layout(self) -> None:
        layout = self.layout
        self.containers.resize(layout.container_columns, layout.list_height)
        self.images.resize(layout.image_columns, layout.list_height)
        self.details.resize(layout.detail_width, layout.detail_height)

    def _handle_key(self, key: str) -> bool:
        keys = self.config.keybindings
        if keys.is_quit(key):
            logger.info("Quitting")
            return False
        if self.focus.handle_key(key):
            return True
        if key == keys.refresh:
            logger.info("Refreshing containers and images")
            self.load()
            return True
        self.focus.active_pane().handle_key(key)
        return True

    def view(self) -> RenderableType:
        return render_frame(self, self.config.theme)
