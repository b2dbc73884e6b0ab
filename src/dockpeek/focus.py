"""
Focus handling across the three panes.

The cycle is containers -> images -> details -> containers. `enter` on a list
pane with a selected row fetches that row's detail text (logs for containers,
inspect output for images), shows it in the detail pane and moves focus there.
"""

import logging
from typing import Optional, Union

from .backend import RuntimeBackend
from .config import KeyBindings
from .model import FocusState
from .panes import DetailPane, TablePane

logger = logging.getLogger(__name__)

NO_OUTPUT = "(no output)"

_CYCLE = {
    FocusState.CONTAINERS: FocusState.IMAGES,
    FocusState.IMAGES: FocusState.DETAILS,
    FocusState.DETAILS: FocusState.CONTAINERS,
}


def next_focus(state: FocusState) -> FocusState:
    return _CYCLE[state]


class FocusController:
    def __init__(self, backend: RuntimeBackend, containers: TablePane,
                 images: TablePane, details: DetailPane,
                 keys: Optional[KeyBindings] = None):
        self.backend = backend
        self.containers = containers
        self.images = images
        self.details = details
        self.keys = keys or KeyBindings()
        self.state = FocusState.CONTAINERS
        self._sync_widgets()

    def active_pane(self) -> Union[TablePane, DetailPane]:
        if self.state == FocusState.CONTAINERS:
            return self.containers
        if self.state == FocusState.IMAGES:
            return self.images
        return self.details

    def handle_key(self, key: str) -> bool:
        """Returns True when the key was a focus key and has been consumed."""
        if key == self.keys.focus_next:
            self.cycle()
            return True
        if key == self.keys.select:
            self.select()
            return True
        return False

    def cycle(self) -> None:
        self.set_state(next_focus(self.state))

    def set_state(self, state: FocusState) -> None:
        logger.debug(f"Focus {self.state.name} -> {state.name}")
        self.state = state
        self._sync_widgets()

    def select(self) -> bool:
        """Load detail text for the selected row. Returns True if focus moved."""
        if self.state == FocusState.CONTAINERS:
            record = self.containers.selected_record()
            if record is None:
                return False
            text, err = self.backend.fetch_logs(record.id)
            source = f"logs {record.name or record.id}"
        elif self.state == FocusState.IMAGES:
            record = self.images.selected_record()
            if record is None:
                return False
            text, err = self.backend.fetch_inspect(record.id)
            source = f"inspect {record.repository or record.id}"
        else:
            return False

        if err is not None:
            text = f"Failed to load {source}: {err}"
        elif not text.strip():
            text = NO_OUTPUT
        self.details.set_content(text, source=source)
        self.set_state(FocusState.DETAILS)
        return True

    def _sync_widgets(self) -> None:
        self.containers.blur()
        self.images.blur()
        if self.state == FocusState.CONTAINERS:
            self.containers.focus()
        elif self.state == FocusState.IMAGES:
            self.images.focus()
