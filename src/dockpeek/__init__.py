"""
dockpeek - a read-only terminal dashboard for container runtimes.

Browse containers and images side by side and open the logs of a container or
the inspect output of an image in a scrollable detail pane.

Features:
  - Three panes: Containers, Images, Details (tab cycles focus)
  - Enter on a list row loads its logs/inspect output
  - Layout follows the terminal size
  - Works with any docker-compatible CLI (docker, podman)

Main Components:
  - main.py: Entry point (arguments, logging, startup fetch)
  - textual_app.py: Textual host that feeds terminal events to the dashboard
  - state.py: Dashboard state and update cycle
  - focus.py: Focus cycle and detail loading
  - panes.py / widgets.py: Pane models and table/viewport primitives
  - layout.py: Pane geometry
  - ui.py: Rich rendering of the frame
  - backend.py / runner.py: Runtime CLI invocation and JSON-lines parsing

Usage:
  python -m dockpeek

Dependencies:
  - textual / rich
  - PyYAML (optional config file)
  - Python 3.9+
"""

from pathlib import Path

__version__ = "0.1.0"


def get_log_path() -> str:
    """
    Get the log file path.

    Returns ~/.local/share/dockpeek/logs/dockpeek.log, creating the directory
    if needed, or /tmp/dockpeek.log when it cannot be created.
    """
    log_dir = Path.home() / '.local' / 'share' / 'dockpeek' / 'logs'

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        return str(log_dir / 'dockpeek.log')
    except (PermissionError, OSError):
        return '/tmp/dockpeek.log'
