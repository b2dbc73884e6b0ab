import json

import pytest

from dockpeek.backend import RuntimeBackend
from dockpeek.runner import CommandError
from dockpeek.state import Dashboard


class FakeRunner:
    """Stands in for the runtime CLI: maps an argument tuple to output."""

    def __init__(self, outputs=None, errors=None):
        self.outputs = dict(outputs or {})
        self.errors = dict(errors or {})
        self.calls = []

    def run(self, args, merge_stderr=False):
        key = tuple(args)
        self.calls.append(key)
        if key in self.errors:
            raise CommandError(["docker", *args], self.errors[key], returncode=1)
        return self.outputs.get(key, "")


def json_lines(*objects):
    return "\n".join(json.dumps(o) for o in objects) + "\n"


CONTAINERS = json_lines(
    {"ID": "c1", "Names": "web", "Image": "nginx:latest", "Status": "Up 2 hours", "State": "running"},
    {"ID": "c2", "Names": "db", "Image": "postgres:16", "Status": "Exited (0)", "State": "exited"},
)

IMAGES = json_lines(
    {"ID": "i1", "Repository": "nginx", "Tag": "latest", "Size": "187MB"},
    {"ID": "i2", "Repository": "postgres", "Tag": "16", "Size": "431MB"},
    {"ID": "i3", "Repository": "alpine", "Tag": "3.20", "Size": "7.8MB"},
)


@pytest.fixture
def runner():
    return FakeRunner({
        ("ps", "--format", "json"): CONTAINERS,
        ("images", "--format", "json"): IMAGES,
        ("logs", "c1"): "listening on :80\nGET / 200\n",
        ("logs", "c2"): "",
        ("inspect", "i1"): '[{"Id": "sha256:i1"}]\n',
    })


@pytest.fixture
def backend(runner):
    return RuntimeBackend(runner)


@pytest.fixture
def dashboard(backend):
    dash = Dashboard(backend, size=(120, 40))
    dash.load()
    return dash
