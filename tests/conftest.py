# src/ and tests/ are put on sys.path by the pytest config in pyproject.toml
import pytest

from core.observable import Listener
from core.scheduler import Scheduler
from model import ModelLocator

STAGE_WIDTH = 400
STAGE_HEIGHT = 300


class RecordingSurface:
    """Surface that keeps every command instead of drawing."""

    def __init__(self, width=STAGE_WIDTH, height=STAGE_HEIGHT):
        self.width = width
        self.height = height
        self.commands = []
        self.presented = 0

    def clear(self):
        self.commands.append(('clear',))

    def fill_rect(self, x, y, w, h, color):
        self.commands.append(('fill_rect', x, y, w, h, color))

    def present(self):
        self.presented += 1

    def last_frame(self):
        """Commands issued since the most recent clear()."""
        for i in range(len(self.commands) - 1, -1, -1):
            if self.commands[i] == ('clear',):
                return self.commands[i + 1:]
        return list(self.commands)


class RecordingListener(Listener):
    def __init__(self, name='listener', log=None):
        self.name = name
        self.calls = []
        self.log = log

    def on_update(self, source, event):
        self.calls.append((source, event))
        if self.log is not None:
            self.log.append(self.name)


@pytest.fixture()
def locator():
    loc = ModelLocator()
    loc.stage_model.width = STAGE_WIDTH
    loc.stage_model.height = STAGE_HEIGHT
    return loc


@pytest.fixture()
def scheduler():
    return Scheduler()


@pytest.fixture()
def surface():
    return RecordingSurface()


@pytest.fixture()
def listener():
    return RecordingListener()
