# Shared fixtures: headless Qt platform, recording collaborator hosts and a
# seeded theme store backed by in-memory storage.

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from theme_engine.design.style_scope import InMemoryStyleScope  # noqa: E402
from theme_engine.services.event_bus import EventBus  # noqa: E402
from theme_engine.services.theme_storage import MemoryStorage  # noqa: E402
from theme_engine.services.theme_store import ThemeStore  # noqa: E402


class RecordingEditor:
    def __init__(self, fail: bool = False):
        self.theme = None
        self.fail = fail

    def set_theme(self, theme_id):
        if self.fail:
            raise RuntimeError("editor disposed")
        self.theme = theme_id


class RecordingEditorHost:
    """Mimics the embedded editor's theming API."""

    def __init__(self, editors=None):
        self.defined = {}
        self.active = None
        self.editors = list(editors or [])

    def define_theme(self, theme_id, definition):
        self.defined[theme_id] = definition

    def set_theme(self, theme_id):
        if theme_id not in self.defined:
            raise KeyError(theme_id)
        self.active = theme_id

    def open_editors(self):
        return list(self.editors)


class RecordingBackgroundHost:
    def __init__(self):
        self.shown = []

    def show_background(self, reference):
        self.shown.append(reference)


@pytest.fixture(scope="session")
def qt_app():
    from PyQt6.QtWidgets import QApplication

    return QApplication.instance() or QApplication(sys.argv[:1])


@pytest.fixture
def scope():
    return InMemoryStyleScope()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def editor_host():
    return RecordingEditorHost(editors=[RecordingEditor(), RecordingEditor()])


@pytest.fixture
def background_host():
    return RecordingBackgroundHost()


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def store(scope, storage, editor_host, background_host, bus):
    return ThemeStore.create_default(
        scope=scope,
        storage=storage,
        editor_host=editor_host,
        background_host=background_host,
        event_bus=bus,
    )
