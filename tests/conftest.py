import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5.QtWidgets import QApplication

from core.config import SortConfig


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def config():
    return SortConfig()


class RecordingView:
    """Stands in for SortView; keeps every frame it is asked to draw."""

    def __init__(self):
        self.frames = []

    def update_visualization(self, snapshot, request):
        self.frames.append((snapshot, request))


@pytest.fixture
def recording_view():
    return RecordingView()
