import os
import sys
import pytest

# ── HEADLESS QT SETUP ───────────────────────────────────────────────────────
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QApplication
_app = QApplication.instance() or QApplication(sys.argv)


# ── DUMMY COLLABORATORS ─────────────────────────────────────────────────────
class FixedFactorStrategy:
    """Scales every style by one factor, whatever the category."""
    def __init__(self, factor=1.0):
        self.factor = factor
        self.calls = []

    def scale(self, base_size, text_style, category):
        self.calls.append((base_size, text_style, category))
        return base_size * self.factor


class RecordingFactory:
    """Records (spec, size) and returns a bare QFont at that size."""
    def __init__(self):
        self.calls = []

    def make_font(self, spec, size):
        self.calls.append((spec, size))
        qf = QFont()
        qf.setPointSizeF(max(size, 0.01))
        return qf


class RecordingSink:
    def __init__(self):
        self.messages = []

    def warn(self, message):
        self.messages.append(message)


@pytest.fixture
def unit_strategy():
    return FixedFactorStrategy(1.0)


@pytest.fixture
def factory():
    return RecordingFactory()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def qapp():
    return _app
