import os
import sys

# Render Qt widgets without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# Ensure the project root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest
from PySide6.QtWidgets import QApplication

from config import get_config


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def config_env(monkeypatch):
    """Set N64LOGIN_* variables, reload, and restore the defaults afterwards."""
    config = get_config()

    def apply(**variables):
        for name, value in variables.items():
            monkeypatch.setenv(name, value)
        config.reload()
        return config

    yield apply
    monkeypatch.undo()
    config.reload()
