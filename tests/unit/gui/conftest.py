"""
Fixtures for Qt widget tests.

The offscreen platform is selected in tests/conftest.py.
"""

import pytest


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by every GUI test."""
    QtWidgets = pytest.importorskip("PyQt6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def config():
    from rotary.gui.config.display_config import DisplayConfig

    return DisplayConfig()
