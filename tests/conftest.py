"""
Pytest configuration and fixtures for the Rotary test suite.

This file provides common fixtures used across all test modules.
"""

import os

import pytest

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from rotary.core.digit_state import DigitState


@pytest.fixture
def digit_state():
    """A default 40x60 digit state, value 0, input disabled."""
    return DigitState(width=40, height=60)
