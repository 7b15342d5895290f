"""Pytest fixtures for LightEvents tests."""
import os

import pytest
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

# Let pygame open windows on machines without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def project_root():
    """Return the project root path."""
    return PROJECT_ROOT


@pytest.fixture
def bus():
    """Create an empty EventBus."""
    from lightevents.core.bus import EventBus
    return EventBus()


@pytest.fixture
def listener():
    """Create an observer that counts what it receives."""
    from sample_classes import Listener
    return Listener()


@pytest.fixture
def session():
    """Create a Session and close it after the test."""
    from lightevents.core.session import Session
    s = Session()
    yield s
    s.close()
