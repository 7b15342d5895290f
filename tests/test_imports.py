"""Test that all modules can be imported."""
import pytest


def test_core_imports():
    """Core modules should import cleanly."""
    from lightevents.core.events import Event, ValueEvent, IntegerEvent, create
    from lightevents.core.handles import ObserverHandle, ObserverRecord, INVALID_HANDLE
    from lightevents.core.resolve import event_handler, resolve
    from lightevents.core.bus import EventBus
    from lightevents.core.hooks import LoggingEventBus, RecordingEventBus, FilteringEventBus
    from lightevents.core.session import Session


def test_package_exports():
    """Top-level package should re-export the main names."""
    import lightevents
    assert lightevents.DEFAULT_CHANNEL is None
    assert lightevents.EventBus is not None
    assert lightevents.Session is not None


def test_frontends_import():
    """Input bridge should import (pygame may not be available)."""
    from frontends.input_events import KeyEvent, QuitEvent
    try:
        from frontends.pygame_input import PygameInputBridge
    except ImportError:
        pytest.skip("pygame not installed")


def test_main_import():
    """Demo module should import without pygame."""
    from lightevents.main import Demo, main
