"""
LightEvents Configuration
Contains channel names, demo settings, and logging setup.
"""
import logging
import os

# Channels
DEFAULT_CHANNEL = None  # Distinct from every named channel, including ""
CHANNEL_KEYBOARD = "keyboard"
CHANNEL_MOUSE = "mouse"
CHANNEL_SYSTEM = "system"

# Display (demo only)
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
FPS = 60

# Recording
RECORDING_LIMIT = 1000  # Oldest events are dropped beyond this

# Logging
LOG_LEVEL = os.environ.get("LIGHTEVENTS_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Install a root handler once. --verbose forces DEBUG."""
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("lightevents").setLevel(level)
