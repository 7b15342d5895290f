"""
Input Events
Published by input bridges on the keyboard, mouse and system channels.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from lightevents.config import CHANNEL_KEYBOARD, CHANNEL_MOUSE, CHANNEL_SYSTEM
from lightevents.core.events import Event


@dataclass(eq=False)
class KeyEvent(Event):
    """Fired when a key goes down or up."""
    channel: Optional[str] = field(default=CHANNEL_KEYBOARD, kw_only=True)
    key: int = 0
    pressed: bool = True


@dataclass(eq=False)
class MouseButtonEvent(Event):
    """Fired when a mouse button goes down or up."""
    channel: Optional[str] = field(default=CHANNEL_MOUSE, kw_only=True)
    button: int = 1        # 1=left, 2=middle, 3=right
    pos: Tuple[int, int] = (0, 0)
    pressed: bool = True


@dataclass(eq=False)
class MouseMotionEvent(Event):
    """Fired when the mouse moves."""
    channel: Optional[str] = field(default=CHANNEL_MOUSE, kw_only=True)
    pos: Tuple[int, int] = (0, 0)


@dataclass(eq=False)
class QuitEvent(Event):
    """Fired when the window is closed."""
    channel: Optional[str] = field(default=CHANNEL_SYSTEM, kw_only=True)
