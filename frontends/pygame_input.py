"""
Pygame Input Bridge
Turns pygame's input queue into bus events.

    bridge = PygameInputBridge(session.bus)
    while running:
        bridge.pump()   # publishes KeyEvent, MouseButtonEvent, ...
"""
from typing import Any, Optional

import pygame

from frontends.input_events import KeyEvent, MouseButtonEvent, MouseMotionEvent, QuitEvent
from lightevents.core.bus import EventBus
from lightevents.core.events import Event


class PygameInputBridge:
    """Publishes one bus event per relevant pygame event."""

    def __init__(self, bus: EventBus, sender: Any = None):
        self.bus = bus
        self.sender = sender

    def translate(self, pg_event: "pygame.event.Event") -> Optional[Event]:
        """Map a pygame event to a bus event, or None if it is not input."""
        if pg_event.type == pygame.QUIT:
            return QuitEvent(sender=self.sender)
        if pg_event.type in (pygame.KEYDOWN, pygame.KEYUP):
            return KeyEvent(sender=self.sender, key=pg_event.key,
                            pressed=pg_event.type == pygame.KEYDOWN)
        if pg_event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            return MouseButtonEvent(sender=self.sender, button=pg_event.button,
                                    pos=tuple(pg_event.pos),
                                    pressed=pg_event.type == pygame.MOUSEBUTTONDOWN)
        if pg_event.type == pygame.MOUSEMOTION:
            return MouseMotionEvent(sender=self.sender, pos=tuple(pg_event.pos))
        return None

    def pump(self) -> int:
        """Drain pygame's queue. Returns the number of events published."""
        published = 0
        for pg_event in pygame.event.get():
            event = self.translate(pg_event)
            if event is not None:
                self.bus.publish(event)
                published += 1
        return published
