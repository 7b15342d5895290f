"""
LightEvents Session - owns one EventBus per game session

There is no global bus. Whatever needs to publish or subscribe gets the
session's bus passed in:

    with Session() as session:
        hud = Hud(session.bus)
        door = Door(session.bus)
"""
import logging
from typing import Callable

from lightevents.core.bus import EventBus

logger = logging.getLogger(__name__)


class Session:
    """Scope that constructs a bus and tears it down on close()."""

    def __init__(self, bus_factory: Callable[[], EventBus] = EventBus):
        self.bus = bus_factory()
        self.closed = False

    def close(self) -> None:
        """Drop every subscription. Safe to call more than once."""
        if self.closed:
            return
        logger.debug("Closing session, dropping %d record(s)", self.bus.count())
        self.bus.remove_all()
        self.closed = True

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
