"""
LightEvents
Typed, in-process publish/subscribe for games.

Features:
- Exact-type matching (event type x channel)
- Observers held weakly, never kept alive by the bus
- Revocable per-subscription handles
- Send/receive hooks for logging, filtering and recording
"""
from lightevents.config import DEFAULT_CHANNEL
from lightevents.core import (
    Event,
    ValueEvent,
    EventBus,
    ObserverHandle,
    INVALID_HANDLE,
    Session,
    create,
    event_handler,
)
