"""LightEvents Core - Event bus"""
from .events import (
    Event,
    ValueEvent,
    BooleanEvent,
    ByteEvent,
    IntegerEvent,
    FloatEvent,
    NameEvent,
    StringEvent,
    TextEvent,
    VectorEvent,
    RotatorEvent,
    Transform,
    TransformEvent,
    ObjectEvent,
    create,
    is_concrete_event_type,
)
from .handles import ObserverHandle, ObserverRecord, INVALID_HANDLE
from .resolve import event_handler, resolve
from .bus import EventBus
from .hooks import LoggingEventBus, RecordingEventBus, FilteringEventBus, EventLogger
from .session import Session
