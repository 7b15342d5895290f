"""
LightEvents Events - Event base and basic payload events

Every published message is an instance of an Event subclass. Dispatch
matches the *exact* runtime type of the event: a subscription to
IntegerEvent never sees a subclass of IntegerEvent, and hierarchies of
event types are purely organizational.
"""
import inspect
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Tuple, TypeVar

from lightevents.config import DEFAULT_CHANNEL

T = TypeVar("T")

Vector = Tuple[float, float, float]


# === Event Base ===

@dataclass(eq=False)
class Event:
    """Base class for all events.

    Subclass it with the fields relevant for your game; fields without
    defaults are fine since channel and sender are keyword-only:

        @dataclass(eq=False)
        class DoorOpenedEvent(Event):
            door_id: int

        DoorOpenedEvent(7, channel="doors")

    Events compare by identity; two separately created events are never equal.
    """
    abstract = True  # Not a dataclass field (no annotation)

    channel: Optional[str] = field(default=DEFAULT_CHANNEL, kw_only=True)  # Channel it is sent on
    sender: Any = field(default=None, kw_only=True)  # Object that sent it


def is_concrete_event_type(event_type: Any) -> bool:
    """True if event_type may be used as a subscription key."""
    if not inspect.isclass(event_type) or not issubclass(event_type, Event):
        return False
    if event_type.__dict__.get("abstract", False):
        return False
    return not inspect.isabstract(event_type)


# === Value Events ===
# One generic envelope, closed set of concrete payload kinds


@dataclass(eq=False)
class ValueEvent(Event, Generic[T]):
    """Event carrying a single typed value."""
    abstract = True

    value: Any = None


@dataclass(eq=False)
class BooleanEvent(ValueEvent[bool]):
    value: bool = False


@dataclass(eq=False)
class ByteEvent(ValueEvent[int]):
    """Unsigned 8-bit value, wraps like a byte."""
    value: int = 0

    def __post_init__(self):
        self.value = int(self.value) & 0xFF


@dataclass(eq=False)
class IntegerEvent(ValueEvent[int]):
    value: int = 0


@dataclass(eq=False)
class FloatEvent(ValueEvent[float]):
    value: float = 0.0


@dataclass(eq=False)
class NameEvent(ValueEvent[Optional[str]]):
    """Identifier-like value; None means 'no name'."""
    value: Optional[str] = None


@dataclass(eq=False)
class StringEvent(ValueEvent[str]):
    value: str = ""


@dataclass(eq=False)
class TextEvent(ValueEvent[str]):
    """Display text. Distinct key from StringEvent."""
    value: str = ""


@dataclass(eq=False)
class VectorEvent(ValueEvent[Vector]):
    value: Vector = (0.0, 0.0, 0.0)


@dataclass(eq=False)
class RotatorEvent(ValueEvent[Vector]):
    value: Vector = (0.0, 0.0, 0.0)  # (pitch, yaw, roll) in degrees


@dataclass
class Transform:
    """Location, rotation and scale of an object."""
    location: Vector = (0.0, 0.0, 0.0)
    rotation: Vector = (0.0, 0.0, 0.0)
    scale: Vector = (1.0, 1.0, 1.0)


@dataclass(eq=False)
class TransformEvent(ValueEvent[Transform]):
    value: Transform = field(default_factory=Transform)


@dataclass(eq=False)
class ObjectEvent(ValueEvent[Any]):
    value: Any = None


def create(event_type: type, value: Any, sender: Any = None,
           channel: Optional[str] = DEFAULT_CHANNEL) -> Optional[ValueEvent]:
    """Build a value event in one call.

    Returns None if event_type is not a concrete ValueEvent subclass.
    """
    if not is_concrete_event_type(event_type) or not issubclass(event_type, ValueEvent):
        return None
    return event_type(channel=channel, sender=sender, value=value)
