"""
LightEvents Handles - Observer records and the handles that reference them

An ObserverRecord is one subscription and is owned only by the EventBus
index. An ObserverHandle refers to its record weakly, so a handle can
never keep a record (or its observer) alive.
"""
import itertools
import weakref
from dataclasses import dataclass, field
from types import MethodType
from typing import Any, Callable, Optional, Tuple

from lightevents.core.events import Event

Key = Tuple[type, Optional[str]]  # (event type, channel)

_serials = itertools.count(1)


class ObserverRecord:
    """One subscription: channel, weak observer reference and callback."""

    __slots__ = ("serial", "channel", "observer", "_callback", "removed", "__weakref__")

    def __init__(self, channel: Optional[str], observer: Any, callback: Callable[[Event], None]):
        self.serial = next(_serials)
        self.channel = channel
        self.observer = weakref.ref(observer)
        # A bound method of the observer would hold the observer strongly
        if isinstance(callback, MethodType) and callback.__self__ is observer:
            self._callback = weakref.WeakMethod(callback)
        else:
            self._callback = callback
        self.removed = False

    @property
    def alive(self) -> bool:
        return self.observer() is not None

    @property
    def callback(self) -> Optional[Callable[[Event], None]]:
        """The callable to invoke, or None if it died with the observer."""
        if isinstance(self._callback, weakref.WeakMethod):
            return self._callback()
        return self._callback

    def __repr__(self) -> str:
        state = "removed" if self.removed else ("alive" if self.alive else "dead")
        return f"<ObserverRecord #{self.serial} channel={self.channel!r} {state}>"


@dataclass(frozen=True)
class ObserverHandle:
    """Revocable reference to exactly one ObserverRecord.

    Handles are cheap to copy. Validity is checked on every call through
    the EventBus and is never cached here.
    """
    key: Optional[Key] = None
    serial: int = 0  # 0 never names a record
    record_ref: Optional[weakref.ref] = field(default=None, compare=False, repr=False)

    def record(self) -> Optional[ObserverRecord]:
        """Dereference the record, or None if it is gone or was removed."""
        if self.record_ref is None:
            return None
        record = self.record_ref()
        if record is None or record.removed:
            return None
        return record

    @classmethod
    def for_record(cls, key: Key, record: ObserverRecord) -> "ObserverHandle":
        return cls(key=key, serial=record.serial, record_ref=weakref.ref(record))


# Returned by every failed subscription
INVALID_HANDLE = ObserverHandle()
