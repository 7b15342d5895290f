"""
LightEvents EventBus - typed, channel-aware, weakly-observing dispatcher

Observers subscribe to one exact event type on one channel:

    handle = bus.subscribe(DoorOpenedEvent, hud, hud.on_door_opened)
    bus.publish(DoorOpenedEvent(channel=None, sender=door))

The bus never keeps an observer alive. Records of collected observers are
skipped during publish and stay counted until cleanup() or an explicit
removal drops them.

Dispatch works on a snapshot of the matching records:
- records removed during a pass are skipped for the rest of that pass
- records added during a pass are not delivered to in that pass
- nested publish calls run a fresh, independent lookup

The bus is not thread-safe.
"""
import logging
from typing import Any, Callable, Dict, Optional, Set

from lightevents.config import DEFAULT_CHANNEL
from lightevents.core.events import Event, is_concrete_event_type
from lightevents.core.handles import INVALID_HANDLE, Key, ObserverHandle, ObserverRecord
from lightevents.core.resolve import resolve

logger = logging.getLogger(__name__)


class EventBus:
    """Central event dispatcher.

    The four hooks (before_send, before_receive, after_receive, after_send)
    are extension points for subclasses; the defaults let everything
    through.
    """

    def __init__(self):
        # (event type, channel) -> {record serial: record}, insertion ordered
        self._records: Dict[Key, Dict[int, ObserverRecord]] = {}

    # === Subscription ===

    def subscribe(self, event_type: type, observer: Any, callback: Callable[[Event], None],
                  channel: Optional[str] = DEFAULT_CHANNEL) -> ObserverHandle:
        """Register observer for events of exactly event_type on channel.

        Args:
            event_type: Concrete Event subclass to listen for
            observer: Object the subscription belongs to (held weakly)
            callback: Called with the event; a bound method of observer
                is held weakly as well
            channel: Channel to listen on, DEFAULT_CHANNEL if omitted

        Returns:
            A handle to the new record, or INVALID_HANDLE if the
            arguments were rejected (nothing is registered then).
        """
        if observer is None or not callable(callback):
            logger.warning("Rejected subscription to %r: missing observer or callback", event_type)
            return INVALID_HANDLE
        if not is_concrete_event_type(event_type):
            logger.warning("Rejected subscription: %r is not a concrete event type", event_type)
            return INVALID_HANDLE

        try:
            record = ObserverRecord(channel, observer, callback)
        except TypeError:
            logger.warning("Rejected subscription: %s cannot be weakly referenced",
                           type(observer).__name__)
            return INVALID_HANDLE

        key = (event_type, channel)
        self._records.setdefault(key, {})[record.serial] = record
        logger.debug("Subscribed %r to %s on channel %r", observer, event_type.__name__, channel)
        return ObserverHandle.for_record(key, record)

    def subscribe_by_name(self, event_type: type, observer: Any, name: str,
                          channel: Optional[str] = DEFAULT_CHANNEL) -> ObserverHandle:
        """Like subscribe(), with the callback looked up on observer by name.

        The method must be marked with @event_handler, take exactly one
        parameter that accepts event_type, and return nothing.
        """
        if observer is None or not is_concrete_event_type(event_type):
            logger.warning("Rejected subscription of %r to %r", name, event_type)
            return INVALID_HANDLE

        callback = resolve(observer, name, event_type)
        if callback is None:
            logger.warning("Rejected subscription: %s has no usable handler %r",
                           type(observer).__name__, name)
            return INVALID_HANDLE
        return self.subscribe(event_type, observer, callback, channel)

    # === Publishing ===

    def publish(self, event: Optional[Event]) -> None:
        """Deliver event to every live observer of its exact type and channel."""
        if not isinstance(event, Event):
            if event is not None:
                logger.warning("Ignored publish of non-event %r", event)
            return
        if not self.before_send(event):
            return

        bucket = self._records.get((type(event), event.channel))
        snapshot = list(bucket.values()) if bucket else []
        for record in snapshot:
            if record.removed:
                continue
            observer = record.observer()
            callback = record.callback
            if observer is None or callback is None:
                continue
            if self.before_receive(event, observer):
                callback(event)
                self.after_receive(event, observer)

        self.after_send(event)

    # === Hooks ===

    def before_send(self, event: Event) -> bool:
        """Return False to drop event before any observer sees it."""
        return True

    def before_receive(self, event: Event, observer: Any) -> bool:
        """Return False to skip delivering event to this observer."""
        return True

    def after_receive(self, event: Event, observer: Any) -> None:
        pass

    def after_send(self, event: Event) -> None:
        pass

    # === Removal ===

    def _discard(self, key: Key, record: ObserverRecord) -> None:
        bucket = self._records[key]
        del bucket[record.serial]
        record.removed = True
        if not bucket:
            del self._records[key]

    def remove_by_handle(self, handle: ObserverHandle) -> int:
        """Remove the record behind handle. Returns 1, or 0 if already gone."""
        if not self.contains_valid_handle(handle):
            return 0
        self._discard(handle.key, handle.record())
        logger.debug("Removed record #%d", handle.serial)
        return 1

    def _remove_where(self, predicate: Callable[[ObserverRecord], bool]) -> int:
        doomed = [(key, record)
                  for key, bucket in self._records.items()
                  for record in bucket.values()
                  if predicate(record)]
        for key, record in doomed:
            self._discard(key, record)
        return len(doomed)

    def remove_by_observer(self, observer: Any) -> int:
        """Remove every record of observer, across all types and channels."""
        if observer is None:
            return 0
        count = self._remove_where(lambda record: record.observer() is observer)
        if count:
            logger.debug("Removed %d record(s) of %r", count, observer)
        return count

    def remove_all(self) -> None:
        for bucket in self._records.values():
            for record in bucket.values():
                record.removed = True
        self._records.clear()
        logger.debug("Removed all records")

    def cleanup(self) -> int:
        """Drop records whose observer has been garbage-collected."""
        count = self._remove_where(lambda record: not record.alive)
        if count:
            logger.debug("Cleaned up %d dead record(s)", count)
        return count

    # === Introspection ===

    def count(self) -> int:
        """Number of records, including dead ones not yet cleaned up."""
        return sum(len(bucket) for bucket in self._records.values())

    def channels(self) -> Set[Optional[str]]:
        return {channel for _, channel in self._records}

    def contains_observer(self, observer: Any) -> bool:
        if observer is None:
            return False
        return any(record.observer() is observer
                   for bucket in self._records.values()
                   for record in bucket.values())

    @staticmethod
    def is_handle_valid(handle: ObserverHandle) -> bool:
        """True while the handle's record exists and has not been removed."""
        return handle.record() is not None

    def contains_valid_handle(self, handle: ObserverHandle) -> bool:
        """True if handle is valid and its record lives in this bus."""
        record = handle.record()
        if record is None:
            return False
        return self._records.get(handle.key, {}).get(record.serial) is record

    @staticmethod
    def observer_of(handle: ObserverHandle) -> Any:
        record = handle.record()
        return record.observer() if record is not None else None

    @staticmethod
    def event_type_of(handle: ObserverHandle) -> Optional[type]:
        return handle.key[0] if EventBus.is_handle_valid(handle) else None

    @staticmethod
    def channel_of(handle: ObserverHandle) -> Optional[str]:
        return handle.key[1] if EventBus.is_handle_valid(handle) else None
