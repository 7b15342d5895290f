"""
LightEvents Hooks - Bus variants built on the hook extension points

None of these change how records are stored or matched; they only
override before_send / before_receive / after_receive / after_send.
"""
import logging
import weakref
from collections import deque
from typing import Any, List, Optional

from lightevents.config import DEFAULT_CHANNEL, RECORDING_LIMIT
from lightevents.core.bus import EventBus
from lightevents.core.events import Event

logger = logging.getLogger(__name__)


def _describe(event: Event) -> str:
    return f"{type(event).__name__}(channel={event.channel!r})"


class LoggingEventBus(EventBus):
    """Logs every send and every delivery."""

    def __init__(self, level: int = logging.INFO):
        super().__init__()
        self.level = level

    def before_send(self, event: Event) -> bool:
        logger.log(self.level, "Sending %s from %r", _describe(event), event.sender)
        return super().before_send(event)

    def after_receive(self, event: Event, observer: Any) -> None:
        logger.log(self.level, "Delivered %s to %r", _describe(event), observer)
        super().after_receive(event, observer)

    def after_send(self, event: Event) -> None:
        logger.log(self.level, "Finished sending %s", _describe(event))
        super().after_send(event)


class RecordingEventBus(EventBus):
    """Keeps sent events for debugging and replay.

    Unlike a plain EventBus this holds on to events after publish returns,
    but only while recording.
    """

    def __init__(self, limit: int = RECORDING_LIMIT):
        super().__init__()
        self._history = deque(maxlen=limit)
        self.recording = False

    @property
    def history(self) -> List[Event]:
        return list(self._history)

    def start_recording(self) -> None:
        """Start recording events for replay/debugging."""
        self.recording = True
        self._history.clear()

    def stop_recording(self) -> List[Event]:
        """Stop recording and return event history."""
        self.recording = False
        return list(self._history)

    def before_send(self, event: Event) -> bool:
        allowed = super().before_send(event)
        if allowed and self.recording:
            self._history.append(event)
        return allowed

    def replay(self, bus: Optional[EventBus] = None) -> int:
        """Publish the recorded events again, oldest first.

        Replaying into this bus does not record the events a second time.
        Returns the number of events replayed.
        """
        target = bus if bus is not None else self
        events = list(self._history)
        was_recording = self.recording
        if target is self:
            self.recording = False
        try:
            for event in events:
                target.publish(event)
        finally:
            self.recording = was_recording
        return len(events)


class FilteringEventBus(EventBus):
    """Mutes whole channels or single observers without unsubscribing them."""

    def __init__(self):
        super().__init__()
        self._muted = set()
        # Weak refs compared by identity; observers need not be hashable
        self._blocked: List[weakref.ref] = []

    def mute_channel(self, channel: Optional[str]) -> None:
        self._muted.add(channel)

    def unmute_channel(self, channel: Optional[str]) -> None:
        self._muted.discard(channel)

    def is_muted(self, channel: Optional[str]) -> bool:
        return channel in self._muted

    def is_blocked(self, observer: Any) -> bool:
        return any(ref() is observer for ref in self._blocked)

    def block_observer(self, observer: Any) -> None:
        self._blocked = [ref for ref in self._blocked if ref() is not None]
        if observer is not None and not self.is_blocked(observer):
            self._blocked.append(weakref.ref(observer))

    def unblock_observer(self, observer: Any) -> None:
        self._blocked = [ref for ref in self._blocked
                         if ref() is not None and ref() is not observer]

    def before_send(self, event: Event) -> bool:
        if event.channel in self._muted:
            logger.debug("Dropped %s: channel muted", _describe(event))
            return False
        return super().before_send(event)

    def before_receive(self, event: Event, observer: Any) -> bool:
        if self.is_blocked(observer):
            return False
        return super().before_receive(event, observer)


class EventLogger:
    """Observer that logs events of the given types."""

    def __init__(self, bus: EventBus, *event_types: type,
                 channel: Optional[str] = DEFAULT_CHANNEL, level: int = logging.INFO):
        self.level = level
        self.logs: List[str] = []
        self.handles = [bus.subscribe(event_type, self, self.on_event, channel)
                        for event_type in event_types]

    def on_event(self, event: Event) -> None:
        line = _describe(event)
        value = getattr(event, "value", None)
        if value is not None:
            line += f" value={value!r}"
        self.logs.append(line)
        logger.log(self.level, "[EVENT] %s", line)

    def recent(self, count: int = 10) -> List[str]:
        """Get most recent log entries."""
        return self.logs[-count:]
