"""Test name-based handler resolution."""
from lightevents.core.bus import EventBus
from lightevents.core.events import IntegerEvent
from lightevents.core.resolve import event_handler, handler_table, resolve
from sample_classes import DerivedPingEvent, Listener, OtherEvent, PingEvent


class Renamed:
    @event_handler(name="ping")
    def handle_ping(self, event: PingEvent) -> None:
        self.got = event


class Child(Listener):
    @event_handler
    def on_ping(self, event: PingEvent) -> None:
        self.counter[0] += 10


class UnmarkedOverride(Listener):
    def on_ping(self, event: PingEvent) -> None:
        self.overridden = True


class Disabled(Listener):
    on_ping = None


class TestResolve:
    """Tests for resolve()."""

    def test_resolves_marked_method(self, listener):
        callback = resolve(listener, "on_ping", PingEvent)
        assert callback is not None
        callback(PingEvent())
        assert listener.counter[0] == 1

    def test_unknown_name(self, listener):
        assert resolve(listener, "ThisFunctionDoesNotExist") is None

    def test_unmarked_method_is_invisible(self, listener):
        assert resolve(listener, "not_marked", PingEvent) is None

    def test_wrong_arity(self, listener):
        assert resolve(listener, "two_args", PingEvent) is None

    def test_return_value_not_allowed(self, listener):
        assert resolve(listener, "returns_value", PingEvent) is None

    def test_parameter_must_accept_event_type(self, listener):
        assert resolve(listener, "on_derived", PingEvent) is None
        assert resolve(listener, "on_ping", OtherEvent) is None
        assert resolve(listener, "on_ping", DerivedPingEvent) is not None

    def test_base_annotation_accepts_anything(self, listener):
        assert resolve(listener, "on_any", IntegerEvent) is not None

    def test_unannotated_parameter(self, listener):
        assert resolve(listener, "untyped", IntegerEvent) is not None

    def test_none_observer(self):
        assert resolve(None, "on_ping") is None

    def test_custom_name(self):
        observer = Renamed()
        assert resolve(observer, "handle_ping") is None
        assert resolve(observer, "ping", PingEvent) is not None

    def test_subclass_overrides_handler(self):
        child = Child()
        resolve(child, "on_ping", PingEvent)(PingEvent())
        assert child.counter[0] == 10
        assert handler_table(Child)["on_ping"] == "on_ping"


class TestSubscribeByName:
    """Tests for EventBus.subscribe_by_name()."""

    def test_subscribe_by_name(self, bus, listener):
        handle = bus.subscribe_by_name(PingEvent, listener, "on_ping", "ch")
        assert EventBus.is_handle_valid(handle)
        assert EventBus.channel_of(handle) == "ch"

        bus.publish(PingEvent(channel="ch"))
        assert listener.counter[0] == 1

    def test_unresolved_name_gives_invalid_handle(self, bus, listener):
        handle = bus.subscribe_by_name(PingEvent, listener, "ThisFunctionDoesNotExist")
        assert not EventBus.is_handle_valid(handle)
        assert not bus.contains_valid_handle(handle)
        assert bus.count() == 0

    def test_none_arguments(self, bus, listener):
        assert not EventBus.is_handle_valid(bus.subscribe_by_name(None, listener, "on_ping"))
        assert not EventBus.is_handle_valid(bus.subscribe_by_name(PingEvent, None, "on_ping"))
        assert bus.count() == 0

    def test_incompatible_handler(self, bus, listener):
        handle = bus.subscribe_by_name(OtherEvent, listener, "on_ping")
        assert not EventBus.is_handle_valid(handle)
        assert bus.count() == 0

    def test_unmarked_override_is_used(self, bus):
        observer = UnmarkedOverride()
        handle = bus.subscribe_by_name(PingEvent, observer, "on_ping")
        assert EventBus.is_handle_valid(handle)

        bus.publish(PingEvent())
        assert observer.overridden
        assert observer.counter == [0, 0, 0]

    def test_shadowed_handler_is_rejected(self, bus):
        observer = Disabled()
        assert resolve(observer, "on_ping", PingEvent) is None
        handle = bus.subscribe_by_name(PingEvent, observer, "on_ping")
        assert not EventBus.is_handle_valid(handle)
        assert bus.count() == 0
