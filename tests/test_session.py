"""Test the Session scope."""
from lightevents.core.bus import EventBus
from lightevents.core.hooks import LoggingEventBus
from lightevents.core.session import Session
from sample_classes import Listener, PingEvent


class TestSession:
    """Tests for Session."""

    def test_session_owns_one_bus(self, session):
        assert isinstance(session.bus, EventBus)
        assert session.bus is session.bus
        assert not session.closed

    def test_sessions_do_not_share_buses(self):
        assert Session().bus is not Session().bus

    def test_bus_factory(self):
        session = Session(LoggingEventBus)
        assert isinstance(session.bus, LoggingEventBus)

    def test_close_drops_subscriptions(self, session, listener):
        handle = session.bus.subscribe(PingEvent, listener, listener.on_ping)
        session.close()
        assert session.closed
        assert session.bus.count() == 0
        assert not EventBus.is_handle_valid(handle)

        session.close()
        assert session.closed

    def test_context_manager(self):
        listener = Listener()
        with Session() as session:
            session.bus.subscribe(PingEvent, listener, listener.on_ping)
            session.bus.publish(PingEvent())
        assert listener.counter[0] == 1
        assert session.closed
        assert session.bus.count() == 0
