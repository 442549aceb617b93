"""Unit tests for the EventBus."""

import pytest

from docnav.domain.events import AutocompleteClosed, CloseReason, EventBus, SelectionChanged


class TestEventBus:
    """Test publish/subscribe behaviour."""

    def test_publish_reaches_subscribers_of_exact_type(self):
        """Handlers only see events of the type they subscribed to."""
        bus = EventBus()
        closed: list[AutocompleteClosed] = []
        selected: list[SelectionChanged] = []
        bus.subscribe(AutocompleteClosed, closed.append)
        bus.subscribe(SelectionChanged, selected.append)

        event = AutocompleteClosed(reason=CloseReason.ESCAPE, release_focus=True)
        bus.publish(event)

        assert closed == [event]
        assert selected == []

    def test_duplicate_subscription_is_ignored(self):
        bus = EventBus()
        calls = []

        def handler(event):
            calls.append(event)

        bus.subscribe(AutocompleteClosed, handler)
        bus.subscribe(AutocompleteClosed, handler)
        bus.publish(AutocompleteClosed(reason=CloseReason.OUTSIDE))

        assert len(calls) == 1

    def test_async_handler_rejected(self):
        bus = EventBus()

        async def handler(event):
            pass

        with pytest.raises(TypeError):
            bus.subscribe(AutocompleteClosed, handler)

    def test_failing_handler_does_not_stop_others(self):
        bus = EventBus()
        calls = []

        def broken(event):
            raise RuntimeError("boom")

        bus.subscribe(AutocompleteClosed, broken)
        bus.subscribe(AutocompleteClosed, calls.append)
        bus.publish(AutocompleteClosed(reason=CloseReason.CLEARED))

        assert len(calls) == 1

    def test_unsubscribe_and_clear(self):
        bus = EventBus()
        calls = []

        def handler(event):
            calls.append(event)

        bus.subscribe(AutocompleteClosed, handler)
        assert bus.has_subscribers(AutocompleteClosed)

        bus.unsubscribe(AutocompleteClosed, handler)
        bus.unsubscribe(AutocompleteClosed, handler)
        assert not bus.has_subscribers(AutocompleteClosed)

        bus.subscribe(AutocompleteClosed, handler)
        bus.clear()
        bus.publish(AutocompleteClosed(reason=CloseReason.ESCAPE))
        assert calls == []
