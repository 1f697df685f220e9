from theme_engine.services.event_bus import EventBus, ThemeEvent


def test_subscribe_publish_and_payload():
    bus = EventBus()
    received = []
    bus.subscribe(ThemeEvent.THEME_CHANGED, lambda e: received.append(e.payload))
    evt = bus.publish(ThemeEvent.THEME_CHANGED, {"theme_id": "nord"})
    assert evt.name == "theme_changed"
    assert received == [{"theme_id": "nord"}]


def test_string_and_enum_keys_are_equivalent():
    bus = EventBus()
    hits = []
    bus.subscribe("theme_deleted", lambda e: hits.append(1))
    bus.publish(ThemeEvent.THEME_DELETED)
    assert hits == [1]
    assert bus.subscriber_count(ThemeEvent.THEME_DELETED) == 1


def test_once_handler_fires_once():
    bus = EventBus()
    hits = []
    bus.subscribe(ThemeEvent.THEME_IMPORTED, lambda e: hits.append(1), once=True)
    bus.publish(ThemeEvent.THEME_IMPORTED)
    bus.publish(ThemeEvent.THEME_IMPORTED)
    assert hits == [1]
    assert bus.subscriber_count(ThemeEvent.THEME_IMPORTED) == 0


def test_failing_handler_is_isolated():
    bus = EventBus()
    hits = []

    def boom(_):
        raise ValueError("boom")

    bus.subscribe(ThemeEvent.THEME_CHANGED, boom)
    bus.subscribe(ThemeEvent.THEME_CHANGED, lambda e: hits.append(1))
    bus.publish(ThemeEvent.THEME_CHANGED)
    assert hits == [1]
    assert len(bus.errors) == 1
    assert isinstance(bus.errors[0][1], ValueError)


def test_unsubscribe_and_cancel():
    bus = EventBus()
    hits = []
    sub = bus.subscribe(ThemeEvent.THEME_REGISTERED, lambda e: hits.append("a"))
    other = bus.subscribe(ThemeEvent.THEME_REGISTERED, lambda e: hits.append("b"))
    other.cancel()
    bus.publish(ThemeEvent.THEME_REGISTERED)
    bus.unsubscribe(sub)
    bus.publish(ThemeEvent.THEME_REGISTERED)
    assert hits == ["a"]
    assert "theme_registered" in bus.list_events()
