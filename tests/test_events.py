# -*- coding: utf-8 -*-
"""EventBus tests."""

from __future__ import annotations

import logging

from conftest import set_zones
from inkwell.events import EventBus, EventType, GameEvent


class TestEventBus:

    def test_subscribe_and_publish(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.CARD_PLAYED, received.append)

        event = bus.emit(EventType.CARD_PLAYED, player_id="p1", card_id="spark")
        bus.emit(EventType.TURN_RESET, player_id="p1")

        assert received == [event]
        assert event.player_id == "p1"
        assert event.card_id == "spark"

    def test_priority_order(self):
        bus = EventBus()
        order = []
        bus.subscribe(EventType.TURN_RESET, lambda e: order.append("low"), priority=1)
        bus.subscribe(EventType.TURN_RESET, lambda e: order.append("high"), priority=10)
        bus.emit(EventType.TURN_RESET)
        assert order == ["high", "low"]

    def test_global_handlers_run_first(self):
        bus = EventBus()
        order = []
        bus.subscribe(EventType.TURN_RESET, lambda e: order.append("typed"), priority=100)
        bus.subscribe_all(lambda e: order.append("global"))
        bus.emit(EventType.TURN_RESET)
        assert order == ["global", "typed"]

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.CARD_PLAYED, received.append)
        bus.unsubscribe(EventType.CARD_PLAYED, received.append)
        bus.emit(EventType.CARD_PLAYED)
        assert received == []

    def test_unsubscribe_all(self):
        bus = EventBus()
        received = []
        bus.subscribe_all(received.append)
        bus.subscribe(EventType.CARD_PLAYED, received.append)
        bus.unsubscribe_all(received.append)
        bus.emit(EventType.CARD_PLAYED)
        assert received == []

    def test_failing_handler_is_logged_and_isolated(self, caplog):
        bus = EventBus()
        received = []

        def broken(event):
            raise RuntimeError("boom")

        bus.subscribe(EventType.CARD_PLAYED, broken, priority=5)
        bus.subscribe(EventType.CARD_PLAYED, received.append)

        with caplog.at_level(logging.ERROR, logger="inkwell.events"):
            bus.emit(EventType.CARD_PLAYED)

        assert len(received) == 1
        assert "CARD_PLAYED" in caplog.text

    def test_clear_keeps_history(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.CARD_PLAYED, received.append)
        bus.emit(EventType.CARD_PLAYED)
        bus.clear()
        bus.emit(EventType.CARD_PLAYED)
        assert len(received) == 1
        assert len(bus.get_history()) == 2


class TestHistory:

    def test_bounded(self):
        bus = EventBus(max_history=3)
        for i in range(5):
            bus.emit(EventType.CARDS_DRAWN, n=i)
        history = bus.get_history(10)
        assert [e.data["n"] for e in history] == [2, 3, 4]

    def test_most_recent(self):
        bus = EventBus()
        for i in range(5):
            bus.emit(EventType.CARDS_DRAWN, n=i)
        assert [e.data["n"] for e in bus.get_history(2)] == [3, 4]
        assert bus.get_history(0) == []
        assert bus.get_history(-1) == []

    def test_history_of(self):
        bus = EventBus()
        bus.emit(EventType.CARDS_DRAWN)
        bus.emit(EventType.TURN_RESET)
        bus.emit(EventType.CARDS_DRAWN)
        assert len(bus.history_of(EventType.CARDS_DRAWN)) == 2
        assert bus.history_of(EventType.CARD_GAINED) == []


class TestGameEvent:

    def test_defaults(self):
        event = GameEvent(EventType.TURN_RESET)
        assert event.player_id is None
        assert event.card_id is None
        assert event.message == ""
        assert event.status is None


class TestEngineEvents:

    def test_play_sequence(self, engine, player):
        set_zones(engine, player, deck=["spark"], hand=["character_sketch", "dialogue"])
        seen = []
        engine.event_bus.subscribe_all(lambda e: seen.append(e.event_type))

        engine.play_card(player, 1)
        engine.play_card(player, 1)

        assert seen == [
            EventType.CARD_PLAYED,
            EventType.COHESION_TRIGGERED,
            EventType.CARDS_DRAWN,
            EventType.CARD_PLAYED,
        ]

    def test_messages_are_localized_text(self, engine, player):
        set_zones(engine, player, hand=["spark"])
        engine.play_card(player, 1)
        event = engine.event_bus.history_of(EventType.CARD_PLAYED)[-1]
        assert event.message == "p1 plays [Spark]"

    def test_rejection_carries_details(self, engine, player):
        engine.play_card(player, 4)
        event = engine.event_bus.history_of(EventType.ACTION_REJECTED)[-1]
        assert event.status == "invalid_index"
        assert event.data["details"] == {"hand_size": 0, "index": 4}
