# -*- coding: utf-8 -*-
"""Concurrent access tests: per-player locks keep every run consistent."""

from __future__ import annotations

import random
import threading

from inkwell.config import RunConfig
from inkwell.engine import RunEngine
from inkwell.events import EventType

THREADS = 8
ROUNDS = 40


def _run_threads(target, count=THREADS):
    threads = [threading.Thread(target=target, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)
    assert not any(thread.is_alive() for thread in threads)


class TestConcurrentPlayers:

    def test_many_players_in_parallel(self, registry):
        engine = RunEngine(registry=registry, config=RunConfig(seed=1, event_history=10_000))
        gained = []
        engine.event_bus.subscribe(EventType.CARD_GAINED, gained.append)
        errors = []

        def worker(index):
            player_id = f"p{index}"
            try:
                engine.initialize_player(player_id)
                for _ in range(ROUNDS):
                    engine.reset_turn_resources(player_id)
                    engine.draw(player_id, 3)
                    while engine.get_hand_snapshot(player_id).hand:
                        assert engine.play_card(player_id, 1).ok
            except AssertionError as e:
                errors.append(e)

        _run_threads(worker)

        assert errors == []
        for index in range(THREADS):
            player_id = f"p{index}"
            state = engine.get_player_view(player_id)
            player_gains = [e for e in gained if e.player_id == player_id]
            assert state.total_cards == 10 + len(player_gains)

    def test_one_player_many_callers(self, registry):
        engine = RunEngine(registry=registry, config=RunConfig(seed=2), rng=random.Random(2))
        engine.initialize_player("shared")
        engine.draw("shared", 10)
        played = []
        lock = threading.Lock()

        def worker(index):
            for _ in range(3):
                result = engine.play_card("shared", 1)
                if result.ok:
                    with lock:
                        played.append(result.card_id)

        _run_threads(worker, count=5)

        state = engine.get_player_view("shared")
        assert len(played) == 10
        assert state.hand == []
        # every played card landed in the discard pile exactly once
        assert sorted(c for c in state.discard if c != "self_doubt") == sorted(played)


class TestSubscriberCallbacks:

    def test_handler_runs_after_lock_release(self, registry):
        engine = RunEngine(registry=registry, config=RunConfig(seed=3), rng=random.Random(3))
        engine.initialize_player("a")
        engine.draw("a", 1)
        blocked = []

        def on_played(event):
            # another thread needs the same player's lock
            worker = threading.Thread(target=engine.draw, args=("a", 1))
            worker.start()
            worker.join(timeout=5)
            blocked.append(worker.is_alive())

        engine.event_bus.subscribe(EventType.CARD_PLAYED, on_played)
        assert engine.play_card("a", 1).ok
        assert blocked == [False]
        assert len(engine.get_player_view("a").hand) == 1

    def test_cross_player_callbacks(self, registry):
        engine = RunEngine(registry=registry, config=RunConfig(seed=4), rng=random.Random(4))
        for player_id in ("a", "b"):
            engine.initialize_player(player_id)
        partner = {"a": "b", "b": "a"}

        def on_drawn(event):
            engine.get_hand_snapshot(partner[event.player_id])

        engine.event_bus.subscribe(EventType.CARDS_DRAWN, on_drawn)

        def worker(index):
            player_id = "ab"[index]
            for _ in range(ROUNDS):
                engine.draw(player_id, 1)
                engine.shuffle(player_id)

        _run_threads(worker, count=2)
