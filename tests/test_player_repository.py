# -*- coding: utf-8 -*-
"""PlayerRepository tests."""

from __future__ import annotations

import pytest

from inkwell.exceptions import PlayerNotFoundError
from inkwell.player import PlayerState
from inkwell.player_repository import PlayerRepository


@pytest.fixture
def repo() -> PlayerRepository:
    return PlayerRepository()


class TestPlayerRepository:

    def test_put_and_get(self, repo):
        state = PlayerState(player_id="p1")
        repo.put(state)
        assert repo.get("p1") is state
        assert "p1" in repo
        assert len(repo) == 1

    def test_get_missing(self, repo):
        assert repo.get("nobody") is None

    def test_require_missing(self, repo):
        with pytest.raises(PlayerNotFoundError) as exc_info:
            repo.require("nobody")
        assert exc_info.value.player_id == "nobody"

    def test_put_replaces(self, repo):
        repo.put(PlayerState(player_id="p1", deck=["a"]))
        replacement = PlayerState(player_id="p1")
        repo.put(replacement)
        assert repo.require("p1") is replacement
        assert len(repo) == 1

    def test_remove(self, repo):
        state = PlayerState(player_id="p1")
        repo.put(state)
        assert repo.remove("p1") is state
        assert repo.remove("p1") is None
        assert "p1" not in repo

    def test_iteration_and_ids(self, repo):
        repo.put(PlayerState(player_id="a"))
        repo.put(PlayerState(player_id=2))
        assert repo.player_ids() == ["a", 2]
        assert [s.player_id for s in repo] == ["a", 2]

    def test_clear(self, repo):
        repo.put(PlayerState(player_id="a"))
        repo.clear()
        assert len(repo) == 0


class TestLocks:

    def test_same_player_same_lock(self, repo):
        assert repo.lock("p1") is repo.lock("p1")

    def test_players_do_not_share_locks(self, repo):
        assert repo.lock("p1") is not repo.lock("p2")

    def test_lock_is_reentrant(self, repo):
        lock = repo.lock("p1")
        with lock:
            with repo.lock("p1"):
                pass

    def test_lock_survives_remove(self, repo):
        lock = repo.lock("p1")
        repo.put(PlayerState(player_id="p1"))
        repo.remove("p1")
        assert repo.lock("p1") is lock

    def test_lock_dropped_when_unused(self, repo):
        repo.lock("ghost")
        assert repo.lock_count() == 0

    def test_active_run_keeps_its_lock(self, repo):
        repo.put(PlayerState(player_id="p1"))
        lock = repo.lock("p1")
        del lock
        assert repo.lock_count() == 1
        repo.remove("p1")
        assert repo.lock_count() == 0

    def test_clear_releases_locks(self, repo):
        repo.put(PlayerState(player_id="a"))
        repo.put(PlayerState(player_id="b"))
        repo.clear()
        assert repo.lock_count() == 0
