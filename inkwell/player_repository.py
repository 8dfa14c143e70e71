"""Player repository

Owns the per-player run states of one engine and the lock that serializes
access to each of them. Different players never share a lock.

Locks live in a weak map: a player with an active run keeps its lock alive,
and so does every caller currently holding or waiting on it. Once none of
those remain the lock is dropped, so stray or retired ids cost nothing.
"""

from __future__ import annotations

import logging
import threading
import weakref
from typing import TYPE_CHECKING, Hashable, Iterator

from .exceptions import PlayerNotFoundError

if TYPE_CHECKING:
    from .player import PlayerState

logger = logging.getLogger(__name__)


class PlayerRepository:
    """Maps player ids to their run state."""

    def __init__(self) -> None:
        self._states: dict[Hashable, PlayerState] = {}
        self._locks: weakref.WeakValueDictionary[Hashable, threading.RLock] = weakref.WeakValueDictionary()
        # strong references for players with an active run
        self._held: dict[Hashable, threading.RLock] = {}
        self._guard = threading.Lock()

    # ==================== Locking ====================

    def lock(self, player_id: Hashable) -> threading.RLock:
        """Return the player's lock, creating it when nobody holds one.

        Re-entrant: card effects call back into the engine while the play
        operation already holds the lock.
        """
        with self._guard:
            lock = self._locks.get(player_id)
            if lock is None:
                lock = threading.RLock()
                self._locks[player_id] = lock
            return lock

    def lock_count(self) -> int:
        """Number of player locks still alive."""
        with self._guard:
            return len(self._locks)

    # ==================== Queries ====================

    def get(self, player_id: Hashable) -> PlayerState | None:
        """Get a player's state, or None."""
        return self._states.get(player_id)

    def require(self, player_id: Hashable) -> PlayerState:
        """Get a player's state.

        Raises:
            PlayerNotFoundError: the player has no active run
        """
        state = self._states.get(player_id)
        if state is None:
            raise PlayerNotFoundError(player_id=player_id)
        return state

    def player_ids(self) -> list[Hashable]:
        """Ids of every player with an active run."""
        return list(self._states)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[PlayerState]:
        return iter(list(self._states.values()))

    # ==================== Lifecycle ====================

    def put(self, state: PlayerState) -> None:
        """Store a state, replacing any previous run of the same player."""
        if state.player_id in self._states:
            logger.debug("Replacing run state of player %s", state.player_id)
        self._states[state.player_id] = state
        self._held[state.player_id] = self.lock(state.player_id)

    def remove(self, player_id: Hashable) -> PlayerState | None:
        """Drop a player's state and release the repository's hold on its lock."""
        self._held.pop(player_id, None)
        return self._states.pop(player_id, None)

    def clear(self) -> None:
        """Drop every state."""
        self._states.clear()
        self._held.clear()
