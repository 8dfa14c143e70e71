# -*- coding: utf-8 -*-
"""
Run engine module
Owns every active player's run state and implements the deck cycle, card
play (with cohesion), acquisition and turn resets on top of the card
registry.

Every operation reports through a result record and an event; run errors
never escape to the caller.
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, Optional, Type, TypeVar, Hashable
import logging
import random
import threading

from i18n import t as _t

from .card import HandCard, Resource
from .card_registry import CardRegistry, get_default_registry
from .config import RunConfig, get_config
from .effects.base import EffectContext
from .events import EventBus, EventType, GameEvent
from .exceptions import ConfigurationError, GameError, InvalidIndexError, raise_if_unaffordable
from .player import PlayerState
from .player_repository import PlayerRepository
from .results import ActionResult, DrawResult, PlayResult, SnapshotResult

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=ActionResult)


class RunEngine:
    """
    Run engine

    One engine serves any number of players. Operations on the same player
    are serialized by that player's lock; different players do not contend.
    Events raised by an operation are published once the lock is released,
    so subscribers may call back into the engine for any player.
    """

    def __init__(self,
                 registry: Optional[CardRegistry] = None,
                 config: Optional[RunConfig] = None,
                 rng: Optional[random.Random] = None,
                 event_bus: Optional[EventBus] = None,
                 repository: Optional[PlayerRepository] = None):
        """
        Initialize the engine

        Args:
            registry: card registry, defaults to the bundled card table
            config: run configuration, defaults to the process-wide one
            rng: shuffle source, defaults to one seeded from ``config.seed``
            event_bus: where events are published
            repository: per-player state store
        """
        self.config: RunConfig = config or get_config()
        self.registry: CardRegistry = registry or get_default_registry()
        self.rng: random.Random = rng or random.Random(self.config.seed)
        self.event_bus: EventBus = event_bus or EventBus(max_history=self.config.event_history)
        self.players: PlayerRepository = repository or PlayerRepository()
        # per-thread queue of events raised by the running operation
        self._local = threading.local()

        errors = self.config.validate()
        if errors:
            raise ConfigurationError("; ".join(errors))

    # ==================== Run lifecycle ====================

    def initialize_player(self, player_id: Hashable) -> ActionResult:
        """
        Start a fresh run for a player, replacing any previous one

        The deck is seeded with the configured starter composition and
        shuffled; resources are zero except Grit.
        """
        with self._operation(player_id):
            try:
                starter = self.config.starter_cards()
                for card_id in set(starter):
                    self.registry.lookup(card_id)
            except GameError as e:
                return self._reject(ActionResult, "initialize_player", player_id, e)

            state = PlayerState(player_id=player_id, deck=starter)
            state.resources[Resource.GRIT] = self.config.starting_grit
            self.players.put(state)
            state.shuffle(self.rng)

            message = _t("engine.player_initialized", player=player_id, count=len(state.deck))
            self._emit(EventType.PLAYER_INITIALIZED, player_id, message, deck_size=len(state.deck))
            return ActionResult(message=message, details={"deck_size": len(state.deck)})

    def end_run(self, player_id: Hashable) -> ActionResult:
        """Discard a player's run state (nothing is persisted)"""
        with self._operation(player_id):
            try:
                self.players.require(player_id)
            except GameError as e:
                return self._reject(ActionResult, "end_run", player_id, e)

            self.players.remove(player_id)
            message = _t("engine.player_removed", player=player_id)
            self._emit(EventType.PLAYER_REMOVED, player_id, message)
            return ActionResult(message=message)

    def has_player(self, player_id: Hashable) -> bool:
        """Check whether a player has an active run"""
        return player_id in self.players

    def get_player_view(self, player_id: Hashable) -> Optional[PlayerState]:
        """
        Copy of a player's state for inspection, None without an active run

        Changing the copy does not affect the run.
        """
        with self._operation(player_id):
            state = self.players.get(player_id)
            return state.copy() if state is not None else None

    # ==================== Deck cycle ====================

    def shuffle(self, player_id: Hashable) -> ActionResult:
        """Move the discard pile into the deck and shuffle the deck"""
        with self._operation(player_id):
            try:
                state = self.players.require(player_id)
            except GameError as e:
                return self._reject(ActionResult, "shuffle", player_id, e)

            recycled = state.shuffle(self.rng)
            message = _t("engine.shuffled", player=player_id, count=recycled)
            self._emit(EventType.DECK_SHUFFLED, player_id, message,
                       recycled=recycled, deck_size=len(state.deck))
            return ActionResult(message=message,
                                details={"recycled": recycled, "deck_size": len(state.deck)})

    def draw(self, player_id: Hashable, amount: int) -> DrawResult:
        """
        Draw cards from the front of the deck into the hand

        An empty deck is refilled from the discard pile; when both are empty
        the remaining draws are forfeited (not an error).
        """
        with self._operation(player_id):
            try:
                state = self.players.require(player_id)
            except GameError as e:
                return self._reject(DrawResult, "draw", player_id, e, requested=amount)

            return self.draw_for(state, amount)

    def draw_for(self, state: PlayerState, amount: int) -> DrawResult:
        """
        Draw for a state the caller already holds the lock of

        Card effects draw through here.
        """
        player_id = state.player_id
        if amount < 0:
            message = _t("engine.negative_draw", player=player_id, amount=amount)
            logger.warning("%s", message)
            return DrawResult(message=message, requested=amount)

        result = state.draw(amount, self.rng)
        for _ in range(result.reshuffles):
            self._emit(EventType.DECK_SHUFFLED, player_id,
                       _t("engine.reshuffled", player=player_id),
                       reason="draw")

        result.message = _t("engine.drawn", player=player_id, count=result.count)
        self._emit(EventType.CARDS_DRAWN, player_id, result.message,
                   cards=list(result.drawn), requested=amount)

        if result.exhausted:
            missing = amount - result.count
            result.message = _t("engine.draw_exhausted", player=player_id, missing=missing)
            self._emit(EventType.DRAW_EXHAUSTED, player_id, result.message, missing=missing)

        return result

    # ==================== Cards ====================

    def play_card(self, player_id: Hashable, instance_id: int) -> PlayResult:
        """
        Play the card at a 1-based hand position

        Resolution order: cohesion bonus (when the previous card carried the
        required tag), the card's own effect, remember the card's tags, then
        discard it.

        A card whose id is missing from the registry has already left the
        hand when the lookup fails; it is consumed, not returned.
        """
        with self._operation(player_id):
            card_id: Optional[str] = None
            try:
                state = self.players.require(player_id)
                if not state.has_hand_index(instance_id):
                    raise InvalidIndexError(index=instance_id, hand_size=len(state.hand))
                card_id = state.take_from_hand(instance_id)
                definition = self.registry.lookup(card_id)

                ctx = EffectContext(engine=self, state=state, card=definition)
                cohesion = definition.cohesion
                triggered = cohesion is not None and cohesion.matches(state.last_played_tags)
                if triggered:
                    self._emit(EventType.COHESION_TRIGGERED, player_id,
                               _t("engine.cohesion", card=definition.name, tag=cohesion.required_tag),
                               card_id=card_id, required_tag=cohesion.required_tag)
                    cohesion.bonus.apply(ctx)

                definition.on_play.apply(ctx)
            except GameError as e:
                return self._reject(PlayResult, "play_card", player_id, e, card_id=card_id)

            state.last_played_tags = definition.tags
            state.discard.append(card_id)

            message = _t("engine.card_played", player=player_id, card=definition.name)
            self._emit(EventType.CARD_PLAYED, player_id, message,
                       card_id=card_id, instance_id=instance_id,
                       cohesion=triggered, tags=list(definition.tags))
            return PlayResult(
                message=message,
                details={"drawn": list(ctx.drawn)},
                card_id=card_id,
                cohesion_triggered=triggered,
                gained=list(ctx.gained),
            )

    def acquire_card(self, player_id: Hashable, card_id: str) -> ActionResult:
        """
        Buy a card with Inspiration; it enters the discard pile

        Unknown cards and unaffordable purchases leave the state untouched.
        """
        with self._operation(player_id):
            try:
                state = self.players.require(player_id)
                definition = self.registry.lookup(card_id)
                raise_if_unaffordable(
                    Resource.INSPIRATION.value,
                    definition.inspiration_cost,
                    state.resource(Resource.INSPIRATION),
                )
            except GameError as e:
                return self._reject(ActionResult, "acquire_card", player_id, e)

            cost = definition.inspiration_cost
            state.lose(Resource.INSPIRATION, cost)
            state.discard.append(card_id)

            message = _t("engine.card_acquired", player=player_id, card=definition.name, cost=cost)
            self._emit(EventType.CARD_ACQUIRED, player_id, message, card_id=card_id, cost=cost)
            return ActionResult(message=message, details={"card_id": card_id, "cost": cost})

    def gain_card_for(self, state: PlayerState, card_id: str) -> None:
        """
        Add a card to the discard pile at no cost, for card effects

        Raises:
            CardNotFoundError: the card is not registered
        """
        definition = self.registry.lookup(card_id)
        state.discard.append(card_id)
        self._emit(EventType.CARD_GAINED, state.player_id,
                   _t("engine.card_gained", player=state.player_id, card=definition.name),
                   card_id=card_id)

    # ==================== Turn ====================

    def reset_turn_resources(self, player_id: Hashable) -> ActionResult:
        """
        Zero Inspiration and Ink and break the cohesion chain

        Grit and Hype carry over.
        """
        with self._operation(player_id):
            try:
                state = self.players.require(player_id)
            except GameError as e:
                return self._reject(ActionResult, "reset_turn_resources", player_id, e)

            state.reset_turn()
            message = _t("engine.turn_reset", player=player_id)
            self._emit(EventType.TURN_RESET, player_id, message)
            return ActionResult(message=message)

    # ==================== Views ====================

    def get_hand_snapshot(self, player_id: Hashable) -> SnapshotResult:
        """
        Display copies of the hand, in order, with 1-based instance ids

        The snapshot goes stale as soon as the hand changes; fetch it again
        after every play or draw.
        """
        with self._operation(player_id):
            try:
                state = self.players.require(player_id)
                hand = tuple(
                    HandCard.project(self.registry.lookup(card_id), position)
                    for position, card_id in enumerate(state.hand, start=1)
                )
            except GameError as e:
                return self._reject(SnapshotResult, "get_hand_snapshot", player_id, e)

            logger.debug("Hand snapshot for %s: %d card(s)", player_id, len(hand))
            return SnapshotResult(hand=hand)

    # ==================== Internal ====================

    @contextmanager
    def _operation(self, player_id: Hashable) -> Iterator[None]:
        """Hold the player's lock, then publish the events queued under it"""
        if getattr(self._local, "outbox", None) is not None:
            # nested on this thread: the outermost operation publishes
            with self.players.lock(player_id):
                yield
            return

        outbox: list[GameEvent] = []
        self._local.outbox = outbox
        try:
            with self.players.lock(player_id):
                yield
        finally:
            self._local.outbox = None
            for event in outbox:
                self.event_bus.publish(event)

    def _publish(self, event_type: EventType, **data) -> None:
        """Queue an event for the running operation, or publish it now"""
        event = GameEvent(event_type=event_type, data=data)
        outbox = getattr(self._local, "outbox", None)
        if outbox is None:
            self.event_bus.publish(event)
        else:
            outbox.append(event)

    def _emit(self, event_type: EventType, player_id: Hashable, message: str, **data) -> None:
        """Log an engine event and publish it"""
        logger.info("%s", message)
        self._publish(event_type, player_id=player_id, message=message, **data)

    def _reject(self, result_cls: Type[R], operation: str, player_id: Hashable,
                error: GameError, **fields) -> R:
        """Report a failed operation as a warning, an event and a result"""
        logger.warning("%s rejected for player %s: %s", operation, player_id, error)
        self._publish(
            EventType.ACTION_REJECTED,
            player_id=player_id,
            operation=operation,
            status=error.status.value,
            message=error.message,
            details=dict(error.details),
        )
        return result_cls.from_error(error, **fields)
