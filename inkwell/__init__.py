# -*- coding: utf-8 -*-
"""
Inkwell card engine
Card registry, per-player run state, effects, events and the run engine of
a single-player deck-building game about writing a story.
"""

from .card import CardDefinition, CardId, CardType, CohesionRule, HandCard, Resource
from .card_registry import CardRegistry, create_default_registry, get_default_registry, load_card_table
from .config import RunConfig, get_config, reset_config
from .engine import RunEngine
from .events import EventBus, EventType, GameEvent
from .exceptions import (
    CardNotFoundError, ConfigurationError, DataLoadError, GameError,
    InsufficientResourcesError, InvalidIndexError, PlayerNotFoundError,
)
from .player import PlayerState
from .player_repository import PlayerRepository
from .results import ActionResult, ActionStatus, DrawResult, PlayResult, SnapshotResult

__all__ = [
    # Cards
    'CardDefinition', 'CardId', 'CardType', 'CohesionRule', 'HandCard', 'Resource',
    'CardRegistry', 'create_default_registry', 'get_default_registry', 'load_card_table',
    # Config
    'RunConfig', 'get_config', 'reset_config',
    # Engine
    'RunEngine', 'PlayerState', 'PlayerRepository',
    # Events
    'EventBus', 'EventType', 'GameEvent',
    # Errors and results
    'GameError', 'PlayerNotFoundError', 'InvalidIndexError', 'CardNotFoundError',
    'InsufficientResourcesError', 'ConfigurationError', 'DataLoadError',
    'ActionResult', 'ActionStatus', 'DrawResult', 'PlayResult', 'SnapshotResult',
]

__version__ = '1.0.0'
