# -*- coding: utf-8 -*-
"""
Inkwell - terminal demo runner

Plays a few scripted turns for one player through the public engine API and
renders the hand, resources and run log with rich.

Usage:
    python main.py --turns 3 --seed 7
    python main.py --locale zh_CN --verbose
    python main.py --log-json
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from rich.box import ROUNDED
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from i18n import card_type_name, resource_name, set_locale
from i18n import t as _t
from inkwell import CardType, GameEvent, HandCard, PlayerState, Resource, RunConfig, RunEngine, get_config
from logging_config import setup_logging

logger = logging.getLogger(__name__)

DEMO_PLAYER = "writer"
MAX_PLAYS_PER_TURN = 50


def build_hand_table(hand: tuple[HandCard, ...], player_id: str) -> Table:
    """Render a hand snapshot as a table"""
    table = Table(title=_t("ui.hand_title", player=player_id), box=ROUNDED)
    table.add_column(_t("ui.col_index"), justify="right", style="cyan", no_wrap=True)
    table.add_column(_t("ui.col_name"), style="bold")
    table.add_column(_t("ui.col_type"))
    table.add_column(_t("ui.col_tags"), style="magenta")
    table.add_column(_t("ui.col_cost"), justify="right")
    table.add_column(_t("ui.col_cohesion"), style="green")

    if not hand:
        table.add_row("", _t("ui.empty_hand"), "", "", "", "")
        return table

    for card in hand:
        style = "red" if card.card_type == CardType.FLAW else None
        table.add_row(
            str(card.instance_id),
            card.name,
            card_type_name(card.card_type.value),
            ", ".join(card.tags),
            str(card.inspiration_cost),
            card.cohesion_tag or "",
            style=style,
        )
    return table


def build_resource_table(state: PlayerState) -> Table:
    """Render a player's resource counters"""
    table = Table(title=_t("ui.resources_title"), box=ROUNDED, show_edge=False)
    table.add_column(_t("ui.col_resource"))
    table.add_column(_t("ui.col_amount"), justify="right", style="yellow")
    for resource in Resource:
        table.add_row(resource_name(resource.value), str(state.resource(resource)))
    return table


def build_log_panel(events: List[GameEvent]) -> Panel:
    """Render the most recent engine events"""
    lines = [event.message for event in events if event.message]
    return Panel("\n".join(lines), title=_t("ui.log_title"), box=ROUNDED)


def _best_affordable(engine: RunEngine, inspiration: int) -> Optional[str]:
    """Most expensive non-flaw card the player can pay for"""
    candidates = [
        d for d in engine.registry.definitions.values()
        if d.card_type != CardType.FLAW and 0 < d.inspiration_cost <= inspiration
    ]
    if not candidates:
        return None
    return max(candidates, key=lambda d: d.inspiration_cost).id


def play_turn(engine: RunEngine, player_id: str, console: Console) -> None:
    """Draw a hand, play it left to right, then buy one card"""
    engine.reset_turn_resources(player_id)
    engine.draw(player_id, engine.config.opening_hand_size)

    snapshot = engine.get_hand_snapshot(player_id)
    console.print(build_hand_table(snapshot.hand, player_id))

    # Always play the first card: instance ids shift after every play
    for _ in range(MAX_PLAYS_PER_TURN):
        if len(engine.get_hand_snapshot(player_id)) == 0:
            break
        result = engine.play_card(player_id, 1)
        if not result.ok:
            logger.warning("Demo stopped playing: %s", result.message)
            break

    view = engine.get_player_view(player_id)
    target = _best_affordable(engine, view.resource(Resource.INSPIRATION))
    if target is not None:
        engine.acquire_card(player_id, target)
        view = engine.get_player_view(player_id)

    console.print(build_resource_table(view))


def run_demo(turns: int, console: Console, seed: Optional[int] = None) -> RunEngine:
    """Run the scripted demo and return the engine for inspection"""
    config = RunConfig(seed=seed) if seed is not None else RunConfig()
    engine = RunEngine(config=config)
    engine.initialize_player(DEMO_PLAYER)

    for _ in range(turns):
        play_turn(engine, DEMO_PLAYER, console)
        console.print(build_log_panel(engine.event_bus.get_history(12)))

    return engine


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Inkwell demo runner")
    ap.add_argument("--turns", type=int, default=3, help="Turns to play")
    ap.add_argument("--seed", type=int, default=None, help="Shuffle seed")
    ap.add_argument("--locale", default=None, choices=["en_US", "zh_CN"])
    ap.add_argument("--verbose", action="store_true", help="Echo engine logs to the console")
    ap.add_argument("--log-json", action="store_true", help="Write the log file as JSON lines")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = get_config()
    setup_logging(level=config.log_level, enable_console=args.verbose, console_level="INFO",
                  json_format=args.log_json)
    set_locale(args.locale or config.locale)

    run_demo(args.turns, Console(highlight=False), seed=args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
