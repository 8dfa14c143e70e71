"""English translation table."""

STRINGS: dict[str, str] = {
    # ── errors ──
    "exc.player_not_found": "No active run for player {player}",
    "exc.invalid_index": "Hand index {index} is out of range (hand holds {size} card(s))",
    "exc.card_not_found": "Unknown card: {card}",
    "exc.insufficient_resources": "Not enough {resource}: need {required}, have {available}",
    "exc.configuration_error": "Invalid configuration",
    "exc.data_load_error": "Failed to load card data",

    # ── engine ──
    "engine.player_initialized": "{player} starts a new run with {count} card(s)",
    "engine.player_removed": "{player} ends the run",
    "engine.shuffled": "{player} shuffles {count} card(s) into the deck",
    "engine.reshuffled": "{player} runs out of cards and reshuffles the discard pile",
    "engine.drawn": "{player} draws {count} card(s)",
    "engine.draw_exhausted": "{player} has nothing left to draw ({missing} draw(s) forfeited)",
    "engine.negative_draw": "{player} asked to draw {amount} card(s); nothing drawn",
    "engine.card_played": "{player} plays [{card}]",
    "engine.cohesion": "[{card}] coheres with [{tag}]",
    "engine.card_acquired": "{player} acquires [{card}] for {cost} Inspiration",
    "engine.card_gained": "{player} gains [{card}]",
    "engine.turn_reset": "{player} resets per-turn resources",

    # ── resources ──
    "resource.inspiration": "Inspiration",
    "resource.ink": "Ink",
    "resource.grit": "Grit",
    "resource.hype": "Hype",

    # ── card types ──
    "card_type.skill": "Skill",
    "card_type.flaw": "Flaw",
    "card_type.idea": "Idea",

    # ── cards ──
    "card.spark": "Spark",
    "card.rough_draft": "Rough Draft",
    "card.self_doubt": "Self-Doubt",
    "card.writers_block": "Writer's Block",
    "card.character_sketch": "Character Sketch",
    "card.dialogue": "Dialogue",
    "card.plot_twist": "Plot Twist",
    "card.ensemble_cast": "Ensemble Cast",
    "card.world_building": "World Building",
    "card.revision": "Revision",
    "card.deadline": "Deadline",

    # ── demo runner ──
    "ui.hand_title": "Hand of {player}",
    "ui.resources_title": "Resources",
    "ui.log_title": "Run log",
    "ui.empty_hand": "(empty hand)",
    "ui.col_index": "#",
    "ui.col_name": "Card",
    "ui.col_type": "Type",
    "ui.col_tags": "Tags",
    "ui.col_cost": "Cost",
    "ui.col_cohesion": "Cohesion",
    "ui.col_resource": "Resource",
    "ui.col_amount": "Amount",
}
