"""Card effect module

Each card's play effect and cohesion bonus is a CardEffect; the card table
declares them as steps that data_driven compiles.
"""

from .base import CardEffect, EffectContext
from .basic import (
    DrawCards,
    EffectSequence,
    GainCard,
    GainPerHandCard,
    GainResource,
    LoseResource,
)
from .data_driven import compile_steps

__all__ = [
    'CardEffect', 'EffectContext',
    'GainResource', 'LoseResource', 'GainPerHandCard', 'DrawCards', 'GainCard',
    'EffectSequence', 'compile_steps',
]
