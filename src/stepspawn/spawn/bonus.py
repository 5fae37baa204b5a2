# src/stepspawn/spawn/bonus.py
# Bonus zones: short celebratory stretches opened on a fixed cadence.

import logging

from ..config import DEFAULT_RULES, SpawnRules
from ..rng import Mulberry32
from .state import GenerationState

logger = logging.getLogger(__name__)


def bonus_check_due(state: GenerationState, index: int, rules: SpawnRules = DEFAULT_RULES) -> bool:
    return (
        state.bonus_tiles_left <= 0
        and index > rules.bonus_after_index
        and index % rules.bonus_interval == 0
    )


def tick_bonus(state: GenerationState, index: int, rng: Mulberry32, rules: SpawnRules = DEFAULT_RULES) -> bool:
    """
    Maybe open a zone on `index`, then consume one tile of it.
    Returns whether `index` is inside a bonus zone.
    """
    if bonus_check_due(state, index, rules) and rng.bool(rules.bonus_chance):
        state.bonus_tiles_left = rng.int(rules.bonus_min_tiles, rules.bonus_max_tiles)
        logger.debug("bonus zone opened at %s for %s tiles", index, state.bonus_tiles_left)
    in_bonus = state.bonus_tiles_left > 0
    if in_bonus:
        state.bonus_tiles_left -= 1
    return in_bonus
