# src/stepspawn/spawn/hazards.py
# Probabilistic hazard selection: chance ramp, streak cap, then a weighted
# pick damped against repeats and same-family follow-ups.

from typing import List, Tuple

from ..config import DEFAULT_RULES, SpawnRules
from ..rng import Mulberry32
from ..tiers import (
    CHAOS, EARLY, LATE, MID,
    clamp, hazard_bias, hazard_tier_weight, is_gentle, lerp, progression, tier_for_index,
)
from ..tiles import HAZARD_POOL, NONE, hazard_unlocked, same_family

BONUS_DAMPING = 0.46
RELIEF_DAMPING = 0.28

# (same hazard, same family) multipliers
CHAOS_REPEAT = (0.52, 0.82)
CALM_REPEAT = (0.22, 0.54)


def allowed_consecutive(tier: str, relief_window: bool) -> int:
    if relief_window or is_gentle(tier):
        return 1
    if tier == CHAOS:
        return 3
    return 2  # mid, late


def hazard_chance(index: int, in_bonus: bool = False, relief_window: bool = False) -> float:
    tier = tier_for_index(index)
    chance = 0.0
    if tier == EARLY:
        chance = clamp(0.12 + (index - 34) * 0.0013, 0.12, 0.24)
    elif tier == MID:
        chance = clamp(0.28 + (index - 130) * 0.00065, 0.28, 0.4)
    elif tier == LATE:
        chance = clamp(0.4 + (index - 300) * 0.0005, 0.4, 0.52)
    elif tier == CHAOS:
        chance = clamp(0.52 + (index - 520) * 0.0003, 0.52, 0.62)
    if in_bonus:
        chance *= BONUS_DAMPING
    if relief_window:
        chance *= RELIEF_DAMPING
    return chance


def hazard_candidates(index: int, previous_hazard: str) -> List[Tuple[str, float]]:
    tier = tier_for_index(index)
    same, family = CHAOS_REPEAT if tier == CHAOS else CALM_REPEAT
    ramp = lerp(0.94, 1.08, progression(index))
    out: List[Tuple[str, float]] = []
    for h in HAZARD_POOL:
        if not hazard_unlocked(h, index):
            continue
        w = hazard_tier_weight(h, tier)
        if w <= 0:
            continue
        w *= hazard_bias(h)
        if previous_hazard != NONE and previous_hazard == h:
            w *= same
        elif same_family(h, previous_hazard):
            w *= family
        w *= ramp
        out.append((h, w))
    return out


def pick_hazard(
    index: int,
    rng: Mulberry32,
    hazard_streak: int,
    in_bonus: bool,
    previous_hazard: str,
    relief_window: bool = False,
    rules: SpawnRules = DEFAULT_RULES,
) -> str:
    if index < rules.hazard_runway:
        return NONE
    tier = tier_for_index(index)
    if hazard_streak >= allowed_consecutive(tier, relief_window):
        return NONE
    chance = hazard_chance(index, in_bonus, relief_window)
    # No draw is spent when the chance is zero (intro tier).
    if chance <= 0 or not rng.bool(chance):
        return NONE
    weighted = hazard_candidates(index, previous_hazard)
    if not weighted:
        return NONE
    return rng.weighted(weighted)
