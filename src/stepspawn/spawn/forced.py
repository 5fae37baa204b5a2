# src/stepspawn/spawn/forced.py
"""
Forced-hazard fallback chain.

When the density window needs a hazard on this tile and normal selection
left it empty, strategies are tried in order until one yields a hazard:

  a) weighted draw over unlocked hazards compatible with the platform
  b) the same draw again
  c) first unlocked compatible hazard, in pool order
  d) first unlocked hazard, ignoring compatibility

Compatibility is enforced between (a) and (b): a hazard that does not fit
the platform is dropped to none, and forcing resumes at (b). Step (b) only
differs from (a) if (a) was skipped, but both stay so the PRNG draw count
matches the tuned sequences.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from ..rng import Mulberry32
from ..tiers import hazard_bias, hazard_tier_weight, lerp, progression, tier_for_index
from ..tiles import HAZARD_POOL, NONE, hazard_unlocked, same_family
from .compat import is_compatible

logger = logging.getLogger(__name__)

WEIGHT_FLOOR = 0.16
SAME_PENALTY = 0.42
FAMILY_PENALTY = 0.72


@dataclass(frozen=True)
class ForcedContext:
    index: int
    rng: Mulberry32
    previous_hazard: str
    platform: str


Strategy = Callable[[ForcedContext], str]


def forced_candidates(index: int, previous_hazard: str, platform: str) -> List[Tuple[str, float]]:
    tier = tier_for_index(index)
    ramp = lerp(0.96, 1.12, progression(index))
    out: List[Tuple[str, float]] = []
    for h in HAZARD_POOL:
        if not hazard_unlocked(h, index):
            continue
        if not is_compatible(platform, h, index):
            continue
        w = max(WEIGHT_FLOOR, hazard_tier_weight(h, tier))
        w *= hazard_bias(h)
        if previous_hazard != NONE and previous_hazard == h:
            w *= SAME_PENALTY
        elif same_family(h, previous_hazard):
            w *= FAMILY_PENALTY
        w *= ramp
        out.append((h, w))
    return out


def weighted_compatible(ctx: ForcedContext) -> str:
    weighted = forced_candidates(ctx.index, ctx.previous_hazard, ctx.platform)
    if not weighted:
        return NONE
    return ctx.rng.weighted(weighted)

def first_compatible(ctx: ForcedContext) -> str:
    for h in HAZARD_POOL:
        if hazard_unlocked(h, ctx.index) and is_compatible(ctx.platform, h, ctx.index):
            return h
    return NONE

def first_unlocked(ctx: ForcedContext) -> str:
    for h in HAZARD_POOL:
        if hazard_unlocked(h, ctx.index):
            return h
    return NONE


FORCED_STRATEGIES: Tuple[Strategy, ...] = (
    weighted_compatible,
    weighted_compatible,
    first_compatible,
    first_unlocked,
)


def resolve_hazard(
    ctx: ForcedContext,
    hazard: str,
    must_spawn: bool,
    strategies: Sequence[Strategy] = FORCED_STRATEGIES,
) -> str:
    """
    Final hazard for a tile given the selector's pick. Always applies the
    compatibility filter; runs the fallback chain only when must_spawn.
    """
    first, rest = strategies[:1], strategies[1:]
    if must_spawn and hazard == NONE:
        for strategy in first:
            hazard = strategy(ctx)
    if not is_compatible(ctx.platform, hazard, ctx.index):
        hazard = NONE
    if must_spawn:
        for strategy in rest:
            if hazard != NONE:
                break
            hazard = strategy(ctx)
        if hazard == NONE:
            # Only reachable before the first hazard unlocks.
            logger.debug("forced spawn at %s left empty: nothing unlocked", ctx.index)
    return hazard
