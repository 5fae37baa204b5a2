# src/stepspawn/spawn/platforms.py
from typing import List, Tuple

from ..config import DEFAULT_RULES, SpawnRules
from ..rng import Mulberry32
from ..tiers import MID, is_gentle, lerp, platform_tier_weight, progression, tier_for_index
from ..tiles import BONUS_PLATFORMS, PLATFORM_POOL, STANDARD, TRAP_PLATFORMS, platform_unlocked

TRAP_EARLY_PENALTY = 0.74


def repeat_penalty(tier: str) -> float:
    if is_gentle(tier):
        return 0.24
    if tier == MID:
        return 0.38
    return 0.5  # late, chaos


def platform_candidates(index: int, previous_platform: str) -> List[Tuple[str, float]]:
    """
    Unlocked platforms with their final draw weight, in pool order.
    Weight = tier weight, then repetition penalty, then the early trap
    penalty, then the difficulty ramp. Zero-weight types are left out.
    """
    tier = tier_for_index(index)
    ramp = lerp(0.92, 1.10, progression(index))
    out: List[Tuple[str, float]] = []
    for p in PLATFORM_POOL:
        if not platform_unlocked(p, index):
            continue
        w = platform_tier_weight(p, tier)
        if w <= 0:
            continue
        if p == previous_platform and p != STANDARD:
            w *= repeat_penalty(tier)
        if p in TRAP_PLATFORMS and is_gentle(tier):
            w *= TRAP_EARLY_PENALTY
        w *= ramp
        out.append((p, w))
    return out


def pick_platform(
    index: int,
    rng: Mulberry32,
    in_bonus: bool,
    previous_platform: str,
    rules: SpawnRules = DEFAULT_RULES,
) -> str:
    if index < rules.platform_runway:
        return STANDARD
    if in_bonus:
        return rng.weighted(BONUS_PLATFORMS)
    weighted = platform_candidates(index, previous_platform)
    if not weighted:
        return STANDARD
    return rng.weighted(weighted)
