# src/stepspawn/tiers.py
"""
Difficulty tiers and the static weight tables keyed by them.

Tables are plain dicts built once at import. A platform missing from a tier
row has weight 0 and is never drawn in that tier.
"""

from typing import Dict, Tuple

from .tiles import (
    EARLY_PUNISHERS,
    HAZARD_POOL,
    HEAVY_CHAOS_HAZARDS,
    PLATFORM_POOL,
    READABLE_EFFECT_HAZARDS,
)

INTRO, EARLY, MID, LATE, CHAOS = "intro", "early", "mid", "late", "chaos"
TIERS: Tuple[str, ...] = (INTRO, EARLY, MID, LATE, CHAOS)

# Upper bounds (exclusive) for every tier but chaos.
TIER_BOUNDS: Tuple[Tuple[int, str], ...] = (
    (34, INTRO),
    (130, EARLY),
    (300, MID),
    (520, LATE),
)

# Index at which the smooth difficulty ramps reach 1.0.
RAMP_SPAN = 620


def tier_for_index(index: int) -> str:
    for bound, tier in TIER_BOUNDS:
        if index < bound:
            return tier
    return CHAOS

def is_gentle(tier: str) -> bool:
    return tier == INTRO or tier == EARLY

def clamp(v: float, lo: float, hi: float) -> float:
    return lo if v < lo else hi if v > hi else v

def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t

def progression(index: int) -> float:
    """0..1 progress through the difficulty ramp."""
    return clamp(index / RAMP_SPAN, 0, 1)


_PLATFORM_ROWS: Dict[str, Dict[str, float]] = {
    INTRO: {
        "standard": 5.2,
        "moving_platform": 1.25,
        "conveyor_belt": 0.72,
        "bouncer": 0.62,
        "trampoline": 0.44,
        "speed_ramp": 0.36,
    },
    EARLY: {
        "standard": 2.9,
        "moving_platform": 1.45,
        "conveyor_belt": 1.02,
        "bouncer": 1.06,
        "trampoline": 0.82,
        "speed_ramp": 0.78,
        "narrow_bridge": 0.56,
        "slippery_ice": 0.46,
        "falling_platform": 0.32,
        "reverse_conveyor": 0.34,
        "teleporter": 0.34,
        "wind_tunnel": 0.34,
        "ghost_platform": 0.22,
        "sticky_glue": 0.24,
        "icy_half_pipe": 0.22,
        "treadmill_switch": 0.2,
    },
    MID: {
        "standard": 1.9,
        "moving_platform": 1.34,
        "falling_platform": 0.82,
        "conveyor_belt": 0.92,
        "reverse_conveyor": 0.74,
        "bouncer": 0.88,
        "trampoline": 0.72,
        "speed_ramp": 0.74,
        "sticky_glue": 0.62,
        "sinking_sand": 0.42,
        "ghost_platform": 0.62,
        "narrow_bridge": 0.72,
        "slippery_ice": 0.66,
        "teleporter": 0.58,
        "weight_sensitive_bridge": 0.46,
        "size_shifter_pad": 0.42,
        "icy_half_pipe": 0.54,
        "gravity_flip_zone": 0.36,
        "treadmill_switch": 0.54,
        "crushing_ceiling": 0.3,
        "wind_tunnel": 0.58,
    },
    LATE: {
        "standard": 1.24,
        "moving_platform": 1.18,
        "falling_platform": 0.96,
        "conveyor_belt": 0.82,
        "reverse_conveyor": 0.84,
        "bouncer": 0.66,
        "trampoline": 0.6,
        "speed_ramp": 0.7,
        "sticky_glue": 0.76,
        "sinking_sand": 0.72,
        "ghost_platform": 0.84,
        "narrow_bridge": 0.86,
        "slippery_ice": 0.84,
        "teleporter": 0.84,
        "weight_sensitive_bridge": 0.76,
        "size_shifter_pad": 0.7,
        "icy_half_pipe": 0.76,
        "gravity_flip_zone": 0.68,
        "treadmill_switch": 0.74,
        "crushing_ceiling": 0.64,
        "wind_tunnel": 0.74,
    },
    CHAOS: {
        "standard": 1.05,
        "moving_platform": 1.02,
        "falling_platform": 1.06,
        "conveyor_belt": 0.72,
        "reverse_conveyor": 0.92,
        "bouncer": 0.56,
        "trampoline": 0.5,
        "speed_ramp": 0.64,
        "sticky_glue": 0.84,
        "sinking_sand": 0.84,
        "ghost_platform": 0.94,
        "narrow_bridge": 0.95,
        "slippery_ice": 0.9,
        "teleporter": 0.96,
        "weight_sensitive_bridge": 0.88,
        "size_shifter_pad": 0.82,
        "icy_half_pipe": 0.84,
        "gravity_flip_zone": 0.88,
        "treadmill_switch": 0.84,
        "crushing_ceiling": 0.92,
        "wind_tunnel": 0.84,
    },
}

PLATFORM_TIER_WEIGHTS: Dict[str, Dict[str, float]] = {
    tier: {p: _PLATFORM_ROWS[tier].get(p, 0.0) for p in PLATFORM_POOL}
    for tier in TIERS
}

# (readable, heavy, early punisher, other) per tier
_HAZARD_GROUP_WEIGHTS: Dict[str, Tuple[float, float, float, float]] = {
    INTRO: (0.0, 0.0, 0.0, 0.0),
    EARLY: (1.06, 0.14, 0.36, 0.62),
    MID: (0.94, 0.48, 0.82, 0.82),
    LATE: (0.86, 0.82, 0.94, 0.94),
    CHAOS: (0.78, 1.06, 0.98, 0.98),
}

def _hazard_weight(hazard: str, tier: str) -> float:
    readable, heavy, punisher, other = _HAZARD_GROUP_WEIGHTS[tier]
    if hazard in READABLE_EFFECT_HAZARDS:
        return readable
    if hazard in HEAVY_CHAOS_HAZARDS:
        return heavy
    if hazard in EARLY_PUNISHERS:
        return punisher
    return other

HAZARD_TIER_WEIGHTS: Dict[str, Dict[str, float]] = {
    tier: {h: _hazard_weight(h, tier) for h in HAZARD_POOL}
    for tier in TIERS
}

_BIAS_GROUPS: Tuple[Tuple[float, Tuple[str, ...]], ...] = (
    (1.12, ("mirror_maze_platform", "time_slow_zone", "split_path_bridge")),
    (1.04, ("laser_grid", "spike_wave", "rotating_floor_disk")),
    (0.72, ("rising_lava", "meat_grinder", "lightning_striker")),
    (0.9, ("homing_mine", "pendulum_axes", "rotating_cross_blades")),
)

HAZARD_BIAS: Dict[str, float] = {h: 1.0 for h in HAZARD_POOL}
for _bias, _members in _BIAS_GROUPS:
    for _h in _members:
        HAZARD_BIAS[_h] = _bias


def platform_tier_weight(platform: str, tier: str) -> float:
    return PLATFORM_TIER_WEIGHTS[tier].get(platform, 0.0)

def hazard_tier_weight(hazard: str, tier: str) -> float:
    return HAZARD_TIER_WEIGHTS[tier].get(hazard, 0.0)

def hazard_bias(hazard: str) -> float:
    return HAZARD_BIAS.get(hazard, 1.0)
