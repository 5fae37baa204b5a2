# Canonical platform/hazard names, unlock gates and groupings.
# Pool order is the draw order for weighted picks; do not reorder.

from typing import Dict, FrozenSet, Optional, Tuple

STANDARD = "standard"
NONE = "none"

PLATFORM_POOL: Tuple[str, ...] = (
    "standard",
    "moving_platform",
    "falling_platform",
    "conveyor_belt",
    "reverse_conveyor",
    "bouncer",
    "trampoline",
    "speed_ramp",
    "sticky_glue",
    "sinking_sand",
    "ghost_platform",
    "narrow_bridge",
    "slippery_ice",
    "teleporter",
    "weight_sensitive_bridge",
    "size_shifter_pad",
    "icy_half_pipe",
    "gravity_flip_zone",
    "treadmill_switch",
    "crushing_ceiling",
    "wind_tunnel",
)

HAZARD_POOL: Tuple[str, ...] = (
    "mirror_maze_platform",
    "pulse_expander",
    "gravity_well",
    "snap_trap",
    "laser_grid",
    "rotating_floor_disk",
    "spike_wave",
    "split_path_bridge",
    "time_slow_zone",
    "bomb_tile",
    "rotating_hammer",
    "anti_gravity_jump_pad",
    "shifting_tiles",
    "telefrag_portal",
    "magnetic_field",
    "rolling_boulder",
    "trapdoor_row",
    "rotating_cross_blades",
    "flicker_bridge",
    "rising_spike_columns",
    "meat_grinder",
    "homing_mine",
    "expand_o_matic",
    "pendulum_axes",
    "rising_lava",
    "fragile_glass",
    "lightning_striker",
)

PLATFORM_UNLOCK_AT: Dict[str, int] = {
    "standard": 0,
    "moving_platform": 10,
    "falling_platform": 30,
    "conveyor_belt": 18,
    "reverse_conveyor": 62,
    "bouncer": 12,
    "trampoline": 20,
    "speed_ramp": 28,
    "sticky_glue": 80,
    "sinking_sand": 130,
    "ghost_platform": 74,
    "narrow_bridge": 40,
    "slippery_ice": 48,
    "teleporter": 90,
    "weight_sensitive_bridge": 116,
    "size_shifter_pad": 150,
    "icy_half_pipe": 104,
    "gravity_flip_zone": 138,
    "treadmill_switch": 120,
    "crushing_ceiling": 178,
    "wind_tunnel": 96,
}

HAZARD_UNLOCK_AT: Dict[str, int] = {
    "mirror_maze_platform": 14,
    "pulse_expander": 18,
    "gravity_well": 24,
    "snap_trap": 58,
    "laser_grid": 74,
    "rotating_floor_disk": 70,
    "spike_wave": 52,
    "split_path_bridge": 32,
    "time_slow_zone": 28,
    "bomb_tile": 84,
    "rotating_hammer": 64,
    "anti_gravity_jump_pad": 36,
    "shifting_tiles": 42,
    "telefrag_portal": 92,
    "magnetic_field": 88,
    "rolling_boulder": 98,
    "trapdoor_row": 80,
    "rotating_cross_blades": 116,
    "flicker_bridge": 46,
    "rising_spike_columns": 110,
    "meat_grinder": 156,
    "homing_mine": 132,
    "expand_o_matic": 124,
    "pendulum_axes": 148,
    "rising_lava": 168,
    "fragile_glass": 104,
    "lightning_striker": 140,
}

EARLIEST_HAZARD_UNLOCK = min(HAZARD_UNLOCK_AT.values())

# Fixed celebratory pool used inside bonus zones, in draw order.
BONUS_PLATFORMS: Tuple[Tuple[str, float], ...] = (
    ("standard", 0.3),
    ("speed_ramp", 0.24),
    ("bouncer", 0.22),
    ("trampoline", 0.12),
    ("conveyor_belt", 0.08),
    ("moving_platform", 0.04),
)
# Bonus zones ignore unlock gates, so none may open before this index.
BONUS_POOL_UNLOCK = max(PLATFORM_UNLOCK_AT[p] for p, _ in BONUS_PLATFORMS)

# Anti-repetition families. Every hazard sits in exactly one.
SPIKE, SAW, CLAMP, SWING = "spike", "saw", "clamp", "swing"
_FAMILY_MEMBERS: Dict[str, Tuple[str, ...]] = {
    SPIKE: ("spike_wave", "rising_spike_columns", "trapdoor_row", "bomb_tile"),
    SAW: (
        "rotating_floor_disk",
        "rotating_hammer",
        "rotating_cross_blades",
        "rolling_boulder",
        "meat_grinder",
        "homing_mine",
    ),
    CLAMP: ("laser_grid", "lightning_striker", "magnetic_field", "gravity_well"),
    SWING: (
        "mirror_maze_platform",
        "pulse_expander",
        "snap_trap",
        "split_path_bridge",
        "time_slow_zone",
        "anti_gravity_jump_pad",
        "shifting_tiles",
        "telefrag_portal",
        "flicker_bridge",
        "expand_o_matic",
        "pendulum_axes",
        "rising_lava",
        "fragile_glass",
    ),
}
HAZARD_FAMILY: Dict[str, str] = {
    hazard: family
    for family, members in _FAMILY_MEMBERS.items()
    for hazard in members
}

# Platforms damped in the first two tiers.
TRAP_PLATFORMS: FrozenSet[str] = frozenset({
    "falling_platform",
    "sinking_sand",
    "ghost_platform",
    "weight_sensitive_bridge",
    "crushing_ceiling",
})

# Platforms that must not carry lethal hazards before chaos.
# (sinking_sand is damped above but not restricted here.)
FRAGILE_PLATFORMS: FrozenSet[str] = frozenset({
    "ghost_platform",
    "crushing_ceiling",
    "falling_platform",
    "weight_sensitive_bridge",
})

READABLE_EFFECT_HAZARDS: FrozenSet[str] = frozenset({
    "mirror_maze_platform",
    "pulse_expander",
    "gravity_well",
    "split_path_bridge",
    "time_slow_zone",
    "anti_gravity_jump_pad",
    "shifting_tiles",
    "flicker_bridge",
    "expand_o_matic",
})

HEAVY_CHAOS_HAZARDS: FrozenSet[str] = frozenset({
    "rising_lava",
    "meat_grinder",
    "lightning_striker",
    "rotating_cross_blades",
    "pendulum_axes",
    "homing_mine",
    "rolling_boulder",
})

LETHAL_HAZARDS: FrozenSet[str] = frozenset({
    "laser_grid",
    "rotating_floor_disk",
    "spike_wave",
    "bomb_tile",
    "rotating_hammer",
    "rolling_boulder",
    "trapdoor_row",
    "rotating_cross_blades",
    "rising_spike_columns",
    "meat_grinder",
    "homing_mine",
    "pendulum_axes",
    "rising_lava",
    "fragile_glass",
    "lightning_striker",
    "snap_trap",
})

# Early-tier hazards that are neither readable nor heavy but still punishing.
EARLY_PUNISHERS: FrozenSet[str] = frozenset({"snap_trap", "trapdoor_row", "bomb_tile"})


def hazard_family(hazard: str) -> Optional[str]:
    return HAZARD_FAMILY.get(hazard)

def same_family(a: str, b: str) -> bool:
    if a == NONE or b == NONE:
        return False
    fa = HAZARD_FAMILY.get(a)
    return fa is not None and fa == HAZARD_FAMILY.get(b)

def platform_unlocked(platform: str, index: int) -> bool:
    return index >= PLATFORM_UNLOCK_AT[platform]

def hazard_unlocked(hazard: str, index: int) -> bool:
    return index >= HAZARD_UNLOCK_AT[hazard]
