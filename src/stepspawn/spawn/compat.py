# src/stepspawn/spawn/compat.py
# Which hazards may sit on which platforms. Most rules lift in chaos.

from ..tiers import CHAOS, tier_for_index
from ..tiles import FRAGILE_PLATFORMS, HEAVY_CHAOS_HAZARDS, LETHAL_HAZARDS, NONE

# Rejected on sticky_glue at every tier.
GLUE_BLOCKED = frozenset({"gravity_well", "time_slow_zone"})


def is_compatible(platform: str, hazard: str, index: int) -> bool:
    if hazard == NONE:
        return True
    if platform == "sticky_glue" and hazard in GLUE_BLOCKED:
        return False
    if tier_for_index(index) == CHAOS:
        return True
    if platform in FRAGILE_PLATFORMS and hazard in LETHAL_HAZARDS:
        return False
    if platform == "narrow_bridge" and (hazard in HEAVY_CHAOS_HAZARDS or hazard == "laser_grid"):
        return False
    if platform == "teleporter" and hazard == "telefrag_portal":
        return False
    return True
