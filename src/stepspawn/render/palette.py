# src/stepspawn/render/palette.py
# Flat debug colors for previewing a spawn sequence (no real art).
from typing import Dict, Optional, Tuple

from ..tiles import (
    CLAMP, HAZARD_POOL, NONE, PLATFORM_POOL, SAW, SPIKE, SWING,
    TRAP_PLATFORMS, hazard_family,
)

RGBA = Tuple[int, int, int, int]

BACKGROUND: RGBA = (18, 18, 24, 255)
UNKNOWN: RGBA = (255, 0, 255, 255)

FAMILY_COLORS: Dict[str, RGBA] = {
    SPIKE: (230,  60,  60, 255),
    SAW:   (240, 150,  40, 255),
    CLAMP: ( 80, 160, 255, 255),
    SWING: (190, 110, 230, 255),
}

_BOUNCY = frozenset({"bouncer", "trampoline", "speed_ramp"})
_MOVERS = frozenset({"moving_platform", "conveyor_belt", "reverse_conveyor", "treadmill_switch"})


def _shade(c: RGBA, step: int) -> RGBA:
    # Spread members of one group so neighbours stay distinguishable.
    d = (step % 4) * 18
    return (max(0, c[0] - d), max(0, c[1] - d), max(0, c[2] - d), c[3])


def _platform_base(platform: str) -> RGBA:
    if platform == "standard":  return (200, 200, 200, 255)
    if platform in TRAP_PLATFORMS: return (170,  90,  70, 255)
    if platform in _BOUNCY:      return (120, 230, 120, 255)
    if platform in _MOVERS:      return (110, 190, 210, 255)
    return (210, 200, 120, 255)


PLATFORM_COLORS: Dict[str, RGBA] = {
    p: _shade(_platform_base(p), i) for i, p in enumerate(PLATFORM_POOL)
}
HAZARD_COLORS: Dict[str, RGBA] = {
    h: _shade(FAMILY_COLORS.get(hazard_family(h), UNKNOWN), i) for i, h in enumerate(HAZARD_POOL)
}


def platform_color(platform: str) -> RGBA:
    return PLATFORM_COLORS.get(platform, UNKNOWN)

def hazard_color(hazard: str) -> Optional[RGBA]:
    """None for an empty tile, so callers can skip drawing the marker."""
    if hazard == NONE:
        return None
    return HAZARD_COLORS.get(hazard, UNKNOWN)
