# src/stepspawn/spawn/state.py
# Carried-forward generation state and the per-tile output record.

from __future__ import annotations

from dataclasses import dataclass

from ..tiles import NONE, STANDARD

NO_RELIEF_YET = -999


@dataclass
class GenerationState:
    bonus_tiles_left: int = 0
    hazard_streak: int = 0
    previous_platform: str = STANDARD
    previous_hazard: str = NONE
    window_id: int = -1
    window_hazard_count: int = 0
    window_is_relief: bool = False
    last_relief_window_id: int = NO_RELIEF_YET


@dataclass(frozen=True)
class TileSpawn:
    index: int
    platform: str
    hazard: str
    forced: bool = False  # hazard was placed by the density fallback

    @property
    def has_hazard(self) -> bool:
        return self.hazard != NONE

    def as_row(self):
        return [self.index, self.platform, self.hazard, int(self.forced)]
