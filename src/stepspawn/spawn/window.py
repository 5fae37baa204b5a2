# src/stepspawn/spawn/window.py
"""
Hazard-density windows.

Tiles are grouped into fixed, non-overlapping windows of `window_size`.
Each window is Open from its first tile, has its relief flag decided once
on entry, and is Closed (finalized into the summary) when the next window
opens. A non-relief window starting at or after `rule_start_index` must
hold `min_obstacles` hazards; the sequencer forces a hazard on a tile once
waiting any longer could leave the window short.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict

from ..config import DEFAULT_RULES, SpawnRules
from ..rng import Mulberry32
from .state import GenerationState

logger = logging.getLogger(__name__)


@dataclass
class WindowPolicySummary:
    considered: int = 0
    relief_windows: int = 0
    below_minimum: int = 0
    zero_obstacle_windows: int = 0

    @property
    def relief_pct(self) -> float:
        return round(self.relief_windows / max(1, self.considered) * 100, 2)

    @property
    def zero_window_pct(self) -> float:
        return round(self.zero_obstacle_windows / max(1, self.considered) * 100, 2)

    def add(self, other: "WindowPolicySummary") -> None:
        self.considered += other.considered
        self.relief_windows += other.relief_windows
        self.below_minimum += other.below_minimum
        self.zero_obstacle_windows += other.zero_obstacle_windows

    def as_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["relief_pct"] = self.relief_pct
        d["zero_window_pct"] = self.zero_window_pct
        return d


def window_id_for(index: int, rules: SpawnRules = DEFAULT_RULES) -> int:
    return index // rules.window_size

def window_start(window_id: int, rules: SpawnRules = DEFAULT_RULES) -> int:
    return window_id * rules.window_size

def is_ruled(window_id: int, rules: SpawnRules = DEFAULT_RULES) -> bool:
    """Window counts toward the density rule (and the diagnostics)."""
    return window_id >= 0 and window_start(window_id, rules) >= rules.rule_start_index

def relief_eligible(state: GenerationState, index: int, window_id: int, rules: SpawnRules = DEFAULT_RULES) -> bool:
    return (
        index >= rules.relief_start_index
        and window_id - state.last_relief_window_id >= rules.relief_min_gap
    )


def finalize_window(
    summary: WindowPolicySummary,
    window_id: int,
    hazard_count: int,
    relief: bool,
    rules: SpawnRules = DEFAULT_RULES,
) -> None:
    if not is_ruled(window_id, rules):
        return
    summary.considered += 1
    if relief:
        summary.relief_windows += 1
    if hazard_count == 0:
        summary.zero_obstacle_windows += 1
    if not relief and hazard_count < rules.min_obstacles:
        summary.below_minimum += 1
        logger.debug("window %s closed with %s hazards", window_id, hazard_count)


def enter_tile(
    state: GenerationState,
    index: int,
    rng: Mulberry32,
    summary: WindowPolicySummary,
    rules: SpawnRules = DEFAULT_RULES,
) -> bool:
    """
    Move the window bookkeeping onto `index`. Returns True when a new window
    was opened. The relief draw is only spent on eligible windows.
    """
    wid = window_id_for(index, rules)
    if wid == state.window_id:
        return False
    finalize_window(summary, state.window_id, state.window_hazard_count, state.window_is_relief, rules)

    state.window_id = wid
    state.window_hazard_count = 0
    relief = relief_eligible(state, index, wid, rules) and rng.bool(rules.relief_chance)
    state.window_is_relief = relief
    if relief:
        state.last_relief_window_id = wid
        logger.debug("relief window %s at index %s", wid, index)
    return True


def required_obstacles(state: GenerationState, index: int, rules: SpawnRules = DEFAULT_RULES) -> int:
    if index >= rules.rule_start_index and not state.window_is_relief:
        return rules.min_obstacles
    return 0

def remaining_slots(index: int, rules: SpawnRules = DEFAULT_RULES) -> int:
    """Tiles left in the window, counting this one."""
    return rules.window_size - (index - window_start(window_id_for(index, rules), rules))

def must_spawn_hazard(state: GenerationState, index: int, rules: SpawnRules = DEFAULT_RULES) -> bool:
    missing = max(0, required_obstacles(state, index, rules) - state.window_hazard_count)
    return missing > 0 and remaining_slots(index, rules) <= missing + 1

def record_hazard(state: GenerationState, hazard_placed: bool) -> None:
    if hazard_placed:
        state.window_hazard_count += 1

def window_complete(window_id: int, last_index: int, rules: SpawnRules = DEFAULT_RULES) -> bool:
    return window_start(window_id + 1, rules) - 1 <= last_index
