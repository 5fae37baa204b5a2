# src/stepspawn/spawn/sequencer.py
# Root of the spawn pipeline: one TileSpawn per advance(), fully determined
# by the seed. PRNG draw order per tile is bonus -> window relief ->
# platform -> hazard -> forced fallback; changing it changes every run.

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterator, List, Optional, Sequence

from ..config import DEFAULT_RULES, SpawnRules
from ..rng import Mulberry32
from ..tiles import NONE
from .bonus import tick_bonus
from .compat import is_compatible
from .forced import FORCED_STRATEGIES, ForcedContext, Strategy, resolve_hazard
from .hazards import pick_hazard
from .platforms import pick_platform
from .state import GenerationState, TileSpawn
from .window import (
    WindowPolicySummary,
    enter_tile,
    finalize_window,
    must_spawn_hazard,
    record_hazard,
    window_complete,
)

logger = logging.getLogger(__name__)


class Sequencer:
    def __init__(
        self,
        seed: int,
        *,
        rules: SpawnRules = DEFAULT_RULES,
        forced_strategies: Sequence[Strategy] = FORCED_STRATEGIES,
    ) -> None:
        self.seed = seed & 0xFFFFFFFF
        self.rng = Mulberry32(self.seed)
        self.rules = rules
        self.forced_strategies = tuple(forced_strategies)
        self.state = GenerationState()
        self.index = 0            # next tile to emit
        # Diagnostic: ids of every relief window so far. Grows by one entry per
        # relief window (at most one per relief_min_gap windows) for the life of
        # the run; generation itself reads only state.last_relief_window_id.
        self.relief_windows: List[int] = []
        self._summary = WindowPolicySummary()

    def advance(self) -> TileSpawn:
        index = self.index
        st = self.state
        rules = self.rules

        in_bonus = tick_bonus(st, index, self.rng, rules)
        if enter_tile(st, index, self.rng, self._summary, rules) and st.window_is_relief:
            self.relief_windows.append(st.window_id)
        must_spawn = must_spawn_hazard(st, index, rules)

        platform = pick_platform(index, self.rng, in_bonus, st.previous_platform, rules)
        picked = pick_hazard(
            index, self.rng, st.hazard_streak, in_bonus, st.previous_hazard,
            st.window_is_relief, rules,
        )
        ctx = ForcedContext(index=index, rng=self.rng, previous_hazard=st.previous_hazard, platform=platform)
        hazard = resolve_hazard(ctx, picked, must_spawn, self.forced_strategies)
        forced = must_spawn and hazard != NONE and (
            picked == NONE or not is_compatible(platform, picked, index)
        )
        if forced:
            logger.debug("forced %s onto %s at %s", hazard, platform, index)

        if hazard == NONE:
            st.hazard_streak = 0
        else:
            st.hazard_streak += 1
        record_hazard(st, hazard != NONE)
        st.previous_platform = platform
        st.previous_hazard = hazard

        self.index += 1
        return TileSpawn(index=index, platform=platform, hazard=hazard, forced=forced)

    def run(self, n: int) -> List[TileSpawn]:
        return [self.advance() for _ in range(n)]

    def __iter__(self) -> Iterator[TileSpawn]:
        while True:
            yield self.advance()

    @property
    def last_index(self) -> Optional[int]:
        return self.index - 1 if self.index > 0 else None

    def summary(self) -> WindowPolicySummary:
        """
        Window-policy counters for every closed window, plus the open one if
        its last tile has already been emitted. Does not mutate the run.
        """
        out = replace(self._summary)
        st = self.state
        last = self.last_index
        if last is not None and st.window_id >= 0 and window_complete(st.window_id, last, self.rules):
            finalize_window(out, st.window_id, st.window_hazard_count, st.window_is_relief, self.rules)
        return out


def generate_sequence(seed: int, n: int, rules: SpawnRules = DEFAULT_RULES) -> List[TileSpawn]:
    return Sequencer(seed, rules=rules).run(n)
