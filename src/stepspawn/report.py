# src/stepspawn/report.py
# Multi-seed spawn-frequency aggregation for offline tuning.

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from .config import DEFAULT_RULES, SpawnRules
from .rng import seed_for_run
from .spawn.sequencer import Sequencer
from .spawn.window import WindowPolicySummary
from .tiers import tier_for_index
from .tiles import NONE

logger = logging.getLogger(__name__)

DEFAULT_RUNS = 20000
DEFAULT_TILES = (50, 150, 300, 600)
DEFAULT_TOP = 10


@dataclass
class TileSample:
    tile: int
    hazard_count: int = 0
    platforms: Counter = field(default_factory=Counter)
    hazards: Counter = field(default_factory=Counter)

    @property
    def tier(self) -> str:
        return tier_for_index(self.tile)

    def add(self, platform: str, hazard: str) -> None:
        self.platforms[platform] += 1
        self.hazards[hazard] += 1
        if hazard != NONE:
            self.hazard_count += 1


def normalize_tiles(tiles: Iterable[int]) -> List[int]:
    return sorted({int(t) for t in tiles if int(t) >= 0})


def top_entries(counts: Counter, limit: int, include_none: bool = True) -> List[Tuple[str, int]]:
    # Stable on ties: first-seen order, like Counter.most_common
    items = [(k, v) for k, v in counts.items() if include_none or k != NONE]
    items.sort(key=lambda kv: kv[1], reverse=True)
    return items[:limit]


def pct(count: int, total: int) -> float:
    return round(count / max(1, total) * 100, 2)


def collect(
    runs: int,
    tiles: Sequence[int],
    rules: SpawnRules = DEFAULT_RULES,
) -> Tuple[Dict[int, TileSample], WindowPolicySummary]:
    tiles = normalize_tiles(tiles)
    if not tiles:
        raise ValueError("at least one sampled tile index is required")
    if runs < 1:
        raise ValueError("runs must be >= 1")
    max_tile = tiles[-1]
    samples = {t: TileSample(t) for t in tiles}
    policy = WindowPolicySummary()

    for run in range(1, runs + 1):
        seq = Sequencer(seed_for_run(run), rules=rules)
        for _ in range(max_tile + 1):
            spawn = seq.advance()
            sample = samples.get(spawn.index)
            if sample is not None:
                sample.add(spawn.platform, spawn.hazard)
        policy.add(seq.summary())

    logger.info("collected %s runs up to tile %s", runs, max_tile)
    return samples, policy


def run_report(
    runs: int = DEFAULT_RUNS,
    tiles: Sequence[int] = DEFAULT_TILES,
    top: int = DEFAULT_TOP,
    rules: SpawnRules = DEFAULT_RULES,
) -> Dict[str, Any]:
    samples, policy = collect(runs, tiles, rules)

    def ranked(counts: Counter, include_none: bool = True):
        return [{"name": k, "pct": pct(v, runs)} for k, v in top_entries(counts, top, include_none)]

    return {
        "runs": runs,
        "tiles": sorted(samples),
        "window_policy": policy.as_dict(),
        "samples": [
            {
                "tile": s.tile,
                "tier": s.tier,
                "hazard_rate_pct": pct(s.hazard_count, runs),
                "none_pct": pct(s.hazards.get(NONE, 0), runs),
                "top_platforms": ranked(s.platforms),
                "top_hazards": ranked(s.hazards),
                "top_active_hazards": ranked(s.hazards, include_none=False),
            }
            for s in (samples[t] for t in sorted(samples))
        ],
    }


def format_report(report: Dict[str, Any], top: int = DEFAULT_TOP) -> str:
    wp = report["window_policy"]
    lines = [
        "Steps Spawn Report",
        f"runs={report['runs']} tiles={','.join(str(t) for t in report['tiles'])} top={top}",
        (
            f"window_policy: considered={wp['considered']} relief={wp['relief_windows']} "
            f"({wp['relief_pct']:.1f}%) below_min={wp['below_minimum']} "
            f"zero={wp['zero_obstacle_windows']} ({wp['zero_window_pct']:.1f}%)"
        ),
    ]
    for s in report["samples"]:
        lines.append("")
        lines.append(f"=== TILE {s['tile']} ({s['tier']}) ===")
        lines.append(f"hazard_rate={s['hazard_rate_pct']:.1f}% (none={s['none_pct']:.1f}%)")
        for title, key in (
            ("platform_top", "top_platforms"),
            ("hazard_top", "top_hazards"),
            ("hazard_active_top", "top_active_hazards"),
        ):
            lines.append(f"{title}:")
            for e in s[key]:
                lines.append(f"  {e['name']:<24} {e['pct']:.1f}%")
    return "\n".join(lines)
