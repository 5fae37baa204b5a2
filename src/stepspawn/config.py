from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict

from .tiles import BONUS_POOL_UNLOCK, EARLIEST_HAZARD_UNLOCK


@dataclass(frozen=True)
class SpawnRules:
    # Safe-start runways
    platform_runway: int = 8     # indices below this are always standard
    hazard_runway: int = 14      # indices below this never carry a hazard

    # Density windows
    window_size: int = 10
    min_obstacles: int = 2
    rule_start_index: int = 20   # windows starting here or later need min_obstacles

    # Relief windows
    relief_start_index: int = 160
    relief_min_gap: int = 8      # in window ids
    relief_chance: float = 0.035

    # Bonus zones
    bonus_after_index: int = 28
    bonus_interval: int = 70
    bonus_chance: float = 0.5
    bonus_min_tiles: int = 10
    bonus_max_tiles: int = 16

    def __post_init__(self) -> None:
        if self.window_size < 1:
            raise ValueError("window_size must be >= 1")
        if not 0 <= self.min_obstacles <= self.window_size:
            raise ValueError("min_obstacles must be within 0..window_size")
        # A forced spawn needs at least one unlocked hazard to choose from.
        if self.min_obstacles > 0 and self.rule_start_index < EARLIEST_HAZARD_UNLOCK:
            raise ValueError(
                f"rule_start_index {self.rule_start_index} is below the earliest "
                f"hazard unlock ({EARLIEST_HAZARD_UNLOCK})"
            )
        if self.bonus_interval < 1:
            raise ValueError("bonus_interval must be >= 1")
        if self.first_bonus_index < BONUS_POOL_UNLOCK:
            raise ValueError(
                f"first bonus zone could open at {self.first_bonus_index}, before "
                f"every bonus platform unlocks ({BONUS_POOL_UNLOCK})"
            )
        if self.bonus_max_tiles < self.bonus_min_tiles:
            raise ValueError("bonus_max_tiles must be >= bonus_min_tiles")

    @property
    def first_bonus_index(self) -> int:
        """Earliest index a bonus zone can open on."""
        return max(0, (self.bonus_after_index // self.bonus_interval + 1) * self.bonus_interval)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_RULES = SpawnRules()


def rules_from_dict(data: Dict[str, Any], base: SpawnRules = DEFAULT_RULES) -> SpawnRules:
    known = {f.name for f in fields(SpawnRules)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"unknown spawn rule(s): {', '.join(unknown)}")
    return replace(base, **data)


def load_rules(path: Path) -> SpawnRules:
    """Load a JSON file of rule overrides on top of DEFAULT_RULES.

    Raises:
        FileNotFoundError: If the file does not exist.
        SystemExit: If the file is not valid JSON.
        ValueError: On unknown keys or an inconsistent rule set.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SystemExit(
            f"\nERROR: spawn rules are not valid JSON.\n"
            f"File: {path}\n"
            f"Line {e.lineno}, Col {e.colno}\n"
            f"{e.msg}\n"
        )
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object of rule overrides")
    return rules_from_dict(data)
