import json

import pytest

from stepspawn.config import DEFAULT_RULES, SpawnRules, load_rules, rules_from_dict
from stepspawn.rng import seed_for_run
from stepspawn.spawn.sequencer import Sequencer
from stepspawn.tiles import BONUS_PLATFORMS, platform_unlocked

def test_defaults():
    r = DEFAULT_RULES
    assert (r.window_size, r.min_obstacles, r.rule_start_index) == (10, 2, 20)
    assert (r.relief_start_index, r.relief_min_gap, r.relief_chance) == (160, 8, 0.035)
    assert (r.bonus_min_tiles, r.bonus_max_tiles) == (10, 16)

def test_rule_gate_must_follow_first_unlock():
    with pytest.raises(ValueError):
        SpawnRules(rule_start_index=10)
    SpawnRules(rule_start_index=10, min_obstacles=0)

@pytest.mark.parametrize("kwargs", [
    {"window_size": 0},
    {"min_obstacles": 11},
    {"bonus_min_tiles": 9, "bonus_max_tiles": 8},
    {"bonus_interval": 0},
])
def test_inconsistent_rules(kwargs):
    with pytest.raises(ValueError):
        SpawnRules(**kwargs)

def test_unknown_key():
    with pytest.raises(ValueError):
        rules_from_dict({"window": 12})

def test_load_rules(tmp_path):
    p = tmp_path / "rules.json"
    p.write_text(json.dumps({"window_size": 12, "relief_chance": 0.1}), encoding="utf-8")
    r = load_rules(p)
    assert r.window_size == 12 and r.relief_chance == 0.1
    assert r.min_obstacles == DEFAULT_RULES.min_obstacles

def test_load_rules_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_rules(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(SystemExit):
        load_rules(bad)
    arr = tmp_path / "arr.json"
    arr.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_rules(arr)

def test_runways_follow_rules():
    rules = SpawnRules(platform_runway=20, hazard_runway=20)
    spawns = Sequencer(7, rules=rules).run(20)
    assert all(s.platform == "standard" and s.hazard == "none" for s in spawns)

def test_first_bonus_index():
    assert DEFAULT_RULES.first_bonus_index == 70
    assert SpawnRules(bonus_after_index=28, bonus_interval=28).first_bonus_index == 56
    assert SpawnRules(bonus_after_index=0, bonus_interval=70).first_bonus_index == 70

def test_bonus_zone_cannot_open_before_pool_unlocks():
    # speed_ramp, the latest bonus platform, unlocks at 28
    with pytest.raises(ValueError):
        SpawnRules(bonus_after_index=0, bonus_interval=10)
    with pytest.raises(ValueError):
        SpawnRules(bonus_after_index=20, bonus_interval=27)
    SpawnRules(bonus_after_index=0, bonus_interval=28)

def test_early_bonus_zones_respect_unlocks():
    rules = SpawnRules(bonus_after_index=0, bonus_interval=28, bonus_chance=1.0)
    spawns = Sequencer(seed_for_run(3), rules=rules).run(200)
    bonus = {p for p, _ in BONUS_PLATFORMS}
    assert all(s.platform in bonus for s in spawns[28:38])
    for s in spawns:
        assert platform_unlocked(s.platform, s.index), f"{s.platform} at {s.index}"
