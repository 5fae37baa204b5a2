from stepspawn.spawn.bonus import bonus_check_due, tick_bonus
from stepspawn.spawn.state import GenerationState

def test_zone_opens_on_cadence(scripted):
    st = GenerationState()
    r = scripted([0.0, 0.5])  # open, then length floor(0.5 * 7) + 10
    assert tick_bonus(st, 70, r) is True
    assert st.bonus_tiles_left == 12
    assert r.draws == 2

def test_failed_roll_opens_nothing(scripted):
    st = GenerationState()
    assert tick_bonus(st, 140, scripted([0.9])) is False
    assert st.bonus_tiles_left == 0

def test_no_roll_off_cadence(scripted):
    st = GenerationState()
    for i in (0, 28, 69, 71):
        assert tick_bonus(st, i, scripted([])) is False

def test_no_roll_while_active(scripted):
    st = GenerationState(bonus_tiles_left=3)
    assert not bonus_check_due(st, 140)
    assert tick_bonus(st, 140, scripted([])) is True
    assert st.bonus_tiles_left == 2

def test_zone_closes_at_zero(scripted):
    st = GenerationState(bonus_tiles_left=1)
    assert tick_bonus(st, 71, scripted([])) is True
    assert tick_bonus(st, 72, scripted([])) is False
