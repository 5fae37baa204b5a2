import pytest

from stepspawn.rng import GOLDEN, MASK32, Mulberry32, imul, mulberry_output, seed_for_run

def test_imul_wraps_at_32_bits():
    assert imul(0xFFFFFFFF, 2) == 0xFFFFFFFE
    assert imul(0x10000, 0x10000) == 0
    assert imul(3, 5) == 15

def test_state_wraps_on_advance():
    r = Mulberry32(0xFFFFFFFF)
    r.next()
    assert r.state == (0xFFFFFFFF + GOLDEN) & MASK32 == 0x6D2B79F4

def test_seed_is_masked():
    assert Mulberry32(2**32 + 5).state == 5

def test_output_is_pure_function_of_state():
    r = Mulberry32(1234)
    v = r.next()
    assert v == mulberry_output(r.state) / 4294967296.0

def test_same_seed_same_sequence():
    a, b = Mulberry32(2654435761), Mulberry32(2654435761)
    assert [a.next() for _ in range(500)] == [b.next() for _ in range(500)]

def test_different_seeds_diverge():
    a, b = Mulberry32(1), Mulberry32(2)
    assert [a.next() for _ in range(8)] != [b.next() for _ in range(8)]

def test_next_in_unit_interval():
    r = Mulberry32(42)
    for _ in range(2000):
        v = r.next()
        assert 0.0 <= v < 1.0

def test_int_inclusive_bounds():
    r = Mulberry32(7)
    seen = {r.int(10, 16) for _ in range(3000)}
    assert seen == set(range(10, 17))

def test_int_rejects_empty_range():
    with pytest.raises(ValueError):
        Mulberry32(1).int(5, 4)

def test_int_and_bool_formulas(scripted):
    r = scripted([0.5, 0.999, 0.0, 0.3, 0.7])
    assert r.int(10, 16) == 13      # floor(0.5 * 7) + 10
    assert r.int(10, 16) == 16
    assert r.int(10, 16) == 10
    assert r.bool(0.5) is True      # 0.3 < 0.5
    assert r.bool(0.5) is False     # 0.7 >= 0.5

def test_weighted_first_item_wins_exact_tie(scripted):
    # r = 0.5 * 2 = 1.0; after "a" the remainder is exactly 0 -> "a"
    assert scripted([0.5]).weighted([("a", 1.0), ("b", 1.0)]) == "a"
    assert scripted([0.75]).weighted([("a", 1.0), ("b", 1.0)]) == "b"

def test_weighted_rounding_leftover_returns_last(scripted):
    # 0.1 + 0.2 leaves a tiny positive remainder after both are subtracted,
    # so the zero-weight tail item is returned.
    r = scripted([1.0])
    assert r.weighted([("a", 0.1), ("b", 0.2), ("c", 0.0)]) == "c"

def test_weighted_empty_raises():
    with pytest.raises(ValueError):
        Mulberry32(1).weighted([])

def test_weighted_single_draw():
    r = Mulberry32(99)
    before = r.state
    r.weighted([("x", 1.0), ("y", 2.0)])
    assert r.state == (before + GOLDEN) & MASK32

def test_seed_for_run():
    assert seed_for_run(1) == 2654435761
    assert seed_for_run(2) == 1013904226

def test_clone_forks_independently():
    a = Mulberry32(5)
    a.next()
    b = a.clone()
    assert b.next() == a.next()
    b.next()
    assert a.state != b.state

# Reference outputs of the JavaScript mulberry32 the generator must match.
KNOWN_OUTPUTS = [
    (1, [0.6270739405881613, 0.002735721180215478, 0.5274470399599522,
         0.9810509674716741, 0.9683778982143849]),
    (2654435761, [0.5464560757391155, 0.45955629041418433, 0.2470416973810643,
                  0.5192999374121428, 0.8892884191591293]),
]

@pytest.mark.parametrize("seed,expected", KNOWN_OUTPUTS)
def test_matches_reference_outputs(seed, expected):
    r = Mulberry32(seed)
    got = [r.next() for _ in expected]
    assert got == expected, f"seed {seed}: {got}"
