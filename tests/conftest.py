import pytest

from stepspawn.rng import Mulberry32


class ScriptedRandom(Mulberry32):
    """Mulberry32 stand-in that replays fixed next() values and counts draws."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)
        self.draws = 0

    def next(self):
        self.draws += 1
        if not self.values:
            raise AssertionError("unexpected PRNG draw")
        return self.values.pop(0)


@pytest.fixture
def scripted():
    return ScriptedRandom
