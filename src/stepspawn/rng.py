from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
GOLDEN = 0x6D2B79F5        # mulberry32 state increment
RUN_SEED_MUL = 2654435761  # Knuth multiplicative hash used to derive per-run seeds
TWO_32 = 4294967296.0

def imul(a: int, b: int) -> int:
    """32-bit wrapping multiply (unsigned result)."""
    return (a * b) & MASK32

def mulberry_next(state: int) -> int:
    return (state + GOLDEN) & MASK32

def mulberry_output(state: int) -> int:
    """Mix an advanced state word into a 32-bit output."""
    t = state
    t = imul(t ^ (t >> 15), t | 1)
    t ^= (t + imul(t ^ (t >> 7), t | 61)) & MASK32
    return (t ^ (t >> 14)) & MASK32

def seed_for_run(run: int) -> int:
    """Seed of the n-th simulated run (runs are numbered from 1)."""
    return (run * RUN_SEED_MUL) & MASK32

@dataclass
class Mulberry32:
    state: int

    def __post_init__(self) -> None:
        self.state &= MASK32

    def next(self) -> float:
        self.state = mulberry_next(self.state)
        return mulberry_output(self.state) / TWO_32

    def int(self, lo: int, hi: int) -> int:
        if hi < lo:
            raise ValueError(f"empty range [{lo}, {hi}]")
        # floor() of a non-negative float; int() truncates the same way
        return int(self.next() * (hi - lo + 1)) + lo

    def float(self, lo: float, hi: float) -> float:
        return self.next() * (hi - lo) + lo

    def bool(self, p: float = 0.5) -> bool:
        return self.next() < p

    def weighted(self, items: Sequence[Tuple[T, float]]) -> T:
        """
        Subtract each weight from a running remainder and return the first
        item where it drops to <= 0. Float rounding can leave a positive
        remainder after the last item; the last item wins then.
        """
        if not items:
            raise ValueError("weighted() needs at least one item")
        # Plain left-to-right accumulation: builtin sum() compensates
        # rounding on newer interpreters and would shift the draw.
        total = 0.0
        for _, w in items:
            total += w
        r = self.next() * total
        for item, w in items:
            r -= w
            if r <= 0:
                return item
        return items[-1][0]

    def clone(self) -> "Mulberry32":
        # Only for deliberate forking; a sequence must own its generator.
        return Mulberry32(self.state)
