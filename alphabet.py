# alphabet.py
from __future__ import annotations

import string
from enum import Enum

from errors import ConfigurationError

ALPHA26 = string.ascii_uppercase
SIZE = len(ALPHA26)


# ── letter <-> ordinal codec ──────────────────────────────────────
def letter_to_ordinal(ch: str) -> int | None:
    """0..25 for a single Latin letter (either case), None for anything else."""
    if not isinstance(ch, str) or len(ch) != 1:
        return None
    idx = ALPHA26.find(ch.upper())
    return idx if idx >= 0 else None


def ordinal_to_letter(n: int) -> str | int:
    """Letter for 0..25. Anything outside that range is handed back untouched,
    so callers must reduce modulo 26 first."""
    if not 0 <= n < SIZE:
        return n
    return ALPHA26[n]


class Direction(Enum):
    FORWARD = "forward"     # keyboard side -> reflector
    INVERSE = "inverse"     # reflector -> keyboard side


# ── shared wiring table ───────────────────────────────────────────
class WiringTable:
    """A permutation of the alphabet stored both ways as ordinal lists."""

    __slots__ = ("wiring", "_fwd", "_rev")

    def __init__(self, wiring: str) -> None:
        self.wiring = wiring
        self._fwd = [ALPHA26.index(c) for c in wiring]
        self._rev = [0] * SIZE
        for i, j in enumerate(self._fwd):
            self._rev[j] = i

    def lookup(self, direction: Direction, sig: int) -> int:
        if direction is Direction.FORWARD:
            return self._fwd[sig]
        return self._rev[sig]

    def forward(self, sig: int) -> int:
        return self._fwd[sig]

    def inverse(self, sig: int) -> int:
        return self._rev[sig]

    def is_involution(self) -> bool:
        return self._fwd == self._rev

    def fixed_points(self) -> str:
        return "".join(ALPHA26[i] for i, j in enumerate(self._fwd) if i == j)

    def __repr__(self) -> str:
        return f"<WiringTable {self.wiring}>"


def build_wiring_table(wiring: str) -> WiringTable:
    """Validate a 26-letter catalog entry and turn it into a WiringTable."""
    wiring = wiring.upper()
    if sorted(wiring) != sorted(ALPHA26):
        raise ConfigurationError(f"wiring {wiring!r} must be a permutation of {ALPHA26}")
    return WiringTable(wiring)
