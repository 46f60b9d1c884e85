# rotor_and_reflector.py
from __future__ import annotations

from alphabet import ALPHA26, SIZE, Direction, build_wiring_table, letter_to_ordinal
from debug import Debug
from errors import ConfigurationError

debug = Debug()
debug.disable("rotor", "reflector")


def _ordinal(letter: str, what: str) -> int:
    n = letter_to_ordinal(letter)
    if n is None:
        raise ConfigurationError(f"{what} must be a single letter A-Z, got {letter!r}")
    return n


class Rotor:
    def __init__(self, wiring: str, turnover: str, position: str = "A", name: str = "") -> None:
        self.table = build_wiring_table(wiring)
        self.name = name
        self.turnover = _ordinal(turnover, "Turnover")
        self.position = _ordinal(position, "Rotor position")

    # ── window & turnover helpers ─────────────────────────────────
    @property
    def window(self) -> str:
        """Letter currently showing through the machine lid."""
        return ALPHA26[self.position]

    def set_position(self, letter: str) -> "Rotor":
        self.position = _ordinal(letter, "Rotor position")
        return self

    def at_turnover(self) -> bool:
        return self.position == self.turnover

    # ── stepping --------------------------------------------------
    def advance(self) -> None:
        self.position = (self.position + 1) % SIZE
        debug.log("rotor", f"{self.name or 'rotor'} -> {self.window}")

    # ── signal path ----------------------------------------------
    def encode(self, direction: Direction, sig: int) -> int:
        # offset into the rotated contacts, through the wiring, back out
        shift = (sig + self.position) % SIZE
        mapped = self.table.lookup(direction, shift)
        out = (mapped - self.position) % SIZE
        debug.log("rotor", f"{self.name} {direction.value} {sig}->{out} @ {self.window}")
        return out

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor {self.name} pos={self.window} turnover={ALPHA26[self.turnover]}>"


class Reflector:
    def __init__(self, wiring: str, name: str = "") -> None:
        self.table = build_wiring_table(wiring)
        self.name = name

        # w[i] = j ⇒ w[j] = i, and no letter wired to itself
        if not self.table.is_involution():
            raise ConfigurationError(f"Reflector {name!r} wiring must be an involution")
        fixed = self.table.fixed_points()
        if fixed:
            raise ConfigurationError(f"Reflector {name!r} maps {fixed} to itself")

    def reflect(self, sig: int) -> int:
        out = self.table.forward(sig)
        debug.log("reflector", f"{sig}->{out}")
        return out

    def __repr__(self) -> str:
        return f"<Reflector {self.name}>"
