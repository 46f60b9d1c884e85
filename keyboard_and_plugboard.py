# keyboard_and_plugboard.py
from __future__ import annotations

from collections.abc import Sequence

from alphabet import ALPHA26, SIZE, Direction, build_wiring_table, letter_to_ordinal, ordinal_to_letter
from debug import Debug
from errors import ConfigurationError, InvalidCharacterError

debug = Debug()
debug.disable("keyboard", "plugboard", "stator")

MAX_PAIRS = SIZE // 2


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    """Keys and lamps: the only place letters become signals and back."""

    def __init__(self, alphabet: str = ALPHA26) -> None:
        self.alphabet: str = alphabet

    # letter → integer signal
    def forward(self, letter: str) -> int:
        sig = letter_to_ordinal(letter)
        if sig is None or letter not in self.alphabet:
            raise InvalidCharacterError(f"Invalid character {letter!r}; expected one of A-Z.")
        debug.log("keyboard", f"key {letter} -> {sig}")
        return sig

    # integer signal → letter
    def backward(self, signal: int) -> str:
        # every stage reduces mod 26, so the codec pass-through is unreachable here
        assert 0 <= signal < SIZE, f"signal {signal} escaped the 0-{SIZE - 1} range"
        letter = ordinal_to_letter(signal)
        debug.log("keyboard", f"lamp {signal} -> {letter}")
        return letter


# ── Plugboard ─────────────────────────────────────────────────────
def parse_pairs(pairs: str | Sequence[str | tuple[str, str]]) -> list[tuple[str, str]]:
    """Normalise "AB CD", ["AB", "CD"] or [("A", "B")] into upper-case tuples."""
    if isinstance(pairs, str):
        pairs = pairs.split()

    out: list[tuple[str, str]] = []
    for raw in pairs:
        if len(raw) != 2:
            raise ConfigurationError(f"Pair {raw!r} must be exactly 2 letters")
        a, b = raw
        out.append((str(a).upper(), str(b).upper()))
    return out


class Plugboard:
    def __init__(self, pairs: str | Sequence[str | tuple[str, str]] = ()) -> None:
        self.mapping: list[int] = list(range(SIZE))
        self._pairs: list[tuple[str, str]] = []
        used: set[str] = set()

        parsed = parse_pairs(pairs)
        if len(parsed) > MAX_PAIRS:
            raise ConfigurationError(f"Too many plug pairs ({len(parsed)}), max {MAX_PAIRS}")

        for a, b in parsed:
            ia, ib = letter_to_ordinal(a), letter_to_ordinal(b)
            if ia is None or ib is None:
                bad = a if ia is None else b
                raise ConfigurationError(f"Symbol {bad!r} is not a letter")
            if a == b:
                raise ConfigurationError(f"Plugboard cannot map a letter to itself: {a}")
            if a in used or b in used:
                dup = a if a in used else b
                raise ConfigurationError(f"Letter {dup!r} already used in plugboard")

            # passed validation → commit swap
            self.mapping[ia], self.mapping[ib] = ib, ia
            self._pairs.append((a, b))
            used.update((a, b))

    # self-inverse, so the same call serves on the way in and out
    def swap(self, signal: int) -> int:
        out = self.mapping[signal]
        debug.log("plugboard", f"{signal}->{out}")
        return out

    @property
    def pairs(self) -> list[str]:
        return [a + b for a, b in self._pairs]

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs)}>"


# ── Stator (entry wheel) ─────────────────────────────────────────
class Stator:
    """Fixed relabelling between keyboard contacts and rotor contacts."""

    def __init__(self, wiring: str) -> None:
        self.table = build_wiring_table(wiring)

    def pass_to(self, direction: Direction, signal: int) -> int:
        out = self.table.lookup(direction, signal)
        debug.log("stator", f"{direction.value} {signal}->{out}")
        return out

    def __repr__(self) -> str:
        return f"<Stator {self.table.wiring}>"
