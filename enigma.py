# enigma.py  ───────────────────────────────────────────────────────
from __future__ import annotations

from alphabet import Direction, letter_to_ordinal
from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import Keyboard, Plugboard, Stator
from rotor_and_reflector import Reflector, Rotor

debug = Debug()
debug.disable("stepping", "encipher")


class Enigma:
    """Rotor machine; `rotors` are listed left to right, right is next to the stator.

    Not safe to share between threads: every keystroke mutates rotor state.
    """

    def __init__(
        self,
        kb: Keyboard,
        pb: Plugboard,
        stator: Stator,
        rotors: list[Rotor],
        reflector: Reflector,
    ) -> None:
        if not rotors:
            raise ConfigurationError("at least one rotor is required")

        self.kb        = kb
        self.pb        = pb
        self.stator    = stator
        self.rotors    = rotors
        self.reflector = reflector

    # ── key helpers ─────────────────────────────────────────────

    @property
    def positions(self) -> str:
        """Window letters, left to right."""
        return "".join(r.window for r in self.rotors)

    def set_positions(self, key: str) -> None:
        """Rotate each rotor to its visible window letter."""
        if len(key) != len(self.rotors):
            raise ConfigurationError(
                f"need {len(self.rotors)} start positions, got {key!r}"
            )
        if any(letter_to_ordinal(ch) is None for ch in key):
            raise ConfigurationError(f"start positions must be letters, got {key!r}")
        for rotor, letter in zip(self.rotors, key):
            rotor.set_position(letter)

    # ── stepping logic  ─────────────────────────────────────────

    def step_rotors(self) -> None:
        """Advance rotors one key-press.

        Every rotor that has a left neighbour carries a pawl: when that rotor
        sits on its turnover letter it pushes both its neighbour and itself.
        The rightmost rotor always advances. With three rotors this gives the
        historic rule, including the middle rotor's double step. Other rotor
        counts follow the same pawl rule but were never checked against a
        physical machine.
        """
        # decide which rotors step from pre-step positions only (two-phase)
        last = len(self.rotors) - 1
        stepping = {last}
        for i in range(1, len(self.rotors)):
            if self.rotors[i].at_turnover():
                stepping.update((i - 1, i))

        for i in sorted(stepping):
            self.rotors[i].advance()
        debug.log("stepping", f"stepped {sorted(stepping)} -> {self.positions}")

    # ── encipher one symbol  ────────────────────────────────────

    def encrypt_char(self, letter: str) -> str:
        # validate first: a rejected key must not move the rotors
        signal = self.kb.forward(letter)
        self.step_rotors()

        signal = self.pb.swap(signal)
        signal = self.stator.pass_to(Direction.FORWARD, signal)

        for rotor in reversed(self.rotors):
            signal = rotor.encode(Direction.FORWARD, signal)

        signal = self.reflector.reflect(signal)

        for rotor in self.rotors:
            signal = rotor.encode(Direction.INVERSE, signal)

        signal = self.stator.pass_to(Direction.INVERSE, signal)
        signal = self.pb.swap(signal)
        out_ch = self.kb.backward(signal)
        debug.log("encipher", f"{letter} -> {out_ch} [{self.positions}]")
        return out_ch

    def encrypt(self, text: str) -> str:
        """Encipher a run of letters; deciphering is the same call on a fresh key."""
        return "".join(self.encrypt_char(ch) for ch in text)

    decrypt = encrypt

    def __repr__(self) -> str:
        names = " ".join(r.name for r in self.rotors)
        return f"<Enigma {names} {self.reflector.name} pos={self.positions}>"
