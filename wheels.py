# wheels.py
from __future__ import annotations

from typing import Dict, Tuple

from errors import ConfigurationError
from keyboard_and_plugboard import Stator
from rotor_and_reflector import Rotor, Reflector

# ────────────────────────────────────────────────────────────────────────
#  Wheel database
# ────────────────────────────────────────────────────────────────────────

# name -> (wiring, turnover)
ROTORS: Dict[str, Tuple[str, str]] = {
    "I":   ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    "II":  ("AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    "III": ("BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    "IV":  ("ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    "V":   ("VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
}

REFLECTORS: Dict[str, str] = {
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
}

STATORS: Dict[str, str] = {
    "ARMY":       "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "COMMERCIAL": "QWERTZUIOASDFGHJKPYXCVBNML",
}


def _entry(catalog: Dict, kind: str, name: str):
    key = str(name).strip().upper()
    try:
        return key, catalog[key]
    except KeyError:
        raise ConfigurationError(
            f"Unknown {kind} {name!r}. Expected one of {list(catalog)}"
        ) from None


# ── factories: a fresh object per call, never a shared instance ─────────
def make_rotor(name: str, position: str = "A") -> Rotor:
    key, (wiring, turnover) = _entry(ROTORS, "rotor", name)
    return Rotor(wiring, turnover, position, name=key)


def make_reflector(name: str) -> Reflector:
    key, wiring = _entry(REFLECTORS, "reflector", name)
    return Reflector(wiring, name=key)


def make_stator(name: str) -> Stator:
    _, wiring = _entry(STATORS, "stator", name)
    return Stator(wiring)


__all__ = [
    "ROTORS",
    "REFLECTORS",
    "STATORS",
    "make_rotor",
    "make_reflector",
    "make_stator",
]
