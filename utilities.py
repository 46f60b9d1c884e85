# utilities.py
from __future__ import annotations

from typing import Callable, List, Set, Tuple

from alphabet import ALPHA26
from config import MachineConfig
from enigma import Enigma
from keyboard_and_plugboard import MAX_PAIRS
from wheels import REFLECTORS, ROTORS, STATORS

ROTOR_COUNT = 3

# ────────────────────────────────────────────────────────────────────────
#  0. Trivial helpers
# ────────────────────────────────────────────────────────────────────────


def ask(prompt: str, reader: Callable[[str], str] = input) -> str:
    """Read & normalise an operator’s response (uppercase, trimmed)."""
    return reader(prompt).strip().upper()


_ROMAN = {"I": 1, "II": 2, "III": 3, "IV": 4, "V": 5}


def _nat_key(name: str):
    """Sort rotor names I, II, III, IV, V rather than alphabetically."""
    return (_ROMAN.get(name, 99), name)


# ────────────────────────────────────────────────────────────────────────
#  1. Text preprocessing & rendering
# ────────────────────────────────────────────────────────────────────────


def preprocess_message(msg: str) -> str:
    """Upper‑case and drop everything the keyboard has no key for."""
    return "".join(ch for ch in msg.upper() if ch in ALPHA26)


def group_text(letters: str, group: int = 4, line: int = 40) -> str:
    """Space every `group` letters and break the line every `line` letters."""
    out: List[str] = []
    for ind, ch in enumerate(letters, 1):
        out.append(ch)
        if ind % line == 0:
            out.append("\n")
        elif ind % group == 0:
            out.append(" ")
    return "".join(out).rstrip()


def ruler(group: int = 4, line: int = 40) -> str:
    return "=" * (line + line // group)


def render_interface(machine: Enigma, text: str, cipher: str, group: int = 4, line: int = 40) -> str:
    """Rotor windows, then typed text and lamp output between rulers."""
    bar = ruler(group, line)
    windows = " | ".join(machine.positions)
    return "\n".join(
        [
            "Enigma is working. Enter an empty line or Ctrl+X to exit.",
            "",
            f"| {windows} |",
            "",
            bar,
            group_text(text, group, line),
            bar,
            group_text(cipher, group, line),
            bar,
        ]
    )


# ────────────────────────────────────────────────────────────────────────
#  2. Interactive question helpers
# ────────────────────────────────────────────────────────────────────────


def get_rotor_selection(reader: Callable[[str], str] = input) -> List[str]:
    names = sorted(ROTORS, key=_nat_key)
    print("\nAvailable Rotors:", " ".join(names))
    while True:
        sel = ask(f"Select {ROTOR_COUNT} rotors, left to right: ", reader).split()
        if len(sel) == ROTOR_COUNT and all(r in ROTORS for r in sel):
            return sel
        print(f"❌  Need exactly {ROTOR_COUNT} valid rotor names.")


def get_reflector_selection(reader: Callable[[str], str] = input) -> str:
    print("\nAvailable Reflectors: ", ", ".join(sorted(REFLECTORS)))
    while True:
        ref = ask("Select reflector (Enter for B): ", reader) or "B"
        if ref in REFLECTORS:
            return ref
        print("❌  Not a valid reflector.")


def get_stator_selection(reader: Callable[[str], str] = input) -> str:
    print("\nAvailable Stators: ", ", ".join(s.lower() for s in STATORS))
    while True:
        sta = ask("Select stator (Enter for army): ", reader) or "ARMY"
        if sta in STATORS:
            return sta.lower()
        print("❌  Not a valid stator.")


def get_positions(count: int, reader: Callable[[str], str] = input) -> str:
    while True:
        key = ask(f"{count} start positions (e.g. {'A' * count}): ", reader)
        if len(key) == count and set(key) <= set(ALPHA26):
            return key
        print(f"❌  Need exactly {count} letters A–Z.")


# ––– plugboard helpers –––––––––––––––––––––––––––––––––––––––––––

def _validate_pair(pair: str, used: Set[str]) -> Tuple[bool, str | None]:
    if len(pair) != 2:
        return False, f"❌ Pair '{pair}' must be exactly 2 characters."
    a, b = pair
    if a == b:
        return False, f"❌ Pair '{pair}' cannot map to itself."
    if {a, b} - set(ALPHA26):
        invalid = ({a, b} - set(ALPHA26)).pop()
        return False, f"❌ Invalid char '{invalid}' in pair '{pair}'."
    if {a, b} & used:
        dup = ({a, b} & used).pop()
        return False, f"❌ Char '{dup}' already used."
    return True, None


def get_plugboard(reader: Callable[[str], str] = input) -> List[str]:
    """Return a list of *validated* plugboard pairs (e.g. ["AB", "CD"])."""
    print(f"\nPlugboard pairs (≤{MAX_PAIRS}, e.g. AB CD EF):")
    while True:
        used: Set[str] = set()
        raw = ask("Pairs (Enter for none): ", reader)
        if not raw:
            return []

        pairs = raw.split()
        if len(pairs) > MAX_PAIRS:
            print(f"❌  Too many pairs (max {MAX_PAIRS}).")
            continue

        for p in pairs:
            ok, err = _validate_pair(p, used)
            if not ok:
                print(err)
                break
            used.update(p)
        else:  # only executes if no break occurred
            return pairs


# ––– orchestration –––––––––––––––––––––––––––––––––––––––––––––––

def get_machine_settings(reader: Callable[[str], str] = input) -> MachineConfig:
    """Collect the machine settings from the operator, one prompt per part."""
    rotors = get_rotor_selection(reader)
    positions = get_positions(len(rotors), reader)
    reflector = get_reflector_selection(reader)
    stator = get_stator_selection(reader)
    plugs = get_plugboard(reader)
    return MachineConfig(
        rotors=rotors,
        positions=positions,
        reflector=reflector,
        stator=stator,
        plugs=plugs,
    )


__all__ = [
    "preprocess_message",
    "group_text",
    "render_interface",
    "get_machine_settings",
]
