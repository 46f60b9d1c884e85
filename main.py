# main.py
from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List

from config import MachineConfig, build_machine, load_config
from debug import Debug
from enigma import Enigma
from utilities import get_machine_settings, group_text, preprocess_message, render_interface

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()

EXIT_KEY = "\x18"       # Ctrl+X


@dataclass(slots=True)
class DisplayConfig:
    """How the session screen lays out text."""

    group: int = 4      # letters per group
    line: int = 40      # letters per line
    clear: bool = True  # wipe the terminal before each redraw


# ────────────────────────────────────────────────────────────────────────
#  1. Keyboard session
# ────────────────────────────────────────────────────────────────────────


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


class Session:
    """Holds what was typed and what lit up, for the redraw."""

    def __init__(self, machine: Enigma, display: DisplayConfig) -> None:
        self.machine = machine
        self.display = display
        self.text: List[str] = []
        self.cipher: List[str] = []

    def feed(self, line: str) -> bool:
        """Press every key on *line*; False once the operator asks to leave."""
        if not line or EXIT_KEY in line:
            line = line.split(EXIT_KEY, 1)[0]
            self._press_all(line)
            return False
        self._press_all(line)
        return True

    def _press_all(self, line: str) -> None:
        for ch in preprocess_message(line):
            self.text.append(ch)
            self.cipher.append(self.machine.encrypt_char(ch))

    def render(self) -> str:
        return render_interface(
            self.machine,
            "".join(self.text),
            "".join(self.cipher),
            self.display.group,
            self.display.line,
        )

    def run(self, reader: Callable[[str], str] = input) -> None:
        while True:
            if self.display.clear:
                clear_screen()
            print(self.render())
            try:
                line = reader("> ")
            except (EOFError, KeyboardInterrupt):
                print()
                break
            if not self.feed(line):
                break


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a three-rotor Enigma")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encipher. If omitted, an interactive session starts.")
    p.add_argument("--rotors", nargs="+", default=["I", "II", "III"], metavar="NAME", help="Rotor types, left to right. Default: I II III")
    p.add_argument("--positions", default=None, metavar="LETTERS", help="Start positions, left to right. Default: all A")
    p.add_argument("--reflector", default="B", help="Reflector A, B or C. Default: B")
    p.add_argument("--stator", default="army", help="Entry wheel: army or commercial. Default: army")
    p.add_argument("--plugs", default="", metavar="PAIRS", help='Plug pairs, e.g. "AB CD EF"')
    p.add_argument("--group", type=int, default=4, help="Letters per display group. Default: 4")
    p.add_argument("--line", type=int, default=40, help="Letters per display line. Default: 40")
    p.add_argument("--no-clear", dest="clear", action="store_false", help="Do not clear the screen between keystrokes")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON instead of flags.")
    p.add_argument("--interactive", action="store_true", help="Ignore flags and answer the settings prompts.")
    p.add_argument("--debug", nargs="+", default=[], metavar="COMPONENT", help="Log signal-path stages, e.g. rotor stepping")
    return p.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> MachineConfig:
    if args.config:
        return load_config(Path(args.config))
    if args.interactive:
        return get_machine_settings()
    return MachineConfig(
        rotors=[r.upper() for r in args.rotors],
        positions=(args.positions or "A" * len(args.rotors)).upper(),
        reflector=args.reflector,
        stator=args.stator,
        plugs=args.plugs.split(),
    )


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)

    try:
        if args.debug:
            debug.enable(*args.debug)
        cfg = config_from_args(args)
        machine = build_machine(cfg)
    except (ValueError, OSError) as e:     # EnigmaError or unknown --debug component
        sys.exit(f"❌  {e}")

    if args.group < 1 or args.line < 1:
        sys.exit("❌  --group and --line must be positive")
    display = DisplayConfig(group=args.group, line=args.line, clear=args.clear)

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        cipher = machine.encrypt(preprocess_message(args.message))
        print(group_text(cipher, display.group, display.line))
        return

    Session(machine, display).run()


if __name__ == "__main__":
    main()
