# config.py
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List

from enigma import Enigma
from errors import ConfigurationError
from keyboard_and_plugboard import Keyboard, Plugboard
from wheels import make_reflector, make_rotor, make_stator

REQUIRED_KEYS = {"rotors", "positions", "reflector"}


def _word_list(value, key: str) -> List[str]:
    """Accept "I II III" or ["I", "II", "III"]; anything else is a config error."""
    if isinstance(value, str):
        return value.split()
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    raise ConfigurationError(f"{key!r} must be a list of strings, got {value!r}")


@dataclass(slots=True)
class MachineConfig:
    """Everything that decides the ciphertext for a session."""

    rotors: List[str] = field(default_factory=lambda: ["I", "II", "III"])   # left → right
    positions: str = "AAA"          # window letters, left → right
    reflector: str = "B"
    stator: str = "army"
    plugs: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "MachineConfig":
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise ConfigurationError(f"Missing keys in config: {', '.join(sorted(missing))}")

        for key in ("positions", "reflector", "stator"):
            if key in data and not isinstance(data[key], str):
                raise ConfigurationError(f"{key!r} must be a string, got {data[key]!r}")

        return cls(
            rotors=_word_list(data["rotors"], "rotors"),
            positions=data["positions"].upper(),
            reflector=data["reflector"],
            stator=data.get("stator", "army"),
            plugs=[p.upper() for p in _word_list(data.get("plugs") or [], "plugs")],
        )

    def to_dict(self) -> dict:
        return asdict(self)


def load_config(path: str | Path) -> MachineConfig:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"{path}: not valid UTF-8 JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a JSON object")
    return MachineConfig.from_dict(data)


def save_config(cfg: MachineConfig, path: str | Path) -> None:
    Path(path).write_text(json.dumps(cfg.to_dict(), indent=2), encoding="utf-8")


def build_machine(cfg: MachineConfig) -> Enigma:
    """Assemble a fresh machine; raises ConfigurationError on any bad choice."""
    if len(cfg.positions) != len(cfg.rotors):
        raise ConfigurationError(
            f"{len(cfg.rotors)} rotors but {len(cfg.positions)} start positions "
            f"({cfg.positions!r})"
        )

    rotors = [make_rotor(name, pos) for name, pos in zip(cfg.rotors, cfg.positions)]

    return Enigma(
        Keyboard(),
        Plugboard(cfg.plugs),
        make_stator(cfg.stator),
        rotors,
        make_reflector(cfg.reflector),
    )
