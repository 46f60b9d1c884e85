# settings_generator.py
from __future__ import annotations

import argparse
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from alphabet import ALPHA26
from config import MachineConfig, save_config
from keyboard_and_plugboard import MAX_PAIRS
from wheels import REFLECTORS, ROTORS

# historical daily sheets used ten cables
DEFAULT_PAIRS = 10

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = max(0, min(k, MAX_PAIRS))
    pool = list(ALPHA26)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_config(
    rng: Random | SystemRandom,
    *,
    n_rot: int = 3,
    n_pairs: int = DEFAULT_PAIRS,
    stator: str = "army",
) -> MachineConfig:
    rotors = rng.sample(sorted(ROTORS), n_rot)
    return MachineConfig(
        rotors=rotors,
        positions="".join(rng.choice(ALPHA26) for _ in rotors),
        reflector=rng.choice(sorted(REFLECTORS)),
        stator=stator,
        plugs=choose_pairs(n_pairs, rng),
    )


def parse_cli(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a daily Enigma key sheet")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--pairs", type=int, default=DEFAULT_PAIRS, help="Number of plug cables (0-13)")
    p.add_argument("--stator", choices=["army", "commercial"], default="army")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_config.json"),
        help="Destination JSON file (default: enigma_config.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_cli(argv)

    rng = build_rng(args.seed)
    cfg = generate_config(rng, n_pairs=args.pairs, stator=args.stator)
    save_config(cfg, args.outfile)

    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {cfg.rotors}\n"
        f"   positions   : {cfg.positions}\n"
        f"   reflector   : {cfg.reflector}\n"
        f"   stator      : {cfg.stator}\n"
        f"   plug pairs  : {len(cfg.plugs)}")


if __name__ == "__main__":
    main()
