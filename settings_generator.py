# settings_generator.py
from __future__ import annotations

from collections.abc import Mapping
from random import Random, SystemRandom

from catalog import ROTORS, RotorSpec
from errors import ConfigurationError
from keyboard_and_plugboard import ALPHABET, SIZE
from settings import ROTOR_COUNT, MachineSettings

MAX_PAIRS = SIZE // 2


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> list[str]:
    """Return *k* disjoint plug pairs (capped at 13)."""
    k = max(0, min(k, MAX_PAIRS))
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_settings(
    seed: int | None = None,
    *,
    pairs: int = 10,
    catalog: Mapping[str, RotorSpec] = ROTORS,
) -> MachineSettings:
    """Draw a random daily key: three distinct rotors, window, rings, plugs."""
    if len(catalog) < ROTOR_COUNT:
        raise ConfigurationError(f"catalog needs at least {ROTOR_COUNT} rotors")

    rng = build_rng(seed)
    rotors = rng.sample(list(catalog), ROTOR_COUNT)
    positions = [rng.randrange(SIZE) for _ in rotors]
    rings = [rng.randrange(SIZE) for _ in rotors]
    plugs = choose_pairs(pairs, rng)

    return MachineSettings.create(rotors, positions, rings, plugs)
