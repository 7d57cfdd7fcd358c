# catalog.py
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import NamedTuple

from errors import ConfigurationError
from rotor_and_reflector import Reflector


class RotorSpec(NamedTuple):
    wiring: str
    notch: str


# ────────────────────────────────────────────────────────────────────────
#  Wheel database
# ────────────────────────────────────────────────────────────────────────

# Enigma I rotors, in catalog order (index 0 is "I") ---------------------
ROTORS: Mapping[str, RotorSpec] = MappingProxyType({
    "I":   RotorSpec("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    "II":  RotorSpec("AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    "III": RotorSpec("BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    "IV":  RotorSpec("ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    "V":   RotorSpec("VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
})

# Reflectors (Umkehrwalze) ------------------------------------------------
REFLECTORS: Mapping[str, str] = MappingProxyType({
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
})

DEFAULT_REFLECTOR = "B"


def resolve_rotor(key: str | int, catalog: Mapping[str, RotorSpec] = ROTORS) -> RotorSpec:
    """Look a rotor up by name (``"III"``, any case) or catalog index (``2``)."""
    if isinstance(key, bool):
        raise ConfigurationError(f"Unknown rotor {key!r}")
    if isinstance(key, int):
        names = list(catalog)
        if not 0 <= key < len(names):
            raise ConfigurationError(
                f"Rotor index {key} out of range 0-{len(names) - 1}"
            )
        return catalog[names[key]]
    if isinstance(key, str):
        try:
            return catalog[key.strip().upper()]
        except KeyError:
            raise ConfigurationError(
                f"Unknown rotor {key!r}. Expected one of {list(catalog)}"
            ) from None
    raise ConfigurationError(f"Unknown rotor {key!r}")


def resolve_reflector(choice: str | Reflector = DEFAULT_REFLECTOR) -> Reflector:
    """Return a Reflector for a catalog name or pass an existing one through."""
    if isinstance(choice, Reflector):
        return choice
    if isinstance(choice, str):
        wiring = REFLECTORS.get(choice.strip().upper())
        if wiring is not None:
            return Reflector(wiring)
    raise ConfigurationError(
        f"Unknown reflector {choice!r}. Expected one of {list(REFLECTORS)}"
    )


__all__ = [
    "ROTORS",
    "REFLECTORS",
    "DEFAULT_REFLECTOR",
    "RotorSpec",
    "resolve_rotor",
    "resolve_reflector",
]
