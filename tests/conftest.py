"""
Pytest fixtures for the Enigma tests.
"""

import pytest

from catalog import ROTORS
from enigma import Enigma
from rotor_and_reflector import Rotor


ROTOR_I_WIRING = ROTORS["I"].wiring


@pytest.fixture
def rotor_i() -> Rotor:
    """Rotor I at window A, ring A."""
    return Rotor(ROTOR_I_WIRING, "Q", 0, 0)


@pytest.fixture
def make_machine():
    """Factory for machines with rotors I-II-III unless told otherwise."""

    def _make(positions=(0, 0, 0), rings=(0, 0, 0), plugs=(), rotors=(0, 1, 2), **kwargs) -> Enigma:
        return Enigma(list(rotors), positions, rings, plugs, **kwargs)

    return _make


@pytest.fixture
def machine(make_machine) -> Enigma:
    """Rotors I-II-III, reflector B, window AAA, rings AAA, no plugs."""
    return make_machine()
