# rotor_and_reflector.py
from __future__ import annotations
from debug import debug
from errors import ConfigurationError
from keyboard_and_plugboard import ALPHABET, SIZE, to_index, to_letter, wrap


def _check_offset(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < SIZE:
        raise ConfigurationError(f"{what} must be an integer 0-{SIZE - 1}, got {value!r}")
    return value


class Rotor:
    def __init__(
        self,
        wiring: str,
        notch: str,
        ring_setting: int = 0,
        position: int = 0,
    ) -> None:
        if not isinstance(wiring, str) or sorted(wiring.upper()) != sorted(ALPHABET):
            raise ConfigurationError("wiring must be a permutation of the alphabet")
        if not isinstance(notch, str) or len(notch) != 1 or notch.upper() not in ALPHABET:
            raise ConfigurationError(f"notch must be a single letter, got {notch!r}")

        self._wiring = wiring.upper()
        self._notch = notch.upper()
        self._ring_setting = _check_offset(ring_setting, "ring setting")
        self._position = _check_offset(position, "position")

        # integer lookup tables
        self._fwd = [to_index(c) for c in self._wiring]
        self._rev = [self._wiring.index(c) for c in ALPHABET]

    # ── fixed configuration ───────────────────────────────────────
    @property
    def wiring(self) -> str:
        return self._wiring

    @property
    def notch(self) -> str:
        return self._notch

    @property
    def ring_setting(self) -> int:
        return self._ring_setting

    # ── stepping --------------------------------------------------
    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        self._position = _check_offset(value, "position")

    def step(self) -> None:
        self._position = wrap(self._position + 1)

    def at_notch(self) -> bool:
        """True when the window shows the notch letter (ring setting ignored)."""
        return self._position == to_index(self._notch)

    # ── signal paths ---------------------------------------------
    def _shift(self) -> int:
        return wrap(self._position - self._ring_setting)

    def forward(self, letter: str) -> str:
        shift = self._shift()
        mapped = self._fwd[wrap(to_index(letter) + shift)]
        out = to_letter(wrap(mapped - shift))
        debug.log("rotor", f"fwd {letter}->{out} pos={self.position}")
        return out

    def backward(self, letter: str) -> str:
        shift = self._shift()
        mapped = self._rev[wrap(to_index(letter) + shift)]
        out = to_letter(wrap(mapped - shift))
        debug.log("rotor", f"bwd {letter}->{out} pos={self.position}")
        return out

    def __repr__(self) -> str:
        return (
            f"<Rotor {self._wiring[:3]}… notch={self._notch} "
            f"pos={self.position} ring={self._ring_setting}>"
        )


class Reflector:
    def __init__(self, wiring: str) -> None:
        if not isinstance(wiring, str) or len(wiring) != SIZE:
            raise ConfigurationError("Reflector wiring length must match alphabet length")
        wiring = wiring.upper()
        if sorted(wiring) != sorted(ALPHABET):
            raise ConfigurationError("Reflector wiring must be a permutation of the alphabet")

        # involution: w[i] = j ⇒ w[j] = i
        for i, c in enumerate(wiring):
            if wiring[to_index(c)] != ALPHABET[i]:
                raise ConfigurationError("Reflector wiring must be an involution")

        self.wiring = wiring

    def reflect(self, letter: str) -> str:
        out = self.wiring[to_index(letter)]
        debug.log("reflector", f"{letter}->{out}")
        return out

    def __repr__(self) -> str:
        return f"<Reflector {self.wiring}>"
