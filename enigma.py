# enigma.py  ─────────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from copy import deepcopy

from catalog import DEFAULT_REFLECTOR, ROTORS, RotorSpec, resolve_reflector, resolve_rotor
from debug import debug
from errors import ConfigurationError
from keyboard_and_plugboard import KEYBOARD, Plugboard, to_letter
from rotor_and_reflector import Reflector, Rotor
from settings import MachineSettings, RotorKey, Setting, normalise_triple



class Enigma:
    """Three-rotor machine: left, middle and right wheel, reflector, plugboard.

    Encrypting and decrypting are the same operation; two machines built
    from the same settings undo each other.
    """

    def __init__(
        self,
        rotors: Sequence[RotorKey],
        positions: Iterable[Setting] = (0, 0, 0),
        rings: Iterable[Setting] = (0, 0, 0),
        plugs: Iterable[str | Sequence[str]] = (),
        *,
        catalog: Mapping[str, RotorSpec] = ROTORS,
        reflector: str | Reflector = DEFAULT_REFLECTOR,
    ) -> None:
        settings = MachineSettings.create(rotors, positions, rings, plugs)
        self._assemble(settings, catalog, reflector)

    @classmethod
    def from_settings(
        cls,
        settings: MachineSettings,
        *,
        catalog: Mapping[str, RotorSpec] = ROTORS,
        reflector: str | Reflector = DEFAULT_REFLECTOR,
    ) -> "Enigma":
        if not isinstance(settings, MachineSettings):
            raise ConfigurationError(f"expected MachineSettings, got {type(settings).__name__}")
        inst = object.__new__(cls)          # MachineSettings checks itself on construction
        inst._assemble(settings, catalog, reflector)
        return inst

    def _assemble(
        self,
        settings: MachineSettings,
        catalog: Mapping[str, RotorSpec],
        reflector: str | Reflector,
    ) -> None:
        # fresh wheels per machine; nothing mutable is shared
        specs = [resolve_rotor(key, catalog) for key in settings.rotors]
        self.rotors: list[Rotor] = [
            Rotor(spec.wiring, spec.notch, ring, pos)
            for spec, ring, pos in zip(specs, settings.rings, settings.positions)
        ]
        self.reflector: Reflector = resolve_reflector(reflector)
        self.plugboard = Plugboard(settings.plugs)
        self.settings = settings

    # ── key helpers ────────────────────────────────────────────

    @property
    def positions(self) -> tuple[int, int, int]:
        left, middle, right = self.rotors
        return left.position, middle.position, right.position

    @property
    def window(self) -> str:
        """Letters currently showing, left to right."""
        return "".join(to_letter(r.position) for r in self.rotors)

    def set_key(self, key: Iterable[Setting]) -> None:
        """Turn the rotors to a new window, e.g. ``"ADU"`` or ``[0, 3, 20]``."""
        for rotor, pos in zip(self.rotors, normalise_triple(key, "position")):
            rotor.position = pos

    def rewind(self) -> None:
        """Return to the starting window the machine was configured with."""
        self.set_key(self.settings.positions)

    def copy(self) -> "Enigma":
        """Independent machine with the same wiring and current window."""
        return deepcopy(self)

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        left, middle, right = self.rotors

        # both notches are read before anything moves
        middle_at_notch = middle.at_notch()
        right_at_notch = right.at_notch()

        if middle_at_notch:
            # double step: the middle pawl drags its own wheel along
            left.step()
            middle.step()
        elif right_at_notch:
            middle.step()
        right.step()

        if debug.is_enabled("stepping"):
            debug.log("stepping", f"window {self.window}")

    # ── encipher one symbol  ────────────────────────────────────

    def _encipher(self, letter: str) -> str:
        c = self.plugboard.swap(letter)

        for rotor in reversed(self.rotors):
            c = rotor.forward(c)

        c = self.reflector.reflect(c)

        for rotor in self.rotors:
            c = rotor.backward(c)

        return self.plugboard.swap(c)

    def encrypt_char(self, ch: str) -> str:
        """Step and substitute one letter; anything else is returned as-is."""
        letter = KEYBOARD.press(ch)
        if letter is None:
            return ch

        self._step_rotors()
        out = self._encipher(letter)
        debug.log("encipher", f"{letter}->{out}")
        return out

    def process(self, text: str) -> str:
        """Encrypt (or decrypt) *text*; non-letters pass through without a keystroke."""
        return "".join(self.encrypt_char(ch) for ch in text)

    def __repr__(self) -> str:
        names = "-".join(str(k) for k in self.settings.rotors)
        return f"<Enigma {names} window={self.window} {self.plugboard!r}>"
