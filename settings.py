# settings.py
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from debug import debug
from errors import ConfigurationError
from keyboard_and_plugboard import SIZE, KEYBOARD, Plugboard, to_letter

ROTOR_COUNT = 3

RotorKey = str | int
Setting = str | int


def normalise_setting(value: Setting, what: str = "setting") -> int:
    """Accept ``0‥25`` or a single letter (``"A"`` → 0) and return the index."""
    if isinstance(value, bool):
        raise ConfigurationError(f"{what} must be 0-{SIZE - 1} or a letter, got {value!r}")
    if isinstance(value, int):
        if 0 <= value < SIZE:
            return value
        raise ConfigurationError(f"{what} {value} out of range 0-{SIZE - 1}")
    if isinstance(value, str):
        letter = KEYBOARD.press(value)
        if letter is not None:
            return KEYBOARD.forward(letter)
    raise ConfigurationError(f"{what} must be 0-{SIZE - 1} or a letter, got {value!r}")


def normalise_triple(values: Iterable[Setting], what: str) -> tuple[int, int, int]:
    # "AAA" is as good as ["A", "A", "A"]
    try:
        items = list(values)
    except TypeError:
        raise ConfigurationError(f"{what}s must be a sequence, got {values!r}") from None
    if len(items) != ROTOR_COUNT:
        raise ConfigurationError(
            f"Need exactly {ROTOR_COUNT} {what}s, got {len(items)}"
        )
    return tuple(normalise_setting(v, what) for v in items)  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class MachineSettings:
    """Everything needed to build a machine, fixed once created.

    Fields are normalised and checked on construction, so any instance,
    however it was built, describes a valid three-rotor machine. Rotor keys
    are kept as given; they are resolved against a catalog when the machine
    is assembled.
    """

    rotors: tuple[RotorKey, RotorKey, RotorKey]
    positions: tuple[int, int, int] = (0, 0, 0)
    rings: tuple[int, int, int] = (0, 0, 0)
    plugs: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        rotors = self.rotors
        if isinstance(rotors, str) or not isinstance(rotors, Sequence):
            raise ConfigurationError(f"rotors must be a sequence of {ROTOR_COUNT} keys")
        if len(rotors) != ROTOR_COUNT:
            raise ConfigurationError(
                f"Need exactly {ROTOR_COUNT} rotors, got {len(rotors)}"
            )

        # frozen: normalised values go in through object.__setattr__
        object.__setattr__(self, "rotors", tuple(rotors))
        object.__setattr__(self, "positions", normalise_triple(self.positions, "position"))
        object.__setattr__(self, "rings", normalise_triple(self.rings, "ring setting"))
        object.__setattr__(self, "plugs", Plugboard(self.plugs).pairs)
        debug.log("settings", repr(self))

    @classmethod
    def create(
        cls,
        rotors: Sequence[RotorKey],
        positions: Iterable[Setting] = (0, 0, 0),
        rings: Iterable[Setting] = (0, 0, 0),
        plugs: Iterable[str | Sequence[str]] = (),
    ) -> "MachineSettings":
        """Build settings from raw values (letters or ints, ``"AB"`` pairs)."""
        return cls(
            rotors=rotors,  # type: ignore[arg-type]
            positions=positions,  # type: ignore[arg-type]
            rings=rings,  # type: ignore[arg-type]
            plugs=plugs,  # type: ignore[arg-type]
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MachineSettings":
        """Build settings from a JSON-style dict.

        Recognised keys: ``rotors`` (required), ``positions`` or ``key``,
        ``rings`` or ``ring_set``, ``plugs`` or ``plugboard``.
        """
        if "rotors" not in data:
            raise ConfigurationError("Missing keys in config: rotors")
        return cls.create(
            data["rotors"],
            data.get("positions", data.get("key", (0, 0, 0))),
            data.get("rings", data.get("ring_set", (0, 0, 0))),
            data.get("plugs", data.get("plugboard", ())),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "rotors": list(self.rotors),
            "positions": list(self.positions),
            "rings": list(self.rings),
            "plugs": [a + b for a, b in self.plugs],
        }

    @property
    def key(self) -> str:
        """Starting window letters, e.g. ``"ADU"``."""
        return "".join(to_letter(p) for p in self.positions)
