# keyboard_and_plugboard.py
from __future__ import annotations

from collections.abc import Iterable, Sequence
from debug import debug
from errors import ConfigurationError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SIZE = len(ALPHABET)


def wrap(n: int) -> int:
    """Normalise any offset into 0‥25."""
    return n % SIZE


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    # letter → integer signal
    def forward(self, letter: str) -> int:
        try:
            return self.alpha_to_index[letter]
        except KeyError:
            raise ValueError(
                f"Invalid character {letter!r} for current alphabet."
            ) from None

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < len(self.alphabet)):
            hi = len(self.alphabet) - 1
            raise ValueError(f"Signal {signal} out of range 0–{hi}")
        return self.alphabet[signal]

    def press(self, key: str) -> str | None:
        """Return the canonical (upper-case) letter for *key*, or None when
        the key is not a letter of the alphabet."""
        if not isinstance(key, str) or len(key) != 1:
            return None
        letter = key.upper()
        return letter if letter in self.alpha_to_index else None


KEYBOARD = Keyboard()
to_index = KEYBOARD.forward
to_letter = KEYBOARD.backward


# ── Plugboard ─────────────────────────────────────────────────────
def plugboard_swap(letter: str, pairs: Iterable[Sequence[str]]) -> str:
    """Return the partner of *letter* if it is plugged, else *letter*."""
    for a, b in pairs:
        if letter == a:
            return b
        if letter == b:
            return a
    return letter


def normalise_pair(raw: str | Sequence[str]) -> tuple[str, str]:
    """Turn ``"ab"`` or ``("a", "b")`` into ``("A", "B")``."""
    if isinstance(raw, str):
        if len(raw) != 2:
            raise ConfigurationError(f"Pair {raw!r} must be exactly 2 letters")
        a, b = raw
    else:
        try:
            a, b = raw
        except (TypeError, ValueError):
            raise ConfigurationError(
                f"Pair {raw!r} must be exactly 2 letters"
            ) from None

    if not (isinstance(a, str) and isinstance(b, str)):
        raise ConfigurationError(f"Pair {raw!r} must hold letters")

    a, b = a.upper(), b.upper()
    for ch in (a, b):
        if ch not in KEYBOARD.alpha_to_index:
            raise ConfigurationError(f"Symbol {ch!r} not in alphabet")
    if a == b:
        raise ConfigurationError(f"Plugboard cannot map a letter to itself: {a}")
    return a, b


class Plugboard:
    def __init__(self, pairs: Iterable[str | Sequence[str]] = ()) -> None:
        self.mapping: dict[str, str] = {ch: ch for ch in ALPHABET}
        normalised: list[tuple[str, str]] = []
        used: set[str] = set()

        for raw in pairs:
            a, b = normalise_pair(raw)
            if a in used or b in used:
                dup = a if a in used else b
                raise ConfigurationError(f"Letter {dup!r} already used in plugboard")

            self.mapping[a], self.mapping[b] = b, a
            used.update((a, b))
            normalised.append((a, b))

        self._pairs: tuple[tuple[str, str], ...] = tuple(normalised)

    @property
    def pairs(self) -> tuple[tuple[str, str], ...]:
        return self._pairs

    def swap(self, letter: str) -> str:
        mapped = self.mapping.get(letter, letter)
        debug.log("plugboard", f"{letter}->{mapped}")
        return mapped

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        swaps = [a + b for a, b in self._pairs]
        return f"<Plugboard {' '.join(swaps)}>"
