# debug.py
from __future__ import annotations
import logging
from typing import Dict

LOGGER_NAME = "ENIGMA"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"

# a library never configures the root logger; callers opt in via attach_console()
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

COMPONENTS = ("plugboard", "rotor", "reflector", "stepping", "encipher", "settings")


class Debug:
    """Per-component switchboard in front of the ``ENIGMA`` logger.

    Every module logs through the shared ``debug`` instance below, so one
    ``enable("rotor")`` call reaches the rotor code wherever it is made.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(LOGGER_NAME)
        self.enabled = True        # global switch
        self.components: Dict[str, bool] = dict.fromkeys(COMPONENTS, False)

    # ── logging API ──────────────────────────────────────────────
    def is_enabled(self, component: str) -> bool:
        """Lets hot paths skip building a message nobody will see."""
        return self.enabled and self.components.get(component, False)

    def log(self, component: str, message: str) -> None:
        if self.is_enabled(component):
            self.logger.debug("[%s] %s", component.upper(), message)

    def attach_console(self, level: int = logging.DEBUG) -> logging.Handler:
        """Stream ENIGMA records to stderr in the usual bracketed format."""
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        self.logger.addHandler(handler)
        self.logger.setLevel(level)
        return handler

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        self._set(components, True)

    def disable(self, *components: str) -> None:
        self._set(components, False)

    def toggle(self, component: str) -> None:
        self._set((component,), not self.components.get(component, False))

    def toggle_global(self, state: bool) -> None:
        self.enabled = state

    def status(self) -> Dict[str, bool]:
        """Copy of the component map."""
        return dict(self.components)

    def _set(self, components: tuple[str, ...], state: bool) -> None:
        unknown = [c for c in components if c not in self.components]
        if unknown:
            raise ValueError(f"No such component(s): {unknown}; expected one of {list(COMPONENTS)}")
        for c in components:
            self.components[c] = state

    def __repr__(self) -> str:
        active = [k for k, v in self.components.items() if v]
        return f"<Debug enabled={self.enabled} active={active}>"


debug = Debug()
