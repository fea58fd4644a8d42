"""Enigma Rotating Rotor (Walze)

A rotating rotor has three settings on top of its wiring:

- ``position``: the letter shown in the window (0-25), advanced by ``step``
- ``ring``: the ring setting (Ringstellung), offsetting wiring against markings
- ``notches``: positions which, when left during a step, turn the rotor
  on the left as well

Signal path with ring/position correction (all modulo 26)::

    inbound:  out = wiring[in + position - ring] - position + ring
    outbound: out = wiring.index(in + position - ring) - position + ring
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from enigma.core.charset import rot, rot_char, symbol_index
from enigma.core.constants import CHARSET, CHARSET_SIZE, TAG_ROTOR, TAG_SEPARATOR
from enigma.core.errors import RangeError
from enigma.rotors.base import BaseRotor, RotorKind

__all__ = ["RotatingRotor"]

logger = logging.getLogger(__name__)


def _check_range(value: int, what: str) -> int:
    if not isinstance(value, int) or not 0 <= value < CHARSET_SIZE:
        raise RangeError(f"{what} must be 0-{CHARSET_SIZE - 1}, got {value!r}")
    return value


class RotatingRotor(BaseRotor):
    """Rotor with ring setting, window position and turnover notches.

    Example:
    -------
        >>> rotor = RotatingRotor("EKMFLGDQVZNTOWYHXUSPAIBRCJ", notches=[16], position=16)
        >>> rotor.will_step_next
        True
        >>> rotor.step(), rotor.position
        (True, 17)
    """

    kind = RotorKind.ROTATING

    def __init__(
        self,
        charset: str,
        notches: Optional[Iterable[int]] = None,
        position: int = 0,
        ring: int = 0,
        name: Optional[str] = None,
    ) -> None:
        """Create a rotating rotor.

        Args:
        ----
            charset: 26 letter wiring.
            notches: Turnover positions (0-25); empty or None for none.
            position: Start position (0=A, 25=Z).
            ring: Ring setting (0=A, 25=Z).
            name: Catalog name, None for custom rotors.

        Raises:
        ------
            AlphabetError: If the wiring is invalid.
            RangeError: If position, ring or a notch is outside 0-25.
        """
        super().__init__(charset, name)
        self._position = _check_range(position, "Position")
        self._ring = _check_range(ring, "Ring")
        self._notches: tuple[int, ...] = ()
        self.notches = notches or ()

    # ── settings ──────────────────────────────────────────────────
    @property
    def position(self) -> int:
        """Window position (0-25)."""
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        self._position = _check_range(value, "Position")

    @property
    def ring(self) -> int:
        """Ring setting (0-25)."""
        return self._ring

    @ring.setter
    def ring(self, value: int) -> None:
        self._ring = _check_range(value, "Ring")

    @property
    def notches(self) -> tuple[int, ...]:
        """Turnover notch positions."""
        return self._notches

    @notches.setter
    def notches(self, value: Iterable[int]) -> None:
        # A set of positions; first occurrence keeps its order
        self._notches = tuple(dict.fromkeys(_check_range(n, "Notch") for n in value))

    def set_position(self, value: int) -> RotatingRotor:
        self.position = value
        return self

    def set_ring(self, value: int) -> RotatingRotor:
        self.ring = value
        return self

    @property
    def will_step_next(self) -> bool:
        """Whether the next ``step`` turns the rotor to the left."""
        return self._position in self._notches

    # ── signal path ───────────────────────────────────────────────
    def transform_inbound(self, symbol: str) -> str:
        offset = self._position - self._ring
        out = self.charset[rot(symbol_index(symbol) + offset)]
        return rot_char(CHARSET.index(out) - offset)

    def transform_outbound(self, symbol: str) -> str:
        offset = self._position - self._ring
        out = self.charset.index(rot_char(symbol_index(symbol) + offset))
        return rot_char(out - offset)

    # ── stepping ──────────────────────────────────────────────────
    def step(self) -> bool:
        turnover = self.will_step_next
        self._position = rot(self._position + 1)
        if turnover:
            logger.debug("%s turned over to position %s", self.label, CHARSET[self._position])
        return turnover

    # ── state ─────────────────────────────────────────────────────
    def export_state(self) -> str:
        """Return ``W:name-or-wiring[:ring[:position[:notches]]]``.

        Trailing fields are only written when they or a later field are
        non-default. Custom rotors with notches always write all fields so
        the wiring is not mistaken for a catalog name on import.
        """
        custom_notches = self.is_custom and bool(self._notches)
        fields = [self.charset if self.is_custom else self.name]
        if self._ring > 0 or self._position > 0 or custom_notches:
            fields.append(str(self._ring + 1))
        if self._position > 0 or custom_notches:
            fields.append(CHARSET[self._position])
        if custom_notches:
            fields.append("".join(CHARSET[n] for n in self._notches))
        return TAG_ROTOR + TAG_SEPARATOR + TAG_SEPARATOR.join(fields)

    def clone(self) -> RotatingRotor:
        return RotatingRotor(self.charset, self._notches, self._position, self._ring, self.name)

    def __repr__(self) -> str:
        return f"RotatingRotor({self.label!r}, position={self._position}, ring={self._ring}, notches={self._notches})"
