"""Enigma Reflector (Umkehrwalze)

The reflector sits at the far end of the stack and sends the signal back
through the rotors. Its wiring pairs letters like a fully plugged
plugboard, which is why it cannot map a letter to itself and why the
machine as a whole is self-inverse.

Wirings are given in pair-list format ("AYBRCU..."). Code sheets printed
only 12 pairs (24 letters); the two letters left over form the last pair.
"""

from __future__ import annotations

from typing import Optional

from enigma.core.charset import check_symbol, chunk
from enigma.core.constants import (
    CHARSET,
    PAIR_SEPARATOR,
    REFLECTOR_SHORT_LENGTH,
    TAG_REFLECTOR,
    TAG_SEPARATOR,
)
from enigma.core.errors import InvalidDirection
from enigma.plugboard import Plugboard
from enigma.rotors.base import BaseRotor, RotorKind

__all__ = ["Reflector", "complete_reflector_wiring"]


def complete_reflector_wiring(charset: str) -> str:
    """Append the implied last pair to a 24 letter reflector wiring.

    Other lengths are returned unchanged.

    Examples:
    --------
        >>> complete_reflector_wiring("ABCDEFGHIJKLMNOPQRSTUVWX")
        'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    """
    if len(charset) == REFLECTOR_SHORT_LENGTH:
        last_pair = "".join(c for c in CHARSET if c not in charset)
        if len(last_pair) == 2:
            return charset + last_pair
    return charset


class Reflector(BaseRotor):
    """Stationary, self-paired rotor at the left end of the stack.

    Example:
    -------
        >>> ukw = Reflector("AYBRCUDHEQFSGLIPJXKNMOTZVW")
        >>> ukw.transform_inbound("A"), ukw.transform_inbound("Y")
        ('Y', 'A')
    """

    kind = RotorKind.REFLECTOR

    def __init__(self, charset: str, name: Optional[str] = None) -> None:
        """Create a reflector.

        Args:
        ----
            charset: 26 letter pair-list wiring, or 24 letters with the last pair implied.
            name: Catalog name, None for custom reflectors.

        Raises:
        ------
            AlphabetError: If the wiring is not a permutation of A-Z.
            InvalidPair: If a pair plugs a letter to itself.
        """
        charset = complete_reflector_wiring(charset)
        super().__init__(charset, name)
        self._board = Plugboard(*chunk(self.charset, 2))

    @property
    def pairs(self) -> tuple[str, ...]:
        """The 13 letter pairs of this reflector."""
        return self._board.pairs

    def transform_inbound(self, symbol: str) -> str:
        return self._board.map(check_symbol(symbol))

    def transform_outbound(self, symbol: str) -> str:
        raise InvalidDirection("Use transform_inbound() on a reflector only. Reflector not the first rotor?")

    def step(self) -> bool:
        # Stationary and leftmost: nothing left to drive
        return False

    def export_state(self) -> str:
        if self.is_custom:
            value = PAIR_SEPARATOR.join(self.pairs[:-1])
        else:
            value = self.name
        return TAG_REFLECTOR + TAG_SEPARATOR + value

    def clone(self) -> Reflector:
        return Reflector(self.charset, self.name)
