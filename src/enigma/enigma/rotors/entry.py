"""Enigma Entry Rotor (Eintrittswalze)

Connects the plugboard to the first rotating rotor. It never turns and
has no ring, but it drives its left neighbour on every keystroke.
"""

from __future__ import annotations

from enigma.core.charset import check_symbol
from enigma.core.constants import CHARSET, TAG_ENTRY, TAG_SEPARATOR
from enigma.rotors.base import BaseRotor, RotorKind

__all__ = ["EntryRotor"]


class EntryRotor(BaseRotor):
    """Stationary substitution at the right end of the stack."""

    kind = RotorKind.ENTRY

    def transform_inbound(self, symbol: str) -> str:
        return self.charset[CHARSET.index(check_symbol(symbol))]

    def transform_outbound(self, symbol: str) -> str:
        return CHARSET[self.charset.index(check_symbol(symbol))]

    def step(self) -> bool:
        # Does not rotate, but always turns the first real rotor
        return True

    def export_state(self) -> str:
        return TAG_ENTRY + TAG_SEPARATOR + (self.charset if self.is_custom else self.name)

    def clone(self) -> EntryRotor:
        return EntryRotor(self.charset, self.name)
