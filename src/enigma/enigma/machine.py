"""Enigma Machine

Combines a plugboard with a rotor stack::

    symbol -> plugboard -> rotor stack (in and back out) -> plugboard -> symbol

Encryption and decryption are the same operation: two machines with the
same starting state turn plaintext into ciphertext and back.
"""

from __future__ import annotations

import logging
from typing import Optional

from enigma.core.charset import check_symbol, check_text
from enigma.core.errors import StructureError
from enigma.plugboard import Plugboard
from enigma.rotors.stack import RotorStack
from enigma.state import format_state, parse_state

__all__ = ["Machine"]

logger = logging.getLogger(__name__)


class Machine:
    """Rotor cipher machine.

    Example:
    -------
        >>> m1 = Machine.from_state("U:UKW_B;W:I;W:II;W:III:1:Z;E:ETW;S:AQDS")
        >>> m2 = Machine.from_state(m1.export_state())
        >>> m2.encrypt(m1.encrypt("HELLOWORLD"))
        'HELLOWORLD'
    """

    __slots__ = ("_rotors", "_plugboard")

    def __init__(self, rotors: RotorStack, plugboard: Optional[Plugboard] = None) -> None:
        """Create a machine.

        Args:
        ----
            rotors: Rotor stack; the machine takes ownership of it.
            plugboard: Plugboard; None means no plugs.
        """
        if rotors is None:
            raise StructureError("A machine needs a rotor stack")
        self._rotors = rotors
        self._plugboard = plugboard if plugboard is not None else Plugboard()

    @classmethod
    def from_state(cls, state: str) -> Machine:
        """Create a machine from a state string produced by ``export_state``.

        Raises:
        ------
            ParseError: If a field is malformed.
            IncompleteState: If a required field is missing.
            InvalidCombination: If notches are given for a catalog rotor.
        """
        parsed = parse_state(state)
        machine = cls(parsed.build_stack(), parsed.plugboard)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Imported machine %s", machine.export_state())
        return machine

    @property
    def rotors(self) -> RotorStack:
        return self._rotors

    @property
    def plugboard(self) -> Plugboard:
        return self._plugboard

    @property
    def positions(self) -> str:
        """Window letters of the rotating rotors, left to right."""
        return self._rotors.positions

    def encrypt_char(self, symbol: str) -> str:
        """Encrypt one letter and step the rotors."""
        check_symbol(symbol)
        return self._plugboard.map(self._rotors.encrypt_one(self._plugboard.map(symbol)))

    def encrypt(self, text: str) -> str:
        """Encrypt a run of A-Z letters and step the rotors accordingly.

        Raises:
        ------
            FormatError: If the text is empty or contains anything but A-Z.
        """
        check_text(text)
        return self._plugboard.map(self._rotors.encrypt_many(self._plugboard.map(text)))

    # Same operation on a reciprocal machine
    decrypt = encrypt

    def export_state(self) -> str:
        """Return the state string of the current configuration, positions included."""
        return format_state(self._rotors, self._plugboard)

    def clone(self) -> Machine:
        """Return an independent copy."""
        return Machine(self._rotors.clone(), self._plugboard.clone())

    def __repr__(self) -> str:
        return f"Machine({self.export_state()!r})"
