"""Enigma Rotor Stack

Rotors are listed as seen by the operator, left to right, the way code
sheets print them::

    [Reflector, RotatingRotor, ..., RotatingRotor, EntryRotor]

The signal enters on the right: it passes every rotor inbound from the
entry rotor to the reflector, then outbound from the rotor next to the
reflector back to the entry rotor.

Stepping works like the mechanical ratchet: before each symbol the entry
rotor drives its left neighbour, and every rotor that leaves one of its
notches drives the next rotor on the left.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from enigma.core.charset import check_symbol, check_text
from enigma.core.constants import CHARSET
from enigma.core.errors import StructureError
from enigma.rotors.base import BaseRotor
from enigma.rotors.entry import EntryRotor
from enigma.rotors.reflector import Reflector
from enigma.rotors.rotating import RotatingRotor

__all__ = ["RotorStack"]

logger = logging.getLogger(__name__)


class RotorStack:
    """Ordered rotor assembly owning its rotors.

    Example:
    -------
        >>> from enigma.rotors.catalog import get_rotor
        >>> stack = RotorStack(get_rotor("UKW_B"), get_rotor("I"), get_rotor("II"),
        ...                    get_rotor("III"), get_rotor("ETW"))
        >>> stack.encrypt_many("AAAAA")
        'BDZGO'
    """

    __slots__ = ("_rotors",)

    def __init__(self, *rotors: BaseRotor) -> None:
        """Create a stack from rotors in operator order.

        Raises:
        ------
            StructureError: If fewer than 3 rotors are given, an entry is
                missing or passed twice, the first is not a Reflector, the
                last is not an EntryRotor, or a middle rotor is not a
                RotatingRotor.
        """
        if len(rotors) < 3:
            raise StructureError(f"Must supply at least 3 rotors, got {len(rotors)}")
        if any(r is None for r in rotors):
            raise StructureError("Rotor stack must not contain None")
        if len({id(r) for r in rotors}) != len(rotors):
            raise StructureError("A rotor instance can only sit in one slot of the stack")
        if not isinstance(rotors[0], Reflector):
            raise StructureError("Leftmost rotor must be a Reflector")
        if not isinstance(rotors[-1], EntryRotor):
            raise StructureError("Rightmost rotor must be an EntryRotor")
        for rotor in rotors[1:-1]:
            if not isinstance(rotor, RotatingRotor):
                raise StructureError(f"Rotors between reflector and entry rotor must rotate, got {rotor!r}")

        self._rotors: tuple[BaseRotor, ...] = tuple(rotors)
        logger.debug("Assembled rotor stack %s", " ".join(r.label for r in self._rotors))

    @classmethod
    def from_parts(
        cls,
        reflector: Reflector,
        rotors: Iterable[RotatingRotor],
        entry: EntryRotor,
    ) -> RotorStack:
        """Create a stack from a reflector, rotating rotors (left to right) and an entry rotor."""
        if rotors is None:
            raise StructureError("Must supply at least one rotating rotor")
        middle = list(rotors)
        if not middle:
            raise StructureError("Must supply at least one rotating rotor")
        return cls(reflector, *middle, entry)

    # ── access ────────────────────────────────────────────────────
    @property
    def rotors(self) -> tuple[BaseRotor, ...]:
        """All rotors in operator order."""
        return self._rotors

    @property
    def reflector(self) -> Reflector:
        return self._rotors[0]  # type: ignore[return-value]

    @property
    def entry(self) -> EntryRotor:
        return self._rotors[-1]  # type: ignore[return-value]

    @property
    def rotating(self) -> Sequence[RotatingRotor]:
        """Rotating rotors, left to right."""
        return self._rotors[1:-1]  # type: ignore[return-value]

    @property
    def positions(self) -> str:
        """Window letters of the rotating rotors, left to right."""
        return "".join(CHARSET[r.position] for r in self.rotating)

    def __len__(self) -> int:
        return len(self._rotors)

    # ── stepping ──────────────────────────────────────────────────
    def step_all(self) -> int:
        """Ratchet the stack one keystroke.

        Starting at the entry rotor, each rotor steps and the walk moves
        left only while the rotor just stepped reports a turnover.

        Returns
        -------
            Number of rotors visited, entry rotor included.
        """
        visited = 0
        for rotor in reversed(self._rotors):
            visited += 1
            if not rotor.step():
                break
        return visited

    # ── encryption ────────────────────────────────────────────────
    def _transform(self, symbol: str) -> str:
        for rotor in reversed(self._rotors):
            symbol = rotor.transform_inbound(symbol)
        for rotor in self._rotors[1:]:
            symbol = rotor.transform_outbound(symbol)
        return symbol

    def encrypt_one(self, symbol: str) -> str:
        """Step the stack, then send one symbol through it and back.

        Raises:
        ------
            AlphabetError: If the symbol is not an A-Z letter.
        """
        check_symbol(symbol)
        self.step_all()
        return self._transform(symbol)

    def encrypt_many(self, text: str) -> str:
        """Encrypt (or decrypt, it is the same) a run of A-Z letters.

        Raises:
        ------
            FormatError: If the text is empty or contains anything but A-Z.
        """
        check_text(text)
        return "".join(self.encrypt_one(c) for c in text)

    def trace(self, symbol: str) -> list[tuple[str, str]]:
        """Return the hops a symbol takes through the stack, without stepping.

        Returns
        -------
            ``(rotor label, symbol after rotor)`` per hop; the first entry
            is ``("input", symbol)``.
        """
        check_symbol(symbol)
        hops = [("input", symbol)]
        for rotor in reversed(self._rotors):
            symbol = rotor.transform_inbound(symbol)
            hops.append((rotor.label, symbol))
        for rotor in self._rotors[1:]:
            symbol = rotor.transform_outbound(symbol)
            hops.append((rotor.label, symbol))
        logger.debug("Trace %s", " -> ".join(f"{s} ({label})" for label, s in hops))
        return hops

    # ── settings ──────────────────────────────────────────────────
    def reset_to_zero(self) -> None:
        """Set every rotating rotor's position AND ring to A.

        This does not restore the settings the stack was built with.
        """
        for rotor in self.rotating:
            rotor.position = 0
            rotor.ring = 0

    def export_state(self) -> list[str]:
        """Return the state string field of each rotor, in stack order."""
        return [r.export_state() for r in self._rotors]

    def clone(self) -> RotorStack:
        """Return an independent copy sharing no rotor instances."""
        return RotorStack(*(r.clone() for r in self._rotors))

    def __repr__(self) -> str:
        return f"RotorStack({', '.join(repr(r) for r in self._rotors)})"
