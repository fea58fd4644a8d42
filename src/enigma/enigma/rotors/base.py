"""Enigma Rotor Interface

Every element of a rotor stack (reflector, rotating rotors, entry rotor)
shares the same capability set:

- ``transform_inbound``: signal travelling towards the reflector
- ``transform_outbound``: signal travelling back to the entry rotor
- ``step``: advance one keystroke, report whether the left neighbour steps
- ``export_state``: tagged state string field
- ``clone``: independent copy

Catalog rotors carry their catalog ``name``; custom rotors have
``name=None`` and export their raw wiring instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from enigma.core.charset import check_charset

__all__ = ["BaseRotor", "RotorKind"]


class RotorKind(Enum):
    """Position of a rotor type in the stack."""

    REFLECTOR = "U"
    ROTATING = "W"
    ENTRY = "E"


class BaseRotor(ABC):
    """Shared behaviour of all rotor variants."""

    kind: RotorKind

    def __init__(self, charset: str, name: Optional[str] = None) -> None:
        self._charset = check_charset(charset)
        self._name = name

    @property
    def charset(self) -> str:
        """Wiring of this rotor."""
        return self._charset

    @property
    def name(self) -> Optional[str]:
        """Catalog name, ``None`` for custom rotors."""
        return self._name

    @property
    def is_custom(self) -> bool:
        """Whether this rotor was built from a raw wiring."""
        return self._name is None

    @property
    def label(self) -> str:
        """Short human readable identifier."""
        return self._name if self._name is not None else f"custom {self.kind.name.lower()}"

    @abstractmethod
    def transform_inbound(self, symbol: str) -> str:
        """Transform a symbol entering from the right (towards the reflector).

        This does not step the rotor.
        """

    @abstractmethod
    def transform_outbound(self, symbol: str) -> str:
        """Transform a symbol entering from the left (after the reflector).

        This does not step the rotor.
        """

    @abstractmethod
    def step(self) -> bool:
        """Advance one keystroke.

        Returns
        -------
            True if the rotor to the left must step too.
        """

    @abstractmethod
    def export_state(self) -> str:
        """Return the tagged state string field of this rotor."""

    @abstractmethod
    def clone(self) -> BaseRotor:
        """Return an independent copy."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r})"
