"""Enigma error types.

Every error is detected synchronously at construction, parse or call time.
All of them derive from ``EnigmaError``, itself a ``ValueError``, so code
that only cares about "bad input" can keep catching ``ValueError``.

Hierarchy::

    EnigmaError
    +-- AlphabetError        symbol outside A-Z, bad wiring charset
    +-- FormatError          text that cannot be encrypted as a whole
    +-- StructureError       rotor stack shape invalid
    +-- InvalidPair          malformed plugboard/reflector pair
    +-- DuplicateWiring      symbol used by more than one pair
    +-- RangeError           ring/position/notch outside 0-25
    +-- InvalidDirection     signal sent the wrong way through a rotor
    +-- StateError
        +-- ParseError         malformed state string field
        +-- IncompleteState    U, E or W fields missing
        +-- InvalidCombination notches given for a catalog rotor
"""

from __future__ import annotations

__all__ = [
    "EnigmaError",
    "AlphabetError",
    "OutOfAlphabet",
    "FormatError",
    "StructureError",
    "InvalidPair",
    "DuplicateWiring",
    "RangeError",
    "InvalidDirection",
    "StateError",
    "ParseError",
    "IncompleteState",
    "InvalidCombination",
]


class EnigmaError(ValueError):
    """Base class for all machine errors."""


class AlphabetError(EnigmaError):
    """A symbol or charset is not made of the 26 letters A-Z."""


# Reflector lookups report the same kind of failure
OutOfAlphabet = AlphabetError


class FormatError(EnigmaError):
    """Text is empty or contains symbols outside A-Z."""


class StructureError(EnigmaError):
    """The rotor stack does not have the shape [Reflector, Rotor..., EntryRotor]."""


class InvalidPair(EnigmaError):
    """A pair is not made of two distinct alphabet symbols."""


class DuplicateWiring(EnigmaError):
    """A symbol appears in more than one pair."""


class RangeError(EnigmaError):
    """A ring, position or notch value is outside 0-25."""


class InvalidDirection(EnigmaError):
    """A signal was sent outbound through a reflector."""


class StateError(EnigmaError):
    """Base class for state string errors."""


class ParseError(StateError):
    """A state string field is malformed or unknown."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class IncompleteState(StateError):
    """A state string lacks a required U, E or W field."""


class InvalidCombination(StateError):
    """Custom notches were supplied for a catalog rotor."""
