"""Enigma Machine State Strings

A machine configuration is saved as semicolon separated ``TAG:VALUE``
fields::

    U:WW2_UKW_B;W:WW2_I:1:A;W:WW2_II;W:WW2_III:3:Q;E:WW2_ETW;S:AQDS

Fields:
- ``U:<reflector name or pairs>``: exactly one
- ``E:<entry rotor name or wiring>``: exactly one
- ``W:<rotor name or wiring>[:ring[:position[:notches]]]``: one per
  rotating rotor, left to right, at least one
- ``S:<plugboard pairs>``: at most one, absent means no plugs

Ring and position are written 1-based (1-26) or as a letter (A-Z).
Notches are letters and are only allowed for custom wirings; catalog
rotors bring their own.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Optional

from enigma.core.charset import alpha_to_num, fix_alphabet, letter_index
from enigma.core.constants import (
    CHARSET_SIZE,
    FIELD_SEPARATOR,
    TAG_ENTRY,
    TAG_PLUGBOARD,
    TAG_REFLECTOR,
    TAG_ROTOR,
    TAG_SEPARATOR,
)
from enigma.core.errors import (
    AlphabetError,
    EnigmaError,
    IncompleteState,
    InvalidCombination,
    ParseError,
    StateError,
)
from enigma.plugboard import Plugboard
from enigma.rotors.catalog import ENTRY_ROTORS, REFLECTORS, get_rotor, lookup_rotor_name
from enigma.rotors.entry import EntryRotor
from enigma.rotors.reflector import Reflector
from enigma.rotors.rotating import RotatingRotor
from enigma.rotors.stack import RotorStack

__all__ = [
    "MachineState",
    "parse_state",
    "format_state",
    "parse_reflector",
    "parse_entry",
    "parse_rotor",
]

logger = logging.getLogger(__name__)

# Name/wiring, ring, position, notches
_MAX_ROTOR_PARTS = 4


@contextmanager
def _field_context(text: str) -> Iterator[None]:
    """Report component errors as a ParseError naming the field."""
    try:
        yield
    except StateError:
        raise
    except EnigmaError as err:
        raise ParseError(f"Invalid setting {text!r}: {err}", text) from err


def parse_reflector(value: str) -> Reflector:
    """Build a reflector from a catalog name or (optionally dashed) pairs."""
    parsed = lookup_rotor_name(value)
    if parsed is None:
        return Reflector(fix_alphabet(value))
    if parsed not in REFLECTORS:
        raise ParseError(f"{value!r} is not a reflector", value)
    return get_rotor(parsed)  # type: ignore[return-value]


def parse_entry(value: str) -> EntryRotor:
    """Build an entry rotor from a catalog name or wiring."""
    parsed = lookup_rotor_name(value)
    if parsed is None:
        return EntryRotor(fix_alphabet(value))
    if parsed not in ENTRY_ROTORS:
        raise ParseError(f"{value!r} is not an entry rotor", value)
    return get_rotor(parsed)  # type: ignore[return-value]


def _parse_notches(value: str) -> tuple[int, ...]:
    notches = []
    for c in value:
        try:
            notches.append(letter_index(c))
        except AlphabetError as err:
            raise ParseError(f"Notch {c!r} is not within A-Z", value) from err
    return tuple(notches)


def parse_rotor(value: str) -> RotatingRotor:
    """Build a rotating rotor from ``name-or-wiring[:ring[:position[:notches]]]``.

    Raises:
    ------
        ParseError: If there are too many parts, the first part is neither a
            rotor name nor a 26 letter wiring, or ring/position are invalid.
        InvalidCombination: If notches are given for a catalog rotor.
    """
    parts = value.split(TAG_SEPARATOR)
    if len(parts) > _MAX_ROTOR_PARTS:
        raise ParseError(f"Invalid rotor setting: {value!r}", value)

    parsed = lookup_rotor_name(parts[0])
    if parsed is None:
        wiring = fix_alphabet(parts[0])
        if len(wiring) != CHARSET_SIZE:
            raise ParseError(f"{parts[0]!r} is neither a valid rotor name nor alphabet", value)
    elif parsed in REFLECTORS or parsed in ENTRY_ROTORS:
        raise ParseError(f"{parts[0]!r} is not a rotating rotor", value)
    elif len(parts) == _MAX_ROTOR_PARTS:
        raise InvalidCombination(f"A custom notch setting is only valid for custom rotors: {value!r}")

    ring = alpha_to_num(parts[1]) if len(parts) > 1 else 0
    position = alpha_to_num(parts[2]) if len(parts) > 2 else 0

    if parsed is not None:
        return get_rotor(parsed, position, ring)  # type: ignore[return-value]
    notches = _parse_notches(parts[3]) if len(parts) > 3 else ()
    return RotatingRotor(wiring, notches, position, ring)


@dataclass
class MachineState:
    """Components parsed from a state string."""

    reflector: Reflector
    entry: EntryRotor
    rotors: list[RotatingRotor] = field(default_factory=list)
    plugboard: Plugboard = field(default_factory=Plugboard)

    def build_stack(self) -> RotorStack:
        """Assemble the rotor stack."""
        return RotorStack.from_parts(self.reflector, self.rotors, self.entry)


def parse_state(state: str) -> MachineState:
    """Parse a state string into machine components.

    Args:
    ----
        state: State string as produced by ``format_state``.

    Returns:
    -------
        Parsed components.

    Raises:
    ------
        ParseError: If a field is malformed, unknown or duplicated.
        InvalidCombination: If notches are given for a catalog rotor.
        IncompleteState: If the U, E or all W fields are missing.
    """
    if not state or not state.strip():
        raise ParseError("State cannot be empty")

    reflector: Optional[Reflector] = None
    entry: Optional[EntryRotor] = None
    rotors: list[RotatingRotor] = []
    plugboard: Optional[Plugboard] = None

    for text in state.strip().split(FIELD_SEPARATOR):
        tag, sep, value = text.partition(TAG_SEPARATOR)
        if not sep:
            raise ParseError(f"{text!r} is an invalid setting", text)
        tag = tag.strip().upper()
        value = value.strip()

        with _field_context(text):
            if tag == TAG_REFLECTOR:
                if reflector is not None:
                    raise ParseError("Setting contains multiple reflectors", text)
                reflector = parse_reflector(value)
            elif tag == TAG_ENTRY:
                if entry is not None:
                    raise ParseError("Setting contains multiple entry rotors", text)
                entry = parse_entry(value)
            elif tag == TAG_ROTOR:
                rotors.append(parse_rotor(value))
            elif tag == TAG_PLUGBOARD:
                if plugboard is not None:
                    raise ParseError("Setting contains multiple plugboards", text)
                plugboard = Plugboard.from_string(fix_alphabet(value))
            else:
                raise ParseError(f"{text!r} is an invalid setting", text)

    if reflector is None:
        raise IncompleteState("Serialized data misses the reflector (U)")
    if entry is None:
        raise IncompleteState("Serialized data misses the entry rotor (E)")
    if not rotors:
        raise IncompleteState("Serialized data misses rotors (W)")

    logger.debug("Parsed state with %d rotating rotors", len(rotors))
    return MachineState(reflector, entry, rotors, plugboard or Plugboard())


def format_state(stack: RotorStack, plugboard: Plugboard) -> str:
    """Serialize a rotor stack and plugboard.

    Rotor fields come in stack order (U, W..., E), followed by the
    plugboard pairs without separators.
    """
    fields = stack.export_state()
    fields.append(plugboard.export_state(omit_separators=True))
    return FIELD_SEPARATOR.join(fields)
