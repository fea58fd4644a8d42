"""Enigma Rotors

This module provides the rotor variants, the rotor stack and the
historical rotor catalog:
- Reflector (Umkehrwalze, UKW)
- EntryRotor (Eintrittswalze, ETW)
- RotatingRotor (Walze)
- RotorStack (stepping and signal path)
- Catalog of named historical wirings and notches
"""

from enigma.rotors.base import BaseRotor, RotorKind
from enigma.rotors.catalog import (
    RotorName,
    custom_entry,
    custom_reflector,
    custom_rotor,
    entry_names,
    get_rotor,
    lookup_rotor_name,
    reflector_names,
    standard_names,
    translate_reflector_wiring,
)
from enigma.rotors.entry import EntryRotor
from enigma.rotors.reflector import Reflector
from enigma.rotors.rotating import RotatingRotor
from enigma.rotors.stack import RotorStack

__all__ = [
    # Variants
    "BaseRotor",
    "RotorKind",
    "Reflector",
    "EntryRotor",
    "RotatingRotor",
    # Stack
    "RotorStack",
    # Catalog
    "RotorName",
    "get_rotor",
    "lookup_rotor_name",
    "custom_rotor",
    "custom_entry",
    "custom_reflector",
    "reflector_names",
    "entry_names",
    "standard_names",
    "translate_reflector_wiring",
]
