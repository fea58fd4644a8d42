from enigma.core.errors import (
    EnigmaError,
    IncompleteState,
    InvalidCombination,
    ParseError,
    StateError,
)
from enigma.keygen import RandomSettings, random_settings
from enigma.machine import Machine
from enigma.plugboard import Plugboard
from enigma.rotors import (
    EntryRotor,
    Reflector,
    RotatingRotor,
    RotorName,
    RotorStack,
    get_rotor,
)
from enigma.state import format_state, parse_state

__version__ = "1.0.0"

__all__ = [
    'Machine',
    'Plugboard',
    'RotorStack',
    'Reflector',
    'EntryRotor',
    'RotatingRotor',
    'RotorName',
    'get_rotor',
    'parse_state',
    'format_state',
    'RandomSettings',
    'random_settings',
    'EnigmaError',
    'StateError',
    'ParseError',
    'IncompleteState',
    'InvalidCombination',
]
