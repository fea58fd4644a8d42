"""Enigma Core Components

This module contains the building blocks shared by all machine parts:
- Alphabet and separator constants
- Charset validation and conversion helpers
- Error hierarchy
"""

from enigma.core.charset import (
    alpha_to_num,
    check_charset,
    check_symbol,
    check_text,
    chunk,
    crypto_alphabet,
    fix_alphabet,
    letter_index,
    num_to_alpha,
    rot,
    rot_char,
    symbol_index,
)
from enigma.core.constants import (
    CHARSET,
    CHARSET_SIZE,
    EXIT_ARG_FAIL,
    EXIT_ENCRYPTION_FAIL,
    EXIT_HELP,
    EXIT_SUCCESS,
    FIELD_SEPARATOR,
    HISTORICAL_PREFIX,
    MAX_PLUG_PAIRS,
    PAIR_SEPARATOR,
    TAG_SEPARATOR,
)
from enigma.core.errors import (
    AlphabetError,
    DuplicateWiring,
    EnigmaError,
    FormatError,
    IncompleteState,
    InvalidCombination,
    InvalidDirection,
    InvalidPair,
    OutOfAlphabet,
    ParseError,
    RangeError,
    StateError,
    StructureError,
)

__all__ = [
    # Charset
    "check_charset",
    "check_symbol",
    "check_text",
    "symbol_index",
    "letter_index",
    "rot",
    "rot_char",
    "alpha_to_num",
    "num_to_alpha",
    "fix_alphabet",
    "chunk",
    "crypto_alphabet",
    # Constants
    "CHARSET",
    "CHARSET_SIZE",
    "HISTORICAL_PREFIX",
    "MAX_PLUG_PAIRS",
    "FIELD_SEPARATOR",
    "TAG_SEPARATOR",
    "PAIR_SEPARATOR",
    "EXIT_SUCCESS",
    "EXIT_ENCRYPTION_FAIL",
    "EXIT_ARG_FAIL",
    "EXIT_HELP",
    # Errors
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
