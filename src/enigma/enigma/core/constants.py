"""
Enigma Machine Constants

Contains the machine alphabet, catalog naming conventions, plugboard
limits and the output formatting used by the command line tools.
"""

from __future__ import annotations

import string

__all__ = [
    # Alphabet
    "CHARSET",
    "CHARSET_SIZE",
    # Catalog
    "HISTORICAL_PREFIX",
    # Plugboard
    "MAX_PLUG_PAIRS",
    "REFLECTOR_SHORT_LENGTH",
    # State string
    "FIELD_SEPARATOR",
    "TAG_SEPARATOR",
    "PAIR_SEPARATOR",
    "TAG_REFLECTOR",
    "TAG_ENTRY",
    "TAG_ROTOR",
    "TAG_PLUGBOARD",
    # Output formatting
    "GROUP_SIZE",
    "GROUPS_PER_LINE",
    "RANDOM_PLUG_PAIRS",
    "MAX_RANDOM_COUNT",
    # Exit codes
    "EXIT_SUCCESS",
    "EXIT_ENCRYPTION_FAIL",
    "EXIT_ARG_FAIL",
    "EXIT_HELP",
]

# ============================================================================
# Alphabet
# ============================================================================

# The 26 symbols every wiring and plugboard is defined over
CHARSET: str = string.ascii_uppercase

# Length of CHARSET
CHARSET_SIZE: int = len(CHARSET)  # 26

# ============================================================================
# Catalog
# ============================================================================

# Prefix tried when a short rotor alias ("I", "UKW_B") does not match exactly
HISTORICAL_PREFIX: str = "WW2_"

# ============================================================================
# Plugboard / Reflector
# ============================================================================

# A plugboard holds at most 13 cables (all 26 symbols paired)
MAX_PLUG_PAIRS: int = CHARSET_SIZE // 2

# Code sheets printed reflector wirings without the last, implied pair
REFLECTOR_SHORT_LENGTH: int = CHARSET_SIZE - 2  # 24

# ============================================================================
# State String
# ============================================================================

# U:UKW_B;W:I:1:A;W:II;W:III;E:ETW;S:ABCD
FIELD_SEPARATOR: str = ";"
TAG_SEPARATOR: str = ":"

# Separator between pairs in human readable plugboard/reflector output
PAIR_SEPARATOR: str = "-"

TAG_REFLECTOR: str = "U"
TAG_ENTRY: str = "E"
TAG_ROTOR: str = "W"
TAG_PLUGBOARD: str = "S"

# ============================================================================
# Output Formatting
# ============================================================================

# Cipher text is transmitted in groups of 5 letters
GROUP_SIZE: int = 5

# Groups printed per output line
GROUPS_PER_LINE: int = 10

# Number of plugboard cables in generated random settings
RANDOM_PLUG_PAIRS: int = 10

# Upper bound for the number of rotor wirings the CLI generates at once
MAX_RANDOM_COUNT: int = 99

# ============================================================================
# Exit Codes
# ============================================================================

EXIT_SUCCESS: int = 0
EXIT_ENCRYPTION_FAIL: int = 1
EXIT_ARG_FAIL: int = 254
EXIT_HELP: int = 255
