"""Enigma Rotor Catalog

Historical rotor wirings and turnover notches, grouped into reflectors,
entry rotors and standard (rotating) rotors.

Sources: https://en.wikipedia.org/wiki/Enigma_rotor_details

Reflector wirings are stored in the conventional "pairing by position"
notation: lined up under A-Z, the letter below A is paired with A, and A
appears below that letter. ``translate_reflector_wiring`` converts them
to the pair-list format the ``Reflector`` class uses.

Names are looked up case-insensitively, first exactly, then with the
``WW2_`` prefix, so ``"i"``, ``"UKW_B"`` and ``"WW2_ETW"`` all resolve.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Optional

from enigma.core.charset import check_charset
from enigma.core.constants import CHARSET, HISTORICAL_PREFIX
from enigma.core.errors import InvalidPair
from enigma.rotors.base import BaseRotor
from enigma.rotors.entry import EntryRotor
from enigma.rotors.reflector import Reflector
from enigma.rotors.rotating import RotatingRotor

__all__ = [
    "RotorName",
    "CHARSETS",
    "NOTCHES",
    "REFLECTORS",
    "ENTRY_ROTORS",
    "reflector_names",
    "entry_names",
    "standard_names",
    "lookup_rotor_name",
    "get_rotor",
    "custom_rotor",
    "custom_entry",
    "custom_reflector",
    "translate_reflector_wiring",
]


class RotorName(Enum):
    """All known rotors."""

    # Commercially sold machine
    COMM_R1 = "COMM_R1"
    COMM_R2 = "COMM_R2"
    COMM_R3 = "COMM_R3"

    # WW2 machines
    WW2_I = "WW2_I"
    WW2_II = "WW2_II"
    WW2_III = "WW2_III"
    WW2_IV = "WW2_IV"
    WW2_V = "WW2_V"
    WW2_VI = "WW2_VI"
    WW2_VII = "WW2_VII"
    WW2_VIII = "WW2_VIII"
    WW2_UKW_A = "WW2_UKW_A"
    WW2_UKW_B = "WW2_UKW_B"
    WW2_UKW_C = "WW2_UKW_C"
    WW2_UKW_B_THIN = "WW2_UKW_B_THIN"
    WW2_UKW_C_THIN = "WW2_UKW_C_THIN"
    WW2_ETW = "WW2_ETW"
    WW2_BETA = "WW2_BETA"
    WW2_GAMMA = "WW2_GAMMA"

    # German railway
    ROCKET_I = "ROCKET_I"
    ROCKET_II = "ROCKET_II"
    ROCKET_III = "ROCKET_III"
    ROCKET_UKW = "ROCKET_UKW"
    ROCKET_ETW = "ROCKET_ETW"

    # Swiss Enigma-K
    SWISS_I = "SWISS_I"
    SWISS_II = "SWISS_II"
    SWISS_III = "SWISS_III"
    SWISS_UKW = "SWISS_UKW"
    SWISS_ETW = "SWISS_ETW"


CHARSETS: MappingProxyType[RotorName, str] = MappingProxyType(
    {
        RotorName.COMM_R1: "DMTWSILRUYQNKFEJCAZBPGXOHV",
        RotorName.COMM_R2: "HQZGPJTMOBLNCIFDYAWVEUSRKX",
        RotorName.COMM_R3: "UQNTLSZFMREHDPXKIBVYGJCWOA",
        RotorName.ROCKET_I: "JGDQOXUSCAMIFRVTPNEWKBLZYH",
        RotorName.ROCKET_II: "NTZPSFBOKMWRCJDIVLAEYUXHGQ",
        RotorName.ROCKET_III: "JVIUBHTCDYAKEQZPOSGXNRMWFL",
        RotorName.ROCKET_UKW: "QYHOGNECVPUZTFDJAXWMKISRBL",
        RotorName.ROCKET_ETW: "QWERTZUIOASDFGHJKPYXCVBNML",
        RotorName.SWISS_I: "PEZUOHXSCVFMTBGLRINQJWAYDK",
        RotorName.SWISS_II: "ZOUESYDKFWPCIQXHMVBLGNJRAT",
        RotorName.SWISS_III: "EHRVXGAOBQUSIMZFLYNWKTPDJC",
        RotorName.SWISS_UKW: "IMETCGFRAYSQBZXWLHKDVUPOJN",
        RotorName.SWISS_ETW: "QWERTZUIOASDFGHJKPYXCVBNML",
        RotorName.WW2_I: "EKMFLGDQVZNTOWYHXUSPAIBRCJ",
        RotorName.WW2_II: "AJDKSIRUXBLHWTMCQGZNPYFVOE",
        RotorName.WW2_III: "BDFHJLCPRTXVZNYEIWGAKMUSQO",
        RotorName.WW2_IV: "ESOVPZJAYQUIRHXLNFTGKDCMWB",
        RotorName.WW2_V: "VZBRGITYUPSDNHLXAWMJQOFECK",
        RotorName.WW2_VI: "JPGVOUMFYQBENHZRDKASXLICTW",
        RotorName.WW2_VII: "NZJHGRCXMYSWBOUFAIVLPEKQDT",
        RotorName.WW2_VIII: "FKQHTLXOCBJSPDZRAMEWNIUYGV",
        RotorName.WW2_UKW_A: "EJMZALYXVBWFCRQUONTSPIKHGD",
        RotorName.WW2_UKW_B: "YRUHQSLDPXNGOKMIEBFZCWVJAT",
        RotorName.WW2_UKW_C: "FVPJIAOYEDRZXWGCTKUQSBNMHL",
        RotorName.WW2_UKW_B_THIN: "ENKQAUYWJICOPBLMDXZVFTHRGS",
        RotorName.WW2_UKW_C_THIN: "RDOBJNTKVEHMLFCWZAXGYIPSUQ",
        RotorName.WW2_BETA: "LEYJVCNIXWPBQMDRTAKZGFUHOS",
        RotorName.WW2_GAMMA: "FSOKANUERHMBTIYCWLQPZXVGJD",
        RotorName.WW2_ETW: CHARSET,
    }
)

# The rotor to the left turns when this rotor moves *past* the notch letter.
# Only the WW2 notch positions are documented.
NOTCHES: MappingProxyType[RotorName, tuple[int, ...]] = MappingProxyType(
    {
        RotorName.WW2_I: (CHARSET.index("Q"),),
        RotorName.WW2_II: (CHARSET.index("E"),),
        RotorName.WW2_III: (CHARSET.index("V"),),
        RotorName.WW2_IV: (CHARSET.index("J"),),
        RotorName.WW2_V: (CHARSET.index("Z"),),
        RotorName.WW2_VI: (CHARSET.index("Z"), CHARSET.index("M")),
        RotorName.WW2_VII: (CHARSET.index("Z"), CHARSET.index("M")),
        RotorName.WW2_VIII: (CHARSET.index("Z"), CHARSET.index("M")),
    }
)

REFLECTORS: frozenset[RotorName] = frozenset(
    {
        RotorName.ROCKET_UKW,
        RotorName.SWISS_UKW,
        RotorName.WW2_UKW_A,
        RotorName.WW2_UKW_B,
        RotorName.WW2_UKW_C,
        RotorName.WW2_UKW_B_THIN,
        RotorName.WW2_UKW_C_THIN,
    }
)

ENTRY_ROTORS: frozenset[RotorName] = frozenset(
    {
        RotorName.WW2_ETW,
        RotorName.SWISS_ETW,
        RotorName.ROCKET_ETW,
    }
)


def reflector_names() -> list[str]:
    """Names of all catalog reflectors."""
    return [n.value for n in RotorName if n in REFLECTORS]


def entry_names() -> list[str]:
    """Names of all catalog entry rotors."""
    return [n.value for n in RotorName if n in ENTRY_ROTORS]


def standard_names() -> list[str]:
    """Names of all catalog rotating rotors."""
    return [n.value for n in RotorName if n not in REFLECTORS and n not in ENTRY_ROTORS]


def lookup_rotor_name(name: str) -> Optional[RotorName]:
    """Resolve a rotor name or short alias.

    The lookup is case-insensitive and tries the exact name before the
    name with the ``WW2_`` prefix.

    Args:
    ----
        name: Rotor name, e.g. "WW2_UKW_B", "ukw_b", "IV".

    Returns:
    -------
        The catalog entry, or None if the name is unknown.

    Examples:
    --------
        >>> lookup_rotor_name("iv")
        <RotorName.WW2_IV: 'WW2_IV'>
        >>> lookup_rotor_name("EKMFLGDQVZNTOWYHXUSPAIBRCJ") is None
        True
    """
    if not name:
        return None
    key = name.strip().upper()
    for candidate in (key, HISTORICAL_PREFIX + key):
        try:
            return RotorName(candidate)
        except ValueError:
            continue
    return None


def _resolve(name: RotorName | str) -> RotorName:
    if isinstance(name, RotorName):
        return name
    parsed = lookup_rotor_name(name)
    if parsed is None:
        raise KeyError(f"Unknown rotor: {name!r}")
    return parsed


def get_rotor(name: RotorName | str, position: int = 0, ring: int = 0) -> BaseRotor:
    """Return a freshly initialized catalog rotor of the right variant.

    Args:
    ----
        name: Catalog entry or (short) name.
        position: Start position for rotating rotors (0=A, 25=Z).
        ring: Ring setting for rotating rotors (0=A, 25=Z).

    Returns:
    -------
        ``Reflector``, ``EntryRotor`` or ``RotatingRotor``.

    Raises:
    ------
        KeyError: If the name is unknown.
    """
    rotor_name = _resolve(name)
    charset = CHARSETS[rotor_name]
    if rotor_name in REFLECTORS:
        return Reflector(translate_reflector_wiring(charset), rotor_name.value)
    if rotor_name in ENTRY_ROTORS:
        return EntryRotor(charset, rotor_name.value)
    return RotatingRotor(charset, NOTCHES.get(rotor_name, ()), position, ring, rotor_name.value)


def custom_rotor(
    wiring: str,
    position: int = 0,
    ring: int = 0,
    notches: tuple[int, ...] = (),
) -> RotatingRotor:
    """Create an unnamed rotating rotor."""
    return RotatingRotor(wiring, notches, position, ring)


def custom_entry(wiring: str) -> EntryRotor:
    """Create an unnamed entry rotor."""
    return EntryRotor(wiring)


def custom_reflector(wiring: str) -> Reflector:
    """Create an unnamed reflector.

    The wiring must be in pair-list format and may omit the last pair.
    Use ``translate_reflector_wiring`` first for pairing-by-position wirings.
    """
    return Reflector(wiring)


def translate_reflector_wiring(alphabet: str) -> str:
    """Translate a pairing-by-position reflector wiring into pair-list format.

    Lined up below A-Z, a reflector wiring shows every pair twice: if Y is
    below A then A is below Y. The result lists each pair once, lower
    letter first, in order of first appearance.

    Args:
    ----
        alphabet: 26 letter reflector wiring.

    Returns:
    -------
        26 letter pair-list wiring.

    Raises:
    ------
        InvalidPair: If the wiring maps a letter to one that does not map back.

    Examples:
    --------
        >>> translate_reflector_wiring("YRUHQSLDPXNGOKMIEBFZCWVJAT")
        'AYBRCUDHEQFSGLIPJXKNMOTZVW'
    """
    check_charset(alphabet)
    pairs: dict[str, str] = {}
    for i, c in enumerate(alphabet):
        j = CHARSET.index(c)
        if alphabet[j] != CHARSET[i]:
            raise InvalidPair(f"Reflector wiring {alphabet!r} is not self-paired at {CHARSET[i]!r}")
        pairs[CHARSET[min(i, j)]] = CHARSET[max(i, j)]
    return "".join(k + v for k, v in pairs.items())
