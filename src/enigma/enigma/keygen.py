"""Random Machine Settings

Generates fresh custom wirings from the operating system CSPRNG:
- rotor (and entry rotor) wirings: full 26 letter permutations
- reflector: 24 letters, the last pair is implied
- plugboard: 10 pairs
"""

from __future__ import annotations

from dataclasses import dataclass, field

from enigma.core.charset import chunk, crypto_alphabet
from enigma.core.constants import (
    CHARSET_SIZE,
    FIELD_SEPARATOR,
    PAIR_SEPARATOR,
    RANDOM_PLUG_PAIRS,
    REFLECTOR_SHORT_LENGTH,
    TAG_ENTRY,
    TAG_PLUGBOARD,
    TAG_REFLECTOR,
    TAG_ROTOR,
    TAG_SEPARATOR,
)
from enigma.core.errors import RangeError

__all__ = ["RandomSettings", "random_settings"]


@dataclass(frozen=True)
class RandomSettings:
    """A set of random wirings.

    Attributes:
        rotors: 26 letter wirings for rotating rotors.
        reflector: 24 letter reflector wiring in pair-list format.
        plugboard: Concatenated plugboard pairs.
        entry: Entry rotor for ``to_state``; a catalog name or wiring.
    """

    rotors: tuple[str, ...]
    reflector: str
    plugboard: str
    entry: str = field(default="WW2_ETW")

    @property
    def reflector_pairs(self) -> str:
        """Reflector wiring as dashed pairs."""
        return PAIR_SEPARATOR.join(chunk(self.reflector, 2))

    @property
    def plugboard_pairs(self) -> str:
        """Plugboard as dashed pairs."""
        return PAIR_SEPARATOR.join(chunk(self.plugboard, 2))

    def to_state(self) -> str:
        """Return a state string for a machine using these wirings."""
        fields = [TAG_REFLECTOR + TAG_SEPARATOR + self.reflector_pairs]
        fields.extend(TAG_ROTOR + TAG_SEPARATOR + wiring for wiring in self.rotors)
        fields.append(TAG_ENTRY + TAG_SEPARATOR + self.entry)
        fields.append(TAG_PLUGBOARD + TAG_SEPARATOR + self.plugboard)
        return FIELD_SEPARATOR.join(fields)


def random_settings(rotor_count: int = 3, plug_pairs: int = RANDOM_PLUG_PAIRS) -> RandomSettings:
    """Generate random rotor, reflector and plugboard wirings.

    Args:
    ----
        rotor_count: Number of rotor wirings (at least 1).
        plug_pairs: Number of plugboard pairs (0-13).

    Returns:
    -------
        Fresh random settings.

    Raises:
    ------
        RangeError: If rotor_count or plug_pairs is out of range.
    """
    if rotor_count < 1:
        raise RangeError(f"Need at least one rotor, got {rotor_count}")
    if not 0 <= plug_pairs <= CHARSET_SIZE // 2:
        raise RangeError(f"Plug pairs must be 0-{CHARSET_SIZE // 2}, got {plug_pairs}")

    rotors = tuple(crypto_alphabet() for _ in range(rotor_count))
    reflector = crypto_alphabet(REFLECTOR_SHORT_LENGTH)
    plugboard = crypto_alphabet(plug_pairs * 2) if plug_pairs else ""
    return RandomSettings(rotors, reflector, plugboard)
