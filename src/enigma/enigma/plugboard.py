"""Enigma Plugboard

The plugboard (Steckerbrett) swaps up to 13 pairs of letters before the
signal enters the rotor stack and again after it leaves. Unplugged
letters map to themselves, so the mapping is always an involution:
``map(map(x)) == x``.

The reflector is wired like a plugboard with every cable in use and
reuses this class for its lookups.
"""

from __future__ import annotations

from typing import Union

from enigma.core.charset import check_symbol
from enigma.core.constants import CHARSET, MAX_PLUG_PAIRS, PAIR_SEPARATOR, TAG_PLUGBOARD, TAG_SEPARATOR
from enigma.core.errors import DuplicateWiring, InvalidPair

__all__ = ["Plugboard"]

Pair = Union[str, tuple[str, str]]


class Plugboard:
    """Involutive pairwise substitution over A-Z.

    Example:
    -------
        >>> pb = Plugboard("AQ", "DS")
        >>> pb.map("A"), pb.map("Q"), pb.map("Z")
        ('Q', 'A', 'Z')
        >>> pb.map("ADZ")
        'QSZ'
        >>> pb.export_state()
        'S:AQ-DS'
    """

    __slots__ = ("_plugs", "_pairs")

    def __init__(self, *pairs: Pair) -> None:
        """Create a plugboard with 0-13 plug pairs.

        Args:
        ----
            *pairs: Two-letter strings ("AQ") or 2-tuples (("A", "Q")).

        Raises:
        ------
            InvalidPair: If a pair is not two distinct A-Z letters,
                or more than 13 pairs are given.
            DuplicateWiring: If a letter is used by more than one pair.
        """
        if len(pairs) > MAX_PLUG_PAIRS:
            raise InvalidPair(f"At most {MAX_PLUG_PAIRS} pairs allowed, got {len(pairs)}")

        plugs: dict[str, str] = {}
        normalized: list[str] = []
        for raw in pairs:
            a, b = self._split_pair(raw)
            if a in plugs or b in plugs:
                dup = a if a in plugs else b
                raise DuplicateWiring(f"Invalid plugboard setting {a + b!r}. Letter {dup!r} is already used")
            plugs[a] = b
            plugs[b] = a
            normalized.append(a + b)

        for c in CHARSET:
            plugs.setdefault(c, c)

        self._plugs = plugs
        self._pairs = tuple(normalized)

    @staticmethod
    def _split_pair(raw: Pair) -> tuple[str, str]:
        if isinstance(raw, str):
            if len(raw) != 2:
                raise InvalidPair(f"Invalid plugboard setting {raw!r}: pair must be exactly 2 letters")
            a, b = raw
        else:
            try:
                a, b = raw
            except (TypeError, ValueError) as err:
                raise InvalidPair(f"Invalid plugboard setting {raw!r}") from err
        if not (isinstance(a, str) and isinstance(b, str)) or a not in CHARSET or b not in CHARSET:
            raise InvalidPair(f"Invalid plugboard setting {raw!r}: letters must be A-Z")
        if a == b:
            raise InvalidPair(f"Invalid plugboard setting {raw!r}: cannot plug a letter to itself")
        return a, b

    @classmethod
    def from_string(cls, pairs: str) -> Plugboard:
        """Create a plugboard from concatenated pairs ("AQDS")."""
        if len(pairs) % 2:
            raise InvalidPair(f"Plugboard requires an even number of letters, got {pairs!r}")
        return cls(*(pairs[i : i + 2] for i in range(0, len(pairs), 2)))

    @property
    def pairs(self) -> tuple[str, ...]:
        """Plug pairs in the order they were given."""
        return self._pairs

    def map(self, value: str) -> str:
        """Map a single letter, or every letter of a string.

        Args:
        ----
            value: A-Z letter or string of A-Z letters.

        Returns:
        -------
            The plugged partner of each letter, or the letter itself.

        Raises:
        ------
            AlphabetError: If any letter is outside A-Z.
        """
        if len(value) == 1:
            return self._map_symbol(value)
        return "".join(self._map_symbol(c) for c in value)

    def _map_symbol(self, symbol: str) -> str:
        try:
            return self._plugs[symbol]
        except KeyError:
            check_symbol(symbol)
            raise

    def export_state(self, omit_separators: bool = False) -> str:
        """Export the plugs as ``S:`` field.

        Every non-identity pair is emitted once.

        Args:
        ----
            omit_separators: Concatenate pairs instead of joining them with dashes.
        """
        seen: set[str] = set()
        chunks: list[str] = []
        for key, value in self._plugs.items():
            if key != value and key not in seen:
                chunks.append(key + value)
                seen.update((key, value))
        sep = "" if omit_separators else PAIR_SEPARATOR
        return TAG_PLUGBOARD + TAG_SEPARATOR + sep.join(chunks)

    def clone(self) -> Plugboard:
        """Return an independent copy."""
        return Plugboard(*self._pairs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Plugboard):
            return self._plugs == other._plugs
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._plugs.items())))

    def __repr__(self) -> str:
        return f"Plugboard({', '.join(repr(p) for p in self._pairs)})"
