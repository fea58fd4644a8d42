"""Message Text Preparation

Turns free text into something the machine can encrypt and formats
cipher text for transmission:
- uppercase, umlauts spelled out, whitespace removed
- digits optionally spelled out in German (the machine has no digits)
- other symbols optionally dropped
- 5 letter groups, 10 groups per line
"""

from __future__ import annotations

from collections.abc import Iterator

from enigma.core.charset import chunk, crypto_alphabet
from enigma.core.constants import CHARSET, GROUP_SIZE, GROUPS_PER_LINE
from enigma.core.errors import FormatError

__all__ = [
    "UMLAUTS",
    "NUMBER_WORDS",
    "prepare_text",
    "pad_to_group",
    "group_text",
    "iter_groups",
]

UMLAUTS: dict[str, str] = {"Ä": "AE", "Ö": "OE", "Ü": "UE"}

NUMBER_WORDS: dict[str, str] = {
    "0": "NULL",
    "1": "EINS",
    "2": "ZWEI",
    "3": "DREI",
    "4": "VIER",
    "5": "FUNF",
    "6": "SECHS",
    "7": "SIEBEN",
    "8": "ACHT",
    "9": "NEUN",
}


def prepare_text(line: str, translate_numbers: bool = False, filter_invalid: bool = False) -> str:
    """Normalize a line of plaintext.

    Args:
    ----
        line: Raw input.
        translate_numbers: Spell out digits (1 -> EINS).
        filter_invalid: Drop symbols outside A-Z instead of failing.

    Returns:
    -------
        Uppercase A-Z text, possibly empty.

    Raises:
    ------
        FormatError: If a symbol outside A-Z remains and filtering is off.

    Examples:
    --------
        >>> prepare_text("Grüße aus 3 Städten", translate_numbers=True, filter_invalid=True)
        'GRUESSEAUSDREISTAEDTEN'
    """
    text = "".join(c for c in line.upper() if not c.isspace())
    for umlaut, spelled in UMLAUTS.items():
        text = text.replace(umlaut, spelled)
    if translate_numbers:
        text = "".join(NUMBER_WORDS.get(c, c) for c in text)
    if filter_invalid:
        return "".join(c for c in text if c in CHARSET)
    bad = [c for c in text if c not in CHARSET]
    if bad:
        raise FormatError(
            f"The line {line!r} contains characters outside of A-Z: {''.join(bad)!r}. "
            "Filter unwanted characters or spell out digits."
        )
    return text


def pad_to_group(text: str, size: int = GROUP_SIZE) -> str:
    """Pad ``text`` with random letters to a multiple of ``size``."""
    rest = len(text) % size
    if rest:
        text += crypto_alphabet(size - rest)
    return text


def iter_groups(text: str, size: int = GROUP_SIZE) -> Iterator[str]:
    """Yield ``size`` letter groups of ``text``."""
    return chunk(text, size)


def group_text(text: str, size: int = GROUP_SIZE, per_line: int = GROUPS_PER_LINE) -> str:
    """Format text as space separated groups, ``per_line`` groups per line.

    Examples:
    --------
        >>> group_text("ABCDEFGHIJKL", size=5, per_line=2)
        'ABCDE FGHIJ\\nKL'
    """
    groups = list(iter_groups(text, size))
    lines = (" ".join(groups[i : i + per_line]) for i in range(0, len(groups), per_line))
    return "\n".join(lines)
