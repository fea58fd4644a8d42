"""Enigma Alphabet Utilities

Helpers for the fixed 26 symbol alphabet:
- Charset (wiring) validation
- Modular rotation of indices and symbols
- Conversion of user supplied ring/position values
- Cryptographically random alphabets
"""

from __future__ import annotations

import re
import secrets
from collections.abc import Iterator

from enigma.core.constants import CHARSET, CHARSET_SIZE, PAIR_SEPARATOR
from enigma.core.errors import AlphabetError, FormatError, RangeError

__all__ = [
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
]

_TEXT_RE = re.compile(f"[{CHARSET[0]}-{CHARSET[-1]}]+")


def check_charset(charset: str) -> str:
    """Validate a rotor wiring.

    Args:
    ----
        charset: Wiring string.

    Returns:
    -------
        The unchanged charset.

    Raises:
    ------
        AlphabetError: If the charset is empty, contains duplicates,
            symbols outside A-Z, or is not exactly 26 symbols long.

    Examples:
    --------
        >>> check_charset("EKMFLGDQVZNTOWYHXUSPAIBRCJ")
        'EKMFLGDQVZNTOWYHXUSPAIBRCJ'
    """
    if not charset:
        raise AlphabetError("Charset cannot be empty")
    if len(set(charset)) != len(charset):
        raise AlphabetError(f"Duplicate letter in charset {charset!r}")
    if len(charset) != CHARSET_SIZE or not set(charset) <= set(CHARSET):
        raise AlphabetError(f"Charset must be made up of {CHARSET_SIZE} letters A-Z only, got {charset!r}")
    return charset


def check_symbol(symbol: str) -> str:
    """Ensure ``symbol`` is a single uppercase A-Z letter."""
    if not isinstance(symbol, str) or len(symbol) != 1 or symbol not in CHARSET:
        raise AlphabetError(f"Character not in uppercase A-Z range: {symbol!r}")
    return symbol


def check_text(text: str) -> str:
    """Ensure ``text`` is non-empty and made of A-Z only.

    Raises:
    ------
        FormatError: If the text is empty or has a symbol outside A-Z.
    """
    if not text:
        raise FormatError("Text cannot be empty")
    if not _TEXT_RE.fullmatch(text):
        raise FormatError(f"Text must consist exclusively of A-Z: {text!r}")
    return text


def symbol_index(symbol: str) -> int:
    """Return the 0-25 index of an A-Z symbol."""
    return CHARSET.index(check_symbol(symbol))


def letter_index(symbol: str) -> int:
    """Return the 0-25 index of a single A-Z letter in either case.

    Raises:
    ------
        AlphabetError: If the symbol is not one letter, also after
            uppercasing; some characters uppercase to two letters.
    """
    upper = symbol.upper()
    if len(symbol) != 1 or len(upper) != 1 or upper not in CHARSET:
        raise AlphabetError(f"Not a letter A-Z: {symbol!r}")
    return CHARSET.index(upper)


def rot(x: int) -> int:
    """Wrap ``x`` into 0-25."""
    return x % CHARSET_SIZE


def rot_char(x: int) -> str:
    """Return the symbol at index ``x`` wrapped into 0-25."""
    return CHARSET[rot(x)]


def alpha_to_num(value: str) -> int:
    """Convert a ring or position value into 0-25.

    The value is parsed as a 1-26 decimal first, then as a single
    A-Z letter (case-insensitive). Empty values count as zero.

    Args:
    ----
        value: "1".."26", "A".."Z" or "".

    Returns:
    -------
        Zero-based value.

    Raises:
    ------
        RangeError: If the value is neither.

    Examples:
    --------
        >>> alpha_to_num("1"), alpha_to_num("A"), alpha_to_num("26"), alpha_to_num("z")
        (0, 0, 25, 25)
    """
    if not value:
        return 0
    if value.isascii() and value.isdigit() and 1 <= int(value) <= CHARSET_SIZE:
        return int(value) - 1
    if len(value) == 1:
        try:
            return letter_index(value)
        except AlphabetError as err:
            raise RangeError(f"Value not 1-{CHARSET_SIZE} or A-Z: {value!r}") from err
    raise RangeError(f"Value not 1-{CHARSET_SIZE} or A-Z: {value!r}")


def num_to_alpha(value: int) -> str:
    """Convert a 0-25 value to its letter."""
    if not 0 <= value < CHARSET_SIZE:
        raise RangeError(f"Value must be 0-{CHARSET_SIZE - 1}, got {value}")
    return CHARSET[value]


def fix_alphabet(alphabet: str) -> str:
    """Remove pair separators and whitespace and uppercase.

    The result is not validated.

    Examples:
    --------
        >>> fix_alphabet("ab-cd ef")
        'ABCDEF'
    """
    if not alphabet:
        return alphabet
    return "".join(c for c in alphabet if c != PAIR_SEPARATOR and not c.isspace()).upper()


def chunk(text: str, size: int) -> Iterator[str]:
    """Split ``text`` into ``size`` long pieces; the last may be shorter."""
    for i in range(0, len(text), size):
        yield text[i : i + size]


def crypto_alphabet(count: int = CHARSET_SIZE) -> str:
    """Return the first ``count`` symbols of a random permutation of A-Z.

    The whole alphabet is mixed before it is truncated, using the
    operating system CSPRNG, so every permutation is equally likely.

    Args:
    ----
        count: Number of symbols, 1-26.

    Returns:
    -------
        Mixed alphabet of ``count`` distinct symbols.

    Raises:
    ------
        RangeError: If count is outside 1-26.
    """
    if not 1 <= count <= CHARSET_SIZE:
        raise RangeError(f"Count must be 1-{CHARSET_SIZE}, got {count}")

    pool = list(CHARSET)
    mixed = []
    while pool:
        mixed.append(pool.pop(secrets.randbelow(len(pool))))
    return "".join(mixed[:count])
