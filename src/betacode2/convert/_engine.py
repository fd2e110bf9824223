"""
Strict single-pass betacode → Unicode Greek converter.

Each letter is read together with the diacritic markers that follow it and
resolved to exactly one precomposed character. Anything the tables cannot
express is rejected rather than approximated.

Example:
    >>> from betacode2.convert import Dialect, to_greek
    >>> to_greek("qeo/v")
    'θεός'
    >>> to_greek("qeo/s", Dialect.TLG)
    'θεός'

to_greek() reads one word; use to_greek_text() for running text:
    >>> from betacode2.convert import to_greek_text
    >>> to_greek_text("e)n a)rxh=|", Dialect.TLG)
    'ἐν ἀρχῇ'
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from betacode2.convert._tables import (
    CAPITAL_MARK,
    COMPOSITIONS,
    DEFAULT_LETTERS,
    ELISION,
    ELISION_MARK,
    MARKERS,
    SHARED_LETTERS,
    TLG_LETTERS,
    WHITESPACE,
)

__all__ = [
    "Dialect",
    "ConversionError",
    "UnexpectedCharacter",
    "UnexpectedAccent",
    "lookup_letter",
    "accent_flag",
    "compose",
    "to_greek",
    "to_greek_text",
]

# =============================================================================
# Dialects
# =============================================================================


class Dialect(Enum):
    """Betacode variant to read.

    DEFAULT follows the Robinson-Pierpont conventions (v = σ, c = χ);
    TLG follows the Thesaurus Linguae Graecae (v = ϝ, c = ξ, x = χ).
    """

    DEFAULT = 0
    TLG = 1

    @classmethod
    def coerce(cls, value: Union["Dialect", str]) -> "Dialect":
        """Accept a Dialect or its case-insensitive name ("default", "tlg")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(
            f"Unknown betacode dialect: {value!r}. Expected 'default' or 'tlg'."
        )


_DIALECT_LETTERS = {
    Dialect.DEFAULT: DEFAULT_LETTERS,
    Dialect.TLG: TLG_LETTERS,
}

# =============================================================================
# Errors
# =============================================================================


class ConversionError(ValueError):
    """Base class for betacode conversion failures.

    Attributes:
        char: The offending character.
        position: Index of the offending character in the input string.
    """

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(self.describe())

    def __reduce__(self):
        return (type(self), (self.char, self.position))

    def describe(self) -> str:
        """Human-readable message for this failure."""
        return f"Invalid betacode {self.char!r} at position {self.position}"


class UnexpectedCharacter(ConversionError):
    """A character that is not a letter, a marker after a letter, or whitespace."""

    def describe(self) -> str:
        return f"Unexpected character {self.char!r} at position {self.position}"


class UnexpectedAccent(ConversionError):
    """A letter whose markers have no precomposed Unicode character.

    `char` is the base Greek letter and `position` is where the letter
    started, not where the offending marker was.
    """

    def describe(self) -> str:
        return (
            f"Unexpected accent combination on letter {self.char!r} "
            f"at position {self.position}"
        )


# =============================================================================
# Classifiers
# =============================================================================


def lookup_letter(char: str, dialect: Dialect = Dialect.DEFAULT) -> Optional[str]:
    """
    Return the base Greek letter for a betacode character, or None.

    The shared alphabet is consulted first; dialect-specific letters
    only fill in what it does not cover.
    """
    letter = SHARED_LETTERS.get(char)
    if letter is not None:
        return letter
    return _DIALECT_LETTERS[dialect].get(char)


def accent_flag(char: str) -> int:
    """Return the accent flag for a betacode marker, or 0."""
    return MARKERS.get(char, 0)


def compose(letter: str, mask: int) -> Optional[str]:
    """
    Combine a base letter with an accent mask into one precomposed character.

    Args:
        letter: Base Greek letter as returned by lookup_letter()
        mask: OR of accent flags

    Returns:
        The precomposed character, or None when Unicode has no such character
    """
    if not mask:
        return letter
    return COMPOSITIONS.get((letter, mask))


# =============================================================================
# Scanner
# =============================================================================


def _trim(text: str, start: int, end: int) -> tuple[int, int]:
    """Narrow [start, end) past leading and trailing whitespace."""
    while start < end and text[start] in WHITESPACE:
        start += 1
    while end > start and text[end - 1] in WHITESPACE:
        end -= 1
    return start, end


def _resolve(letter: str, mask: int, position: int) -> str:
    composed = compose(letter, mask)
    if composed is None:
        raise UnexpectedAccent(letter, position)
    return composed


def _convert_span(text: str, start: int, end: int, dialect: Dialect) -> str:
    """
    Convert the betacode word in text[start:end].

    Positions in raised errors index into the full `text`.
    """
    start, end = _trim(text, start, end)
    if start == end:
        return ""

    word: list[str] = []
    current: Optional[str] = None
    current_index = start
    mask = 0

    i = start
    while i < end:
        char = text[i]
        if char == CAPITAL_MARK:
            # Capitalisation is carried by the letter itself
            i += 1
            continue
        if not char.isascii():
            raise UnexpectedCharacter(char, i)

        letter = lookup_letter(char, dialect)
        if letter is not None:
            if current is not None:
                word.append(_resolve(current, mask, current_index))
            current = letter
            current_index = i
            mask = 0
            i += 1
            continue

        if char in WHITESPACE:
            break

        flag = accent_flag(char)
        if flag:
            if current is None:
                raise UnexpectedCharacter(char, current_index)
            mask |= flag
            i += 1
            continue

        # Punctuation is checked by the tail pass below
        break

    if current is not None:
        if current == "σ" and not mask:
            word.append("ς")
        else:
            word.append(_resolve(current, mask, current_index))

        if i < end and text[i] == ELISION_MARK:
            word.append(ELISION)
            i += 1

    while i < end:
        if text[i] not in WHITESPACE:
            raise UnexpectedCharacter(text[i], i)
        i += 1

    return "".join(word)


def to_greek(text: str, dialect: Union[Dialect, str] = Dialect.DEFAULT) -> str:
    """
    Convert a single betacode word into precomposed Unicode Greek.

    Leading and trailing whitespace is ignored. Empty or all-whitespace
    input gives an empty string. A bare sigma at the end of the word
    becomes final ς unless a 1/2/3 selector says otherwise, and a
    trailing apostrophe becomes the elision mark ᾽.

    Args:
        text: ASCII betacode (e.g. "qeo/v")
        dialect: Dialect.DEFAULT, Dialect.TLG, or their names

    Returns:
        The Greek word

    Raises:
        UnexpectedCharacter: non-ASCII input, a marker with no letter
            before it, a letter outside the dialect, or stray punctuation
        UnexpectedAccent: a letter whose markers have no precomposed form

    Example:
        >>> to_greek("a)p'")
        'ἀπ᾽'
    """
    return _convert_span(text, 0, len(text), Dialect.coerce(dialect))


def to_greek_text(text: str, dialect: Union[Dialect, str] = Dialect.DEFAULT) -> str:
    """
    Convert running betacode text word by word.

    Words are separated by runs of whitespace, which are copied to the
    output unchanged. Error positions refer to `text` as a whole.

    Example:
        >>> to_greek_text("kai\\\\ o( lo/gos")
        'καὶ ὁ λόγος'
    """
    dialect = Dialect.coerce(dialect)
    out: list[str] = []
    i = 0
    size = len(text)
    while i < size:
        j = i
        if text[i] in WHITESPACE:
            while j < size and text[j] in WHITESPACE:
                j += 1
            out.append(text[i:j])
        else:
            while j < size and text[j] not in WHITESPACE:
                j += 1
            out.append(_convert_span(text, i, j, dialect))
        i = j
    return "".join(out)
