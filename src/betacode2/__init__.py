"""
betacode2: strict betacode → Unicode Greek conversion.

Reads Robinson-Pierpont ("default") and TLG betacode and produces
precomposed (NFC) polytonic Greek. Invalid input raises instead of being
passed through.

Basic usage:
    >>> from betacode2 import to_greek, Dialect
    >>> to_greek("qeo/v")
    'θεός'
    >>> to_greek("qeo/s", Dialect.TLG)
    'θεός'

Running text:
    >>> from betacode2 import to_greek_text
    >>> to_greek_text("e)n a)rxh=| h)=n o( lo/gos", "tlg")
    'ἐν ἀρχῇ ἦν ὁ λόγος'
"""

from betacode2.convert import (
    COMPOSITIONS,
    ConversionError,
    Dialect,
    UnexpectedAccent,
    UnexpectedCharacter,
    accent_flag,
    compose,
    lookup_letter,
    to_greek,
    to_greek_text,
)

__version__ = "0.1.0"
__all__ = [
    "to_greek",
    "to_greek_text",
    "Dialect",
    "ConversionError",
    "UnexpectedCharacter",
    "UnexpectedAccent",
    "lookup_letter",
    "accent_flag",
    "compose",
    "COMPOSITIONS",
]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "BetacodeConverterComponent":
        try:
            from betacode2.spacy import BetacodeConverterComponent
            return BetacodeConverterComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install betacode2[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
