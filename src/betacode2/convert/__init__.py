"""
Betacode conversion submodule.

Re-exports the converter, its error types, and the lookup tables.
"""

from betacode2.convert._engine import (
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
from betacode2.convert._tables import COMPOSITIONS, MARKERS

__all__ = [
    "Dialect",
    "ConversionError",
    "UnexpectedCharacter",
    "UnexpectedAccent",
    "to_greek",
    "to_greek_text",
    "lookup_letter",
    "accent_flag",
    "compose",
    "COMPOSITIONS",
    "MARKERS",
]
