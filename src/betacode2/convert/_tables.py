"""
Lookup tables for betacode → Unicode Greek conversion.

Provides:
- Accent flags: one bit per betacode diacritic marker
- MARKERS: marker character → accent flag
- SHARED_LETTERS / DEFAULT_LETTERS / TLG_LETTERS: letter classification
- COMPOSITIONS: (base letter, accent mask) → precomposed Greek character

Every table is built once at import time and exposed read-only. A pairing
that is absent from COMPOSITIONS has no precomposed form and is rejected by
the converter; nothing here is synthesized from combining marks.

See: https://stephanus.tlg.uci.edu/encoding/BCM.pdf
"""

from __future__ import annotations

from types import MappingProxyType

__all__ = [
    "ACUTE",
    "GRAVE",
    "CIRCUMFLEX",
    "DIAERESIS",
    "ROUGH",
    "SMOOTH",
    "IOTA",
    "SIGMA1",
    "SIGMA2",
    "SIGMA3",
    "MARKERS",
    "SHARED_LETTERS",
    "DEFAULT_LETTERS",
    "TLG_LETTERS",
    "COMPOSITIONS",
    "WHITESPACE",
    "CAPITAL_MARK",
    "ELISION_MARK",
    "ELISION",
]

# =============================================================================
# Accent Flags
# =============================================================================

ACUTE = 0x1
GRAVE = 0x2
CIRCUMFLEX = 0x4
DIAERESIS = 0x8
ROUGH = 0x10
SMOOTH = 0x20
IOTA = 0x40
SIGMA1 = 0x80  # medial σ
SIGMA2 = 0x100  # final ς
SIGMA3 = 0x200  # lunate ϲ

MARKERS = MappingProxyType({
    "/": ACUTE,
    "\\": GRAVE,
    "(": ROUGH,
    ")": SMOOTH,
    "|": IOTA,
    "+": DIAERESIS,
    "=": CIRCUMFLEX,
    "^": CIRCUMFLEX,
    "1": SIGMA1,
    "2": SIGMA2,
    "3": SIGMA3,
})

# NUL is treated as whitespace
WHITESPACE = frozenset(" \t\r\n\0")

CAPITAL_MARK = "*"
ELISION_MARK = "'"
ELISION = "᾽"  # U+1FBD GREEK KORONIS

# =============================================================================
# Letter Tables
# =============================================================================

# Letters common to both dialects. t/T → γ/Γ is inherited from the
# Robinson-Pierpont tables and kept as-is.
SHARED_LETTERS = MappingProxyType({
    "a": "α", "b": "β", "d": "δ", "e": "ε", "f": "φ", "g": "γ",
    "h": "η", "i": "ι", "k": "κ", "l": "λ", "m": "μ", "n": "ν",
    "o": "ο", "p": "π", "q": "θ", "r": "ρ", "s": "σ", "t": "γ",
    "u": "υ", "w": "ω", "y": "ψ", "z": "ζ",
    # Capital Α, not the lowercase α of the older tables; P → Π is new too
    "A": "Α", "B": "Β", "D": "Δ", "E": "Ε", "F": "Φ", "G": "Γ",
    "H": "Η", "I": "Ι", "K": "Κ", "L": "Λ", "M": "Μ", "N": "Ν",
    "O": "Ο", "P": "Π", "Q": "Θ", "R": "Ρ", "S": "Σ", "T": "Γ",
    "U": "Υ", "W": "Ω", "Y": "Ψ", "Z": "Ζ",
})

DEFAULT_LETTERS = MappingProxyType({
    "v": "σ",
    "V": "Σ",
    "j": "ς",
    "J": "Σ",
    "c": "χ",
    "C": "χ",
})

TLG_LETTERS = MappingProxyType({
    "v": "ϝ",
    "V": "Ϝ",
    "c": "ξ",
    "C": "Ξ",
    "x": "χ",
    "X": "Χ",
})

# =============================================================================
# Composition Table
# =============================================================================

_SMOOTH_ACUTE = SMOOTH | ACUTE
_SMOOTH_GRAVE = SMOOTH | GRAVE
_SMOOTH_CIRCUMFLEX = SMOOTH | CIRCUMFLEX
_ROUGH_ACUTE = ROUGH | ACUTE
_ROUGH_GRAVE = ROUGH | GRAVE
_ROUGH_CIRCUMFLEX = ROUGH | CIRCUMFLEX
_DIAERESIS_ACUTE = DIAERESIS | ACUTE
_DIAERESIS_GRAVE = DIAERESIS | GRAVE

_COMPOSITIONS = {
    # --- alpha ---
    ("α", SMOOTH): "ἀ",
    ("α", ROUGH): "ἁ",
    ("α", ACUTE): "ά",
    ("α", GRAVE): "ὰ",
    ("α", CIRCUMFLEX): "ᾶ",
    ("α", _SMOOTH_ACUTE): "ἄ",
    ("α", _SMOOTH_GRAVE): "ἂ",
    ("α", _SMOOTH_CIRCUMFLEX): "ἆ",
    ("α", _ROUGH_ACUTE): "ἅ",
    ("α", _ROUGH_GRAVE): "ἃ",
    ("α", _ROUGH_CIRCUMFLEX): "ἇ",
    ("α", IOTA): "ᾳ",
    ("α", IOTA | ACUTE): "ᾴ",
    ("α", IOTA | GRAVE): "ᾲ",
    ("α", IOTA | CIRCUMFLEX): "ᾷ",
    ("α", IOTA | SMOOTH): "ᾀ",
    ("α", IOTA | ROUGH): "ᾁ",
    ("α", IOTA | _SMOOTH_ACUTE): "ᾄ",
    ("α", IOTA | _SMOOTH_GRAVE): "ᾂ",
    ("α", IOTA | _SMOOTH_CIRCUMFLEX): "ᾆ",
    ("α", IOTA | _ROUGH_ACUTE): "ᾅ",
    ("α", IOTA | _ROUGH_GRAVE): "ᾃ",
    ("α", IOTA | _ROUGH_CIRCUMFLEX): "ᾇ",
    ("Α", SMOOTH): "Ἀ",
    ("Α", ROUGH): "Ἁ",
    ("Α", ACUTE): "Ά",
    ("Α", GRAVE): "Ὰ",
    ("Α", _SMOOTH_ACUTE): "Ἄ",
    ("Α", _SMOOTH_GRAVE): "Ἂ",
    ("Α", _SMOOTH_CIRCUMFLEX): "Ἆ",
    ("Α", _ROUGH_ACUTE): "Ἅ",
    ("Α", _ROUGH_GRAVE): "Ἃ",
    ("Α", _ROUGH_CIRCUMFLEX): "Ἇ",
    ("Α", IOTA): "ᾼ",
    ("Α", IOTA | SMOOTH): "ᾈ",
    ("Α", IOTA | ROUGH): "ᾉ",
    ("Α", IOTA | _SMOOTH_ACUTE): "ᾌ",
    ("Α", IOTA | _SMOOTH_GRAVE): "ᾊ",
    ("Α", IOTA | _SMOOTH_CIRCUMFLEX): "ᾎ",
    ("Α", IOTA | _ROUGH_ACUTE): "ᾍ",
    ("Α", IOTA | _ROUGH_GRAVE): "ᾋ",
    ("Α", IOTA | _ROUGH_CIRCUMFLEX): "ᾏ",
    # --- epsilon ---
    ("ε", SMOOTH): "ἐ",
    ("ε", ROUGH): "ἑ",
    ("ε", ACUTE): "έ",
    ("ε", GRAVE): "ὲ",
    ("ε", _SMOOTH_ACUTE): "ἔ",
    ("ε", _SMOOTH_GRAVE): "ἒ",
    ("ε", _ROUGH_ACUTE): "ἕ",
    ("ε", _ROUGH_GRAVE): "ἓ",
    ("Ε", SMOOTH): "Ἐ",
    ("Ε", ROUGH): "Ἑ",
    ("Ε", ACUTE): "Έ",
    ("Ε", GRAVE): "Ὲ",
    ("Ε", _SMOOTH_ACUTE): "Ἔ",
    ("Ε", _SMOOTH_GRAVE): "Ἒ",
    ("Ε", _ROUGH_ACUTE): "Ἕ",
    ("Ε", _ROUGH_GRAVE): "Ἓ",
    # --- eta ---
    ("η", SMOOTH): "ἠ",
    ("η", ROUGH): "ἡ",
    ("η", ACUTE): "ή",
    ("η", GRAVE): "ὴ",
    ("η", CIRCUMFLEX): "ῆ",
    ("η", _SMOOTH_ACUTE): "ἤ",
    ("η", _SMOOTH_GRAVE): "ἢ",
    ("η", _SMOOTH_CIRCUMFLEX): "ἦ",
    ("η", _ROUGH_ACUTE): "ἥ",
    ("η", _ROUGH_GRAVE): "ἣ",
    ("η", _ROUGH_CIRCUMFLEX): "ἧ",
    ("η", IOTA): "ῃ",
    ("η", IOTA | ACUTE): "ῄ",
    ("η", IOTA | GRAVE): "ῂ",
    ("η", IOTA | CIRCUMFLEX): "ῇ",
    ("η", IOTA | SMOOTH): "ᾐ",
    ("η", IOTA | ROUGH): "ᾑ",
    ("η", IOTA | _SMOOTH_ACUTE): "ᾔ",
    ("η", IOTA | _SMOOTH_GRAVE): "ᾒ",
    ("η", IOTA | _SMOOTH_CIRCUMFLEX): "ᾖ",
    ("η", IOTA | _ROUGH_ACUTE): "ᾕ",
    ("η", IOTA | _ROUGH_GRAVE): "ᾓ",
    ("η", IOTA | _ROUGH_CIRCUMFLEX): "ᾗ",
    ("Η", SMOOTH): "Ἠ",
    ("Η", ROUGH): "Ἡ",
    ("Η", ACUTE): "Ή",
    ("Η", GRAVE): "Ὴ",
    ("Η", _SMOOTH_ACUTE): "Ἤ",
    ("Η", _SMOOTH_GRAVE): "Ἢ",
    ("Η", _SMOOTH_CIRCUMFLEX): "Ἦ",
    ("Η", _ROUGH_ACUTE): "Ἥ",
    ("Η", _ROUGH_GRAVE): "Ἣ",
    ("Η", _ROUGH_CIRCUMFLEX): "Ἧ",
    ("Η", IOTA): "ῌ",
    ("Η", IOTA | SMOOTH): "ᾘ",
    ("Η", IOTA | ROUGH): "ᾙ",
    ("Η", IOTA | _SMOOTH_ACUTE): "ᾜ",
    ("Η", IOTA | _SMOOTH_GRAVE): "ᾚ",
    ("Η", IOTA | _SMOOTH_CIRCUMFLEX): "ᾞ",
    ("Η", IOTA | _ROUGH_ACUTE): "ᾝ",
    ("Η", IOTA | _ROUGH_GRAVE): "ᾛ",
    ("Η", IOTA | _ROUGH_CIRCUMFLEX): "ᾟ",
    # --- iota ---
    ("ι", SMOOTH): "ἰ",
    ("ι", ROUGH): "ἱ",
    ("ι", ACUTE): "ί",
    ("ι", GRAVE): "ὶ",
    ("ι", CIRCUMFLEX): "ῖ",
    ("ι", _SMOOTH_ACUTE): "ἴ",
    ("ι", _SMOOTH_GRAVE): "ἲ",
    ("ι", _SMOOTH_CIRCUMFLEX): "ἶ",
    ("ι", _ROUGH_ACUTE): "ἵ",
    ("ι", _ROUGH_GRAVE): "ἳ",
    ("ι", _ROUGH_CIRCUMFLEX): "ἷ",
    ("ι", DIAERESIS): "ϊ",
    ("ι", _DIAERESIS_ACUTE): "ΐ",
    ("ι", _DIAERESIS_GRAVE): "ῒ",
    ("Ι", SMOOTH): "Ἰ",
    ("Ι", ROUGH): "Ἱ",
    ("Ι", ACUTE): "Ί",
    ("Ι", GRAVE): "Ὶ",
    ("Ι", _SMOOTH_ACUTE): "Ἴ",
    ("Ι", _SMOOTH_GRAVE): "Ἲ",
    ("Ι", _SMOOTH_CIRCUMFLEX): "Ἶ",
    ("Ι", _ROUGH_ACUTE): "Ἵ",
    ("Ι", _ROUGH_GRAVE): "Ἳ",
    ("Ι", _ROUGH_CIRCUMFLEX): "Ἷ",
    # No capital Ϊ with an accent exists; I+/ and I+\ are rejected rather
    # than mapped to lowercase ΐ/ῒ as older tables did
    ("Ι", DIAERESIS): "Ϊ",
    # --- omicron ---
    ("ο", SMOOTH): "ὀ",
    ("ο", ROUGH): "ὁ",
    ("ο", ACUTE): "ό",
    ("ο", GRAVE): "ὸ",
    ("ο", _SMOOTH_ACUTE): "ὄ",
    ("ο", _SMOOTH_GRAVE): "ὂ",
    ("ο", _ROUGH_ACUTE): "ὅ",
    ("ο", _ROUGH_GRAVE): "ὃ",
    ("Ο", SMOOTH): "Ὀ",
    ("Ο", ROUGH): "Ὁ",
    ("Ο", ACUTE): "Ό",
    ("Ο", GRAVE): "Ὸ",
    ("Ο", _SMOOTH_ACUTE): "Ὄ",
    ("Ο", _SMOOTH_GRAVE): "Ὂ",
    ("Ο", _ROUGH_ACUTE): "Ὅ",
    ("Ο", _ROUGH_GRAVE): "Ὃ",
    # --- upsilon ---
    ("υ", SMOOTH): "ὐ",
    ("υ", ROUGH): "ὑ",
    ("υ", ACUTE): "ύ",
    ("υ", GRAVE): "ὺ",
    ("υ", CIRCUMFLEX): "ῦ",
    ("υ", _SMOOTH_ACUTE): "ὔ",
    ("υ", _SMOOTH_GRAVE): "ὒ",
    ("υ", _SMOOTH_CIRCUMFLEX): "ὖ",
    ("υ", _ROUGH_ACUTE): "ὕ",
    ("υ", _ROUGH_GRAVE): "ὓ",
    ("υ", _ROUGH_CIRCUMFLEX): "ὗ",
    ("υ", DIAERESIS): "ϋ",
    ("υ", _DIAERESIS_ACUTE): "ΰ",
    ("υ", _DIAERESIS_GRAVE): "ῢ",
    # Capital upsilon has no precomposed smooth-breathing forms, so U) and
    # U)= are rejected rather than mapped to lowercase ὐ/ὖ as older tables did
    ("Υ", ROUGH): "Ὑ",
    ("Υ", ACUTE): "Ύ",
    ("Υ", GRAVE): "Ὺ",
    ("Υ", _ROUGH_ACUTE): "Ὕ",
    ("Υ", _ROUGH_GRAVE): "Ὓ",
    ("Υ", _ROUGH_CIRCUMFLEX): "Ὗ",
    ("Υ", DIAERESIS): "Ϋ",
    # --- omega ---
    ("ω", SMOOTH): "ὠ",
    ("ω", ROUGH): "ὡ",
    ("ω", ACUTE): "ώ",
    ("ω", GRAVE): "ὼ",
    ("ω", CIRCUMFLEX): "ῶ",
    ("ω", _SMOOTH_ACUTE): "ὤ",
    ("ω", _SMOOTH_GRAVE): "ὢ",
    ("ω", _SMOOTH_CIRCUMFLEX): "ὦ",
    ("ω", _ROUGH_ACUTE): "ὥ",
    ("ω", _ROUGH_GRAVE): "ὣ",
    ("ω", _ROUGH_CIRCUMFLEX): "ὧ",
    ("ω", IOTA): "ῳ",
    ("ω", IOTA | ACUTE): "ῴ",
    ("ω", IOTA | GRAVE): "ῲ",
    ("ω", IOTA | CIRCUMFLEX): "ῷ",
    ("ω", IOTA | SMOOTH): "ᾠ",
    ("ω", IOTA | ROUGH): "ᾡ",
    ("ω", IOTA | _SMOOTH_ACUTE): "ᾤ",
    ("ω", IOTA | _SMOOTH_GRAVE): "ᾢ",
    ("ω", IOTA | _SMOOTH_CIRCUMFLEX): "ᾦ",
    ("ω", IOTA | _ROUGH_ACUTE): "ᾥ",
    ("ω", IOTA | _ROUGH_GRAVE): "ᾣ",
    ("ω", IOTA | _ROUGH_CIRCUMFLEX): "ᾧ",
    ("Ω", SMOOTH): "Ὠ",
    ("Ω", ROUGH): "Ὡ",
    ("Ω", ACUTE): "Ώ",
    ("Ω", GRAVE): "Ὼ",
    ("Ω", _SMOOTH_ACUTE): "Ὤ",
    ("Ω", _SMOOTH_GRAVE): "Ὢ",
    ("Ω", _SMOOTH_CIRCUMFLEX): "Ὦ",
    ("Ω", _ROUGH_ACUTE): "Ὥ",
    ("Ω", _ROUGH_GRAVE): "Ὣ",
    ("Ω", _ROUGH_CIRCUMFLEX): "Ὧ",
    ("Ω", IOTA): "ῼ",
    ("Ω", IOTA | SMOOTH): "ᾨ",
    ("Ω", IOTA | ROUGH): "ᾩ",
    ("Ω", IOTA | _SMOOTH_ACUTE): "ᾬ",
    ("Ω", IOTA | _SMOOTH_GRAVE): "ᾪ",
    ("Ω", IOTA | _SMOOTH_CIRCUMFLEX): "ᾮ",
    ("Ω", IOTA | _ROUGH_ACUTE): "ᾭ",
    ("Ω", IOTA | _ROUGH_GRAVE): "ᾫ",
    ("Ω", IOTA | _ROUGH_CIRCUMFLEX): "ᾯ",
    # --- rho ---
    ("ρ", SMOOTH): "ῤ",
    ("ρ", ROUGH): "ῥ",
    ("Ρ", ROUGH): "Ῥ",
    # --- sigma ---
    ("σ", SIGMA1): "σ",
    ("σ", SIGMA2): "ς",
    ("σ", SIGMA3): "ϲ",
    # No capital final form: selectors 1 and 2 both give Σ
    ("Σ", SIGMA1): "Σ",
    ("Σ", SIGMA2): "Σ",
    ("Σ", SIGMA3): "Ϲ",
}

COMPOSITIONS = MappingProxyType(_COMPOSITIONS)
