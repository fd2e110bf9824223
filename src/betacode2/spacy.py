"""
spaCy integration for betacode2.

Provides a pipeline component that converts betacode text to Unicode Greek,
and a whitespace tokenizer that keeps betacode words in one piece.

Betacode markers such as ( and / are punctuation to spaCy's default
tokenizers. Under those, Doc._.greek is still correct but word fragments
get Token._.greek = None. Use the betacode tokenizer for per-token output.

Example:
    >>> import spacy
    >>> nlp = spacy.blank(
    ...     "xx",
    ...     config={"nlp": {"tokenizer": {"@tokenizers": "betacode_whitespace_tokenizer"}}},
    ... )
    >>> _ = nlp.add_pipe("betacode_converter", config={"dialect": "tlg"})
    >>> doc = nlp("o( lo/gos")
    >>> doc._.greek
    'ὁ λόγος'
    >>> [t._.greek for t in doc]
    ['ὁ', 'λόγος']
"""

import re
from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token
from spacy.util import registry
from spacy.vocab import Vocab

from betacode2.convert._engine import (
    ConversionError,
    Dialect,
    to_greek,
    to_greek_text,
)
from betacode2.convert._tables import WHITESPACE

__all__ = [
    "BetacodeConverterComponent",
    "BetacodeTokenizer",
    "create_betacode_converter",
    "create_betacode_tokenizer",
]

_ON_ERROR = ("raise", "ignore")

_CHUNK = re.compile(r"\S+|\s+")


# =============================================================================
# Tokenizer
# =============================================================================


class BetacodeTokenizer:
    """Split text on whitespace only, so markers stay attached to their letters.

    A single space after a word becomes that token's trailing whitespace;
    any other whitespace becomes its own token.
    """

    def __init__(self, vocab: Vocab) -> None:
        self.vocab = vocab

    def __call__(self, text: str) -> Doc:
        words = []
        spaces = []
        for match in _CHUNK.finditer(text):
            chunk = match.group()
            if chunk.isspace():
                if words and not spaces[-1] and chunk.startswith(" "):
                    spaces[-1] = True
                    chunk = chunk[1:]
                if not chunk:
                    continue
            words.append(chunk)
            spaces.append(False)
        return Doc(self.vocab, words=words, spaces=spaces)

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "BetacodeTokenizer":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "BetacodeTokenizer":
        return self


@registry.tokenizers("betacode_whitespace_tokenizer")
def create_betacode_tokenizer():
    """Registry entry for nlp.tokenizer config blocks."""

    def make_tokenizer(nlp: Language) -> BetacodeTokenizer:
        return BetacodeTokenizer(nlp.vocab)

    return make_tokenizer


def _is_whole_word(token: Token) -> bool:
    """True if the token is exactly one whitespace-delimited word of its Doc."""
    if token.is_space:
        return False
    text = token.doc.text
    start = token.idx
    end = start + len(token.text)
    if start > 0 and text[start - 1] not in WHITESPACE:
        return False
    return end == len(text) or text[end] in WHITESPACE


# =============================================================================
# Converter Component
# =============================================================================


@Language.factory(
    "betacode_converter",
    default_config={"dialect": "default", "on_error": "raise"},
    assigns=["doc._.greek", "token._.greek"],
)
def create_betacode_converter(
    nlp: Language,
    name: str,
    dialect: str = "default",
    on_error: str = "raise",
) -> "BetacodeConverterComponent":
    """Create a betacode converter pipeline component."""
    return BetacodeConverterComponent(nlp, name, dialect=dialect, on_error=on_error)


class BetacodeConverterComponent:
    """
    spaCy pipeline component for betacode → Greek conversion.

    Extensions:
        - Doc._.greek: Converted document text.
        - Token._.greek: Converted token text.

    Only tokens covering a whole whitespace-delimited word are converted;
    fragments split off by a punctuation-aware tokenizer stay None.

    With on_error="ignore", text that fails to convert leaves the
    extension as None instead of raising ConversionError.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        dialect: str = "default",
        on_error: str = "raise",
    ) -> None:
        self.name = name
        self.dialect = Dialect.coerce(dialect)

        if on_error not in _ON_ERROR:
            raise ValueError(
                f"Unknown on_error: {on_error}. Expected one of {_ON_ERROR}."
            )
        self.on_error = on_error

        if not Doc.has_extension("greek"):
            Doc.set_extension("greek", default=None)
        if not Token.has_extension("greek"):
            Token.set_extension("greek", default=None)

    def _convert(self, func, text: str) -> Optional[str]:
        try:
            return func(text, self.dialect)
        except ConversionError:
            if self.on_error == "raise":
                raise
            return None

    def __call__(self, doc: Doc) -> Doc:
        doc._.greek = self._convert(to_greek_text, doc.text)

        for token in doc:
            if _is_whole_word(token):
                token._.greek = self._convert(to_greek, token.text)
            else:
                token._.greek = None

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "BetacodeConverterComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "BetacodeConverterComponent":
        return self


def get_converter_pipe(nlp: Language) -> Optional[BetacodeConverterComponent]:
    """Get the betacode converter component from a pipeline."""
    if "betacode_converter" in nlp.pipe_names:
        return nlp.get_pipe("betacode_converter")
    return None
