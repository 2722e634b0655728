"""
Coarse parts of speech and their mapping from Penn Treebank tags.

Usage:
    from wn_morphy.pos import PartOfSpeech

    pos = PartOfSpeech.from_penn_tag("VBG")   # PartOfSpeech.VERB
    pos.file_part                              # "verb" (index.verb, verb.exc)
"""

from __future__ import annotations

from enum import Enum


class UnknownTagError(ValueError):
    """Raised when a Penn Treebank tag has no coarse part of speech."""

    def __init__(self, tag: str):
        super().__init__(f"Unrecognized Penn Treebank tag: {tag!r}")
        self.tag = tag


class PartOfSpeech(Enum):
    """The four WordNet syntactic categories.

    Values are the ordinals written to snapshot files, so the order
    must not change.
    """

    ADJECTIVE = 0
    ADVERB = 1
    NOUN = 2
    VERB = 3

    @classmethod
    def from_penn_tag(cls, tag: str) -> PartOfSpeech:
        """Map a Penn Treebank tag (e.g. "NNS", "JJR") by its first letter."""
        pos = _PENN_PREFIXES.get(tag[:1])
        if pos is None:
            raise UnknownTagError(tag)
        return pos

    @property
    def penn_prefix(self) -> str:
        return _PENN_LETTERS[self]

    @property
    def file_part(self) -> str:
        """Name fragment of the WordNet files for this category."""
        return _FILE_PARTS[self]

    def __str__(self) -> str:
        return self.name.lower()


_PENN_LETTERS: dict[PartOfSpeech, str] = {
    PartOfSpeech.ADJECTIVE: "J",
    PartOfSpeech.VERB:      "V",
    PartOfSpeech.ADVERB:    "R",
    PartOfSpeech.NOUN:      "N",
}

_PENN_PREFIXES: dict[str, PartOfSpeech] = {
    letter: pos for pos, letter in _PENN_LETTERS.items()
}

_FILE_PARTS: dict[PartOfSpeech, str] = {
    PartOfSpeech.ADJECTIVE: "adj",
    PartOfSpeech.ADVERB:    "adv",
    PartOfSpeech.NOUN:      "noun",
    PartOfSpeech.VERB:      "verb",
}
