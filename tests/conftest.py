"""Shared test fixtures."""

from pathlib import Path

import pytest

from wn_morphy.lemmatizer import Lemmatizer
from wn_morphy.lexicon import ExceptionTable, LemmaSet
from wn_morphy.pos import PartOfSpeech

NOUN = PartOfSpeech.NOUN
VERB = PartOfSpeech.VERB
ADJ = PartOfSpeech.ADJECTIVE
ADV = PartOfSpeech.ADVERB


# Small WordNet-shaped database: license lines start with two spaces,
# index lines start with the lemma, exception lines are space separated.
LICENSE = [
    "  1 This software and database is being provided to you, the LICENSEE, by  ",
    "  2 Princeton University under the following license.  By obtaining, using  ",
]

INDEX_FILES = {
    "index.noun": ["cat n 1 0 1 0 01", "goose n 1 0 1 0 02", "woman n 1 0 1 0 03",
                   "box n 1 0 1 0 04", "church n 1 0 1 0 05", "city n 1 0 1 0 06",
                   "run n 1 0 1 0 07", "ice_cream n 1 0 1 0 08"],
    "index.verb": ["run v 1 0 1 0 11", "be v 1 0 1 0 12", "hope v 1 0 1 0 13",
                   "hop v 1 0 1 0 14", "try v 1 0 1 0 15"],
    "index.adj":  ["good a 1 0 1 0 21", "fine a 1 0 1 0 22", "big a 1 0 1 0 23"],
    "index.adv":  ["well r 1 0 1 0 31", "fast r 1 0 1 0 32"],
}

EXCEPTION_FILES = {
    "noun.exc": ["geese goose", "mice mouse"],
    "verb.exc": ["running run", "was be", "ran run"],
    "adj.exc":  ["better good well", "bigger big"],
    "adv.exc":  ["better well"],
}


def write_wordnet(directory: Path) -> Path:
    """Write the sample WordNet files into ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    for name, lines in INDEX_FILES.items():
        (directory / name).write_text("\n".join(LICENSE + lines) + "\n", encoding="utf-8")
    for name, lines in EXCEPTION_FILES.items():
        (directory / name).write_text("\n".join(lines) + "\n", encoding="utf-8")
    return directory


def make_lemmatizer(lemmas: dict, exceptions: dict | None = None) -> Lemmatizer:
    """Build a Lemmatizer from ``{pos: [lemma, ...]}`` and ``{pos: {form: [base, ...]}}``."""
    per_pos_exceptions = {
        pos: list(table.items()) for pos, table in (exceptions or {}).items()
    }
    return Lemmatizer(LemmaSet.build(lemmas), ExceptionTable.build(per_pos_exceptions))


@pytest.fixture
def wordnet_dir(tmp_path: Path) -> Path:
    return write_wordnet(tmp_path / "dict")


@pytest.fixture
def lemmatizer(wordnet_dir: Path) -> Lemmatizer:
    return Lemmatizer.from_wordnet(wordnet_dir)
