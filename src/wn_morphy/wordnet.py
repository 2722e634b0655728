"""
Read the lemma index and morphology exception lists of a WordNet database.

From https://wordnet.princeton.edu/documentation/wndb5wn:

    index.noun, index.verb, index.adj, index.adv
        Each file begins with license lines that all start with two
        spaces. Every other line starts with the lemma: lower case ASCII
        text of a word or collocation (words joined with "_").

    noun.exc, verb.exc, adj.exc, adv.exc
        The first field of each line is an inflected form, followed by a
        space separated list of one or more base forms.

Usage:
    from wn_morphy.wordnet import load_lemmas, load_exceptions

    lemmas = load_lemmas("/usr/share/wordnet/dict")
    exceptions = load_exceptions("/usr/share/wordnet/dict")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from wn_morphy.lexicon import ExceptionTable, LemmaSet
from wn_morphy.pos import PartOfSpeech

logger = logging.getLogger(__name__)


def index_path(wordnet_dir: str | Path, pos: PartOfSpeech) -> Path:
    return Path(wordnet_dir) / f"index.{pos.file_part}"


def exception_path(wordnet_dir: str | Path, pos: PartOfSpeech) -> Path:
    return Path(wordnet_dir) / f"{pos.file_part}.exc"


# ── Line parsers ─────────────────────────────────────────────────────────

def read_lemmas(lines: Iterable[str]) -> Iterator[str]:
    """Yield the lemma of every index line, skipping license lines."""
    for line in lines:
        line = line.rstrip("\r\n")
        if not line or line.startswith(" "):
            continue
        lemma, _sep, _rest = line.partition(" ")
        yield lemma


def read_exceptions(lines: Iterable[str]) -> Iterator[tuple[str, list[str]]]:
    """Yield ``(inflected_form, [base, ...])`` for every exception line."""
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        yield fields[0], fields[1:]


# ── Directory loaders ────────────────────────────────────────────────────

def _read_lines(path: Path) -> list[str]:
    if not path.is_file():
        raise FileNotFoundError(f"WordNet file not found: {path}")
    with path.open(encoding="utf-8") as f:
        return f.readlines()


def load_lemmas(wordnet_dir: str | Path) -> LemmaSet:
    """Build the LemmaSet from the four ``index.*`` files."""
    per_pos = {}
    for pos in PartOfSpeech:
        path = index_path(wordnet_dir, pos)
        per_pos[pos] = list(read_lemmas(_read_lines(path)))
        logger.debug("Read %d %s lemmas from %s", len(per_pos[pos]), pos, path)
    return LemmaSet.build(per_pos)


def load_exceptions(wordnet_dir: str | Path) -> ExceptionTable:
    """Build the ExceptionTable from the four ``*.exc`` files."""
    per_pos = {}
    for pos in PartOfSpeech:
        path = exception_path(wordnet_dir, pos)
        per_pos[pos] = list(read_exceptions(_read_lines(path)))
        logger.debug("Read %d %s exceptions from %s", len(per_pos[pos]), pos, path)
    return ExceptionTable.build(per_pos)
