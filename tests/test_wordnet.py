"""Tests for the WordNet database reader (wordnet.py)."""

import pytest
from conftest import write_wordnet
from wn_morphy.pos import PartOfSpeech
from wn_morphy.wordnet import (
    exception_path,
    index_path,
    load_exceptions,
    load_lemmas,
    read_exceptions,
    read_lemmas,
)


# ── Line parsers ──────────────────────────────────────────────────────────────

def test_read_lemmas_skips_license_lines():
    lines = [
        "  1 This software and database is being provided to you\n",
        "  2 Princeton University under the following license.\n",
        "cat n 8 4 @ ~ #m %p 8 3 02121808\n",
        "ice_cream n 1 2 @ ~ 1 0 07614500\n",
    ]
    assert list(read_lemmas(lines)) == ["cat", "ice_cream"]


def test_read_lemmas_line_without_space():
    assert list(read_lemmas(["lonely\n"])) == ["lonely"]


def test_read_lemmas_skips_blank_lines():
    assert list(read_lemmas(["\n", "cat n 1\n", ""])) == ["cat"]


def test_read_exceptions():
    lines = ["geese goose\n", "better good well\n", "axes ax axis\n"]
    assert list(read_exceptions(lines)) == [
        ("geese", ["goose"]),
        ("better", ["good", "well"]),
        ("axes", ["ax", "axis"]),
    ]


def test_read_exceptions_whitespace_and_blank_lines():
    assert list(read_exceptions(["  \n", "mice\tmouse  \n"])) == [("mice", ["mouse"])]


# ── Directory loaders ─────────────────────────────────────────────────────────

def test_paths(tmp_path):
    assert index_path(tmp_path, PartOfSpeech.ADJECTIVE) == tmp_path / "index.adj"
    assert exception_path(tmp_path, PartOfSpeech.ADVERB) == tmp_path / "adv.exc"


def test_load_lemmas(wordnet_dir):
    lemmas = load_lemmas(wordnet_dir)
    assert lemmas.contains("cat", PartOfSpeech.NOUN)
    assert lemmas.contains("fine", PartOfSpeech.ADJECTIVE)
    assert lemmas.pos_of("run") == frozenset({PartOfSpeech.NOUN, PartOfSpeech.VERB})
    # license lines never become lemmas
    assert "1" not in lemmas
    assert "" not in lemmas


def test_load_exceptions(wordnet_dir):
    exceptions = load_exceptions(wordnet_dir)
    assert exceptions.lookup("geese", PartOfSpeech.NOUN) == ("goose",)
    assert exceptions.lookup("better", PartOfSpeech.ADJECTIVE) == ("good", "well")
    assert exceptions.lookup("better", PartOfSpeech.ADVERB) == ("well",)
    assert exceptions.lookup("better", PartOfSpeech.NOUN) is None


def test_load_lemmas_missing_file(tmp_path):
    write_wordnet(tmp_path)
    (tmp_path / "index.adv").unlink()
    with pytest.raises(FileNotFoundError, match="index.adv"):
        load_lemmas(tmp_path)


def test_load_exceptions_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_exceptions(tmp_path / "nowhere")
