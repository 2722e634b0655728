"""wn-morphy: WordNet morphy lemmatizer for English."""

from wn_morphy.pos import PartOfSpeech, UnknownTagError
from wn_morphy.lexicon import LemmaSet, ExceptionTable
from wn_morphy.rules import SubstitutionRule, SUBSTITUTIONS
from wn_morphy.lemmatizer import Lemmatizer
from wn_morphy.snapshot import SnapshotError

__all__ = [
    "PartOfSpeech", "UnknownTagError",
    "LemmaSet", "ExceptionTable",
    "SubstitutionRule", "SUBSTITUTIONS",
    "Lemmatizer",
    "SnapshotError",
]
