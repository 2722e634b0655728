"""
Suffix substitution rules used by morphy to generate lemma candidates.

The table is fixed and order-sensitive: rules are tried in the order
listed, and a form matching several rules yields one candidate per rule.
See https://wordnet.princeton.edu/documentation/morphy7wn
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from wn_morphy.pos import PartOfSpeech


@dataclass(frozen=True, slots=True)
class SubstitutionRule:
    """Rewrite a trailing ``old_suffix`` to ``new_suffix``."""

    old_suffix: str
    new_suffix: str

    def matches(self, form: str) -> bool:
        return form.endswith(self.old_suffix)

    def apply(self, form: str) -> str:
        return strip_suffix(form, self.old_suffix) + self.new_suffix

    def __repr__(self) -> str:
        return f"{self.old_suffix or 'ε'}→{self.new_suffix or 'ε'}"


def strip_suffix(form: str, suffix: str) -> str:
    return form[: len(form) - len(suffix)]


def _rules(*pairs: tuple[str, str]) -> tuple[SubstitutionRule, ...]:
    return tuple(SubstitutionRule(old, new) for old, new in pairs)


SUBSTITUTIONS: Mapping[PartOfSpeech, tuple[SubstitutionRule, ...]] = MappingProxyType({
    PartOfSpeech.NOUN: _rules(
        ("s", ""),
        ("ses", "s"),
        ("ves", "f"),
        ("xes", "x"),
        ("zes", "z"),
        ("ches", "ch"),
        ("shes", "sh"),
        ("men", "man"),
        ("ies", "y"),
    ),
    PartOfSpeech.VERB: _rules(
        ("s", ""),
        ("ies", "y"),
        ("es", "e"),
        ("es", ""),
        ("ed", "e"),
        ("ed", ""),
        ("ing", "e"),
        ("ing", ""),
    ),
    PartOfSpeech.ADJECTIVE: _rules(
        ("er", ""),
        ("est", ""),
        ("er", "e"),
        ("est", "e"),
    ),
    PartOfSpeech.ADVERB: (),
})

LONGEST_SUFFIX: int = max(
    len(rule.old_suffix) for rules in SUBSTITUTIONS.values() for rule in rules
)


def substitute(form: str, pos: PartOfSpeech) -> list[str]:
    """Apply every matching rule for ``pos`` to ``form``, in rule order."""
    return [rule.apply(form) for rule in SUBSTITUTIONS[pos] if rule.matches(form)]


def substitute_all(forms: Iterable[str], pos: PartOfSpeech) -> list[str]:
    """Candidates for each form in turn (form order, then rule order)."""
    result = []
    for form in forms:
        result.extend(substitute(form, pos))
    return result
