"""
Lookup tables backing morphy: the set of known lemmas and the per-POS
exception lists of irregular forms.

Both are built once (from WordNet files or a snapshot) and never mutated.

Usage:
    from wn_morphy.lexicon import LemmaSet, ExceptionTable
    from wn_morphy.pos import PartOfSpeech

    lemmas = LemmaSet.build({PartOfSpeech.NOUN: ["goose", "cat"]})
    lemmas.contains("goose", PartOfSpeech.NOUN)          # True

    exceptions = ExceptionTable.build({PartOfSpeech.NOUN: [("geese", ["goose"])]})
    exceptions.lookup("geese", PartOfSpeech.NOUN)        # ("goose",)
    exceptions.lookup("cats", PartOfSpeech.NOUN)         # None
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence

from wn_morphy.pos import PartOfSpeech


class LemmaSet:
    """Known lemma strings, each with the parts of speech it is a lemma for."""

    def __init__(self, entries: Mapping[str, Iterable[PartOfSpeech]] | None = None):
        self._entries: dict[str, frozenset[PartOfSpeech]] = {
            form: frozenset(parts) for form, parts in (entries or {}).items()
        }

    @classmethod
    def build(cls, per_pos: Mapping[PartOfSpeech, Iterable[str]]) -> LemmaSet:
        """Union the lemma lists of every part of speech into one set."""
        merged: dict[str, set[PartOfSpeech]] = {}
        for pos, lemmas in per_pos.items():
            for lemma in lemmas:
                merged.setdefault(lemma, set()).add(pos)
        return cls(merged)

    # ── Queries ──────────────────────────────────────────────────────────

    def contains(self, form: str, pos: PartOfSpeech) -> bool:
        parts = self._entries.get(form)
        return parts is not None and pos in parts

    def pos_of(self, form: str) -> frozenset[PartOfSpeech]:
        """Parts of speech for which ``form`` is a lemma (empty if unknown)."""
        return self._entries.get(form, frozenset())

    def __contains__(self, form: object) -> bool:
        return form in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LemmaSet):
            return NotImplemented
        return self._entries == other._entries

    def count(self, pos: PartOfSpeech) -> int:
        return sum(1 for parts in self._entries.values() if pos in parts)

    # ── Snapshot record ──────────────────────────────────────────────────

    def to_raw(self) -> dict[str, list[int]]:
        return {
            form: sorted(pos.value for pos in parts)
            for form, parts in self._entries.items()
        }

    @classmethod
    def from_raw(cls, raw: Mapping[str, Iterable[int]]) -> LemmaSet:
        """Rebuild from ``{form: [ordinal, ...]}``.

        Raises ValueError on an unknown ordinal.
        """
        return cls({
            form: [PartOfSpeech(ordinal) for ordinal in ordinals]
            for form, ordinals in raw.items()
        })


class ExceptionTable:
    """Irregular inflected forms and their base forms, one table per POS.

    Every PartOfSpeech has a table, possibly empty.
    """

    def __init__(
        self,
        tables: Mapping[PartOfSpeech, Mapping[str, Sequence[str]]] | None = None,
    ):
        tables = tables or {}
        self._tables: dict[PartOfSpeech, Mapping[str, tuple[str, ...]]] = {
            pos: MappingProxyType({
                form: tuple(bases) for form, bases in tables.get(pos, {}).items()
            })
            for pos in PartOfSpeech
        }

    @classmethod
    def build(
        cls,
        per_pos: Mapping[PartOfSpeech, Iterable[tuple[str, Sequence[str]]]],
    ) -> ExceptionTable:
        """Build from ``(inflected_form, [base, ...])`` records.

        A repeated inflected form replaces the earlier record.
        """
        tables: dict[PartOfSpeech, dict[str, Sequence[str]]] = {}
        for pos, records in per_pos.items():
            table = tables.setdefault(pos, {})
            for form, bases in records:
                table[form] = bases
        return cls(tables)

    # ── Queries ──────────────────────────────────────────────────────────

    def lookup(self, form: str, pos: PartOfSpeech) -> tuple[str, ...] | None:
        """Base forms listed for ``form``, or None when there is no entry."""
        return self._tables[pos].get(form)

    def table(self, pos: PartOfSpeech) -> Mapping[str, tuple[str, ...]]:
        return self._tables[pos]

    def __len__(self) -> int:
        return sum(len(table) for table in self._tables.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExceptionTable):
            return NotImplemented
        return self._tables == other._tables

    def count(self, pos: PartOfSpeech) -> int:
        return len(self._tables[pos])

    # ── Snapshot record ──────────────────────────────────────────────────

    def to_raw(self) -> dict[int, dict[str, list[str]]]:
        return {
            pos.value: {form: list(bases) for form, bases in table.items()}
            for pos, table in self._tables.items()
        }

    @classmethod
    def from_raw(cls, raw: Mapping[int, Mapping[str, Sequence[str]]]) -> ExceptionTable:
        """Rebuild from ``{ordinal: {form: [base, ...]}}``.

        Raises ValueError on an unknown ordinal.
        """
        return cls({PartOfSpeech(ordinal): table for ordinal, table in raw.items()})
