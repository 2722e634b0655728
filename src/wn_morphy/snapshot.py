"""
Persist a Lemmatizer's lookup tables as a MessagePack snapshot.

A snapshot is two consecutive MessagePack objects:

    1. lemmas:      {form: [pos_ordinal, ...]}
    2. exceptions:  {pos_ordinal: {inflected_form: [base, ...]}}

Ordinals are PartOfSpeech values. The substitution rules are code, not
data, and are never written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

import msgpack
from msgpack.exceptions import OutOfData, UnpackException

from wn_morphy.lexicon import ExceptionTable, LemmaSet

if TYPE_CHECKING:
    from wn_morphy.lemmatizer import Lemmatizer

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """A snapshot could not be decoded into lookup tables."""


def dump(lemmatizer: Lemmatizer, stream: IO[bytes]) -> None:
    packer = msgpack.Packer()
    stream.write(packer.pack(lemmatizer.lemmas.to_raw()))
    stream.write(packer.pack(lemmatizer.exceptions.to_raw()))


def load(stream: IO[bytes]) -> tuple[LemmaSet, ExceptionTable]:
    """Decode both records from ``stream``.

    Raises SnapshotError if the data is truncated, malformed, or has
    anything after the second record.
    """
    data = stream.read()
    # The buffer must hold the whole file; 0 keeps msgpack's default.
    unpacker = msgpack.Unpacker(
        raw=False, strict_map_key=False, max_buffer_size=len(data),
    )

    try:
        unpacker.feed(data)
        raw_lemmas = unpacker.unpack()
        raw_exceptions = unpacker.unpack()
    except OutOfData as e:
        raise SnapshotError("Snapshot is truncated: expected two records") from e
    except (UnpackException, ValueError, TypeError) as e:
        raise SnapshotError(f"Snapshot is not valid MessagePack: {e}") from e

    if unpacker.tell() != len(data):
        raise SnapshotError(
            f"Unexpected trailing data after offset {unpacker.tell()}"
        )

    _check_lemmas(raw_lemmas)
    _check_exceptions(raw_exceptions)
    try:
        return LemmaSet.from_raw(raw_lemmas), ExceptionTable.from_raw(raw_exceptions)
    except ValueError as e:
        raise SnapshotError(f"Snapshot has an unknown part of speech: {e}") from e


def save(lemmatizer: Lemmatizer, path: str | Path) -> None:
    path = Path(path)
    with path.open("wb") as f:
        dump(lemmatizer, f)
    logger.debug(
        "Wrote %d lemmas and %d exceptions to %s",
        len(lemmatizer.lemmas), len(lemmatizer.exceptions), path,
    )


def load_path(path: str | Path) -> tuple[LemmaSet, ExceptionTable]:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Model file not found: {path}")
    with path.open("rb") as f:
        lemmas, exceptions = load(f)
    logger.debug(
        "Loaded %d lemmas and %d exceptions from %s",
        len(lemmas), len(exceptions), path,
    )
    return lemmas, exceptions


# ── Shape checks ─────────────────────────────────────────────────────────

def _is_ordinal(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(s, str) for s in value)


def _check_lemmas(raw: Any) -> None:
    if not isinstance(raw, dict):
        raise SnapshotError(f"Lemma record must be a map, got {type(raw).__name__}")
    for form, ordinals in raw.items():
        if not isinstance(form, str):
            raise SnapshotError(f"Lemma key must be a string, got {form!r}")
        if not isinstance(ordinals, list) or not all(
            _is_ordinal(o) for o in ordinals
        ):
            raise SnapshotError(f"Lemma {form!r} must map to a list of ordinals")


def _check_exceptions(raw: Any) -> None:
    if not isinstance(raw, dict):
        raise SnapshotError(
            f"Exception record must be a map, got {type(raw).__name__}"
        )
    for ordinal, table in raw.items():
        if not _is_ordinal(ordinal) or not isinstance(table, dict):
            raise SnapshotError(f"Bad exception table for ordinal {ordinal!r}")
        for form, bases in table.items():
            if not isinstance(form, str) or not _is_str_list(bases):
                raise SnapshotError(f"Bad exception entry {form!r}: {bases!r}")
