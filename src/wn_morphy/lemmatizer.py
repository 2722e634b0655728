"""
WordNet-style lemmatizer: resolves inflected English words to their lemmas.

Implements the morphy algorithm
(https://wordnet.princeton.edu/documentation/morphy7wn): exception lists
first, then suffix substitution rules applied repeatedly until a known
lemma turns up.

Usage:
    from wn_morphy import Lemmatizer, PartOfSpeech

    lem = Lemmatizer.from_wordnet("/usr/share/wordnet/dict")
    lem.save("wordnet.msgpack")

    lem = Lemmatizer.load("wordnet.msgpack")
    lem.morphy("geese", PartOfSpeech.NOUN)     # ["goose"]
    lem.morphy_tagged("running", "VBG")        # ["run"]

    lem = Lemmatizer.from_config("wn_morphy.toml")
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Iterable

from wn_morphy import snapshot, wordnet
from wn_morphy.lexicon import ExceptionTable, LemmaSet
from wn_morphy.pos import PartOfSpeech
from wn_morphy.rules import LONGEST_SUFFIX, SUBSTITUTIONS, substitute, substitute_all

logger = logging.getLogger(__name__)


class Lemmatizer:
    """A LemmaSet and ExceptionTable paired with the fixed substitution rules.

    Instances are never mutated after construction, so one instance can
    serve concurrent queries.
    """

    def __init__(self, lemmas: LemmaSet, exceptions: ExceptionTable):
        self.lemmas = lemmas
        self.exceptions = exceptions

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_wordnet(cls, wordnet_dir: str | Path) -> Lemmatizer:
        """Build from the index and exception files of a WordNet database."""
        wordnet_dir = Path(wordnet_dir)
        lemmas = wordnet.load_lemmas(wordnet_dir)
        exceptions = wordnet.load_exceptions(wordnet_dir)
        logger.debug(
            "Built lemmatizer from %s: %d lemmas, %d exceptions",
            wordnet_dir, len(lemmas), len(exceptions),
        )
        return cls(lemmas, exceptions)

    @classmethod
    def load(cls, path: str | Path) -> Lemmatizer:
        """Load from a snapshot written by :meth:`save`."""
        lemmas, exceptions = snapshot.load_path(path)
        return cls(lemmas, exceptions)

    def save(self, path: str | Path) -> None:
        snapshot.save(self, path)

    @classmethod
    def from_config(cls, config_path: str | Path = "wn_morphy.toml") -> Lemmatizer:
        """Build from a TOML config file.

        Loads ``[model] path`` when that snapshot exists, otherwise builds
        from ``[wordnet] dir``. Paths are resolved relative to the config
        file's directory.
        """
        model_path, wordnet_dir = read_config(config_path)

        if model_path is not None and model_path.is_file():
            return cls.load(model_path)
        if wordnet_dir is not None:
            return cls.from_wordnet(wordnet_dir)
        raise FileNotFoundError(
            f"Config {config_path} names neither an existing model file "
            f"nor a WordNet directory"
        )

    # ── Morphy ───────────────────────────────────────────────────────────

    def morphy(self, form: str, pos: PartOfSpeech) -> list[str]:
        """Return the known lemmas ``form`` may be an inflection of.

        Result order follows candidate order (form first, then rule order);
        duplicates are dropped. An empty list means no lemma was found.
        """
        if not isinstance(pos, PartOfSpeech):
            raise TypeError(f"pos must be a PartOfSpeech, got {pos!r}")

        bases = self.exceptions.lookup(form, pos)
        if bases is not None:
            # An exception entry is final even if none of its bases is known.
            return self._known([form, *bases], pos)

        forms = substitute(form, pos)
        results = self._known([form, *forms], pos)
        if results:
            return results

        for _round in range(len(form) + LONGEST_SUFFIX):
            forms = substitute_all(_unique(forms), pos)
            if not forms:
                break
            results = self._known(forms, pos)
            if results:
                return results

        return []

    resolve = morphy

    def morphy_tagged(self, form: str, penn_tag: str) -> list[str]:
        """Like :meth:`morphy`, with the POS given as a Penn Treebank tag.

        Raises UnknownTagError for tags outside J*, V*, R*, N*.
        """
        return self.morphy(form, PartOfSpeech.from_penn_tag(penn_tag))

    def lemmatize(self, form: str, pos: PartOfSpeech) -> str:
        """First morphy result, or ``form`` itself if there is none."""
        results = self.morphy(form, pos)
        return results[0] if results else form

    def _known(self, forms: Iterable[str], pos: PartOfSpeech) -> list[str]:
        return [f for f in _unique(forms) if self.lemmas.contains(f, pos)]

    # ── Introspection ────────────────────────────────────────────────────

    def summary(self) -> str:
        lines = [
            f"Lemmas:      {len(self.lemmas):,}",
            f"Exceptions:  {len(self.exceptions):,}",
            "",
            "POS breakdown:",
        ]
        for pos in PartOfSpeech:
            lines.append(
                f"  {str(pos):10s} {self.lemmas.count(pos):7,d} lemmas, "
                f"{self.exceptions.count(pos):6,d} exceptions, "
                f"{len(SUBSTITUTIONS[pos]):2d} rules"
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Lemmatizer({len(self.lemmas)} lemmas, "
            f"{len(self.exceptions)} exceptions)"
        )


def _unique(forms: Iterable[str]) -> list[str]:
    """Drop repeats, keeping the first occurrence of each form."""
    return list(dict.fromkeys(forms))


# ── Config ───────────────────────────────────────────────────────────────

def read_config(config_path: str | Path) -> tuple[Path | None, Path | None]:
    """Return ``(model_path, wordnet_dir)`` from a wn_morphy TOML config.

    Either may be None when the config does not set it.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with config_path.open("rb") as f:
        cfg = tomllib.load(f)

    base_dir = config_path.parent
    model = cfg.get("model", {}).get("path")
    wn_dir = cfg.get("wordnet", {}).get("dir")
    return _resolve(model, base_dir), _resolve(wn_dir, base_dir)


def _resolve(raw: str | None, base_dir: Path) -> Path | None:
    if not raw:
        return None
    p = Path(raw)
    return p if p.is_absolute() else base_dir / p
