#!/usr/bin/env python3
"""
WordNet lemmatizer CLI.

    python -m wn_morphy.cli generate /usr/share/wordnet/dict wordnet.msgpack
    python -m wn_morphy.cli resolve wordnet.msgpack running VBG

With --config, paths missing from the command line are taken from a
wn_morphy.toml:

    python -m wn_morphy.cli --config wn_morphy.toml generate
    python -m wn_morphy.cli --config wn_morphy.toml resolve geese NNS
"""

import argparse
import logging
import sys
from pathlib import Path

USAGE = """\
Usage:
  generate <wordnet-directory> <model-file>
  resolve <model-file> <word> <penn-tag>

Commands:
  generate  Creates a model from the given directory of WordNet database files.
  resolve   Find lemmas for the given word and Penn Treebank part of speech tag
            using the given model. Writes one lemma per line to standard output.
            ("morphy" is accepted as an alias.)

Options:
  --config FILE  Take missing paths from a wn_morphy.toml config
  -v, --verbose  Log progress to standard error
"""


def _print_usage() -> None:
    print(USAGE, file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wn-morphy",
        description="WordNet morphy lemmatizer",
        add_help=False,
        exit_on_error=False,
    )
    parser.add_argument("--config", metavar="FILE")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("command", nargs="?")
    parser.add_argument("arguments", nargs=argparse.REMAINDER)
    return parser


def _configured_paths(config: str | None) -> tuple[Path | None, Path | None]:
    if not config:
        return None, None
    from wn_morphy.lemmatizer import read_config

    return read_config(config)


def cmd_generate(arguments: list[str], config: str | None) -> int:
    model_path, wordnet_dir = _configured_paths(config)
    if len(arguments) == 2:
        wordnet_dir, model_path = Path(arguments[0]), Path(arguments[1])
    elif arguments or wordnet_dir is None or model_path is None:
        _print_usage()
        return 0

    from wn_morphy.lemmatizer import Lemmatizer

    Lemmatizer.from_wordnet(wordnet_dir).save(model_path)
    return 0


def cmd_resolve(arguments: list[str], config: str | None) -> int:
    model_path, _wordnet_dir = _configured_paths(config)
    if len(arguments) == 3:
        model_path = Path(arguments[0])
        word, penn_tag = arguments[1], arguments[2]
    elif len(arguments) == 2 and model_path is not None:
        word, penn_tag = arguments
    else:
        _print_usage()
        return 0

    from wn_morphy.lemmatizer import Lemmatizer
    from wn_morphy.pos import PartOfSpeech

    lemmatizer = Lemmatizer.load(model_path)
    pos = PartOfSpeech.from_penn_tag(penn_tag)
    for lemma in lemmatizer.morphy(word, pos):
        print(lemma)
    return 0


COMMANDS = {
    "generate": cmd_generate,
    "resolve": cmd_resolve,
    "morphy": cmd_resolve,
}


def main(argv: list[str] | None = None) -> int:
    try:
        args, unknown = _build_parser().parse_known_args(argv)
    except argparse.ArgumentError:
        _print_usage()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    command = COMMANDS.get(args.command)
    if command is None or unknown:
        _print_usage()
        return 0

    try:
        return command(args.arguments, args.config)
    except (OSError, ValueError) as e:
        # UnknownTagError and SnapshotError are ValueErrors
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
