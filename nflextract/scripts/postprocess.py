#!/usr/bin/env python3
"""Post-process tagged sentences with the NFL mention corrections.

Reads JSON Lines where every line is one tagged sentence of a single
document, in order:

  {"doc_id": "game-1", "tokens": [{"word": "Patriots", "tag": "NNPS", "ner": "O", "index": 0}], "mentions": []}

and writes the same sentences with corrected mention lists.

Usage:
  nflextract-postprocess --gazetteer nfl_gazetteer.tsv --input tagged.jsonl --output corrected.jsonl
  python -m nflextract.scripts.postprocess --config nflextract.toml < tagged.jsonl
"""

import argparse
import sys
from pathlib import Path
from typing import Iterator, TextIO

from nflextract.config import ExtractorConfig, load_config
from nflextract.extractor import NFLEntityExtractor
from nflextract.sentence import Sentence


def read_sentences(stream: TextIO) -> Iterator[Sentence]:
    for line in stream:
        if line.strip():
            yield Sentence.model_validate_json(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Correct NFL entity mentions in tagged sentences (JSON Lines in, JSON Lines out).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to nflextract.toml (default: $NFLEXTRACT_CONFIG or ./nflextract.toml)",
    )
    parser.add_argument(
        "--gazetteer",
        type=Path,
        default=None,
        help="Tab-separated phrase/type gazetteer file (overrides the config)",
    )
    parser.add_argument(
        "--max-phrase-length",
        type=int,
        default=None,
        help="Longest token window matched against the gazetteer (overrides the config)",
    )
    parser.add_argument(
        "--keep-tagger-teams",
        action="store_true",
        help="Keep NFLTeam mentions from the tagger and skip the gazetteer team scan",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Input JSON Lines file (default: stdin)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output JSON Lines file (default: stdout)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    overrides: dict = {}
    if args.gazetteer is not None:
        overrides["gazetteer_path"] = args.gazetteer
    if args.max_phrase_length is not None:
        overrides["max_phrase_length"] = args.max_phrase_length
    if args.keep_tagger_teams:
        overrides["prefer_dictionary_for_teams"] = False
    if overrides:
        config = ExtractorConfig(**{**config.model_dump(), **overrides})

    if config.gazetteer_path is None or not config.gazetteer_path.is_file():
        print(f"Error: gazetteer file not found: {config.gazetteer_path}", file=sys.stderr)
        return 1

    extractor = NFLEntityExtractor.from_config(config)

    source = open(args.input, "r", encoding="utf-8") if args.input else sys.stdin
    sink = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
    sentences = 0
    mentions = 0
    try:
        for index, sentence in enumerate(read_sentences(source)):
            extractor.postprocess(sentence, index)
            sink.write(sentence.model_dump_json() + "\n")
            sentences += 1
            mentions += len(sentence.mentions)
    finally:
        if args.input:
            source.close()
        if args.output:
            sink.close()

    print(f"Post-processed {sentences} sentences, {mentions} mentions", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
