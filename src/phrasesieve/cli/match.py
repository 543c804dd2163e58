"""Sentence matching command."""

from __future__ import annotations

import argparse
import json

from phrasesieve.cli.common import (
    add_logging_args,
    add_tokenizer_args,
    open_saved_matcher,
    setup_logging_from_args,
)
from phrasesieve.corpus import iter_lines


def add_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser("match", help="Find compiled phrases in sentences.")
    parser.add_argument("--model-dir", required=True, help="Model directory produced by 'build'.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--sentence", help="A single sentence to match.")
    source.add_argument("--input", help="Text file, one sentence per line.")
    parser.add_argument("--remove-subset", action="store_true", help="Keep only maximal matches.")
    parser.add_argument("--json", action="store_true", help="Emit one JSON object per sentence.")
    add_tokenizer_args(parser)
    add_logging_args(parser)
    parser.set_defaults(func=run)
    return parser


def run(args: argparse.Namespace) -> int:
    setup_logging_from_args(args)
    matcher = open_saved_matcher(args)
    sentences = [args.sentence] if args.sentence is not None else iter_lines(args.input)
    for sentence in sentences:
        matches = matcher.match(sentence, remove_subset=args.remove_subset)
        if args.json:
            print(json.dumps({"sentence": sentence, "matches": matches}, ensure_ascii=False))
        else:
            print("\t".join(matches))
    return 0
