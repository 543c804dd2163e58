"""Matcher build command."""

from __future__ import annotations

import argparse

from phrasesieve.builder import build_matcher
from phrasesieve.cli.common import (
    add_logging_args,
    add_tokenizer_args,
    build_config_from_args,
    setup_logging_from_args,
)
from phrasesieve.tokenization.vocab import CODE_POLICIES


def add_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser("build", help="Compile a pattern corpus into a model directory.")
    parser.add_argument("--patterns", required=True, help="Pattern corpus, one phrase per line.")
    parser.add_argument("--model-dir", required=True, help="Output model directory.")
    parser.add_argument("--vocab", default=None, help="Optional vocabulary file (first token per line).")
    parser.add_argument("--config", default=None, help="Matcher config YAML.")
    parser.add_argument("--max-len", type=int, default=None, help="Maximum pattern length in tokens.")
    parser.add_argument("--code-policy", default=None, choices=list(CODE_POLICIES))
    parser.add_argument(
        "--no-lowercase",
        action="store_true",
        help="Keep case when building the vocabulary.",
    )
    add_tokenizer_args(parser)
    add_logging_args(parser)
    parser.set_defaults(func=run)
    return parser


def run(args: argparse.Namespace) -> int:
    setup_logging_from_args(args)
    config = build_config_from_args(args)
    matcher = build_matcher(args.model_dir, args.patterns, vocab_file=args.vocab, config=config)
    print(f"vocab_size={len(matcher.vocab)} patterns={len(matcher.patterns)}")
    return 0
