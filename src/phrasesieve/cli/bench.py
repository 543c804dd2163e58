"""Matcher benchmarking command."""

from __future__ import annotations

import argparse
import time

from tqdm import tqdm

from phrasesieve.cli.common import (
    add_logging_args,
    add_tokenizer_args,
    open_saved_matcher,
    setup_logging_from_args,
)
from phrasesieve.corpus import read_lines


def add_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser("bench", help="Benchmark matching throughput.")
    parser.add_argument("--model-dir", required=True, help="Model directory produced by 'build'.")
    parser.add_argument("--input", required=True, help="Input text file, one sentence per line.")
    parser.add_argument("--repeat", type=int, default=10, help="Repeat count.")
    parser.add_argument("--warmup", type=int, default=2, help="Warmup runs.")
    parser.add_argument("--remove-subset", action="store_true")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar.")
    add_tokenizer_args(parser)
    add_logging_args(parser)
    parser.set_defaults(func=run)
    return parser


def run(args: argparse.Namespace) -> int:
    setup_logging_from_args(args)
    matcher = open_saved_matcher(args)

    lines = read_lines(args.input, skip_empty=True)
    if not lines:
        raise ValueError("Input is empty.")

    for _ in range(args.warmup):
        for line in lines:
            matcher.match(line, remove_subset=args.remove_subset)

    start = time.perf_counter()
    total_matches = 0
    for _ in tqdm(range(args.repeat), desc="Matching", unit="pass", disable=args.no_progress):
        for line in lines:
            total_matches += len(matcher.match(line, remove_subset=args.remove_subset))
    elapsed = time.perf_counter() - start

    sentences_per_sec = (len(lines) * args.repeat) / elapsed if elapsed else 0.0
    print(f"sentences_per_sec={sentences_per_sec:.2f} matches={total_matches}")
    return 0
