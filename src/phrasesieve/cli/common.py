from __future__ import annotations

import argparse

from phrasesieve.builder import load_matcher
from phrasesieve.config import MatcherConfig, load_config, resolve_arg
from phrasesieve.matching.matcher import PhraseMatcher
from phrasesieve.tokenization.tokenizers import TOKENIZER_NAMES
from phrasesieve.utils.logging import configure_logging


def add_logging_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g., INFO, DEBUG). Also respects PHRASESIEVE_LOG_LEVEL env var.",
    )


def add_tokenizer_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--tokenizer", default=None, choices=list(TOKENIZER_NAMES))
    p.add_argument("--tokenizer-path", default=None, help="tokenizer.json for --tokenizer hf.")


def setup_logging_from_args(args: argparse.Namespace) -> None:
    configure_logging(args.log_level)


def open_saved_matcher(args: argparse.Namespace) -> PhraseMatcher:
    """Load a model directory, honouring tokenizer overrides from the command line."""
    if args.tokenizer is None:
        return load_matcher(args.model_dir)
    config = MatcherConfig(tokenizer=args.tokenizer, tokenizer_path=args.tokenizer_path)
    return load_matcher(args.model_dir, config=config)


def build_config_from_args(args: argparse.Namespace) -> MatcherConfig:
    values = load_config(getattr(args, "config", None))
    defaults = MatcherConfig()
    lowercase = False if args.no_lowercase else None
    return MatcherConfig(
        max_len=int(resolve_arg(args.max_len, values.get("max_len"), defaults.max_len)),
        code_policy=str(resolve_arg(args.code_policy, values.get("code_policy"), defaults.code_policy)),
        lowercase=bool(resolve_arg(lowercase, values.get("lowercase"), defaults.lowercase)),
        tokenizer=str(resolve_arg(args.tokenizer, values.get("tokenizer"), defaults.tokenizer)),
        tokenizer_path=resolve_arg(args.tokenizer_path, values.get("tokenizer_path"), defaults.tokenizer_path),
        progress_every=int(resolve_arg(None, values.get("progress_every"), defaults.progress_every)),
    )
