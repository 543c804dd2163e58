"""Build or load a phrase matcher backed by a model directory."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from phrasesieve.config import MatcherConfig
from phrasesieve.corpus import iter_lines
from phrasesieve.io import load_artifacts, save_artifacts, save_vocab
from phrasesieve.matching.compiler import compile_patterns
from phrasesieve.matching.matcher import PhraseMatcher
from phrasesieve.tokenization.tokenizers import Tokenizer, WhitespaceTokenizer, as_tokenizer, resolve_tokenizer
from phrasesieve.tokenization.vocab import build_vocab, read_vocab
from phrasesieve.utils.logging import get_logger

logger = get_logger(__name__)

TokenizerLike = Tokenizer | Callable[[str], list[str]] | None


def _pick_tokenizer(tokenizer: TokenizerLike, config: MatcherConfig) -> Tokenizer:
    if tokenizer is not None:
        return as_tokenizer(tokenizer)
    return resolve_tokenizer(config.tokenizer, config.tokenizer_path)


def prepare_model_dir(model_dir: str | Path) -> Path:
    """Create the working directory. Failure here is not recoverable."""
    path = Path(model_dir)
    path.mkdir(parents=True, exist_ok=True)
    return path


def build_matcher(
    model_dir: str | Path,
    pattern_file: str | Path,
    *,
    vocab_file: str | Path | None = None,
    config: MatcherConfig | None = None,
    tokenizer: TokenizerLike = None,
) -> PhraseMatcher:
    """Build vocabulary and filter from a pattern corpus and persist both.

    When ``vocab_file`` is given the vocabulary is read from it instead of
    being counted from the corpus.
    """
    config = config or MatcherConfig()
    out = prepare_model_dir(model_dir)
    tok = _pick_tokenizer(tokenizer, config)

    if vocab_file is not None:
        vocab = read_vocab(iter_lines(vocab_file, skip_empty=True), tok, lowercase=config.lowercase)
    else:
        vocab = build_vocab(
            iter_lines(pattern_file),
            tok,
            code_policy=config.code_policy,
            lowercase=config.lowercase,
        )
    save_vocab(out, vocab)

    patterns = compile_patterns(
        iter_lines(pattern_file),
        vocab,
        config.max_len,
        progress_every=config.progress_every,
    )
    metadata = {
        "config": config.to_dict(),
        "pattern_file": str(pattern_file),
        "vocab_file": str(vocab_file) if vocab_file is not None else None,
    }
    save_artifacts(out, vocab, patterns, metadata=metadata)
    return PhraseMatcher(vocab, patterns, tok)


def load_matcher(
    model_dir: str | Path,
    *,
    config: MatcherConfig | None = None,
    tokenizer: TokenizerLike = None,
) -> PhraseMatcher:
    """Load a previously built matcher without recompiling.

    Missing or corrupt artifacts give an empty vocabulary or filter.
    """
    out = prepare_model_dir(model_dir)
    vocab, patterns, manifest = load_artifacts(out)
    if config is not None or tokenizer is not None:
        return PhraseMatcher(vocab, patterns, _pick_tokenizer(tokenizer, config or MatcherConfig()))

    metadata = manifest.get("metadata")
    saved = metadata.get("config") if isinstance(metadata, dict) else None
    config = _config_from_manifest(saved)
    try:
        tok = _pick_tokenizer(None, config)
    except (OSError, ValueError) as exc:
        logger.warning("Cannot rebuild saved tokenizer (%s); falling back to whitespace.", exc)
        tok = WhitespaceTokenizer()
    return PhraseMatcher(vocab, patterns, tok)


def open_matcher(
    model_dir: str | Path,
    pattern_file: str | Path | None = None,
    vocab_file: str | Path | None = None,
    *,
    config: MatcherConfig | None = None,
    tokenizer: TokenizerLike = None,
) -> PhraseMatcher:
    """Build when a pattern file is given, otherwise load from ``model_dir``."""
    if pattern_file is not None:
        return build_matcher(model_dir, pattern_file, vocab_file=vocab_file, config=config, tokenizer=tokenizer)
    return load_matcher(model_dir, config=config, tokenizer=tokenizer)


def _config_from_manifest(saved: object) -> MatcherConfig:
    if not isinstance(saved, dict):
        return MatcherConfig()
    try:
        return MatcherConfig.from_dict(saved)
    except (TypeError, ValueError) as exc:
        logger.warning("Ignoring saved config (%s); using defaults.", exc)
        return MatcherConfig()
