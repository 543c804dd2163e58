"""phrasesieve: checksum-filtered phrase matching without storing phrases."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from phrasesieve.builder import build_matcher, load_matcher, open_matcher
from phrasesieve.config import MatcherConfig
from phrasesieve.matching.compiler import CompiledFilter, compile_patterns
from phrasesieve.matching.matcher import PhraseMatcher, remove_subsets
from phrasesieve.tokenization.tokenizers import HFTokenizer, Tokenizer, WhitespaceTokenizer
from phrasesieve.tokenization.vocab import Vocabulary, build_vocab, read_vocab

try:
    __version__ = version("phrasesieve")
except PackageNotFoundError:  # pragma: no cover - runtime fallback
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "CompiledFilter",
    "HFTokenizer",
    "MatcherConfig",
    "PhraseMatcher",
    "Tokenizer",
    "Vocabulary",
    "WhitespaceTokenizer",
    "build_matcher",
    "build_vocab",
    "compile_patterns",
    "load_matcher",
    "open_matcher",
    "read_vocab",
    "remove_subsets",
]
