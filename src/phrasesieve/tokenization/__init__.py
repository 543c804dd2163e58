"""Tokenizers and vocabulary construction."""

from phrasesieve.tokenization.tokenizers import (
    CallableTokenizer,
    HFTokenizer,
    Tokenizer,
    WhitespaceTokenizer,
    as_tokenizer,
    resolve_tokenizer,
)
from phrasesieve.tokenization.vocab import CODE_POLICIES, Vocabulary, build_vocab, read_vocab

__all__ = [
    "CODE_POLICIES",
    "CallableTokenizer",
    "HFTokenizer",
    "Tokenizer",
    "Vocabulary",
    "WhitespaceTokenizer",
    "as_tokenizer",
    "build_vocab",
    "read_vocab",
    "resolve_tokenizer",
]
