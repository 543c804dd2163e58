"""Span search over a tokenized sentence."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from phrasesieve.matching.checksums import checksum_pair
from phrasesieve.matching.compiler import CompiledFilter
from phrasesieve.tokenization.tokenizers import Tokenizer, as_tokenizer
from phrasesieve.tokenization.vocab import Vocabulary

Span = tuple[int, int]


def remove_subsets(spans: Iterable[Span]) -> set[Span]:
    """Keep only spans not contained in another, distinct span.

    Spans are inclusive ``(i, j)`` pairs; ``(i, j)`` is dropped when some other
    ``(ii, jj)`` has ``ii <= i`` and ``j <= jj``.
    """
    candidates = set(spans)
    kept: set[Span] = set()
    for i, j in candidates:
        covered = any(
            ii <= i and j <= jj for ii, jj in candidates if (ii, jj) != (i, j)
        )
        if not covered:
            kept.add((i, j))
    return kept


class PhraseMatcher:
    """Finds substrings of a sentence that are likely compiled patterns.

    The vocabulary and filter are never mutated, so one instance can be shared
    by concurrent readers.
    """

    def __init__(
        self,
        vocab: Vocabulary,
        patterns: CompiledFilter,
        tokenizer: Tokenizer | Callable[[str], list[str]] | None = None,
    ) -> None:
        self._vocab = vocab
        self._patterns = patterns
        self._tokenizer = as_tokenizer(tokenizer)
        # Iterate lengths in a fixed order so span discovery is deterministic.
        self._lengths = sorted(patterns.lengths)

    @property
    def vocab(self) -> Vocabulary:
        return self._vocab

    @property
    def patterns(self) -> CompiledFilter:
        return self._patterns

    @property
    def tokenizer(self) -> Tokenizer:
        return self._tokenizer

    def _spans(self, tokens: list[str]) -> set[Span]:
        patterns = self._patterns
        codes = [self._vocab.code_for(token) for token in tokens]
        n_tokens = len(codes)
        candidates: set[Span] = set()

        for i, first in enumerate(codes):
            if first is None or first not in patterns.first_codes:
                continue
            for p_len in self._lengths:
                j = i + p_len - 1
                if j >= n_tokens:
                    break
                window = codes[i : j + 1]
                if None in window:
                    continue
                if codes[j] not in patterns.last_codes:
                    continue
                if checksum_pair(tokens[i : j + 1], window) in patterns.checksum_pairs:
                    candidates.add((i, j))
        return candidates

    def find_spans(self, sentence: str) -> set[Span]:
        """Inclusive ``(start, end)`` token spans that pass the filter."""
        return self._spans(self._tokenizer.tokenize(sentence.strip()))

    def match_spans(self, sentence: str, remove_subset: bool = False) -> list[Span]:
        spans = self.find_spans(sentence)
        if remove_subset:
            spans = remove_subsets(spans)
        return sorted(spans)

    def match(self, sentence: str, remove_subset: bool = False) -> list[str]:
        """Return the text of every matched span, left to right.

        Set ``remove_subset`` to keep only maximal spans.
        """
        tokens = self._tokenizer.tokenize(sentence.strip())
        spans = self._spans(tokens)
        if remove_subset:
            spans = remove_subsets(spans)
        return [" ".join(tokens[i : j + 1]) for i, j in sorted(spans)]
