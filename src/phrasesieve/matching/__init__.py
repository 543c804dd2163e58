"""Checksums, pattern compilation and span matching."""

from phrasesieve.matching.checksums import checksum_pair, sequence_checksum, text_checksum
from phrasesieve.matching.compiler import CompiledFilter, compile_patterns
from phrasesieve.matching.matcher import PhraseMatcher, remove_subsets

__all__ = [
    "CompiledFilter",
    "PhraseMatcher",
    "checksum_pair",
    "compile_patterns",
    "remove_subsets",
    "sequence_checksum",
    "text_checksum",
]
