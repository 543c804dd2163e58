"""Pattern compilation into a compact membership filter."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from phrasesieve.matching.checksums import checksum_pair
from phrasesieve.tokenization.vocab import Vocabulary
from phrasesieve.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CompiledFilter:
    """Compiled pattern filter.

    Each compiled pattern adds its token count to ``lengths``, its first and
    last codes to ``first_codes``/``last_codes`` and its checksum pair to
    ``checksum_pairs``. Pattern text is not kept.
    """

    lengths: frozenset[int] = frozenset()
    first_codes: frozenset[int] = frozenset()
    last_codes: frozenset[int] = frozenset()
    checksum_pairs: frozenset[tuple[int, int]] = frozenset()
    max_len: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if any(length < 1 for length in self.lengths):
            raise ValueError(f"Pattern lengths must be >= 1, got {sorted(self.lengths)}")
        for name in ("first_codes", "last_codes"):
            if any(code < 0 for code in getattr(self, name)):
                raise ValueError(f"Negative code in {name}.")
        if any(min(pair) < 0 for pair in self.checksum_pairs):
            raise ValueError("Negative checksum in checksum_pairs.")

    def __len__(self) -> int:
        return len(self.checksum_pairs)

    @property
    def is_empty(self) -> bool:
        return not self.lengths

    def to_dict(self) -> dict[str, object]:
        return {
            "max_len": self.max_len,
            "lengths": sorted(self.lengths),
            "first_codes": sorted(self.first_codes),
            "last_codes": sorted(self.last_codes),
            "checksum_pairs": [list(pair) for pair in sorted(self.checksum_pairs)],
        }

    @classmethod
    def from_dict(cls, payload: dict[str, object]) -> "CompiledFilter":
        pairs = set()
        for pair in payload.get("checksum_pairs", []):
            text_sum, seq_sum = pair
            pairs.add((int(text_sum), int(seq_sum)))
        max_len = payload.get("max_len")
        return cls(
            lengths=frozenset(int(x) for x in payload.get("lengths", [])),
            first_codes=frozenset(int(x) for x in payload.get("first_codes", [])),
            last_codes=frozenset(int(x) for x in payload.get("last_codes", [])),
            checksum_pairs=frozenset(pairs),
            max_len=int(max_len) if max_len is not None else None,
        )


def compile_patterns(
    lines: Iterable[str],
    vocab: Vocabulary,
    max_len: int,
    *,
    progress_every: int = 100_000,
) -> CompiledFilter:
    """Compile one pattern per line.

    Patterns are split on whitespace. A line longer than ``max_len`` tokens, or
    with any token missing from ``vocab``, contributes nothing.
    """
    if max_len < 1:
        raise ValueError(f"max_len must be >= 1, got {max_len}")

    logger.info("Start compiling patterns...")
    lengths: set[int] = set()
    first_codes: set[int] = set()
    last_codes: set[int] = set()
    checksum_pairs: set[tuple[int, int]] = set()

    n_lines = n_compiled = n_too_long = n_unresolved = n_empty = 0
    for i, line in enumerate(lines):
        n_lines += 1
        if progress_every and i % progress_every == 0:
            logger.info("Processing input patterns: %d", i)

        tokens = line.split()
        p_len = len(tokens)
        if p_len > max_len:
            n_too_long += 1
            continue
        if not tokens:
            n_empty += 1
            continue

        codes = vocab.codes_for(tokens)
        if codes is None:
            n_unresolved += 1
            continue

        lengths.add(p_len)
        first_codes.add(codes[0])
        last_codes.add(codes[-1])
        checksum_pairs.add(checksum_pair(tokens, codes))
        n_compiled += 1

    logger.info(
        "Compiled %d of %d patterns (too long: %d, unresolvable: %d, empty: %d)",
        n_compiled,
        n_lines,
        n_too_long,
        n_unresolved,
        n_empty,
    )
    return CompiledFilter(
        lengths=frozenset(lengths),
        first_codes=frozenset(first_codes),
        last_codes=frozenset(last_codes),
        checksum_pairs=frozenset(checksum_pairs),
        max_len=max_len,
    )
