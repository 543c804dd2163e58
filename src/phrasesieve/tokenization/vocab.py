"""Vocabulary utilities."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from phrasesieve.tokenization.tokenizers import Tokenizer
from phrasesieve.utils.logging import get_logger

logger = get_logger(__name__)

CODE_POLICIES = ("count", "sequential")


def _invert(code_of: dict[str, int]) -> dict[int, str]:
    ranked = sorted(code_of.items(), key=lambda item: item[1], reverse=True)
    return {idx: token for idx, (token, _) in enumerate(ranked)}


@dataclass(frozen=True)
class Vocabulary:
    """Token string <-> integer code mapping.

    ``token_of`` is derived from ``code_of`` by ranking tokens on their code,
    highest first. Under the ``count`` policy it is a frequency ranking, not an
    inverse of ``code_of``.
    """

    code_of: dict[str, int] = field(default_factory=dict)
    token_of: dict[int, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "code_of", dict(self.code_of))
        for token, code in self.code_of.items():
            if not token:
                raise ValueError("Empty token in vocabulary.")
            if code < 0:
                raise ValueError(f"Negative code for token {token!r}: {code}")
        object.__setattr__(self, "token_of", _invert(self.code_of))

    def __len__(self) -> int:
        return len(self.code_of)

    def __contains__(self, token: object) -> bool:
        return token in self.code_of

    def code_for(self, token: str) -> int | None:
        return self.code_of.get(token)

    def codes_for(self, tokens: Sequence[str]) -> list[int] | None:
        """Resolve every token, or return None if any one is unknown."""
        codes: list[int] = []
        for token in tokens:
            code = self.code_of.get(token)
            if code is None:
                return None
            codes.append(code)
        return codes

    def token_for(self, idx: int) -> str:
        return self.token_of[idx]

    def to_dict(self) -> dict[str, object]:
        return {"code_of": dict(self.code_of)}

    @classmethod
    def from_dict(cls, payload: dict[str, object]) -> "Vocabulary":
        raw = payload.get("code_of", {})
        if not isinstance(raw, dict):
            raise ValueError("Vocabulary 'code_of' must be a mapping.")
        return cls(code_of={str(token): int(code) for token, code in raw.items()})


def _prepare(line: str, lowercase: bool) -> str:
    line = line.strip()
    return line.lower() if lowercase else line


def build_vocab(
    lines: Iterable[str],
    tokenizer: Tokenizer,
    *,
    code_policy: str = "count",
    lowercase: bool = True,
) -> Vocabulary:
    """Build a vocabulary from every token of a raw pattern corpus.

    With ``code_policy="count"`` a token's code is its occurrence count, so two
    tokens with the same frequency share a code. ``"sequential"`` assigns dense
    unique codes, most frequent token first.
    """
    if code_policy not in CODE_POLICIES:
        raise ValueError(f"Unknown code policy '{code_policy}'. Use one of: {', '.join(CODE_POLICIES)}.")

    logger.info("Start building vocab...")
    counts: Counter[str] = Counter()
    for line in lines:
        counts.update(tokenizer.tokenize(_prepare(line, lowercase)))

    if code_policy == "count":
        code_of = dict(counts)
    else:
        # Counter.most_common keeps first-seen order among equal counts.
        code_of = {token: idx for idx, (token, _) in enumerate(counts.most_common())}

    vocab = Vocabulary(code_of=code_of)
    logger.info("Vocab size: %d", len(vocab))
    return vocab


def read_vocab(lines: Iterable[str], tokenizer: Tokenizer, *, lowercase: bool = True) -> Vocabulary:
    """Build a vocabulary from an external file, one entry per line.

    Only the first token of each line is used. Codes follow file order and a
    repeated first token keeps its earliest code.
    """
    logger.info("Reading vocab file...")
    code_of: dict[str, int] = {}
    for line in lines:
        tokens = tokenizer.tokenize(_prepare(line, lowercase))
        if not tokens:
            continue
        code_of.setdefault(tokens[0], len(code_of))

    vocab = Vocabulary(code_of=code_of)
    logger.info("Vocab size: %d", len(vocab))
    return vocab
