"""Pluggable tokenizers.

The matcher never splits text itself. Anything that turns a string into an
ordered list of token strings can be injected: an object with a ``tokenize``
method, or a plain callable wrapped with :func:`as_tokenizer`.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol, runtime_checkable

from tokenizers import Tokenizer as _HFBackend

TOKENIZER_NAMES = ("whitespace", "hf")


@runtime_checkable
class Tokenizer(Protocol):
    def tokenize(self, text: str) -> list[str]: ...


class WhitespaceTokenizer:
    """Split on runs of whitespace."""

    def tokenize(self, text: str) -> list[str]:
        return text.split()

    def __repr__(self) -> str:
        return "WhitespaceTokenizer()"


class CallableTokenizer:
    """Adapter for a bare ``str -> list[str]`` function."""

    def __init__(self, func: Callable[[str], list[str]]) -> None:
        self._func = func

    def tokenize(self, text: str) -> list[str]:
        return [str(token) for token in self._func(text)]

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", type(self._func).__name__)
        return f"CallableTokenizer({name})"


class HFTokenizer:
    """Subword split using a serialized Hugging Face ``tokenizer.json``."""

    def __init__(self, backend: _HFBackend) -> None:
        self._backend = backend

    @classmethod
    def from_file(cls, path: str | Path) -> "HFTokenizer":
        if not Path(path).is_file():
            raise FileNotFoundError(f"Tokenizer file not found: {path}")
        return cls(_HFBackend.from_file(str(path)))

    def tokenize(self, text: str) -> list[str]:
        return list(self._backend.encode(text, add_special_tokens=False).tokens)

    def __repr__(self) -> str:
        return "HFTokenizer()"


def as_tokenizer(value: Tokenizer | Callable[[str], list[str]] | None) -> Tokenizer:
    if value is None:
        return WhitespaceTokenizer()
    if isinstance(value, Tokenizer):
        return value
    if callable(value):
        return CallableTokenizer(value)
    raise TypeError(f"Expected a tokenizer or callable, got {type(value).__name__}")


def resolve_tokenizer(name: str, path: str | Path | None = None) -> Tokenizer:
    key = (name or "whitespace").strip().lower()
    if key == "whitespace":
        return WhitespaceTokenizer()
    if key == "hf":
        if not path:
            raise ValueError("The 'hf' tokenizer requires a tokenizer.json path.")
        return HFTokenizer.from_file(path)
    raise ValueError(f"Unknown tokenizer '{name}'. Use one of: {', '.join(TOKENIZER_NAMES)}.")
