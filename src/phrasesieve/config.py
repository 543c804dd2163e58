from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from phrasesieve.tokenization.tokenizers import TOKENIZER_NAMES
from phrasesieve.tokenization.vocab import CODE_POLICIES


@dataclass(frozen=True)
class MatcherConfig:
    """Build parameters for a phrase matcher.

    Persisted into the artifact manifest so a model directory records how it
    was produced.
    """

    max_len: int = 10
    code_policy: str = "count"  # 'count' or 'sequential'
    lowercase: bool = True
    tokenizer: str = "whitespace"  # 'whitespace' or 'hf'
    tokenizer_path: Optional[str] = None
    progress_every: int = 100_000

    def __post_init__(self) -> None:
        if self.max_len < 1:
            raise ValueError(f"max_len must be >= 1, got {self.max_len}")
        if self.code_policy not in CODE_POLICIES:
            raise ValueError(f"Unknown code_policy '{self.code_policy}'. Use one of: {', '.join(CODE_POLICIES)}.")
        if self.tokenizer not in TOKENIZER_NAMES:
            raise ValueError(f"Unknown tokenizer '{self.tokenizer}'. Use one of: {', '.join(TOKENIZER_NAMES)}.")
        if self.progress_every < 0:
            raise ValueError("progress_every must be >= 0")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "MatcherConfig":
        known = {f.name for f in fields(MatcherConfig)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return MatcherConfig(**d)


def load_config(path: str | Path | None) -> Dict[str, Any]:
    """Read a YAML config mapping, optionally nested under ``matcher:``."""
    if not path:
        return {}
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")
    payload = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(payload, dict):
        raise ValueError("Matcher config must be a mapping.")
    if "matcher" in payload and isinstance(payload["matcher"], dict):
        return payload["matcher"]
    return payload


def resolve_arg(value: Any, config_value: Any, default: Any) -> Any:
    if value is not None:
        return value
    if config_value is not None:
        return config_value
    return default
