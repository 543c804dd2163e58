"""Serialization for matcher artifacts.

A model directory holds ``vocab.json``, ``patterns.json`` and a
``manifest.json`` with checksums of both. Writes that fail are logged and
skipped; reads that fail fall back to empty structures.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from phrasesieve.matching.compiler import CompiledFilter
from phrasesieve.tokenization.vocab import Vocabulary
from phrasesieve.utils.hashing import sha256_file
from phrasesieve.utils.logging import get_logger
from phrasesieve.utils.serialization import read_json, write_json

logger = get_logger(__name__)

FORMAT_VERSION = 1
VOCAB_FILE = "vocab.json"
PATTERNS_FILE = "patterns.json"
MANIFEST_FILE = "manifest.json"


def save_vocab(model_dir: Path, vocab: Vocabulary) -> bool:
    payload = {"format_version": FORMAT_VERSION, **vocab.to_dict()}
    return _write(model_dir / VOCAB_FILE, payload, "vocab")


def save_patterns(model_dir: Path, patterns: CompiledFilter) -> bool:
    payload = {"format_version": FORMAT_VERSION, **patterns.to_dict()}
    return _write(model_dir / PATTERNS_FILE, payload, "patterns")


def save_manifest(
    model_dir: Path,
    vocab: Vocabulary,
    patterns: CompiledFilter,
    metadata: dict[str, object] | None = None,
) -> bool:
    files: dict[str, str] = {}
    for name in (VOCAB_FILE, PATTERNS_FILE):
        path = model_dir / name
        if path.exists():
            files[name] = sha256_file(path)
    manifest = {
        "format_version": FORMAT_VERSION,
        "created_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "vocab_size": len(vocab),
        "pattern_count": len(patterns),
        "metadata": metadata or {},
        "files": files,
    }
    return _write(model_dir / MANIFEST_FILE, manifest, "manifest")


def load_vocab(model_dir: Path) -> Vocabulary:
    payload = _read(model_dir / VOCAB_FILE, "vocab")
    if payload is None:
        return Vocabulary()
    try:
        return Vocabulary.from_dict(payload)
    except (TypeError, ValueError) as exc:
        logger.warning("Invalid vocab in %s (%s); using an empty vocabulary.", model_dir, exc)
        return Vocabulary()


def load_patterns(model_dir: Path) -> CompiledFilter:
    payload = _read(model_dir / PATTERNS_FILE, "patterns")
    if payload is None:
        return CompiledFilter()
    try:
        return CompiledFilter.from_dict(payload)
    except (TypeError, ValueError) as exc:
        logger.warning("Invalid patterns in %s (%s); using an empty filter.", model_dir, exc)
        return CompiledFilter()


def load_manifest(model_dir: Path) -> dict[str, object]:
    path = model_dir / MANIFEST_FILE
    if not path.exists():
        return {}
    return _read(path, "manifest") or {}


def verify_manifest(model_dir: Path, manifest: dict[str, object]) -> list[str]:
    """Names of artifact files whose sha256 differs from the manifest."""
    files = manifest.get("files") or {}
    if not isinstance(files, dict):
        return []
    mismatched: list[str] = []
    for name, expected in files.items():
        path = model_dir / str(name)
        if path.exists() and sha256_file(path) != expected:
            mismatched.append(str(name))
    return mismatched


def save_artifacts(
    model_dir: Path,
    vocab: Vocabulary,
    patterns: CompiledFilter,
    metadata: dict[str, object] | None = None,
) -> bool:
    ok = save_vocab(model_dir, vocab)
    ok = save_patterns(model_dir, patterns) and ok
    return save_manifest(model_dir, vocab, patterns, metadata) and ok


def load_artifacts(model_dir: Path) -> tuple[Vocabulary, CompiledFilter, dict[str, object]]:
    manifest = load_manifest(model_dir)
    for name in verify_manifest(model_dir, manifest):
        logger.warning("Checksum mismatch for %s in %s; loading it anyway.", name, model_dir)
    vocab = load_vocab(model_dir)
    patterns = load_patterns(model_dir)
    logger.info("Loaded vocab size: %d, patterns: %d", len(vocab), len(patterns))
    return vocab, patterns, manifest


def _write(path: Path, payload: dict[str, object], what: str) -> bool:
    try:
        write_json(path, payload)
    except OSError as exc:
        logger.error("Failed to serialize %s to %s: %s", what, path, exc)
        return False
    return True


def _read(path: Path, what: str) -> dict[str, object] | None:
    try:
        return read_json(path)
    except FileNotFoundError:
        logger.warning("No saved %s at %s; using an empty default.", what, path)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to deserialize %s from %s: %s", what, path, exc)
    return None
