"""Line readers for pattern, vocabulary and query files."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from phrasesieve.utils.logging import get_logger

logger = get_logger(__name__)


def read_lines(path: str | Path, *, skip_empty: bool = False) -> list[str]:
    """Read a UTF-8 text file into a list of lines.

    An unreadable file is treated as empty input and logged, not raised.
    """
    return list(iter_lines(path, skip_empty=skip_empty))


def iter_lines(path: str | Path, *, skip_empty: bool = False) -> Iterator[str]:
    try:
        handle = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning("Cannot open %s (%s); treating it as empty.", path, exc)
        return
    with handle:
        for line in handle:
            s = line.rstrip("\r\n")
            if skip_empty and not s.strip():
                continue
            yield s
