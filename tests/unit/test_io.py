import json
import logging

import pytest

from phrasesieve.io import (
    MANIFEST_FILE,
    PATTERNS_FILE,
    VOCAB_FILE,
    load_artifacts,
    load_patterns,
    load_vocab,
    save_artifacts,
    save_vocab,
)
from phrasesieve.matching.compiler import CompiledFilter, compile_patterns
from phrasesieve.matching.matcher import PhraseMatcher
from phrasesieve.tokenization.tokenizers import WhitespaceTokenizer
from phrasesieve.tokenization.vocab import Vocabulary, build_vocab


def _artifacts():
    corpus = ["new york", "new york city", "san francisco", "café"]
    vocab = build_vocab(corpus, WhitespaceTokenizer())
    return vocab, compile_patterns(corpus, vocab, max_len=3)


def test_save_load_roundtrip(tmp_path):
    vocab, patterns = _artifacts()
    assert save_artifacts(tmp_path, vocab, patterns, metadata={"name": "test"})

    loaded_vocab, loaded_patterns, manifest = load_artifacts(tmp_path)
    assert loaded_vocab == vocab
    assert loaded_vocab.token_of == vocab.token_of
    assert loaded_patterns == patterns
    assert manifest["vocab_size"] == len(vocab)
    assert manifest["pattern_count"] == len(patterns)
    assert set(manifest["files"]) == {VOCAB_FILE, PATTERNS_FILE}
    assert manifest["metadata"] == {"name": "test"}


def test_missing_files_load_as_empty(tmp_path):
    vocab, patterns, manifest = load_artifacts(tmp_path)
    assert vocab == Vocabulary()
    assert patterns == CompiledFilter()
    assert manifest == {}


def test_corrupt_files_load_as_empty(tmp_path, caplog):
    (tmp_path / VOCAB_FILE).write_text("{not json", encoding="utf-8")
    (tmp_path / PATTERNS_FILE).write_text(json.dumps({"lengths": 3}), encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert len(load_vocab(tmp_path)) == 0
        assert load_patterns(tmp_path).is_empty
    assert "vocab" in caplog.text


@pytest.mark.parametrize("lengths", [[-5], [0], [2, 0]])
def test_non_positive_lengths_load_as_empty(tmp_path, lengths):
    vocab, patterns = _artifacts()
    save_artifacts(tmp_path, vocab, patterns)
    payload = json.loads((tmp_path / PATTERNS_FILE).read_text(encoding="utf-8"))
    payload["lengths"] = lengths
    (tmp_path / PATTERNS_FILE).write_text(json.dumps(payload), encoding="utf-8")

    loaded = load_patterns(tmp_path)
    assert loaded.is_empty
    assert PhraseMatcher(vocab, loaded).match("new york") == []


def test_negative_codes_load_as_empty(tmp_path):
    (tmp_path / PATTERNS_FILE).write_text(
        json.dumps({"lengths": [1], "first_codes": [-1], "last_codes": [1], "checksum_pairs": [[1, 2]]}),
        encoding="utf-8",
    )
    assert load_patterns(tmp_path).is_empty


def test_write_failure_is_logged_not_raised(tmp_path, caplog):
    missing = tmp_path / "does-not-exist"
    with caplog.at_level(logging.ERROR):
        assert save_vocab(missing, Vocabulary(code_of={"a": 1})) is False
    assert "Failed to serialize vocab" in caplog.text


def test_checksum_mismatch_still_loads(tmp_path, caplog):
    vocab, patterns = _artifacts()
    save_artifacts(tmp_path, vocab, patterns)
    payload = json.loads((tmp_path / VOCAB_FILE).read_text(encoding="utf-8"))
    payload["code_of"]["extra"] = 1
    (tmp_path / VOCAB_FILE).write_text(json.dumps(payload), encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        loaded_vocab, _, _ = load_artifacts(tmp_path)
    assert "extra" in loaded_vocab
    assert "Checksum mismatch for vocab.json" in caplog.text
    assert (tmp_path / MANIFEST_FILE).exists()
