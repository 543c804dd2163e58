import pytest

from phrasesieve.config import MatcherConfig, load_config, resolve_arg


def test_defaults_and_roundtrip():
    cfg = MatcherConfig()
    assert cfg.max_len == 10
    assert cfg.code_policy == "count"
    assert MatcherConfig.from_dict(cfg.to_dict()) == cfg


def test_validation():
    with pytest.raises(ValueError):
        MatcherConfig(max_len=0)
    with pytest.raises(ValueError):
        MatcherConfig(code_policy="bogus")
    with pytest.raises(ValueError):
        MatcherConfig(tokenizer="spacy")
    with pytest.raises(ValueError):
        MatcherConfig.from_dict({"max_len": 3, "colour": "blue"})


def test_load_config_yaml(tmp_path):
    path = tmp_path / "matcher.yaml"
    path.write_text("matcher:\n  max_len: 4\n  code_policy: sequential\n", encoding="utf-8")
    assert load_config(path) == {"max_len": 4, "code_policy": "sequential"}

    flat = tmp_path / "flat.yaml"
    flat.write_text("max_len: 2\n", encoding="utf-8")
    assert load_config(flat) == {"max_len": 2}
    assert load_config(None) == {}


def test_load_config_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")
    bad = tmp_path / "bad.yaml"
    bad.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(bad)


def test_resolve_arg_precedence():
    assert resolve_arg(1, 2, 3) == 1
    assert resolve_arg(None, 2, 3) == 2
    assert resolve_arg(None, None, 3) == 3
