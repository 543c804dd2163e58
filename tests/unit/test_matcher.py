import random

from phrasesieve.matching.compiler import compile_patterns
from phrasesieve.matching.matcher import PhraseMatcher, remove_subsets
from phrasesieve.tokenization.tokenizers import WhitespaceTokenizer
from phrasesieve.tokenization.vocab import build_vocab

WS = WhitespaceTokenizer()


def _matcher(corpus, max_len=10, **vocab_kwargs):
    vocab = build_vocab(corpus, WS, **vocab_kwargs)
    return PhraseMatcher(vocab, compile_patterns(corpus, vocab, max_len=max_len), WS)


def test_concrete_scenario():
    matcher = _matcher(["a b", "c"], max_len=2)
    result = matcher.match("a b c")
    assert set(result) == {"a b", "c"}
    for text in ("a", "b", "b c"):
        assert text not in result


def test_remove_subset_drops_contained_match():
    matcher = _matcher(["x y z", "x"])
    assert set(matcher.match("x y z")) == {"x", "x y z"}
    assert matcher.match("x y z", remove_subset=True) == ["x y z"]


def test_spans_are_inclusive_positions():
    matcher = _matcher(["b c"])
    assert matcher.find_spans("a b c b c") == {(1, 2), (3, 4)}
    assert matcher.match_spans("b c") == [(0, 1)]


def test_out_of_vocabulary_token_breaks_span():
    matcher = _matcher(["a b"])
    assert matcher.match("a q b") == []
    assert matcher.match("q a b q") == ["a b"]


def test_code_zero_is_a_real_code():
    matcher = _matcher(["a b", "c"], code_policy="sequential")
    assert matcher.vocab.code_for("a") == 0
    assert set(matcher.match("a b c")) == {"a b", "c"}


def test_empty_sentence_and_empty_filter():
    assert _matcher(["a b"]).match("   ") == []
    assert _matcher([]).match("a b c") == []


def test_callable_tokenizer():
    vocab = build_vocab(["a,b"], lambda s: s.split(","))
    patterns = compile_patterns(["a b"], vocab, max_len=2)
    matcher = PhraseMatcher(vocab, patterns, lambda s: s.split(","))
    assert matcher.match("z,a,b") == ["a b"]


def test_remove_subsets_keeps_maximal_spans():
    spans = {(0, 0), (0, 2), (1, 2), (2, 4), (3, 3), (5, 5)}
    assert remove_subsets(spans) == {(0, 2), (2, 4), (5, 5)}
    assert remove_subsets(set()) == set()


def test_every_compiled_pattern_is_found_and_filters_hold():
    rng = random.Random(7)
    words = [f"w{i}" for i in range(12)]
    corpus = [" ".join(rng.choice(words) for _ in range(rng.randint(1, 4))) for _ in range(40)]
    matcher = _matcher(corpus, max_len=3)
    vocab, patterns = matcher.vocab, matcher.patterns

    for pattern in corpus:
        tokens = pattern.split()
        if len(tokens) > 3:
            continue
        sentence = f"w0 {pattern} zz {pattern}"
        n = len(tokens)
        assert (1, n) in matcher.find_spans(sentence)

        for i, j in matcher.find_spans(sentence + " zz w1 w2"):
            window = (sentence + " zz w1 w2").split()[i : j + 1]
            assert "zz" not in window
            assert len(window) in patterns.lengths
            assert vocab.code_for(window[0]) in patterns.first_codes
            assert vocab.code_for(window[-1]) in patterns.last_codes


def test_subset_removal_is_idempotent():
    matcher = _matcher(["a", "a b", "b c", "a b c", "c"])
    spans = matcher.find_spans("a b c a b")
    once = remove_subsets(spans)
    assert remove_subsets(once) == once
    for i, j in once:
        assert not any(ii <= i and j <= jj for ii, jj in once if (ii, jj) != (i, j))
