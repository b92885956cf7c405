try:
    from rapidfuzz.distance import Jaro, JaroWinkler  # noqa: F401
    RAPIDFUZZ_OK = True
except Exception:  # pragma: no cover - environment without rapidfuzz
    RAPIDFUZZ_OK = False

import pytest

import similarity.strings as strings
from similarity import SCORER_REGISTRY, SimilarityResult, exact, jaro, jaro_winkler


def _fixed_jaro(value, calls=None):
    def fake(s1, s2):
        if calls is not None:
            calls.append((s1, s2))
        return SimilarityResult(1.0 - value, value)
    return fake


# exact

@pytest.mark.parametrize("s", ["", "cat", "naïve", ["a", "b"]])
def test_exact_identical(s):
    assert exact(s, s) == (0, 1)


def test_exact_different():
    assert exact("cat", "cat") == (0, 1)
    assert exact("cat", "car") == (1, 0)
    assert exact("cat", "cats") == (1, 0)
    assert exact("", "a") == (1, 0)


def test_exact_compares_elements_not_container_type():
    assert exact(["c", "a", "t"], "cat") == (0, 1)


# jaro_winkler boost logic (base primitive stubbed)

def test_identical_short_circuits_without_base(monkeypatch):
    calls = []
    monkeypatch.setattr(strings, "jaro", _fixed_jaro(0.5, calls))
    assert jaro_winkler("martha", "martha") == (0, 1)
    assert calls == []


def test_element_equal_sequences_short_circuit(monkeypatch):
    calls = []
    monkeypatch.setattr(strings, "jaro", _fixed_jaro(0.5, calls))
    assert jaro_winkler(["c", "a", "t"], "cat") == (0, 1)
    assert calls == []


def test_below_threshold_returns_base_unchanged(monkeypatch):
    monkeypatch.setattr(strings, "jaro", _fixed_jaro(0.6))
    r = jaro_winkler("abcd", "abce")
    assert r.similarity == pytest.approx(0.6)
    assert r.distance == pytest.approx(0.4)


def test_prefix_boost(monkeypatch):
    monkeypatch.setattr(strings, "jaro", _fixed_jaro(0.8))
    # common prefix "ab" -> l = 2
    r = jaro_winkler("abxy", "abyx")
    assert r.similarity == pytest.approx(0.8 + 2 * 0.1 * 0.2)
    assert r.distance == pytest.approx(1 - r.similarity)


def test_prefix_capped_at_four(monkeypatch):
    monkeypatch.setattr(strings, "jaro", _fixed_jaro(0.9))
    r = jaro_winkler("abcdefg", "abcdefh")
    assert r.similarity == pytest.approx(0.9 + 4 * 0.1 * 0.1)


def test_prefix_capped_at_shorter_length(monkeypatch):
    monkeypatch.setattr(strings, "jaro", _fixed_jaro(0.9))
    r = jaro_winkler("ab", "abc")
    assert r.similarity == pytest.approx(0.9 + 2 * 0.1 * 0.1)


def test_threshold_is_inclusive(monkeypatch):
    monkeypatch.setattr(strings, "jaro", _fixed_jaro(0.7))
    r = jaro_winkler("ax", "ay")
    assert r.similarity == pytest.approx(0.7 + 1 * 0.1 * 0.3)


def test_scaling_factor_capped_and_made_positive(monkeypatch):
    monkeypatch.setattr(strings, "jaro", _fixed_jaro(0.8))
    capped = jaro_winkler("abcdx", "abcdy", scaling_factor=0.9)
    assert capped.similarity == pytest.approx(0.8 + 4 * 0.25 * 0.2)
    negated = jaro_winkler("abcdx", "abcdy", scaling_factor=-0.2)
    assert negated.similarity == pytest.approx(0.8 + 4 * 0.2 * 0.2)


def test_boost_threshold_capped_and_made_positive(monkeypatch):
    monkeypatch.setattr(strings, "jaro", _fixed_jaro(0.95))
    # threshold capped to 1 -> 0.95 is below it, no boost
    assert jaro_winkler("abx", "aby", boost_threshold=5).similarity == pytest.approx(0.95)
    # -0.9 -> 0.9, boost applies
    r = jaro_winkler("abx", "aby", boost_threshold=-0.9)
    assert r.similarity == pytest.approx(0.95 + 2 * 0.1 * 0.05)


@pytest.mark.parametrize("base", [0.0, 0.3, 0.69, 0.7, 0.85, 0.99])
@pytest.mark.parametrize("sf", [0.0, 0.1, 0.25])
def test_never_below_base(monkeypatch, base, sf):
    monkeypatch.setattr(strings, "jaro", _fixed_jaro(base))
    assert jaro_winkler("abcz", "abcy", scaling_factor=sf).similarity >= base


# against the real Jaro primitive

@pytest.mark.skipif(not RAPIDFUZZ_OK, reason="rapidfuzz not installed")
@pytest.mark.parametrize(
    "s1, s2, expected_jaro, expected_jw",
    [
        ("MARTHA", "MARHTA", 0.944444, 0.961111),
        ("DIXON", "DICKSONX", 0.766667, 0.813333),
    ],
)
def test_known_values(s1, s2, expected_jaro, expected_jw):
    assert jaro(s1, s2).similarity == pytest.approx(expected_jaro, abs=1e-6)
    assert jaro_winkler(s1, s2).similarity == pytest.approx(expected_jw, abs=1e-6)


@pytest.mark.skipif(not RAPIDFUZZ_OK, reason="rapidfuzz not installed")
def test_jaro_distance_is_complement():
    r = jaro("crate", "trace")
    assert r.distance == pytest.approx(1 - r.similarity)
    assert 0.0 <= r.similarity <= 1.0


@pytest.mark.skipif(not RAPIDFUZZ_OK, reason="rapidfuzz not installed")
@pytest.mark.parametrize(
    "s1, s2",
    [("dwayne", "duane"), ("jellyfish", "smellyfish"), ("hello", "hallo"), ("abc", "xyz")],
)
def test_matches_rapidfuzz_jaro_winkler(s1, s2):
    assert jaro_winkler(s1, s2).similarity == pytest.approx(
        JaroWinkler.normalized_similarity(s1, s2), abs=1e-9
    )


def test_registered():
    assert SCORER_REGISTRY["exact"] is exact
    assert SCORER_REGISTRY["jaro"] is jaro
    assert SCORER_REGISTRY["jaro_winkler"] is jaro_winkler
