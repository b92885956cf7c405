"""
String similarity: exact match, Jaro and Jaro-Winkler.

Summary:
- `exact` gives full credit only to identical sequences.
- `jaro` delegates to RapidFuzz's classical Jaro implementation (matching
  window `max(len1, len2) // 2 - 1`, half-transposition counting).
- `jaro_winkler` boosts the Jaro score of pairs that share a short common
  prefix, which suits human-entered names.

Limitations:
- Character level only; inputs are expected to be normalized by the caller.

Score range:
- Similarity in [0.0, 1.0]; distance is `1 - similarity`.
"""

from __future__ import annotations

from typing import Hashable, Optional, Sequence

from . import config
from .registry import SCORER_REGISTRY
from .result import SimilarityResult


def _same(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> bool:
    return len(s1) == len(s2) and all(x == y for x, y in zip(s1, s2))


def exact(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> SimilarityResult:
    """1 if `s1` and `s2` match element for element, else 0. No partial credit."""
    if _same(s1, s2):
        return SimilarityResult(0.0, 1.0)
    return SimilarityResult(1.0, 0.0)


def jaro(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> SimilarityResult:
    try:
        from rapidfuzz.distance import Jaro
    except Exception as e:  # pragma: no cover - environment without dependency
        raise ImportError(
            "rapidfuzz is required for 'jaro' and 'jaro_winkler'. "
            "Install with: pip install rapidfuzz"
        ) from e

    sim = float(Jaro.normalized_similarity(s1, s2))
    return SimilarityResult(1.0 - sim, sim)


def jaro_winkler(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    scaling_factor: Optional[float] = None,
    boost_threshold: Optional[float] = None,
) -> SimilarityResult:
    """Jaro similarity with the Winkler common-prefix boost.

    Method: identical inputs short-circuit to (0, 1). Otherwise compute Jaro;
    if it reaches `boost_threshold`, add `l * scaling_factor * (1 - jaro)`
    where `l` is the common prefix length (at most 4).

    Parameters:
    - scaling_factor: default 0.1; negative values are made positive and the
      result is capped at 0.25 so the score cannot exceed 1.
    - boost_threshold: default 0.7; made positive and capped at 1.
    """
    if _same(s1, s2):
        return SimilarityResult(0.0, 1.0)

    sf = config.JW_SCALING_FACTOR if scaling_factor is None else scaling_factor
    bt = config.JW_BOOST_THRESHOLD if boost_threshold is None else boost_threshold
    sf = min(abs(sf), config.JW_SCALING_FACTOR_CAP)
    bt = min(abs(bt), config.JW_BOOST_THRESHOLD_CAP)

    base = jaro(s1, s2)
    if base.similarity < bt:
        return base

    limit = min(len(s1), len(s2), config.JW_PREFIX_LIMIT)
    prefix = 0
    for i in range(limit):
        if s1[i] != s2[i]:
            break
        prefix += 1

    sim = base.similarity + prefix * sf * (1.0 - base.similarity)
    return SimilarityResult(1.0 - sim, sim)


# Register in global registry
SCORER_REGISTRY["exact"] = exact
SCORER_REGISTRY["jaro"] = jaro
SCORER_REGISTRY["jaro_winkler"] = jaro_winkler
