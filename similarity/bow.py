"""
Bag-of-words cosine similarity over sparse token -> weight mappings.

Summary:
- Treats each mapping as a sparse vector over the union of both vocabularies
  (absent tokens weigh 0) and returns the cosine of the angle between them.
  Neither input is modified.

Score range:
- Returns similarity in [0.0, 1.0] for non-negative weights. If either vector
  is all zeros (or empty) the similarity is 0.0.
"""

from __future__ import annotations

import math
import numbers
from typing import Mapping

from .errors import InvalidArgumentError
from .registry import SCORER_REGISTRY
from .result import SimilarityResult


def _check_weights(vec: Mapping[str, float], name: str) -> None:
    for token, w in vec.items():
        if isinstance(w, bool) or not isinstance(w, numbers.Real):
            raise InvalidArgumentError(f"{name}[{token!r}] is not a number: {w!r}")
        if not math.isfinite(w):
            raise InvalidArgumentError(f"{name}[{token!r}] is not finite: {w!r}")
        if w < 0:
            raise InvalidArgumentError(f"{name}[{token!r}] is negative: {w!r}")


def cosine(a: Mapping[str, float], b: Mapping[str, float]) -> SimilarityResult:
    """Cosine similarity of two bags of words.

    Raises InvalidArgumentError for non-numeric, non-finite or negative weights.
    """
    _check_weights(a, "a")
    _check_weights(b, "b")

    sa2 = sb2 = sab = 0.0
    # Tokens of `a` first, then the ones only `b` has.
    for token, va in a.items():
        vb = b.get(token, 0)
        sa2 += va * va
        sb2 += vb * vb
        sab += va * vb
    for token, vb in b.items():
        if token not in a:
            sb2 += vb * vb

    if not sa2 or not sb2:
        sim = 0.0
    else:
        sim = sab / (math.sqrt(sa2) * math.sqrt(sb2))
    return SimilarityResult(1.0 - sim, sim)


# Register in global registry
SCORER_REGISTRY["cosine"] = cosine
