"""
Set overlap indices: Jaccard and Tversky.

Summary:
- Jaccard is intersection over union. Tversky weighs the elements unique to
  each side separately, treating `a` as the prototype and `b` as the variant.

When to use:
- Comparing token sets, shingle sets or tag sets where order and multiplicity
  do not matter.

Limitations:
- Purely membership based; near-duplicate elements count as different.

Score range:
- Similarity in [0.0, 1.0] for non-negative Tversky weights.
  Both empty -> (0.0, 1.0); see `config.EMPTY_SET_SIMILARITY`.
"""

from __future__ import annotations

import logging
from collections.abc import Set
from typing import AbstractSet, Hashable, Iterable, Optional

from . import config
from .errors import DegenerateInputError
from .registry import SCORER_REGISTRY
from .result import SimilarityResult

logger = logging.getLogger(__name__)


def _as_set(items: Iterable[Hashable]) -> AbstractSet[Hashable]:
    if isinstance(items, Set):
        return items
    return set(items)


def _intersection_size(a: AbstractSet[Hashable], b: AbstractSet[Hashable]) -> int:
    # Iterate the smaller side and probe the larger one.
    small, large = (a, b) if len(a) < len(b) else (b, a)
    return sum(1 for element in small if element in large)


def _empty_pair() -> SimilarityResult:
    logger.debug("Both sets empty; returning sentinel similarity %s", config.EMPTY_SET_SIMILARITY)
    return SimilarityResult(1.0 - config.EMPTY_SET_SIMILARITY, config.EMPTY_SET_SIMILARITY)


def jaccard(a: Iterable[Hashable], b: Iterable[Hashable]) -> SimilarityResult:
    """Jaccard index `|A & B| / |A | B|`.

    Non-set iterables are converted with `set()` first. Two empty sets are
    treated as identical.
    """
    sa, sb = _as_set(a), _as_set(b)
    if not sa and not sb:
        return _empty_pair()

    inter = _intersection_size(sa, sb)
    sim = inter / (len(sa) + len(sb) - inter)
    return SimilarityResult(1.0 - sim, sim)


def tversky(
    a: Iterable[Hashable],
    b: Iterable[Hashable],
    alpha: Optional[float] = None,
    beta: Optional[float] = None,
) -> SimilarityResult:
    """Tversky index of prototype `a` against variant `b`.

    `alpha` weighs elements only in `a`, `beta` those only in `b`; each
    defaults to 0.5 on its own, which gives the Dice coefficient.
    `alpha = beta = 1` gives Jaccard. The weights are not clamped.

    Raises:
    - DegenerateInputError if the denominator is zero for non-empty input,
      which only zero or negative weights can cause.
    """
    alpha = config.TVERSKY_ALPHA if alpha is None else alpha
    beta = config.TVERSKY_BETA if beta is None else beta

    sa, sb = _as_set(a), _as_set(b)
    if not sa and not sb:
        return _empty_pair()

    inter = _intersection_size(sa, sb)
    only_a = len(sa) - inter
    only_b = len(sb) - inter
    denom = inter + alpha * only_a + beta * only_b
    if denom == 0:
        raise DegenerateInputError(
            f"Tversky denominator is zero (intersection={inter}, alpha={alpha}, beta={beta})"
        )

    sim = inter / denom
    return SimilarityResult(1.0 - sim, sim)


# Register in global registry
SCORER_REGISTRY["jaccard"] = jaccard
SCORER_REGISTRY["tversky"] = tversky
