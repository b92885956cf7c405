"""
Global scorer registry.

Exposes `SCORER_REGISTRY`: a mapping from a string key to a callable that
takes a pair of inputs (plus optional keyword tunables) and returns a
`SimilarityResult` of `(distance, similarity)`.
"""

from typing import Callable, Dict

from .result import SimilarityResult

SCORER_REGISTRY: Dict[str, Callable[..., SimilarityResult]] = {}


def get_scorer(name: str) -> Callable[..., SimilarityResult]:
    """Return the registered scorer called `name`."""
    try:
        return SCORER_REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(SCORER_REGISTRY)) or "<none>"
        raise KeyError(f"Unknown scorer {name!r}. Registered scorers: {known}") from None
