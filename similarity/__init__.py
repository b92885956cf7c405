"""
Pairwise similarity metrics and scorer registration.

Exposes `SCORER_REGISTRY` and the metric functions, and imports every metric
module for side-effect registration into the registry. Every metric returns
a `SimilarityResult(distance, similarity)`.
"""

from .registry import SCORER_REGISTRY, get_scorer  # noqa: F401
from .result import SimilarityResult  # noqa: F401
from .errors import (  # noqa: F401
    CapacityExceededError,
    DegenerateInputError,
    InvalidArgumentError,
    SimilarityError,
)

# Import modules that register themselves in the registry on import.
# rapidfuzz is only imported when 'jaro'/'jaro_winkler' are first called.
from .sets import jaccard, tversky  # noqa: F401
from .strings import exact, jaro, jaro_winkler  # noqa: F401
from .edit_distance import DamerauLevenshtein, create_distance_engine  # noqa: F401
from .bow import cosine  # noqa: F401

__all__ = [
    "SCORER_REGISTRY",
    "get_scorer",
    "SimilarityResult",
    "SimilarityError",
    "InvalidArgumentError",
    "CapacityExceededError",
    "DegenerateInputError",
    # set
    "jaccard",
    "tversky",
    # string
    "exact",
    "jaro",
    "jaro_winkler",
    "create_distance_engine",
    "DamerauLevenshtein",
    # bow
    "cosine",
]
