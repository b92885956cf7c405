"""
Shared result shape returned by every metric in the package.
"""

from typing import NamedTuple, Union


class SimilarityResult(NamedTuple):
    """`(distance, similarity)` pair.

    For normalized metrics `distance == 1 - similarity`. The edit-distance
    engine is the exception: its `distance` is a raw edit count.
    """

    distance: Union[int, float]
    similarity: float
