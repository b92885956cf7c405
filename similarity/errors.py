"""
Exceptions raised by the metrics.

All of them derive from `ValueError`, so callers that only care about bad
input can keep catching that.
"""


class SimilarityError(ValueError):
    """Base class for every error raised by this package."""


class InvalidArgumentError(SimilarityError):
    """A weight or engine parameter is malformed (non-finite, negative, wrong type)."""


class CapacityExceededError(SimilarityError):
    """An edit-distance input is longer than the engine's preallocated matrix."""

    def __init__(self, length: int, max_len: int):
        self.length = length
        self.max_len = max_len
        super().__init__(
            f"Input of length {length} exceeds the engine capacity of {max_len}. "
            "Create the engine with a larger max_len, or pass grow=True."
        )


class DegenerateInputError(SimilarityError):
    """The index formula has a zero denominator for a non-empty input."""
