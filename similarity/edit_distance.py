"""
Damerau-Levenshtein edit distance with a reusable distance matrix.

Summary:
- `create_distance_engine(max_len)` allocates a `(max_len + 1)^2` matrix once
  and returns a callable engine that overwrites it on every call. Scoring one
  query against many candidates then costs no per-call allocation.
- Edits are insertion, deletion, substitution and transposition of two
  adjacent units.

Variants:
- Default (unrestricted): true Damerau-Levenshtein. A swapped pair costs one
  edit even when other edits occur around it, and the distance is a metric.
- `restricted=True`: optimal string alignment. A transposed pair is never
  edited again, so e.g. "ca" -> "abc" costs 3 instead of 2.

Capacity:
- Inputs longer than `max_len` raise `CapacityExceededError` unless the
  engine was created with `grow=True`. A growing engine scores inputs up to
  `grow_limit` on a temporary matrix released after the call, so its owned
  matrix never outgrows `max_len`.

Concurrency:
- Each call holds the engine's lock, so one engine may be shared across
  threads; calls are serialized. For parallel throughput create one engine
  per worker.

Score range:
- `distance` is the raw edit count. `similarity = 1 - distance / max(len1, len2)`
  and is not clamped. Either input empty -> (len(other), 0.0).
"""

from __future__ import annotations

import logging
import numbers
import threading
from typing import Dict, Hashable, List, Optional, Sequence

from . import config
from .errors import CapacityExceededError, InvalidArgumentError
from .registry import SCORER_REGISTRY
from .result import SimilarityResult

logger = logging.getLogger(__name__)

Matrix = List[List[int]]


def _allocate(size: int) -> Matrix:
    return [[0] * size for _ in range(size)]


def _fill_restricted(m: Matrix, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> None:
    for i in range(1, len(s2) + 1):
        c2 = s2[i - 1]
        row, up = m[i], m[i - 1]
        for j in range(1, len(s1) + 1):
            c1 = s1[j - 1]
            if c2 == c1:
                row[j] = up[j - 1]
                continue
            cost = min(up[j - 1], row[j - 1], up[j]) + 1
            if i > 1 and j > 1 and c2 == s1[j - 2] and s2[i - 2] == c1:
                swap = m[i - 2][j - 2] + 1
                if swap < cost:
                    cost = swap
            row[j] = cost


def _fill_unrestricted(m: Matrix, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> None:
    # last_row[u]: last row whose s2 unit is u.
    # last_col: last column in the current row whose s1 unit matched c2.
    last_row: Dict[Hashable, int] = {}
    for i in range(1, len(s2) + 1):
        c2 = s2[i - 1]
        row, up = m[i], m[i - 1]
        last_col = 0
        for j in range(1, len(s1) + 1):
            c1 = s1[j - 1]
            if c2 == c1:
                row[j] = up[j - 1]
                last_col = j
                continue
            cost = min(up[j - 1], row[j - 1], up[j]) + 1
            k = last_row.get(c1, 0)
            if k and last_col:
                # Transpose s2[k-1]/s1[last_col-1], deleting/inserting what lies between.
                swap = m[k - 1][last_col - 1] + (i - k - 1) + 1 + (j - last_col - 1)
                if swap < cost:
                    cost = swap
            row[j] = cost
        last_row[c2] = i


def _check_size(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")
    return int(value)


def _run(m: Matrix, fill, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
    n1, n2 = len(s1), len(s2)
    for i in range(n2 + 1):
        m[i][0] = i
    first = m[0]
    for j in range(n1 + 1):
        first[j] = j
    fill(m, s1, s2)
    return m[n2][n1]


class DamerauLevenshtein:
    """Edit-distance engine owning a preallocated, reused matrix.

    Use `create_distance_engine` to build one. Instances are callable:
    `engine(s1, s2)` is the same as `engine.distance(s1, s2)`.
    """

    def __init__(
        self,
        max_len: Optional[int] = None,
        *,
        grow: Optional[bool] = None,
        grow_limit: Optional[int] = None,
        restricted: bool = False,
    ):
        self._max_len = _check_size("max_len", config.dl_max_len() if max_len is None else max_len)
        self._grow = config.dl_grow() if grow is None else bool(grow)
        limit = _check_size("grow_limit", config.dl_grow_limit() if grow_limit is None else grow_limit)
        self._grow_limit = max(limit, self._max_len)
        self._restricted = bool(restricted)
        self._fill = _fill_restricted if self._restricted else _fill_unrestricted
        self._matrix = _allocate(self._max_len + 1)
        self._lock = threading.Lock()
        logger.debug(
            "Allocated %dx%d edit-distance matrix (restricted=%s, grow=%s, grow_limit=%d)",
            self._max_len + 1, self._max_len + 1, self._restricted, self._grow, self._grow_limit,
        )

    @property
    def max_len(self) -> int:
        return self._max_len

    @property
    def grow(self) -> bool:
        return self._grow

    @property
    def grow_limit(self) -> int:
        return self._grow_limit

    @property
    def restricted(self) -> bool:
        return self._restricted

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(max_len={self._max_len}, grow={self._grow}, "
            f"grow_limit={self._grow_limit}, restricted={self._restricted})"
        )

    def __call__(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> SimilarityResult:
        return self.distance(s1, s2)

    def distance(self, s1: Sequence[Hashable], s2: Sequence[Hashable]) -> SimilarityResult:
        """Minimum edits to turn `s1` into `s2`, and the derived similarity."""
        n1, n2 = len(s1), len(s2)
        if n2 == 0:
            return SimilarityResult(n1, 0.0)
        if n1 == 0:
            return SimilarityResult(n2, 0.0)

        longest = max(n1, n2)
        if longest <= self._max_len:
            with self._lock:
                dist = _run(self._matrix, self._fill, s1, s2)
        elif not self._grow:
            raise CapacityExceededError(longest, self._max_len)
        elif longest > self._grow_limit:
            raise CapacityExceededError(longest, self._grow_limit)
        else:
            # Call-scoped matrix; the owned one keeps its size.
            logger.debug("Input of length %d exceeds capacity %d; using a temporary matrix", longest, self._max_len)
            dist = _run(_allocate(longest + 1), self._fill, s1, s2)

        return SimilarityResult(dist, 1.0 - dist / longest)


def create_distance_engine(
    max_len: Optional[int] = None,
    *,
    grow: Optional[bool] = None,
    grow_limit: Optional[int] = None,
    restricted: bool = False,
) -> DamerauLevenshtein:
    """Build an edit-distance engine for strings of up to `max_len` units (default 60).

    `max_len=0` is honoured rather than replaced by the default of 60: it
    allocates a 1x1 matrix, so only empty inputs fit.
    With `grow=True`, longer inputs up to `grow_limit` (default 1000) are
    scored on a temporary matrix that is released after the call.
    """
    return DamerauLevenshtein(max_len, grow=grow, grow_limit=grow_limit, restricted=restricted)


# Shared engine for registry users; its lock serializes callers and its
# owned matrix never grows past the configured capacity.
SCORER_REGISTRY["damerau_levenshtein"] = create_distance_engine(grow=True)
