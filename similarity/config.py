# config.py

# Single place for metric defaults and caps. Engine capacity and growth can be
# overridden from the environment; the variables are read when an engine is
# created, and invalid values fall back to the defaults below.

import logging
import os

logger = logging.getLogger(__name__)

# Set metrics
TVERSKY_ALPHA: float = 0.5   # prototype weight; 0.5/0.5 is Dice
TVERSKY_BETA: float = 0.5    # variant weight
# Both sets empty -> nothing differs.
EMPTY_SET_SIMILARITY: float = 1.0

# Jaro-Winkler
JW_SCALING_FACTOR: float = 0.1
JW_SCALING_FACTOR_CAP: float = 0.25
JW_BOOST_THRESHOLD: float = 0.7
JW_BOOST_THRESHOLD_CAP: float = 1.0
JW_PREFIX_LIMIT: int = 4

# Damerau-Levenshtein engine
DL_MAX_LEN: int = 60          # SIMILARITY_DL_MAX_LEN
DL_GROW: bool = False         # SIMILARITY_DL_GROW ("1", "true", "yes")
# Longest input a growing engine accepts. The larger matrix lives for one call.
DL_GROW_LIMIT: int = 1000     # SIMILARITY_DL_GROW_LIMIT


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if value < 0:
        logger.warning("Ignoring %s=%r (expected a non-negative integer); using %d", name, raw, default)
        return default
    return value


def dl_max_len() -> int:
    return _env_int("SIMILARITY_DL_MAX_LEN", DL_MAX_LEN)


def dl_grow_limit() -> int:
    return _env_int("SIMILARITY_DL_GROW_LIMIT", DL_GROW_LIMIT)


def dl_grow() -> bool:
    raw = os.getenv("SIMILARITY_DL_GROW")
    if raw is None:
        return DL_GROW
    return raw.strip().lower() in ("1", "true", "yes")
