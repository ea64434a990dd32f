"""Random selection without repetition, with bounded retries."""

import logging
import random
from typing import Callable

from .config import UNIQUE_PICK_ATTEMPTS, DISTRACTOR_ATTEMPTS
from .models import WordEntry
from .utils import normalize_key, sample

logger = logging.getLogger(__name__)


def word_key(word: WordEntry) -> str:
    return normalize_key(word.en)


def pick_unique(pool: list, used_keys: set, key_fn: Callable = word_key,
                max_attempts: int = UNIQUE_PICK_ATTEMPTS, rng: random.Random = None):
    """Pick an element whose key is not in used_keys and mark it used.

    Tries max_attempts uniform draws, then scans the pool in order for the
    first unused key. If every key is used, returns a random element (a
    repeat) so a session never stalls. Pool must be non-empty.
    """
    for _ in range(max_attempts):
        item = sample(pool, rng)
        key = key_fn(item)
        if key not in used_keys:
            used_keys.add(key)
            return item

    for item in pool:
        key = key_fn(item)
        if key not in used_keys:
            used_keys.add(key)
            return item

    logger.debug("Pool of %d exhausted, allowing a repeat", len(pool))
    return sample(pool, rng)


def pick_distractors(pool: list[WordEntry], correct_value: str, count: int, field: str,
                     exclude_series: str = None, max_attempts: int = DISTRACTOR_ATTEMPTS,
                     rng: random.Random = None) -> list[str]:
    """Draw up to count distinct wrong values of field from pool.

    Values equal to correct_value, blank values and duplicates are skipped,
    as are entries in exclude_series. Returns fewer than count values only
    if the attempts run out.
    """
    used = {normalize_key(correct_value)}
    out = []
    if not pool:
        return out
    attempts = 0
    while len(out) < count and attempts < max_attempts:
        attempts += 1
        cand = sample(pool, rng)
        if exclude_series is not None and cand.series == exclude_series:
            continue
        value = cand.value(field)
        key = normalize_key(value)
        if not key or key in used:
            continue
        used.add(key)
        out.append(value)
    if len(out) < count:
        logger.debug("Only %d of %d distractors found for %r", len(out), count, correct_value)
    return out
