"""Learner rank, class tiers and the rolling-accuracy promotion rule."""

import json
import logging
import math

from .config import (
    ROLLING_N, MIN_HISTORY_FOR_RANK, PROMOTE_ACC, DEMOTE_ACC,
    MIN_RANK, STORAGE_KEY
)
from .interfaces import Storage

logger = logging.getLogger(__name__)

# Inclusive rank ranges; the last class has no upper bound
CLASS_RULES = [
    {'name': 'ビギナー', 'key': 'beginner', 'min': 1, 'max': 2},
    {'name': 'ブロンズ', 'key': 'bronze', 'min': 3, 'max': 6},
    {'name': 'シルバー', 'key': 'silver', 'min': 7, 'max': 9},
    {'name': 'ゴールド', 'key': 'gold', 'min': 10, 'max': 12},
    {'name': 'プラチナ', 'key': 'platinum', 'min': 13, 'max': 14},
    {'name': 'ダイヤモンド', 'key': 'diamond', 'min': 15, 'max': 19},
    {'name': 'レジェンド', 'key': 'legend', 'min': 20, 'max': 30},
    {'name': 'マスター', 'key': 'master', 'min': 31, 'max': None},
]


def _clamp_rank(rank) -> int:
    try:
        return max(MIN_RANK, int(rank))
    except (TypeError, ValueError, OverflowError):
        return MIN_RANK


def class_for_rank(rank: int) -> dict:
    """Get the class rule whose range contains rank."""
    r = _clamp_rank(rank)
    for rule in CLASS_RULES:
        if r >= rule['min'] and (rule['max'] is None or r <= rule['max']):
            return rule
    return CLASS_RULES[0]


def suggested_level_by_rank(rank: int) -> int:
    """Corpus level recommended for a rank."""
    r = _clamp_rank(rank)
    if r >= 15:
        return 3
    if r >= 7:
        return 2
    return 1


def rolling_accuracy(rolling: list[bool]) -> float | None:
    if not rolling:
        return None
    return sum(1 for ok in rolling if ok) / len(rolling)


def evaluate_rank(rank: int, rolling: list[bool]) -> dict:
    """Apply the promotion rule to (rank, rolling window). Pure.

    Returns a dict with rank_before, rank_after, class_before, class_after,
    accuracy, change, rank_up, class_up and a human-readable note.
    """
    before = _clamp_rank(rank)
    n = len(rolling)
    result = {
        'rank_before': before,
        'rank_after': before,
        'class_before': class_for_rank(before)['key'],
        'class_after': class_for_rank(before)['key'],
        'accuracy': rolling_accuracy(rolling),
        'change': 'insufficient',
        'rank_up': False,
        'class_up': False,
        'note': f"History {n} questions (ranking needs {MIN_HISTORY_FOR_RANK}+)"
    }
    if n < MIN_HISTORY_FOR_RANK:
        return result

    acc = result['accuracy']
    pct = round(acc * 100)
    if acc >= PROMOTE_ACC:
        after = before + 1
        result['change'] = 'promoted'
        result['note'] = f"Accuracy {pct}% - promoted"
    elif acc < DEMOTE_ACC:
        after = max(MIN_RANK, before - 1)
        result['change'] = 'demoted' if after < before else 'held'
        result['note'] = f"Accuracy {pct}% - demoted" if after < before else f"Accuracy {pct}% (held)"
    else:
        after = before
        result['change'] = 'held'
        result['note'] = f"Accuracy {pct}% (held)"

    result['rank_after'] = after
    result['class_after'] = class_for_rank(after)['key']
    result['rank_up'] = after > before
    result['class_up'] = after > before and result['class_after'] != result['class_before']
    return result


class Profile:
    """Persisted learner profile: rank and the rolling outcome window."""

    def __init__(self, rank: int = MIN_RANK, rolling: list[bool] = None):
        self.rank = rank
        self.rolling = rolling if rolling is not None else []

    def push(self, is_correct: bool) -> None:
        """Append an outcome, dropping the oldest beyond ROLLING_N."""
        self.rolling.append(bool(is_correct))
        if len(self.rolling) > ROLLING_N:
            self.rolling = self.rolling[-ROLLING_N:]

    def accuracy(self) -> float | None:
        return rolling_accuracy(self.rolling)

    def to_dict(self) -> dict:
        return {'rank': self.rank, 'rolling': list(self.rolling)}

    @classmethod
    def from_dict(cls, data: dict) -> 'Profile':
        """Build a profile from stored data. Raises ValueError on a wrong shape."""
        if not isinstance(data, dict):
            raise ValueError("Profile must be an object")
        rank = data.get('rank')
        rolling = data.get('rolling')
        if isinstance(rank, bool) or not isinstance(rank, (int, float)):
            raise ValueError("Profile rank must be a number")
        if isinstance(rank, float) and not math.isfinite(rank):
            raise ValueError("Profile rank must be finite")
        if not isinstance(rolling, list):
            raise ValueError("Profile rolling must be a list")
        return cls(max(MIN_RANK, int(rank)), [bool(x) for x in rolling][-ROLLING_N:])


class RankEngine:
    """Owns the process-wide profile and keeps it in storage."""

    def __init__(self, storage: Storage, key: str = STORAGE_KEY):
        self.storage = storage
        self.key = key
        self.profile = self.load()

    def load(self) -> Profile:
        """Read the profile; missing or malformed data gives a fresh one."""
        raw = self.storage.get_item(self.key)
        if not raw:
            return Profile()
        try:
            return Profile.from_dict(json.loads(raw))
        except (ValueError, TypeError) as e:
            logger.warning(f"Discarding unreadable profile: {e}")
            return Profile()

    def save(self) -> None:
        self.storage.set_item(self.key, json.dumps(self.profile.to_dict()))

    def reset(self) -> None:
        self.storage.remove_item(self.key)
        self.profile = Profile()

    @property
    def rank(self) -> int:
        return self.profile.rank

    def record_outcome(self, is_correct: bool) -> None:
        self.profile.push(is_correct)
        self.save()

    def evaluate(self) -> dict:
        """Apply the rank rule to the current profile and persist the result."""
        result = evaluate_rank(self.profile.rank, self.profile.rolling)
        if result['change'] != 'insufficient':
            self.profile.rank = result['rank_after']
            self.save()
        if result['rank_after'] != result['rank_before']:
            logger.info(f"Rank {result['change']}: {result['rank_before']} -> {result['rank_after']}")
        return result

    def status(self) -> dict:
        cls = class_for_rank(self.profile.rank)
        return {
            'rank': self.profile.rank,
            'class_key': cls['key'],
            'class_name': cls['name'],
            'accuracy': self.profile.accuracy(),
            'rolling_count': len(self.profile.rolling),
            'min_history': MIN_HISTORY_FOR_RANK,
            'suggested_level': suggested_level_by_rank(self.profile.rank)
        }
