"""Word corpus ingestion and per-level indexes."""

import json
import os

from .config import LEVELS, DEFAULT_SERIES, MIN_SERIES_SIZE, MIN_VERB_CANDIDATES
from .models import WordEntry

FORM_KEYS = ('base', 'past', 'pp')


class CorpusError(ValueError):
    """Raised when the corpus source is unreadable or not a list of records."""


def _parse_level(value) -> int | None:
    """Accept 1, 2, 3 (also as numeric strings). Anything else is invalid."""
    if isinstance(value, bool):
        return None
    try:
        level = int(value)
    except (TypeError, ValueError):
        return None
    if isinstance(value, float) and value != level:
        return None
    return level if level in LEVELS else None


def _parse_forms(forms) -> dict | None:
    """Forms count only when all three are strings; partial forms are ignored."""
    if not isinstance(forms, dict):
        return None
    if not all(isinstance(forms.get(k), str) for k in FORM_KEYS):
        return None
    return {k: forms[k] for k in FORM_KEYS}


def ingest_words(data) -> list[WordEntry]:
    """Convert raw records into WordEntry objects.

    Records missing en/ja text or a valid level are dropped silently.
    Raises CorpusError if data is not a list.
    """
    if not isinstance(data, list):
        raise CorpusError("Word list must be a JSON array of records")

    cleaned = []
    for raw in data:
        if not isinstance(raw, dict):
            continue
        en, ja = raw.get('en'), raw.get('ja')
        if not isinstance(en, str) or not isinstance(ja, str):
            continue
        level = _parse_level(raw.get('level'))
        if level is None:
            continue
        series = raw.get('series')
        if not isinstance(series, str):
            series = DEFAULT_SERIES
        cleaned.append(WordEntry(en, ja, level, series, _parse_forms(raw.get('forms'))))
    return cleaned


def load_words(path: str) -> list[WordEntry]:
    """Load and ingest a words.json file. Raises CorpusError on failure."""
    if not os.path.exists(path):
        raise CorpusError(f"Word list not found at {path}")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CorpusError(f"Could not read word list {path}: {e}") from e
    return ingest_words(data)


class CorpusIndex:
    """Read-only view over the corpus, grouped by level, series and verb forms."""

    def __init__(self, words: list[WordEntry]):
        self.words = list(words)
        self._by_level = {level: [] for level in LEVELS}
        self._by_series = {level: {} for level in LEVELS}
        self._verbs = {level: [] for level in LEVELS}

        for w in self.words:
            self._by_level[w.level].append(w)
            self._by_series[w.level].setdefault(w.series, []).append(w)
            if w.forms:
                self._verbs[w.level].append(w)

    @classmethod
    def from_records(cls, data) -> 'CorpusIndex':
        return cls(ingest_words(data))

    def by_level(self, level: int) -> list[WordEntry]:
        return self._by_level.get(level, [])

    def all_series(self, level: int) -> dict[str, list[WordEntry]]:
        """Every series bucket for a level, regardless of size."""
        return self._by_series.get(level, {})

    def by_series(self, level: int) -> dict[str, list[WordEntry]]:
        """Series buckets large enough for series questions."""
        return {
            name: entries
            for name, entries in self.all_series(level).items()
            if len(entries) >= MIN_SERIES_SIZE
        }

    def all_verbs(self, level: int) -> list[WordEntry]:
        return self._verbs.get(level, [])

    def verb_candidates(self, level: int) -> list[WordEntry]:
        """Entries with conjugation forms, or [] when too few to be usable."""
        verbs = self.all_verbs(level)
        if len(verbs) < MIN_VERB_CANDIDATES:
            return []
        return verbs

    def level_counts(self) -> dict[int, int]:
        return {level: len(entries) for level, entries in self._by_level.items()}

    def __len__(self) -> int:
        return len(self.words)
