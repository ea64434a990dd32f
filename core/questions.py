"""Question generators for the four quiz kinds."""

import logging
import random

from .config import (
    DISTRACTOR_COUNT, VERB_PICK_ATTEMPTS,
    SERIES_PICK_ATTEMPTS, SERIES_DISTRACTOR_ATTEMPTS
)
from .models import (
    Question, SessionState,
    KIND_MC, KIND_TYPE, KIND_VERB_FORM, KIND_SERIES_MC
)
from .sampler import pick_unique, pick_distractors
from .utils import normalize_key, shuffle, sample
from .vocabulary import CorpusIndex, FORM_KEYS

logger = logging.getLogger(__name__)

FORM_LABELS = {
    'base': '現在形',
    'past': '過去形',
    'pp': '過去分詞'
}

DIRECTION_FIELDS = {
    # direction: (prompt field, answer field)
    'ja2en': ('ja', 'en'),
    'en2ja': ('en', 'ja')
}

DIRECTION_LABELS = {
    'ja2en': 'Japanese → English',
    'en2ja': 'English → Japanese'
}


def is_accepted_answer(answer: str, accept_answers: list[str]) -> bool:
    """True if the normalized answer equals any normalized accepted answer."""
    given = normalize_key(answer)
    return any(normalize_key(a) == given for a in accept_answers or [])


def _pick_word(corpus: CorpusIndex, state: SessionState, level: int, rng: random.Random):
    return pick_unique(corpus.by_level(level), state.used_any, rng=rng)


def make_mc_question(corpus: CorpusIndex, state: SessionState, level: int,
                     direction: str, rng: random.Random = None) -> Question:
    """Four-choice translation question."""
    prompt_field, answer_field = DIRECTION_FIELDS[direction]
    w = _pick_word(corpus, state, level, rng)
    correct = w.value(answer_field)
    wrongs = pick_distractors(corpus.by_level(level), correct, DISTRACTOR_COUNT, answer_field, rng=rng)
    options = shuffle([correct] + wrongs, rng)
    return Question(
        kind=KIND_MC,
        prompt_main=w.value(prompt_field),
        prompt_sub=f"{DIRECTION_LABELS[direction]} (4 choices)",
        options=options,
        accept_answers=[correct],
        correct_answer=correct,
        meta={'en': w.en, 'ja': w.ja, 'series': w.series}
    )


def make_type_question(corpus: CorpusIndex, state: SessionState, level: int,
                       direction: str, rng: random.Random = None) -> Question:
    """Typed translation question, no options."""
    prompt_field, answer_field = DIRECTION_FIELDS[direction]
    w = _pick_word(corpus, state, level, rng)
    correct = w.value(answer_field)
    return Question(
        kind=KIND_TYPE,
        prompt_main=w.value(prompt_field),
        prompt_sub=f"{DIRECTION_LABELS[direction]} (typing)",
        accept_answers=[correct],
        correct_answer=correct,
        meta={'en': w.en, 'ja': w.ja, 'series': w.series, 'forms': w.forms}
    )


def pick_verb_unique(corpus: CorpusIndex, state: SessionState, level: int,
                     rng: random.Random = None):
    """Pick a verb unused by base form, or None if the level has too few verbs.

    Words already asked in any kind this session are skipped while others
    remain. The picked word's English key is marked used session-wide.
    """
    candidates = corpus.verb_candidates(level)
    if not candidates:
        return None
    pool = [w for w in candidates if w.key not in state.used_any] or candidates
    w = pick_unique(pool, state.used_verbs, key_fn=lambda v: v.base_key,
                    max_attempts=VERB_PICK_ATTEMPTS, rng=rng)
    state.used_any.add(w.key)
    return w


def make_verb_form_question(corpus: CorpusIndex, state: SessionState, level: int,
                            rng: random.Random = None) -> Question:
    """Identify which form (base, past, past participle) a shown verb is in."""
    w = pick_verb_unique(corpus, state, level, rng)
    if w is None:
        logger.debug("Level %d has too few verbs, falling back to translation", level)
        return make_mc_question(corpus, state, level, 'ja2en', rng)

    asked = sample(list(FORM_KEYS), rng)
    shown = w.forms[asked]
    options = shuffle([FORM_LABELS[k] for k in FORM_KEYS], rng)
    past_eq_pp = normalize_key(w.forms['past']) == normalize_key(w.forms['pp'])

    accept = [FORM_LABELS[asked]]
    if past_eq_pp and asked in ('past', 'pp'):
        # The shown text is both forms, so either label is right
        accept = [FORM_LABELS['past'], FORM_LABELS['pp']]

    return Question(
        kind=KIND_VERB_FORM,
        prompt_main=f'Which form is "{shown}"?',
        prompt_sub="Verb form (3 choices)",
        options=options,
        accept_answers=accept,
        correct_answer=FORM_LABELS[asked],
        meta={'en': w.en, 'ja': w.ja, 'forms': dict(w.forms), 'asked': asked, 'past_eq_pp': past_eq_pp}
    )


def make_series_question(corpus: CorpusIndex, state: SessionState, level: int,
                         rng: random.Random = None) -> Question:
    """Japanese → English choice within a topical series."""
    series_list = list(corpus.by_series(level).items())
    if not series_list:
        logger.debug("Level %d has no series large enough, falling back to translation", level)
        return make_mc_question(corpus, state, level, 'ja2en', rng)

    series_name, w = None, None
    for _ in range(SERIES_PICK_ATTEMPTS):
        series_name, entries = sample(series_list, rng)
        cand = sample(entries, rng)
        if cand.key not in state.used_any:
            w = cand
            break
    if w is None:
        series_name, entries = sample(series_list, rng)
        w = sample(entries, rng)
    state.used_any.add(w.key)

    correct = w.en
    wrongs = pick_distractors(corpus.by_level(level), correct, DISTRACTOR_COUNT, 'en',
                              exclude_series=series_name,
                              max_attempts=SERIES_DISTRACTOR_ATTEMPTS, rng=rng)
    options = shuffle([correct] + wrongs, rng)
    return Question(
        kind=KIND_SERIES_MC,
        prompt_main=f'[{series_name}] "{w.ja}" in English?',
        prompt_sub="Series (Japanese → English, 4 choices)",
        options=options,
        accept_answers=[correct],
        correct_answer=correct,
        meta={'en': w.en, 'ja': w.ja, 'series': series_name}
    )


def build_question(kind: str, corpus: CorpusIndex, state: SessionState,
                   rng: random.Random = None) -> Question:
    """Build the question for a plan item."""
    if kind == KIND_TYPE:
        return make_type_question(corpus, state, state.level, state.direction, rng)
    if kind == KIND_VERB_FORM:
        return make_verb_form_question(corpus, state, state.level, rng)
    if kind == KIND_SERIES_MC:
        return make_series_question(corpus, state, state.level, rng)
    return make_mc_question(corpus, state, state.level, state.direction, rng)
