from .models import WordEntry, Question, AnswerRecord, SessionState
from .interfaces import Storage
from .utils import normalize_key
from .vocabulary import CorpusIndex, CorpusError, ingest_words, load_words
from .sampler import pick_unique, pick_distractors
from .questions import build_question, is_accepted_answer
from .ranking import (
    CLASS_RULES, Profile, RankEngine,
    class_for_rank, evaluate_rank, suggested_level_by_rank
)
from .session import SessionEngine, SessionError
from .config import (
    ROLLING_N, MIN_HISTORY_FOR_RANK, PROMOTE_ACC, DEMOTE_ACC,
    SESSION_LENGTH, STORAGE_KEY
)

__all__ = [
    'WordEntry', 'Question', 'AnswerRecord', 'SessionState',
    'Storage',
    'normalize_key',
    'CorpusIndex', 'CorpusError', 'ingest_words', 'load_words',
    'pick_unique', 'pick_distractors',
    'build_question', 'is_accepted_answer',
    'CLASS_RULES', 'Profile', 'RankEngine',
    'class_for_rank', 'evaluate_rank', 'suggested_level_by_rank',
    'SessionEngine', 'SessionError',
    'ROLLING_N', 'MIN_HISTORY_FOR_RANK', 'PROMOTE_ACC', 'DEMOTE_ACC',
    'SESSION_LENGTH', 'STORAGE_KEY'
]
