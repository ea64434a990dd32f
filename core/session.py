"""Quiz session state machine: idle -> running -> finished."""

import logging
import random

from .config import (
    LEVELS, DIRECTIONS, MODES,
    SESSION_LENGTH, MIXED_VERB_COUNT, MIXED_SERIES_COUNT
)
from .models import (
    AnswerRecord, Question, SessionState,
    KIND_MC, KIND_TYPE, KIND_VERB_FORM, KIND_SERIES_MC,
    STATUS_RUNNING, STATUS_FINISHED, NO_ANSWER
)
from .questions import build_question, is_accepted_answer
from .ranking import RankEngine
from .utils import shuffle
from .vocabulary import CorpusIndex

logger = logging.getLogger(__name__)


class SessionError(Exception):
    """Raised when an operation does not fit the session's current state."""


def build_plan(mode: str, rng: random.Random = None) -> list[str]:
    """Ordered question kinds for one session."""
    if mode == 'mix10':
        plan = [KIND_VERB_FORM] * MIXED_VERB_COUNT + [KIND_SERIES_MC] * MIXED_SERIES_COUNT
        return shuffle(plan, rng)
    kind = KIND_MC if mode == 'mc10' else KIND_TYPE
    return [kind] * SESSION_LENGTH


class SessionEngine:
    """Drives one session at a time over a corpus, reporting outcomes to the rank engine."""

    def __init__(self, corpus: CorpusIndex, rank_engine: RankEngine, rng: random.Random = None):
        self.corpus = corpus
        self.rank_engine = rank_engine
        self.rng = rng
        self.state = None
        self.result = None

    @property
    def is_running(self) -> bool:
        return self.state is not None and self.state.is_running

    @property
    def current_question(self) -> Question | None:
        if not self.is_running:
            return None
        return self.state.current

    def start(self, level: int, direction: str, mode: str) -> Question:
        """Start a new session, discarding any session in progress."""
        if level not in LEVELS:
            raise ValueError(f"Invalid level: {level}")
        if direction not in DIRECTIONS:
            raise ValueError(f"Invalid direction: {direction}")
        if mode not in MODES:
            raise ValueError(f"Invalid mode: {mode}")
        if not self.corpus.by_level(level):
            raise ValueError(f"No words available for level {level}")

        if self.is_running:
            logger.info(f"Abandoning session at question {self.state.index + 1}")

        self.state = SessionState(level, direction, mode, build_plan(mode, self.rng))
        self.state.status = STATUS_RUNNING
        self.result = None
        logger.info(f"Session started: level={level} direction={direction} mode={mode}")
        return self._present()

    def _present(self) -> Question:
        s = self.state
        s.answered = False
        s.current = build_question(s.plan[s.index], self.corpus, s, self.rng)
        return s.current

    def answer(self, your_answer: str) -> AnswerRecord | None:
        """Resolve the current question. Repeat answers return None."""
        if not self.is_running:
            raise SessionError("No session is running")
        s = self.state
        if s.answered:
            return None
        s.answered = True

        q = s.current
        your = (your_answer or '').strip()
        is_correct = bool(your) and is_accepted_answer(your, q.accept_answers)
        if is_correct:
            s.correct += 1

        record = AnswerRecord(q.kind, q.prompt_main, q.meta, is_correct,
                              q.correct_answer, your or NO_ANSWER)
        s.history.append(record)
        self.rank_engine.record_outcome(is_correct)
        return record

    def advance(self) -> Question | None:
        """Move to the next question, or finish and return None after the last."""
        if not self.is_running:
            raise SessionError("No session is running")
        s = self.state
        if not s.answered:
            raise SessionError("Current question has not been answered")
        s.index += 1
        if s.index >= s.total:
            self._finish()
            return None
        return self._present()

    def _finish(self) -> dict:
        """Evaluate rank once and close the session."""
        s = self.state
        evaluation = self.rank_engine.evaluate()
        s.status = STATUS_FINISHED
        s.current = None
        self.result = {
            'score': s.correct,
            'total': s.total,
            'accuracy': s.accuracy(),
            'level': s.level,
            'mode': s.mode,
            'rank': evaluation,
            'note': evaluation['note'],
            'history': [h.to_dict() for h in s.history]
        }
        logger.info(f"Session finished: {s.correct}/{s.total}, {evaluation['note']}")
        return self.result

    def abandon(self) -> None:
        """Drop the running session. Outcomes already recorded stay recorded."""
        self.state = None
        self.result = None
