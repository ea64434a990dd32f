"""Domain models for tango application."""

from .utils import normalize_key

# Question kinds
KIND_MC = 'mc'
KIND_TYPE = 'type'
KIND_VERB_FORM = 'verbForm'
KIND_SERIES_MC = 'seriesJa2En'

# Session status
STATUS_IDLE = 'idle'
STATUS_RUNNING = 'running'
STATUS_FINISHED = 'finished'

NO_ANSWER = '(no answer)'


class WordEntry:
    """A single vocabulary record from the corpus."""

    def __init__(self, en: str, ja: str, level: int, series: str, forms: dict = None):
        self.en = en
        self.ja = ja
        self.level = level
        self.series = series
        self.forms = forms  # {base, past, pp} or None

    @property
    def key(self) -> str:
        return normalize_key(self.en)

    @property
    def base_key(self) -> str | None:
        if not self.forms:
            return None
        return normalize_key(self.forms['base'])

    def value(self, field: str) -> str:
        """Get the 'en' or 'ja' side of the entry."""
        return getattr(self, field)

    def __repr__(self) -> str:
        return f"WordEntry({self.en!r}, {self.ja!r}, level={self.level}, series={self.series!r})"


class Question:
    """A self-contained question, consumed once by the session engine."""

    def __init__(self, kind: str, prompt_main: str, prompt_sub: str,
                 accept_answers: list[str], correct_answer: str,
                 options: list[str] = None, meta: dict = None):
        self.kind = kind
        self.prompt_main = prompt_main
        self.prompt_sub = prompt_sub
        self.options = options
        self.accept_answers = list(accept_answers)
        self.correct_answer = correct_answer
        self.meta = meta or {}

    @property
    def is_choice(self) -> bool:
        return self.options is not None

    def to_dict(self, include_answers: bool = True) -> dict:
        data = {
            'kind': self.kind,
            'prompt_main': self.prompt_main,
            'prompt_sub': self.prompt_sub,
            'options': list(self.options) if self.options is not None else None
        }
        if include_answers:
            data['accept_answers'] = list(self.accept_answers)
            data['correct_answer'] = self.correct_answer
            data['meta'] = self.meta
        return data


class AnswerRecord:
    """Outcome of one answered question."""

    def __init__(self, kind: str, prompt_main: str, meta: dict, correct: bool,
                 correct_answer: str, your_answer: str):
        self.kind = kind
        self.prompt_main = prompt_main
        self.meta = meta
        self.correct = correct
        self.correct_answer = correct_answer
        self.your_answer = your_answer

    def review_extra(self) -> str:
        """Extra detail shown next to the answer in the review list."""
        meta = self.meta or {}
        forms = meta.get('forms')
        if self.kind == KIND_VERB_FORM and forms:
            extra = f"(base: {forms['base']}, past: {forms['past']}, pp: {forms['pp']})"
            if meta.get('past_eq_pp'):
                extra += " (past=pp)"
            return extra
        return f"({meta.get('en', '')} / {meta.get('ja', '')} / {meta.get('series', '')})"

    def to_dict(self) -> dict:
        return {
            'kind': self.kind,
            'prompt_main': self.prompt_main,
            'meta': self.meta,
            'correct': self.correct,
            'correct_answer': self.correct_answer,
            'your_answer': self.your_answer,
            'review_extra': self.review_extra()
        }


class SessionState:
    """Transient state of one quiz run. Never persisted."""

    def __init__(self, level: int, direction: str, mode: str, plan: list[str]):
        self.level = level
        self.direction = direction
        self.mode = mode
        self.plan = plan
        self.index = 0
        self.correct = 0
        self.history = []
        self.used_any = set()
        self.used_verbs = set()
        self.current = None
        self.answered = False
        self.status = STATUS_IDLE

    @property
    def total(self) -> int:
        return len(self.plan)

    @property
    def is_running(self) -> bool:
        return self.status == STATUS_RUNNING

    @property
    def is_finished(self) -> bool:
        return self.status == STATUS_FINISHED

    def accuracy(self) -> float:
        return self.correct / self.total if self.total else 0.0
