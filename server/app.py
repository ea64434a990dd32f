"""FastAPI server for tango application."""

import logging
import os
import random
import traceback
from pathlib import Path

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

logger = logging.getLogger(__name__)

from core.vocabulary import CorpusIndex, load_words
from core.ranking import RankEngine
from core.session import SessionEngine, SessionError
from core.interfaces import Storage
from core.models import Question

from server.file_storage import FileStorage

# Paths
PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_WORDS_FILE = PROJECT_ROOT / "words.json"


# Pydantic models for API
class StartSessionRequest(BaseModel):
    level: Optional[int] = None  # Defaults to the level suggested by rank
    direction: str = "ja2en"
    mode: str = "mc10"


class AnswerRequest(BaseModel):
    answer: str = ""


class QuestionResponse(BaseModel):
    kind: str
    prompt_main: str
    prompt_sub: str
    options: Optional[list[str]]
    index: int
    total: int
    score: int
    level: int
    mode: str


class AnswerResponse(BaseModel):
    correct: bool
    correct_answer: str
    your_answer: str
    score: int
    index: int
    total: int
    is_last: bool


class ResultResponse(BaseModel):
    score: int
    total: int
    accuracy: float
    level: int
    mode: str
    note: str
    rank_before: int
    rank_after: int
    class_before: str
    class_after: str
    change: str
    rank_up: bool
    class_up: bool
    history: list[dict]


class NextResponse(BaseModel):
    finished: bool
    question: Optional[QuestionResponse] = None
    result: Optional[ResultResponse] = None


class StatusResponse(BaseModel):
    rank: int
    class_key: str
    class_name: str
    accuracy: Optional[float]
    rolling_count: int
    min_history: int
    suggested_level: int
    words: dict[str, int]  # level -> word count
    session_running: bool


# Global state, set up by init_app()
storage: Storage = None
corpus: CorpusIndex = None
rank_engine: RankEngine = None
engine: SessionEngine = None


app = FastAPI(title="Tango API", description="Adaptive vocabulary quiz API")


def init_app(storage_backend: Storage, word_index: CorpusIndex, rng: random.Random = None) -> None:
    """Wire storage, corpus and engines into the module globals."""
    global storage, corpus, rank_engine, engine
    storage = storage_backend
    corpus = word_index
    rank_engine = RankEngine(storage)
    engine = SessionEngine(corpus, rank_engine, rng)


def create_storage() -> Storage:
    """Pick the storage backend from TANGO_STORAGE (file or postgres)."""
    storage_type = os.environ.get('TANGO_STORAGE', 'file')
    if storage_type == 'postgres':
        from server.postgres_storage import PostgresStorage
        print("Using PostgreSQL storage")
        return PostgresStorage()
    print("Using file storage")
    return FileStorage()


def resolve_words_file(storage_backend: Storage) -> str | None:
    """Corpus path from env, then config file, then ./words.json if present."""
    path = os.environ.get('TANGO_WORDS_FILE')
    if not path:
        try:
            config = storage_backend.load_config()
            path = config.get('words_file')
        except FileNotFoundError:
            pass
    if not path and DEFAULT_WORDS_FILE.exists():
        path = str(DEFAULT_WORDS_FILE)
    return path


def load_corpus(storage_backend: Storage) -> CorpusIndex:
    """Load the corpus. A bad words file is fatal; no file means the seed list."""
    path = resolve_words_file(storage_backend)
    if path:
        words = load_words(path)
        print(f"Loaded {len(words)} words from {path}")
        return CorpusIndex(words)
    from scripts.seed_words import get_seed_words
    index = CorpusIndex.from_records(get_seed_words())
    print(f"Using built-in word list ({len(index)} words)")
    return index


@app.on_event("startup")
async def startup():
    """Initialize storage, corpus and engines on startup."""
    storage_backend = create_storage()
    init_app(storage_backend, load_corpus(storage_backend))


def question_response(question: Question) -> QuestionResponse:
    s = engine.state
    return QuestionResponse(
        kind=question.kind,
        prompt_main=question.prompt_main,
        prompt_sub=question.prompt_sub,
        options=question.options,
        index=s.index,
        total=s.total,
        score=s.correct,
        level=s.level,
        mode=s.mode
    )


def result_response(result: dict) -> ResultResponse:
    rank = result['rank']
    return ResultResponse(
        score=result['score'],
        total=result['total'],
        accuracy=result['accuracy'],
        level=result['level'],
        mode=result['mode'],
        note=result['note'],
        rank_before=rank['rank_before'],
        rank_after=rank['rank_after'],
        class_before=rank['class_before'],
        class_after=rank['class_after'],
        change=rank['change'],
        rank_up=rank['rank_up'],
        class_up=rank['class_up'],
        history=result['history']
    )


def require_running() -> None:
    if not engine.is_running:
        raise HTTPException(status_code=404, detail="No session is running")


@app.get("/")
async def root():
    """Health check."""
    return {"service": "tango", "words": len(corpus) if corpus else 0}


@app.get("/api/status", response_model=StatusResponse)
async def get_status():
    """Get rank, class and rolling accuracy."""
    status = rank_engine.status()
    return StatusResponse(
        **status,
        words={str(level): count for level, count in corpus.level_counts().items()},
        session_running=engine.is_running
    )


@app.post("/api/session/start", response_model=QuestionResponse)
async def start_session(request: StartSessionRequest):
    """Start a session and return its first question."""
    level = request.level
    if level is None:
        level = rank_engine.status()['suggested_level']
    try:
        question = engine.start(level, request.direction, request.mode)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return question_response(question)


@app.get("/api/session/question", response_model=QuestionResponse)
async def get_question():
    """Get the active question."""
    require_running()
    return question_response(engine.current_question)


@app.post("/api/session/answer", response_model=AnswerResponse)
async def submit_answer(request: AnswerRequest):
    """Answer the active question. Only the first answer counts."""
    require_running()
    try:
        record = engine.answer(request.answer)
    except SessionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Error in submit_answer: {type(e).__name__}: {e}")
        logger.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail=f"Internal error: {type(e).__name__}: {str(e)}")
    if record is None:
        raise HTTPException(status_code=409, detail="Question already answered")

    s = engine.state
    logger.info(f"Answer {s.index + 1}/{s.total}: {'correct' if record.correct else 'wrong'}")
    return AnswerResponse(
        correct=record.correct,
        correct_answer=record.correct_answer,
        your_answer=record.your_answer,
        score=s.correct,
        index=s.index,
        total=s.total,
        is_last=s.index + 1 >= s.total
    )


@app.post("/api/session/next", response_model=NextResponse)
async def next_question():
    """Advance to the next question, or finish the session after the last."""
    require_running()
    try:
        question = engine.advance()
    except SessionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if question is None:
        return NextResponse(finished=True, result=result_response(engine.result))
    return NextResponse(finished=False, question=question_response(question))


@app.get("/api/session/result", response_model=ResultResponse)
async def get_result():
    """Get the result of the last finished session."""
    if engine.result is None:
        raise HTTPException(status_code=404, detail="No finished session")
    return result_response(engine.result)


@app.post("/api/session/abandon")
async def abandon_session():
    """Discard the running session."""
    was_running = engine.is_running
    engine.abandon()
    return {"success": True, "abandoned": was_running}


@app.post("/api/profile/reset")
async def reset_profile():
    """Clear rank and answer history."""
    rank_engine.reset()
    logger.info("Profile reset")
    return {"success": True}


def create_app():
    """Factory function for creating the app (useful for testing)."""
    return app
