# core/quiz_state.py
# Every change to a quiz session goes through reduce(state, event). Events that
# are not valid for the current status return the state unchanged.

import enum
import logging
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, Tuple

from core.quiz_schema import QuizQuestion

logger = logging.getLogger(__name__)

EMPTY_QUIZ_MESSAGE = (
    "The AI could not generate a quiz from this PDF. "
    "Please try another PDF or check the PDF content."
)
NO_PDF_NOTICE = "No PDF Selected. Please upload a PDF file to generate a quiz."


class Status(enum.Enum):
    UPLOAD = "upload"
    GENERATING = "generating"
    IN_PROGRESS = "inProgress"
    COMPLETED = "completed"
    ERROR = "error"


@dataclass(frozen=True)
class AnswerRecord:
    selected_answer: str
    is_correct: bool
    correct_answer: str


@dataclass(frozen=True)
class SessionState:
    status: Status = Status.UPLOAD
    file_name: Optional[str] = None
    document: Optional[str] = None
    file_version: int = 0
    notice: Optional[str] = None
    quiz: Tuple[QuizQuestion, ...] = ()
    current_question_index: int = 0
    answers: Mapping[int, AnswerRecord] = field(default_factory=dict)
    score: int = 0
    error_message: Optional[str] = None

    @property
    def total_questions(self) -> int:
        return len(self.quiz)

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    @property
    def current_question(self) -> Optional[QuizQuestion]:
        if self.status is not Status.IN_PROGRESS:
            return None
        return self.quiz[self.current_question_index]

    @property
    def current_answer(self) -> Optional[AnswerRecord]:
        return self.answers.get(self.current_question_index)

    @property
    def is_last_question(self) -> bool:
        return self.current_question_index == len(self.quiz) - 1


# ===============
# Events
# ===============


@dataclass(frozen=True)
class FileSelected:
    file_name: str


@dataclass(frozen=True)
class FileRejected:
    notice: str


@dataclass(frozen=True)
class FileCleared:
    pass


@dataclass(frozen=True)
class DocumentEncoded:
    version: int
    document: str


@dataclass(frozen=True)
class EncodingFailed:
    version: int
    notice: str


@dataclass(frozen=True)
class GenerationStarted:
    pass


@dataclass(frozen=True)
class GenerationSucceeded:
    quiz: Tuple[QuizQuestion, ...]


@dataclass(frozen=True)
class GenerationFailed:
    message: str


@dataclass(frozen=True)
class AnswerSubmitted:
    index: int
    option: str


@dataclass(frozen=True)
class Advanced:
    pass


@dataclass(frozen=True)
class Reset:
    pass


# ===============
# Transitions
# ===============


def _on_upload(state: SessionState, event) -> SessionState:
    if isinstance(event, FileSelected):
        # A new selection supersedes any encode still in flight.
        return replace(
            state,
            file_name=event.file_name,
            document=None,
            file_version=state.file_version + 1,
            notice=None,
            error_message=None,
        )
    if isinstance(event, FileRejected):
        return replace(state, notice=event.notice)
    if isinstance(event, FileCleared):
        return replace(
            state, file_name=None, document=None, file_version=state.file_version + 1, notice=None
        )
    if isinstance(event, DocumentEncoded):
        if event.version != state.file_version:
            logger.debug("Dropping stale encode v%d (current v%d)", event.version, state.file_version)
            return state
        return replace(state, document=event.document)
    if isinstance(event, EncodingFailed):
        if event.version != state.file_version:
            return state
        return replace(state, document=None, notice=event.notice)
    if isinstance(event, GenerationStarted):
        if not state.document:
            return replace(state, notice=NO_PDF_NOTICE)
        return replace(state, status=Status.GENERATING, notice=None, error_message=None)
    return state


def _on_generating(state: SessionState, event) -> SessionState:
    if isinstance(event, GenerationSucceeded):
        if not event.quiz:
            return _to_error(state, EMPTY_QUIZ_MESSAGE)
        return replace(
            state,
            status=Status.IN_PROGRESS,
            quiz=tuple(event.quiz),
            current_question_index=0,
            answers={},
            score=0,
            error_message=None,
        )
    if isinstance(event, GenerationFailed):
        return _to_error(state, event.message)
    return state


def _on_in_progress(state: SessionState, event) -> SessionState:
    if isinstance(event, AnswerSubmitted):
        if event.index != state.current_question_index or event.index in state.answers:
            return state
        question = state.quiz[event.index]
        if event.option not in question.options:
            return state
        is_correct = event.option == question.correct_answer
        record = AnswerRecord(
            selected_answer=event.option,
            is_correct=is_correct,
            correct_answer=question.correct_answer,
        )
        return replace(
            state,
            answers={**state.answers, event.index: record},
            score=state.score + (1 if is_correct else 0),
        )
    if isinstance(event, Advanced):
        if state.current_answer is None:
            return state
        if state.is_last_question:
            return replace(state, status=Status.COMPLETED)
        return replace(state, current_question_index=state.current_question_index + 1)
    return state


def _to_error(state: SessionState, message: str) -> SessionState:
    return replace(
        state,
        status=Status.ERROR,
        quiz=(),
        current_question_index=0,
        answers={},
        score=0,
        error_message=message,
    )


_HANDLERS = {
    Status.UPLOAD: _on_upload,
    Status.GENERATING: _on_generating,
    Status.IN_PROGRESS: _on_in_progress,
}


def reduce(state: SessionState, event) -> SessionState:
    """Return the state that follows ``event``; never mutates ``state``."""
    if isinstance(event, Reset):
        # Keep the version counter so an encode started before the reset is ignored.
        return SessionState(file_version=state.file_version + 1)

    handler = _HANDLERS.get(state.status)
    new_state = handler(state, event) if handler else state
    if new_state.status is not state.status:
        logger.debug("Quiz session %s -> %s", state.status.value, new_state.status.value)
    return new_state
