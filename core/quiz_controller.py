# core/quiz_controller.py
import logging

from config.settings import PDF_MIME_TYPE
from core.data_uri import encode_data_uri
from core.errors import EmptyQuizResult, InvalidFileType, QuizGenerationError, RateLimitError
from core.quiz_service import generate_quiz
from core.quiz_state import (
    EMPTY_QUIZ_MESSAGE,
    Advanced,
    AnswerSubmitted,
    DocumentEncoded,
    EncodingFailed,
    FileCleared,
    FileRejected,
    FileSelected,
    GenerationFailed,
    GenerationStarted,
    GenerationSucceeded,
    Reset,
    SessionState,
    Status,
    reduce,
)

logger = logging.getLogger(__name__)

INVALID_FILE_TYPE_NOTICE = "Invalid File Type. Please upload a PDF file."
GENERATION_ERROR_MESSAGE = "An error occurred while generating the quiz. Please try again."
RATE_LIMIT_MESSAGE = "Free-tier limit reached. Please wait a moment and try again."


def read_file_bytes(file) -> bytes:
    """Read an uploaded file without consuming it for later readers."""
    if hasattr(file, "getvalue"):
        return file.getvalue()
    file.seek(0)
    return file.read()


def check_file_type(file):
    content_type = getattr(file, "type", None)
    if content_type != PDF_MIME_TYPE:
        raise InvalidFileType(f"expected {PDF_MIME_TYPE}, got {content_type!r}")


class QuizSessionController:
    """Owns one quiz session and applies user actions to it.

    ``generate`` is the quiz generation call, ``generate_quiz`` by default;
    tests pass a stub.
    """

    def __init__(self, generate=generate_quiz):
        self._generate = generate
        self._state = SessionState()
        self._in_flight = False

    @property
    def state(self) -> SessionState:
        return self._state

    def dispatch(self, event) -> SessionState:
        self._state = reduce(self._state, event)
        return self._state

    # --- upload ---

    def select_file(self, file) -> SessionState:
        """Accept a PDF and encode it; reject anything else with a notice."""
        try:
            check_file_type(file)
        except InvalidFileType as e:
            logger.info("Rejected upload %r: %s", getattr(file, "name", None), e)
            return self.dispatch(FileRejected(INVALID_FILE_TYPE_NOTICE))

        state = self.dispatch(FileSelected(file.name))
        if state.status is not Status.UPLOAD:
            return state
        return self.encode_file(file, state.file_version)

    def encode_file(self, file, version: int) -> SessionState:
        """Encode ``file`` for selection ``version``; stale versions are dropped."""
        try:
            document = encode_data_uri(read_file_bytes(file), PDF_MIME_TYPE)
        except OSError as e:
            logger.warning("Could not read %r: %s", getattr(file, "name", None), e)
            return self.dispatch(EncodingFailed(version, f"Could not read the file: {e}"))
        return self.dispatch(DocumentEncoded(version, document))

    def clear_file(self) -> SessionState:
        return self.dispatch(FileCleared())

    # --- generation ---

    def start_generation(self) -> SessionState:
        state = self.begin_generation()
        if state.status is Status.GENERATING:
            return self.run_generation()
        return state

    def begin_generation(self) -> SessionState:
        return self.dispatch(GenerationStarted())

    def run_generation(self) -> SessionState:
        """Call the generator once for the session's document."""
        if self._state.status is not Status.GENERATING or self._in_flight:
            return self._state

        self._in_flight = True
        try:
            quiz = self._generate(self._state.document)
            if not quiz:
                raise EmptyQuizResult(f"no questions generated for {self._state.file_name}")
        except EmptyQuizResult as e:
            logger.warning("Quiz generation failed: %s", e)
            return self.dispatch(GenerationFailed(EMPTY_QUIZ_MESSAGE))
        except RateLimitError:
            return self.dispatch(GenerationFailed(RATE_LIMIT_MESSAGE))
        except QuizGenerationError as e:
            logger.error("Quiz generation failed: %s", e)
            return self.dispatch(GenerationFailed(GENERATION_ERROR_MESSAGE))
        except Exception:
            # never leave the session stuck in GENERATING
            logger.exception("Unexpected error while generating quiz")
            return self.dispatch(GenerationFailed(GENERATION_ERROR_MESSAGE))
        finally:
            self._in_flight = False

        return self.dispatch(GenerationSucceeded(tuple(quiz)))

    # --- quiz ---

    def submit_answer(self, index: int, option: str) -> SessionState:
        return self.dispatch(AnswerSubmitted(index, option))

    def advance(self) -> SessionState:
        return self.dispatch(Advanced())

    def reset(self) -> SessionState:
        return self.dispatch(Reset())
