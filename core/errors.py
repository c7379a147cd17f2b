# core/errors.py


class QuizError(Exception):
    """Base class for every error raised by the quiz app."""


class InvalidFileType(QuizError):
    """The selected file is not a PDF. Recoverable, shown as a notice."""


class QuizGenerationError(QuizError):
    """Anything that stops a quiz from being generated."""


class InvalidInputFormat(QuizGenerationError):
    """The document is not a well-formed base64 data URI."""


class GenerationBackendError(QuizGenerationError):
    """The model call failed (network, auth, quota, server error)."""


class RateLimitError(GenerationBackendError):
    """The backend answered 429 / resource exhausted."""


class InvalidGenerationOutput(QuizGenerationError):
    """The model returned output that does not match the quiz schema."""


class EmptyQuizResult(QuizGenerationError):
    """The model returned a valid but empty quiz."""
