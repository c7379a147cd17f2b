# core/quiz_schema.py
import json
import logging
from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from core.errors import InvalidGenerationOutput

logger = logging.getLogger(__name__)

OPTIONS_PER_QUESTION = 4

# Sent to Gemini as ``response_schema``; mirrors QuizOutput below.
QUIZ_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "quiz": {
            "type": "ARRAY",
            "description": "The generated quiz questions and answers.",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "question": {"type": "STRING", "description": "The quiz question."},
                    "options": {
                        "type": "ARRAY",
                        "description": "The four answer options for the question.",
                        "items": {"type": "STRING"},
                    },
                    "correctAnswer": {
                        "type": "STRING",
                        "description": "The correct answer to the question.",
                    },
                },
                "required": ["question", "options", "correctAnswer"],
            },
        },
    },
    "required": ["quiz"],
}


class QuizQuestion(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    question: str = Field(min_length=1)
    options: Tuple[str, ...] = Field(min_length=OPTIONS_PER_QUESTION, max_length=OPTIONS_PER_QUESTION)
    correct_answer: str = Field(alias="correctAnswer")

    @model_validator(mode="after")
    def _answer_is_an_option(self) -> "QuizQuestion":
        if self.correct_answer not in self.options:
            raise ValueError(
                f"correctAnswer {self.correct_answer!r} is not one of the options"
            )
        return self


class QuizOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    quiz: List[QuizQuestion]


def validate_quiz_output(payload: Any) -> tuple[QuizQuestion, ...]:
    """Validate a decoded model response and return its questions in order.

    An empty ``quiz`` list is valid here; callers decide what an empty quiz
    means for them.

    Raises:
        InvalidGenerationOutput: if any question breaks the schema, including a
            correctAnswer that is not among the options.
    """
    try:
        output = QuizOutput.model_validate(payload)
    except ValidationError as e:
        logger.warning("Quiz output failed validation: %s", e.errors(include_url=False))
        raise InvalidGenerationOutput(f"Model output does not match the quiz schema: {e}") from e
    return tuple(output.quiz)


def parse_quiz_response(text: str) -> tuple[QuizQuestion, ...]:
    """Decode the model's JSON text and validate it."""
    try:
        payload = json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning("Model returned non-JSON output (%d chars)", len(text or ""))
        raise InvalidGenerationOutput("Model output is not valid JSON.") from e
    return validate_quiz_output(payload)
