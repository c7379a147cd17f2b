# core/quiz_service.py
import logging

from config.settings import MODEL_NAME
from core.data_uri import parse_data_uri
from core.gemini_utils import get_model, send_structured
from core.quiz_schema import QUIZ_RESPONSE_SCHEMA, QuizQuestion, parse_quiz_response

logger = logging.getLogger(__name__)

QUIZ_PROMPT = """You are a quiz generator. You will generate a quiz based on the content of the attached PDF document.

The quiz should consist of multiple-choice questions, each with four answer options. For each question, provide the question text, the four answer options, and the correct answer. The correct answer must be copied exactly from one of the four options.

Ensure the quiz is comprehensive and covers the key topics in the PDF document.

Output the quiz in the following JSON format:

{
  "quiz": [
    {
      "question": "Question 1 text",
      "options": ["Option 1", "Option 2", "Option 3", "Option 4"],
      "correctAnswer": "The correct answer"
    },
    {
      "question": "Question 2 text",
      "options": ["Option 1", "Option 2", "Option 3", "Option 4"],
      "correctAnswer": "The correct answer"
    }
  ]
}
"""


def build_quiz_request(mime_type: str, data: bytes) -> list:
    """Instruction first, then the document as inline media."""
    return [QUIZ_PROMPT, {"mime_type": mime_type, "data": data}]


def generate_quiz(document: str, model=None) -> tuple[QuizQuestion, ...]:
    """Generate a multiple-choice quiz from a PDF data URI.

    Args:
        document: ``data:<mimetype>;base64,<payload>`` as produced by
            core.data_uri.encode_data_uri.
        model: object with a ``generate_content`` method; defaults to a
            Gemini model for MODEL_NAME.

    Returns:
        The questions in the order the model produced them. May be empty.

    Raises:
        InvalidInputFormat: malformed data URI.
        GenerationBackendError: network or model failure.
        InvalidGenerationOutput: output does not match the quiz schema.
    """
    mime_type, data = parse_data_uri(document)
    if model is None:
        model = get_model(MODEL_NAME)

    logger.info("Requesting quiz for %s document (%d bytes)", mime_type, len(data))
    raw = send_structured(model, build_quiz_request(mime_type, data), QUIZ_RESPONSE_SCHEMA)
    quiz = parse_quiz_response(raw)
    logger.info("Model returned %d quiz questions", len(quiz))
    return quiz
