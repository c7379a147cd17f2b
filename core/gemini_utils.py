# core/gemini_utils.py
import logging

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from core.errors import GenerationBackendError, InvalidGenerationOutput, RateLimitError

logger = logging.getLogger(__name__)


def get_model(model_name: str):
    """Return a Gemini model handle; genai must already be configured."""
    return genai.GenerativeModel(model_name)


def json_generation_config(response_schema: dict):
    return genai.types.GenerationConfig(
        candidate_count=1,
        response_mime_type="application/json",
        response_schema=response_schema,
    )


def send_structured(model, contents, response_schema: dict) -> str:
    """Send one structured-output request and return the raw JSON text.

    Single attempt: no retry, no cache, no timeout beyond the backend's own.
    """
    try:
        response = model.generate_content(
            contents,
            generation_config=json_generation_config(response_schema),
        )
    except google_exceptions.ResourceExhausted as e:
        logger.warning("Gemini rate limit hit: %s", e)
        raise RateLimitError("Free-tier limit reached.") from e
    except Exception as e:
        logger.exception("Gemini request failed")
        raise GenerationBackendError(f"Gemini request failed: {e}") from e

    # .text raises ValueError when the candidate was blocked or has no parts
    try:
        text = response.text
    except ValueError as e:
        raise InvalidGenerationOutput(f"Model returned no content: {e}") from e

    if not text or not text.strip():
        raise InvalidGenerationOutput("Model returned an empty response.")
    return text.strip()
