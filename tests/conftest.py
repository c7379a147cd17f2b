"""
Shared pytest fixtures for the quiz app test suite.
No network access: the Gemini model and the generator are always stubbed.
"""

import io
import json
from types import SimpleNamespace

import pytest

from core.quiz_schema import QuizQuestion


class FakeUpload(io.BytesIO):
    """Stand-in for Streamlit's UploadedFile: bytes plus name/type."""

    def __init__(self, data=b"%PDF-1.4 fake", name="notes.pdf", type="application/pdf"):
        super().__init__(data)
        self.name = name
        self.type = type
        self.size = len(data)


class FakeModel:
    """Records generate_content calls and replays a canned response."""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, contents, generation_config=None):
        self.calls.append((contents, generation_config))
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def make_question(n, correct=0):
    options = [f"Q{n} option {i}" for i in range(4)]
    return QuizQuestion(question=f"Question {n}?", options=options, correctAnswer=options[correct])


@pytest.fixture
def three_questions():
    return tuple(make_question(n, correct=n % 4) for n in range(1, 4))


@pytest.fixture
def quiz_payload():
    return {
        "quiz": [
            {
                "question": "What is the capital of France?",
                "options": ["Berlin", "Paris", "Rome", "Madrid"],
                "correctAnswer": "Paris",
            },
            {
                "question": "2 + 2 = ?",
                "options": ["3", "4", "5", "22"],
                "correctAnswer": "4",
            },
        ]
    }


@pytest.fixture
def quiz_json(quiz_payload):
    return json.dumps(quiz_payload)


@pytest.fixture
def pdf_upload():
    return FakeUpload()
