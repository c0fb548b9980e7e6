"""Structured-output shapes for quiz and flashcard generation."""

import copy
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ItemKind(Enum):
    """Kind of study items requested from the model."""

    FLASHCARDS = "Flashcards"
    QUIZ = "Quiz"

    @classmethod
    def from_label(cls, label: str) -> "ItemKind":
        """Map a free-form type label to an item kind.

        Only the exact label "Flashcards" selects flashcards; every other
        label ("QCM", "Vrai/Faux", "Mixte", ...) is a quiz.
        """
        if label == cls.FLASHCARDS.value:
            return cls.FLASHCARDS
        return cls.QUIZ


_STRING = {"type": "string"}

FLASHCARDS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "flashcards": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "term": _STRING,
                    "definition": _STRING,
                },
                "required": ["term", "definition"],
            },
        },
    },
}

QUIZ_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "quiz": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "question": _STRING,
                    "options": {
                        "type": "array",
                        "items": _STRING,
                        "description": (
                            "List of 4 possible answers if multiple choice, "
                            "or just empty for open questions."
                        ),
                    },
                    "answer": {
                        "type": "string",
                        "description": "The correct answer text",
                    },
                    "explanation": {
                        "type": "string",
                        "description": "Brief explanation of why this is correct",
                    },
                },
                "required": ["question", "answer", "options"],
            },
        },
    },
}

_SCHEMAS: dict[ItemKind, dict[str, Any]] = {
    ItemKind.FLASHCARDS: FLASHCARDS_SCHEMA,
    ItemKind.QUIZ: QUIZ_SCHEMA,
}


def response_schema(kind: ItemKind) -> dict[str, Any]:
    """Return a fresh copy of the response schema for ``kind``."""
    return copy.deepcopy(_SCHEMAS[kind])


class QuizItem(BaseModel):
    """One quiz question with its answer."""

    question: str
    options: list[str] = Field(default_factory=list)
    answer: str
    explanation: str = ""


class FlashcardItem(BaseModel):
    term: str
    definition: str


class QuizSet(BaseModel):
    """Parsed quiz payload: {"quiz": [...]}."""

    quiz: list[QuizItem] = Field(default_factory=list)


class FlashcardSet(BaseModel):
    """Parsed flashcard payload: {"flashcards": [...]}."""

    flashcards: list[FlashcardItem] = Field(default_factory=list)
