"""LLM module for study material generation."""

from studygen.llm.client import LLMError, MalformedResponseError, call_llm
from studygen.llm.generator import generate_quiz_or_flashcards, generate_synthesis
from studygen.llm.prompts import MAX_SOURCE_CHARS, prompt_items, prompt_synthesis
from studygen.llm.schemas import (
    FlashcardItem,
    FlashcardSet,
    ItemKind,
    QuizItem,
    QuizSet,
    response_schema,
)

__all__ = [
    "FlashcardItem",
    "FlashcardSet",
    "ItemKind",
    "LLMError",
    "MAX_SOURCE_CHARS",
    "MalformedResponseError",
    "QuizItem",
    "QuizSet",
    "call_llm",
    "generate_quiz_or_flashcards",
    "generate_synthesis",
    "prompt_items",
    "prompt_synthesis",
    "response_schema",
]
