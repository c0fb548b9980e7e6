"""Study material generators: HTML synthesis and quiz/flashcard sets."""

import json
import logging
from typing import Any

from studygen.config import LlmConfig
from studygen.llm.client import MalformedResponseError, call_llm
from studygen.llm.prompts import prompt_items, prompt_synthesis
from studygen.llm.schemas import ItemKind, response_schema

logger = logging.getLogger(__name__)

# Fixed sampling for synthesis; never read from the environment.
SYNTHESIS_TEMPERATURE = 0.7
SYNTHESIS_TOP_K = 40
SYNTHESIS_TOP_P = 0.95


def generate_synthesis(
    text: str, style: str, word_count: int, config: LlmConfig
) -> str:
    """Generate an HTML study summary of the given course content.

    Args:
        text: The course content text.
        style: The desired style (Standard, Bullet Points, etc.).
        word_count: Approximate word count.
        config: The LLM configuration.

    Returns:
        The model's response text, as returned (expected to be an HTML fragment).
    """
    prompt = prompt_synthesis(text, style, word_count, config.language)
    return call_llm(
        [{"role": "user", "content": prompt}],
        config,
        stage="synthesis",
        temperature=SYNTHESIS_TEMPERATURE,
        top_k=SYNTHESIS_TOP_K,
        top_p=SYNTHESIS_TOP_P,
    )


def generate_quiz_or_flashcards(
    text: str, count: int, difficulty: str, item_type: str, config: LlmConfig
) -> dict[str, Any]:
    """Generate a quiz or a flashcard set from the given course content.

    Args:
        text: The course content.
        count: Number of questions or cards.
        difficulty: Difficulty level.
        item_type: 'QCM', 'Vrai/Faux', 'Mixte' or 'Flashcards'.
        config: The LLM configuration.

    Returns:
        The parsed response: {"flashcards": [...]} or {"quiz": [...]}.

    Raises:
        MalformedResponseError: If the response text is not valid JSON.
    """
    kind = ItemKind.from_label(item_type)
    system, user = prompt_items(
        text, count, difficulty, item_type, kind, config.language
    )
    stage = "flashcards" if kind is ItemKind.FLASHCARDS else "quiz"

    raw = call_llm(
        [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ],
        config,
        stage=stage,
        response_format={
            "type": "json_object",
            "response_schema": response_schema(kind),
        },
    )

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error(
            "llm_response_malformed",
            extra={"stage": stage, "model": config.model, "error": str(e)},
        )
        raise MalformedResponseError(
            stage=stage,
            message=f"Response is not valid JSON: {e}",
            raw_text=raw,
        ) from e
