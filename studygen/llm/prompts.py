"""Prompt templates for study material generation."""

from studygen.llm.schemas import ItemKind

# Source text beyond this many characters is never sent to the model.
MAX_SOURCE_CHARS = 30_000


def truncate_source(text: str) -> str:
    """Return the first MAX_SOURCE_CHARS characters of the source text."""
    return text[:MAX_SOURCE_CHARS]


def prompt_synthesis(text: str, style: str, word_count: int, language: str) -> str:
    """Generate the prompt for an HTML study summary.

    Args:
        text: The course content; truncated to MAX_SOURCE_CHARS.
        style: Summary style (Standard, Bullet Points, ...), used as given.
        word_count: Approximate length in words, used as given.
        language: Language the summary is written in.

    Returns:
        The user prompt.
    """
    return f"""You are an expert academic tutor.
Based on the following course content, create a high-quality study summary.

**Configuration:**
- Style: {style}
- Approximate Length: {word_count} words
- Output Format: Clean semantic HTML (use <h2>, <p>, <ul>, <li>, <strong>). Do not use <h1>, <html>, <body> or markdown code blocks.
- Language: {language}.

**Course Content:**
{truncate_source(text)}

Generate the summary now."""


def prompt_items(
    text: str,
    count: int,
    difficulty: str,
    item_type: str,
    kind: ItemKind,
    language: str,
) -> tuple[str, str]:
    """Generate a prompt for quiz questions or flashcards.

    Args:
        text: The course content; truncated to MAX_SOURCE_CHARS.
        count: Number of items to generate.
        difficulty: Difficulty level, used as given.
        item_type: The caller's type label, written into quiz instructions.
        kind: The item kind selected from item_type.
        language: Language the items are written in.

    Returns:
        A tuple of (system_prompt, user_prompt).
    """
    if kind is ItemKind.FLASHCARDS:
        system = (
            "You are a teacher creating flashcards for students. "
            f"Difficulty: {difficulty}. Language: {language}."
        )
    else:
        system = (
            "You are a teacher creating a quiz. "
            f"Type: {item_type}. Difficulty: {difficulty}. Language: {language}."
        )
    user = f"""Generate {count} items based on the text below.

**Text:**
{truncate_source(text)}"""
    return (system, user)
