"""LiteLLM client wrapper for LLM interactions."""

import logging
from typing import Any

import litellm
from studygen.config import LlmConfig

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Base exception for errors raised by this package.

    Attributes:
        stage: The stage where the error occurred.
        message: The error message.
    """

    def __init__(self, stage: str, message: str) -> None:
        self.stage = stage
        self.message = message
        super().__init__(f"[{stage}] {message}")


class MalformedResponseError(LLMError, ValueError):
    """Raised when the model's response text is not the JSON that was requested.

    Attributes:
        raw_text: The response text as returned by the provider.
    """

    def __init__(self, stage: str, message: str, raw_text: str) -> None:
        super().__init__(stage, message)
        self.raw_text = raw_text


def _preview(text: str, limit: int) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def call_llm(
    messages: list[dict[str, str]],
    config: LlmConfig,
    stage: str = "llm",
    **params: Any,
) -> str:
    """Send one completion request and return the response text.

    Provider and transport errors are logged once and re-raised unchanged.

    Args:
        messages: Chat messages, each a {"role": ..., "content": ...} dict.
        config: The LLM configuration.
        stage: Stage name for logging (e.g. "synthesis", "quiz").
        **params: Extra completion parameters (sampling, response_format).

    Returns:
        The text content from the LLM response, or "" when there is none.
    """
    logger.info(
        "llm_call_start",
        extra={
            "stage": stage,
            "model": config.model,
            "message_lengths": [len(m["content"]) for m in messages],
            "prompt_preview": _preview(messages[-1]["content"], 1000),
        },
    )

    try:
        response = litellm.completion(
            model=config.model,
            messages=messages,
            api_base=config.api_base,
            api_key=config.api_key.get_secret_value() if config.api_key else None,
            **params,
        )
    except Exception as e:
        logger.error(
            "llm_call_failed",
            extra={
                "stage": stage,
                "model": config.model,
                "error_type": type(e).__name__,
                "error": str(e),
            },
        )
        raise

    content = response.choices[0].message.content  # type: ignore[union-attr]

    logger.info(
        "llm_call_complete",
        extra={
            "stage": stage,
            "model": config.model,
            "response_length": len(content) if content else 0,
            "response_preview": _preview(content, 500) if content else content,
        },
    )

    return content if content else ""
