"""Shared fixtures."""

import os
from unittest.mock import MagicMock

import pytest

from studygen.config import LlmConfig


@pytest.fixture
def config(monkeypatch) -> LlmConfig:
    """Fixture to return a LlmConfig built from defaults only."""
    for name in [key for key in os.environ if key.upper().startswith("LLM_")]:
        monkeypatch.delenv(name)
    return LlmConfig(_env_file=None)


@pytest.fixture
def make_response():
    """Fixture returning a factory for fake litellm completion responses."""

    def _make(content: str | None) -> MagicMock:
        response = MagicMock()
        response.choices[0].message.content = content
        return response

    return _make
