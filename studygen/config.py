"""LLM configuration for the study generators.

All settings are loaded from environment (with optional .env). Build one
LlmConfig at startup and pass it to every generator call.
"""

from urllib.parse import urlparse

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LlmConfig(BaseSettings):
    """LLM adapter configuration

    Settings are read from environment with prefix LLM_. The API key can also
    come from the provider env var (GEMINI_API_KEY) when not set here; a
    missing or invalid key only surfaces as an error from the provider call.
    """

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    model: str = Field(
        default="gemini/gemini-2.5-flash",
        description="LiteLLM model string (e.g. gemini/gemini-2.5-flash).",
    )
    api_key: SecretStr | None = Field(
        default=None,
        description="Optional API key; else from provider env vars.",
    )
    api_base: str | None = Field(
        default=None, description="Optional API base URL (e.g. for proxy)."
    )
    language: str = Field(
        default="French", description="Language the generated material is written in."
    )

    @field_validator("api_base")
    @classmethod
    def _validate_api_base(cls, v: str | None) -> str | None:
        if v is None:
            return v
        parsed = urlparse(v)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError("api_base must be a valid URL with scheme and netloc")
        return v
