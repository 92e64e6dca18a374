"""Configuration models for the PORTUS agent."""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field


class RetrievalConfig(BaseModel):
    """Configures lexical retrieval over the knowledge base."""

    top_k: int = Field(default=3, ge=1)


class AgentConfig(BaseModel):
    """Configures the query pipeline and its latency budget."""

    timeout_seconds: float = Field(default=30.0, gt=0.0)
    temperature: float = Field(default=0.1, ge=0.0, le=2.0)
    top_k: int = Field(default=3, ge=1)
    target_latency_seconds: float = Field(default=8.0, gt=0.0)


class GeneratorConfig(BaseModel):
    """Connection settings for the remote chat-completion backend.

    Azure OpenAI takes precedence when endpoint, deployment and a key are all
    present. A plain OpenAI key is used otherwise. With neither, the generator
    is considered not configured and the pipeline answers from the
    deterministic mock.
    """

    provider: Literal["azure", "openai"] | None = None
    api_key: str | None = None
    azure_endpoint: str | None = None
    azure_deployment: str | None = None
    azure_api_version: str = "2024-08-01-preview"
    openai_model: str = "gpt-4o-mini"
    request_timeout_seconds: float = Field(default=30.0, gt=0.0)

    @property
    def configured(self) -> bool:
        return self.provider is not None and bool(self.api_key)

    @classmethod
    def from_env(cls, *, request_timeout_seconds: float = 30.0) -> "GeneratorConfig":
        endpoint = os.getenv("AZURE_OPENAI_ENDPOINT")
        deployment = os.getenv("AZURE_OPENAI_DEPLOYMENT")
        api_version = os.getenv("AZURE_OPENAI_API_VERSION") or "2024-08-01-preview"
        # Primary key wins; the secondary key is a rotation fallback.
        azure_key = os.getenv("AZURE_OPENAI_PRIMARY_KEY") or os.getenv(
            "AZURE_OPENAI_SECONDARY_KEY"
        )
        if endpoint and deployment and azure_key:
            return cls(
                provider="azure",
                api_key=azure_key,
                azure_endpoint=endpoint,
                azure_deployment=deployment,
                azure_api_version=api_version,
                request_timeout_seconds=request_timeout_seconds,
            )

        openai_key = os.getenv("OPENAI_API_KEY")
        if openai_key:
            return cls(
                provider="openai",
                api_key=openai_key,
                openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
                request_timeout_seconds=request_timeout_seconds,
            )
        return cls(request_timeout_seconds=request_timeout_seconds)
