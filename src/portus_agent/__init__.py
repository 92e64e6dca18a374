"""PORTUS trade-intelligence agent package."""

from .config import AgentConfig, GeneratorConfig, RetrievalConfig

__all__ = ["AgentConfig", "GeneratorConfig", "RetrievalConfig"]
