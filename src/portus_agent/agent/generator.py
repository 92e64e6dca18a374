"""Boundary to the remote chat-completion backend."""

from __future__ import annotations

from typing import Any, Protocol

from langchain_core.messages import HumanMessage, SystemMessage

from portus_agent.config import GeneratorConfig
from portus_agent.types import PromptPackage


class GeneratorError(RuntimeError):
    """Raised when the backend cannot produce a usable reply."""


class Generator(Protocol):
    """Anything that turns a prompt package into raw reply text."""

    def generate(self, prompt: PromptPackage, *, temperature: float) -> str:
        """Return the model's raw text or raise ``GeneratorError``."""


class ChatModelGenerator:
    """Adapts a LangChain chat model to the ``Generator`` protocol."""

    def __init__(self, llm: Any) -> None:
        self.llm = llm

    def generate(self, prompt: PromptPackage, *, temperature: float) -> str:
        messages = [
            SystemMessage(content=prompt.system_instruction),
            HumanMessage(content=prompt.user_content),
        ]
        try:
            response = self.llm.bind(temperature=temperature).invoke(messages)
        except Exception as exc:
            raise GeneratorError(f"Chat completion failed: {exc}") from exc

        text = _message_text(response).strip()
        if not text:
            raise GeneratorError("No response content received from the chat model")
        return text


def create_llm(config: GeneratorConfig) -> Any:
    """Build a JSON-mode chat model, or ``None`` when no backend is configured.

    Retries are disabled and the HTTP timeout matches the pipeline timeout,
    so a call abandoned by the pipeline frees its worker thread soon after.
    """

    if not config.configured:
        return None

    from langchain_openai import AzureChatOpenAI, ChatOpenAI

    if config.provider == "azure":
        llm = AzureChatOpenAI(
            azure_endpoint=config.azure_endpoint,
            azure_deployment=config.azure_deployment,
            api_version=config.azure_api_version,
            api_key=config.api_key,
            timeout=config.request_timeout_seconds,
            max_retries=0,
        )
    else:
        llm = ChatOpenAI(
            model=config.openai_model,
            api_key=config.api_key,
            timeout=config.request_timeout_seconds,
            max_retries=0,
        )
    return llm.bind(response_format={"type": "json_object"})


def create_generator(config: GeneratorConfig | None = None) -> ChatModelGenerator | None:
    llm = create_llm(config or GeneratorConfig.from_env())
    if llm is None:
        return None
    return ChatModelGenerator(llm)


def _message_text(response: Any) -> str:
    content = getattr(response, "content", response)
    if isinstance(content, list):
        parts: list[str] = []
        for item in content:
            if isinstance(item, dict) and "text" in item:
                parts.append(str(item["text"]))
            else:
                parts.append(str(item))
        return "".join(parts)
    return str(content)
