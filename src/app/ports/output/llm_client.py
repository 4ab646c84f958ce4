from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import LlmAnswer


class IChatCompletionProvider(ABC):
    """Port for a single hosted chat-completion API."""

    name: str

    @abstractmethod
    async def complete(self, query: str) -> str:
        raise NotImplementedError


class ILlmClient(ABC):
    """Port for asking a free-text question to whichever LLM is configured."""

    @abstractmethod
    async def ask(self, query: str) -> LlmAnswer | None:
        """Return an answer, or None when no model is available."""
