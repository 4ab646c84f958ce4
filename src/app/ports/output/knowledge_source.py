from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import KnowledgeAnswer


class IKnowledgeSource(ABC):
    """Port for non-LLM reference lookups (instant answers, encyclopedias)."""

    name: str

    @abstractmethod
    async def lookup(self, query: str) -> KnowledgeAnswer | None:
        raise NotImplementedError
