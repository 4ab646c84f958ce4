from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import IKnowledgeSource, ILlmClient
from src.domain.models import KnowledgeAnswer

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No results found. Try rephrasing your query."


@dataclass(slots=True)
class KnowledgeService:
    """Health Q&A: ask the LLM first, then fall back to reference lookups."""

    llm: ILlmClient | None = None
    sources: tuple[IKnowledgeSource, ...] = ()

    async def seek(self, query: str) -> KnowledgeAnswer | None:
        query = query.strip()
        if not query:
            return None

        if self.llm is not None:
            try:
                llm_answer = await self.llm.ask(query)
            except Exception as exc:
                logger.warning("LLM lookup failed: %s", exc)
                llm_answer = None
            if llm_answer is not None and llm_answer.answer:
                return KnowledgeAnswer(
                    title="AI Answer", text=llm_answer.answer, source="AI"
                )

        for source in self.sources:
            try:
                answer = await source.lookup(query)
            except Exception as exc:
                logger.warning("Knowledge source %s failed: %s", source.name, exc)
                continue
            if answer is not None:
                return answer

        return None
