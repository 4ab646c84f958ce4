from __future__ import annotations

from dataclasses import dataclass

import httpx

from src.adapters.config import env_float
from src.app.ports.output import IKnowledgeSource
from src.domain.exceptions import CollaboratorUnavailable
from src.domain.models import KnowledgeAnswer


@dataclass(slots=True)
class DuckDuckGoInstantAnswerSource(IKnowledgeSource):
    """DuckDuckGo Instant Answer API; only the abstract is used."""

    name: str = "DuckDuckGo IA"
    url: str = "https://api.duckduckgo.com/"
    timeout_s: float | None = None

    def __post_init__(self) -> None:
        if self.timeout_s is None:
            self.timeout_s = env_float("KNOWLEDGE_TIMEOUT_S", 10.0)

    async def lookup(self, query: str) -> KnowledgeAnswer | None:
        params = {"q": query, "format": "json", "no_html": 1, "skip_disambig": 1}
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                resp = await client.get(self.url, params=params)
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise CollaboratorUnavailable(f"DuckDuckGo failed: {exc}") from exc

        if not isinstance(data, dict):
            return None
        text = (data.get("AbstractText") or "").strip()
        if not text:
            return None

        url = data.get("AbstractURL") or None
        return KnowledgeAnswer(
            title=data.get("Heading") or query,
            text=text,
            source=data.get("AbstractSource") or self.name,
            url=url,
        )
