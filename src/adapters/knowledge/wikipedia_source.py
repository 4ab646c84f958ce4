from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

import httpx

from src.adapters.config import env_float
from src.app.ports.output import IKnowledgeSource
from src.domain.exceptions import CollaboratorUnavailable
from src.domain.models import KnowledgeAnswer


@dataclass(slots=True)
class WikipediaSummarySource(IKnowledgeSource):
    """Full-text search on Wikipedia, then the REST summary of the top hit."""

    name: str = "Wikipedia"
    base_url: str = "https://en.wikipedia.org"
    timeout_s: float | None = None

    def __post_init__(self) -> None:
        if self.timeout_s is None:
            self.timeout_s = env_float("KNOWLEDGE_TIMEOUT_S", 10.0)

    async def lookup(self, query: str) -> KnowledgeAnswer | None:
        search_params = {
            "action": "query",
            "list": "search",
            "format": "json",
            "srsearch": query,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                resp = await client.get(f"{self.base_url}/w/api.php", params=search_params)
                resp.raise_for_status()
                hits = (resp.json().get("query") or {}).get("search") or []
                if not hits:
                    return None

                title = hits[0]["title"]
                resp = await client.get(
                    f"{self.base_url}/api/rest_v1/page/summary/{quote(title, safe='')}"
                )
                resp.raise_for_status()
                summary = resp.json()
        except (httpx.HTTPError, ValueError, KeyError, AttributeError) as exc:
            raise CollaboratorUnavailable(f"Wikipedia failed: {exc}") from exc

        page_url = (
            ((summary.get("content_urls") or {}).get("desktop") or {}).get("page")
            or f"{self.base_url}/wiki/{quote(title, safe='')}"
        )
        return KnowledgeAnswer(
            title=summary.get("title") or title,
            text=summary.get("extract") or "Summary not available.",
            source=self.name,
            url=page_url,
        )
