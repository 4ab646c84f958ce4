from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import IChatCompletionProvider, ILlmClient
from src.domain.models import LlmAnswer

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LlmProxyService(ILlmClient):
    """Forwards a question to the first configured chat-completion provider.

    Providers are tried in order; a failing provider is skipped. ``None``
    means no provider is configured or every one of them failed.
    """

    providers: tuple[IChatCompletionProvider, ...] = ()

    @property
    def configured(self) -> bool:
        return bool(self.providers)

    async def ask(self, query: str) -> LlmAnswer | None:
        for provider in self.providers:
            try:
                answer = await provider.complete(query)
            except Exception as exc:
                logger.warning("LLM provider %s failed: %s", provider.name, exc)
                continue
            return LlmAnswer(answer=answer, provider=provider.name)
        return None
