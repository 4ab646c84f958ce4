from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

from src.adapters.config import env_float
from src.app.ports.output import IChatCompletionProvider
from src.domain.exceptions import CollaboratorUnavailable

SYSTEM_PROMPT = (
    "You are a health information assistant. Provide concise, structured, and "
    "clear guidance. Include a brief disclaimer: not a substitute for "
    "professional medical advice; in emergencies, call local emergency number."
)

OPENAI_URL = "https://api.openai.com/v1/chat/completions"
OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"


@dataclass(slots=True)
class OpenAiCompatibleProvider(IChatCompletionProvider):
    """Any endpoint speaking the OpenAI chat-completions wire format.

    Env vars:
      - LLM_TIMEOUT_S: request timeout (default 30)
    """

    name: str
    url: str
    model: str
    api_key: str
    temperature: float = 0.5
    timeout_s: float | None = None

    def __post_init__(self) -> None:
        if self.timeout_s is None:
            self.timeout_s = env_float("LLM_TIMEOUT_S", 30.0)

    async def complete(self, query: str) -> str:
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": query},
            ],
            "temperature": self.temperature,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                resp = await client.post(self.url, json=payload, headers=headers)
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise CollaboratorUnavailable(f"{self.name} request failed: {exc}") from exc

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None
        return content or "No response"


def providers_from_env() -> tuple[IChatCompletionProvider, ...]:
    """Configured providers in priority order.

    Env vars:
      - OPENAI_API_KEY: enables OpenAI (gpt-4o-mini)
      - OPENROUTER_API_KEY: enables OpenRouter (openai/gpt-4o-mini)
    """

    providers: list[IChatCompletionProvider] = []

    openai_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    if openai_key:
        providers.append(
            OpenAiCompatibleProvider(
                name="openai", url=OPENAI_URL, model="gpt-4o-mini", api_key=openai_key
            )
        )

    openrouter_key = (os.getenv("OPENROUTER_API_KEY") or "").strip()
    if openrouter_key:
        providers.append(
            OpenAiCompatibleProvider(
                name="openrouter",
                url=OPENROUTER_URL,
                model="openai/gpt-4o-mini",
                api_key=openrouter_key,
            )
        )

    return tuple(providers)
