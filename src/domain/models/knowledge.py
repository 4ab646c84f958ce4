from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KnowledgeAnswer:
    title: str
    text: str
    source: str
    url: str | None = None


@dataclass(frozen=True, slots=True)
class LlmAnswer:
    answer: str
    provider: str
