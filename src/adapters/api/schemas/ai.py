from __future__ import annotations

from pydantic import BaseModel


class AiQuerySchema(BaseModel):
    query: str = ""


class AiAnswerSchema(BaseModel):
    answer: str
    provider: str


class KnowledgeResponseSchema(BaseModel):
    found: bool
    title: str | None = None
    text: str
    source: str | None = None
    url: str | None = None
