from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.adapters.api.dependencies import get_knowledge_service, get_llm_proxy_service
from src.adapters.api.schemas.ai import (
    AiAnswerSchema,
    AiQuerySchema,
    KnowledgeResponseSchema,
)
from src.app.services.knowledge_service import NO_RESULTS_MESSAGE, KnowledgeService
from src.app.services.llm_proxy_service import LlmProxyService

router = APIRouter(tags=["ai"])


@router.post("/ai", response_model=AiAnswerSchema)
async def ask_llm(
    req: AiQuerySchema,
    service: LlmProxyService = Depends(get_llm_proxy_service),
):
    query = req.query.strip()
    if not query:
        return JSONResponse(status_code=400, content={"error": "missing_query"})

    answer = await service.ask(query)
    if answer is None:
        return JSONResponse(
            status_code=200,
            content={"error": "no_key", "message": "LLM key not configured"},
        )
    return AiAnswerSchema(answer=answer.answer, provider=answer.provider)


@router.post("/ai/seek", response_model=KnowledgeResponseSchema)
async def seek_knowledge(
    req: AiQuerySchema,
    service: KnowledgeService = Depends(get_knowledge_service),
) -> KnowledgeResponseSchema:
    if not req.query.strip():
        return KnowledgeResponseSchema(found=False, text="Please enter a question.")

    answer = await service.seek(req.query)
    if answer is None:
        return KnowledgeResponseSchema(found=False, text=NO_RESULTS_MESSAGE)
    return KnowledgeResponseSchema(
        found=True,
        title=answer.title,
        text=answer.text,
        source=answer.source,
        url=answer.url,
    )
