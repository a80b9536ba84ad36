"""
API route aggregator: register endpoints; no logic — only delegate to handlers.
"""

import logging

from fastapi import APIRouter, Depends

from app.api.handlers import handle_ask, handle_generate, handle_search
from app.schemas.query import AnswerResponse, AskRequest, GenerateRequest, SearchRequest
from app.services.query_service import QueryService, get_query_service

logger = logging.getLogger(__name__)
router = APIRouter()


# --- System ---

@router.get("/", tags=["system"])
def root():
    return {"status": "Ask AI backend running"}


@router.get("/health", tags=["system"])
def health(service: QueryService = Depends(get_query_service)):
    return {"ok": True, "ai_configured": service.has_credential}


# --- Query ---

@router.post(
    "/ask",
    response_model=AnswerResponse,
    tags=["query"],
    summary="Ask a question (web search, AI fallback)",
    description="Try DuckDuckGo first; on any search failure fall back to the AI response. 503 if the fallback has no API key.",
)
def post_ask(body: AskRequest, service: QueryService = Depends(get_query_service)) -> AnswerResponse:
    logger.info("[api:post_ask] IN  question=%r", body.question)
    return handle_ask(service, body.question)


@router.post(
    "/search",
    response_model=AnswerResponse,
    tags=["query"],
    summary="Web search only",
    description="DuckDuckGo Instant Answer lookup. 400 on invalid query, 502 on network or parse failure.",
)
def post_search(body: SearchRequest, service: QueryService = Depends(get_query_service)) -> AnswerResponse:
    logger.info("[api:post_search] IN  query=%r", body.query)
    return handle_search(service, body.query)


@router.post(
    "/generate",
    response_model=AnswerResponse,
    tags=["query"],
    summary="AI response only",
    description="Return the AI response for a prompt. 503 if no API key is configured.",
)
def post_generate(body: GenerateRequest, service: QueryService = Depends(get_query_service)) -> AnswerResponse:
    logger.info("[api:post_generate] IN  prompt_len=%d", len(body.prompt))
    return handle_generate(service, body.prompt)
