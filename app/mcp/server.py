"""
Minimal MCP-style tool server: exposes question answering and web search
as a standardized tool interface for external agents.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from app.core.errors import NoCredentialError, QueryError
from app.schemas.query import AskRequest, SearchRequest
from app.services.query_service import QueryService, get_query_service

logger = logging.getLogger(__name__)

# MCP tool schema for discovery / documentation
tools = [
    {
        "name": "ask_question",
        "description": "Answer a question: DuckDuckGo instant answer first, AI response if search fails",
        "input_schema": {"question": "string"},
    },
    {
        "name": "search_web",
        "description": "DuckDuckGo instant answer lookup (abstract, else direct answer)",
        "input_schema": {"query": "string"},
    },
]

mcp_router = APIRouter(tags=["mcp"])


@mcp_router.get("/tools", summary="MCP tool listing")
def mcp_list_tools() -> dict[str, list[dict[str, Any]]]:
    return {"tools": tools}


# --- ask_question ---

@mcp_router.post(
    "/tools/ask_question",
    summary="MCP tool: ask_question",
    description="Search with AI fallback. Returns answer, or answer=null with error when the fallback has no API key.",
)
def mcp_ask_question(
    body: AskRequest, service: QueryService = Depends(get_query_service)
) -> dict[str, Any]:
    logger.info("MCP tool called: ask_question")
    try:
        return {"answer": service.ask_question(body.question)}
    except NoCredentialError as e:
        return {"answer": None, "error": e.message}


# --- search_web ---

@mcp_router.post(
    "/tools/search_web",
    summary="MCP tool: search_web",
    description="Web search only. Returns answer, or answer=null with error on any search failure.",
)
def mcp_search_web(
    body: SearchRequest, service: QueryService = Depends(get_query_service)
) -> dict[str, Any]:
    logger.info("MCP tool called: search_web")
    try:
        return {"answer": service.search_web(body.query)}
    except QueryError as e:
        return {"answer": None, "error": e.message}
