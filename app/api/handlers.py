"""
API handlers: call the query service, map QueryError kinds to HTTP.

Responsibility: Bridge HTTP types and services. Marshalling and exception-to-HTTP mapping.
Lives in the API layer so services stay free of FastAPI/HTTP types.
"""

import logging

from fastapi import HTTPException

from app.core.errors import (
    InvalidQueryError,
    NoCredentialError,
    ParseFailureError,
    QueryError,
    TransportFailureError,
)
from app.schemas.query import AnswerResponse
from app.services.query_service import QueryService

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[QueryError], int] = {
    InvalidQueryError: 400,
    TransportFailureError: 502,
    ParseFailureError: 502,
    NoCredentialError: 503,
}


def _to_http(e: QueryError) -> HTTPException:
    status = _STATUS_BY_ERROR.get(type(e), 500)
    logger.info("[api:handlers] %s -> %d", type(e).__name__, status)
    return HTTPException(status_code=status, detail=e.message)


def handle_ask(service: QueryService, question: str) -> AnswerResponse:
    """Search with AI fallback. 503 when the fallback has no API key."""
    try:
        answer = service.ask_question(question)
    except QueryError as e:
        raise _to_http(e) from e
    return AnswerResponse(answer=answer)


def handle_search(service: QueryService, query: str) -> AnswerResponse:
    """Web search only. 400 on unencodable query, 502 on network / parse failure."""
    try:
        answer = service.search_web(query)
    except QueryError as e:
        raise _to_http(e) from e
    return AnswerResponse(answer=answer)


def handle_generate(service: QueryService, prompt: str) -> AnswerResponse:
    """AI response only. 503 when no API key is configured."""
    try:
        answer = service.generate_response(prompt)
    except QueryError as e:
        raise _to_http(e) from e
    return AnswerResponse(answer=answer)
