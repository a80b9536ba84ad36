"""
Query service: answer a free-text question via web search, with an AI fallback.

Responsibility: Look the question up on the DuckDuckGo Instant Answer API and,
if that fails for any reason, return the AI fallback response. Called by the
API, MCP tools and CLI; no HTTP server types here.
"""

import logging
import threading
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

import httpx
from pydantic import ValidationError

from app.core.config import (
    AI_API_KEY,
    AI_PLACEHOLDER_RESPONSE,
    NO_RESULTS_TEMPLATE,
    SEARCH_API_TIMEOUT,
    SEARCH_FORMAT,
    SEARCH_URL,
)
from app.core.errors import (
    InvalidQueryError,
    NoCredentialError,
    ParseFailureError,
    QueryError,
    TransportFailureError,
)
from app.schemas.search import SearchResult

logger = logging.getLogger(__name__)


class QueryService:
    """
    Web search first, AI fallback second.

    api_key enables the fallback; it is fixed for the life of the instance.
    When client is given it is reused (and left open); otherwise each search
    opens a short-lived httpx.Client.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        search_url: str = SEARCH_URL,
        timeout: float = SEARCH_API_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key or None
        self._search_url = search_url
        self._timeout = timeout
        self._client = client

    @property
    def has_credential(self) -> bool:
        return self._api_key is not None

    def build_search_url(self, query: str) -> httpx.URL:
        """Percent-encode query into q=...&format=json. Raises InvalidQueryError."""
        if not isinstance(query, str):
            raise InvalidQueryError(f"Invalid search query: expected str, got {type(query).__name__}")
        try:
            params = urlencode({"q": query, "format": SEARCH_FORMAT}, quote_via=quote)
            base = urlsplit(self._search_url)
            # Keep any query string already on the configured endpoint.
            merged = f"{base.query}&{params}" if base.query else params
            return httpx.URL(urlunsplit(base._replace(query=merged)))
        except (UnicodeEncodeError, ValueError, httpx.InvalidURL) as e:
            raise InvalidQueryError() from e

    def _fetch(self, url: httpx.URL) -> httpx.Response:
        if self._client is not None:
            return self._client.get(url)
        with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
            return client.get(url)

    def search_web(self, query: str) -> str:
        """
        Search DuckDuckGo and return the abstract, else the direct answer,
        else "No results found for: {query}".
        Raises InvalidQueryError, TransportFailureError or ParseFailureError.
        """
        logger.info("[query_service:search_web] IN  query=%r", query)
        url = self.build_search_url(query)

        try:
            response = self._fetch(url)
        except httpx.HTTPError as e:
            logger.warning("[query_service:search_web] request failed: %s", e)
            raise TransportFailureError() from e
        if not response.is_success:
            logger.warning("[query_service:search_web] search endpoint returned %s", response.status_code)
            raise TransportFailureError(f"Network request failed: status {response.status_code}")

        try:
            result = SearchResult.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning("[query_service:search_web] bad response body: %s", e.errors()[:1])
            raise ParseFailureError() from e

        if result.abstract:
            answer = result.abstract
        elif result.answer:
            answer = result.answer
        else:
            answer = NO_RESULTS_TEMPLATE.format(query=query)
        logger.info("[query_service:search_web] OUT answer_len=%d", len(answer))
        return answer

    def generate_response(self, prompt: str) -> str:
        """
        AI response for prompt. Requires an API key (NoCredentialError otherwise).
        The generative backend is not wired up; a fixed placeholder is returned.
        """
        logger.info(
            "[query_service:generate_response] IN  prompt_len=%d",
            len(prompt) if isinstance(prompt, str) else 0,
        )
        if self._api_key is None:
            raise NoCredentialError()
        return AI_PLACEHOLDER_RESPONSE

    def ask_question(self, question: str) -> str:
        """
        Try web search; on any search failure fall back to generate_response.
        Only NoCredentialError can escape.
        """
        logger.info("[query_service:ask_question] IN  question=%r", question)
        try:
            return self.search_web(question)
        except QueryError as e:
            # InvalidQueryError falls back too, same as a network outage.
            logger.warning(
                "[query_service:ask_question] search failed (%s: %s); falling back to AI",
                type(e).__name__,
                e.message,
            )
        return self.generate_response(question)


_service: QueryService | None = None
_lock = threading.Lock()


def get_query_service() -> QueryService:
    """Return the process-wide QueryService, built once from config (AI_API_KEY, SEARCH_URL)."""
    global _service
    with _lock:
        if _service is None:
            _service = QueryService(AI_API_KEY, search_url=SEARCH_URL, timeout=SEARCH_API_TIMEOUT)
            logger.info(
                "[query_service:get_query_service] built search_url=%s ai_configured=%s",
                SEARCH_URL,
                _service.has_credential,
            )
        return _service
