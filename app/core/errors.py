"""
Application errors for clean API error handling.

QueryError kinds raised by the query service. The API layer maps them to HTTP
status codes (InvalidQueryError -> 400, TransportFailureError / ParseFailureError
-> 502, NoCredentialError -> 503) so callers get a user-facing message.
"""


class QueryError(Exception):
    """Base class for query service failures."""

    default_message = "Query failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidQueryError(QueryError):
    """The query could not be percent-encoded into a search URL."""

    default_message = "Invalid search query"


class TransportFailureError(QueryError):
    """Connection error, timeout, or non-2xx status from the search endpoint."""

    default_message = "Network request failed"


class ParseFailureError(QueryError):
    """Search response body did not decode into the expected shape."""

    default_message = "Failed to parse response"


class NoCredentialError(QueryError):
    """Raised when the AI fallback is attempted without an API key."""

    default_message = "AI API key not configured"
