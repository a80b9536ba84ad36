"""Schemas for the ask / search / generate endpoints."""

from pydantic import BaseModel, Field


class AskRequest(BaseModel):
    """Request body for POST /ask and the ask_question MCP tool."""

    question: str = Field(..., description="Free-text question. Passed through unchanged.")


class SearchRequest(BaseModel):
    """Request body for POST /search and the search_web MCP tool."""

    query: str = Field(..., description="Free-text web search query.")


class GenerateRequest(BaseModel):
    """Request body for POST /generate."""

    prompt: str = Field(..., description="Prompt for the AI fallback.")


class AnswerResponse(BaseModel):
    """Response for POST /ask, /search and /generate."""

    answer: str = Field(..., description="Answer text (search result, no-results message, or AI response).")

    model_config = {
        "json_schema_extra": {
            "examples": [{"answer": "Paris is the capital of France."}]
        }
    }
