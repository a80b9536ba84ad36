"""Wire schema for the DuckDuckGo Instant Answer response."""

from pydantic import BaseModel, ConfigDict, Field


class RelatedTopic(BaseModel):
    """One entry of RelatedTopics. Group entries (Name/Topics) parse with text=None."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    text: str | None = Field(None, alias="Text")


class SearchResult(BaseModel):
    """
    Parsed search response. Only abstract and answer are surfaced;
    related_topics is kept for wire compatibility and never read.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    abstract: str | None = Field(None, alias="Abstract")
    answer: str | None = Field(None, alias="Answer")
    related_topics: list[RelatedTopic] | None = Field(None, alias="RelatedTopics")
