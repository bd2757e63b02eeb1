"""Quote records as returned by the remote quotes API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Quote(BaseModel):
    """One quotation.  The API calls the text field ``quote``; only that name is accepted."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Identifier, unique within one response")
    text: str = Field(alias="quote", description="The quotation itself")
    author: str


class QuoteResponse(BaseModel):
    """Body of ``GET /quotes``.  Paging keys (``total``, ``skip``, ``limit``) are ignored."""

    model_config = ConfigDict(extra="ignore")

    quotes: list[Quote]
