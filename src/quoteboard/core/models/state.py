"""Runtime state published by the refresh controller."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from quoteboard.core.models.quote import Quote


class FetchState(BaseModel):
    """Snapshot of what the display surface should show.

    ``is_loading`` is only true while a fetch-and-apply cycle is in flight.
    """

    model_config = ConfigDict(frozen=True)

    current_quote: Quote | None = Field(default=None)
    is_loading: bool = Field(default=False)
