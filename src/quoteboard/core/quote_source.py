"""QuoteSource — fetch one random quote from the dummyjson quotes API."""

from __future__ import annotations

import asyncio
import logging
import random

from pydantic import ValidationError

from quoteboard.core.models.quote import Quote, QuoteResponse
from quoteboard.errors import DecodeError, EmptyResultError
from quoteboard.log_config.logger import ContextualLogger
from quoteboard.net.http_helpers import fetch_json

QUOTES_URL = "https://dummyjson.com/quotes"


class QuoteSource:
    """Performs one GET against the quotes endpoint per call.

    The blocking ``requests`` call runs in a worker thread so the event
    loop is only suspended on network I/O.  No retries happen here; every
    failure is raised as a :class:`~quoteboard.errors.FetchFailed`
    subclass.

    Args:
        url: Endpoint returning ``{"quotes": [...]}``.
        timeout: Per-request timeout in seconds.
        user_agent: Value for the ``User-Agent`` header.
        rng: Random generator used to pick a quote (seedable in tests).
    """

    def __init__(
        self,
        url: str = QUOTES_URL,
        *,
        timeout: float = 6.0,
        user_agent: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._headers = {"User-Agent": user_agent} if user_agent else None
        self._rng = rng or random.Random()
        self._log = ContextualLogger(logging.getLogger(__name__), endpoint=url)

    async def fetch_random_quote(self) -> Quote:
        """Fetch the quote list and return one entry chosen uniformly at random.

        Raises:
            NetworkError: Endpoint unreachable or returned an error status.
            DecodeError: Body is not JSON or not shaped like ``{"quotes": [...]}``.
            EmptyResultError: The ``quotes`` list is empty.
        """
        data = await asyncio.to_thread(
            fetch_json, self.url, headers=self._headers, timeout=self.timeout
        )
        quotes = self._parse(data)
        quote = self._rng.choice(quotes)
        self._log.debug("Picked quote id=%d of %d", quote.id, len(quotes))
        return quote

    @staticmethod
    def _parse(data: object) -> list[Quote]:
        try:
            response = QuoteResponse.model_validate(data)
        except ValidationError as exc:
            raise DecodeError(
                f"Unexpected response shape ({exc.error_count()} validation errors)"
            ) from exc
        if not response.quotes:
            raise EmptyResultError("Response contained no quotes")
        return response.quotes
