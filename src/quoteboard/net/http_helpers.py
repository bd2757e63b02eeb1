"""HTTP helpers for the quotes endpoint.

``fetch_json`` wraps a single :func:`requests.get` and maps every failure
onto the :mod:`quoteboard.errors` taxonomy, keeping the original exception
as ``__cause__``.  Nothing here retries.
"""

from __future__ import annotations

from typing import Any

import requests

from quoteboard.errors import DecodeError, NetworkError
from quoteboard.net.error_utils import summarize_error

DEFAULT_USER_AGENT = "Quoteboard/1.0"


def fetch_json(
    url: str,
    *,
    headers: dict[str, str] | None = None,
    timeout: float = 6.0,
) -> Any:
    """GET *url* once and return the parsed JSON body.

    Args:
        url: Full URL to fetch.
        headers: Extra HTTP headers (``User-Agent`` is always set).
        timeout: Request timeout in seconds.

    Raises:
        NetworkError: Transport failure or an error status code.
        DecodeError: The body is not valid JSON.
    """
    hdrs = {"User-Agent": DEFAULT_USER_AGENT, "Accept": "application/json"}
    if headers:
        hdrs.update(headers)

    try:
        resp = requests.get(url, headers=hdrs, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise NetworkError(summarize_error(exc)) from exc

    try:
        return resp.json()
    except ValueError as exc:
        raise DecodeError(summarize_error(exc)) from exc
