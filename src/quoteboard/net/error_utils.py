"""Short, log-friendly summaries of quote fetch failures."""

from __future__ import annotations

import requests

# Checked in order: subclasses before their bases.
_LABELS: tuple[tuple[type[Exception], str], ...] = (
    (requests.exceptions.ConnectTimeout, "Connect timeout"),
    (requests.exceptions.ReadTimeout, "Read timeout"),
    (requests.exceptions.Timeout, "Timeout"),
    (requests.exceptions.SSLError, "TLS/SSL error"),
    (requests.exceptions.TooManyRedirects, "Too many redirects"),
)

# Substrings of a ConnectionError message → label.
_CONNECTION_HINTS: tuple[tuple[str, str], ...] = (
    ("Name or service not known", "DNS failure"),
    ("Temporary failure in name resolution", "DNS failure"),
    ("Connection refused", "Connection refused"),
    ("Failed to establish", "Connection failed"),
)


def _http_status(err: requests.exceptions.HTTPError) -> str:
    resp = err.response
    if resp is None:
        return "HTTP error"
    return f"HTTP {resp.status_code} {resp.reason or ''}".strip()


def _connection(err: requests.exceptions.ConnectionError) -> str:
    raw = str(err)
    for hint, label in _CONNECTION_HINTS:
        if hint in raw:
            return label
    return "Connection error"


def summarize_error(err: Exception, max_len: int = 80) -> str:
    """Return a one-line summary of *err*, at most *max_len* characters."""
    msg = next((label for cls, label in _LABELS if isinstance(err, cls)), None)
    if msg is None:
        if isinstance(err, requests.exceptions.HTTPError):
            msg = _http_status(err)
        elif isinstance(err, requests.exceptions.ConnectionError):
            msg = _connection(err)
        elif isinstance(err, ValueError):
            # json / requests.JSONDecodeError
            msg = f"Invalid JSON: {err}" if str(err) else "Invalid JSON"
        else:
            msg = str(err) or err.__class__.__name__

    if len(msg) > max_len:
        msg = msg[: max_len - 3] + "..."
    return msg
