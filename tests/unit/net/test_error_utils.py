"""Tests for quoteboard.net.error_utils."""

from __future__ import annotations

import requests

from quoteboard.net.error_utils import summarize_error


class TestSummarizeError:
    def test_generic_exception(self):
        assert summarize_error(RuntimeError("oops")) == "oops"

    def test_empty_message_uses_class_name(self):
        assert summarize_error(RuntimeError()) == "RuntimeError"

    def test_truncation(self):
        result = summarize_error(RuntimeError("x" * 200), max_len=20)
        assert len(result) == 20
        assert result.endswith("...")

    def test_invalid_json(self):
        assert summarize_error(ValueError("Expecting value")) == "Invalid JSON: Expecting value"

    def test_timeouts(self):
        assert summarize_error(requests.exceptions.ConnectTimeout("x")) == "Connect timeout"
        assert summarize_error(requests.exceptions.ReadTimeout("x")) == "Read timeout"
        assert summarize_error(requests.exceptions.Timeout("x")) == "Timeout"

    def test_ssl_error(self):
        assert summarize_error(requests.exceptions.SSLError("ssl fail")) == "TLS/SSL error"

    def test_http_error_with_response(self):
        resp = requests.Response()
        resp.status_code = 404
        resp.reason = "Not Found"
        err = requests.exceptions.HTTPError(response=resp)
        assert summarize_error(err) == "HTTP 404 Not Found"

    def test_connection_error_dns(self):
        err = requests.exceptions.ConnectionError("Name or service not known")
        assert summarize_error(err) == "DNS failure"

    def test_connection_error_refused(self):
        err = requests.exceptions.ConnectionError("Connection refused")
        assert summarize_error(err) == "Connection refused"

    def test_connection_error_generic(self):
        err = requests.exceptions.ConnectionError("something else")
        assert summarize_error(err) == "Connection error"
