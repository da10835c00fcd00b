"""Logging – curl command rendering and the request/response logger."""
from __future__ import annotations

import json
from typing import Any

from tire.logging.processors import get_logger


def dump_json(document: Any) -> str:
    """Serialise *document* as compact single-line JSON."""
    return json.dumps(document, ensure_ascii=False, separators=(",", ":"))


def curl_command(method: str, url: str, body: Any = None) -> str:
    """Return a shell command reproducing an HTTP request.

    ``body`` may be a JSON-serialisable document or a pre-encoded string.
    Single quotes in the payload are escaped for a POSIX shell.
    """
    command = f'curl -X {method.upper()} "{url}"'
    if body is None or body == "":
        return command
    payload = body if isinstance(body, str) else dump_json(body)
    escaped = payload.replace("'", "'\\''")
    return f"{command} -d '{escaped}'"


class RequestLogger:
    """Log requests in curl form and responses with their status.

    At ``info`` level only the command and the response status are logged;
    at ``debug`` level the complete response body follows.
    """

    def __init__(self, name: str = "tire.requests") -> None:
        self._log = get_logger(name)

    def log_request(self, label: str, target: str, curl: str) -> None:
        self._log.info("request", label=label, target=target, curl=curl)

    def log_response(self, status: int | str, took: int | None = None, body: Any = None) -> None:
        self._log.info("response", status=status, took=took)
        if body is not None and body != "":
            rendered = body if isinstance(body, str) else json.dumps(body, indent=2, ensure_ascii=False)
            self._log.debug("response.body", status=status, body=rendered)


__all__ = ["RequestLogger", "curl_command", "dump_json"]
