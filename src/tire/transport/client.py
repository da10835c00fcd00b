"""Transport – HttpxTransport."""
from __future__ import annotations

import json
import time
from typing import Any

import httpx

from tire.errors import MalformedResponseError, TransportError, TransportTimeoutError
from tire.logging import RequestLogger, curl_command, dump_json


def request_label(method: str, path: str) -> str:
    """Short log label: the ``_endpoint`` of *path*, else the HTTP method."""
    for segment in reversed(path.split("?", 1)[0].strip("/").split("/")):
        if segment.startswith("_"):
            return segment
    return method.upper()


class HttpxTransport:
    """Blocking JSON-over-HTTP transport backed by :class:`httpx.Client`."""

    def __init__(
        self,
        url: str = "http://localhost:9200",
        timeout: float = 10.0,
        *,
        client: httpx.Client | None = None,
        request_logger: RequestLogger | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self._client = client or httpx.Client(base_url=self.url, timeout=timeout)
        self._request_log = request_logger or RequestLogger()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    def execute(self, method: str, path: str, body: Any = None) -> dict[str, Any]:
        method = method.upper()
        full_url = f"{self.url}{path}"
        content, headers = self._encode(body)
        self._request_log.log_request(
            request_label(method, path),
            path.strip("/").split("/", 1)[0],
            curl_command(method, full_url, body),
        )

        started = time.monotonic()
        try:
            response = self._client.request(method, full_url, content=content, headers=headers)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(
                f"Request timed out: {method} {full_url}",
                method=method,
                url=full_url,
                cause=exc,
            ) from exc
        except httpx.HTTPStatusError as exc:
            self._request_log.log_response(exc.response.status_code, body=exc.response.text)
            raise TransportError(
                f"HTTP {exc.response.status_code} from {method} {full_url}",
                status_code=exc.response.status_code,
                raw_body=exc.response.text,
                method=method,
                url=full_url,
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Request failed: {method} {full_url}: {exc}",
                method=method,
                url=full_url,
                cause=exc,
            ) from exc

        took = int((time.monotonic() - started) * 1000)
        self._request_log.log_response(response.status_code, took=took, body=response.text)
        return self._decode(response)

    @staticmethod
    def _encode(body: Any) -> tuple[bytes | None, dict[str, str]]:
        if body is None:
            return None, {}
        if isinstance(body, str):
            return body.encode("utf-8"), {"Content-Type": "application/x-ndjson"}
        return dump_json(body).encode("utf-8"), {"Content-Type": "application/json"}

    @staticmethod
    def _decode(response: httpx.Response) -> dict[str, Any]:
        if response.request.method == "HEAD" or not response.content:
            return {}
        try:
            document = response.json()
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(
                f"Response from {response.request.url} is not valid JSON",
                response=response.text,
                cause=exc,
            ) from exc
        if not isinstance(document, dict):
            raise MalformedResponseError(
                f"Expected a JSON object from {response.request.url}",
                response=document,
            )
        return document


__all__ = ["HttpxTransport", "request_label"]
