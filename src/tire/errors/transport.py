"""Transport errors – failures talking to the search engine over HTTP."""

from __future__ import annotations

from typing import Any

from tire.errors.base import TireError


class TransportError(TireError):
    """The engine answered with an error status, or could not be reached.

    ``status_code`` is ``None`` when no HTTP response was received.
    ``raw_body`` holds the undecoded response body, verbatim.
    """

    default_code = "transport_error"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        raw_body: str | None = None,
        method: str | None = None,
        url: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.raw_body = raw_body
        self.method = method
        self.url = url

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["status_code"] = self.status_code
        if self.raw_body is not None:
            base["raw_body"] = self.raw_body
        return base


class TransportTimeoutError(TransportError):
    """The request exceeded the configured timeout."""

    default_code = "transport_timeout"


__all__ = ["TransportError", "TransportTimeoutError"]
