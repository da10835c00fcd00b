"""Transport – the port the search and index layers talk through."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Send one request to the engine and return the decoded JSON response.

    ``body`` is a JSON-serialisable document, a pre-encoded string (sent
    verbatim), or ``None``. Failures raise :class:`~tire.errors.TransportError`.
    """

    url: str

    def execute(self, method: str, path: str, body: Any = None) -> dict[str, Any]: ...


__all__ = ["Transport"]
