"""Search errors – request assembly and response materialization."""

from __future__ import annotations

from typing import Any

from tire.errors.base import TireError


class ConfigurationError(TireError):
    """A search request was configured inconsistently (e.g. duplicate facet)."""

    default_code = "configuration_error"


class MalformedResponseError(TireError):
    """A response document does not have the minimal expected shape."""

    default_code = "malformed_response"

    def __init__(
        self,
        message: str,
        *,
        response: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.response = response


__all__ = ["ConfigurationError", "MalformedResponseError"]
