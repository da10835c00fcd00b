"""Errors – TireError, the root of the hierarchy."""

from __future__ import annotations

import json
from typing import Any, ClassVar


class TireError(Exception):
    """Base class for every error raised by the client.

    ``code`` is a stable machine-readable slug; ``detail`` carries
    JSON-friendly context such as the offending facet name or setting.
    When *cause* is given it also becomes ``__cause__``.
    """

    default_code: ClassVar[str] = "tire_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or type(self).default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["TireError"]
