"""Config settings – TireSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from tire.config.settings.base import Settings
from tire.config.validation import InvalidSettingValueError

LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclasses.dataclass
class TireSettings(Settings):
    """Connection and logging settings, read from ``TIRE_*`` variables."""

    _prefix: ClassVar[str] = "TIRE"

    url: str = "http://localhost:9200"
    timeout: float = 10.0
    log_file: str | None = None
    log_level: str = "info"
    strict_query: bool = False

    def _validate(self) -> None:
        if not self.url.startswith(("http://", "https://")):
            raise InvalidSettingValueError("url", self.url, "must be an http(s) URL")
        self.url = self.url.rstrip("/")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")
        self.log_level = self.log_level.lower()
        if self.log_level not in LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"must be one of {', '.join(LOG_LEVELS)}"
            )


__all__ = ["LOG_LEVELS", "TireSettings"]
