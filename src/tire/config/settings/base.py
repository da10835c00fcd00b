"""Config settings – Settings base: env naming and validated replacement."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, TypeVar

from tire.config.validation import SettingsError

S = TypeVar("S", bound="Settings")


@dataclasses.dataclass
class Settings:
    """Dataclass settings, each field read from a ``<_prefix>_<FIELD>`` variable.

    :meth:`_validate` runs on construction, so every instance (including
    those made by :meth:`replace`) holds checked, normalised values.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(cls))

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """``TireSettings.env_key("log_level")`` -> ``"TIRE_LOG_LEVEL"``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def replace(self: S, **changes: Any) -> S:
        unknown = sorted(set(changes) - set(self.field_names()))
        if unknown:
            raise SettingsError(
                f"Unknown setting(s): {', '.join(unknown)}", detail={"settings": unknown}
            )
        return dataclasses.replace(self, **changes)


__all__ = ["Settings"]
