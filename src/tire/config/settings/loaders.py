"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from dotenv import load_dotenv

from tire.config.settings.base import Settings
from tire.config.validation import InvalidSettingValueError, MissingRequiredSettingError, SettingsError

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})

# Annotations are strings under ``from __future__ import annotations``.
_COERCERS: dict[str, Callable[[str], Any]] = {
    "bool": lambda raw: raw.strip().lower() in _TRUTHY,
    "int": int,
    "float": float,
}


def _has_default(field: dataclasses.Field[Any]) -> bool:
    return field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Build settings from environment variables named ``<PREFIX>_<FIELD>``.

    Unset variables keep the field default. An empty value for an optional
    (``X | None``) field means ``None``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            key = settings_class.env_key(field.name)
            if key not in environ:
                if not _has_default(field):
                    raise MissingRequiredSettingError(key)
                continue
            values[field.name] = self._coerce(key, environ[key], str(field.type))

        try:
            return settings_class(**values)
        except SettingsError:
            raise
        except (TypeError, ValueError) as exc:
            raise SettingsError(f"Failed to build {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _coerce(key: str, raw: str, annotation: str) -> Any:
        base, _, rest = annotation.partition("|")
        if raw == "" and rest.strip() == "None":
            return None
        coerce = _COERCERS.get(base.strip())
        if coerce is None:
            return raw
        try:
            return coerce(raw)
        except ValueError as exc:
            raise InvalidSettingValueError(key, raw, f"expected {base.strip()}") from exc


class DotenvSettingsLoader(SettingsLoader):
    """Read a ``.env`` file into the environment, then load as :class:`EnvSettingsLoader`.

    Variables already set in the environment win unless *override* is true.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
