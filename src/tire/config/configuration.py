"""Config – process-wide client configuration.

Holds the engine URL, request timeout, result wrapper and the request
logger. Values are validated through :class:`TireSettings`::

    from tire.config import configure

    configure(url="http://search.example.com", logger=sys.stderr, log_level="debug")
"""
from __future__ import annotations

import os
from typing import IO, Any, Callable, ClassVar

from tire.config.settings import DotenvSettingsLoader, EnvSettingsLoader, TireSettings
from tire.config.validation import SettingsError
from tire.logging import LoggerFactory, get_logger
from tire.transport import HttpxTransport

_log = get_logger(__name__)

LogDevice = str | os.PathLike[str] | IO[str]


class Configuration:
    """Class-level holder of the active settings."""

    _settings: ClassVar[TireSettings] = TireSettings()
    _wrapper: ClassVar[Callable[[dict[str, Any]], Any] | None] = None
    _log_device: ClassVar[LogDevice | None] = None
    _transport: ClassVar[HttpxTransport | None] = None

    @classmethod
    def settings(cls) -> TireSettings:
        return cls._settings

    @classmethod
    def url(cls) -> str:
        return cls._settings.url

    @classmethod
    def timeout(cls) -> float:
        return cls._settings.timeout

    @classmethod
    def strict_query(cls) -> bool:
        return cls._settings.strict_query

    @classmethod
    def wrapper(cls) -> Callable[[dict[str, Any]], Any] | None:
        """Result wrapper; ``None`` means the default :class:`~tire.search.Item`."""
        return cls._wrapper

    @classmethod
    def update(cls, **values: Any) -> TireSettings:
        """Replace individual settings, re-validating the whole set."""
        cls._adopt(cls._settings.replace(**values))
        return cls._settings

    @classmethod
    def transport(cls) -> HttpxTransport:
        """Transport shared by every search and index created without one.

        Built on first use; closed and rebuilt when ``url`` or ``timeout`` change.
        """
        if cls._transport is None:
            cls._transport = HttpxTransport(cls._settings.url, cls._settings.timeout)
        return cls._transport

    @classmethod
    def close_transport(cls) -> None:
        if cls._transport is not None:
            cls._transport.close()
            cls._transport = None

    @classmethod
    def _adopt(cls, settings: TireSettings) -> None:
        previous = cls._settings
        cls._settings = settings
        if (previous.url, previous.timeout) != (settings.url, settings.timeout):
            cls.close_transport()

    @classmethod
    def apply(cls, settings: TireSettings) -> None:
        """Adopt a loaded settings object, (re)configuring the logger from it."""
        cls._adopt(settings)
        if settings.log_file:
            cls.logger(settings.log_file, settings.log_level)

    @classmethod
    def from_env(cls, env_file: str | None = None) -> TireSettings:
        """Load ``TIRE_*`` settings from the environment (and *env_file*) and apply them."""
        loader = DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
        settings = loader.load(TireSettings)
        cls.apply(settings)
        return settings

    @classmethod
    def set_wrapper(cls, wrapper: Callable[[dict[str, Any]], Any] | None) -> None:
        if wrapper is not None and not callable(wrapper):
            raise SettingsError(f"Result wrapper must be callable, got {wrapper!r}")
        cls._wrapper = wrapper

    @classmethod
    def logger(cls, device: LogDevice | None = None, level: str | None = None) -> None:
        """Log requests in curl form to *device* (a path or a text stream)."""
        level = level or cls._settings.log_level
        cls.update(log_level=level)
        LoggerFactory.configure(device, level=level)
        cls._log_device = device
        _log.debug("logger_configured", device=str(device), level=level)

    @classmethod
    def reset(cls, *keys: str) -> None:
        """Reset the given keys, or everything when none are given, to defaults.

        Besides the :class:`TireSettings` field names, ``"wrapper"`` and
        ``"logger"`` are accepted.
        """
        if not keys:
            cls._settings = TireSettings()
            cls.close_transport()
            cls._wrapper = None
            cls._log_device = None
            LoggerFactory.reset()
            return

        defaults = TireSettings()
        for key in keys:
            if key == "wrapper":
                cls._wrapper = None
            elif key == "logger":
                cls._log_device = None
                LoggerFactory.reset()
            elif key in TireSettings.field_names():
                cls.update(**{key: getattr(defaults, key)})
            else:
                raise SettingsError(f"Unknown setting: {key}")


def configure(
    *,
    url: str | None = None,
    timeout: float | None = None,
    strict_query: bool | None = None,
    wrapper: Callable[[dict[str, Any]], Any] | None = None,
    logger: LogDevice | None = None,
    log_level: str | None = None,
) -> TireSettings:
    """Update the process-wide configuration; omitted options are left untouched."""
    values: dict[str, Any] = {}
    if url is not None:
        values["url"] = url
    if timeout is not None:
        values["timeout"] = timeout
    if strict_query is not None:
        values["strict_query"] = strict_query
    if values:
        Configuration.update(**values)
    if wrapper is not None:
        Configuration.set_wrapper(wrapper)
    if logger is not None:
        Configuration.logger(logger, log_level)
    elif log_level is not None:
        Configuration.update(log_level=log_level)
    return Configuration.settings()


def reset(*keys: str) -> None:
    Configuration.reset(*keys)


__all__ = ["Configuration", "configure", "reset"]
