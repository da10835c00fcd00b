"""Unit tests for the process-wide Configuration."""

from __future__ import annotations

import io
import logging

import pytest

import tire
from tire.config import Configuration, InvalidSettingValueError, SettingsError, configure, reset


class MySpecialWrapper(dict):
    pass


class TestConfigure:
    def test_defaults(self) -> None:
        assert Configuration.url() == "http://localhost:9200"
        assert Configuration.timeout() == 10.0
        assert Configuration.wrapper() is None
        assert Configuration.strict_query() is False

    def test_url(self) -> None:
        configure(url="http://search.example.com")
        assert Configuration.url() == "http://search.example.com"

    def test_invalid_url_rejected_and_previous_kept(self) -> None:
        configure(url="http://search.example.com")
        with pytest.raises(InvalidSettingValueError):
            configure(url="search.example.com")
        assert Configuration.url() == "http://search.example.com"

    def test_wrapper(self) -> None:
        configure(wrapper=MySpecialWrapper)
        assert Configuration.wrapper() is MySpecialWrapper

    def test_wrapper_must_be_callable(self) -> None:
        with pytest.raises(SettingsError):
            Configuration.set_wrapper("not callable")  # type: ignore[arg-type]

    def test_unknown_setting_rejected(self) -> None:
        with pytest.raises(SettingsError):
            Configuration.update(colour="blue")

    def test_top_level_alias(self) -> None:
        tire.configure(timeout=2.0)
        assert Configuration.timeout() == 2.0


class TestLogger:
    def test_logger_attaches_handler(self) -> None:
        stream = io.StringIO()
        configure(logger=stream, log_level="debug")
        logger = logging.getLogger("tire")
        assert logger.level == logging.DEBUG
        assert any(getattr(h, "stream", None) is stream for h in logger.handlers)
        assert Configuration.settings().log_level == "debug"

    def test_logger_to_file(self, tmp_path) -> None:
        path = tmp_path / "elasticsearch.log"
        Configuration.logger(str(path))
        logging.getLogger("tire.requests").info("hello")
        logging.getLogger("tire").handlers[-1].flush()
        assert path.exists()

    def test_reset_logger_detaches(self) -> None:
        configure(logger=io.StringIO())
        reset("logger")
        assert logging.getLogger("tire").level == logging.NOTSET
        assert not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
                       for h in logging.getLogger("tire").handlers)


class TestReset:
    def test_reset_single_key(self) -> None:
        configure(url="http://search.example.com", timeout=3.0)
        reset("url")
        assert Configuration.url() == "http://localhost:9200"
        assert Configuration.timeout() == 3.0

    def test_reset_wrapper(self) -> None:
        configure(wrapper=MySpecialWrapper)
        reset("wrapper")
        assert Configuration.wrapper() is None

    def test_reset_all(self) -> None:
        configure(url="http://search.example.com", wrapper=MySpecialWrapper, strict_query=True)
        reset()
        assert Configuration.url() == "http://localhost:9200"
        assert Configuration.wrapper() is None
        assert Configuration.strict_query() is False

    def test_reset_unknown_key(self) -> None:
        with pytest.raises(SettingsError):
            reset("colour")


class TestFromEnv:
    def test_applies_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIRE_URL", "http://env-host:9200")
        monkeypatch.setenv("TIRE_STRICT_QUERY", "true")
        monkeypatch.delenv("TIRE_LOG_FILE", raising=False)
        Configuration.from_env()
        assert Configuration.url() == "http://env-host:9200"
        assert Configuration.strict_query() is True

    def test_log_file_configures_logger(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        log_file = tmp_path / "tire.log"
        monkeypatch.setenv("TIRE_LOG_FILE", str(log_file))
        monkeypatch.setenv("TIRE_LOG_LEVEL", "debug")
        Configuration.from_env()
        assert logging.getLogger("tire").level == logging.DEBUG

