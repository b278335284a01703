"""Tests for jwthandler configuration."""

from __future__ import annotations

import logging

import pytest
from safir.logging import LogLevel, Profile

from jwthandler.config import Config


def test_defaults() -> None:
    config = Config()
    assert config.log_level == LogLevel.INFO
    assert config.profile == Profile.production
    assert config.logger_name == "jwthandler"


def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWTHANDLER_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JWTHANDLER_PROFILE", "development")
    monkeypatch.setenv("JWTHANDLER_LOGGER_NAME", "jwthandler-test")

    config = Config()
    assert config.log_level == LogLevel.DEBUG
    assert config.profile == Profile.development
    assert config.logger_name == "jwthandler-test"


def test_configure_logging() -> None:
    config = Config(log_level=LogLevel.DEBUG, logger_name="jwthandler-test")
    config.configure_logging()
    assert logging.getLogger("jwthandler-test").level == logging.DEBUG
