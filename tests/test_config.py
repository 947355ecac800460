"""Tests for environment configuration."""

import logging

import pytest

from statement_analysis import config


def test_strict_metrics_default_off():
    assert config.get_strict_metrics() is False


@pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
def test_strict_metrics_truthy(monkeypatch, value):
    monkeypatch.setenv("STATEMENT_STRICT_METRICS", value)
    assert config.get_strict_metrics() is True


def test_log_level(monkeypatch):
    assert config.get_log_level() == "WARNING"
    config.get_log_level.cache_clear()
    monkeypatch.setenv("STATEMENT_LOG_LEVEL", "debug")
    assert config.get_log_level() == "DEBUG"


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    config.configure_logging("INFO")
    assert calls == [{"level": "INFO", "format": config.LOG_FORMAT}]
