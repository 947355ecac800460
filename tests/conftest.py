"""Shared pytest fixtures."""

import pytest

from statement_analysis import config
from statement_analysis.dataset import FINANCIAL_DATA
from statement_analysis.metrics import calculate_metrics
from statement_analysis.models import RawYearRecord


@pytest.fixture(autouse=True)
def clear_settings(monkeypatch):
    """Isolate each test from environment-driven settings."""
    monkeypatch.delenv("STATEMENT_STRICT_METRICS", raising=False)
    monkeypatch.delenv("STATEMENT_LOG_LEVEL", raising=False)
    config.get_strict_metrics.cache_clear()
    config.get_log_level.cache_clear()
    yield
    config.get_strict_metrics.cache_clear()
    config.get_log_level.cache_clear()


@pytest.fixture
def enriched():
    """Derived metrics for the bundled dataset."""
    return calculate_metrics(FINANCIAL_DATA)


@pytest.fixture
def make_record():
    """Build a raw record from the 2018 figures with overrides."""

    def _make(**overrides):
        return RawYearRecord.model_validate(
            {**FINANCIAL_DATA[0].model_dump(), **overrides}
        )

    return _make
