"""Tests for DataFrame conversion and display formatting."""

import math

import pytest

from statement_analysis.dataset import FINANCIAL_DATA
from statement_analysis.transformer import (
    enriched_to_dataframe,
    format_currency,
    format_days,
    format_number,
    format_percentage,
    format_ratio,
    format_tooltip_value,
    raw_to_dataframe,
)


def test_raw_to_dataframe():
    df = raw_to_dataframe(FINANCIAL_DATA)
    assert len(df) == 3
    assert list(df["Fiscal Year"]) == ["2018", "2019", "2020"]
    assert df["Total Equity"].iloc[-1] == 22225


def test_enriched_to_dataframe(enriched):
    df = enriched_to_dataframe(enriched)
    assert df.shape == (3, 28)
    assert df["Current Ratio"].iloc[-1] == pytest.approx(26717 / 14248)
    assert "DSO (days)" in df.columns


@pytest.mark.parametrize(
    "value, expected",
    [
        (31536, "$31.5B"),
        (721, "$721M"),
        (-976, "-$976M"),
        (13116, "$13.1B"),
        (None, "N/A"),
        (math.inf, "N/A"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


@pytest.mark.parametrize(
    "value, unit, prefix, expected",
    [
        (31536, "M", "$", "$31.54B"),
        (721, "M", "$", "$721M"),
        (-1500, "M", "$", "$-1.5B"),
        (18.8372, "%", "", "18.84%"),
        (1200, "%", "", "1,200%"),
        (0.8313, "", "", "0.83"),
        (math.nan, "", "", "N/A"),
    ],
)
def test_format_tooltip_value(value, unit, prefix, expected):
    assert format_tooltip_value(value, unit=unit, prefix=prefix) == expected


def test_format_number():
    assert format_number(1234.5) == "1,234.5"
    assert format_number(100) == "100"
    assert format_number(-0.001) == "0"


def test_format_percentage():
    assert format_percentage(28.31) == "28.3%"
    assert format_percentage(4.47, signed=True) == "+4.5%"
    assert format_percentage(-math.inf) == "N/A"


def test_format_ratio_and_days():
    assert format_ratio(1.8752) == "1.88x"
    assert format_days(21.829) == "21.8 days"
    assert format_ratio(None) == "N/A"


def test_tooltip_ratio_units_do_not_switch_to_billions():
    assert format_tooltip_value(1741.9, unit="x") == "1,741.9x"
    assert format_tooltip_value(21.829, unit=" days") == "21.83 days"
