"""Data transformation and display formatting utilities."""

import math
from collections.abc import Sequence

import pandas as pd

from statement_analysis.models import EnrichedYearRecord, RawYearRecord

RAW_COLUMNS = {
    "year": "Fiscal Year",
    "revenue": "Revenue",
    "cost_of_revenue": "Cost of Revenue",
    "gross_profit": "Gross Profit",
    "operating_expenses": "Operating Expenses",
    "ebit": "EBIT",
    "net_income": "Net Income",
    "interest_expense": "Interest Expense",
    "cash": "Cash",
    "current_assets": "Current Assets",
    "current_liabilities": "Current Liabilities",
    "inventory": "Inventory",
    "total_assets": "Total Assets",
    "total_liabilities": "Total Liabilities",
    "equity": "Total Equity",
    "accounts_receivable": "Accounts Receivable",
}

METRIC_COLUMNS = {
    "rev_growth": "Revenue Growth (%)",
    "ni_growth": "Net Income Growth (%)",
    "gross_margin": "Gross Margin (%)",
    "operating_margin": "Operating Margin (%)",
    "net_margin": "Net Margin (%)",
    "current_ratio": "Current Ratio",
    "quick_ratio": "Quick Ratio",
    "debt_to_equity": "Debt to Equity",
    "interest_coverage": "Interest Coverage",
    "inventory_turnover": "Inventory Turnover",
    "asset_turnover": "Asset Turnover",
    "dso": "DSO (days)",
}


def raw_to_dataframe(records: Sequence[RawYearRecord]) -> pd.DataFrame:
    """Convert raw fiscal years to a pandas DataFrame.

    Args:
        records: Raw fiscal year records

    Returns:
        DataFrame with one row per year, in input order
    """
    rows = [
        {label: getattr(record, field) for field, label in RAW_COLUMNS.items()}
        for record in records
    ]
    return pd.DataFrame(rows, columns=list(RAW_COLUMNS.values()))


def enriched_to_dataframe(records: Sequence[EnrichedYearRecord]) -> pd.DataFrame:
    """Convert enriched fiscal years to a pandas DataFrame.

    Args:
        records: Records produced by calculate_metrics

    Returns:
        DataFrame with raw figures followed by derived metrics
    """
    columns = {**RAW_COLUMNS, **METRIC_COLUMNS}
    rows = [
        {label: getattr(record, field) for field, label in columns.items()}
        for record in records
    ]
    return pd.DataFrame(rows, columns=list(columns.values()))


def _is_missing(value: float | None) -> bool:
    return value is None or not math.isfinite(value)


def format_number(value: float) -> str:
    """Format with thousands separators and at most two decimals."""
    text = f"{value:,.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_currency(value: float | None, unit: str = "M") -> str:
    """Format a figure in millions as a currency string.

    Args:
        value: Value in millions
        unit: Unit suffix for values below one billion

    Returns:
        '$31.5B' style above 1000 millions, '$721M' style below
    """
    if _is_missing(value):
        return "N/A"

    sign = "-" if value < 0 else ""
    if abs(value) >= 1000:
        return f"{sign}${abs(value) / 1000:,.1f}B"
    return f"{sign}${abs(value):,.0f}{unit}"


def format_tooltip_value(value: float | None, unit: str = "", prefix: str = "") -> str:
    """Format a chart hover value, switching millions to billions.

    Args:
        value: Plotted value
        unit: Unit suffix ('M', '%', or '')
        prefix: Prefix such as '$'

    Returns:
        Formatted string
    """
    if _is_missing(value):
        return "N/A"

    if abs(value) >= 1000 and unit in ("M", ""):
        return f"{prefix}{format_number(value / 1000)}B"
    return f"{prefix}{format_number(value)}{unit}"


def format_percentage(value: float | None, signed: bool = False) -> str:
    """Format a number as percentage string.

    Args:
        value: Percentage value
        signed: Always show the sign

    Returns:
        Formatted string
    """
    if _is_missing(value):
        return "N/A"
    if signed:
        return f"{value:+.1f}%"
    return f"{value:.1f}%"


def format_ratio(value: float | None) -> str:
    if _is_missing(value):
        return "N/A"
    return f"{value:.2f}x"


def format_days(value: float | None) -> str:
    if _is_missing(value):
        return "N/A"
    return f"{value:.1f} days"
