"""Summary KPI cards for the latest fiscal year."""

from collections.abc import Sequence
from typing import Optional

from statement_analysis.models import EnrichedYearRecord, KPICard
from statement_analysis.transformer import format_currency, format_percentage


def latest_and_prior(
    records: Sequence[EnrichedYearRecord],
) -> tuple[EnrichedYearRecord, Optional[EnrichedYearRecord]]:
    """Get the latest fiscal year and the one before it.

    Args:
        records: Enriched records in ascending order

    Returns:
        (latest, prior) where prior is None for a single year

    Raises:
        ValueError: If records is empty
    """
    if not records:
        raise ValueError("No fiscal years to summarize")
    prior = records[-2] if len(records) >= 2 else None
    return records[-1], prior


def _trend(value: float) -> str:
    return "up" if value >= 0 else "down"


def revenue_card(latest: EnrichedYearRecord, prior: Optional[EnrichedYearRecord]) -> KPICard:
    return KPICard(
        title="Total Revenue",
        value=format_currency(latest.revenue),
        sub_value=f"FY {latest.year}",
        trend=_trend(latest.rev_growth),
        trend_value=f"{format_percentage(latest.rev_growth)} YoY" if prior else None,
    )


def net_income_card(
    latest: EnrichedYearRecord, prior: Optional[EnrichedYearRecord]
) -> KPICard:
    trend_value = None
    if prior is not None:
        if prior.net_income < 0 <= latest.net_income:
            trend_value = "Turned Profitable"
        elif latest.net_income < 0 <= prior.net_income:
            trend_value = "Turned Unprofitable"
        else:
            trend_value = f"{format_percentage(latest.ni_growth)} YoY"

    return KPICard(
        title="Net Income",
        value=format_currency(latest.net_income),
        sub_value="GAAP Net Income",
        trend=_trend(latest.ni_growth),
        trend_value=trend_value,
    )


def gross_margin_card(
    latest: EnrichedYearRecord, prior: Optional[EnrichedYearRecord]
) -> KPICard:
    if prior is None:
        return KPICard(
            title="Gross Margin",
            value=format_percentage(latest.gross_margin),
        )

    delta = latest.gross_margin - prior.gross_margin
    return KPICard(
        title="Gross Margin",
        value=format_percentage(latest.gross_margin),
        sub_value=f"Vs {format_percentage(prior.gross_margin)} Prev Year",
        trend=_trend(delta),
        trend_value=f"{format_percentage(delta, signed=True)} pts",
    )


def cash_change_card(
    latest: EnrichedYearRecord, prior: Optional[EnrichedYearRecord]
) -> KPICard:
    """Net change in cash, used as a rough free cash flow proxy."""
    if prior is None:
        return KPICard(
            title="Free Cash Proxy",
            value=format_currency(latest.cash),
            sub_value="Cash Balance",
        )

    change = latest.cash - prior.cash
    return KPICard(
        title="Free Cash Proxy",
        value=format_currency(change),
        sub_value="Net Change in Cash",
        trend=_trend(change),
        trend_value="Strong Accumulation" if change >= 0 else "Cash Drawdown",
    )


def build_kpi_cards(records: Sequence[EnrichedYearRecord]) -> list[KPICard]:
    """Build the four headline cards for the dashboard.

    Args:
        records: Enriched records in ascending order

    Returns:
        Revenue, net income, gross margin and cash change cards
    """
    latest, prior = latest_and_prior(records)
    return [
        revenue_card(latest, prior),
        net_income_card(latest, prior),
        gross_margin_card(latest, prior),
        cash_change_card(latest, prior),
    ]


def trend_markdown(card: KPICard) -> Optional[str]:
    """Render a card's trend as a coloured arrow for st.markdown.

    Args:
        card: KPI card

    Returns:
        Markdown such as ':green[↑ 28.3% YoY]', or None without a trend value
    """
    if card.trend_value is None:
        return None
    arrow = "↑" if card.trend == "up" else "↓"
    color = "green" if card.is_positive else "red"
    return f":{color}[{arrow} {card.trend_value}]"
