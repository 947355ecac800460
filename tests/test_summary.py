"""Tests for KPI card generation."""

import pytest

from statement_analysis.dataset import FINANCIAL_DATA
from statement_analysis.metrics import calculate_metrics
from statement_analysis.models import KPICard
from statement_analysis.summary import build_kpi_cards, latest_and_prior, trend_markdown


def test_latest_and_prior(enriched):
    latest, prior = latest_and_prior(enriched)
    assert latest.year == "2020"
    assert prior.year == "2019"


def test_latest_and_prior_requires_records():
    with pytest.raises(ValueError):
        latest_and_prior([])


def test_cards_for_bundled_dataset(enriched):
    revenue, net_income, margin, cash = build_kpi_cards(enriched)

    assert revenue.title == "Total Revenue"
    assert revenue.value == "$31.5B"
    assert revenue.sub_value == "FY 2020"
    assert revenue.trend_value == "28.3% YoY"
    assert revenue.trend == "up"

    assert net_income.value == "$721M"
    assert net_income.trend_value == "Turned Profitable"

    assert margin.value == "21.0%"
    assert margin.sub_value == "Vs 16.6% Prev Year"
    assert margin.trend_value == "+4.5% pts"

    assert cash.value == "$13.1B"
    assert cash.sub_value == "Net Change in Cash"
    assert cash.trend_value == "Strong Accumulation"


def test_cards_for_single_year():
    cards = build_kpi_cards(calculate_metrics(FINANCIAL_DATA[:1]))
    revenue, net_income, margin, cash = cards
    assert revenue.value == "$21.5B"
    assert revenue.trend_value is None
    assert net_income.value == "-$976M"
    assert net_income.trend_value is None
    assert margin.sub_value is None
    assert cash.sub_value == "Cash Balance"


def test_loss_after_profit(make_record):
    records = calculate_metrics(
        [make_record(net_income=500), make_record(year="2019", net_income=-200, cash=3000)]
    )
    _, net_income, _, cash = build_kpi_cards(records)
    assert net_income.trend_value == "Turned Unprofitable"
    assert net_income.trend == "down"
    assert cash.trend == "down"
    assert cash.trend_value == "Cash Drawdown"
    assert cash.value == "-$686M"


def test_trend_markdown_follows_card_trend(make_record):
    records = calculate_metrics(
        [make_record(net_income=500), make_record(year="2019", net_income=-200, cash=3000)]
    )
    _, net_income, _, cash = build_kpi_cards(records)
    assert trend_markdown(net_income) == ":red[↓ Turned Unprofitable]"
    assert trend_markdown(cash) == ":red[↓ Cash Drawdown]"


def test_trend_markdown_for_bundled_dataset(enriched):
    revenue, net_income, margin, cash = build_kpi_cards(enriched)
    assert trend_markdown(revenue) == ":green[↑ 28.3% YoY]"
    assert trend_markdown(net_income) == ":green[↑ Turned Profitable]"
    assert trend_markdown(margin) == ":green[↑ +4.5% pts]"
    assert trend_markdown(cash) == ":green[↑ Strong Accumulation]"


def test_trend_markdown_inverted_and_missing():
    card = KPICard(title="Debt", value="$1B", trend="up", trend_value="+10%", invert_color=True)
    assert trend_markdown(card) == ":red[↑ +10%]"
    assert trend_markdown(KPICard(title="t", value="v")) is None
