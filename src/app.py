"""Financial Statement Analysis Dashboard - Main Entry Point."""

import streamlit as st

from statement_analysis.charts import (
    create_capital_structure_chart,
    create_efficiency_chart,
    create_liquidity_chart,
    create_margin_chart,
    create_revenue_chart,
)
from statement_analysis.config import configure_logging
from statement_analysis.dataset import COMPANY, FINANCIAL_DATA
from statement_analysis.metrics import calculate_metrics
from statement_analysis.models import KPICard
from statement_analysis.summary import build_kpi_cards, latest_and_prior, trend_markdown
from statement_analysis.transformer import (
    enriched_to_dataframe,
    format_currency,
    format_days,
    format_percentage,
    format_ratio,
    raw_to_dataframe,
)

configure_logging()

first_year = FINANCIAL_DATA[0].year
last_year = FINANCIAL_DATA[-1].year

# Page configuration
st.set_page_config(
    page_title="Financial Statement Analysis",
    page_icon="📊",
    layout="wide",
)


@st.cache_data
def load_metrics():
    """Compute derived metrics for the fixed dataset."""
    return calculate_metrics(FINANCIAL_DATA)


def display_kpi_card(card: KPICard):
    st.metric(card.title, card.value)
    trend = trend_markdown(card)
    if trend:
        st.markdown(trend)
    if card.sub_value:
        st.caption(card.sub_value)


def section_header(title: str, subtitle: str):
    st.subheader(title)
    st.caption(subtitle)


records = load_metrics()
latest, prior = latest_and_prior(records)
df = enriched_to_dataframe(records)

# =============================================================================
# Header
# =============================================================================
header_col, badge_col = st.columns([3, 1])
with header_col:
    st.title("Financial Statement Analysis")
    st.caption(f"{COMPANY.name} | FY {first_year} - {last_year}")
with badge_col:
    st.caption(f"Source: {COMPANY.source}")

# =============================================================================
# KPI Grid
# =============================================================================
for column, card in zip(st.columns(4), build_kpi_cards(records)):
    with column:
        display_kpi_card(card)

st.divider()

# =============================================================================
# Section 1: Profitability & Growth
# =============================================================================
section_header(
    "Profitability & Growth Analysis",
    "Revenue trajectory and margin expansion trends.",
)

col1, col2 = st.columns([2, 1])
with col1:
    st.markdown("**REVENUE VS. COSTS & INCOME**")
    st.plotly_chart(create_revenue_chart(df), use_container_width=True)
with col2:
    st.markdown("**MARGIN EVOLUTION**")
    st.plotly_chart(create_margin_chart(df), use_container_width=True)

with st.container(border=True):
    st.markdown("### 🌐 A Defining Year: Global Scale & Efficiency")
    st.markdown(
        "Tesla's shift toward profitability is an important turning point, made "
        "possible in large part by rising sales in **China and Europe**, and the "
        "addition of the **Model Y**. Despite a challenging environment, 2020 was a "
        "defining year with delivery of nearly half a million cars, a 36% increase "
        "fueled by the Shanghai factory."
    )
    col1, col2 = st.columns(2)
    with col1:
        st.metric("2020 Deliveries", "499,550", "36% YoY Growth")
    with col2:
        st.metric("Key Drivers", "China & Model Y")
        st.caption("Shanghai Factory Scale-up")

st.divider()

# =============================================================================
# Section 2: Liquidity & Leverage
# =============================================================================
section_header(
    "Liquidity & Financial Health",
    "Assessing ability to meet short and long-term obligations.",
)

col1, col2 = st.columns(2)
with col1:
    st.markdown("**LIQUIDITY RATIOS**")
    st.plotly_chart(create_liquidity_chart(df), use_container_width=True)
    strength = "strong" if latest.current_ratio >= 1 else "limited"
    st.info(
        f"**Insight:** Current Ratio of {latest.current_ratio:.2f} in "
        f"{latest.year} indicates {strength} ability to cover short-term debts."
    )
with col2:
    st.markdown("**CAPITAL STRUCTURE & SOLVENCY**")
    st.plotly_chart(create_capital_structure_chart(df), use_container_width=True)
    if prior is not None:
        direction = "reduced" if latest.debt_to_equity < prior.debt_to_equity else "raised"
        st.info(
            f"**Insight:** Debt-to-equity moved from {format_ratio(prior.debt_to_equity)} "
            f"to {format_ratio(latest.debt_to_equity)}, which {direction} "
            "financial leverage risk."
        )

# =============================================================================
# Section 3: Efficiency
# =============================================================================
section_header(
    "Operating Efficiency",
    "How intensively inventory, assets and receivables are used.",
)

col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric("Inventory Turnover", format_ratio(latest.inventory_turnover))
with col2:
    st.metric("Asset Turnover", format_ratio(latest.asset_turnover))
with col3:
    st.metric("DSO", format_days(latest.dso))
with col4:
    st.metric("Interest Coverage", format_ratio(latest.interest_coverage))

st.plotly_chart(create_efficiency_chart(df), use_container_width=True)

# =============================================================================
# Detail tables
# =============================================================================
with st.expander("📋 Financial Statement Detail"):
    display_df = df.copy()
    for col in [
        "Revenue", "Cost of Revenue", "Gross Profit", "Operating Expenses", "EBIT",
        "Net Income", "Interest Expense", "Cash", "Current Assets",
        "Current Liabilities", "Inventory", "Total Assets", "Total Liabilities",
        "Total Equity", "Accounts Receivable",
    ]:
        display_df[col] = display_df[col].apply(format_currency)
    for col in [c for c in display_df.columns if c.endswith("(%)")]:
        display_df[col] = display_df[col].apply(format_percentage)
    for col in [
        "Current Ratio", "Quick Ratio", "Debt to Equity", "Interest Coverage",
        "Inventory Turnover", "Asset Turnover",
    ]:
        display_df[col] = display_df[col].apply(format_ratio)
    display_df["DSO (days)"] = display_df["DSO (days)"].apply(format_days)

    st.dataframe(
        display_df.set_index("Fiscal Year").T,
        use_container_width=True,
    )

with st.expander("🧾 Reported Statement Figures (USD millions)"):
    raw_df = raw_to_dataframe(FINANCIAL_DATA)
    st.dataframe(
        raw_df.set_index("Fiscal Year").T,
        use_container_width=True,
    )

# Footer
st.divider()
st.caption(
    "Figures in millions of USD unless noted. For information only; not investment advice."
)
