"""Plotly chart generation for financial statement analysis."""

import plotly.graph_objects as go
from plotly.subplots import make_subplots
import pandas as pd

from statement_analysis.transformer import format_tooltip_value

SLATE = "#1e293b"
RED = "#ef4444"
GREEN = "#10b981"
GRID = "#e2e8f0"
MUTED = "#94a3b8"


def _hover_text(values: pd.Series, unit: str = "", prefix: str = "") -> list[str]:
    return [format_tooltip_value(v, unit=unit, prefix=prefix) for v in values]


def _apply_layout(fig: go.Figure, height: int) -> go.Figure:
    fig.update_layout(
        height=height,
        plot_bgcolor="white",
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            xanchor="right",
            x=1,
        ),
        hovermode="x unified",
        margin=dict(t=40, r=30, l=20, b=20),
    )
    fig.update_yaxes(gridcolor=GRID, griddash="dash")
    return fig


def create_revenue_chart(df: pd.DataFrame) -> go.Figure:
    """Create revenue vs. gross profit chart with net income overlay.

    Args:
        df: DataFrame from enriched_to_dataframe

    Returns:
        Plotly figure
    """
    fig = make_subplots(specs=[[{"secondary_y": True}]])

    years = df["Fiscal Year"].astype(str)

    for column, name, color in [
        ("Revenue", "Total Revenue", SLATE),
        ("Gross Profit", "Gross Profit", RED),
    ]:
        fig.add_trace(
            go.Bar(
                x=years,
                y=df[column],
                name=name,
                marker_color=color,
                text=_hover_text(df[column], unit="M", prefix="$"),
                hovertemplate="%{text}<extra></extra>",
                textposition="none",
            ),
            secondary_y=False,
        )

    fig.add_trace(
        go.Scatter(
            x=years,
            y=df["Net Income"],
            mode="lines+markers",
            name="Net Income",
            line=dict(color=GREEN, width=3, shape="spline"),
            marker=dict(size=8, color=GREEN),
            text=_hover_text(df["Net Income"], unit="M", prefix="$"),
            hovertemplate="%{text}<extra></extra>",
        ),
        secondary_y=True,
    )

    _apply_layout(fig, height=380)
    fig.update_yaxes(
        tickvals=[0, 10000, 20000, 30000, 40000],
        ticktext=["$0B", "$10B", "$20B", "$30B", "$40B"],
        range=[0, 40000],
        secondary_y=False,
    )
    fig.update_yaxes(
        tickprefix="$",
        ticksuffix="M",
        tickfont=dict(color=GREEN),
        showgrid=False,
        secondary_y=True,
    )

    return fig


def create_margin_chart(df: pd.DataFrame) -> go.Figure:
    """Create profit margin chart.

    Args:
        df: DataFrame with margin data

    Returns:
        Plotly figure
    """
    fig = go.Figure()

    years = df["Fiscal Year"].astype(str)

    metrics = [
        ("Gross Margin (%)", RED, "Gross Margin"),
        ("Operating Margin (%)", SLATE, "Operating Margin"),
        ("Net Margin (%)", GREEN, "Net Margin"),
    ]

    for col_name, color, display_name in metrics:
        fig.add_trace(
            go.Scatter(
                x=years,
                y=df[col_name],
                mode="lines+markers",
                name=display_name,
                line=dict(color=color, width=2, shape="spline"),
                marker=dict(size=8),
                text=_hover_text(df[col_name], unit="%"),
                hovertemplate=f"{display_name}: %{{text}}<extra></extra>",
            )
        )

    fig.add_hline(y=0, line_color=MUTED)

    _apply_layout(fig, height=380)
    fig.update_yaxes(ticksuffix="%")

    return fig


def create_liquidity_chart(df: pd.DataFrame) -> go.Figure:
    """Create current and quick ratio chart with the 1.0 threshold."""
    fig = go.Figure()

    years = df["Fiscal Year"].astype(str)

    for col_name, color in [("Current Ratio", SLATE), ("Quick Ratio", RED)]:
        fig.add_trace(
            go.Bar(
                x=years,
                y=df[col_name],
                name=col_name,
                marker_color=color,
                text=_hover_text(df[col_name]),
                hovertemplate=f"{col_name}: %{{text}}<extra></extra>",
                textposition="none",
            )
        )

    fig.add_hline(
        y=1,
        line_dash="dash",
        line_color=MUTED,
        annotation_text="Target > 1.0",
        annotation_position="right",
        annotation_font=dict(color=MUTED, size=10),
    )

    _apply_layout(fig, height=300)

    return fig


def create_capital_structure_chart(df: pd.DataFrame) -> go.Figure:
    """Create total liabilities vs. equity area chart."""
    fig = go.Figure()

    years = df["Fiscal Year"].astype(str)

    for col_name, color, fill in [
        ("Total Liabilities", RED, "rgba(239, 68, 68, 0.1)"),
        ("Total Equity", GREEN, "rgba(16, 185, 129, 0.1)"),
    ]:
        fig.add_trace(
            go.Scatter(
                x=years,
                y=df[col_name],
                mode="lines",
                name=col_name,
                line=dict(color=color, shape="spline"),
                fill="tozeroy",
                fillcolor=fill,
                text=_hover_text(df[col_name], unit="M", prefix="$"),
                hovertemplate=f"{col_name}: %{{text}}<extra></extra>",
            )
        )

    _apply_layout(fig, height=300)
    fig.update_yaxes(
        tickvals=[0, 10000, 20000, 30000],
        ticktext=["$0B", "$10B", "$20B", "$30B"],
    )

    return fig


def create_efficiency_chart(df: pd.DataFrame) -> go.Figure:
    """Create turnover ratios chart with DSO on a secondary axis."""
    fig = make_subplots(specs=[[{"secondary_y": True}]])

    years = df["Fiscal Year"].astype(str)

    for col_name, color in [("Inventory Turnover", SLATE), ("Asset Turnover", RED)]:
        fig.add_trace(
            go.Bar(
                x=years,
                y=df[col_name],
                name=col_name,
                marker_color=color,
                text=_hover_text(df[col_name], unit="x"),
                hovertemplate=f"{col_name}: %{{text}}<extra></extra>",
                textposition="none",
            ),
            secondary_y=False,
        )

    fig.add_trace(
        go.Scatter(
            x=years,
            y=df["DSO (days)"],
            mode="lines+markers",
            name="DSO (days)",
            line=dict(color=GREEN, width=2),
            marker=dict(size=8),
            text=_hover_text(df["DSO (days)"], unit=" days"),
            hovertemplate="DSO: %{text}<extra></extra>",
        ),
        secondary_y=True,
    )

    _apply_layout(fig, height=300)
    fig.update_yaxes(title_text="Turnover (x)", secondary_y=False)
    fig.update_yaxes(title_text="Days", showgrid=False, secondary_y=True)

    return fig
