"""Pydantic models for financial statement data."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    """Immutable record with camelCase aliases."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RawYearRecord(_Record):
    """Single fiscal year of disclosed figures (millions of USD)."""

    year: str = Field(..., pattern=r"^\d{4}$", description="Fiscal year label")
    revenue: float = Field(..., description="Total revenue")
    cost_of_revenue: float = Field(..., description="Total cost of revenue")
    gross_profit: float = Field(..., description="Gross profit")
    operating_expenses: float = Field(..., description="Total operating expenses")
    ebit: float = Field(..., description="Income (loss) from operations")
    net_income: float = Field(
        ..., description="Net income attributable to common stockholders"
    )
    interest_expense: float = Field(..., description="Interest expense")
    cash: float = Field(..., description="Cash and cash equivalents")
    current_assets: float = Field(..., description="Total current assets")
    current_liabilities: float = Field(..., description="Total current liabilities")
    inventory: float = Field(..., description="Inventory")
    total_assets: float = Field(..., description="Total assets")
    total_liabilities: float = Field(..., description="Total liabilities")
    equity: float = Field(..., description="Total stockholders' equity")
    accounts_receivable: float = Field(..., description="Accounts receivable, net")


class EnrichedYearRecord(RawYearRecord):
    """Fiscal year figures with derived ratios."""

    rev_growth: float = Field(..., description="Revenue YoY growth %")
    ni_growth: float = Field(..., description="Net income YoY growth %")
    gross_margin: float = Field(..., description="Gross margin %")
    operating_margin: float = Field(..., description="Operating margin %")
    net_margin: float = Field(..., description="Net margin %")
    current_ratio: float
    quick_ratio: float
    debt_to_equity: float
    interest_coverage: float
    inventory_turnover: float
    asset_turnover: float
    dso: float = Field(..., description="Days sales outstanding")


class CompanyProfile(BaseModel):
    """Company the dataset describes."""

    name: str = Field(..., description="Company name")
    ticker: str = Field(..., description="Stock ticker symbol")
    source: str = Field(..., description="Where the figures were disclosed")
    currency: str = "USD"
    unit: str = Field("M", description="Unit suffix of currency figures")

    model_config = ConfigDict(frozen=True)


class KPICard(BaseModel):
    """Display-ready contents of a summary card."""

    title: str
    value: str
    sub_value: Optional[str] = None
    trend: Literal["up", "down"] = "up"
    trend_value: Optional[str] = None
    invert_color: bool = False

    @property
    def is_positive(self) -> bool:
        """Whether the trend reads as good news."""
        return (self.trend == "up") != self.invert_color
