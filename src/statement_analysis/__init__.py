"""Financial statement analysis for a fixed three-year dataset."""

from statement_analysis.models import (
    CompanyProfile,
    EnrichedYearRecord,
    KPICard,
    RawYearRecord,
)
from statement_analysis.dataset import COMPANY, FINANCIAL_DATA
from statement_analysis.errors import DivisionByZeroError, InvalidInputError, MetricsError
from statement_analysis.metrics import calculate_metrics
from statement_analysis.summary import build_kpi_cards
from statement_analysis.transformer import enriched_to_dataframe

__all__ = [
    "CompanyProfile",
    "EnrichedYearRecord",
    "KPICard",
    "RawYearRecord",
    "COMPANY",
    "FINANCIAL_DATA",
    "DivisionByZeroError",
    "InvalidInputError",
    "MetricsError",
    "calculate_metrics",
    "build_kpi_cards",
    "enriched_to_dataframe",
]
