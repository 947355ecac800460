"""Financial metrics calculations."""

import logging
from collections.abc import Iterator, Sequence
from typing import Optional

import numpy as np

from statement_analysis.config import get_strict_metrics
from statement_analysis.errors import DivisionByZeroError, InvalidInputError
from statement_analysis.models import EnrichedYearRecord, RawYearRecord

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365


def divide(
    numerator: float,
    denominator: float,
    field: str = "ratio",
    year: Optional[str] = None,
    strict: bool = False,
) -> float:
    """Divide with IEEE-754 semantics for zero denominators.

    Args:
        numerator: Dividend
        denominator: Divisor
        field: Metric name, used in the strict-mode error
        year: Fiscal year label, used in the strict-mode error
        strict: Raise instead of returning inf/nan

    Returns:
        Quotient, or +/-inf or nan when the denominator is zero

    Raises:
        DivisionByZeroError: If strict and the denominator is zero
    """
    if strict and denominator == 0:
        raise DivisionByZeroError(field, year)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.divide(numerator, denominator))


def calculate_yoy_growth(
    current: float,
    previous: float,
    absolute_base: bool = False,
    field: str = "growth",
    year: Optional[str] = None,
    strict: bool = False,
) -> float:
    """Calculate year-over-year growth percentage.

    Args:
        current: Current period value
        previous: Previous period value
        absolute_base: Divide by abs(previous) so a shrinking loss reads as growth
        field: Metric name for error reporting
        year: Fiscal year label for error reporting
        strict: Raise on a zero base

    Returns:
        Growth percentage
    """
    base = abs(previous) if absolute_base else previous
    return divide(current - previous, base, field, year, strict) * 100


def average_with_previous(current: float, previous: Optional[float]) -> float:
    """Average a balance with its prior-period value, if there is one."""
    if previous is None:
        return current
    return (current + previous) / 2


def pairwise_with_previous(
    records: Sequence[RawYearRecord],
) -> Iterator[tuple[RawYearRecord, Optional[RawYearRecord]]]:
    """Yield each record with its positional predecessor (None for the first)."""
    previous = None
    for current in records:
        yield current, previous
        previous = current


def validate_records(records: Sequence[RawYearRecord]) -> None:
    """Check that records are non-empty and strictly ascending by year.

    Raises:
        InvalidInputError: If the sequence cannot be transformed
    """
    if not records:
        raise InvalidInputError("At least one fiscal year is required")

    for current, previous in pairwise_with_previous(records):
        if previous is not None and int(current.year) <= int(previous.year):
            raise InvalidInputError(
                f"Fiscal years must be ascending: {previous.year} then {current.year}"
            )


def enrich_record(
    item: RawYearRecord,
    prev: Optional[RawYearRecord] = None,
    strict: bool = False,
) -> EnrichedYearRecord:
    """Compute derived ratios for one fiscal year.

    Args:
        item: Current fiscal year
        prev: Preceding fiscal year, or None for the first year
        strict: Raise on zero denominators

    Returns:
        Record with growth, margin, liquidity, leverage and efficiency ratios
    """
    year = item.year

    def ratio(numerator: float, denominator: float, field: str) -> float:
        return divide(numerator, denominator, field, year, strict)

    # Growth
    if prev is not None:
        rev_growth = calculate_yoy_growth(
            item.revenue, prev.revenue, field="rev_growth", year=year, strict=strict
        )
        ni_growth = calculate_yoy_growth(
            item.net_income,
            prev.net_income,
            absolute_base=True,
            field="ni_growth",
            year=year,
            strict=strict,
        )
    else:
        rev_growth = 0.0
        ni_growth = 0.0

    # Margins
    gross_margin = ratio(item.gross_profit, item.revenue, "gross_margin") * 100
    operating_margin = ratio(item.ebit, item.revenue, "operating_margin") * 100
    net_margin = ratio(item.net_income, item.revenue, "net_margin") * 100

    # Liquidity
    current_ratio = ratio(item.current_assets, item.current_liabilities, "current_ratio")
    quick_ratio = ratio(
        item.current_assets - item.inventory, item.current_liabilities, "quick_ratio"
    )

    # Leverage
    debt_to_equity = ratio(item.total_liabilities, item.equity, "debt_to_equity")
    if item.interest_expense > 0:
        interest_coverage = item.ebit / item.interest_expense
    else:
        interest_coverage = 0.0

    # Efficiency
    avg_inventory = average_with_previous(
        item.inventory, prev.inventory if prev is not None else None
    )
    avg_assets = average_with_previous(
        item.total_assets, prev.total_assets if prev is not None else None
    )
    inventory_turnover = ratio(item.cost_of_revenue, avg_inventory, "inventory_turnover")
    asset_turnover = ratio(item.revenue, avg_assets, "asset_turnover")
    dso = ratio(item.accounts_receivable, item.revenue, "dso") * DAYS_PER_YEAR

    return EnrichedYearRecord(
        **item.model_dump(include=set(RawYearRecord.model_fields)),
        rev_growth=rev_growth,
        ni_growth=ni_growth,
        gross_margin=gross_margin,
        operating_margin=operating_margin,
        net_margin=net_margin,
        current_ratio=current_ratio,
        quick_ratio=quick_ratio,
        debt_to_equity=debt_to_equity,
        interest_coverage=interest_coverage,
        inventory_turnover=inventory_turnover,
        asset_turnover=asset_turnover,
        dso=dso,
    )


def calculate_metrics(
    records: Sequence[RawYearRecord],
    strict: Optional[bool] = None,
) -> list[EnrichedYearRecord]:
    """Calculate derived metrics for every fiscal year.

    Element i of the result is computed from records[i] and records[i - 1].
    The predecessor is positional, so a gap in fiscal years is not detected
    unless strict mode is on.

    By default nothing is validated and a zero denominator yields inf or nan
    rather than an error, so that the display layer decides how to render it.

    Args:
        records: Fiscal years in ascending order
        strict: Validate input and raise on zero denominators.
            Falls back to config when None.

    Returns:
        Enriched records, same length and order as the input

    Raises:
        InvalidInputError: If strict and the records are empty or out of order
        DivisionByZeroError: If strict and a denominator is zero
    """
    if strict is None:
        strict = get_strict_metrics()

    if strict:
        validate_records(records)

    enriched = [
        enrich_record(item, prev, strict=strict)
        for item, prev in pairwise_with_previous(records)
    ]

    non_finite = [
        record.year
        for record in enriched
        if not np.all(np.isfinite(list(record.model_dump(exclude={"year"}).values())))
    ]
    if non_finite:
        logger.warning("Non-finite metrics for fiscal years: %s", ", ".join(non_finite))

    logger.debug("Calculated metrics for %d fiscal years", len(enriched))
    return enriched
