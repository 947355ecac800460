"""Errors raised by the strict metrics mode."""

from typing import Optional


class MetricsError(ValueError):
    """Base class for metric calculation failures."""


class InvalidInputError(MetricsError):
    """Input records cannot be transformed."""


class DivisionByZeroError(MetricsError):
    """A ratio's denominator is zero."""

    def __init__(self, field: str, year: Optional[str] = None):
        self.field = field
        self.year = year
        where = f" for {year}" if year else ""
        super().__init__(f"Zero denominator computing {field}{where}")
