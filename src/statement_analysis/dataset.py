"""Tesla, Inc. figures from the FY2018-FY2020 10-K filings."""

from statement_analysis.models import CompanyProfile, RawYearRecord

COMPANY = CompanyProfile(
    name="Tesla, Inc.",
    ticker="TSLA",
    source="SEC 10-K filings (2018-2020)",
)

# Millions of USD, ascending by fiscal year.
FINANCIAL_DATA: tuple[RawYearRecord, ...] = (
    RawYearRecord(
        year="2018",
        revenue=21461,
        cost_of_revenue=17419,
        gross_profit=4042,
        operating_expenses=4430,
        ebit=-388,
        net_income=-976,  # attributable to common stockholders
        interest_expense=663,
        cash=3686,
        current_assets=8307,
        current_liabilities=9993,
        inventory=3113,
        total_assets=29740,
        total_liabilities=23427,
        equity=4923,
        accounts_receivable=949,
    ),
    RawYearRecord(
        year="2019",
        revenue=24578,
        cost_of_revenue=20509,
        gross_profit=4069,
        operating_expenses=4138,
        ebit=-69,
        net_income=-862,
        interest_expense=685,
        cash=6268,
        current_assets=12103,
        current_liabilities=10667,
        inventory=3552,
        total_assets=34309,
        total_liabilities=26199,
        equity=6618,
        accounts_receivable=1324,
    ),
    RawYearRecord(
        year="2020",
        revenue=31536,
        cost_of_revenue=24906,
        gross_profit=6630,
        operating_expenses=4636,
        ebit=1994,
        net_income=721,
        interest_expense=748,
        cash=19384,
        current_assets=26717,
        current_liabilities=14248,
        inventory=4101,
        total_assets=52148,
        total_liabilities=28418,
        equity=22225,
        accounts_receivable=1886,
    ),
)
