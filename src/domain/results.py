"""
Results presentation - Display-ready view of a calculation result.

Turns the remote EOSBCalculationResult into labelled, formatted values.
Amounts are shown in AED with thousands grouping and two decimals.
"""

from dataclasses import dataclass, field

from .models import EOSBCalculationResult, ServicePeriod

CURRENCY = "AED"
DEFAULT_NOT_ELIGIBLE_REASON = "Not eligible for gratuity"


def format_currency(amount: float) -> str:
    """Format an amount with grouping and exactly two decimals."""
    return f"{amount:,.2f}"


def format_aed(amount: float) -> str:
    return f"{CURRENCY} {format_currency(amount)}"


@dataclass
class ServicePeriodView:
    years: int
    months: int
    days: int


@dataclass
class BreakdownRow:
    title: str
    years: str
    rate: str
    amount: str


@dataclass
class SummaryRow:
    label: str
    value: str


@dataclass
class ResultsView:
    """Everything a results panel shows for one calculation."""

    is_eligible: bool
    headline: str
    title: str = "EOSB Calculation Results"
    total_amount: str | None = None
    service_period: ServicePeriodView | None = None
    breakdown: list[BreakdownRow] = field(default_factory=list)
    summary: list[SummaryRow] = field(default_factory=list)
    reason: str | None = None


def _breakdown_row(title: str, period: ServicePeriod) -> BreakdownRow:
    return BreakdownRow(
        title=title,
        years=f"{period.years:.1f} years",
        rate=f"{int(period.rate)} days per year",
        amount=format_aed(period.amount),
    )


def build_results_view(result: EOSBCalculationResult) -> ResultsView:
    """
    Build the results view for a calculation.

    Ineligible results carry only the headline and the reason. Eligible
    results list breakdown tiers that actually cover some service years.
    """
    if not result.is_eligible:
        return ResultsView(
            is_eligible=False,
            headline="Not Eligible for Gratuity",
            reason=result.reason or DEFAULT_NOT_ELIGIBLE_REASON,
        )

    breakdown = []
    if result.breakdown.first_five_years.years > 0:
        breakdown.append(_breakdown_row("First 5 Years", result.breakdown.first_five_years))
    if result.breakdown.additional_years.years > 0:
        breakdown.append(_breakdown_row("Additional Years", result.breakdown.additional_years))

    return ResultsView(
        is_eligible=True,
        headline="Eligible for Gratuity",
        total_amount=format_aed(result.gratuity_amount),
        service_period=ServicePeriodView(
            years=int(result.total_service_years),
            months=int(result.total_service_months),
            days=int(result.total_service_days),
        ),
        breakdown=breakdown,
        summary=[
            SummaryRow("Basic Salary", format_aed(result.basic_salary_amount)),
            SummaryRow("Total Salary", format_aed(result.total_salary)),
            SummaryRow("Eligible Years", f"{result.eligible_years:.2f}"),
            # Daily wage uses the 30-day month of UAE labour law
            SummaryRow("Daily Wage", format_aed(result.total_salary / 30)),
        ],
    )
