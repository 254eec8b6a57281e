"""
Remote API records - Request and response shapes of the EOSB API.

These models mirror the remote service's JSON schema. Attributes are
snake_case in Python and camelCase on the wire.
"""

from datetime import date
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class WireModel(BaseModel):
    """Base for records exchanged with the remote API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        """Serialize to the camelCase JSON payload."""
        return self.model_dump(mode="json", by_alias=True)


class EmployeeData(WireModel):
    """Calculation request body."""

    basic_salary: float
    termination_type: str
    is_unlimited_contract: bool
    joining_date: date
    last_working_day: date


class ServicePeriod(WireModel):
    years: float
    rate: float
    amount: float


class CalculationBreakdown(WireModel):
    first_five_years: ServicePeriod
    additional_years: ServicePeriod


class EOSBCalculationResult(WireModel):
    """Gratuity calculation returned by the remote service."""

    total_service_years: float
    total_service_months: float
    total_service_days: float
    basic_salary_amount: float
    total_salary: float
    eligible_years: float
    gratuity_amount: float
    breakdown: CalculationBreakdown
    is_eligible: bool
    reason: str | None = None


class DropdownOption(WireModel):
    """Termination type option."""

    value: str
    label: str
    label_ar: str


class ContractOption(WireModel):
    """Contract type option (limited or unlimited)."""

    value: bool
    label: str
    label_ar: str


class ResignationPenalty(WireModel):
    less_than_one_year: float
    less_than_three_years: float
    less_than_five_years: float
    five_years_or_more: float


class CalculationRules(WireModel):
    minimum_service_days: int
    first_five_years_rate: float
    additional_years_rate: float
    resignation_penalty: ResignationPenalty


class ConfigurationData(WireModel):
    """Form configuration: valid termination and contract types."""

    termination_types: list[DropdownOption]
    contract_types: list[ContractOption]
    calculation_rules: CalculationRules


class ApiResponse(WireModel, Generic[T]):
    """Envelope wrapping every remote API response."""

    success: bool
    data: T | None = None
    message: str | None = None
    error: str | None = None
