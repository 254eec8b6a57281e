"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field names are camelCase on the wire, matching the remote EOSB API.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.calculator import CalculatorSession
from src.domain.models import CalculationRules, ContractOption, DropdownOption


class ApiModel(BaseModel):
    """Base for presentation models - camelCase aliases, built from attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ConfigurationView(ApiModel):
    """Form options and configuration loading state."""

    termination_types: list[DropdownOption]
    contract_types: list[ContractOption]
    calculation_rules: CalculationRules | None = None
    is_loading: bool = False
    error: str | None = Field(None, description="Configuration error banner text")

    @classmethod
    def from_session(cls, session: CalculatorSession) -> "ConfigurationView":
        return cls(
            termination_types=session.termination_options,
            contract_types=session.contract_options,
            calculation_rules=(
                session.configuration.calculation_rules if session.configuration else None
            ),
            is_loading=session.is_loading_configuration,
            error=session.configuration_error_message(),
        )


class CalculateRequest(ApiModel):
    """Request model for a gratuity calculation - the raw form fields."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    basic_salary: str = Field("", description="Monthly basic salary as typed")
    termination_type: str | None = Field(None, description="Termination type value from /v1/config")
    is_unlimited_contract: bool | None = Field(None, description="Contract type value from /v1/config")
    joining_date: date
    last_working_day: date


class ServicePeriodResponse(ApiModel):
    years: int
    months: int
    days: int


class BreakdownRowResponse(ApiModel):
    title: str
    years: str
    rate: str
    amount: str


class SummaryRowResponse(ApiModel):
    label: str
    value: str


class ResultsResponse(ApiModel):
    """Response model for a successful calculation."""

    is_eligible: bool
    headline: str
    title: str
    total_amount: str | None = None
    service_period: ServicePeriodResponse | None = None
    breakdown: list[BreakdownRowResponse] = []
    summary: list[SummaryRowResponse] = []
    reason: str | None = None


class CalculationStateResponse(ApiModel):
    """Current calculation state of the session."""

    is_calculating: bool
    error: str | None = None
    result: ResultsResponse | None = None


class ConnectivityRequest(ApiModel):
    """Request model for a connectivity report."""

    is_connected: bool


class HealthResponse(ApiModel):
    status: str
    remote: bool


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
