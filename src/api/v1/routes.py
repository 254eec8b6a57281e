"""
API v1 routes.

Defines REST endpoints for the UAE gratuity calculator client.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.adapters.connectivity import ConnectivityMonitor
from src.api.dependencies import get_monitor, get_session
from src.api.models import (
    CalculateRequest,
    CalculationStateResponse,
    ConfigurationView,
    ConnectivityRequest,
    ErrorResponse,
    ResultsResponse,
)
from src.domain.calculator import CalculatorSession
from src.domain.exceptions import ApiError, FormValidationError
from src.domain.form import CalculatorForm
from src.domain.models import EOSBCalculationResult
from src.domain.results import build_results_view

router = APIRouter(tags=["v1"])


def _results_response(result: EOSBCalculationResult | None) -> ResultsResponse | None:
    if result is None:
        return None
    return ResultsResponse.model_validate(build_results_view(result))


@router.get(
    "/config",
    response_model=ConfigurationView,
    summary="Get form configuration",
    description="Termination and contract type options, plus the configuration "
    "loading state and error banner text.",
)
def get_configuration(
    session: CalculatorSession = Depends(get_session),
) -> ConfigurationView:
    """Return the options the calculator form offers."""
    return ConfigurationView.from_session(session)


@router.post(
    "/config/refresh",
    response_model=ConfigurationView,
    summary="Refresh form configuration",
    description="Re-fetch the configuration from the remote API. "
    "Previous options are kept if the refresh fails.",
)
def refresh_configuration(
    session: CalculatorSession = Depends(get_session),
) -> ConfigurationView:
    session.refresh_configuration()
    return ConfigurationView.from_session(session)


@router.post(
    "/calculate",
    response_model=ResultsResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Form validation error"},
        502: {"model": ErrorResponse, "description": "Remote API error"},
        503: {"model": ErrorResponse, "description": "Configuration not loaded"},
    },
    summary="Calculate end-of-service gratuity",
    description="Validate the form fields and request a calculation "
    "from the remote EOSB API.",
)
def calculate(
    request_data: CalculateRequest,
    session: CalculatorSession = Depends(get_session),
) -> ResultsResponse:
    """
    Submit the calculator form.

    - **basicSalary**: Monthly basic salary, must be a positive number
    - **terminationType**: One of the configured termination type values
    - **isUnlimitedContract**: One of the configured contract type values
    - **joiningDate** / **lastWorkingDay**: Service period, in order
    """
    configuration = session.configuration
    if configuration is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=session.configuration_error_message() or "Configuration not loaded",
        )

    form = CalculatorForm(
        basic_salary=request_data.basic_salary,
        joining_date=request_data.joining_date,
        last_working_day=request_data.last_working_day,
    )
    form.select_termination_type(request_data.termination_type, configuration.termination_types)
    form.select_contract_type(request_data.is_unlimited_contract, configuration.contract_types)

    try:
        result = session.calculate(form)
    except FormValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message) from None
    except ApiError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message) from None

    return _results_response(result)


@router.get(
    "/calculation",
    response_model=CalculationStateResponse,
    summary="Get current calculation state",
)
def get_calculation(
    session: CalculatorSession = Depends(get_session),
) -> CalculationStateResponse:
    return CalculationStateResponse(
        is_calculating=session.is_calculating,
        error=session.error_message,
        result=_results_response(session.calculation_result),
    )


@router.delete(
    "/calculation",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear the current result",
)
def clear_calculation(session: CalculatorSession = Depends(get_session)) -> None:
    session.clear_calculation()


@router.delete(
    "/calculation/error",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Dismiss the calculation error",
)
def dismiss_calculation_error(session: CalculatorSession = Depends(get_session)) -> None:
    session.dismiss_error()


@router.post(
    "/connectivity",
    response_model=ConfigurationView,
    summary="Report network connectivity",
    description="Record a connectivity observation from the client. Coming back "
    "online while the configuration failed to load re-fetches it once. Later "
    "background polls overwrite the reported state.",
)
def report_connectivity(
    request_data: ConnectivityRequest,
    monitor: ConnectivityMonitor = Depends(get_monitor),
    session: CalculatorSession = Depends(get_session),
) -> ConfigurationView:
    monitor.report(request_data.is_connected)
    return ConfigurationView.from_session(session)
