"""
Domain layer - Calculator client logic with zero web framework imports.

This package holds the remote API records, the form and its validation,
the session state driving the configuration and calculation flows, and
the results presentation. Infrastructure is reached only through the
port interfaces defined here.
"""

from .calculator import CalculatorSession
from .exceptions import (
    ApiError,
    FormValidationError,
    GratuityClientError,
    NetworkError,
    ServerError,
)
from .form import CalculatorForm
from .ports import ConnectivityProbe, EosbApi
from .results import ResultsView, build_results_view

__all__ = [
    "ApiError",
    "CalculatorForm",
    "CalculatorSession",
    "ConnectivityProbe",
    "EosbApi",
    "FormValidationError",
    "GratuityClientError",
    "NetworkError",
    "ResultsView",
    "ServerError",
    "build_results_view",
]
