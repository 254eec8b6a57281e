"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .models import ConfigurationData, EmployeeData, EOSBCalculationResult


class EosbApi(Protocol):
    """Port interface for the remote EOSB calculation service."""

    def fetch_configuration(self) -> ConfigurationData:
        """
        Fetch the form configuration (termination and contract types).

        Returns:
            ConfigurationData decoded from the API envelope

        Raises:
            ApiError: On connectivity, status, decoding or reported failure
        """
        ...

    def calculate(self, employee: EmployeeData) -> EOSBCalculationResult:
        """
        Submit employee data and return the computed gratuity.

        Args:
            employee: Validated employee data

        Returns:
            EOSBCalculationResult decoded from the API envelope

        Raises:
            ApiError: On connectivity, status, decoding or reported failure
        """
        ...

    def check_health(self) -> bool:
        """
        Check remote availability.

        Returns:
            True if the health endpoint answers 200. Never raises.
        """
        ...


class ConnectivityProbe(Protocol):
    """Port interface for network reachability checks."""

    def is_reachable(self) -> bool:
        """Return True if the network path to the API is usable."""
        ...
