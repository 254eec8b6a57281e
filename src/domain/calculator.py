"""
Calculator session - Client state for the configuration and calculation flows.

Session Flows
=============

Configuration:
    load_configuration()     loading -> (configuration | configuration_error)
    refresh_configuration()  same fetch, previous configuration kept on failure

Calculation:
    calculate(form)          calculating -> (calculation_result | error_message)

Connectivity:
    connectivity_changed()   offline -> online with a configuration error
                             triggers exactly one load_configuration()

Every failure is stored as a user-facing message. Nothing is retried
automatically apart from the reconnect re-fetch.

The session is shared by concurrent request workers and the connectivity
monitor thread. Configuration flows are serialized by one lock, held across
the fetch; calculation state updates take a second lock, but the remote
calls themselves run unlocked.
"""

import logging
import threading
from dataclasses import dataclass, field

from .exceptions import NO_INTERNET_MESSAGE, ApiError, GratuityClientError
from .form import CalculatorForm
from .models import ConfigurationData, ContractOption, DropdownOption, EOSBCalculationResult
from .ports import EosbApi

logger = logging.getLogger(__name__)


@dataclass
class CalculatorSession:
    """
    Domain service holding the state a calculator screen renders.

    Orchestrates calls to the remote API and records their outcome;
    it never computes gratuity itself.
    """

    api: EosbApi
    configuration: ConfigurationData | None = None
    is_loading_configuration: bool = False
    configuration_error: str | None = None
    calculation_result: EOSBCalculationResult | None = None
    error_message: str | None = None
    is_connected: bool | None = None
    _calculations_in_flight: int = field(default=0, init=False, repr=False)
    _config_lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False, compare=False)
    _calculation_lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    @property
    def is_calculating(self) -> bool:
        return self._calculations_in_flight > 0

    @property
    def termination_options(self) -> list[DropdownOption]:
        configuration = self.configuration
        return configuration.termination_types if configuration else []

    @property
    def contract_options(self) -> list[ContractOption]:
        configuration = self.configuration
        return configuration.contract_types if configuration else []

    def load_configuration(self) -> ConfigurationData | None:
        """
        Fetch the form configuration.

        Returns:
            The loaded configuration, or None if the fetch failed
        """
        with self._config_lock:
            self.is_loading_configuration = True
            self.configuration_error = None
            try:
                return self._fetch_configuration()
            finally:
                self.is_loading_configuration = False

    def refresh_configuration(self) -> ConfigurationData | None:
        """
        Re-fetch the configuration on explicit user request.

        Unlike load_configuration() the loading flag is left alone, so the
        current options stay usable while the refresh is in flight.
        """
        with self._config_lock:
            self.configuration_error = None
            return self._fetch_configuration()

    def calculate(self, form: CalculatorForm) -> EOSBCalculationResult:
        """
        Validate the form and request a calculation.

        The outcome is recorded on the session for display, and also handed
        back to the caller so it never has to re-read shared state.

        Returns:
            The calculation result

        Raises:
            FormValidationError: The form failed client-side validation
            ApiError: The remote request failed
        """
        with self._calculation_lock:
            self._calculations_in_flight += 1
            self.error_message = None
        try:
            employee = form.to_employee_data()
            result = self.api.calculate(employee)
        except GratuityClientError as e:
            logger.warning("Calculation failed: %s", e.message)
            with self._calculation_lock:
                self.calculation_result = None
                self.error_message = e.message
            raise
        finally:
            with self._calculation_lock:
                self._calculations_in_flight -= 1

        logger.info(
            "Calculation complete: eligible=%s gratuity=%.2f",
            result.is_eligible,
            result.gratuity_amount,
        )
        with self._calculation_lock:
            self.calculation_result = result
        return result

    def dismiss_error(self) -> None:
        with self._calculation_lock:
            self.error_message = None

    def clear_calculation(self) -> None:
        """Drop the current result and any calculation error."""
        with self._calculation_lock:
            self.calculation_result = None
            self.error_message = None

    def reset_form(self, form: CalculatorForm) -> None:
        """Clear the form together with any result or error shown for it."""
        form.reset()
        self.clear_calculation()

    def connectivity_changed(self, is_connected: bool) -> bool:
        """
        Record a connectivity report.

        A transition to connected while a configuration error is showing
        re-fetches the configuration once. Repeated reports of the same
        state do nothing, including reports that arrive while the
        re-fetch is still running.

        Returns:
            True if a configuration re-fetch was triggered
        """
        with self._config_lock:
            was_connected = self.is_connected
            self.is_connected = is_connected
            if not is_connected or was_connected is True:
                return False
            if self.configuration_error is None:
                return False

            logger.info("Connectivity restored, reloading configuration")
            self.load_configuration()
            return True

    def configuration_error_message(self) -> str | None:
        """Message for the configuration error banner, None when there is none."""
        error = self.configuration_error
        if error is None:
            return None
        if self.is_connected is False:
            return NO_INTERNET_MESSAGE
        return error

    def _fetch_configuration(self) -> ConfigurationData | None:
        try:
            configuration = self.api.fetch_configuration()
        except ApiError as e:
            logger.warning("Configuration fetch failed: %s", e.message)
            self.configuration_error = e.message
            return None

        logger.info(
            "Configuration loaded: %d termination types, %d contract types",
            len(configuration.termination_types),
            len(configuration.contract_types),
        )
        self.configuration = configuration
        self.configuration_error = None
        return configuration
