"""
Domain exceptions - User-facing error types for the calculator client.

Every error carries the message shown to the user. Errors split into two
families: failures at the remote API boundary and client-side form checks.
"""

NO_INTERNET_MESSAGE = "No internet connection. Please check your connection and try again."


class GratuityClientError(Exception):
    """Base class for calculator client errors."""

    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ApiError(GratuityClientError):
    """Base class for failures talking to the remote EOSB API."""

    pass


class NetworkError(ApiError):
    """Remote API could not be reached."""

    default_message = "Network connection failed. Please check your internet connection."


class RequestTimeout(ApiError):
    """Remote API did not answer in time."""

    default_message = "Request timed out. Please try again."


class ServerError(ApiError):
    """Remote API answered with a non-200 status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Server error with code: {status_code}")


class RemoteValidationError(ApiError):
    """Remote API rejected the submitted employee data (HTTP 400)."""

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or "Validation failed"
        super().__init__(f"Validation error: {self.detail}")


class DecodingError(ApiError):
    """Response body was not valid JSON or did not match the schema."""

    default_message = "Failed to decode response data"


class EncodingError(ApiError):
    """Request body could not be encoded."""

    default_message = "Failed to encode request data"


class RemoteOperationFailed(ApiError):
    """Remote API answered 200 but reported failure or returned no data."""

    default_message = "Unknown error"


class FormValidationError(GratuityClientError):
    """Base class for client-side form validation failures."""

    pass


class InvalidBasicSalary(FormValidationError):
    default_message = "Please enter a valid basic salary amount"


class MissingTerminationType(FormValidationError):
    default_message = "Please select a termination type"


class MissingContractType(FormValidationError):
    default_message = "Please select a contract type"


class InvalidDateRange(FormValidationError):
    default_message = "Last working day must be after joining date"
