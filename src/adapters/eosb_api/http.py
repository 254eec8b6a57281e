"""
HTTP EOSB API adapter - Implements EosbApi protocol.

This module provides the httpx implementation of the domain's remote API
port. Every call is a single request/response; failures are classified
into the domain's ApiError types and never retried here.

Endpoints:
- GET  /api/eosb/config     -> ApiResponse[ConfigurationData]
- POST /api/eosb/calculate  -> ApiResponse[EOSBCalculationResult]
- GET  /api/eosb/health     -> 200 when available
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from src.domain.exceptions import (
    DecodingError,
    EncodingError,
    NetworkError,
    RemoteOperationFailed,
    RemoteValidationError,
    RequestTimeout,
    ServerError,
)
from src.domain.models import (
    ApiResponse,
    ConfigurationData,
    EmployeeData,
    EOSBCalculationResult,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

CONFIG_PATH = "/api/eosb/config"
CALCULATE_PATH = "/api/eosb/calculate"
HEALTH_PATH = "/api/eosb/health"


class HttpEosbApi:
    """
    Implements EosbApi protocol via httpx.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Owns its httpx.Client unless one is injected (tests pass a client
    built on httpx.MockTransport).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 15.0,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize adapter.

        Args:
            base_url: Remote service root, without trailing path
            timeout: Per-request timeout in seconds
            client: Optional pre-built client; closed by the caller
        """
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout)

    def fetch_configuration(self) -> ConfigurationData:
        response = self._send("GET", CONFIG_PATH)
        if response.status_code != 200:
            raise ServerError(response.status_code)

        envelope = self._decode(response, ApiResponse[ConfigurationData])
        if not envelope.success or envelope.data is None:
            raise RemoteOperationFailed(envelope.error or "Unknown error")
        return envelope.data

    def calculate(self, employee: EmployeeData) -> EOSBCalculationResult:
        try:
            payload = employee.to_wire()
        except PydanticSerializationError:
            raise EncodingError() from None

        response = self._send(
            "POST",
            CALCULATE_PATH,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        if response.status_code != 200:
            if response.status_code == 400:
                # Validation failures come back in the usual envelope
                try:
                    envelope = ApiResponse[Any].model_validate_json(response.content)
                except ValidationError:
                    pass
                else:
                    raise RemoteValidationError(envelope.error)
            raise ServerError(response.status_code)

        envelope = self._decode(response, ApiResponse[EOSBCalculationResult])
        if not envelope.success or envelope.data is None:
            raise RemoteOperationFailed(envelope.error or "Calculation failed")
        return envelope.data

    def check_health(self) -> bool:
        try:
            response = self._client.get(HEALTH_PATH)
        except httpx.RequestError as e:
            logger.debug("Health check failed: %s", e)
            return False
        return response.status_code == 200

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpEosbApi":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Issue one request, translating transport failures."""
        try:
            return self._client.request(method, path, **kwargs)
        except httpx.TimeoutException:
            logger.warning("%s %s timed out", method, path)
            raise RequestTimeout() from None
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise NetworkError() from None

    def _decode(self, response: httpx.Response, model: type[M]) -> M:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning("Undecodable response from %s: %s", response.url, e)
            raise DecodingError() from None
