"""Mews Connector API gateway client."""

import time
from typing import Any, Optional

import httpx
from structlog import get_logger

from src.config import MewsSettings, settings

logger = get_logger(__name__)

DEFAULT_ERROR_STATUS = 500


class ConnectorError(Exception):
    """Base exception for connector failures.

    Every variant carries a machine-readable error_code and an HTTP-like code
    so callers can translate it without inspecting the exception type.
    """

    error_code = "connector_error"

    def __init__(self, message: str, code: int = DEFAULT_ERROR_STATUS):
        super().__init__(message)
        self.message = message
        self.code = code

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for a response body."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "code": self.code,
        }


class PmsRequestFailedError(ConnectorError):
    """Raised when a Mews request fails with a non-2xx status or a transport error."""

    error_code = "mews_api_error"

    def __init__(
        self,
        endpoint: str,
        status: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        self.endpoint = endpoint
        self.status = status or DEFAULT_ERROR_STATUS
        self.cause = cause
        super().__init__(f"Mews API request failed: {endpoint}", self.status)


class NoBookableServicesError(ConnectorError):
    """Raised when a property has no active, Day-based bookable service."""

    error_code = "no_bookable_services"

    def __init__(self, property_id: str):
        self.property_id = property_id
        super().__init__("No bookable services found", 404)


class MewsClient:
    """Authenticated gateway to the Mews Connector API.

    Every request is a JSON POST whose body carries the client credentials.
    Transport failures (timeouts, connection errors) are retried a fixed number
    of times with a fixed delay; non-2xx responses fail immediately.
    """

    def __init__(self, mews_settings: Optional[MewsSettings] = None):
        """Initialize the client from Mews settings.

        Args:
            mews_settings: Explicit configuration; the global settings are used when omitted
        """
        config = mews_settings or settings.mews
        self.base_url = config.api_base_url.rstrip("/")
        self.client_token = config.client_token
        self.access_token = config.access_token
        self.client_name = config.client
        self.timeout = config.timeout
        self.retry_times = max(1, config.retry_times)
        self.retry_delay = config.retry_delay_ms / 1000

    def _get_credentials(self) -> dict[str, str]:
        return {
            "ClientToken": self.client_token,
            "AccessToken": self.access_token,
            "Client": self.client_name,
        }

    def post(self, endpoint: str, data: Optional[dict[str, Any]] = None) -> Any:
        """POST to a Mews endpoint with retry on transport failures.

        Args:
            endpoint: API endpoint path (without base URL)
            data: Request body fields, merged over the credentials

        Returns:
            Decoded JSON response body

        Raises:
            PmsRequestFailedError: On non-2xx status or when retries are exhausted
        """
        url = f"{self.base_url}{endpoint}"
        body = {**self._get_credentials(), **(data or {})}

        for attempt in range(1, self.retry_times + 1):
            try:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.post(
                        url,
                        json=body,
                        headers={"Content-Type": "application/json"},
                    )
            except httpx.TransportError as e:
                if attempt < self.retry_times:
                    logger.warning(
                        "Mews request transport error, retrying",
                        endpoint=endpoint,
                        error=str(e),
                        attempt=attempt,
                        max_attempts=self.retry_times,
                    )
                    time.sleep(self.retry_delay)
                    continue
                logger.error(
                    "Mews request transport error, retries exhausted",
                    endpoint=endpoint,
                    error=str(e),
                )
                raise PmsRequestFailedError(endpoint, cause=e) from e

            if not response.is_success:
                logger.error(
                    "Mews request failed",
                    endpoint=endpoint,
                    status_code=response.status_code,
                    response_text=response.text[:200],
                )
                raise PmsRequestFailedError(endpoint, response.status_code)

            try:
                payload = response.json()
            except ValueError as e:
                logger.error(
                    "Mews response is not valid JSON",
                    endpoint=endpoint,
                    status_code=response.status_code,
                )
                raise PmsRequestFailedError(endpoint, cause=e) from e

            logger.debug(
                "Mews request successful",
                endpoint=endpoint,
                status_code=response.status_code,
                attempt=attempt,
            )
            return payload

        raise PmsRequestFailedError(endpoint)
