"""HTTP implementation of FrequentFlyerNumberValidator."""

import time
from typing import Any, Dict, Optional

import httpx
import structlog

from card_gateway.core.config import settings
from card_gateway.domain.entities import License, ServiceInformation
from card_gateway.domain.exceptions import (
    FrequentFlyerValidatorException,
    FrequentFlyerValidatorTimeoutException,
)
from card_gateway.domain.interfaces import FrequentFlyerNumberValidator

logger = structlog.get_logger(__name__)


class HttpFrequentFlyerNumberValidator(FrequentFlyerNumberValidator):
    """
    HTTP client for the frequent-flyer validation service.

    Sends the current validation_mode with every lookup and retries
    timeouts with exponential backoff.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        license_key: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._base_url = base_url or settings.frequent_flyer_api_url
        self._timeout = timeout or settings.frequent_flyer_api_timeout
        self._max_retries = max_retries or settings.frequent_flyer_max_retries
        self._service_information = ServiceInformation(
            license=License(license_key or settings.frequent_flyer_license_key)
        )
        self._transport = transport

    @property
    def service_information(self) -> ServiceInformation:
        return self._service_information

    def is_valid(self, frequent_flyer_number: Optional[str]) -> bool:
        """
        Ask the validation service whether a frequent-flyer number is valid.

        An empty or missing number is sent as an empty string; the service
        decides whether that is acceptable.
        """
        url = f"{self._base_url}/frequent-flyer/validate"
        params = {
            "number": frequent_flyer_number or "",
            "mode": self.validation_mode.value,
        }

        last_exception = None

        for attempt in range(self._max_retries):
            try:
                with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                    response = client.get(url, params=params)

                if response.status_code >= 400:
                    raise FrequentFlyerValidatorException(
                        message=f"Frequent-flyer service error: {response.text}",
                        status_code=response.status_code,
                    )

                return self._parse_validity(response.json())

            except httpx.TimeoutException:
                last_exception = FrequentFlyerValidatorTimeoutException()
                logger.warning(
                    "frequent_flyer_api_timeout",
                    attempt=attempt + 1,
                    max_retries=self._max_retries,
                )
            except FrequentFlyerValidatorException:
                raise
            except Exception as e:
                last_exception = FrequentFlyerValidatorException(
                    message=f"Unexpected error: {str(e)}",
                )
                logger.error(
                    "frequent_flyer_api_error",
                    attempt=attempt + 1,
                    error=str(e),
                )

            # Exponential backoff
            if attempt < self._max_retries - 1:
                time.sleep(2**attempt * 0.1)

        raise last_exception or FrequentFlyerValidatorException(
            "Failed to validate frequent-flyer number"
        )

    def _parse_validity(self, data: Dict[str, Any]) -> bool:
        """Parse the service response into a validity flag."""
        valid = data.get("valid")
        if not isinstance(valid, bool):
            raise FrequentFlyerValidatorException(
                message=f"Malformed response from frequent-flyer service: {data!r}",
            )
        return valid
