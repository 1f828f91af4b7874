"""Frequent-flyer number validator interface."""

from abc import ABC, abstractmethod
from typing import Optional

from card_gateway.domain.entities import ServiceInformation, ValidationMode


class FrequentFlyerNumberValidator(ABC):
    """
    Abstract client for the frequent-flyer number validation service.

    The evaluator writes ``validation_mode`` before each lookup; callers
    may read it back afterwards to see which mode was requested.
    """

    validation_mode: ValidationMode = ValidationMode.QUICK

    @property
    @abstractmethod
    def service_information(self) -> ServiceInformation:
        """Metadata about the validation service, including its license."""
        ...

    @abstractmethod
    def is_valid(self, frequent_flyer_number: Optional[str]) -> bool:
        """
        Check whether a frequent-flyer number is valid.

        Args:
            frequent_flyer_number: The number to check (may be empty or None)

        Returns:
            True if the number is valid

        Raises:
            FrequentFlyerValidatorException: If the service returns an error
            FrequentFlyerValidatorTimeoutException: If the request times out
        """
        ...
