"""Frequent-flyer validator domain exceptions."""

from .base import DomainException


class FrequentFlyerValidatorException(DomainException):
    """Raised when the frequent-flyer validation service returns an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="FREQUENT_FLYER_VALIDATOR_ERROR",
        )
        self.status_code = status_code


class FrequentFlyerValidatorTimeoutException(FrequentFlyerValidatorException):
    """Raised when the frequent-flyer validation service times out."""

    def __init__(self):
        super().__init__(
            message="Frequent-flyer validation request timed out",
            status_code=None,
        )
        self.code = "FREQUENT_FLYER_VALIDATOR_TIMEOUT"
