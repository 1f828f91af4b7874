"""Domain Entities - Core business objects."""

from .application import CreditCardApplication
from .decision import ApplicationDecision
from .validation import (
    EXPIRED_LICENSE_KEY,
    License,
    ServiceInformation,
    ValidationMode,
)

__all__ = [
    "CreditCardApplication",
    "ApplicationDecision",
    "EXPIRED_LICENSE_KEY",
    "License",
    "ServiceInformation",
    "ValidationMode",
]
