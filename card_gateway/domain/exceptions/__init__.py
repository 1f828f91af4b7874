"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .evaluation import (
    InvalidApplicationException,
    InvalidEvaluatorConfigurationException,
)
from .validator import (
    FrequentFlyerValidatorException,
    FrequentFlyerValidatorTimeoutException,
)

__all__ = [
    "DomainException",
    "InvalidApplicationException",
    "InvalidEvaluatorConfigurationException",
    "FrequentFlyerValidatorException",
    "FrequentFlyerValidatorTimeoutException",
]
