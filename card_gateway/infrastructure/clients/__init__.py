"""External API client implementations."""

from .frequent_flyer_client import HttpFrequentFlyerNumberValidator
from .in_memory_validator import InMemoryFrequentFlyerNumberValidator

__all__ = [
    "HttpFrequentFlyerNumberValidator",
    "InMemoryFrequentFlyerNumberValidator",
]
