"""
Domain Interfaces (Ports)
"""

from .validators import FrequentFlyerNumberValidator
from .fraud import FraudScreener

__all__ = [
    "FrequentFlyerNumberValidator",
    "FraudScreener",
]
