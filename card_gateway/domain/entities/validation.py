"""Frequent-flyer validation service metadata."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

EXPIRED_LICENSE_KEY = "EXPIRED"


class ValidationMode(str, Enum):
    """Lookup depth requested from the frequent-flyer validator."""
    QUICK = "quick"
    DETAILED = "detailed"


@dataclass(frozen=True)
class License:
    """License held by the validation service."""

    license_key: Optional[str] = None


@dataclass(frozen=True)
class ServiceInformation:
    """Metadata reported by the validation service."""

    license: License = field(default_factory=License)
