"""In-memory implementation of FrequentFlyerNumberValidator."""

from typing import Iterable, Optional

from card_gateway.domain.entities import License, ServiceInformation
from card_gateway.domain.interfaces import FrequentFlyerNumberValidator


class InMemoryFrequentFlyerNumberValidator(FrequentFlyerNumberValidator):
    """
    Validator backed by a fixed set of known numbers.

    Useful for local wiring and demos where the real validation
    service is not reachable.
    """

    def __init__(self, valid_numbers: Iterable[str], license_key: str = "OK"):
        self._valid_numbers = frozenset(valid_numbers)
        self._service_information = ServiceInformation(license=License(license_key))

    @property
    def service_information(self) -> ServiceInformation:
        return self._service_information

    def is_valid(self, frequent_flyer_number: Optional[str]) -> bool:
        return frequent_flyer_number in self._valid_numbers
