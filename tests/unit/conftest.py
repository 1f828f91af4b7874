"""
Fixtures for unit tests.

Provides:
- A mocked frequent-flyer number validator with a valid license
- Hand-written validator and fraud screener doubles
- An evaluator wired to the mocked validator
"""

from typing import List, Optional
from unittest.mock import MagicMock

import pytest

from card_gateway.domain.entities import (
    CreditCardApplication,
    License,
    ServiceInformation,
    ValidationMode,
)
from card_gateway.domain.interfaces import FraudScreener, FrequentFlyerNumberValidator
from card_gateway.service.evaluation import CreditCardApplicationEvaluator


# =============================================================================
# Test Doubles
# =============================================================================

class StubFrequentFlyerNumberValidator(FrequentFlyerNumberValidator):
    """Validator double with a fixed answer that records lookups."""

    def __init__(
        self,
        result: bool = True,
        license_key: Optional[str] = "OK",
        error: Optional[Exception] = None,
    ):
        self.result = result
        self.error = error
        self.lookups: List[Optional[str]] = []
        self._service_information = ServiceInformation(license=License(license_key))

    @property
    def service_information(self) -> ServiceInformation:
        return self._service_information

    def is_valid(self, frequent_flyer_number: Optional[str]) -> bool:
        self.lookups.append(frequent_flyer_number)

        if self.error is not None:
            raise self.error

        return self.result


class FlagEverythingFraudScreener(FraudScreener):
    """Fraud screener double that flags every application."""

    def is_fraud_risk(self, application: CreditCardApplication) -> bool:
        return True


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def mock_validator() -> MagicMock:
    """Validator mock with a valid license that accepts every number."""
    validator = MagicMock(spec=FrequentFlyerNumberValidator)
    validator.service_information.license.license_key = "OK"
    validator.is_valid.return_value = True
    validator.validation_mode = ValidationMode.QUICK
    return validator


@pytest.fixture
def evaluator(mock_validator: MagicMock) -> CreditCardApplicationEvaluator:
    """Evaluator without a fraud screener."""
    return CreditCardApplicationEvaluator(mock_validator)
