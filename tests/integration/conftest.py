"""
Fixtures for integration tests.

Provides:
- A mock frequent-flyer validation service (httpx MockTransport)
- An evaluation service wired through the real dependency factories
"""

import logging
from typing import List, Set

import httpx
import pytest
import structlog

from card_gateway.application.services import EvaluationService
from card_gateway.core.dependencies import get_evaluator
from card_gateway.infrastructure.clients import HttpFrequentFlyerNumberValidator


# =============================================================================
# Mock Validation Service
# =============================================================================

class MockFrequentFlyerService:
    """Mock validation service that accepts a fixed set of numbers."""

    def __init__(self, valid_numbers: Set[str], fail_mode: bool = False):
        self.valid_numbers = valid_numbers
        self.fail_mode = fail_mode
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.fail_mode:
            return httpx.Response(500, text="validation service unavailable")

        number = request.url.params.get("number", "")
        return httpx.Response(200, json={"valid": number in self.valid_numbers})

    @property
    def modes(self) -> List[str]:
        return [r.url.params["mode"] for r in self.requests]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def frequent_flyer_service() -> MockFrequentFlyerService:
    return MockFrequentFlyerService(valid_numbers={"AB123", "CD456"})


def build_service(
    frequent_flyer_service: MockFrequentFlyerService,
    license_key: str = "OK",
) -> EvaluationService:
    """Wire an EvaluationService against the mock validation service."""
    validator = HttpFrequentFlyerNumberValidator(
        base_url="http://validator.test",
        license_key=license_key,
        max_retries=1,
        transport=httpx.MockTransport(frequent_flyer_service),
    )
    return EvaluationService(evaluator=get_evaluator(number_validator=validator))


@pytest.fixture
def service(frequent_flyer_service) -> EvaluationService:
    return build_service(frequent_flyer_service)


@pytest.fixture
def reset_logging():
    """Restore structlog and root logger defaults after configuring logging."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
