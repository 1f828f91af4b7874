"""
Unit Tests for the evaluation application service.

These tests verify:
1. Request validation
2. Response contents (decision, reason, validation mode, explanation)
3. Decision metrics
"""

import pytest

from card_gateway.application.dto import EvaluationRequest
from card_gateway.application.services import EvaluationService
from card_gateway.core.metrics import REGISTRY, get_metrics
from card_gateway.domain.exceptions import InvalidApplicationException
from card_gateway.service.evaluation import CreditCardApplicationEvaluator, FraudLookup
from tests.unit.conftest import StubFrequentFlyerNumberValidator


def decision_count(outcome: str) -> float:
    return REGISTRY.get_sample_value(
        "card_gateway_decision_total", {"outcome": outcome}
    ) or 0.0


@pytest.fixture
def validator() -> StubFrequentFlyerNumberValidator:
    return StubFrequentFlyerNumberValidator()


@pytest.fixture
def service(validator) -> EvaluationService:
    return EvaluationService(CreditCardApplicationEvaluator(validator, FraudLookup()))


class TestRequestValidation:
    """Tests for EvaluationRequest.validate()."""

    def test_valid_request(self):
        assert EvaluationRequest(gross_annual_income=0, age=0).validate() == []

    def test_negative_values(self):
        errors = EvaluationRequest(gross_annual_income=-1, age=-1).validate()

        assert "gross_annual_income must not be negative" in errors
        assert "age must not be negative" in errors

    def test_invalid_request_raises(self, service, validator):
        with pytest.raises(InvalidApplicationException) as exc_info:
            service.evaluate(EvaluationRequest(gross_annual_income=-5, age=42))

        assert exc_info.value.code == "INVALID_APPLICATION"
        assert validator.lookups == []

    def test_to_entity(self):
        request = EvaluationRequest(
            last_name="Jones",
            gross_annual_income=42_000,
            age=33,
            frequent_flyer_number="AB123",
        )

        application = request.to_entity()

        assert application.last_name == "Jones"
        assert application.gross_annual_income == 42_000
        assert application.age == 33
        assert application.frequent_flyer_number == "AB123"


class TestEvaluate:
    """Tests for EvaluationService.evaluate()."""

    def test_low_income_decline(self, service):
        response = service.evaluate(
            EvaluationRequest(gross_annual_income=19_999, age=42, frequent_flyer_number="s")
        )

        assert response.decision == "auto_declined"
        assert response.reason == "low_income"
        assert response.validation_mode == "detailed"
        assert "AUTO DECLINED" in response.explanation

    def test_reports_quick_mode_for_younger_applicants(self, service):
        response = service.evaluate(EvaluationRequest(gross_annual_income=50_000, age=25))

        assert response.decision == "referred_to_human"
        assert response.reason == "manual_review"
        assert response.validation_mode == "quick"

    def test_fraud_risk(self, service, validator):
        response = service.evaluate(EvaluationRequest(last_name="Smith", age=42))

        assert response.decision == "referred_to_human_fraud_risk"
        assert validator.lookups == []

    def test_validator_failure_is_referred(self, validator):
        validator.error = RuntimeError("boom")
        service = EvaluationService(CreditCardApplicationEvaluator(validator))

        response = service.evaluate(EvaluationRequest(age=42))

        assert response.decision == "referred_to_human"
        assert response.reason == "validator_error"


class TestMetrics:
    """Decisions are counted by outcome."""

    def test_decision_counter_increments(self, service):
        before = decision_count("auto_accepted")

        service.evaluate(EvaluationRequest(gross_annual_income=120_000))

        assert decision_count("auto_accepted") == before + 1

    def test_fraud_referrals_counted(self, service):
        before = REGISTRY.get_sample_value("card_gateway_fraud_referrals_total") or 0.0

        service.evaluate(EvaluationRequest(last_name="Smith"))

        assert REGISTRY.get_sample_value("card_gateway_fraud_referrals_total") == before + 1

    def test_validator_failures_counted(self, validator):
        validator.error = TimeoutError("slow")
        service = EvaluationService(CreditCardApplicationEvaluator(validator))
        labels = {"error_type": "TimeoutError"}
        before = REGISTRY.get_sample_value("card_gateway_validator_failures_total", labels) or 0.0

        service.evaluate(EvaluationRequest(age=42))

        assert REGISTRY.get_sample_value(
            "card_gateway_validator_failures_total", labels
        ) == before + 1

    def test_metrics_exposition(self, service):
        service.evaluate(EvaluationRequest(age=42))

        content = get_metrics().decode()

        assert "card_gateway_decision_total" in content
        assert "card_gateway_validation_latency_seconds" in content
