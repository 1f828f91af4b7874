"""Dependency wiring for the evaluation use case."""

from card_gateway.application.services import EvaluationService
from card_gateway.domain.interfaces import FraudScreener, FrequentFlyerNumberValidator
from card_gateway.infrastructure.clients import HttpFrequentFlyerNumberValidator
from card_gateway.service.evaluation import (
    CreditCardApplicationEvaluator,
    FraudLookup,
)


# External client dependencies
def get_number_validator() -> HttpFrequentFlyerNumberValidator:
    """Get a FrequentFlyerNumberValidator instance."""
    return HttpFrequentFlyerNumberValidator()


def get_fraud_screener() -> FraudLookup:
    """Get a FraudScreener instance."""
    return FraudLookup()


# Service dependencies
def get_evaluator(
    number_validator: FrequentFlyerNumberValidator | None = None,
    fraud_screener: FraudScreener | None = None,
) -> CreditCardApplicationEvaluator:
    """Get an evaluator wired to the default validator and fraud screener."""
    return CreditCardApplicationEvaluator(
        number_validator=number_validator or get_number_validator(),
        fraud_screener=fraud_screener or get_fraud_screener(),
    )


def get_evaluation_service() -> EvaluationService:
    """Get an EvaluationService instance with all dependencies."""
    return EvaluationService(evaluator=get_evaluator())
