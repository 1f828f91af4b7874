"""Evaluation service - orchestrates the credit-card application use case."""

import structlog

from card_gateway.application.dto import EvaluationRequest, EvaluationResponse
from card_gateway.core.metrics import record_decision
from card_gateway.domain.exceptions import InvalidApplicationException
from card_gateway.service.evaluation import (
    CreditCardApplicationEvaluator,
    explain_decision,
)

logger = structlog.get_logger(__name__)


class EvaluationService:
    """
    Application service for credit-card evaluation use cases.
    """

    def __init__(self, evaluator: CreditCardApplicationEvaluator):
        self._evaluator = evaluator

    def evaluate(self, request: EvaluationRequest) -> EvaluationResponse:
        """
        Process a credit-card application.

        Args:
            request: The application details

        Returns:
            EvaluationResponse with the decision, the rule behind it and
            the validation mode requested from the frequent-flyer service

        Raises:
            InvalidApplicationException: If request validation fails
        """
        errors = request.validate()
        if errors:
            raise InvalidApplicationException("; ".join(errors))

        log = logger.bind(
            age=request.age,
            has_frequent_flyer_number=bool(request.frequent_flyer_number),
        )
        log.info("evaluation_requested")

        application = request.to_entity()
        outcome = self._evaluator.evaluate_with_reason(application)
        record_decision(outcome.decision)

        validation_mode = self._evaluator.number_validator.validation_mode

        log.info(
            "application_evaluated",
            decision=outcome.decision.value,
            reason=outcome.reason.value,
            referred=outcome.decision.is_referral,
            validation_mode=validation_mode.value,
        )

        return EvaluationResponse(
            decision=outcome.decision.value,
            reason=outcome.reason.value,
            validation_mode=validation_mode.value,
            explanation=explain_decision(application, outcome),
        )
