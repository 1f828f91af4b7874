"""
Application Evaluator for the Card Gateway decision engine.

This module applies the underwriting rules to a single application,
in order, stopping at the first rule that matches:
1. Fraud screening (when a fraud screener is configured)
2. High-income fast path
3. Validation service license check
4. Frequent-flyer number lookup (Quick or Detailed, by age)
5. Young-applicant referral
6. Low-income decline
7. Everything else goes to a human

This is the main entry point for the evaluation module.
"""

from typing import Optional

import structlog

from card_gateway.core.metrics import record_validator_failure, track_validation_latency
from card_gateway.domain.entities import (
    ApplicationDecision,
    CreditCardApplication,
    ValidationMode,
)
from card_gateway.domain.exceptions import InvalidEvaluatorConfigurationException
from card_gateway.domain.interfaces import FraudScreener, FrequentFlyerNumberValidator
from .models import DecisionReason, EvaluationOutcome
from .settings import EvaluationSettings, evaluation_settings

logger = structlog.get_logger(__name__)


class CreditCardApplicationEvaluator:
    """
    Decides credit-card applications.

    The evaluator owns no state between calls. Its only side effect is
    setting ``validation_mode`` on the number validator, which callers
    sharing one validator across threads must synchronize themselves.
    """

    def __init__(
        self,
        number_validator: FrequentFlyerNumberValidator,
        fraud_screener: Optional[FraudScreener] = None,
        settings: EvaluationSettings = evaluation_settings,
    ):
        if number_validator is None:
            raise InvalidEvaluatorConfigurationException("number_validator")

        self._number_validator = number_validator
        self._fraud_screener = fraud_screener
        self._settings = settings

    @property
    def number_validator(self) -> FrequentFlyerNumberValidator:
        """The validator whose validation_mode this evaluator sets."""
        return self._number_validator

    def evaluate(self, application: CreditCardApplication) -> ApplicationDecision:
        """
        Decide a credit-card application.

        Args:
            application: The application to decide (never modified)

        Returns:
            The decision. Validator failures are reported as
            REFERRED_TO_HUMAN rather than raised.
        """
        return self.evaluate_with_reason(application).decision

    def evaluate_with_reason(self, application: CreditCardApplication) -> EvaluationOutcome:
        """Decide an application and report which rule produced the decision."""
        settings = self._settings

        if self._fraud_screener is not None and self._fraud_screener.is_fraud_risk(application):
            return EvaluationOutcome(
                ApplicationDecision.REFERRED_TO_HUMAN_FRAUD_RISK,
                DecisionReason.FRAUD_RISK,
            )

        if application.gross_annual_income >= settings.high_income_threshold:
            return EvaluationOutcome(
                ApplicationDecision.AUTO_ACCEPTED,
                DecisionReason.HIGH_INCOME,
            )

        if self._license_key() == settings.expired_license_key:
            logger.warning("frequent_flyer_license_expired")
            return EvaluationOutcome(
                ApplicationDecision.REFERRED_TO_HUMAN,
                DecisionReason.LICENSE_EXPIRED,
            )

        self._number_validator.validation_mode = (
            ValidationMode.DETAILED
            if application.age >= settings.detailed_validation_min_age
            else ValidationMode.QUICK
        )

        try:
            with track_validation_latency():
                is_valid_number = self._number_validator.is_valid(
                    application.frequent_flyer_number
                )
        except Exception as e:
            record_validator_failure(type(e).__name__)
            logger.warning(
                "frequent_flyer_validation_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return EvaluationOutcome(
                ApplicationDecision.REFERRED_TO_HUMAN,
                DecisionReason.VALIDATOR_ERROR,
            )

        if not is_valid_number:
            return EvaluationOutcome(
                ApplicationDecision.REFERRED_TO_HUMAN,
                DecisionReason.INVALID_FREQUENT_FLYER_NUMBER,
            )

        if application.age <= settings.auto_referral_max_age:
            return EvaluationOutcome(
                ApplicationDecision.REFERRED_TO_HUMAN,
                DecisionReason.YOUNG_APPLICANT,
            )

        if application.gross_annual_income < settings.low_income_threshold:
            return EvaluationOutcome(
                ApplicationDecision.AUTO_DECLINED,
                DecisionReason.LOW_INCOME,
            )

        return EvaluationOutcome(
            ApplicationDecision.REFERRED_TO_HUMAN,
            DecisionReason.MANUAL_REVIEW,
        )

    def _license_key(self) -> Optional[str]:
        """License key reported by the validator; None when it reports none."""
        service_information = self._number_validator.service_information
        if service_information is None or service_information.license is None:
            return None
        return service_information.license.license_key


_REASON_TEXT = {
    DecisionReason.FRAUD_RISK: "flagged by fraud screening",
    DecisionReason.HIGH_INCOME: "income at or above the auto-accept threshold",
    DecisionReason.LICENSE_EXPIRED: "frequent-flyer validation license has expired",
    DecisionReason.VALIDATOR_ERROR: "frequent-flyer validation service failed",
    DecisionReason.INVALID_FREQUENT_FLYER_NUMBER: "frequent-flyer number is not valid",
    DecisionReason.YOUNG_APPLICANT: "applicant too young for an automatic decision",
    DecisionReason.LOW_INCOME: "income below the auto-decline threshold",
    DecisionReason.MANUAL_REVIEW: "no automatic rule applies",
}


def explain_decision(
    application: CreditCardApplication,
    outcome: EvaluationOutcome,
) -> str:
    """
    Generate a human-readable explanation of a decision.

    This can be used for:
    - Logging and debugging
    - Underwriter reference when an application is referred

    Args:
        application: The application that was evaluated
        outcome: The outcome returned by evaluate_with_reason()

    Returns:
        Human-readable explanation string
    """
    lines = [
        f"Decision: {outcome.decision.name.replace('_', ' ')}",
        f"Reason: {_REASON_TEXT[outcome.reason]}",
        "",
        "Application:",
        f"  - Gross annual income: {application.gross_annual_income:,.2f}",
        f"  - Age: {application.age}",
        f"  - Frequent-flyer number: {'provided' if application.frequent_flyer_number else 'none'}",
    ]

    return "\n".join(lines)
