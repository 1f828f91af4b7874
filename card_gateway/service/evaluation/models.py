"""
Data models for application evaluation.
"""

from dataclasses import dataclass
from enum import Enum

from card_gateway.domain.entities import ApplicationDecision


class DecisionReason(str, Enum):
    """The rule that produced a decision."""
    FRAUD_RISK = "fraud_risk"
    HIGH_INCOME = "high_income"
    LICENSE_EXPIRED = "license_expired"
    VALIDATOR_ERROR = "validator_error"
    INVALID_FREQUENT_FLYER_NUMBER = "invalid_frequent_flyer_number"
    YOUNG_APPLICANT = "young_applicant"
    LOW_INCOME = "low_income"
    MANUAL_REVIEW = "manual_review"


@dataclass(frozen=True)
class EvaluationOutcome:
    """
    A decision together with the rule that produced it.

    Attributes:
        decision: The decision returned to the caller
        reason: The first rule that matched
    """
    decision: ApplicationDecision
    reason: DecisionReason
