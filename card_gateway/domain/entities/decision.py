"""Decision outcomes for a credit-card application."""

from enum import Enum


class ApplicationDecision(str, Enum):
    """The outcome of evaluating a single application."""

    AUTO_ACCEPTED = "auto_accepted"
    AUTO_DECLINED = "auto_declined"
    REFERRED_TO_HUMAN = "referred_to_human"
    REFERRED_TO_HUMAN_FRAUD_RISK = "referred_to_human_fraud_risk"

    @property
    def is_referral(self) -> bool:
        """True when a human underwriter has to look at the application."""
        return self in (
            ApplicationDecision.REFERRED_TO_HUMAN,
            ApplicationDecision.REFERRED_TO_HUMAN_FRAUD_RISK,
        )
