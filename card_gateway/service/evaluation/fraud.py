"""
Reference fraud lookup.

The lookup itself only forwards to a replaceable rule, so deployments can
swap in their own fraud policy without touching the evaluator:

    lookup = FraudLookup(rule=lambda application: application.age < 18)
"""

from typing import Callable, Optional

from card_gateway.domain.entities import CreditCardApplication
from card_gateway.domain.interfaces import FraudScreener
from .settings import EvaluationSettings, evaluation_settings

FraudRule = Callable[[CreditCardApplication], bool]


def last_name_matches(last_name: str) -> FraudRule:
    """Build a rule flagging applications whose last name is exactly ``last_name``."""

    def rule(application: CreditCardApplication) -> bool:
        return application.last_name == last_name

    return rule


class FraudLookup(FraudScreener):
    """
    Fraud screener backed by a single replaceable rule.

    Args:
        rule: Rule deciding whether an application is a fraud risk.
            Defaults to flagging the configured watch-listed last name.
        settings: Evaluation settings (uses defaults if not provided)
    """

    def __init__(
        self,
        rule: Optional[FraudRule] = None,
        settings: EvaluationSettings = evaluation_settings,
    ):
        self._rule = rule or last_name_matches(settings.fraud_watch_last_name)

    def is_fraud_risk(self, application: CreditCardApplication) -> bool:
        return self.check_application(application)

    def check_application(self, application: CreditCardApplication) -> bool:
        """Hook applying the fraud rule; subclasses may replace it outright."""
        return self._rule(application)
