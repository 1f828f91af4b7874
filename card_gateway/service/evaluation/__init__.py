"""
Application Evaluation Module for the Card Gateway decision engine
"""

from .models import DecisionReason, EvaluationOutcome
from .settings import EvaluationSettings, evaluation_settings
from .fraud import FraudLookup, FraudRule, last_name_matches
from .evaluator import CreditCardApplicationEvaluator, explain_decision

__all__ = [
    # Settings
    "EvaluationSettings",
    "evaluation_settings",
    # Models
    "DecisionReason",
    "EvaluationOutcome",
    # Fraud
    "FraudLookup",
    "FraudRule",
    "last_name_matches",
    # Evaluator
    "CreditCardApplicationEvaluator",
    "explain_decision",
]
