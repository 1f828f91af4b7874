"""Fraud screening interface."""

from abc import ABC, abstractmethod

from card_gateway.domain.entities import CreditCardApplication


class FraudScreener(ABC):
    """Screens an application for fraud risk before any other rule runs."""

    @abstractmethod
    def is_fraud_risk(self, application: CreditCardApplication) -> bool:
        """Return True if the application should be referred as a fraud risk."""
        ...
