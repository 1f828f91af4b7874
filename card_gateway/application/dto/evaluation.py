"""Data transfer objects for application evaluation."""

from dataclasses import dataclass
from typing import List, Optional

from card_gateway.domain.entities import CreditCardApplication


@dataclass(frozen=True)
class EvaluationRequest:
    """Input data for requesting an application decision."""
    last_name: str = ""
    gross_annual_income: float = 0
    age: int = 0
    frequent_flyer_number: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []

        if self.gross_annual_income < 0:
            errors.append("gross_annual_income must not be negative")

        if self.age < 0:
            errors.append("age must not be negative")

        return errors

    def to_entity(self) -> CreditCardApplication:
        return CreditCardApplication(
            last_name=self.last_name,
            gross_annual_income=self.gross_annual_income,
            age=self.age,
            frequent_flyer_number=self.frequent_flyer_number,
        )


@dataclass(frozen=True)
class EvaluationResponse:
    """Response data for an application decision."""

    decision: str
    reason: str
    validation_mode: str
    explanation: str
