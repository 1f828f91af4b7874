"""Credit-card application entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreditCardApplication:
    """
    A credit-card application submitted by a prospective cardholder.

    Unset fields default to zero or empty, so partially filled
    applications can still be evaluated.

    Attributes:
        last_name: Applicant's last name
        gross_annual_income: Gross annual income (non-negative)
        age: Applicant's age in years
        frequent_flyer_number: Loyalty-program number, if the applicant has one
    """

    last_name: str = ""
    gross_annual_income: float = 0
    age: int = 0
    frequent_flyer_number: Optional[str] = None
