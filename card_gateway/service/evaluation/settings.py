"""
Evaluation Settings for the Card Gateway decision engine.

This module contains the configurable thresholds used by the application
evaluator. Defaults reflect the card issuer's published underwriting rules;
they can be overridden via environment variables for testing or for
different card products.

Environment variables use the EVALUATION_ prefix:
    EVALUATION_HIGH_INCOME_THRESHOLD=100000
    EVALUATION_AUTO_REFERRAL_MAX_AGE=20

Usage:
    from card_gateway.service.evaluation.settings import evaluation_settings

    threshold = evaluation_settings.high_income_threshold

    # Or create custom settings for testing
    custom = EvaluationSettings(low_income_threshold=25_000)
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from card_gateway.domain.entities import EXPIRED_LICENSE_KEY


class EvaluationSettings(BaseSettings):
    """
    Configurable parameters for the application evaluator.

    All settings can be overridden via environment variables with EVALUATION_ prefix.
    Incomes are gross annual amounts; ages are in whole years.
    """

    model_config = SettingsConfigDict(
        env_prefix="EVALUATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Income Thresholds ===
    high_income_threshold: float = Field(
        default=100_000,
        ge=0,
        description="Income at or above this is accepted automatically",
    )
    low_income_threshold: float = Field(
        default=20_000,
        ge=0,
        description="Income below this is declined automatically",
    )

    # === Age Thresholds ===
    auto_referral_max_age: int = Field(
        default=20,
        ge=0,
        description="Applicants at or below this age are referred to a human",
    )
    detailed_validation_min_age: int = Field(
        default=30,
        ge=0,
        description="Applicants at or above this age get a detailed frequent-flyer lookup",
    )

    # === Validation Service ===
    expired_license_key: str = Field(
        default=EXPIRED_LICENSE_KEY,
        min_length=1,
        description="License key the validation service reports once its license has lapsed",
    )

    # === Fraud Screening ===
    fraud_watch_last_name: str = Field(
        default="Smith",
        description="Last name flagged as a fraud risk by the reference fraud lookup",
    )

    @model_validator(mode="after")
    def validate_income_thresholds(self) -> "EvaluationSettings":
        """Ensure the decline threshold does not exceed the accept threshold."""
        if self.low_income_threshold > self.high_income_threshold:
            raise ValueError(
                f"low_income_threshold ({self.low_income_threshold}) > "
                f"high_income_threshold ({self.high_income_threshold})"
            )
        return self


@lru_cache
def get_evaluation_settings() -> EvaluationSettings:
    """Get cached evaluation settings instance."""
    return EvaluationSettings()


evaluation_settings = get_evaluation_settings()
