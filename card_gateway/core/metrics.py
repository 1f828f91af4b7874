"""Prometheus metrics for the Card Gateway service.

Business Metrics (for Product/Risk):
- card_gateway_decision_total: Decisions by outcome
- card_gateway_fraud_referrals_total: Applications referred as fraud risks

Technical Metrics (for Engineering/SRE):
- card_gateway_validation_latency_seconds: Frequent-flyer lookup latency
- card_gateway_validator_failures_total: Frequent-flyer lookup failures
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest

from card_gateway.core.config import settings
from card_gateway.domain.entities import ApplicationDecision


# =============================================================================
# Business Metrics
# =============================================================================

decision_total = Counter(
    "card_gateway_decision_total",
    "Total number of credit-card application decisions",
    ["outcome"],
)

fraud_referrals_total = Counter(
    "card_gateway_fraud_referrals_total",
    "Total number of applications referred as fraud risks",
)


# =============================================================================
# Technical Metrics
# =============================================================================

validation_latency = Histogram(
    "card_gateway_validation_latency_seconds",
    "Frequent-flyer validation latency in seconds",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

validator_failures = Counter(
    "card_gateway_validator_failures_total",
    "Total number of frequent-flyer validation failures",
    ["error_type"],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_decision(decision: ApplicationDecision) -> None:
    """Record a decision in metrics."""
    if not settings.metrics_enabled:
        return

    decision_total.labels(outcome=decision.value).inc()
    if decision is ApplicationDecision.REFERRED_TO_HUMAN_FRAUD_RISK:
        fraud_referrals_total.inc()


def record_validator_failure(error_type: str) -> None:
    """Record a failed frequent-flyer lookup."""
    if settings.metrics_enabled:
        validator_failures.labels(error_type=error_type).inc()


@contextmanager
def track_validation_latency() -> Generator[None, None, None]:
    """Context manager to track frequent-flyer lookup latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        if settings.metrics_enabled:
            validation_latency.observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)
