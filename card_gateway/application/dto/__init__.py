"""Data Transfer Objects for application layer."""

from .evaluation import EvaluationRequest, EvaluationResponse

__all__ = [
    "EvaluationRequest",
    "EvaluationResponse",
]
