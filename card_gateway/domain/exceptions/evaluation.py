"""Evaluation-related domain exceptions."""

from .base import DomainException


class InvalidEvaluatorConfigurationException(DomainException, ValueError):
    """Raised when the evaluator is built without a required collaborator."""

    def __init__(self, argument: str):
        super().__init__(
            message=f"Missing required argument: {argument}",
            code="INVALID_EVALUATOR_CONFIGURATION",
        )
        self.argument = argument


class InvalidApplicationException(DomainException):
    """Raised when an evaluation request is invalid."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_APPLICATION",
        )
