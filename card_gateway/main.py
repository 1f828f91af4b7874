"""
Card Gateway - Main Application Entry Point

Wires the credit-card application evaluator to its collaborators
and configures logging.
"""

import structlog

from card_gateway import __version__
from card_gateway.application.services import EvaluationService
from card_gateway.core.dependencies import get_evaluation_service
from card_gateway.core.logging import setup_logging


def create_service() -> EvaluationService:
    """
    Build a ready-to-use evaluation service.

    Sets up logging before wiring, so everything logged during
    evaluation goes through the configured renderer.
    """
    setup_logging()

    logger = structlog.get_logger(__name__)
    logger.info("application_started", version=__version__)

    return get_evaluation_service()
