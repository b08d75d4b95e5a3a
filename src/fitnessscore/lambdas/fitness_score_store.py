"""
Store Lambda handler for the fitness score API.

Serves ``POST /fitness``: stores the fitness score described by the JSON
body, replacing any record with the same username and version.

Request Body:
    {"username": "alice", "version": "v1", "age": 30, "score": 80}

Functions:
    lambda_handler: Main entry point for API Gateway events
    handle_store_fitness_score: Handle one request with an explicit service
"""

from functools import lru_cache
from typing import Any, Dict

from ..models.errors import FitnessScoreError
from ..services.fitness_score_service import FitnessScoreService
from ..utils.config import get_config
from ..utils.http import (
    create_empty_response,
    create_error_response,
    get_request_body,
    log_api_error,
    log_api_request,
)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:  # noqa: ARG001
    """
    Main Lambda handler for API Gateway events.

    Args:
        event: API Gateway proxy event
        context: AWS Lambda runtime context (unused)

    Returns:
        HTTP response dictionary with statusCode, headers, and body

    Raises:
        ConfigurationError: If required environment variables are missing
    """
    return handle_store_fitness_score(event, _get_service())


def handle_store_fitness_score(
    event: Dict[str, Any], service: FitnessScoreService
) -> Dict[str, Any]:
    """
    Store the fitness score in one request.

    Args:
        event: API Gateway proxy event
        service: Fitness score service bound to the process configuration

    Returns:
        200 with an empty body, or an error response
    """
    log_api_request(event, service.config.environment)
    cors_origin = service.config.cors_origin

    try:
        service.store_fitness_score(get_request_body(event))
    except FitnessScoreError as e:
        log_api_error(e.kind.value, e.detail or e.message)
        return create_error_response(e, cors_origin)

    return create_empty_response(200, cors_origin)


@lru_cache(maxsize=None)
def _get_service() -> FitnessScoreService:
    return FitnessScoreService(get_config())


print("Fitness score store handler initialized")
