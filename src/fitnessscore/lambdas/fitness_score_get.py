"""
Query Lambda handler for the fitness score API.

Serves ``GET /fitness``: ranks the fitness scores of one version by score or
age, optionally bounded, in ascending or descending order.

Query Parameters:
    - version: Version to query (required)
    - sort: ``score`` (default) or ``age``
    - order: ``asc`` (default) or ``desc``
    - min_score / max_score: Inclusive score bounds when sorting by score
    - min_age / max_age: Inclusive age bounds when sorting by age

Response Body:
    {"fitness_scores": [{"username": "alice", "version": "v1", "age": 30, "score": 80}]}

Functions:
    lambda_handler: Main entry point for API Gateway events
    handle_get_fitness_scores: Handle one request with an explicit service
"""

from functools import lru_cache
from typing import Any, Dict

from ..models.errors import FitnessScoreError
from ..services.fitness_score_service import FitnessScoreService
from ..utils.config import get_config
from ..utils.http import (
    create_error_response,
    create_response,
    get_query_params,
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
    return handle_get_fitness_scores(event, _get_service())


def handle_get_fitness_scores(
    event: Dict[str, Any], service: FitnessScoreService
) -> Dict[str, Any]:
    """
    Query fitness scores for one request.

    Args:
        event: API Gateway proxy event
        service: Fitness score service bound to the process configuration

    Returns:
        200 with the matching records, or an error response
    """
    log_api_request(event, service.config.environment)
    cors_origin = service.config.cors_origin
    query_params = get_query_params(event)

    try:
        fitness_scores = service.get_fitness_scores(query_params)
    except FitnessScoreError as e:
        log_api_error(e.kind.value, e.detail or e.message, {"query_params": query_params})
        return create_error_response(e, cors_origin)

    response_data = {
        "fitness_scores": [fs.to_response_dict() for fs in fitness_scores]
    }
    return create_response(200, response_data, cors_origin)


@lru_cache(maxsize=None)
def _get_service() -> FitnessScoreService:
    # Built on the first invocation of a container and reused while warm
    return FitnessScoreService(get_config())


print("Fitness score query handler initialized")
