"""
Fitness score service for the fitness score API.

Turns request input into database operations: query string parameters into a
FitnessScoreQuery against the right index, and JSON bodies into records to
store. All input validation happens here, before DynamoDB is called.

Classes:
    FitnessScoreService: Business logic behind the query and store handlers

Functions:
    resolve_query: Validate query parameters and build a FitnessScoreQuery
"""

from typing import List, Mapping, Optional

from ..models.errors import ErrorKind, FitnessScoreError
from ..models.fitness_score import FitnessScore
from ..models.query import DEFAULT_BOUNDS, FitnessScoreQuery, SortOrder, SortType
from ..utils.config import HandlerConfig
from .dynamodb_service import DynamoDBService


def resolve_query(params: Mapping[str, str], config: HandlerConfig) -> FitnessScoreQuery:
    """
    Validate query string parameters and build the range query.

    Checks run in a fixed order: ``sort``, then ``order``, then ``version``.

    Args:
        params: Query string parameters
        config: Handler configuration holding the index names

    Returns:
        FitnessScoreQuery ready to execute

    Raises:
        FitnessScoreError: UnknownSortType, UnknownOrderType or
            VersionNotSpecified

    Example:
        >>> q = resolve_query({"version": "v1", "sort": "age", "order": "desc"}, config)
        >>> q.index_name == config.index_name_age, q.upper_bound
        (True, '200')
    """
    sort_value = params.get("sort", SortType.SCORE.value)
    try:
        sort = SortType(sort_value)
    except ValueError:
        raise FitnessScoreError(ErrorKind.UNKNOWN_SORT_TYPE, value=sort_value)

    order_value = params.get("order", SortOrder.ASC.value)
    try:
        order = SortOrder(order_value)
    except ValueError:
        raise FitnessScoreError(ErrorKind.UNKNOWN_ORDER_TYPE, value=order_value)

    version = params.get("version")
    if not version:
        raise FitnessScoreError(ErrorKind.VERSION_NOT_SPECIFIED)

    if sort is SortType.SCORE:
        index_name = config.index_name_score
    else:
        index_name = config.index_name_age

    default_lower, default_upper = DEFAULT_BOUNDS[sort]

    return FitnessScoreQuery(
        index_name=index_name,
        sort=sort,
        order=order,
        version=version,
        lower_bound=params.get(f"min_{sort.value}", default_lower),
        upper_bound=params.get(f"max_{sort.value}", default_upper),
    )


class FitnessScoreService:
    """
    Business logic behind the fitness score handlers.

    Attributes:
        config: Handler configuration
        db_service: DynamoDB service for queries and writes

    Example:
        >>> service = FitnessScoreService(config)
        >>> scores = service.get_fitness_scores({"version": "v1"})
        >>> service.store_fitness_score('{"username": "a", "version": "v1", "age": 30, "score": 80}')
    """

    def __init__(self, config: HandlerConfig, db_service: Optional[DynamoDBService] = None):
        """
        Initialize the fitness score service.

        Args:
            config: Handler configuration
            db_service: Optional DynamoDB service instance
        """
        self.config = config
        self.db_service = db_service or DynamoDBService(config)

    def get_fitness_scores(self, params: Mapping[str, str]) -> List[FitnessScore]:
        """
        Return the fitness scores matching the query string parameters.

        Args:
            params: Query string parameters

        Returns:
            Matching records in the requested order

        Raises:
            FitnessScoreError: For invalid parameters, query failures and
                undecodable items
        """
        query = resolve_query(params, self.config)
        return self.db_service.query_fitness_scores(query)

    def store_fitness_score(self, body: Optional[str]) -> FitnessScore:
        """
        Parse a JSON body and store the record it describes.

        Args:
            body: JSON request body

        Returns:
            The stored FitnessScore

        Raises:
            FitnessScoreError: InvalidFitnessScore for bad bodies (no write is
                attempted) or DynamoDBPutError if the write fails
        """
        fitness_score = FitnessScore.from_json(body)
        self.db_service.put_fitness_score(fitness_score)
        return fitness_score
