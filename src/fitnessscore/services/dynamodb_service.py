"""
DynamoDB service for the fitness score API.

This service handles all interactions with DynamoDB. It runs range queries
against the score and age indexes and writes single fitness score items.
Client failures are caught here and mapped to generic error kinds so that no
DynamoDB detail reaches the caller.

Classes:
    DynamoDBService: Service for DynamoDB queries and writes
"""

from typing import Any, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..models.errors import ErrorKind, FitnessScoreError
from ..models.fitness_score import FitnessScore
from ..models.query import FitnessScoreQuery
from ..utils.config import HandlerConfig
from ..utils.http import log_api_error


class DynamoDBService:
    """
    Service for reading and writing fitness scores in DynamoDB.

    Uses the low-level DynamoDB client so that items keep their attribute
    type tags, which FitnessScore checks when decoding.

    Attributes:
        table_name: Name of the DynamoDB table
        client: Boto3 low-level DynamoDB client

    Example:
        >>> db_service = DynamoDBService(HandlerConfig.from_env())
        >>> db_service.put_fitness_score(FitnessScore(...))
        >>> scores = db_service.query_fitness_scores(query)
    """

    def __init__(self, config: HandlerConfig, client: Optional[Any] = None):
        """
        Initialize the DynamoDB service.

        Args:
            config: Resolved handler configuration
            client: Optional DynamoDB client, a new boto3 client if not provided
        """
        self.table_name = config.table_name
        self.client = client or boto3.client("dynamodb")

    def query_fitness_scores(self, query: FitnessScoreQuery) -> List[FitnessScore]:
        """
        Run a range query and decode the returned items.

        Issues exactly one Query request; results beyond the first page are
        not fetched.

        Args:
            query: Resolved query parameters

        Returns:
            FitnessScore objects in index order

        Raises:
            FitnessScoreError: DynamoDBQueryError if the request fails
            DecodingError: If a returned item does not match the record model
        """
        try:
            response = self.client.query(**query.to_query_kwargs(self.table_name))
        except (ClientError, BotoCoreError) as e:
            log_api_error(
                "DYNAMODB_QUERY_ERROR",
                str(e),
                {"index_name": query.index_name, "version": query.version},
            )
            raise FitnessScoreError(ErrorKind.DYNAMODB_QUERY_ERROR, detail=str(e)) from e

        return [FitnessScore.from_dynamodb_item(item) for item in response.get("Items", [])]

    def put_fitness_score(self, fitness_score: FitnessScore) -> None:
        """
        Store a fitness score, replacing any item with the same key.

        Args:
            fitness_score: Record to write

        Raises:
            FitnessScoreError: DynamoDBPutError if the request fails
        """
        try:
            self.client.put_item(
                TableName=self.table_name, Item=fitness_score.to_dynamodb_item()
            )
        except (ClientError, BotoCoreError) as e:
            log_api_error(
                "DYNAMODB_PUT_ERROR", str(e), {"version": fitness_score.version}
            )
            raise FitnessScoreError(ErrorKind.DYNAMODB_PUT_ERROR, detail=str(e)) from e
