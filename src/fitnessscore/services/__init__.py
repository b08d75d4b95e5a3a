"""
Service layer for the fitness score API.

Services hold the request validation, query construction and DynamoDB
integration used by the Lambda handlers.

Classes:
    FitnessScoreService: Business logic for querying and storing scores
    DynamoDBService: DynamoDB integration for data persistence
"""

from .dynamodb_service import DynamoDBService
from .fitness_score_service import FitnessScoreService, resolve_query

__all__ = ["DynamoDBService", "FitnessScoreService", "resolve_query"]
