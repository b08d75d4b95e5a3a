"""
fitnessscore: Serverless fitness score storage and ranking on AWS Lambda.

This package provides two API Gateway Lambda handlers that store fitness
score records in DynamoDB and rank them by score or age per version through
secondary indexes.

Modules:
    lambdas: AWS Lambda function handlers for the query and store endpoints
    services: Query construction and DynamoDB integration
    models: Data models and validation using Pydantic
    utils: Configuration and HTTP helpers

Version: 0.1.0
"""

__version__ = "0.1.0"

from .models import FitnessScore, FitnessScoreError, FitnessScoreQuery
from .services import DynamoDBService, FitnessScoreService

__all__ = [
    "FitnessScore",
    "FitnessScoreError",
    "FitnessScoreQuery",
    "FitnessScoreService",
    "DynamoDBService",
]
