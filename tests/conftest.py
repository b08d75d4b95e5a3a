"""
Pytest configuration and shared fixtures for fitness score tests.

This module sets up mocked AWS services, the handler configuration, sample
records and API Gateway events used across the test modules.

Fixtures:
    aws_credentials: Fake AWS credentials for moto
    handler_config: HandlerConfig pointing at the test table
    dynamodb_client: Low-level client for a moto table with both indexes
    dynamodb_service: DynamoDBService bound to the mocked table
    fitness_score_service: FitnessScoreService bound to the mocked table
    sample_fitness_scores: Collection of test records
    populated_database: Mocked table pre-filled with the sample records
"""

import json
import os
from typing import Any, Dict, List, Optional

import boto3
import pytest
from moto import mock_aws

from src.fitnessscore.models.fitness_score import FitnessScore
from src.fitnessscore.services.dynamodb_service import DynamoDBService
from src.fitnessscore.services.fitness_score_service import FitnessScoreService
from src.fitnessscore.utils.config import HandlerConfig


# Test configuration constants
TEST_TABLE_NAME = "test-fitness-score-table"
TEST_INDEX_NAME_SCORE = "FitnessScoreSortByScore"
TEST_INDEX_NAME_AGE = "FitnessScoreSortByAge"
TEST_REGION = "us-east-1"


@pytest.fixture(scope="session")
def aws_credentials():
    """
    Fixture to set up AWS credentials for testing.

    These are fake credentials picked up by moto; nothing reaches AWS.
    """
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = TEST_REGION


@pytest.fixture
def handler_config() -> HandlerConfig:
    """Configuration matching the mocked table and its indexes."""
    return HandlerConfig(
        table_name=TEST_TABLE_NAME,
        index_name_score=TEST_INDEX_NAME_SCORE,
        index_name_age=TEST_INDEX_NAME_AGE,
    )


def _index(index_name: str, sort_key: str) -> Dict[str, Any]:
    return {
        "IndexName": index_name,
        "KeySchema": [
            {"AttributeName": "version", "KeyType": "HASH"},
            {"AttributeName": sort_key, "KeyType": "RANGE"},
        ],
        "Projection": {"ProjectionType": "ALL"},
    }


@pytest.fixture
def dynamodb_client(aws_credentials):
    """
    Fixture that creates a mocked fitness score table.

    The table is keyed by (username, version) and carries the two global
    secondary indexes keyed by (version, score) and (version, age).

    Returns:
        Low-level boto3 DynamoDB client bound to the moto backend
    """
    with mock_aws():
        client = boto3.client("dynamodb", region_name=TEST_REGION)

        client.create_table(
            TableName=TEST_TABLE_NAME,
            KeySchema=[
                {"AttributeName": "username", "KeyType": "HASH"},
                {"AttributeName": "version", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "username", "AttributeType": "S"},
                {"AttributeName": "version", "AttributeType": "S"},
                {"AttributeName": "age", "AttributeType": "N"},
                {"AttributeName": "score", "AttributeType": "N"},
            ],
            GlobalSecondaryIndexes=[
                _index(TEST_INDEX_NAME_SCORE, "score"),
                _index(TEST_INDEX_NAME_AGE, "age"),
            ],
            BillingMode="PAY_PER_REQUEST",
        )

        client.get_waiter("table_exists").wait(TableName=TEST_TABLE_NAME)
        yield client


@pytest.fixture
def dynamodb_service(dynamodb_client, handler_config) -> DynamoDBService:
    """DynamoDBService using the mocked table."""
    return DynamoDBService(handler_config, client=dynamodb_client)


@pytest.fixture
def fitness_score_service(dynamodb_service, handler_config) -> FitnessScoreService:
    """FitnessScoreService using the mocked table."""
    return FitnessScoreService(handler_config, db_service=dynamodb_service)


@pytest.fixture
def sample_fitness_scores() -> List[FitnessScore]:
    """
    Fixture that provides sample records.

    Four records share version ``v1`` with distinct ages and scores; one
    record belongs to ``v2``.
    """
    return [
        FitnessScore(username="alice", version="v1", age=30, score=80),
        FitnessScore(username="bob", version="v1", age=25, score=95),
        FitnessScore(username="carol", version="v1", age=41, score=60),
        FitnessScore(username="dave", version="v1", age=19, score=72),
        FitnessScore(username="erin", version="v2", age=35, score=88),
    ]


@pytest.fixture
def populated_database(dynamodb_service, sample_fitness_scores) -> DynamoDBService:
    """DynamoDBService whose table already holds the sample records."""
    for fitness_score in sample_fitness_scores:
        dynamodb_service.put_fitness_score(fitness_score)

    return dynamodb_service


# Pytest configuration
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "aws: mark test as using mocked AWS services")


# Test utilities
def make_get_event(params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    Create an API Gateway proxy event for GET /fitness.

    Args:
        params: Query string parameters, None when the request has none

    Returns:
        API Gateway proxy event
    """
    return {
        "httpMethod": "GET",
        "resource": "/fitness",
        "queryStringParameters": params,
        "headers": {"User-Agent": "test-client/1.0"},
        "body": None,
        "isBase64Encoded": False,
        "requestContext": {
            "requestId": "test-request-123",
            "identity": {"sourceIp": "127.0.0.1"},
        },
    }


def make_post_event(body: Any = None, raw: bool = False) -> Dict[str, Any]:
    """
    Create an API Gateway proxy event for POST /fitness.

    Args:
        body: Payload, serialized to JSON unless ``raw`` is set
        raw: Send ``body`` as-is

    Returns:
        API Gateway proxy event
    """
    if body is not None and not raw:
        body = json.dumps(body)

    return {
        "httpMethod": "POST",
        "resource": "/fitness",
        "queryStringParameters": None,
        "headers": {"Content-Type": "application/json"},
        "body": body,
        "isBase64Encoded": False,
        "requestContext": {
            "requestId": "test-request-456",
            "identity": {"sourceIp": "127.0.0.1"},
        },
    }
