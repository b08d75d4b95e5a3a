"""
Data models for the fitness score API.

This module contains the FitnessScore record with its DynamoDB attribute
encoding, and the error taxonomy shared by both Lambda handlers.

Classes:
    FitnessScore: Model representing a stored fitness score
    AttributeType: Enum of DynamoDB attribute type tags
    ErrorKind: Enum of error kinds reported to callers
    FitnessScoreError: Base exception for reportable errors
    DecodingError: Raised when a stored item cannot be decoded
    ConfigurationError: Raised when required configuration is missing
    FitnessScoreQuery: Resolved range query over a secondary index
    SortType: Enum of rankable attributes
    SortOrder: Enum of result orders
"""

from .errors import (
    ConfigurationError,
    DecodingError,
    ErrorKind,
    FitnessScoreError,
)
from .fitness_score import AttributeType, FitnessScore
from .query import FitnessScoreQuery, SortOrder, SortType

__all__ = [
    "AttributeType",
    "ConfigurationError",
    "DecodingError",
    "ErrorKind",
    "FitnessScore",
    "FitnessScoreError",
    "FitnessScoreQuery",
    "SortOrder",
    "SortType",
]
