"""
Fitness score data model for the fitness score API.

This module defines the FitnessScore record and its mapping to and from the
DynamoDB attribute-value format used by the low-level client. String fields
are stored as ``{"S": text}`` and numeric fields as ``{"N": digits}``; decoding
checks the type tag of every attribute before trusting its value.

Classes:
    AttributeType: Enum of the attribute type tags used by the record
    FitnessScore: Pydantic model for a single fitness score record

Functions:
    encode_attribute: Build a tagged attribute value
    decode_attribute: Read a tagged attribute value back out of an item
"""

import re
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import DecodingError, ErrorKind, FitnessScoreError

U32_MAX = 2**32 - 1

_UNSIGNED_INTEGER = re.compile(r"^[0-9]+$")


class AttributeType(str, Enum):
    """
    DynamoDB attribute type tags used by FitnessScore fields.

    Only two tags exist in this model: text and numbers (sent as strings).
    """

    STRING = "S"
    NUMBER = "N"


FIELD_TYPES: Dict[str, AttributeType] = {
    "username": AttributeType.STRING,
    "version": AttributeType.STRING,
    "age": AttributeType.NUMBER,
    "score": AttributeType.NUMBER,
}


def encode_attribute(attr_type: AttributeType, value: Union[str, int]) -> Dict[str, str]:
    """
    Build a DynamoDB attribute value.

    Args:
        attr_type: Type tag of the attribute
        value: Field value, text or unsigned integer

    Returns:
        Single-entry mapping from tag to string value, e.g. ``{"N": "42"}``
    """
    return {attr_type.value: str(value)}


def decode_attribute(
    item: Mapping[str, Any], field: str, attr_type: AttributeType
) -> Union[str, int]:
    """
    Read one field out of a DynamoDB item, checking its type tag.

    Args:
        item: Attribute map as returned by the DynamoDB client
        field: Name of the attribute to read
        attr_type: Tag the attribute is expected to carry

    Returns:
        The text for STRING attributes, the parsed integer for NUMBER ones

    Raises:
        DecodingError: If the attribute is absent, carries another tag, or
            holds a number that is not an unsigned integer
    """
    value = item.get(field)
    if value is None:
        raise DecodingError(field, "attribute is missing")

    if not isinstance(value, Mapping) or len(value) != 1:
        raise DecodingError(field, f"not a single attribute value: {value!r}")

    tag, raw = next(iter(value.items()))
    if tag != attr_type.value:
        raise DecodingError(field, f"expected type {attr_type.value}, got {tag}")

    if not isinstance(raw, str):
        raise DecodingError(field, f"attribute value is not a string: {raw!r}")

    if attr_type is AttributeType.NUMBER:
        if not _UNSIGNED_INTEGER.match(raw):
            raise DecodingError(field, f"'{raw}' is not an unsigned integer")
        return int(raw)

    return raw


class FitnessScore(BaseModel):
    """
    Pydantic model representing one fitness score record.

    Records are immutable; storing a record with the same username and
    version as an existing one replaces it. Field types are strict, so JSON
    booleans, floats and numeric strings are not accepted as integers.

    Attributes:
        username: User who submitted the score
        version: Application or game version the score belongs to
        age: Age of the user
        score: Score value

    Example:
        >>> fs = FitnessScore(username="alice", version="v1", age=30, score=80)
        >>> fs.to_dynamodb_item()["age"]
        {'N': '30'}
    """

    model_config = ConfigDict(strict=True, frozen=True)

    username: str = Field(..., min_length=1, description="Submitting user")
    version: str = Field(..., min_length=1, description="Application version")
    age: int = Field(..., ge=0, le=U32_MAX, description="Age of the user")
    score: int = Field(..., ge=0, le=U32_MAX, description="Fitness score")

    def to_dynamodb_item(self) -> Dict[str, Dict[str, str]]:
        """
        Convert the record to a DynamoDB attribute map.

        Returns:
            Mapping of every field name to its tagged attribute value
        """
        return {
            field: encode_attribute(attr_type, getattr(self, field))
            for field, attr_type in FIELD_TYPES.items()
        }

    @classmethod
    def from_dynamodb_item(cls, item: Mapping[str, Any]) -> "FitnessScore":
        """
        Create a FitnessScore from a DynamoDB attribute map.

        Args:
            item: Attribute map returned by a query

        Returns:
            FitnessScore instance

        Raises:
            DecodingError: If any field is missing, mistagged or out of range
        """
        values = {
            field: decode_attribute(item, field, attr_type)
            for field, attr_type in FIELD_TYPES.items()
        }

        try:
            return cls(**values)
        except ValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else "item"
            raise DecodingError(field, error["msg"]) from e

    @classmethod
    def from_json(cls, body: Optional[str]) -> "FitnessScore":
        """
        Parse a FitnessScore from a JSON request body.

        Args:
            body: JSON text, may be None when the request had no body

        Returns:
            FitnessScore instance

        Raises:
            FitnessScoreError: InvalidFitnessScore when the body is missing,
                is not valid JSON, or does not describe a complete record
        """
        if body is None or not body.strip():
            raise FitnessScoreError(
                ErrorKind.INVALID_FITNESS_SCORE, detail="request body is empty"
            )

        try:
            return cls.model_validate_json(body)
        except ValidationError as e:
            raise FitnessScoreError(
                ErrorKind.INVALID_FITNESS_SCORE, detail=str(e)
            ) from e

    def to_response_dict(self) -> Dict[str, Any]:
        """Plain JSON-ready representation used in API responses."""
        return self.model_dump()
