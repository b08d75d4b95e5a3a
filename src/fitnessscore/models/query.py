"""
Query model for fitness score range queries.

A FitnessScoreQuery describes one DynamoDB Query against a secondary index:
equality on the version partition key and an inclusive BETWEEN range on the
sort attribute (score or age).

Classes:
    SortType: Attribute the results are ranked by
    SortOrder: Direction of the results
    FitnessScoreQuery: Fully resolved query parameters
"""

from enum import Enum
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .fitness_score import AttributeType, encode_attribute


class SortType(str, Enum):
    """Attributes that have a secondary index keyed by (version, attribute)."""

    SCORE = "score"
    AGE = "age"


class SortOrder(str, Enum):
    """Result order; ASC maps to ScanIndexForward=True."""

    ASC = "asc"
    DESC = "desc"


# Defaults sit just outside the meaningful range of each attribute so that an
# unbounded request still uses a BETWEEN condition.
DEFAULT_BOUNDS: Dict[SortType, Tuple[str, str]] = {
    SortType.SCORE: ("-1", "101"),
    SortType.AGE: ("-1", "200"),
}


class FitnessScoreQuery(BaseModel):
    """
    Resolved range query over one of the fitness score indexes.

    Bounds are kept as the literal strings supplied by the caller; DynamoDB
    rejects values that are not numbers.

    Attributes:
        index_name: Name of the secondary index to query
        sort: Sort key attribute of that index
        order: Result order
        version: Partition key value
        lower_bound: Inclusive lower bound on the sort attribute
        upper_bound: Inclusive upper bound on the sort attribute
    """

    model_config = ConfigDict(frozen=True)

    index_name: str
    sort: SortType
    order: SortOrder = SortOrder.ASC
    version: str = Field(..., min_length=1)
    lower_bound: str
    upper_bound: str

    @property
    def scan_index_forward(self) -> bool:
        return self.order is SortOrder.ASC

    def to_query_kwargs(self, table_name: str) -> Dict[str, Any]:
        """
        Build keyword arguments for the low-level DynamoDB ``query`` call.

        Args:
            table_name: Table the index belongs to

        Returns:
            Dictionary of Query request parameters

        Example:
            >>> q = FitnessScoreQuery(index_name="ByScore", sort=SortType.SCORE,
            ...                       version="v1", lower_bound="-1", upper_bound="101")
            >>> q.to_query_kwargs("scores")["KeyConditionExpression"]
            '#version = :version AND #score BETWEEN :min_score AND :max_score'
        """
        sort = self.sort.value
        return {
            "TableName": table_name,
            "IndexName": self.index_name,
            "KeyConditionExpression": (
                f"#version = :version AND #{sort} BETWEEN :min_{sort} AND :max_{sort}"
            ),
            "ExpressionAttributeNames": {"#version": "version", f"#{sort}": sort},
            "ExpressionAttributeValues": {
                ":version": encode_attribute(AttributeType.STRING, self.version),
                f":min_{sort}": encode_attribute(AttributeType.NUMBER, self.lower_bound),
                f":max_{sort}": encode_attribute(AttributeType.NUMBER, self.upper_bound),
            },
            "ScanIndexForward": self.scan_index_forward,
        }
