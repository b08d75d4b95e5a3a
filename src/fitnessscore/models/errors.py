"""
Error taxonomy for the fitness score API.

Every failure a handler can report to a caller is a FitnessScoreError carrying
one ErrorKind. The kind decides the HTTP status code and the message template
through ERROR_RESPONSES, which must cover every kind.

Classes:
    ErrorKind: Enum of the error kinds reported to API callers
    FitnessScoreError: Base exception for all reportable errors
    DecodingError: Raised when a stored item does not match the record model
    ConfigurationError: Raised when required environment values are missing
"""

from enum import Enum
from typing import Any, Dict, Tuple


class ErrorKind(str, Enum):
    """
    Enumeration of error kinds returned in the ``type`` field of error bodies.

    The value of each member is the name sent to the caller.
    """

    VERSION_NOT_SPECIFIED = "VersionNotSpecified"
    UNKNOWN_SORT_TYPE = "UnknownSortType"
    UNKNOWN_ORDER_TYPE = "UnknownOrderType"
    INVALID_FITNESS_SCORE = "InvalidFitnessScore"
    DYNAMODB_QUERY_ERROR = "DynamoDBQueryError"
    DYNAMODB_PUT_ERROR = "DynamoDBPutError"
    MALFORMED_FITNESS_SCORE = "MalformedFitnessScore"


# (status code, message template) per kind. Templates are formatted with the
# keyword arguments given to FitnessScoreError.
ERROR_RESPONSES: Dict[ErrorKind, Tuple[int, str]] = {
    ErrorKind.VERSION_NOT_SPECIFIED: (400, "version is not specified"),
    ErrorKind.UNKNOWN_SORT_TYPE: (400, "unknown sort type (`{value}`)"),
    ErrorKind.UNKNOWN_ORDER_TYPE: (400, "unknown order type (`{value}`)"),
    ErrorKind.INVALID_FITNESS_SCORE: (
        400,
        "invalid fitness score payload. it must have username(string), "
        "version(string), age(integer), score(integer)",
    ),
    ErrorKind.DYNAMODB_QUERY_ERROR: (500, "error during querying dynamodb"),
    ErrorKind.DYNAMODB_PUT_ERROR: (500, "error during storing item to dynamodb"),
    ErrorKind.MALFORMED_FITNESS_SCORE: (
        500,
        "stored fitness score could not be decoded",
    ),
}

_unmapped = set(ErrorKind) - set(ERROR_RESPONSES)
if _unmapped:
    raise RuntimeError(f"Error kinds without a response mapping: {sorted(_unmapped)}")


class FitnessScoreError(Exception):
    """
    Base exception for errors reported to API callers.

    Attributes:
        kind: The ErrorKind of this error
        params: Values substituted into the kind's message template
        detail: Internal detail for logs, never sent to the caller

    Example:
        >>> err = FitnessScoreError(ErrorKind.UNKNOWN_SORT_TYPE, value="rank")
        >>> err.status_code, err.message
        (400, 'unknown sort type (`rank`)')
    """

    def __init__(self, kind: ErrorKind, detail: str = "", **params: Any):
        self.kind = kind
        self.params = params
        self.detail = detail
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return ERROR_RESPONSES[self.kind][0]

    @property
    def message(self) -> str:
        return ERROR_RESPONSES[self.kind][1].format(**self.params)

    def to_dict(self) -> Dict[str, str]:
        """Body of the error response: ``{"type": ..., "message": ...}``."""
        return {"type": self.kind.value, "message": self.message}


class DecodingError(FitnessScoreError):
    """
    Raised when a DynamoDB item cannot be turned back into a FitnessScore.

    The offending field and reason are kept in ``detail`` for logging; the
    caller only sees the generic MalformedFitnessScore message.
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(
            ErrorKind.MALFORMED_FITNESS_SCORE, detail=f"{field}: {reason}"
        )


class ConfigurationError(Exception):
    """Required environment configuration is missing or invalid."""
