"""
Environment configuration for the fitness score Lambda functions.

The configuration is read from the process environment once, on the first
invocation of a warm container, and handed to the handlers as a parameter.
Missing required values raise ConfigurationError, which is deliberately not
turned into an HTTP response.

Classes:
    HandlerConfig: Resolved configuration for both handlers

Functions:
    get_config: Return the process-wide HandlerConfig
"""

import os
from functools import lru_cache
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.errors import ConfigurationError

REQUIRED_VARIABLES = ("TABLE_NAME", "INDEX_NAME_SCORE", "INDEX_NAME_AGE")


class HandlerConfig(BaseModel):
    """
    Configuration shared by the query and store handlers.

    Attributes:
        table_name: DynamoDB table holding the fitness scores
        index_name_score: GSI keyed by (version, score)
        index_name_age: GSI keyed by (version, age)
        cors_origin: Value of the Access-Control-Allow-Origin header
        environment: Deployment stage name, only used in logs
    """

    model_config = ConfigDict(frozen=True)

    table_name: str = Field(..., min_length=1)
    index_name_score: str = Field(..., min_length=1)
    index_name_age: str = Field(..., min_length=1)
    cors_origin: str = "*"
    environment: str = "dev"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HandlerConfig":
        """
        Build the configuration from environment variables.

        Args:
            environ: Mapping to read from, defaults to os.environ

        Returns:
            HandlerConfig instance

        Raises:
            ConfigurationError: If TABLE_NAME, INDEX_NAME_SCORE or
                INDEX_NAME_AGE is unset or empty
        """
        environ = os.environ if environ is None else environ

        missing = [name for name in REQUIRED_VARIABLES if not environ.get(name)]
        if missing:
            raise ConfigurationError(
                f"Required environment variables are not set: {', '.join(missing)}"
            )

        return cls(
            table_name=environ["TABLE_NAME"],
            index_name_score=environ["INDEX_NAME_SCORE"],
            index_name_age=environ["INDEX_NAME_AGE"],
            cors_origin=environ.get("CORS_ORIGIN", "*"),
            environment=environ.get("ENVIRONMENT", "dev"),
        )


@lru_cache(maxsize=None)
def get_config() -> HandlerConfig:
    """Process-wide configuration, resolved on first use."""
    return HandlerConfig.from_env()
