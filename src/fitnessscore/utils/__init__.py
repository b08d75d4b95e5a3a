"""
Utility functions and helpers for the fitness score API.

Contains the environment configuration and the HTTP response and logging
helpers shared by both Lambda handlers.
"""

from .config import HandlerConfig, get_config

__all__ = ["HandlerConfig", "get_config"]
