"""
lin-api

Request descriptor builders for the LinkedIn v1 REST API.
"""

from .models import RequestDescriptor
from .dispatch import api
from .core.exceptions import (
    LinApiError,
    MissingArgumentError,
    UnknownOperationError,
    InvalidOptionError,
)
from .v1 import groups, news, people, updates

__version__ = "0.1.0"

__all__ = [
    "api",
    "RequestDescriptor",
    "LinApiError",
    "MissingArgumentError",
    "UnknownOperationError",
    "InvalidOptionError",
    "groups",
    "news",
    "people",
    "updates",
]
