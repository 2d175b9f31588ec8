"""
Exceptions raised at the dispatch boundary.

The builders themselves never raise for missing arguments, they return None.
"""

from typing import Dict, Any, Optional


class LinApiError(Exception):
    """Base exception for request builder errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingArgumentError(LinApiError):
    """Raised by strict dispatch when a builder produced no descriptor."""

    pass


class UnknownOperationError(LinApiError):
    """Raised when a version, group or operation name is not registered."""

    pass


class InvalidOptionError(LinApiError):
    """Raised when arguments do not match the builder's signature."""

    pass
