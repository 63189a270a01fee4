"""Exceptions raised by the showcase-api orchestration layer.

Transport failures are not wrapped: ``requests`` exceptions reach the caller
unchanged. The classes here cover failures this layer detects itself.
"""

from typing import Any, Dict, Optional


class ShowcaseError(Exception):
    """Base exception for showcase-api.

    Attributes:
        context: Dictionary with error details for debugging, such as the
                 operation name or the raw GraphQL errors.
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class GraphQLResponseError(ShowcaseError):
    """Raised when the data service answers 2xx but reports GraphQL errors.

    The ``context`` carries ``errors`` (the list from the response) and
    ``data`` (any partial data returned alongside them).
    """

    @property
    def errors(self) -> list:
        return self.context.get("errors", [])


class ValidationError(ShowcaseError):
    """Raised when caller input cannot form a valid request."""
