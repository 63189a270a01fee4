"""HTTP client helpers for the data service and the application server."""

from .auth import ApiKey, BearerToken, Credential
from .graphql import execute_graphql_query
from .server import fetch_token, upload_image

__all__ = [
    "ApiKey",
    "BearerToken",
    "Credential",
    "execute_graphql_query",
    "fetch_token",
    "upload_image",
]
