"""Environment-dependent endpoint configuration.

Development runs against a fixed local stack (GraphQL gateway on port 4000,
application server on port 3000, well-known local API key). Production
values come from the environment:

- SHOWCASE_ENV (falls back to NODE_ENV): 'development' or 'production'
- SHOWCASE_GRAPHQL_API_URL: GraphQL endpoint
- SHOWCASE_GRAPHQL_API_KEY: API key sent as ``x-api-key`` on reads
- SHOWCASE_SERVER_URL: base URL of the server hosting /api/upload and /api/auth/token
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from .base import Configuration, ConfigValidationResult, SerializationError


class Environment(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


DEV_GRAPHQL_URL = "http://127.0.0.1:4000/graphql"
DEV_API_KEY = "letmein"
DEV_SERVER_URL = "http://localhost:3000"


def _resolve_environment(value: Optional[str]) -> Environment:
    if value and value.strip().lower() == Environment.PRODUCTION.value:
        return Environment.PRODUCTION
    return Environment.DEVELOPMENT


class ShowcaseConfig(Configuration):
    """Endpoints and API key for one deployment environment.

    Example usage:
        config = ShowcaseConfig.from_environment()
        config.validate_or_raise()
    """

    def __init__(
        self,
        environment: Environment = Environment.DEVELOPMENT,
        graphql_url: str = DEV_GRAPHQL_URL,
        api_key: str = DEV_API_KEY,
        server_url: str = DEV_SERVER_URL,
    ):
        self.environment = environment
        self.graphql_url = graphql_url
        self.api_key = api_key
        self.server_url = server_url

    @property
    def is_production(self) -> bool:
        return self.environment is Environment.PRODUCTION

    @property
    def upload_url(self) -> str:
        return self.server_url.rstrip("/") + "/api/upload"

    @property
    def token_url(self) -> str:
        return self.server_url.rstrip("/") + "/api/auth/token"

    def validate(self) -> ConfigValidationResult:
        result = ConfigValidationResult()

        for label, url in (("GraphQL API URL", self.graphql_url), ("Server URL", self.server_url)):
            for error in self._validate_http_url(label, url):
                result.add_error(error)

        if not self.api_key:
            result.add_error("API key is required (set SHOWCASE_GRAPHQL_API_KEY in production)")

        return result

    def _validate_http_url(self, label: str, url: str) -> list[str]:
        if not url or not url.strip():
            return [f"{label} cannot be empty"]

        if not (url.startswith("http://") or url.startswith("https://")):
            return [f"{label} must start with 'http://' or 'https://' (got '{url}')"]

        if not urlparse(url).netloc:
            return [f"{label} must specify a hostname (got '{url}')"]

        return []

    def to_dict(self) -> Dict[str, Any]:
        """Serialize without the API key so the result is safe to log."""
        return {
            "environment": self.environment.value,
            "graphql_url": self.graphql_url,
            "server_url": self.server_url,
            "api_key_set": bool(self.api_key),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ShowcaseConfig:
        try:
            environment = _resolve_environment(data.get("environment"))
            defaults = cls.for_environment(environment)
            return cls(
                environment=environment,
                graphql_url=data.get("graphql_url", defaults.graphql_url),
                api_key=data.get("api_key", defaults.api_key),
                server_url=data.get("server_url", defaults.server_url),
            )
        except (AttributeError, TypeError) as e:
            raise SerializationError(f"Failed to deserialize ShowcaseConfig: {e}")

    @classmethod
    def for_environment(cls, environment: Environment) -> ShowcaseConfig:
        """Build the configuration for ``environment`` from env vars and fixed dev values."""
        if environment is Environment.PRODUCTION:
            # Missing production values become empty strings; validate() reports them.
            return cls(
                environment=environment,
                graphql_url=os.environ.get("SHOWCASE_GRAPHQL_API_URL", ""),
                api_key=os.environ.get("SHOWCASE_GRAPHQL_API_KEY", ""),
                server_url=os.environ.get("SHOWCASE_SERVER_URL", ""),
            )
        return cls(environment=Environment.DEVELOPMENT)

    @classmethod
    def from_environment(cls) -> ShowcaseConfig:
        raw = os.environ.get("SHOWCASE_ENV") or os.environ.get("NODE_ENV")
        return cls.for_environment(_resolve_environment(raw))


class HttpConfig:
    """Configuration for HTTP requests."""

    # Applied to every GraphQL, upload and token request (seconds)
    SERVICE_TIMEOUT: float = float(os.getenv("SHOWCASE_HTTP_TIMEOUT", "60"))


http_config = HttpConfig()
