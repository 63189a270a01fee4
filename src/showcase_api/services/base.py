"""Shared plumbing for services that talk to the data service."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import requests

from showcase_api.clients.auth import ApiKey, BearerToken, Credential
from showcase_api.clients.graphql import execute_graphql_query
from showcase_api.config import ShowcaseConfig

logger = logging.getLogger(__name__)


class GraphQLService:
    """Base class binding a configuration and optional HTTP session.

    Subclasses choose the credential per operation; the service itself keeps
    no credential state between calls.
    """

    def __init__(self, config: Optional[ShowcaseConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or ShowcaseConfig.from_environment()
        self.session = session

    def api_key(self) -> ApiKey:
        return ApiKey(self.config.api_key)

    @staticmethod
    def bearer(token: str) -> BearerToken:
        return BearerToken(token)

    def _execute(
        self,
        operation: str,
        query: str,
        variables: Mapping[str, Any],
        credential: Credential,
    ) -> Dict[str, Any]:
        logger.debug("Executing %s with %s", operation, type(credential).__name__)
        return execute_graphql_query(
            self.config.graphql_url,
            query=query,
            variables=variables,
            credential=credential,
            session=self.session,
        )
