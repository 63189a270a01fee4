"""User lookups, creation and session token retrieval."""

from __future__ import annotations

from typing import Any, Dict

from showcase_api.clients import server
from showcase_api.graphql_queries import CREATE_USER_MUTATION, GET_USER_QUERY
from showcase_api.services.base import GraphQLService


class UserService(GraphQLService):
    """Pass-through user operations, all sent with the API key."""

    def get_user(self, email: str) -> Dict[str, Any]:
        return self._execute("GetUser", GET_USER_QUERY, {"email": email}, self.api_key())

    def create_user(self, name: str, email: str, avatar_url: str) -> Dict[str, Any]:
        variables = {
            "input": {
                "name": name,
                "email": email,
                "avatarUrl": avatar_url,
            }
        }
        return self._execute("CreateUser", CREATE_USER_MUTATION, variables, self.api_key())

    def fetch_token(self) -> Any:
        """Return the session endpoint's JSON payload as-is."""
        return server.fetch_token(self.config.token_url, session=self.session)
