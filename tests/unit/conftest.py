"""Shared fixtures for showcase-api unit tests."""

from __future__ import annotations

from typing import Any, Callable, Dict, List
from unittest.mock import Mock

import pytest

from showcase_api.config import Environment, ShowcaseConfig

GRAPHQL_URL = "https://data.example.com/graphql"
SERVER_URL = "https://app.example.com"


def make_response(payload: Any, status_code: int = 200) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


@pytest.fixture
def config() -> ShowcaseConfig:
    return ShowcaseConfig(
        environment=Environment.PRODUCTION,
        graphql_url=GRAPHQL_URL,
        api_key="key-abc",
        server_url=SERVER_URL,
    )


class FakeSession:
    """Records posts and answers upload and GraphQL calls separately."""

    def __init__(self, upload_payload: Any = None, graphql_data: Dict[str, Any] = None):
        self.upload_payload = upload_payload if upload_payload is not None else {"url": "https://cdn.example.com/new.png"}
        self.graphql_data = graphql_data if graphql_data is not None else {"ok": True}
        self.calls: List[Dict[str, Any]] = []
        self.get = Mock(return_value=make_response({"token": "session-token"}))

    def post(self, url: str, **kwargs: Any) -> Mock:
        self.calls.append({"url": url, **kwargs})
        if url.endswith("/api/upload"):
            return make_response(self.upload_payload)
        return make_response({"data": self.graphql_data})

    @property
    def upload_calls(self) -> List[Dict[str, Any]]:
        return [call for call in self.calls if call["url"].endswith("/api/upload")]

    @property
    def graphql_calls(self) -> List[Dict[str, Any]]:
        return [call for call in self.calls if not call["url"].endswith("/api/upload")]


@pytest.fixture
def session_factory() -> Callable[..., FakeSession]:
    return FakeSession


@pytest.fixture
def response_factory() -> Callable[..., Mock]:
    return make_response
