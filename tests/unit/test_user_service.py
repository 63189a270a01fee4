"""User operation tests."""

from __future__ import annotations

from showcase_api.graphql_queries import CREATE_USER_MUTATION, GET_USER_QUERY
from showcase_api.services import UserService


def test_get_user_uses_api_key(config, session_factory):
    session = session_factory(graphql_data={"user": {"id": "u1"}})
    service = UserService(config, session=session)

    assert service.get_user("someone@example.com") == {"user": {"id": "u1"}}

    call = session.graphql_calls[0]
    assert call["json"] == {"query": GET_USER_QUERY, "variables": {"email": "someone@example.com"}}
    assert call["headers"]["x-api-key"] == "key-abc"


def test_create_user_builds_input(config, session_factory):
    session = session_factory()
    service = UserService(config, session=session)

    service.create_user("Someone", "someone@example.com", "https://img.example.com/a.png")

    call = session.graphql_calls[0]
    assert call["json"]["query"] == CREATE_USER_MUTATION
    assert call["json"]["variables"] == {
        "input": {
            "name": "Someone",
            "email": "someone@example.com",
            "avatarUrl": "https://img.example.com/a.png",
        }
    }
    assert call["headers"]["x-api-key"] == "key-abc"
    assert "Authorization" not in call["headers"]


def test_fetch_token_uses_server_url(config, session_factory):
    session = session_factory()
    service = UserService(config, session=session)

    assert service.fetch_token() == {"token": "session-token"}
    assert session.get.call_args.args == ("https://app.example.com/api/auth/token",)
