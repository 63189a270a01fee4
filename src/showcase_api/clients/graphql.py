"""Stateless GraphQL transport for the data service."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import requests

from showcase_api.clients.auth import Credential
from showcase_api.config import http_config
from showcase_api.exceptions import GraphQLResponseError


logger = logging.getLogger(__name__)


def _request_headers(credential: Credential) -> Dict[str, str]:
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    headers.update(credential.headers())
    return headers


def execute_graphql_query(
    graphql_url: str,
    *,
    query: str,
    variables: Optional[Mapping[str, Any]] = None,
    credential: Credential,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """Execute a GraphQL operation and return its ``data`` object.

    Headers are built from ``credential`` for this request only; nothing is
    stored between calls. HTTP and network failures propagate unchanged.

    Raises:
        requests.RequestException: On network failure or non-2xx status
        GraphQLResponseError: If the response carries GraphQL errors
    """
    payload = {"query": query, "variables": dict(variables or {})}

    client = session or requests
    response = client.post(
        graphql_url,
        json=payload,
        headers=_request_headers(credential),
        timeout=timeout if timeout is not None else http_config.SERVICE_TIMEOUT,
    )
    response.raise_for_status()
    body = response.json()

    if not isinstance(body, dict):
        raise GraphQLResponseError("GraphQL response was not a JSON object", {"body": body})

    if body.get("errors"):
        logger.warning("GraphQL errors returned: %s", body["errors"])
        raise GraphQLResponseError(
            f"GraphQL request failed: {body['errors']}",
            {"errors": body["errors"], "data": body.get("data")},
        )

    return body.get("data") or {}
