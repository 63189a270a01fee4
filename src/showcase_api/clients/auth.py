"""Credentials attached to data-service requests.

Each request carries exactly one credential, passed explicitly by the caller:
the API key for public reads, or the acting user's bearer token for writes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

API_KEY_HEADER = "x-api-key"

@dataclass(frozen=True)
class ApiKey:
    key: str

    def headers(self) -> Dict[str, str]:
        return {API_KEY_HEADER: self.key}

    def __repr__(self) -> str:
        return "ApiKey(key=***)"

@dataclass(frozen=True)
class BearerToken:
    """User-scoped credential.

    No expiry or refresh handling: an expired or empty token is forwarded as-is
    and the backend's rejection surfaces as a transport error.
    """

    token: str

    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    def __repr__(self) -> str:
        return "BearerToken(token=***)"

Credential = Union[ApiKey, BearerToken]
