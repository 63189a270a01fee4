"""Calls to the application server: asset upload and session token."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from showcase_api.config import http_config
from showcase_api.domain.upload_outcome import UploadOutcome


logger = logging.getLogger(__name__)


def upload_image(
    upload_url: str,
    image_reference: str,
    *,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> UploadOutcome:
    """Post an image reference to the upload endpoint and report the result.

    The reference is sent as-is (remote URL or data URL); the server decides
    how to store it. A reachable endpoint that answers without a ``url`` is a
    soft failure and comes back as ``UploadOutcome.failed``.

    Raises:
        requests.RequestException: On network failure or non-2xx status
    """
    client = session or requests
    response = client.post(
        upload_url,
        json={"path": image_reference},
        timeout=timeout if timeout is not None else http_config.SERVICE_TIMEOUT,
    )
    response.raise_for_status()
    body = response.json()

    url = body.get("url") if isinstance(body, dict) else None
    if isinstance(url, str) and url:
        logger.debug("Asset uploaded to %s", url)
        return UploadOutcome.uploaded(url)

    logger.warning("Upload endpoint returned no url")
    return UploadOutcome.failed("upload response did not include a url")


def fetch_token(
    token_url: str,
    *,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> Any:
    """Return the session endpoint's JSON body unmodified."""
    client = session or requests
    response = client.get(
        token_url,
        timeout=timeout if timeout is not None else http_config.SERVICE_TIMEOUT,
    )
    response.raise_for_status()
    return response.json()
