"""Recognise which image references still need uploading.

A reference is either a remote URL that is already hosted, or a data URL of
the form ``data:<image|video>/<subtype>;base64,<payload>`` that must go
through the upload service first.

Both data-URL kinds are held to the same rule: the media-type header must end
in ``;base64`` and the payload must be non-empty base64 text. A bare
``data:image/`` prefix is not enough.
"""

from __future__ import annotations

import re
from enum import Enum

_BASE64_PAYLOAD = re.compile(r"^[A-Za-z0-9+/=]+$")
_BASE64_MARKER = ";base64"

_DATA_URL_PREFIXES = {
    "data:image/": "image",
    "data:video/": "video",
}


class ImageReferenceKind(str, Enum):
    IMAGE_DATA_URL = "image-data-url"
    VIDEO_DATA_URL = "video-data-url"
    REMOTE_URL = "remote-url"
    OTHER = "other"


def _is_base64_data_url(reference: str) -> bool:
    header, sep, payload = reference.partition(",")
    if not sep:
        return False
    return header.endswith(_BASE64_MARKER) and bool(_BASE64_PAYLOAD.match(payload))


def classify_image_reference(reference: str) -> ImageReferenceKind:
    """Classify an image reference.

    Malformed data URLs (missing ``;base64`` or with a non-base64 payload)
    classify as OTHER.
    """
    if not isinstance(reference, str) or not reference:
        return ImageReferenceKind.OTHER

    for prefix, media in _DATA_URL_PREFIXES.items():
        if reference.startswith(prefix):
            if not _is_base64_data_url(reference):
                return ImageReferenceKind.OTHER
            if media == "image":
                return ImageReferenceKind.IMAGE_DATA_URL
            return ImageReferenceKind.VIDEO_DATA_URL

    if reference.startswith("http://") or reference.startswith("https://"):
        return ImageReferenceKind.REMOTE_URL

    return ImageReferenceKind.OTHER


def needs_upload(reference: str) -> bool:
    return classify_image_reference(reference) in (
        ImageReferenceKind.IMAGE_DATA_URL,
        ImageReferenceKind.VIDEO_DATA_URL,
    )
