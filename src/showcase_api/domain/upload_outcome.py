"""Result of an asset upload attempt."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class UploadStatus(str, Enum):
    UPLOADED = "uploaded"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class UploadOutcome:
    """What happened to an image reference before a project write.

    Attributes:
        status: UPLOADED, SKIPPED (reference did not need uploading) or FAILED
        url: Durable URL reported by the upload service, set only when UPLOADED
        reason: Why the upload did not produce a URL, set only when FAILED
    """

    status: UploadStatus
    url: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def uploaded(cls, url: str) -> UploadOutcome:
        return cls(status=UploadStatus.UPLOADED, url=url)

    @classmethod
    def skipped(cls) -> UploadOutcome:
        return cls(status=UploadStatus.SKIPPED)

    @classmethod
    def failed(cls, reason: str) -> UploadOutcome:
        return cls(status=UploadStatus.FAILED, reason=reason)

    @property
    def succeeded(self) -> bool:
        return self.status is UploadStatus.UPLOADED
