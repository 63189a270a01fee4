"""Data types passed through the orchestration layer."""

from .image_reference import ImageReferenceKind, classify_image_reference, needs_upload
from .listing import DEFAULT_PAGE_SIZE, FilteredListing, ProjectListing, UnfilteredListing, listing_request
from .project_form import ProjectForm
from .upload_outcome import UploadOutcome, UploadStatus

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "FilteredListing",
    "ImageReferenceKind",
    "ProjectForm",
    "ProjectListing",
    "UnfilteredListing",
    "UploadOutcome",
    "UploadStatus",
    "classify_image_reference",
    "listing_request",
    "needs_upload",
]
