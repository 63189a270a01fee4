"""showcase-api - client-side access layer for the project showcase backend.

Orchestrates the asset upload service and the GraphQL data service:
uploads images before project writes, picks the listing query, and attaches
the right credential to each request.
"""

from __future__ import annotations

from .config import ShowcaseConfig
from .domain import (
    FilteredListing,
    ImageReferenceKind,
    ProjectForm,
    UnfilteredListing,
    UploadOutcome,
    UploadStatus,
    classify_image_reference,
    needs_upload,
)
from .exceptions import GraphQLResponseError, ShowcaseError, ValidationError
from .services import (
    ProjectMutationResult,
    ProjectService,
    UserService,
    get_project_service,
    get_user_service,
)

__version__ = "0.1.0"

__all__ = [
    "FilteredListing",
    "GraphQLResponseError",
    "ImageReferenceKind",
    "ProjectForm",
    "ProjectMutationResult",
    "ProjectService",
    "ShowcaseConfig",
    "ShowcaseError",
    "UnfilteredListing",
    "UploadOutcome",
    "UploadStatus",
    "UserService",
    "ValidationError",
    "classify_image_reference",
    "get_project_service",
    "get_user_service",
    "needs_upload",
]
