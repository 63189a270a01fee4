"""Service layer for showcase-api."""

from typing import Optional

from showcase_api.services.project_service import ProjectMutationResult, ProjectService
from showcase_api.services.user_service import UserService

_project_service: Optional[ProjectService] = None
_user_service: Optional[UserService] = None


def get_project_service() -> ProjectService:
    """Get or create the process-wide project service."""
    global _project_service
    if _project_service is None:
        _project_service = ProjectService()
    return _project_service


def get_user_service() -> UserService:
    """Get or create the process-wide user service."""
    global _user_service
    if _user_service is None:
        _user_service = UserService()
    return _user_service


def reset_services() -> None:
    """Drop cached services so the next call re-reads configuration."""
    global _project_service, _user_service
    _project_service = None
    _user_service = None


__all__ = [
    "ProjectMutationResult",
    "ProjectService",
    "UserService",
    "get_project_service",
    "get_user_service",
    "reset_services",
]
