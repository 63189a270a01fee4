"""Project workflows: upload-then-write, listings and lookups.

Writes (create, update, delete) carry the caller's bearer token; every read
carries the API key. Create always uploads the image before submitting the
mutation; edit uploads only when the image is a base64 data URL.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from showcase_api.clients import server
from showcase_api.domain.image_reference import needs_upload
from showcase_api.domain.listing import FilteredListing, ProjectListing, UnfilteredListing, listing_request
from showcase_api.domain.project_form import ProjectForm
from showcase_api.domain.upload_outcome import UploadOutcome
from showcase_api.graphql_queries import (
    ALL_PROJECTS_QUERY,
    CREATE_PROJECT_MUTATION,
    DELETE_PROJECT_MUTATION,
    GET_PROJECT_BY_ID_QUERY,
    PROJECTS_BY_CATEGORY_QUERY,
    PROJECTS_OF_USER_QUERY,
    UPDATE_PROJECT_MUTATION,
)
from showcase_api.services.base import GraphQLService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectMutationResult:
    """Outcome of a create or edit workflow.

    Attributes:
        upload: What happened to the image before the write
        data: GraphQL ``data`` from the mutation, None when nothing was submitted
        submitted: Whether the mutation reached the data service
    """

    upload: UploadOutcome
    data: Optional[Dict[str, Any]] = None
    submitted: bool = False


def _as_form(form: Union[ProjectForm, Dict[str, Any]]) -> ProjectForm:
    if isinstance(form, ProjectForm):
        return form
    return ProjectForm.model_validate(form)


class ProjectService(GraphQLService):
    """Orchestrates the asset uploader and the data service for projects."""

    def upload_image(self, image_reference: str) -> UploadOutcome:
        return server.upload_image(self.config.upload_url, image_reference, session=self.session)

    def create_new_project(
        self,
        form: Union[ProjectForm, Dict[str, Any]],
        creator_id: str,
        token: str,
    ) -> ProjectMutationResult:
        """Upload the image, then create the project linked to ``creator_id``.

        The upload always runs, even for already-hosted URLs. When it yields no
        URL the create mutation is not submitted.
        """
        form = _as_form(form)
        upload = self.upload_image(form.image)

        if not upload.succeeded:
            logger.warning("Project not created: %s", upload.reason)
            return ProjectMutationResult(upload=upload)

        variables = {
            "input": form.to_input(image=upload.url, createdBy={"link": creator_id}),
        }
        data = self._execute("CreateProject", CREATE_PROJECT_MUTATION, variables, self.bearer(token))
        return ProjectMutationResult(upload=upload, data=data, submitted=True)

    def edit_project(
        self,
        form: Union[ProjectForm, Dict[str, Any]],
        project_id: str,
        token: str,
    ) -> ProjectMutationResult:
        """Update a project, re-uploading the image only if it is a new data URL.

        A failed upload keeps the original image; the update is still sent.
        """
        form = _as_form(form)
        updated_form = form

        if needs_upload(form.image):
            upload = self.upload_image(form.image)
            if upload.succeeded:
                updated_form = form.with_image(upload.url)
            else:
                logger.warning("Keeping previous image for project %s: %s", project_id, upload.reason)
        else:
            upload = UploadOutcome.skipped()

        variables = {
            "input": updated_form.to_input(),
            "id": project_id,
        }
        data = self._execute("UpdateProject", UPDATE_PROJECT_MUTATION, variables, self.bearer(token))
        return ProjectMutationResult(upload=upload, data=data, submitted=True)

    def delete_project(self, project_id: str, token: str) -> Dict[str, Any]:
        return self._execute("DeleteProject", DELETE_PROJECT_MUTATION, {"id": project_id}, self.bearer(token))

    def list_projects(self, listing: ProjectListing) -> Dict[str, Any]:
        """Fetch one page of projects. Callers feed ``endCursor`` back for the next page."""
        if isinstance(listing, FilteredListing):
            return self._execute(
                "ProjectsByCategory", PROJECTS_BY_CATEGORY_QUERY, listing.variables(), self.api_key()
            )
        if isinstance(listing, UnfilteredListing):
            return self._execute("AllProjects", ALL_PROJECTS_QUERY, listing.variables(), self.api_key())
        raise TypeError(f"Unsupported listing request: {listing!r}")

    def fetch_all_projects(self, category: Optional[str] = None, end_cursor: Optional[str] = None) -> Dict[str, Any]:
        return self.list_projects(listing_request(category, end_cursor))

    def get_project_details(self, project_id: str) -> Dict[str, Any]:
        return self._execute("GetProjectById", GET_PROJECT_BY_ID_QUERY, {"id": project_id}, self.api_key())

    def get_user_projects(self, user_id: str, last: Optional[int] = None) -> Dict[str, Any]:
        variables: Dict[str, Any] = {"id": user_id}
        # Omitted so the query's own default applies
        if last is not None:
            variables["last"] = last
        return self._execute("GetUserProjects", PROJECTS_OF_USER_QUERY, variables, self.api_key())
