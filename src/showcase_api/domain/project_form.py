"""Caller-supplied project fields."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProjectForm(BaseModel):
    """Fields of a project as entered by the user.

    ``image`` is either an already-hosted URL or a data URL waiting for upload.
    Accepts snake_case or camelCase keys. Unknown keys are kept and forwarded.
    ``to_input`` emits only the fields the caller actually supplied, so a
    partial edit never overwrites stored values with defaults.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="allow")

    title: str
    description: str
    image: str
    live_site_url: str = ""
    github_url: str = ""
    category: str = ""

    def with_image(self, image: str) -> ProjectForm:
        return self.model_copy(update={"image": image})

    def to_input(self, **overrides: Any) -> Dict[str, Any]:
        data = self.model_dump(by_alias=True, exclude_unset=True)
        data.update(overrides)
        return data
