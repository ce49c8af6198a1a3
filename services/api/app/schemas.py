"""API response schemas.

Handlers return plain dictionaries from `catalog.py`; these Pydantic models
are attached via `response_model=...` so responses are validated and the
OpenAPI docs describe the payloads.
"""

from pydantic import BaseModel, ConfigDict, Field


class ProjectOut(BaseModel):
    """A project card shown on the site."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    description: str
    github_url: str = Field(alias="githubUrl")
    image: str
    tags: list[str]


class TeamMemberOut(BaseModel):
    """A team member with GitHub and Discord profile links."""

    name: str
    role: str
    github: str
    discord: str


class HealthOut(BaseModel):
    """Payload of `GET /health`; `timestamp` is ISO-8601 UTC."""

    status: str
    message: str
    timestamp: str
