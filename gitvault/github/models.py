"""Models for repository descriptors returned by the GitHub REST API."""

from pydantic import BaseModel, ConfigDict, TypeAdapter


class RemoteRepository(BaseModel):
    """A repository owned by the configured GitHub user."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    full_name: str
    ssh_url: str


RemoteRepositoryList = TypeAdapter(list[RemoteRepository])
"""Validates a decoded `/users/{username}/repos` response body."""
