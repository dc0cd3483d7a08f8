"""Models for GitVault configuration."""

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class GitVaultFileConfig(BaseModel):
    """Contents of the JSON secrets file.

    Both values are whitespace-trimmed. Missing keys load as empty strings so
    that the "missing" and "empty" cases are reported the same way.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    github_token: str = Field(default="", repr=False)
    github_username: str = ""


@dataclass(frozen=True)
class MirrorConfig:
    """Resolved configuration for a single mirror run."""

    github_token: str = field(repr=False)
    github_username: str
    backup_dir: Path
    github_api_url: str
