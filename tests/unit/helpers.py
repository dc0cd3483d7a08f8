"""Test doubles shared by the unit tests."""

from pathlib import Path

from gitvault.github.abc import RepositoryListerBase
from gitvault.github.models import RemoteRepository
from gitvault.mirror.exceptions import GitOperationError
from gitvault.mirror.git import GitOperationsBase


class RecordingGitOperations(GitOperationsBase):
    """Records clone and update calls; fails for the target directory names in `failing`."""

    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.clones: list[tuple[str, Path]] = []
        self.updates: list[Path] = []

    def clone_mirror(self, remote_url: str, target_path: Path) -> None:
        self.clones.append((remote_url, target_path))
        if target_path.name in self.failing:
            raise GitOperationError(f"clone of {remote_url} failed")

    def update_mirror(self, target_path: Path) -> None:
        self.updates.append(target_path)
        if target_path.name in self.failing:
            raise GitOperationError(f"update of {target_path} failed")


class StaticRepositoryLister(RepositoryListerBase):
    """Returns a fixed listing, or raises the given error."""

    def __init__(self, repositories: list[RemoteRepository] | None = None, error: Exception | None = None) -> None:
        self.repositories = repositories or []
        self.error = error
        self.calls = 0

    async def list_user_repositories(self) -> list[RemoteRepository]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.repositories)


def make_repository(full_name: str, repository_id: int = 1) -> RemoteRepository:
    """Build a repository descriptor with an SSH URL derived from its full name."""
    return RemoteRepository(id=repository_id, full_name=full_name, ssh_url=f"git@github.com:{full_name}.git")
