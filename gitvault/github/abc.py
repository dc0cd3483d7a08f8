"""Base ABC for repository listers."""

from abc import ABC, abstractmethod

from gitvault.github.models import RemoteRepository


class RepositoryListerBase(ABC):
    """Base ABC for sources of the remote repositories to mirror."""

    @abstractmethod
    async def list_user_repositories(self) -> list[RemoteRepository]:
        """List the repositories of the configured user."""
        pass
