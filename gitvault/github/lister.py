"""Lists a user's repositories through the GitHub REST API."""

import asyncio
from typing import Self

import structlog
from githubkit.exception import GitHubException, RequestFailed
from pydantic import ValidationError

from gitvault.utils.constants import GITHUB_ACCEPT_HEADER, GITHUB_API_VERSION, GITHUB_REQUEST_TIMEOUT_SECONDS

from .abc import RepositoryListerBase
from .client import GitHubClient, get_github_client
from .exceptions import RepositoryListingError, UnexpectedStatusCodeError
from .models import RemoteRepository, RemoteRepositoryList

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class GitHubRepositoryLister(RepositoryListerBase):
    """Fetches `/users/{username}/repos` with a single bearer-authenticated request."""

    def __init__(
        self,
        client: GitHubClient,
        github_token: str,
        username: str,
        timeout: float = GITHUB_REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the lister with a client, the static token, and the user to list."""
        self.client = client
        self.github_token = github_token
        self.username = username
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(username={self.username!r})"

    @classmethod
    async def create(cls, github_token: str, github_username: str, github_api_url: str) -> Self:
        """Build a lister backed by a githubkit client for `github_api_url`."""
        if not github_token:
            raise RuntimeError("GitHub token authentication requires github_token in config.")
        client = await get_github_client(github_api_url)
        return cls(client, github_token, github_username)

    async def list_user_repositories(self) -> list[RemoteRepository]:
        """List the user's repositories in the order GitHub returns them.

        Only the first page is requested, and the whole request must finish
        within `timeout` seconds.

        Raises:
            UnexpectedStatusCodeError: If the response status is not 200.
            RepositoryListingError: If the request cannot be made in time or
                the body is not a JSON array of repository descriptors.
        """
        url = f"/users/{self.username}/repos"
        logger.debug("Requesting repository listing", url=url)
        try:
            response = await asyncio.wait_for(
                self.client.arequest(
                    "GET",
                    url,
                    headers={
                        "Authorization": f"Bearer {self.github_token}",
                        "Accept": GITHUB_ACCEPT_HEADER,
                        "X-GitHub-Api-Version": GITHUB_API_VERSION,
                    },
                ),
                timeout=self.timeout,
            )
        except RequestFailed as exc:
            raise UnexpectedStatusCodeError(exc.response.status_code) from exc
        except TimeoutError as exc:
            raise RepositoryListingError(f"failed to fetch repositories: timed out after {self.timeout}s") from exc
        except GitHubException as exc:
            raise RepositoryListingError(f"failed to fetch repositories: {exc}") from exc

        if response.status_code != 200:
            raise UnexpectedStatusCodeError(response.status_code)

        try:
            return RemoteRepositoryList.validate_json(response.content)
        except ValidationError as exc:
            raise RepositoryListingError(f"failed to decode response: {exc}") from exc
