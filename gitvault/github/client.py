"""Sets up the githubkit client used for the repository listing."""

from typing import TypeAlias

from githubkit import GitHub
from githubkit.auth import UnauthAuthStrategy

from gitvault.utils.constants import GITHUB_REQUEST_TIMEOUT_SECONDS, USER_AGENT

GitHubClient: TypeAlias = GitHub[UnauthAuthStrategy]


async def get_github_client(github_api_url: str) -> GitHubClient:
    """Returns a GitHub client that adds no Authorization header of its own.

    The bearer token is sent per request by the caller; githubkit's token
    strategy would use the `token` scheme instead. Supports a custom base URL
    for GitHub Enterprise Server (GHES). HTTP caching and automatic retries
    are disabled so every run sees fresh data and a failed request fails the
    run.
    """
    return GitHub(
        auth=UnauthAuthStrategy(),
        base_url=github_api_url,
        user_agent=USER_AGENT,
        # httpx applies this per phase (connect, read, write, pool); the
        # overall limit is enforced by the lister.
        timeout=GITHUB_REQUEST_TIMEOUT_SECONDS,
        http_cache=False,
        auto_retry=False,
    )
