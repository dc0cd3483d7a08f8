"""Orchestrates a single mirror run."""

import time

import structlog

from gitvault.configuration.models import MirrorConfig
from gitvault.github.abc import RepositoryListerBase
from gitvault.github.lister import GitHubRepositoryLister
from gitvault.mirror.git import GitOperationsBase, SubprocessGitOperations
from gitvault.mirror.reconcile import reconcile_mirrors
from gitvault.mirror.results import AllMirrorReconciliationResults

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def run_mirror_workflow(
    config: MirrorConfig,
    lister: RepositoryListerBase | None = None,
    git_operations: GitOperationsBase | None = None,
) -> AllMirrorReconciliationResults:
    """Run the mirror workflow: list the user's repositories, then clone or update each one.

    Listing errors and backup directory errors propagate; per-repository git
    failures are only reported in the returned results.
    """
    if lister is None:
        lister = await GitHubRepositoryLister.create(
            github_token=config.github_token,
            github_username=config.github_username,
            github_api_url=config.github_api_url,
        )
    if git_operations is None:
        git_operations = SubprocessGitOperations()

    repositories = await lister.list_user_repositories()
    logger.info(f"fetched {len(repositories)} repositories from GitHub", github_username=config.github_username)

    start_time = time.time()
    results = reconcile_mirrors(config.backup_dir, repositories, git_operations)
    logger.info("Reconciled mirrors", backup_dir=str(config.backup_dir), duration=round(time.time() - start_time, 2))
    return results
