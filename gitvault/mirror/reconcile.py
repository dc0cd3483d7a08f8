"""Reconciles the remote repository listing against local bare mirrors."""

import os
from pathlib import Path

import structlog

from gitvault.github.models import RemoteRepository
from gitvault.mirror.exceptions import BackupDirectoryError, GitOperationError
from gitvault.mirror.git import GitOperationsBase
from gitvault.mirror.models import MirrorOutcome
from gitvault.mirror.results import AllMirrorReconciliationResults, MirrorReconciliationResult
from gitvault.utils.constants import CURRENT_DIRECTORY, MIRROR_DIRECTORY_SUFFIX

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def repository_name(full_name: str) -> str:
    """Return the part of an "owner/name" string after the first slash.

    A name without a slash is returned unchanged.
    """
    parts = full_name.split("/", 1)
    if len(parts) == 2:
        return parts[1]
    return full_name


def mirror_path(backup_dir: Path, full_name: str) -> Path:
    """Return the bare mirror directory for a repository."""
    return backup_dir / (repository_name(full_name) + MIRROR_DIRECTORY_SUFFIX)


def ensure_backup_directory(backup_dir: Path) -> None:
    """Create the backup root and its parents unless it is the current directory."""
    if backup_dir == CURRENT_DIRECTORY:
        return
    try:
        backup_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BackupDirectoryError(backup_dir, exc) from exc


def reconcile_repository(backup_dir: Path, repository: RemoteRepository, git_operations: GitOperationsBase) -> MirrorReconciliationResult:
    """Clone or update the mirror of one repository.

    An existing directory at the mirror path is updated; anything else,
    including a regular file at that path, is cloned over. Git failures are
    logged and recorded in the result instead of being raised.
    """
    target = mirror_path(backup_dir, repository.full_name)

    # os.path.isdir treats any stat error, such as EACCES, as "not a mirror".
    if os.path.isdir(target):
        logger.info("updating mirror", repository=repository.full_name, dir=str(target))
        try:
            git_operations.update_mirror(target)
        except GitOperationError as exc:
            logger.error("failed to update mirror", repository=repository.full_name, error=str(exc))
            return MirrorReconciliationResult(repository, target, MirrorOutcome.UPDATED_WITH_ERROR, str(exc))
        return MirrorReconciliationResult(repository, target, MirrorOutcome.UPDATED)

    logger.info("cloning mirror", repository=repository.full_name, dir=str(target))
    try:
        git_operations.clone_mirror(repository.ssh_url, target)
    except GitOperationError as exc:
        logger.error("failed to clone mirror", repository=repository.full_name, error=str(exc))
        return MirrorReconciliationResult(repository, target, MirrorOutcome.CLONED_WITH_ERROR, str(exc))
    return MirrorReconciliationResult(repository, target, MirrorOutcome.CLONED)


def reconcile_mirrors(
    backup_dir: Path,
    repositories: list[RemoteRepository],
    git_operations: GitOperationsBase,
) -> AllMirrorReconciliationResults:
    """Ensure every repository has an up-to-date bare mirror under `backup_dir`.

    Repositories are processed one at a time in the given order. A failed
    clone or update never stops the loop, and a partially cloned directory is
    left in place for the next run to update.

    Args:
        backup_dir (Path): Root directory holding the mirrors.
        repositories (list[RemoteRepository]): Repositories to mirror.
        git_operations (GitOperationsBase): Performs the clone and update calls.

    Raises:
        BackupDirectoryError: If `backup_dir` cannot be created.

    Returns:
        AllMirrorReconciliationResults: One result per repository.
    """
    ensure_backup_directory(backup_dir)

    results = [reconcile_repository(backup_dir, repository, git_operations) for repository in repositories]
    all_results = AllMirrorReconciliationResults(results)

    logger.info(
        "sync completed successfully",
        total=all_results.total,
        cloned=all_results.cloned,
        updated=all_results.updated,
        failed=all_results.failed,
    )
    return all_results
