"""Custom exceptions for the mirror module."""

from pathlib import Path


class BackupDirectoryError(Exception):
    """Raised when the backup root directory cannot be created."""

    def __init__(self, backup_dir: Path, cause: OSError) -> None:
        super().__init__(f"failed to create backup directory {backup_dir}: {cause}")
        self.backup_dir = backup_dir
        self.cause = cause


class GitOperationError(Exception):
    """Raised when a git clone or update of a single mirror fails."""

    pass
