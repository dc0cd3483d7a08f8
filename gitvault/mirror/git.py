"""Git operations used to create and refresh bare mirrors."""

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

import structlog

from gitvault.mirror.exceptions import GitOperationError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class GitOperationsBase(ABC):
    """Base ABC for the two git actions a mirror run performs."""

    @abstractmethod
    def clone_mirror(self, remote_url: str, target_path: Path) -> None:
        """Mirror-clone `remote_url` into `target_path`, which must not exist yet."""
        pass

    @abstractmethod
    def update_mirror(self, target_path: Path) -> None:
        """Fetch all remote refs into the existing mirror at `target_path`."""
        pass


class SubprocessGitOperations(GitOperationsBase):
    """Runs the git executable; its output is passed through to this process."""

    def __init__(self, git_executable: str = "git") -> None:
        self.git_executable = git_executable

    def clone_mirror(self, remote_url: str, target_path: Path) -> None:
        self._run([self.git_executable, "clone", "--mirror", remote_url, str(target_path)])

    def update_mirror(self, target_path: Path) -> None:
        self._run([self.git_executable, "remote", "update"], cwd=target_path)

    def _run(self, cmd: list[str], cwd: Path | None = None) -> None:
        command = " ".join(cmd)
        logger.debug("Running git command", command=command, cwd=str(cwd) if cwd else None)
        try:
            subprocess.run(cmd, cwd=cwd, check=True)
        except subprocess.CalledProcessError as exc:
            raise GitOperationError(f"{command} exited with status {exc.returncode}") from exc
        except OSError as exc:
            # Missing git executable or a cwd that vanished.
            raise GitOperationError(f"failed to run {command}: {exc}") from exc
