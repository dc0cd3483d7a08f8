"""Contains results of mirror reconciliation."""

from pathlib import Path

from gitvault.github.models import RemoteRepository
from gitvault.mirror.models import MirrorOutcome


class MirrorReconciliationResult:
    """Contains the result of reconciling a single repository."""

    def __init__(self, repository: RemoteRepository, mirror_path: Path, outcome: MirrorOutcome, error: str | None = None) -> None:
        """Initialize the result with the repository, its mirror path, the outcome, and any error."""
        self.repository = repository
        self.mirror_path = mirror_path
        self.outcome = outcome
        self.error = error


class AllMirrorReconciliationResults:
    """Contains results of mirror reconciliation for all repositories."""

    def __init__(self, results: list[MirrorReconciliationResult]) -> None:
        """Initialize with the per-repository results, in processing order."""
        self.results = results

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def cloned(self) -> int:
        return sum(1 for result in self.results if result.outcome == MirrorOutcome.CLONED)

    @property
    def updated(self) -> int:
        return sum(1 for result in self.results if result.outcome == MirrorOutcome.UPDATED)

    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if result.outcome.failed)
