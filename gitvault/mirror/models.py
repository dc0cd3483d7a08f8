"""Internal data models for mirror reconciliation."""

from enum import Enum


class MirrorOutcome(Enum):
    """Enum for the outcome of reconciling one repository."""

    CLONED = "cloned"
    CLONED_WITH_ERROR = "cloned_with_error"
    UPDATED = "updated"
    UPDATED_WITH_ERROR = "updated_with_error"

    @property
    def failed(self) -> bool:
        """Whether the clone or update attempt failed."""
        return self in (MirrorOutcome.CLONED_WITH_ERROR, MirrorOutcome.UPDATED_WITH_ERROR)
