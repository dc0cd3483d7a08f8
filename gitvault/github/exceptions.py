"""Exceptions raised while listing repositories from GitHub."""


class RepositoryListingError(Exception):
    """Raised when the repository listing cannot be fetched or decoded."""

    pass


class UnexpectedStatusCodeError(RepositoryListingError):
    """Raised when GitHub answers the listing request with a status other than 200."""

    def __init__(self, status_code: int) -> None:
        """Initializes the exception with the HTTP status code received."""
        super().__init__(f"unexpected status code: {status_code}")
        self.status_code = status_code
