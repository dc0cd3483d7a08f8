"""Contains exceptions raised when loading application configuration."""

from pathlib import Path


class ConfigurationError(Exception):
    """Base class for configuration errors that abort a run."""

    pass


class ConfigurationFileError(ConfigurationError):
    """Raised when the JSON secrets file cannot be read or parsed."""

    def __init__(self, path: Path, cause: Exception) -> None:
        """Initializes the exception with the offending path and the underlying error."""
        super().__init__(f"[Config] error while loading {path}: {cause}")
        self.path = path
        self.cause = cause


class RequiredConfigurationElementError(ConfigurationError):
    """Raised when a required configuration element is missing or blank."""

    def __init__(self, name: str) -> None:
        """Initializes the exception with the name of the missing element."""
        super().__init__(f"[Config] {name} is either missing or empty")
        self.name = name
