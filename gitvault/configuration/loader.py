"""Loads and validates the GitVault configuration."""

from pathlib import Path

import structlog
from pydantic import ValidationError

from gitvault.configuration.exceptions import ConfigurationFileError, RequiredConfigurationElementError
from gitvault.configuration.models import GitVaultFileConfig, MirrorConfig
from gitvault.utils.constants import DEFAULT_GITHUB_API_URL

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def load_config_file(path: Path) -> GitVaultFileConfig:
    """Parse the JSON secrets file at `path`.

    Raises:
        OSError: If the file cannot be read.
        ValidationError: If the file is not a JSON object of string values.
    """
    return GitVaultFileConfig.model_validate_json(path.read_text(encoding="utf-8"))


def load_configuration(
    config_path: Path,
    backup_dir: Path,
    github_api_url: str = DEFAULT_GITHUB_API_URL,
) -> MirrorConfig:
    """Load the secrets file and combine it with runtime options.

    Args:
        config_path (Path): Path to the JSON secrets file.
        backup_dir (Path): Root directory for the bare mirrors.
        github_api_url (str): Base URL of the GitHub REST API.

    Raises:
        ConfigurationFileError: If the secrets file is missing or malformed.
        RequiredConfigurationElementError: If the token or username is blank.

    Returns:
        MirrorConfig: The resolved configuration.
    """
    try:
        file_config = load_config_file(config_path)
    except (OSError, ValidationError) as exc:
        raise ConfigurationFileError(config_path, exc) from exc

    if not file_config.github_token:
        raise RequiredConfigurationElementError("GitHub token")
    if not file_config.github_username:
        raise RequiredConfigurationElementError("GitHub Username")

    logger.debug("Loaded configuration", config_path=str(config_path), github_username=file_config.github_username)
    return MirrorConfig(
        github_token=file_config.github_token,
        github_username=file_config.github_username,
        backup_dir=backup_dir,
        github_api_url=github_api_url,
    )
