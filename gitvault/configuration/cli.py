"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
from pathlib import Path

import structlog
import typer
from typer import Option
from typing_extensions import Annotated

from gitvault.configuration.env import settings
from gitvault.configuration.exceptions import ConfigurationError
from gitvault.configuration.loader import load_configuration
from gitvault.github.exceptions import RepositoryListingError
from gitvault.mirror.driver import run_mirror_workflow
from gitvault.mirror.exceptions import BackupDirectoryError
from gitvault.utils.constants import VERSION
from gitvault.utils.log import configure_logging

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Mirror a GitHub user's repositories to local bare git clones.")


@typer_app.command(name="sync")
def sync_cli(
    config_path: Annotated[Path, Option(help="Path to the JSON file holding github_token and github_username.")] = settings.GITVAULT_CONFIG_PATH,
    backup_dir: Annotated[Path, Option(help="Directory in which one bare mirror per repository is kept.")] = settings.GITVAULT_BACKUP_DIR,
    github_api_url: Annotated[str, Option(help="GitHub API URL.")] = settings.GITHUB_API_URL,
    debug: Annotated[bool, Option(help="Enable debug logging.")] = settings.DEBUG,
) -> None:
    """Clone missing mirrors and update existing ones.

    Exits non-zero only when configuration, the backup directory, or the
    repository listing fails; individual clone or update failures are logged.
    """
    configure_logging(debug)

    try:
        config = load_configuration(
            config_path=config_path,
            backup_dir=backup_dir,
            github_api_url=github_api_url,
        )
        asyncio.run(run_mirror_workflow(config))
    except (ConfigurationError, BackupDirectoryError, RepositoryListingError) as exc:
        logger.error("sync failed", error=str(exc))
        raise typer.Exit(1) from exc


@typer_app.command(name="version")
def version_cli() -> None:
    """Print the GitVault version."""
    typer.echo(f"GitVault {VERSION}")


if __name__ == "__main__":
    typer_app()
