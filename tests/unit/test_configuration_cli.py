"""Unit tests for the Typer CLI."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

from helpers import StaticRepositoryLister, make_repository
from typer.testing import CliRunner

from gitvault.configuration.cli import typer_app
from gitvault.github.exceptions import UnexpectedStatusCodeError
from gitvault.mirror.results import AllMirrorReconciliationResults
from gitvault.utils.constants import VERSION

runner = CliRunner()


def write_config(tmp_path: Path, content: str = '{"github_token": "t", "github_username": "u"}') -> Path:
    path = tmp_path / "gitvault.json"
    path.write_text(content)
    return path


def test_version() -> None:
    """Test that the version command prints the release version."""
    result = runner.invoke(typer_app, ["version"])
    assert result.exit_code == 0
    assert f"GitVault {VERSION}" in result.output


def test_sync_success(tmp_path: Path) -> None:
    """Test that a completed run exits zero and receives the resolved configuration."""
    workflow = AsyncMock(return_value=AllMirrorReconciliationResults([]))
    with (
        patch("gitvault.configuration.cli.configure_logging") as mock_logging,
        patch("gitvault.configuration.cli.run_mirror_workflow", new=workflow),
    ):
        result = runner.invoke(
            typer_app,
            ["sync", "--config-path", str(write_config(tmp_path)), "--backup-dir", str(tmp_path / "backup"), "--debug"],
        )

    assert result.exit_code == 0
    mock_logging.assert_called_once_with(True)
    config = workflow.await_args.args[0]
    assert config.github_username == "u"
    assert config.backup_dir == tmp_path / "backup"


def test_sync_missing_configuration_exits_non_zero(tmp_path: Path) -> None:
    """Test that a missing secrets file fails the run before any workflow step."""
    workflow = AsyncMock()
    with (
        patch("gitvault.configuration.cli.configure_logging"),
        patch("gitvault.configuration.cli.run_mirror_workflow", new=workflow),
    ):
        result = runner.invoke(typer_app, ["sync", "--config-path", str(tmp_path / "missing.json"), "--backup-dir", str(tmp_path)])

    assert result.exit_code == 1
    workflow.assert_not_called()


def test_sync_listing_failure_exits_non_zero(tmp_path: Path) -> None:
    """Test that a listing failure exits with status 1."""
    lister = StaticRepositoryLister(error=UnexpectedStatusCodeError(500))
    with (
        patch("gitvault.configuration.cli.configure_logging"),
        patch("gitvault.mirror.driver.GitHubRepositoryLister.create", new=AsyncMock(return_value=lister)),
    ):
        result = runner.invoke(typer_app, ["sync", "--config-path", str(write_config(tmp_path)), "--backup-dir", str(tmp_path / "backup")])

    assert result.exit_code == 1
    assert lister.calls == 1
    assert not (tmp_path / "backup").exists()


def test_sync_clone_failures_exit_zero(tmp_path: Path) -> None:
    """Test that per-repository failures do not change the exit status."""
    lister = StaticRepositoryLister([make_repository("u/broken")])
    with (
        patch("gitvault.configuration.cli.configure_logging"),
        patch("gitvault.mirror.driver.GitHubRepositoryLister.create", new=AsyncMock(return_value=lister)),
        patch("gitvault.mirror.git.subprocess.run", side_effect=FileNotFoundError("git")),
    ):
        result = runner.invoke(typer_app, ["sync", "--config-path", str(write_config(tmp_path)), "--backup-dir", str(tmp_path / "backup")])

    assert result.exit_code == 0
