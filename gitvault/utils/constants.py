"""Shared constants used across the application."""

from pathlib import Path

VERSION = "0.0.1"
"""GitVault release version, reported in the GitHub User-Agent header."""

# GitHub API Constants
# --------------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub REST API base URL."""

GITHUB_ACCEPT_HEADER = "application/vnd.github+json"
"""Media type requested from the GitHub REST API."""

GITHUB_API_VERSION = "2022-11-28"
"""Value sent in the X-GitHub-Api-Version header."""

GITHUB_REQUEST_TIMEOUT_SECONDS = 30.0
"""Overall limit on the repository listing request, also passed to httpx as its per-phase timeout."""

USER_AGENT = f"GitVault/v{VERSION}"

# Mirror Layout Constants
# -----------------------

DEFAULT_CONFIG_PATH = Path("/secrets/gitvault.json")
"""Default location of the JSON secrets file holding the GitHub token and username."""

DEFAULT_BACKUP_DIR = Path("/backup")
"""Default root directory holding one bare mirror per repository."""

MIRROR_DIRECTORY_SUFFIX = ".git"

CURRENT_DIRECTORY = Path(".")
"""Backup directory sentinel that is never created."""
