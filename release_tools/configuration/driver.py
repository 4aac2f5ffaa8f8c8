"""Synchronous driver for configuration reconciliation for the CLI entry point."""

import asyncio
from pathlib import Path

from release_tools.configuration import reconcile
from release_tools.configuration.models import BaseConfig, GitHubConfig


def get_base_config(
    debug: bool | None = None,
    repositories_root: Path | None = None,
    release_branch: str | None = None,
) -> BaseConfig:
    """Synchronously get the reconciled configuration for local-only commands."""
    return asyncio.run(
        reconcile.reconcile_base_configuration(
            cli_debug=debug,
            cli_repositories_root=repositories_root,
            cli_release_branch=release_branch,
        )
    )


def get_github_config(
    debug: bool | None = None,
    repositories_root: Path | None = None,
    release_branch: str | None = None,
    github_api_url: str | None = None,
    github_pat_token: str | None = None,
    github_app_id: int | None = None,
    github_app_private_key_path: Path | None = None,
    github_app_installation_id: int | None = None,
) -> GitHubConfig:
    """Synchronously get the reconciled configuration for commands that talk to GitHub."""
    return asyncio.run(
        reconcile.reconcile_github_configuration(
            cli_debug=debug,
            cli_repositories_root=repositories_root,
            cli_release_branch=release_branch,
            cli_github_api_url=github_api_url,
            cli_github_pat_token=github_pat_token,
            cli_github_app_id=github_app_id,
            cli_github_app_private_key_path=github_app_private_key_path,
            cli_github_app_installation_id=github_app_installation_id,
        )
    )
