"""Reconciles configuration between CLI arguments and environment variables."""

from pathlib import Path

import structlog

from release_tools.configuration.env import Settings, settings
from release_tools.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from release_tools.configuration.models import BaseConfig, GitHubAuthenticationType, GitHubConfig
from release_tools.exceptions import ValidationError

logger = structlog.get_logger(__name__)


async def validate_github_authentication_configuration(
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
) -> GitHubAuthenticationType:
    """Validates the GitHub authentication configuration.

    Args:
        github_pat_token (str | None): The GitHub PAT token.
        github_app_id (int | None): The GitHub App ID.
        github_app_private_key_path (Path | None): The path to the GitHub App private key.
        github_app_installation_id (int | None): The GitHub App installation ID.

    Raises:
        GitHubAuthenticationConfigurationUndefinedError: If neither or both of the PAT and App configurations are defined,
            or the App configuration is incomplete.

    Returns:
        GitHubAuthenticationType: The type of GitHub authentication used.
    """
    app_settings = {
        "GitHub App ID (command line option github_app_id, environment variable GITHUB_APP_ID)": github_app_id,
        "GitHub App private key path (command line option github_app_private_key_path, environment variable GITHUB_APP_PRIVATE_KEY_PATH)": (
            github_app_private_key_path
        ),
        "GitHub App installation ID (command line option github_app_installation_id, environment variable GITHUB_APP_INSTALLATION_ID)": (
            github_app_installation_id
        ),
    }
    any_app_setting = any(app_settings.values())

    if github_pat_token and any_app_setting:
        raise GitHubAuthenticationConfigurationUndefinedError("Both PAT and GitHub App configurations are defined. Please use one or the other.")
    if github_pat_token:
        return GitHubAuthenticationType.PAT
    if all(app_settings.values()):
        return GitHubAuthenticationType.APP
    if any_app_setting:
        missing = [name for name, value in app_settings.items() if not value]
        raise GitHubAuthenticationConfigurationUndefinedError("Incomplete GitHub App configuration - missing settings include " + ", ".join(missing))
    raise GitHubAuthenticationConfigurationUndefinedError(
        "No GitHub authentication configuration provided. Please provide either a PAT or a GitHub App configuration."
    )


async def reconcile_base_configuration(
    cli_debug: bool | None = None,
    cli_repositories_root: Path | None = None,
    cli_release_branch: str | None = None,
    env: Settings = settings,
) -> BaseConfig:
    """Reconcile the configuration shared by all commands, preferring CLI values over the environment."""
    config = BaseConfig(
        debug=cli_debug if cli_debug is not None else env.DEBUG,
        repositories_root=cli_repositories_root or env.REPOSITORIES_ROOT,
        release_branch=cli_release_branch or env.RELEASE_BRANCH,
    )
    if not config.repositories_root.is_dir():
        raise ValidationError(f"Repositories root '{config.repositories_root}' is not a directory")
    logger.debug("Reconciled base configuration", repositories_root=str(config.repositories_root), release_branch=config.release_branch)
    return config


async def reconcile_github_configuration(
    cli_debug: bool | None = None,
    cli_repositories_root: Path | None = None,
    cli_release_branch: str | None = None,
    cli_github_api_url: str | None = None,
    cli_github_pat_token: str | None = None,
    cli_github_app_id: int | None = None,
    cli_github_app_private_key_path: Path | None = None,
    cli_github_app_installation_id: int | None = None,
    env: Settings = settings,
) -> GitHubConfig:
    """Reconcile the configuration of commands that talk to GitHub, preferring CLI values over the environment."""
    base = await reconcile_base_configuration(cli_debug, cli_repositories_root, cli_release_branch, env=env)
    github_pat_token = cli_github_pat_token or env.GITHUB_PAT_TOKEN
    github_app_id = cli_github_app_id or env.GITHUB_APP_ID
    github_app_private_key_path = cli_github_app_private_key_path or env.GITHUB_APP_PRIVATE_KEY_PATH
    github_app_installation_id = cli_github_app_installation_id or env.GITHUB_APP_INSTALLATION_ID
    github_authentication_type = await validate_github_authentication_configuration(
        github_pat_token=github_pat_token,
        github_app_id=github_app_id,
        github_app_private_key_path=github_app_private_key_path,
        github_app_installation_id=github_app_installation_id,
    )
    return GitHubConfig(
        debug=base.debug,
        repositories_root=base.repositories_root,
        release_branch=base.release_branch,
        github_api_url=cli_github_api_url or env.GITHUB_API_URL,
        github_authentication_type=github_authentication_type,
        github_pat_token=github_pat_token,
        github_app_id=github_app_id,
        github_app_private_key_path=github_app_private_key_path,
        github_app_installation_id=github_app_installation_id,
    )
