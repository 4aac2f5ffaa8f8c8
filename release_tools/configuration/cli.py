"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from release_tools.changelog.assembler import update_changelog
from release_tools.changelog.version import get_version, validate_release_version
from release_tools.configuration.driver import get_base_config, get_github_config
from release_tools.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from release_tools.configuration.models import GitHubConfig
from release_tools.exceptions import ReleaseToolsError
from release_tools.github.adapter import GitHubKitAdapter
from release_tools.release.drafter import new_draft_release
from release_tools.release.propagator import update_version
from release_tools.repositories import RepositoryIdentity, get_repository_identity
from release_tools.utils.helpers import always_confirm
from release_tools.utils.logging_config import configure_logging

load_dotenv()

logger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Release bookkeeping for the PowerShell editor repositories.")


def main_callback(
    ctx: typer.Context,
    debug: Annotated[bool | None, Option(envvar="DEBUG", help="Enable debug logging.")] = None,
    repositories_root: Annotated[
        Path | None, Option(envvar="REPOSITORIES_ROOT", help="Directory holding a checkout of each repository, named after it.")
    ] = None,
    release_branch: Annotated[str | None, Option(envvar="RELEASE_BRANCH", help="Branch release commits are made on.")] = None,
) -> None:
    """Store the options shared by every command in the context."""
    ctx.ensure_object(dict)
    configure_logging(bool(debug))
    ctx.obj["debug"] = debug
    ctx.obj["repositories_root"] = repositories_root
    ctx.obj["release_branch"] = release_branch


typer_app.callback()(main_callback)


def _fail(error: Exception) -> typer.Exit:
    typer.echo(f"Error: {error}", err=True)
    return typer.Exit(1)


def _parse_repository(repository: str) -> RepositoryIdentity:
    try:
        return get_repository_identity(repository)
    except ReleaseToolsError as exc:
        raise _fail(exc) from exc


def _github_config(
    ctx: typer.Context,
    github_api_url: str | None,
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
) -> GitHubConfig:
    try:
        return get_github_config(
            debug=ctx.obj["debug"],
            repositories_root=ctx.obj["repositories_root"],
            release_branch=ctx.obj["release_branch"],
            github_api_url=github_api_url,
            github_pat_token=github_pat_token,
            github_app_id=github_app_id,
            github_app_private_key_path=github_app_private_key_path,
            github_app_installation_id=github_app_installation_id,
        )
    except (ReleaseToolsError, GitHubAuthenticationConfigurationUndefinedError) as exc:
        raise _fail(exc) from exc


async def _create_adapter(config: GitHubConfig, repository: RepositoryIdentity) -> GitHubKitAdapter:
    return await GitHubKitAdapter.create(
        owner=repository.info.owner,
        repo_name=repository.info.name,
        github_auth_type=config.github_authentication_type,
        github_pat_token=config.github_pat_token,
        github_app_id=config.github_app_id,
        github_app_private_key_path=config.github_app_private_key_path,
        github_app_installation_id=config.github_app_installation_id,
        github_api_url=config.github_api_url,
    )


GitHubApiUrlOption = Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")]
GitHubPatTokenOption = Annotated[str | None, Option(envvar="GITHUB_PAT_TOKEN", help="GitHub Personal Access Token.")]
GitHubAppIdOption = Annotated[int | None, Option(envvar="GITHUB_APP_ID", help="GitHub App ID.")]
GitHubAppPrivateKeyPathOption = Annotated[Path | None, Option(envvar="GITHUB_APP_PRIVATE_KEY_PATH", help="Path to GitHub App private key.")]
GitHubAppInstallationIdOption = Annotated[int | None, Option(envvar="GITHUB_APP_INSTALLATION_ID", help="GitHub App Installation ID.")]
RepositoryArgument = Annotated[str, Argument(help="Repository name, e.g. vscode-powershell or PowerShellEditorServices.")]
YesOption = Annotated[bool, Option("--yes", "-y", help="Branch and commit without asking for confirmation.")]


@typer_app.command(name="get-version")
def get_version_cli(ctx: typer.Context, repository: RepositoryArgument) -> None:
    """Print the current version of a repository, read from its changelog."""
    identity = _parse_repository(repository)
    try:
        config = get_base_config(ctx.obj["debug"], ctx.obj["repositories_root"], ctx.obj["release_branch"])
        version = get_version(identity, config.repositories_root)
    except (ReleaseToolsError, OSError) as exc:
        raise _fail(exc) from exc
    typer.echo(version.tag)


@typer_app.command(name="update-changelog")
def update_changelog_cli(
    ctx: typer.Context,
    repository: RepositoryArgument,
    version: Annotated[str, Argument(help="New version with its tag prefix, e.g. v2.3.0 or v2.3.0-preview.1.")],
    yes: YesOption = False,
    github_api_url: GitHubApiUrlOption = None,
    github_pat_token: GitHubPatTokenOption = None,
    github_app_id: GitHubAppIdOption = None,
    github_app_private_key_path: GitHubAppPrivateKeyPathOption = None,
    github_app_installation_id: GitHubAppInstallationIdOption = None,
) -> None:
    """Add a section for a new version to a repository's changelog from its merged pull requests."""
    identity = _parse_repository(repository)
    try:
        validate_release_version(version)
    except ReleaseToolsError as exc:
        raise _fail(exc) from exc
    config = _github_config(ctx, github_api_url, github_pat_token, github_app_id, github_app_private_key_path, github_app_installation_id)

    async def run() -> None:
        adapter = await _create_adapter(config, identity)
        result = await update_changelog(
            repository=identity,
            version=version,
            adapter=adapter,
            repositories_root=config.repositories_root,
            release_branch=config.release_branch,
            # Prompting blocks the event loop, which has no other work scheduled
            confirm=always_confirm if yes else typer.confirm,
        )
        typer.echo("\n".join(result.section))
        if not result.committed:
            typer.echo("Changelog updated but not committed.")

    try:
        asyncio.run(run())
    except (ReleaseToolsError, OSError) as exc:
        raise _fail(exc) from exc


@typer_app.command(name="update-version")
def update_version_cli(ctx: typer.Context, repository: RepositoryArgument, yes: YesOption = False) -> None:
    """Write the changelog's current version into a repository's metadata files."""
    identity = _parse_repository(repository)
    try:
        config = get_base_config(ctx.obj["debug"], ctx.obj["repositories_root"], ctx.obj["release_branch"])
        result = update_version(
            repository=identity,
            repositories_root=config.repositories_root,
            release_branch=config.release_branch,
            confirm=always_confirm if yes else typer.confirm,
        )
    except (ReleaseToolsError, OSError) as exc:
        raise _fail(exc) from exc
    if not result.updated_files:
        typer.echo(f"{identity.value} is already at {result.version}")
        return
    typer.echo(f"Updated {len(result.updated_files)} file(s) to {result.version}:")
    for path in result.updated_files:
        typer.echo(f"  - {path}")


@typer_app.command(name="new-draft-release")
def new_draft_release_cli(
    ctx: typer.Context,
    repository: RepositoryArgument,
    assets: Annotated[list[Path] | None, Argument(help="Files to upload to the release.")] = None,
    github_api_url: GitHubApiUrlOption = None,
    github_pat_token: GitHubPatTokenOption = None,
    github_app_id: GitHubAppIdOption = None,
    github_app_private_key_path: GitHubAppPrivateKeyPathOption = None,
    github_app_installation_id: GitHubAppInstallationIdOption = None,
) -> None:
    """Create a draft GitHub release for the current version, using the latest changelog section as notes."""
    identity = _parse_repository(repository)
    config = _github_config(ctx, github_api_url, github_pat_token, github_app_id, github_app_private_key_path, github_app_installation_id)

    async def run() -> None:
        adapter = await _create_adapter(config, identity)
        handle = await new_draft_release(
            repository=identity,
            adapter=adapter,
            repositories_root=config.repositories_root,
            assets=assets or [],
            release_branch=config.release_branch,
        )
        typer.echo(f"Created draft release {handle.tag_name}: {handle.html_url}")

    try:
        asyncio.run(run())
    except (ReleaseToolsError, OSError) as exc:
        raise _fail(exc) from exc


if __name__ == "__main__":
    typer_app()
