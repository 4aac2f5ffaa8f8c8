"""GitHub client adapter for the githubkit library."""

import mimetypes
from functools import wraps
from pathlib import Path
from typing import Any, Awaitable, Callable, Literal, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import (
    FullRepository,
    PullRequestSimple,
    Release,
    ReleaseAsset,
)

from release_tools.changelog.models import PullRequestRecord
from release_tools.configuration.models import GitHubAuthenticationType
from release_tools.exceptions import RemoteAPIError

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_errors(func: F) -> F:
    """Decorator to log failed GitHub requests and raise them as RemoteAPIError."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            status_code = exc.response.status_code
            url = str(getattr(exc.response, "url", None))
            try:
                error_data = exc.response.json()
            except Exception:
                error_data = {}
            message = error_data.get("message", "Request failed") if isinstance(error_data, dict) else "Request failed"
            logger.error(
                "GitHub request failed",
                function=func.__name__,
                message=message,
                url=url,
                status_code=status_code,
            )
            raise RemoteAPIError(f"GitHub {status_code} error in {func.__name__}: {message} | url: {url}", status_code=status_code, url=url) from exc

    return wrapper  # type: ignore


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(
        cls,
        owner: str,
        repo_name: str,
        github_auth_type: GitHubAuthenticationType,
        github_pat_token: str | None = None,
        github_app_id: int | None = None,
        github_app_private_key_path: Path | None = None,
        github_app_installation_id: int | None = None,
        github_api_url: str = "https://api.github.com",
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            owner: Owner of the repository
            repo_name: Name of the repository
            github_auth_type: Type of authentication (PAT or APP)
            github_pat_token: Personal access token (required for PAT auth)
            github_app_id: GitHub App ID (required for APP auth)
            github_app_private_key_path: Path to private key file (required for APP auth)
            github_app_installation_id: Installation ID (required for APP auth)
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_client(
            github_auth_type=github_auth_type,
            github_pat_token=github_pat_token,
            github_app_id=github_app_id,
            github_app_private_key_path=github_app_private_key_path,
            github_app_installation_id=github_app_installation_id,
            github_api_url=github_api_url,
        )
        return cls(client, owner, repo_name)

    # Repository
    @handle_github_errors
    async def get_repository(self) -> FullRepository:
        """Get the repository for the current client."""
        response: Response[FullRepository] = await self.client.rest.repos.async_get(owner=self.owner, repo=self.repo_name)
        return response.parsed_data

    # Pull Requests
    @handle_github_errors
    async def list_pull_requests(
        self, state: Literal["open", "closed", "all"] = "all", per_page: int = 100, **kwargs: Any
    ) -> list[PullRequestRecord]:
        """List all pull requests for a repository, handling pagination."""
        all_pull_requests: list[PullRequestRecord] = []
        page: int = 1
        while True:
            response: Response[list[PullRequestSimple]] = await self.client.rest.pulls.async_list(
                owner=self.owner,
                repo=self.repo_name,
                state=state,
                per_page=per_page,
                page=page,
                **kwargs,
            )
            pull_requests: list[PullRequestSimple] = response.parsed_data
            if not pull_requests:
                break
            all_pull_requests.extend(PullRequestRecord.from_github(pull_request) for pull_request in pull_requests)
            if len(pull_requests) < per_page:
                break
            page += 1
        logger.info("Listed pull requests", owner=self.owner, repo=self.repo_name, state=state, count=len(all_pull_requests))
        return all_pull_requests

    # Releases
    @handle_github_errors
    async def create_draft_release(
        self,
        tag_name: str,
        target_commitish: str,
        name: str,
        body: str,
        prerelease: bool = False,
        **kwargs: Any,
    ) -> Release:
        """Create a draft release, along with its tag once it is published."""
        params = self._omit_null_parameters(
            tag_name=tag_name,
            target_commitish=target_commitish,
            name=name,
            body=body,
            draft=True,
            prerelease=prerelease,
            **kwargs,
        )
        response: Response[Release] = await self.client.rest.repos.async_create_release(
            owner=self.owner,
            repo=self.repo_name,
            **params,
        )
        release = response.parsed_data
        logger.info("Created draft release", tag_name=tag_name, release_id=release.id, html_url=release.html_url)
        return release

    @handle_github_errors
    async def upload_release_asset(self, release: Any, path: Path) -> ReleaseAsset:
        """Upload a file as an asset of a release."""
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        response: Response[ReleaseAsset] = await self.client.rest.repos.async_upload_release_asset(
            owner=self.owner,
            repo=self.repo_name,
            release_id=release.id,
            name=path.name,
            data=path.read_bytes(),
            headers={"Content-Type": content_type},
        )
        logger.info("Uploaded release asset", release_id=release.id, asset=path.name)
        return response.parsed_data
