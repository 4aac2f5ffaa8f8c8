"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Literal


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    # Repository
    @abstractmethod
    async def get_repository(self) -> Any:
        """Get a repository."""
        pass

    # Pull Requests
    @abstractmethod
    async def list_pull_requests(self, state: Literal["open", "closed", "all"] = "all", **kwargs: Any) -> list[Any]:
        """List pull requests for a repository."""
        pass

    # Releases
    @abstractmethod
    async def create_draft_release(
        self,
        tag_name: str,
        target_commitish: str,
        name: str,
        body: str,
        prerelease: bool = False,
        **kwargs: Any,
    ) -> Any:
        """Create a draft release for a repository."""
        pass

    @abstractmethod
    async def upload_release_asset(self, release: Any, path: Path) -> Any:
        """Upload a file as an asset of a release."""
        pass
