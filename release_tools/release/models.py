"""Data models for version propagation and draft releases."""

from typing import Any, Self

from pydantic import BaseModel, Field


class VersionUpdateResult(BaseModel):
    """Result of propagating a version into a repository's metadata files."""

    repository: str
    version: str
    updated_files: list[str]
    committed: bool = False


class ReleaseHandle(BaseModel):
    """A draft release created on GitHub."""

    id: int
    tag_name: str
    name: str | None = None
    html_url: str
    upload_url: str
    draft: bool
    prerelease: bool
    assets: list[str] = Field(default_factory=list)

    @classmethod
    def from_github(cls, release: Any) -> Self:
        """Build a handle from a githubkit release model."""
        return cls(
            id=release.id,
            tag_name=release.tag_name,
            name=release.name,
            html_url=release.html_url,
            upload_url=release.upload_url,
            draft=release.draft,
            prerelease=release.prerelease,
        )
