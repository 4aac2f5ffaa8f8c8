"""Data models for changelog generation."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


class PullRequestRecord(BaseModel):
    """The parts of a GitHub pull request that a changelog bullet is built from."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    body: str | None = None
    author: str
    labels: list[str] = Field(default_factory=list)
    repository: str
    merge_commit_sha: str | None = None
    html_url: str

    @classmethod
    def from_github(cls, pull_request: Any) -> Self:
        """Build a record from a githubkit pull request model."""
        user = getattr(pull_request, "user", None)
        base = getattr(pull_request, "base", None)
        base_repo = getattr(base, "repo", None)
        return cls(
            number=pull_request.number,
            title=pull_request.title,
            body=pull_request.body,
            author=user.login if user is not None else "",
            labels=[label.name for label in pull_request.labels or [] if label.name],
            repository=base_repo.name if base_repo is not None else "",
            merge_commit_sha=pull_request.merge_commit_sha,
            html_url=pull_request.html_url,
        )


class ChangelogUpdateResult(BaseModel):
    """Result of adding a new section to a changelog."""

    repository: str
    previous_version: str
    version: str
    bullets: list[str]
    section: list[str]
    committed: bool = False
