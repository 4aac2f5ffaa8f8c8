"""Models for configuration reconciled between CLI arguments and environment variables."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class GitHubAuthenticationType(str, Enum):
    """Enum for GitHub authentication types."""

    PAT = "pat"
    APP = "app"


@dataclass
class BaseConfig:
    """Configuration shared by every release tools command."""

    debug: bool
    repositories_root: Path
    release_branch: str


@dataclass
class GitHubConfig(BaseConfig):
    """Configuration for commands that talk to the GitHub API."""

    github_api_url: str
    github_authentication_type: GitHubAuthenticationType
    github_pat_token: str | None
    github_app_id: int | None
    github_app_private_key_path: Path | None
    github_app_installation_id: int | None
