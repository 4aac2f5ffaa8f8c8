"""Runs git commands against a local repository checkout."""

import subprocess
from pathlib import Path

import structlog

from release_tools.exceptions import VersionControlError
from release_tools.utils.helpers import working_directory

logger = structlog.get_logger(__name__)


class GitRepository:
    """A local git checkout, driven through the git command line."""

    def __init__(self, path: Path) -> None:
        """Initialize with the path of the checkout."""
        self.path = path

    def _run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess[str]:
        cmd = ["git", *args]
        logger.debug("Running git command", cmd=" ".join(cmd), path=str(self.path))
        with working_directory(self.path):
            result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        if check and result.returncode != 0:
            raise VersionControlError(cmd, result.returncode, result.stderr)
        return result

    def current_branch(self) -> str:
        """Get the name of the checked out branch."""
        return self._run("branch", "--show-current").stdout.strip()

    def branch_exists(self, name: str) -> bool:
        """Check if a local branch exists."""
        return self._run("rev-parse", "--verify", "--quiet", f"refs/heads/{name}", check=False).returncode == 0

    def create_and_switch_branch(self, name: str) -> None:
        """Create a new branch from HEAD and check it out."""
        self._run("switch", "--create", name)
        logger.info("Created branch", branch=name, path=str(self.path))

    def ensure_branch(self, name: str) -> None:
        """Check out a branch, creating it from HEAD if it does not exist yet."""
        if self.current_branch() == name:
            return
        if self.branch_exists(name):
            self._run("switch", name)
            logger.info("Switched branch", branch=name, path=str(self.path))
        else:
            self.create_and_switch_branch(name)

    def list_commits_since(self, tag: str) -> list[str]:
        """List the hashes of commits reachable from HEAD but not from a tag."""
        output = self._run("rev-list", f"{tag}..HEAD").stdout
        commits = [line.strip() for line in output.splitlines() if line.strip()]
        logger.debug("Listed commits since tag", tag=tag, count=len(commits))
        return commits

    def stage_file(self, path: Path | str) -> None:
        """Stage a file for the next commit."""
        self._run("add", "--", str(path))

    def commit(self, message: str) -> None:
        """Commit the staged changes."""
        self._run("commit", "--message", message)
        logger.info("Committed changes", message=message, path=str(self.path))
