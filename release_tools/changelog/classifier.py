"""Turns merged pull requests into changelog bullets."""

import structlog

from release_tools.changelog.models import PullRequestRecord
from release_tools.repositories import RepositoryIdentity
from release_tools.utils.constants import (
    BOT_SUFFIX,
    DEFAULT_UNLABELED_EMOJI,
    ISSUE_REFERENCE_PATTERN,
    LABEL_EMOJI,
    NO_THANKS,
)

logger = structlog.get_logger(__name__)


def is_bot(author: str) -> bool:
    """Check if a GitHub login belongs to a bot account."""
    return author.endswith(BOT_SUFFIX)


def get_label_emoji(labels: list[str]) -> str:
    """Concatenate the emoji of each label in order, or the unlabeled marker if none map."""
    emoji = "".join(LABEL_EMOJI[label] for label in labels if label in LABEL_EMOJI)
    return emoji or DEFAULT_UNLABELED_EMOJI


def find_repository_in_text(text: str) -> RepositoryIdentity | None:
    """Find the first known repository whose name appears in the text, ignoring case.

    This is a substring test, so text naming one repository inside a longer
    word (or mentioning more than one repository) resolves to whichever known
    repository is listed first.
    """
    lowered = text.lower()
    for identity in RepositoryIdentity:
        if identity.info.name.lower() in lowered:
            return identity
    return None


def get_issue_reference(pull_request: PullRequestRecord, repository: RepositoryIdentity) -> tuple[RepositoryIdentity, int]:
    """Get the repository and number a bullet should link to.

    The issue a pull request closes takes precedence; without a closing
    keyword the bullet links to the pull request itself.
    """
    match = ISSUE_REFERENCE_PATTERN.search(pull_request.body or "")
    if match is None:
        return repository, pull_request.number
    linked_repository = find_repository_in_text(match.group("repo")) or repository
    logger.debug(
        "Pull request closes an issue",
        pull_request=pull_request.number,
        issue=int(match.group("number")),
        repository=linked_repository.value,
    )
    return linked_repository, int(match.group("number"))


def get_thanks(author: str) -> str | None:
    """Thank contributors other than maintainers and bots."""
    if not author or author in NO_THANKS or is_bot(author):
        return None
    return f"(Thanks @{author}!)"


def format_bullet(pull_request: PullRequestRecord, repository: RepositoryIdentity) -> str:
    """Format a merged pull request as a single changelog bullet.

    Example:
        - 🐛 [vscode-powershell #123](https://github.com/PowerShell/vscode-powershell/pull/124) - Fix the thing. (Thanks @octocat!)
    """
    emoji = get_label_emoji(pull_request.labels)
    linked_repository, number = get_issue_reference(pull_request, repository)
    title = " ".join(pull_request.title.split())
    if not title.endswith("."):
        title += "."

    bullet = f"- {emoji} [{linked_repository.info.name} #{number}]({pull_request.html_url}) - {title}"
    thanks = get_thanks(pull_request.author)
    if thanks:
        bullet += f" {thanks}"
    return bullet
