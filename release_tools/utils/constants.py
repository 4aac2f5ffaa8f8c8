"""Shared constants used across the application."""

# This file is intended to hold shared constants.

import re

# Changelog Constants
# -------------------

SECTION_HEADER_PREFIX = "## "
"""Prefix of a changelog section header line. Deeper headers (### and beyond) do not match."""

VERSION_HEADER_PATTERN = re.compile(
    r"^## v(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)(?:-(?P<prerelease>preview(?:\.(?:0|[1-9]\d*))?))?$"
)
"""Pattern to match a versioned section header (e.g., ## v1.2.3 or ## v2.0.0-preview.4)."""

VERSION_PATTERN = re.compile(r"^v?(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)(?:-(?P<prerelease>preview(?:\.(?:0|[1-9]\d*))?))?$")
"""Pattern to match a bare or v-prefixed version string."""

RELEASE_VERSION_PATTERN = re.compile(r"^v(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)(-preview(\.(0|[1-9]\d*))?)?$")
"""Pattern a caller-supplied release version must match, tag prefix included."""

CHANGELOG_PREAMBLE_LINE_COUNT = 2
"""Number of lines (title and blank line) kept above the newest section."""

DEFAULT_UNLABELED_EMOJI = "#️⃣ 🙏"
"""Emoji used for pull requests with no label that maps to an emoji."""

LABEL_EMOJI: dict[str, str] = {
    "Issue-Enhancement": "✨",
    "Issue-Bug": "🐛",
    "Issue-Performance": "⚡️",
    "Area-Build & Release": "👷",
    "Area-Code Formatting": "💎",
    "Area-Configuration": "🔧",
    "Area-Debugging": "🔍",
    "Area-Documentation": "📖",
    "Area-Engine": "🚂",
    "Area-Folding": "📚",
    "Area-Integrated Console": "📟",
    "Area-IntelliSense": "🧠",
    "Area-Logging": "💭",
    "Area-Pester": "🐢",
    "Area-Script Analysis": "🕵️",
    "Area-Snippets": "✂️",
    "Area-Startup": "🛫",
    "Area-Symbols & References": "🔗",
    "Area-Tasks": "✅",
    "Area-Test": "🚨",
    "Area-Threading": "⏱️",
    "Area-UI": "📺",
    "Area-Workspaces": "📁",
}
"""Emoji shown in a changelog bullet for each pull request label."""

CLOSE_KEYWORDS: tuple[str, ...] = (
    "close",
    "closes",
    "closed",
    "fix",
    "fixes",
    "fixed",
    "resolve",
    "resolves",
    "resolved",
)
"""Keywords GitHub recognizes for linking a pull request to the issue it closes."""

ISSUE_REFERENCE_PATTERN = re.compile(
    r"\b(?:" + "|".join(sorted(CLOSE_KEYWORDS, key=len, reverse=True)) + r"):?\s+(?P<repo>[^\s\d]*)(?P<number>\d+)",
    re.IGNORECASE,
)
"""Pattern to match a closing keyword, optional repository text, and an issue number (e.g., Fixes owner/repo#42)."""

NO_THANKS: frozenset[str] = frozenset(
    {
        "andschwa",
        "daxian-dbw",
        "JustinGrote",
        "PaulHigin",
        "SeeminglyScience",
        "SydneyhSmith",
        "TylerLeonhardt",
    }
)
"""Maintainers who are not thanked in changelog bullets."""

BOT_SUFFIX = "[bot]"
"""Suffix GitHub gives to bot account logins (e.g., dependabot[bot])."""

IGNORE_LABEL = "Ignore"
"""Pull requests with this label are left out of the changelog."""

IGNORE_TITLE_PREFIX = "[Ignore]"
"""Pull requests whose title starts with this marker are left out of the changelog."""

RELEASE_COMMIT_TITLE_PATTERN = re.compile(r"^(Update CHANGELOG|Bump version)")
"""Pattern to match pull requests created by these tools for a previous release."""

# Git Constants
# -------------

DEFAULT_RELEASE_BRANCH = "release"
"""Branch that release commits are made on and draft releases target."""

CHANGELOG_COMMIT_MESSAGE = "Update CHANGELOG for `{version}`"
"""Commit message template for changelog updates. Use .format(version=...) with the v-prefixed version."""

VERSION_COMMIT_MESSAGE = "Bump version to `{version}`"
"""Commit message template for version bumps. Use .format(version=...) with the v-prefixed version."""
