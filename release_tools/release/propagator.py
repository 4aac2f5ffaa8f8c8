"""Propagates the current version into each repository's project metadata files."""

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

import structlog

from release_tools.changelog.version import SemanticVersion, get_version
from release_tools.release.models import VersionUpdateResult
from release_tools.repositories import RepositoryIdentity, get_repository_path
from release_tools.utils.constants import DEFAULT_RELEASE_BRANCH, VERSION_COMMIT_MESSAGE
from release_tools.utils.helpers import always_confirm, detect_newline, read_lines, write_lines
from release_tools.vcs.git import GitRepository

logger = structlog.get_logger(__name__)

VSCODE_DESCRIPTION = "Develop PowerShell modules, commands and scripts in Visual Studio Code!"


@dataclass(frozen=True)
class MetadataField:
    """A version-derived field in a metadata file.

    The pattern must match the whole line and capture the text before the
    value as ``prefix`` and the text after it as ``suffix``. Anchoring on the
    exact indentation keeps nested fields of the same name untouched.
    """

    path: str
    pattern: re.Pattern[str]
    value: Callable[[SemanticVersion], str]


def _json_string_field(name: str, value: Callable[[SemanticVersion], str]) -> MetadataField:
    """A top-level string field of package.json (indented by exactly two spaces)."""
    return MetadataField("package.json", re.compile(rf'^(?P<prefix>  "{name}": ").*(?P<suffix>",)$'), value)


METADATA_FIELDS: dict[RepositoryIdentity, tuple[MetadataField, ...]] = {
    RepositoryIdentity.VSCODE_POWERSHELL: (
        _json_string_field("name", lambda v: "powershell-preview" if v.is_prerelease else "powershell"),
        _json_string_field("displayName", lambda v: "PowerShell Preview" if v.is_prerelease else "PowerShell"),
        # The marketplace does not accept pre-release labels, so only x.y.z is written
        _json_string_field("version", lambda v: v.core),
        MetadataField(
            "package.json",
            re.compile(r'^(?P<prefix>  "preview": ).*(?P<suffix>,)$'),
            lambda v: "true" if v.is_prerelease else "false",
        ),
        _json_string_field("description", lambda v: f"(Preview) {VSCODE_DESCRIPTION}" if v.is_prerelease else VSCODE_DESCRIPTION),
    ),
    RepositoryIdentity.POWERSHELL_EDITOR_SERVICES: (
        MetadataField(
            "PowerShellEditorServices.Common.props",
            re.compile(r"^(?P<prefix>\s*<VersionPrefix>).*(?P<suffix></VersionPrefix>)$"),
            lambda v: v.core,
        ),
        MetadataField(
            "PowerShellEditorServices.Common.props",
            re.compile(r"^(?P<prefix>\s*<VersionSuffix>).*(?P<suffix></VersionSuffix>)$"),
            lambda v: v.prerelease or "",
        ),
        MetadataField(
            "module/PowerShellEditorServices/PowerShellEditorServices.psd1",
            re.compile(r"^(?P<prefix>ModuleVersion = ').*(?P<suffix>')$"),
            lambda v: v.core,
        ),
    ),
}


def replace_field(lines: list[str], field: MetadataField, version: SemanticVersion) -> list[str]:
    """Rewrite every line matching a field's pattern with the value for a version."""
    value = field.value(version)
    updated: list[str] = []
    for line in lines:
        match = field.pattern.match(line)
        if match is None:
            updated.append(line)
        else:
            updated.append(f"{match.group('prefix')}{value}{match.group('suffix')}")
    return updated


def update_metadata_files(repository_path: Path, fields: tuple[MetadataField, ...], version: SemanticVersion) -> Iterator[Path]:
    """Apply each field to its file, writing only the files whose contents change.

    Rewritten files keep the line terminator they were read with.

    Yields:
        Each file right after it is rewritten, in the order the files were first touched
    """
    pending: dict[str, tuple[list[str], list[str]]] = {}
    for field in fields:
        if field.path not in pending:
            original = read_lines(repository_path / field.path)
            pending[field.path] = (original, original)
        original, current = pending[field.path]
        pending[field.path] = (original, replace_field(current, field, version))

    for relative_path, (original, updated) in pending.items():
        path = repository_path / relative_path
        if updated == original:
            logger.debug("Metadata file already up to date", path=str(path), version=str(version))
            continue
        write_lines(path, updated, newline=detect_newline(path))
        logger.info("Updated metadata file", path=str(path), version=str(version))
        yield path


def update_version(
    repository: RepositoryIdentity,
    repositories_root: Path,
    release_branch: str = DEFAULT_RELEASE_BRANCH,
    confirm: Callable[[str], bool] = always_confirm,
    git: GitRepository | None = None,
) -> VersionUpdateResult:
    """Write the changelog's current version into a repository's metadata files and commit them.

    Files are rewritten one at a time, so a failure part way leaves the earlier
    files updated and staged.
    """
    version = get_version(repository, repositories_root)
    repository_path = get_repository_path(repository, repositories_root)
    git = git or GitRepository(repository_path)

    changed: list[Path] = []
    for path in update_metadata_files(repository_path, METADATA_FIELDS[repository], version):
        git.stage_file(path)
        changed.append(path)

    result = VersionUpdateResult(
        repository=repository.value,
        version=version.tag,
        updated_files=[str(path.relative_to(repository_path)) for path in changed],
    )
    if not changed:
        logger.info("All metadata files already match the current version", repository=repository.value, version=version.tag)
        return result

    commit_message = VERSION_COMMIT_MESSAGE.format(version=version.tag)
    if not confirm(f"Commit '{commit_message}' to branch '{release_branch}' of {repository.value}?"):
        logger.info("Skipping branch and commit", repository=repository.value)
        return result

    git.ensure_branch(release_branch)
    git.commit(commit_message)
    result.committed = True
    return result
