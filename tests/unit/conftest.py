"""Fixtures for unit tests."""

from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock

import pytest
import structlog

from release_tools.vcs.git import GitRepository

EDITOR_SERVICES_CHANGELOG = """\
# PowerShell Editor Services Release History

## v2.3.0
### Thursday, October 1, 2026

- 🐛 [PowerShellEditorServices #1500](https://github.com/PowerShell/PowerShellEditorServices/pull/1501) - Fix a crash on startup. (Thanks @contributor!)
- ✨ [vscode-powershell #3000](https://github.com/PowerShell/PowerShellEditorServices/pull/1502) - Add folding for regions.

## v2.2.0
### Tuesday, September 1, 2026

- #️⃣ 🙏 [PowerShellEditorServices #1400](https://github.com/PowerShell/PowerShellEditorServices/pull/1400) - An older change.
"""

VSCODE_CHANGELOG = """\
# PowerShell Extension Release History

## v2026.9.0
### Tuesday, September 15, 2026

#### [vscode-powershell](https://github.com/PowerShell/vscode-powershell)

- 📖 [vscode-powershell #4000](https://github.com/PowerShell/vscode-powershell/pull/4000) - Update the docs.

#### [PowerShellEditorServices](https://github.com/PowerShell/PowerShellEditorServices) v2.2.0

- #️⃣ 🙏 [PowerShellEditorServices #1400](https://github.com/PowerShell/PowerShellEditorServices/pull/1400) - An older change.
"""

PACKAGE_JSON = """\
{
  "name": "powershell",
  "displayName": "PowerShell",
  "version": "2026.9.0",
  "preview": false,
  "publisher": "ms-vscode",
  "description": "Develop PowerShell modules, commands and scripts in Visual Studio Code!",
  "engines": {
    "vscode": "^1.80.0"
  },
  "dependencies": {
    "some-package": {
      "name": "nested-name",
      "version": "1.0.0",
      "preview": true,
    }
  },
  "license": "SEE LICENSE IN LICENSE.txt"
}
"""

COMMON_PROPS = """\
<Project>
  <PropertyGroup>
    <VersionPrefix>2.2.0</VersionPrefix>
    <VersionSuffix></VersionSuffix>
    <Company>Microsoft</Company>
  </PropertyGroup>
</Project>
"""

MODULE_MANIFEST = """\
@{
RootModule = 'PowerShellEditorServices.psm1'
ModuleVersion = '2.2.0'
GUID = '9ca15887-53a2-479a-9cda-48d26bcb6c47'
PrivateData = @{
    PSData = @{
        ModuleVersion = '0.0.1'
    }
}
}
"""


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def repositories_root(tmp_path: Path) -> Path:
    """A directory holding checkouts of both repositories with their changelogs and metadata files."""
    vscode = tmp_path / "vscode-powershell"
    vscode.mkdir()
    (vscode / "CHANGELOG.md").write_text(VSCODE_CHANGELOG, encoding="utf-8")
    (vscode / "package.json").write_text(PACKAGE_JSON, encoding="utf-8")

    editor_services = tmp_path / "PowerShellEditorServices"
    (editor_services / "module" / "PowerShellEditorServices").mkdir(parents=True)
    (editor_services / "CHANGELOG.md").write_text(EDITOR_SERVICES_CHANGELOG, encoding="utf-8")
    (editor_services / "PowerShellEditorServices.Common.props").write_text(COMMON_PROPS, encoding="utf-8")
    (editor_services / "module" / "PowerShellEditorServices" / "PowerShellEditorServices.psd1").write_text(MODULE_MANIFEST, encoding="utf-8")
    return tmp_path


@pytest.fixture
def git() -> MagicMock:
    """A stand-in for a git checkout."""
    return MagicMock(spec=GitRepository)
