"""Contains exceptions raised by the release tools."""


class ReleaseToolsError(Exception):
    """Base class for all release tools errors."""

    pass


class ParseError(ReleaseToolsError):
    """Raised when a changelog section header does not carry a parseable version."""

    def __init__(self, message: str, line: str | None = None) -> None:
        """Initializes the exception with the offending changelog line, if any."""
        super().__init__(message)
        self.line = line


class ValidationError(ReleaseToolsError):
    """Raised when a caller-supplied repository name or version string is rejected."""

    pass


class RemoteAPIError(ReleaseToolsError):
    """Raised when the GitHub API returns an unsuccessful response."""

    def __init__(self, message: str, status_code: int | None = None, url: str | None = None) -> None:
        """Initializes the exception with the HTTP status code and request URL."""
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class VersionControlError(ReleaseToolsError):
    """Raised when a git command exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str) -> None:
        """Initializes the exception with the failed command and its stderr."""
        super().__init__(f"Command '{' '.join(command)}' failed with exit code {returncode}: {stderr.strip()}")
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
