"""Reads sections out of a changelog."""

from release_tools.utils.constants import SECTION_HEADER_PREFIX


def is_section_header(line: str) -> bool:
    """Check whether a line starts a changelog section (## but not # or ###)."""
    return line.startswith(SECTION_HEADER_PREFIX)


def get_first_section(lines: list[str]) -> list[str]:
    """Get the lines of the first (most recent) section of a changelog.

    The section runs from the first section header up to, but not including,
    the next section header or the end of the document. An empty list means
    the changelog has no sections yet.
    """
    start: int | None = None
    for index, line in enumerate(lines):
        if is_section_header(line):
            start = index
            break
    if start is None:
        return []

    end = len(lines)
    for index in range(start + 1, len(lines)):
        if is_section_header(lines[index]):
            end = index
            break
    return list(lines[start:end])


def get_section_bullets(section: list[str]) -> list[str]:
    """Get the body of a finalized section, dropping its headers and surrounding blank lines."""
    body = [line for line in section if not line.startswith("#")]
    while body and not body[0].strip():
        body.pop(0)
    while body and not body[-1].strip():
        body.pop()
    return body
