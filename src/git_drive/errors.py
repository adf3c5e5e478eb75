"""Exception hierarchy for git-drive.

Codecs and the resolver raise these without logging.  ConfigStore attaches
the file path, and the service layer turns them into ``ServiceResult``
errors with a stable ``code``.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class GitDriveError(Exception):
    """Base class for every error raised by git-drive."""

    code = "ERROR"


# ---------------------------------------------------------------------------
# Parse errors
# ---------------------------------------------------------------------------


class RecordParseError(GitDriveError):
    """A line of the primary config format does not match the grammar."""

    code = "PARSE_ERROR"

    def __init__(self, line_no: int, line: str, expected: str, *, reason: str | None = None):
        self.line_no = line_no
        self.line = line
        self.expected = expected
        self.reason = reason
        message = f"line {line_no}: expected {expected}, got `{line}`"
        if reason:
            message = f"line {line_no}: {reason} in `{line}`, expected {expected}"
        super().__init__(message)


class UnexpectedEndOfFileError(RecordParseError):
    """Input ended where another line was required."""

    def __init__(self, line_no: int, expected: str):
        self.line_no = line_no
        self.line = ""
        self.expected = expected
        self.reason = "reached end of file"
        GitDriveError.__init__(self, f"line {line_no}: reached end of file, expected {expected}")


class LegacyJsonError(GitDriveError):
    """The legacy JSON config is malformed or does not have the known shape."""

    code = "PARSE_ERROR"

    def __init__(self, message: str, *, offset: int, line: int, column: int):
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column
        super().__init__(f"{message} at line {line}, column {column}")


# ---------------------------------------------------------------------------
# Config file errors
# ---------------------------------------------------------------------------


class ConfigLocationError(GitDriveError):
    """The configuration directory could not be determined."""

    code = "NO_CONFIG_DIR"

    def __init__(self) -> None:
        super().__init__("The configuration directory could not be found")


class ConfigFileError(GitDriveError):
    """An error tied to a specific config file."""

    code = "IO_ERROR"

    def __init__(self, path: Path, message: str, *, content: str | None = None):
        self.path = path
        self.content = content
        super().__init__(f"{message}: {path}")


class ConfigIOError(ConfigFileError):
    """The OS reported an error while reading or writing the config file."""


class ConfigPermissionError(ConfigFileError):
    """Permission was denied while reading or writing the config file."""

    code = "PERMISSION_DENIED"


class ConfigFileTypeError(ConfigFileError):
    """A config path exists but is not a regular file."""

    def __init__(self, path: Path, file_type: str):
        self.file_type = file_type
        super().__init__(path, f"Expected a regular file but found a {file_type}")


class ConfigParseError(ConfigFileError):
    """The config file exists but could not be parsed."""

    code = "PARSE_ERROR"


# ---------------------------------------------------------------------------
# Semantic errors
# ---------------------------------------------------------------------------


class ResolutionError(GitDriveError):
    """A query could not be resolved to exactly one navigator."""

    def __init__(self, query: str, message: str):
        self.query = query
        super().__init__(message)


class NavigatorNotFoundError(ResolutionError):
    code = "NOT_FOUND"

    def __init__(self, query: str):
        super().__init__(query, f"No navigator found for `{query}`")


class AmbiguousQueryError(ResolutionError):
    code = "AMBIGUOUS"

    def __init__(self, query: str, candidates: Sequence[str]):
        self.candidates = list(candidates)
        super().__init__(
            query,
            f"The query `{query}` is ambiguous, "
            f"possible candidates: [{', '.join(self.candidates)}]",
        )


class DuplicateAliasError(GitDriveError):
    code = "DUPLICATE"

    def __init__(self, kind: str, alias: str):
        self.kind = kind
        self.alias = alias
        super().__init__(f"Alias {alias} already exists for a {kind}")


class UnknownAliasError(GitDriveError):
    code = "NOT_FOUND"

    def __init__(self, kind: str, alias: str):
        self.kind = kind
        self.alias = alias
        super().__init__(f"Alias {alias} does not exist for a {kind}")
