"""Primary config format: a line oriented, hand-editable record file.

Layout::

    version: 1
    navigator: <alias>
    Co-Authored-By: <name> <<email>>
    driver: <alias>
    key: <key-or-nothing>
    Co-Authored-By: <name> <<email>>

Navigators come first, then drivers, each in list order.  The grammar is
strict and order sensitive; every parse failure carries the 1-based line
number and the token that was expected there.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import ValidationError

from git_drive.domain.models import TRAILER_TOKEN, Config, Driver, Navigator
from git_drive.domain.types import Kind
from git_drive.errors import RecordParseError, UnexpectedEndOfFileError

VERSION_LINE = "version: 1"
KEY_TOKEN = "key"

_HEADER_SEPARATOR = ": "
_EXPECTED_VERSION = f"`{VERSION_LINE}`"
_EXPECTED_HEADER = "`navigator: <alias>` or `driver: <alias>`"
_EXPECTED_KEY = "`key: <key>`"
_EXPECTED_TRAILER = f"`{TRAILER_TOKEN}: <name> <<email>>`"


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def _record_lines(config: Config) -> Iterator[str]:
    yield VERSION_LINE
    for nav in config.navigators:
        yield f"{Kind.NAVIGATOR}{_HEADER_SEPARATOR}{nav.alias}"
        yield nav.trailer
    for drv in config.drivers:
        yield f"{Kind.DRIVER}{_HEADER_SEPARATOR}{drv.alias}"
        yield f"{KEY_TOKEN}: {drv.key}" if drv.key else f"{KEY_TOKEN}:"
        yield drv.navigator.trailer


def serialize(config: Config) -> str:
    """Render *config* in the primary format, newline terminated."""
    return "".join(f"{line}\n" for line in _record_lines(config))


# ---------------------------------------------------------------------------
# Deserialization
# ---------------------------------------------------------------------------


class _Lines:
    """Cursor over 1-indexed input lines."""

    def __init__(self, text: str) -> None:
        lines = text.split("\n")
        if text.endswith("\n"):
            lines.pop()
        self._lines = [line.removesuffix("\r") for line in lines] if text else []
        self._pos = 0

    @property
    def line_no(self) -> int:
        """Number of the line the next ``take`` returns."""
        return self._pos + 1

    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def take(self, expected: str) -> str:
        if self.at_end():
            raise UnexpectedEndOfFileError(self.line_no, expected)
        line = self._lines[self._pos]
        self._pos += 1
        return line


def _parse_trailer(line_no: int, line: str) -> tuple[str, str]:
    """Split ``Co-Authored-By: <name> <<email>>`` into ``(name, email)``."""
    token, sep, rest = line.partition(":")
    if not sep or token.strip().lower() != TRAILER_TOKEN.lower():
        raise RecordParseError(line_no, line, _EXPECTED_TRAILER)

    rest = rest.removeprefix(" ")
    name, sep, email = rest.rpartition(" <")
    if not sep and rest.startswith("<"):
        name, sep, email = "", "<", rest[1:]
    if not sep or not email.endswith(">"):
        raise RecordParseError(line_no, line, _EXPECTED_TRAILER)
    email = email[:-1]

    if not name:
        raise RecordParseError(line_no, line, _EXPECTED_TRAILER, reason="missing name")
    if not email:
        raise RecordParseError(line_no, line, _EXPECTED_TRAILER, reason="missing email")
    return name, email


def _parse_key(line_no: int, line: str) -> str | None:
    token, sep, rest = line.partition(":")
    if not sep or token.rstrip() != KEY_TOKEN:
        raise RecordParseError(line_no, line, _EXPECTED_KEY)
    return rest.strip() or None


def _build_navigator(line_no: int, line: str, alias: str, name: str, email: str) -> Navigator:
    try:
        return Navigator(alias=alias, name=name, email=email)
    except ValidationError as exc:
        reason = "; ".join(
            f"invalid {'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise RecordParseError(line_no, line, _EXPECTED_TRAILER, reason=reason) from exc


def deserialize(text: str) -> Config:
    """Parse the primary format into a :class:`Config`.

    Raises:
        RecordParseError: A line violates the grammar.
        UnexpectedEndOfFileError: Input ended inside a record.
    """
    lines = _Lines(text)

    if lines.at_end():
        raise RecordParseError(1, "", _EXPECTED_VERSION)
    version = lines.take(_EXPECTED_VERSION)
    if version != VERSION_LINE:
        raise RecordParseError(1, version, _EXPECTED_VERSION)

    config = Config()
    while not lines.at_end():
        header_no = lines.line_no
        header = lines.take(_EXPECTED_HEADER)
        kind, sep, alias = header.partition(_HEADER_SEPARATOR)
        if not sep or kind not in (Kind.NAVIGATOR, Kind.DRIVER):
            raise RecordParseError(header_no, header, _EXPECTED_HEADER)
        if not alias:
            raise RecordParseError(header_no, header, _EXPECTED_HEADER, reason="missing alias")

        key: str | None = None
        if kind == Kind.DRIVER:
            key_no = lines.line_no
            key = _parse_key(key_no, lines.take(_EXPECTED_KEY))

        trailer_no = lines.line_no
        trailer = lines.take(_EXPECTED_TRAILER)
        name, email = _parse_trailer(trailer_no, trailer)
        navigator = _build_navigator(trailer_no, trailer, alias, name, email)

        if kind == Kind.DRIVER:
            config.drivers.append(Driver(navigator=navigator, key=key))
        else:
            config.navigators.append(navigator)

    return config
