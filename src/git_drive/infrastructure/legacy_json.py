"""Reader for the legacy JSON config, kept only to migrate old installs.

Only one shape is ever read::

    {
      "navigators": [{"alias": "...", "name": "...", "email": "..."}],
      "drivers": [{"alias": "...", "name": "...", "email": "...", "key": "..." | null}]
    }

The parser is a small recursive descent over a character cursor that
builds domain records directly; no generic JSON value tree is created.
Errors report the character offset plus line and column.

Lone or mismatched UTF-16 surrogates in ``\\uXXXX`` escapes decode to
U+FFFD instead of failing, so slightly malformed old files still migrate.
"""

from __future__ import annotations

import string
from collections.abc import Callable
from typing import TypeVar

from pydantic import ValidationError

from git_drive.domain.models import Config, Driver, Navigator
from git_drive.errors import LegacyJsonError

_WHITESPACE = " \t\r\n"
_HEX_DIGITS = frozenset(string.hexdigits)
_SIMPLE_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
_REPLACEMENT_CHAR = "\ufffd"

_NAVIGATOR_FIELDS = ("alias", "name", "email")
_DRIVER_FIELDS = (*_NAVIGATOR_FIELDS, "key")

_T = TypeVar("_T")


class _Parser:
    """Recursive descent parser over ``text`` with a moving position."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    # ── Cursor primitives ─────────────────────────────────────────────

    def error(self, message: str, pos: int | None = None) -> LegacyJsonError:
        at = self.pos if pos is None else pos
        line = self.text.count("\n", 0, at) + 1
        column = at - (self.text.rfind("\n", 0, at) + 1) + 1
        return LegacyJsonError(message, offset=at, line=line, column=column)

    def peek(self) -> str:
        return self.text[self.pos : self.pos + 1]

    def skip_ws(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def eat(self, token: str) -> bool:
        """Consume *token* after optional whitespace, if present."""
        self.skip_ws()
        if self.text.startswith(token, self.pos):
            self.pos += len(token)
            return True
        return False

    def expect(self, token: str) -> None:
        if not self.eat(token):
            found = self.peek()
            found = f"`{found}`" if found else "end of input"
            raise self.error(f"expected `{token}`, found {found}")

    # ── Strings ───────────────────────────────────────────────────────

    def string(self) -> str:
        self.skip_ws()
        if self.peek() != '"':
            raise self.error("expected a string")
        start = self.pos
        self.pos += 1

        parts: list[str] = []
        while True:
            if self.pos >= len(self.text):
                raise self.error("unterminated string", start)
            ch = self.text[self.pos]
            if ch == '"':
                self.pos += 1
                return "".join(parts)
            if ch == "\\":
                self.pos += 1
                parts.append(self.escape())
                continue
            end = self._literal_end()
            parts.append(self.text[self.pos : end])
            self.pos = end

    def _literal_end(self) -> int:
        quote = self.text.find('"', self.pos)
        backslash = self.text.find("\\", self.pos)
        candidates = [idx for idx in (quote, backslash) if idx != -1]
        return min(candidates) if candidates else len(self.text)

    def escape(self) -> str:
        ch = self.peek()
        if not ch:
            raise self.error("unterminated escape sequence")
        if ch in _SIMPLE_ESCAPES:
            self.pos += 1
            return _SIMPLE_ESCAPES[ch]
        if ch == "u":
            self.pos += 1
            return self.unicode_escape()
        raise self.error(f"invalid escape sequence `\\{ch}`", self.pos - 1)

    def hex4(self) -> int:
        digits = self.text[self.pos : self.pos + 4]
        if len(digits) != 4 or not _HEX_DIGITS.issuperset(digits):
            raise self.error("expected 4 hex digits after `\\u`")
        self.pos += 4
        return int(digits, 16)

    def unicode_escape(self) -> str:
        code = self.hex4()
        if 0xDC00 <= code <= 0xDFFF:
            return _REPLACEMENT_CHAR
        if not 0xD800 <= code <= 0xDBFF:
            return chr(code)

        # High surrogate: only a directly following low surrogate completes it.
        if not self.text.startswith("\\u", self.pos):
            return _REPLACEMENT_CHAR
        mark = self.pos
        self.pos += 2
        low = self.hex4()
        if 0xDC00 <= low <= 0xDFFF:
            return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))
        self.pos = mark
        return _REPLACEMENT_CHAR

    # ── Structure ─────────────────────────────────────────────────────

    def array(self, item: Callable[[], _T]) -> list[_T]:
        self.expect("[")
        if self.eat("]"):
            return []
        items = [item()]
        while self.eat(","):
            items.append(item())
        self.expect("]")
        return items

    def record_fields(self, allowed: tuple[str, ...]) -> tuple[int, dict[str, str | None]]:
        """Parse one record object, returning its start offset and fields."""
        self.skip_ws()
        start = self.pos
        self.expect("{")
        fields: dict[str, str | None] = {}
        while True:
            self.skip_ws()
            field_pos = self.pos
            name = self.string()
            if name not in allowed:
                raise self.error(f"unknown field `{name}`", field_pos)
            self.expect(":")
            if name == "key" and self.eat("null"):
                fields[name] = None
            else:
                fields[name] = self.string()
            if not self.eat(","):
                break
        self.expect("}")

        missing = [f for f in _NAVIGATOR_FIELDS if f not in fields]
        if missing:
            raise self.error(f"missing field(s): {', '.join(missing)}", start)
        return start, fields

    def _build(self, start: int, build: Callable[[], _T]) -> _T:
        try:
            return build()
        except ValidationError as exc:
            reason = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise self.error(f"invalid record ({reason})", start) from exc

    def navigator(self) -> Navigator:
        start, fields = self.record_fields(_NAVIGATOR_FIELDS)
        return self._build(start, lambda: Navigator.model_validate(fields))

    def driver(self) -> Driver:
        start, fields = self.record_fields(_DRIVER_FIELDS)
        key = fields.pop("key", None)
        return self._build(
            start,
            lambda: Driver(navigator=Navigator.model_validate(fields), key=key),
        )

    def config(self) -> Config:
        self.expect("{")
        navigators: list[Navigator] = []
        drivers: list[Driver] = []
        while True:
            self.skip_ws()
            member_pos = self.pos
            member = self.string()
            self.expect(":")
            if member == "navigators":
                navigators = self.array(self.navigator)
            elif member == "drivers":
                drivers = self.array(self.driver)
            else:
                raise self.error(f"unknown member `{member}`", member_pos)
            if not self.eat(","):
                break
        self.expect("}")

        self.skip_ws()
        if self.pos != len(self.text):
            raise self.error("unexpected content after the config object")
        return Config(navigators=navigators, drivers=drivers)


def deserialize(text: str) -> Config:
    """Parse a legacy JSON config.

    Raises:
        LegacyJsonError: The text is not valid JSON of the known shape.
    """
    return _Parser(text).config()
