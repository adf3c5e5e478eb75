"""Identity records: navigators, drivers and the registry that holds them.

Navigator and Driver are frozen; edits replace a record in place.
Config keeps plain mutable lists so command handlers can add, replace
and remove records directly before handing the Config back to the store.

INVARIANT: no field contains a line break.  The primary config format
is line oriented and every record must survive a write/read cycle.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field, field_validator

TRAILER_TOKEN = "Co-Authored-By"


def _reject_line_breaks(value: str) -> str:
    if "\n" in value or "\r" in value:
        msg = "must not contain line breaks"
        raise ValueError(msg)
    return value


class Navigator(BaseModel):
    """A co-author identity stamped into commit trailers."""

    model_config = {"frozen": True}

    alias: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)

    @field_validator("alias", "name", "email")
    @classmethod
    def _single_line(cls, value: str) -> str:
        return _reject_line_breaks(value)

    @field_validator("email")
    @classmethod
    def _no_angle_brackets(cls, value: str) -> str:
        if "<" in value or ">" in value:
            msg = "must not contain '<' or '>'"
            raise ValueError(msg)
        return value

    @property
    def trailer(self) -> str:
        """The git trailer line, e.g. ``Co-Authored-By: Jane <jane@example.org>``."""
        return f"{TRAILER_TOKEN}: {self.name} <{self.email}>"


class Driver(BaseModel):
    """A local operator identity with an optional signing key."""

    model_config = {"frozen": True}

    navigator: Navigator
    key: str | None = None

    @field_validator("key")
    @classmethod
    def _normalize_key(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = _reject_line_breaks(value).strip()
        return value or None

    @property
    def alias(self) -> str:
        return self.navigator.alias


class Config(BaseModel):
    """The whole registry, in insertion order."""

    navigators: list[Navigator] = Field(default_factory=list)
    drivers: list[Driver] = Field(default_factory=list)

    @classmethod
    def from_records(cls, records: Iterable[Navigator | Driver]) -> Config:
        """Build a Config, sorting each record into its list by type."""
        config = cls()
        for record in records:
            if isinstance(record, Driver):
                config.drivers.append(record)
            else:
                config.navigators.append(record)
        return config

    def is_empty(self) -> bool:
        return not self.navigators and not self.drivers
