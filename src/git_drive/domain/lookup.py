"""Explicit lookup helpers over a Config, dispatched on :class:`Kind`.

Navigator and driver aliases live in separate namespaces: the same alias
may name both a navigator and a driver.
"""

from __future__ import annotations

from collections.abc import Iterable

from git_drive.domain.models import Config, Driver, Navigator
from git_drive.domain.types import Kind


def records(config: Config, kind: Kind) -> list[Navigator] | list[Driver]:
    """Return the live list holding records of *kind*."""
    if kind is Kind.NAVIGATOR:
        return config.navigators
    return config.drivers


def identity(record: Navigator | Driver) -> Navigator:
    """The navigator part of a record (drivers wrap one)."""
    if isinstance(record, Driver):
        return record.navigator
    return record


def aliases(config: Config, kind: Kind) -> list[str]:
    """All aliases of *kind*, in insertion order."""
    return [identity(record).alias for record in records(config, kind)]


def find(config: Config, kind: Kind, alias: str) -> Navigator | Driver | None:
    """Return the first record of *kind* whose alias equals *alias* exactly."""
    for record in records(config, kind):
        if identity(record).alias == alias:
            return record
    return None


def index_of(config: Config, kind: Kind, alias: str) -> int | None:
    """Position of the record with *alias*, or None."""
    for idx, record in enumerate(records(config, kind)):
        if identity(record).alias == alias:
            return idx
    return None


def remove(config: Config, kind: Kind, ids: Iterable[str]) -> bool:
    """Remove every record of *kind* whose alias is in *ids*.

    Returns True if at least one record was removed.
    """
    wanted = set(ids)
    items = records(config, kind)
    kept = [record for record in items if identity(record).alias not in wanted]
    if len(kept) == len(items):
        return False
    items[:] = kept
    return True


def format_entry(record: Navigator | Driver) -> str:
    """``alias: name <email>`` listing line."""
    nav = identity(record)
    return f"{nav.alias}: {nav.name} <{nav.email}>"
