"""RegistryService — list, add, edit, delete and resolve identities.

Pipeline for mutations: LOAD → VALIDATE → APPLY → STORE → RESPOND.
The store step is skipped when the registry did not change.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from git_drive.domain import lookup
from git_drive.domain.models import Driver, Navigator
from git_drive.domain.resolve import resolve_all
from git_drive.domain.types import Kind
from git_drive.errors import DuplicateAliasError, GitDriveError, UnknownAliasError
from git_drive.services.base import BaseService
from git_drive.services.result import ServiceResult


def _record_data(record: Navigator | Driver) -> dict[str, Any]:
    nav = lookup.identity(record)
    data: dict[str, Any] = {"alias": nav.alias, "name": nav.name, "email": nav.email}
    if isinstance(record, Driver):
        data["key"] = record.key
    return data


def _blank_field(**fields: str | None) -> str | None:
    """Message for the first field that is present but blank, if any."""
    for field, value in fields.items():
        if value is not None and not value.strip():
            return f"The {field} must not be empty."
    return None


def _validation_message(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def _build(kind: Kind, navigator: Navigator, key: str | None) -> Navigator | Driver:
    if kind is Kind.DRIVER:
        return Driver(navigator=navigator, key=key)
    return navigator


class RegistryService(BaseService):
    """Operations on the navigator and driver registry."""

    def list_entries(self, kind: Kind) -> ServiceResult:
        """List every record of *kind* in insertion order."""
        op = f"list_{kind}s"
        try:
            config = self._store.load()
        except GitDriveError as exc:
            return self._failure(op, exc)

        entries = lookup.records(config, kind)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "kind": str(kind),
                "count": len(entries),
                "items": [_record_data(record) for record in entries],
                "lines": [lookup.format_entry(record) for record in entries],
            },
        )

    def add(
        self,
        kind: Kind,
        alias: str,
        *,
        name: str,
        email: str,
        key: str | None = None,
    ) -> ServiceResult:
        """Add a new record; the alias must not exist yet for *kind*."""
        op = f"add_{kind}"
        blank = _blank_field(alias=alias, name=name, email=email)
        if blank:
            return self._invalid(op, blank)

        try:
            record = _build(kind, Navigator(alias=alias, name=name, email=email), key)
        except ValidationError as exc:
            return self._invalid(op, _validation_message(exc))

        try:
            config = self._store.load()
            if lookup.find(config, kind, alias) is not None:
                raise DuplicateAliasError(kind, alias)
            lookup.records(config, kind).append(record)  # type: ignore[arg-type]
            self._store.store(config)
        except GitDriveError as exc:
            return self._failure(op, exc)

        return ServiceResult(ok=True, op=op, data=_record_data(record))

    def edit(
        self,
        kind: Kind,
        alias: str,
        *,
        name: str | None = None,
        email: str | None = None,
        key: str | None = None,
        clear_key: bool = False,
    ) -> ServiceResult:
        """Update fields of an existing record, keeping its position.

        Fields left as None keep their current value.  For drivers,
        *clear_key* removes the signing key.
        """
        op = f"edit_{kind}"
        blank = _blank_field(name=name, email=email)
        if blank:
            return self._invalid(op, blank)

        try:
            config = self._store.load()
            idx = lookup.index_of(config, kind, alias)
            if idx is None:
                raise UnknownAliasError(kind, alias)
        except GitDriveError as exc:
            return self._failure(op, exc)

        entries = lookup.records(config, kind)
        current = entries[idx]
        nav = lookup.identity(current)
        current_key = current.key if isinstance(current, Driver) else None
        new_key = None if clear_key else (key if key is not None else current_key)

        try:
            updated = _build(
                kind,
                Navigator(
                    alias=nav.alias,
                    name=name if name is not None else nav.name,
                    email=email if email is not None else nav.email,
                ),
                new_key,
            )
        except ValidationError as exc:
            return self._invalid(op, _validation_message(exc))

        if updated == current:
            return ServiceResult(
                ok=True,
                op=op,
                data=_record_data(updated),
                warnings=[f"Nothing to change for {kind} {alias}"],
            )

        entries[idx] = updated  # type: ignore[assignment]
        try:
            self._store.store(config)
        except GitDriveError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=_record_data(updated))

    def delete(self, kind: Kind, aliases: Sequence[str]) -> ServiceResult:
        """Delete every record of *kind* whose alias is listed.

        Unknown aliases are reported as warnings, not errors.
        """
        op = f"delete_{kind}s"
        try:
            config = self._store.load()
            known = set(lookup.aliases(config, kind))
            deleted = [alias for alias in dict.fromkeys(aliases) if alias in known]
            if lookup.remove(config, kind, deleted):
                self._store.store(config)
        except GitDriveError as exc:
            return self._failure(op, exc)

        warnings = [f"No {kind} with alias {alias}" for alias in aliases if alias not in known]
        return ServiceResult(
            ok=True,
            op=op,
            data={"kind": str(kind), "deleted": deleted, "count": len(deleted)},
            warnings=warnings,
        )

    def trailers(self, queries: Sequence[str]) -> ServiceResult:
        """Resolve navigator queries into ``Co-Authored-By`` trailer lines."""
        op = "trailers"
        try:
            config = self._store.load()
            navigators = resolve_all(queries, config.navigators)
        except GitDriveError as exc:
            return self._failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "navigators": [nav.alias for nav in navigators],
                "trailers": [nav.trailer for nav in navigators],
            },
        )
