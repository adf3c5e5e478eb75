"""BaseService — shared foundation for git-drive services.

Every service receives a :class:`ConfigStore` at construction time and
owns its load/store boundary: load once, mutate in memory, store only
when something changed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from git_drive.errors import (
    AmbiguousQueryError,
    ConfigFileError,
    GitDriveError,
    ResolutionError,
)
from git_drive.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from git_drive.infrastructure.store import ConfigStore

logger = logging.getLogger(__name__)


def error_detail(exc: GitDriveError) -> dict[str, Any]:
    """Structured context for an error: file path, query, candidates, cause."""
    detail: dict[str, Any] = {}
    if isinstance(exc, ConfigFileError):
        detail["path"] = str(exc.path)
        if exc.__cause__ is not None:
            detail["cause"] = str(exc.__cause__)
    if isinstance(exc, ResolutionError):
        detail["query"] = exc.query
    if isinstance(exc, AmbiguousQueryError):
        detail["candidates"] = exc.candidates
    return detail


class BaseService:
    """Base for service-layer classes.

    Usage::

        class RegistryService(BaseService):
            def add(self, kind, alias, ...) -> ServiceResult:
                config = self._store.load()
                ...
                self._store.store(config)
    """

    def __init__(self, store: ConfigStore) -> None:
        self._store = store

    @staticmethod
    def _failure(op: str, exc: GitDriveError) -> ServiceResult:
        """Convert a git-drive error into a failed ServiceResult."""
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=error_detail(exc)),
        )

    @staticmethod
    def _invalid(op: str, message: str) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code="INVALID_INPUT", message=message),
        )
