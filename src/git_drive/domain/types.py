"""Record kinds stored in the registry."""

from __future__ import annotations

from enum import StrEnum


class Kind(StrEnum):
    """The two seats an identity can take."""

    NAVIGATOR = "navigator"
    DRIVER = "driver"
