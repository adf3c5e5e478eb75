"""ConfigStore — locate, load, migrate and persist the registry.

INVARIANT: Files are truth.  Every store rewrites the whole primary file;
there are no partial writes.

Reading prefers the primary record file and falls back to the legacy
JSON file in the same directory.  A legacy file is migrated on load by
immediately storing its contents in the primary format; the legacy file
is left untouched and is ignored from then on.
"""

from __future__ import annotations

import logging
import stat
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from git_drive.config.discovery import CONFIG_FILENAME, LEGACY_CONFIG_FILENAME
from git_drive.domain.models import Config
from git_drive.errors import (
    ConfigFileError,
    ConfigFileTypeError,
    ConfigIOError,
    ConfigLocationError,
    ConfigParseError,
    ConfigPermissionError,
    LegacyJsonError,
    RecordParseError,
)
from git_drive.infrastructure import legacy_json, records

logger = logging.getLogger(__name__)


class Mode(StrEnum):
    READ = "read"
    WRITE = "write"


class FileFormat(StrEnum):
    PRIMARY = "primary"
    LEGACY = "legacy"


@dataclass(frozen=True)
class ConfigFile:
    """A located config file and the format it is written in."""

    path: Path
    format: FileFormat


def _file_type(mode: int) -> str:
    if stat.S_ISDIR(mode):
        return "directory"
    if stat.S_ISFIFO(mode):
        return "named pipe"
    if stat.S_ISSOCK(mode):
        return "socket"
    if stat.S_ISBLK(mode):
        return "block device"
    if stat.S_ISCHR(mode):
        return "character device"
    return "special file"


def _io_error(path: Path, action: str, exc: OSError, *, content: str | None = None) -> ConfigFileError:
    if isinstance(exc, PermissionError):
        return ConfigPermissionError(
            path, f"Permission denied, could not {action} the config file", content=content
        )
    reason = exc.strerror or str(exc)
    return ConfigIOError(path, f"Could not {action} the config file ({reason})", content=content)


def _is_regular_file(path: Path) -> bool:
    """True for a regular file, False if nothing is there.

    Raises:
        ConfigFileTypeError: Something other than a regular file exists at *path*.
    """
    try:
        mode = path.stat().st_mode
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise _io_error(path, "access", exc) from exc
    if stat.S_ISREG(mode):
        return True
    raise ConfigFileTypeError(path, _file_type(mode))


class ConfigStore:
    """Reads and writes the registry in *directory*.

    A *directory* of None means no config location could be discovered:
    loading yields an empty Config and storing fails.
    """

    def __init__(self, directory: Path | None) -> None:
        self._directory = directory

    @property
    def directory(self) -> Path | None:
        return self._directory

    # ------------------------------------------------------------------
    # Location
    # ------------------------------------------------------------------

    def resolve(self, mode: Mode) -> ConfigFile | None:
        """Locate the file to read from or write to.

        For ``READ`` returns None when neither the primary nor the legacy
        file exists.  ``WRITE`` always targets the primary file.

        Raises:
            ConfigLocationError: Writing without a config directory.
            ConfigFileTypeError: A config path is not a regular file.
        """
        if self._directory is None:
            if mode is Mode.WRITE:
                raise ConfigLocationError()
            return None

        primary = ConfigFile(self._directory / CONFIG_FILENAME, FileFormat.PRIMARY)
        if mode is Mode.WRITE:
            return primary

        legacy = ConfigFile(self._directory / LEGACY_CONFIG_FILENAME, FileFormat.LEGACY)
        for candidate in (primary, legacy):
            if _is_regular_file(candidate.path):
                return candidate
        return None

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------

    def load(self) -> Config:
        """Load the registry, migrating a legacy JSON file if that is all there is."""
        located = self.resolve(Mode.READ)
        if located is None:
            logger.debug("No config file found in %s", self._directory)
            return Config()

        text = self._read(located.path)
        if text is None:
            return Config()

        if located.format is FileFormat.PRIMARY:
            config = self._parse(located.path, text, records.deserialize)
            logger.debug(
                "Loaded %d navigator(s) and %d driver(s) from %s",
                len(config.navigators),
                len(config.drivers),
                located.path,
            )
            return config

        config = self._parse(located.path, text, legacy_json.deserialize)
        logger.info("Migrating legacy config %s to the record format", located.path)
        self.store(config)
        return config

    @staticmethod
    def _read(path: Path) -> str | None:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as exc:
            msg = "Could not read the config file, it is not valid UTF-8"
            raise ConfigParseError(path, msg) from exc
        except OSError as exc:
            raise _io_error(path, "read", exc) from exc

    @staticmethod
    def _parse(path: Path, text: str, parser: Callable[[str], Config]) -> Config:
        try:
            return parser(text)
        except (RecordParseError, LegacyJsonError) as exc:
            raise ConfigParseError(path, f"Could not read the configuration data, {exc}") from exc

    # ------------------------------------------------------------------
    # Store
    # ------------------------------------------------------------------

    def store(self, config: Config) -> None:
        """Write *config* to the primary file, replacing its contents.

        If the first write fails because the directory is missing, the
        directory tree is created and the write is retried exactly once.

        Raises:
            ConfigLocationError: No config directory is known.
            ConfigPermissionError: Writing was denied.
            ConfigIOError: Any other OS error; carries the serialized content.
        """
        target = self.resolve(Mode.WRITE)
        assert target is not None
        path = target.path
        content = records.serialize(config)

        try:
            self._write(path, content)
        except FileNotFoundError:
            logger.debug("Creating config directory %s", path.parent)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                self._write(path, content)
            except OSError as exc:
                raise _io_error(path, "write", exc, content=content) from exc
        except OSError as exc:
            raise _io_error(path, "write", exc, content=content) from exc

        logger.debug("Stored config to %s", path)

    @staticmethod
    def _write(path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8", newline="\n")
