"""Per-directory configuration of which vulnerabilities to ignore."""

from __future__ import annotations

import logging
import os
import stat
import tomllib
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from typing import Any

CONFIG_FILE_NAME = "osv-scanner.toml"

_log = logging.getLogger(__name__)


class ConfigLoadError(Exception):
    """Raised when a configuration file is missing or cannot be read."""


@dataclass(frozen=True)
class IgnoreEntry:
    """A vulnerability to ignore, optionally only until a given moment."""

    id: str = ""
    ignore_until: datetime | None = None
    reason: str = ""


@dataclass
class Config:
    """The vulnerabilities to ignore and the file they were loaded from."""

    ignored_vulns: list[IgnoreEntry] = field(default_factory=list)
    load_path: str = ""

    def should_ignore(self, vuln_id: str) -> tuple[bool, IgnoreEntry | None]:
        """Return whether ``vuln_id`` is ignored now, and its entry if it has one."""
        entry = next((e for e in self.ignored_vulns if e.id == vuln_id), None)
        if entry is None:
            return False, None
        if entry.ignore_until is None:
            return True, entry
        # naive moments are in local time
        if entry.ignore_until.tzinfo is None:
            now = datetime.now()
        else:
            now = datetime.now(timezone.utc)
        return entry.ignore_until > now, entry


def _to_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    raise ConfigLoadError(f"failed to parse config file: ignoreUntil is not a date: {value!r}")


def _entry_from_table(table: Any) -> IgnoreEntry:
    if not isinstance(table, dict):
        raise ConfigLoadError("failed to parse config file: IgnoredVulns entries must be tables")
    until = table.get("ignoreUntil")
    return IgnoreEntry(
        id=str(table.get("id", "")),
        ignore_until=None if until is None else _to_datetime(until),
        reason=str(table.get("reason", "")),
    )


def try_load_config(config_path: str) -> Config:
    """Load the configuration file at ``config_path``.

    Raises ConfigLoadError if the file cannot be opened or parsed.
    """
    try:
        handle = open(config_path, "rb")
    except OSError as err:
        raise ConfigLoadError(f"no config file found on this path: {config_path}") from err

    with handle:
        try:
            data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as err:
            raise ConfigLoadError(f"failed to parse config file: {err}") from err

    entries = data.get("IgnoredVulns", [])
    if not isinstance(entries, list):
        raise ConfigLoadError("failed to parse config file: IgnoredVulns must be an array")

    return Config(ignored_vulns=[_entry_from_table(e) for e in entries], load_path=config_path)


def normalize_config_load_path(target: str) -> str:
    """Return the configuration path for ``target``: the file in it if it is a
    directory, otherwise the file beside it. Raises OSError if ``target`` is missing."""
    mode = os.stat(target).st_mode
    folder = target if stat.S_ISDIR(mode) else os.path.dirname(target)
    return os.path.normpath(os.path.join(folder, CONFIG_FILE_NAME))


@dataclass
class ConfigManager:
    """Finds and caches the configuration that applies to each scanned path."""

    override_config: Config | None = None
    default_config: Config = field(default_factory=Config)
    config_map: dict[str, Config] = field(default_factory=dict)

    def use_override(self, config_path: str) -> None:
        """Use the file at ``config_path`` for every path; raises ConfigLoadError."""
        self.override_config = try_load_config(config_path)

    def get(self, target_path: str) -> Config:
        """Return the configuration that applies to ``target_path``."""
        if self.override_config is not None:
            return self.override_config

        try:
            config_path = normalize_config_load_path(target_path)
        except OSError:
            # targets that are not files on disk have no configuration
            return Config()

        cached = self.config_map.get(config_path)
        if cached is not None:
            return cached

        try:
            config = try_load_config(config_path)
            _log.info("Loaded filter from: %s", config.load_path)
        except ConfigLoadError:
            config = self.default_config

        self.config_map[config_path] = config
        return config