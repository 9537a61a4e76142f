"""Files that dependencies are extracted from, and what comes out of them."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field

_KNOWN_ECOSYSTEMS = (
    "npm",
    "NuGet",
    "crates.io",
    "RubyGems",
    "Packagist",
    "Go",
    "Hex",
    "Maven",
    "PyPI",
    "Pub",
    "ConanCenter",
    "CRAN",
)


@dataclass(frozen=True)
class PackageDetails:
    """A single package found in a lockfile or similar file."""

    name: str = ""
    version: str = ""
    ecosystem: str = ""
    compare_as: str = ""
    commit: str = ""
    dep_groups: tuple[str, ...] = ()


@dataclass
class Lockfile:
    """The packages extracted from one file, and how the file was read."""

    file_path: str
    parsed_as: str
    packages: list[PackageDetails] = field(default_factory=list)


class DepFile(ABC):
    """A file opened for extraction that can open other files relative to itself."""

    path: str

    @abstractmethod
    def read(self) -> str:
        """Return the whole content of the file."""

    @abstractmethod
    def open(self, path: str) -> DepFile:
        """Open ``path``, relative to this file unless it is absolute."""


class LocalFile(DepFile):
    """A file on the local filesystem; use it as a context manager to close it."""

    def __init__(self, path: str) -> None:
        self._handle = open(path, encoding="utf-8")
        self.path = os.path.abspath(path)

    def read(self) -> str:
        return self._handle.read()

    def open(self, path: str) -> LocalFile:
        if os.path.isabs(path):
            return open_local_dep_file(path)
        return open_local_dep_file(os.path.join(os.path.dirname(self.path), path))

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> LocalFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class Extractor(ABC):
    """Knows which files it handles and how to read packages out of them."""

    @abstractmethod
    def should_extract(self, path: str) -> bool:
        """Return whether this extractor should be used for ``path``."""

    @abstractmethod
    def extract(self, dep_file: DepFile) -> list[PackageDetails]:
        """Return the packages found in ``dep_file``."""


def open_local_dep_file(path: str) -> LocalFile:
    """Open ``path`` on the local filesystem; raises OSError if it cannot be opened."""
    return LocalFile(path)


def extract_from_file(path: str, extractor: Extractor) -> list[PackageDetails]:
    """Open ``path`` and run ``extractor`` over it."""
    with open_local_dep_file(path) as dep_file:
        return extractor.extract(dep_file)


def sort_packages(packages: Iterable[PackageDetails]) -> list[PackageDetails]:
    """Return ``packages`` ordered by name, then by version."""
    return sorted(packages, key=lambda pkg: (pkg.name, pkg.version))


def known_ecosystems() -> list[str]:
    """Ecosystems for which an extractor can be inferred from a file path."""
    return list(_KNOWN_ECOSYSTEMS)