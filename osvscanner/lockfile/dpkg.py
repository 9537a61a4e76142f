"""Extraction of installed packages from the dpkg status database."""

from __future__ import annotations

import re
from collections.abc import Iterator

from osvscanner.lockfile.extractor import (
    DepFile,
    Extractor,
    Lockfile,
    PackageDetails,
    extract_from_file,
    sort_packages,
)

DEBIAN_ECOSYSTEM = "Debian"

_SOURCE_WITH_VERSION = re.compile(r"(.*)\((.*)\)")


def _paragraphs(text: str) -> Iterator[list[str]]:
    """Yield the groups of non-empty lines that blank lines separate."""
    group: list[str] = []
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        if line:
            group.append(line)
        elif group:
            yield group
            group = []
    if group:
        yield group


def _parse_source_field(source: str) -> tuple[str, str]:
    """Split a "name (version)" Source value; the version may be absent."""
    match = _SOURCE_WITH_VERSION.match(source)
    if match is not None:
        return match.group(1).strip(), match.group(2).strip()
    return source.strip(), ""


def _parse_group(lines: list[str]) -> PackageDetails | None:
    """Return the package a paragraph describes, or None if it is not installed."""
    name = version = ""
    source_present = source_has_version = False

    for line in lines:
        if line.startswith("Status:"):
            tokens = line[len("Status:"):].split()
            # expected "Want Flag Status"; anything else is malformed
            if len(tokens) != 3 or tokens[2] in ("not-installed", "config-files"):
                return None
        elif line.startswith("Source:"):
            source_present = True
            name, source_version = _parse_source_field(line[len("Source:"):])
            if source_version:
                source_has_version = True
                version = source_version
        elif line.startswith("Version:"):
            if not source_has_version:
                version = line[len("Version:"):].strip()
        elif line.startswith("Package:"):
            # packages without a Source field are named by their Package field
            if not source_present:
                name = line[len("Package:"):].strip()

    return PackageDetails(
        name=name,
        version=version,
        ecosystem=DEBIAN_ECOSYSTEM,
        compare_as=DEBIAN_ECOSYSTEM,
    )


class DpkgStatusExtractor(Extractor):
    """Reads the installed packages recorded in a dpkg status file."""

    def should_extract(self, path: str) -> bool:
        return path == "/var/lib/dpkg/status"

    def extract(self, dep_file: DepFile) -> list[PackageDetails]:
        packages = (_parse_group(group) for group in _paragraphs(dep_file.read()))
        return [pkg for pkg in packages if pkg is not None and pkg.name]


def parse_dpkg_status(path: str) -> list[PackageDetails]:
    """Return the installed packages in the dpkg status file at ``path``, in file order."""
    return extract_from_file(path, DpkgStatusExtractor())


def from_dpkg_status(path: str) -> Lockfile:
    """Return the dpkg status file at ``path`` as a Lockfile of sorted packages."""
    return Lockfile(
        file_path=path,
        parsed_as="dpkg-status",
        packages=sort_packages(parse_dpkg_status(path)),
    )