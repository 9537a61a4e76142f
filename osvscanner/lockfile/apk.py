"""Extraction of installed packages from the Alpine apk database."""

from __future__ import annotations

from collections.abc import Iterator

from osvscanner.lockfile.extractor import (
    DepFile,
    Extractor,
    Lockfile,
    PackageDetails,
    extract_from_file,
    sort_packages,
)

ALPINE_ECOSYSTEM = "Alpine"


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


def _parse_group(lines: list[str]) -> PackageDetails:
    name = version = commit = ""
    for line in lines:
        if line.startswith("P:"):
            name = line[2:]
        elif line.startswith("V:"):
            version = line[2:]
        elif line.startswith("c:"):
            commit = line[2:]
    return PackageDetails(
        name=name,
        version=version,
        commit=commit,
        ecosystem=ALPINE_ECOSYSTEM,
        compare_as=ALPINE_ECOSYSTEM,
    )


class ApkInstalledExtractor(Extractor):
    """Reads the packages recorded in an apk "installed" database."""

    def should_extract(self, path: str) -> bool:
        return path == "/lib/apk/db/installed"

    def extract(self, dep_file: DepFile) -> list[PackageDetails]:
        packages = (_parse_group(group) for group in _paragraphs(dep_file.read()))
        return [pkg for pkg in packages if pkg.name]


def parse_apk_installed(path: str) -> list[PackageDetails]:
    """Return the packages in the apk database at ``path``, in file order."""
    return extract_from_file(path, ApkInstalledExtractor())


def from_apk_installed(path: str) -> Lockfile:
    """Return the apk database at ``path`` as a Lockfile of sorted packages."""
    return Lockfile(
        file_path=path,
        parsed_as="apk-installed",
        packages=sort_packages(parse_apk_installed(path)),
    )