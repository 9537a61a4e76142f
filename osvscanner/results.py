"""Presentation helpers for scan results."""

from __future__ import annotations

from dataclasses import dataclass

# number of characters shown of a git commit
SHORT_COMMIT_LEN = 8


@dataclass(frozen=True)
class PackageInfo:
    """A package named in scan results."""

    name: str = ""
    version: str = ""
    ecosystem: str = ""
    commit: str = ""


def pkg_to_string(pkg_info: PackageInfo) -> str:
    """Describe a package as ``name@version``, or by its (short) commit."""
    if pkg_info.commit:
        if pkg_info.name:
            return f"{pkg_info.name}@{pkg_info.commit[:SHORT_COMMIT_LEN]}"
        return pkg_info.commit
    return f"{pkg_info.name}@{pkg_info.version}"