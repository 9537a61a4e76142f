"""Extraction of packages from composer.lock files."""

from __future__ import annotations

import json
import os
from typing import Any

from osvscanner.lockfile.extractor import DepFile, Extractor, PackageDetails, extract_from_file

COMPOSER_ECOSYSTEM = "Packagist"


def _details(entry: dict[str, Any], dep_groups: tuple[str, ...]) -> PackageDetails:
    dist = entry.get("dist") or {}
    return PackageDetails(
        name=entry.get("name") or "",
        version=entry.get("version") or "",
        commit=dist.get("reference") or "",
        ecosystem=COMPOSER_ECOSYSTEM,
        compare_as=COMPOSER_ECOSYSTEM,
        dep_groups=dep_groups,
    )


class ComposerLockExtractor(Extractor):
    """Reads the packages recorded in a composer.lock file."""

    def should_extract(self, path: str) -> bool:
        return os.path.basename(path) == "composer.lock"

    def extract(self, dep_file: DepFile) -> list[PackageDetails]:
        try:
            data = json.loads(dep_file.read())
        except ValueError as err:
            raise ValueError(f"could not extract from {dep_file.path}: {err}") from err

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"could not extract from {dep_file.path}: not a JSON object")

        packages = [_details(entry, ()) for entry in data.get("packages") or []]
        packages += [_details(entry, ("dev",)) for entry in data.get("packages-dev") or []]
        return packages


def parse_composer_lock(path: str) -> list[PackageDetails]:
    """Return the packages in the composer.lock file at ``path``."""
    return extract_from_file(path, ComposerLockExtractor())