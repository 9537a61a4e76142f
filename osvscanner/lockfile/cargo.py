"""Extraction of packages from Cargo.lock files."""

from __future__ import annotations

import os
import tomllib

from osvscanner.lockfile.extractor import DepFile, Extractor, PackageDetails, extract_from_file

CARGO_ECOSYSTEM = "crates.io"


class CargoLockExtractor(Extractor):
    """Reads the packages recorded in a Cargo.lock file."""

    def should_extract(self, path: str) -> bool:
        return os.path.basename(path) == "Cargo.lock"

    def extract(self, dep_file: DepFile) -> list[PackageDetails]:
        try:
            data = tomllib.loads(dep_file.read())
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as err:
            raise ValueError(f"could not extract from {dep_file.path}: {err}") from err

        entries = data.get("package", [])
        if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
            raise ValueError(f"could not extract from {dep_file.path}: 'package' is not a list of tables")

        return [
            PackageDetails(
                name=str(entry.get("name", "")),
                version=str(entry.get("version", "")),
                ecosystem=CARGO_ECOSYSTEM,
                compare_as=CARGO_ECOSYSTEM,
            )
            for entry in entries
        ]


def parse_cargo_lock(path: str) -> list[PackageDetails]:
    """Return the packages in the Cargo.lock file at ``path``."""
    return extract_from_file(path, CargoLockExtractor())