"""Choosing an extractor for a file and running it."""

from __future__ import annotations

from osvscanner.lockfile.cargo import CargoLockExtractor
from osvscanner.lockfile.composer import ComposerLockExtractor
from osvscanner.lockfile.extractor import DepFile, Extractor, Lockfile, sort_packages

_EXTRACTORS: dict[str, Extractor] = {
    "Cargo.lock": CargoLockExtractor(),
    "composer.lock": ComposerLockExtractor(),
}


class ExtractorNotFoundError(LookupError):
    """Raised when no extractor can be determined for a file."""


def find_extractor(path: str, extract_as: str) -> tuple[Extractor | None, str]:
    """Return the extractor named ``extract_as``, or the first that accepts ``path``,
    together with its name; (None, "") when there is none."""
    if extract_as:
        return _EXTRACTORS.get(extract_as), extract_as

    for name, extractor in _EXTRACTORS.items():
        if extractor.should_extract(path):
            return extractor, name

    return None, ""


def list_extractors() -> list[str]:
    """Names of the registered extractors, ordered case-insensitively."""
    return sorted(_EXTRACTORS, key=str.lower)


def extract_deps(dep_file: DepFile, extract_as: str) -> Lockfile:
    """Extract the packages from ``dep_file``, sorted by name and version."""
    extractor, extracted_as = find_extractor(dep_file.path, extract_as)

    if extractor is None:
        if extract_as:
            raise ExtractorNotFoundError(f"could not determine extractor, requested {extract_as}")
        raise ExtractorNotFoundError(f"could not determine extractor for {dep_file.path}")

    try:
        packages = extractor.extract(dep_file)
    except Exception as err:
        if extract_as:
            err.add_note(f"(extracting as {extracted_as})")
        raise

    return Lockfile(file_path=dep_file.path, parsed_as=extracted_as, packages=sort_packages(packages))