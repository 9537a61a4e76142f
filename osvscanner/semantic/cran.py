"""Versions of packages in the CRAN ecosystem."""

from __future__ import annotations

from dataclasses import dataclass

from osvscanner.semantic.components import Version, compare_components, to_int


@dataclass(frozen=True)
class CRANVersion(Version):
    """A sequence of non-negative integers separated by periods or dashes.

    A part that is not a number is held as None and cannot be compared.
    """

    components: tuple[int | None, ...]

    def compare(self, other: CRANVersion) -> int:
        diff = compare_components(self.components, other.components)
        if diff:
            return diff
        # equal prefixes: the version with more components is the greater
        mine, theirs = len(self.components), len(other.components)
        return (mine > theirs) - (mine < theirs)

    def compare_str(self, text: str) -> int:
        return self.compare(parse_cran_version(text))


def parse_cran_version(text: str) -> CRANVersion:
    """Parse ``text`` as a CRAN version; dashes weigh the same as periods."""
    parts = text.replace("-", ".").split(".")
    return CRANVersion(tuple(to_int(part) for part in parts))