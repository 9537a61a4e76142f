"""Shared building blocks for ecosystem version comparison."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Version(ABC):
    """A parsed version that can be ordered against another version string."""

    @abstractmethod
    def compare_str(self, text: str) -> int:
        """Return -1, 0 or +1 as this version is less than, equal to or greater than ``text``."""


def to_int(text: str) -> int | None:
    """Return ``text`` as a base-10 integer, or None if it is not one in full."""
    if _INTEGER.fullmatch(text) is None:
        return None
    return int(text)


def fetch_component(components: Sequence[int | None], index: int) -> int | None:
    """Return the component at ``index``, or 0 when the sequence is too short."""
    if index < len(components):
        return components[index]
    return 0


def compare_components(a: Sequence[int | None], b: Sequence[int | None]) -> int:
    """Compare two numeric component sequences, padding the shorter with zeros.

    A component of None marks a part that was not a number; reaching one
    during the comparison raises ValueError.
    """
    for index in range(max(len(a), len(b))):
        x = fetch_component(a, index)
        y = fetch_component(b, index)
        if x is None or y is None:
            raise ValueError("version component is not a number")
        if x != y:
            return -1 if x < y else 1
    return 0