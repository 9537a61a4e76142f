"""Versions of packages in the Debian ecosystem."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import zip_longest

from osvscanner.semantic.components import Version

_DIGITS = re.compile(r"[0-9]*")
_NON_DIGITS = re.compile(r"[^0-9]*")


def _split_digit_prefix(text: str) -> tuple[int, str]:
    prefix = _DIGITS.match(text).group()
    if not prefix:
        return 0, text
    return int(prefix), text[len(prefix):]


def _split_non_digit_prefix(text: str) -> tuple[str, str]:
    prefix = _NON_DIGITS.match(text).group()
    return prefix, text[len(prefix):]


def _weigh_char(char: str) -> int:
    # tilde sorts before everything, even the end of the part
    if char == "~":
        return 1
    if char == "":
        return 2

    code = char.encode()[0]
    # all the letters sort earlier than all the non-letters
    if code < 65 or 90 < code < 97 or code > 122:
        code += 122
    return code


def compare_debian_versions(a: str, b: str) -> int:
    """Compare two upstream or revision strings by the dpkg algorithm."""
    while a or b:
        a_text, a = _split_non_digit_prefix(a)
        b_text, b = _split_non_digit_prefix(b)

        if a_text != b_text:
            for a_char, b_char in zip_longest(a_text, b_text, fillvalue=""):
                a_weight = _weigh_char(a_char)
                b_weight = _weigh_char(b_char)
                if a_weight != b_weight:
                    return -1 if a_weight < b_weight else 1

        a_number, a = _split_digit_prefix(a)
        b_number, b = _split_digit_prefix(b)
        if a_number != b_number:
            return -1 if a_number < b_number else 1

    return 0


@dataclass(frozen=True)
class DebianVersion(Version):
    """A Debian version: ``[epoch:]upstream[-revision]``."""

    epoch: int
    upstream: str
    revision: str

    def compare(self, other: DebianVersion) -> int:
        if self.epoch != other.epoch:
            return -1 if self.epoch < other.epoch else 1
        return compare_debian_versions(self.upstream, other.upstream) or compare_debian_versions(
            self.revision, other.revision
        )

    def compare_str(self, text: str) -> int:
        return self.compare(parse_debian_version(text))


def parse_debian_version(text: str) -> DebianVersion:
    """Parse ``text`` as a Debian version.

    Raises ValueError if an epoch is given that is not a number.
    """
    text = text.strip()
    epoch = 0

    if ":" in text:
        epoch_text, text = text.split(":", 1)
        if re.fullmatch(r"[+-]?[0-9]+", epoch_text) is None:
            raise ValueError(f"failed to convert {epoch_text} to a number")
        epoch = int(epoch_text)

    if "-" in text:
        upstream, revision = text.rsplit("-", 1)
    else:
        upstream, revision = text, "0"

    return DebianVersion(epoch, upstream, revision)