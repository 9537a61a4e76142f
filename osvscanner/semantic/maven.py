"""Versions of packages in the Maven ecosystem."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from itertools import zip_longest

from osvscanner.semantic.components import Version, to_int

_KEYWORD_ORDER = ("alpha", "beta", "milestone", "rc", "snapshot", "", "sp")
_NON_DIGIT_THEN_DIGIT = re.compile(r"[^0-9][0-9]")
_DIGIT_THEN_NON_DIGIT = re.compile(r"[0-9][^0-9]")
_SEPARATORS = re.compile(r"([-.])")


def _keyword_index(keyword: str) -> int:
    try:
        return _KEYWORD_ORDER.index(keyword)
    except ValueError:
        return len(_KEYWORD_ORDER)


@dataclass(frozen=True)
class _Token:
    prefix: str
    value: str
    is_null: bool = field(default=False, compare=False)

    def qualifier_order(self) -> int:
        if to_int(self.value) is not None:
            if self.prefix == "-":
                return 2
            if self.prefix == ".":
                return 3
        if self.prefix == "-":
            return 1
        if self.prefix == ".":
            return 0
        raise ValueError(f"unknown prefix '{self.prefix}'")

    def should_trim(self) -> bool:
        return self.value in ("0", "", "final", "ga")

    def less_than(self, other: _Token) -> bool:
        if self.prefix != other.prefix:
            # ".qualifier" < "-qualifier" < "-number" < ".number"
            return self.qualifier_order() < other.qualifier_order()

        mine = to_int(self.value)
        theirs = to_int(other.value)
        if mine is not None and theirs is not None:
            return mine < theirs

        # numbers sort after qualifiers, unless they are padding
        if mine is not None and not self.is_null:
            return False
        if theirs is not None and not other.is_null:
            return True

        # unknown qualifiers sort after the known ones, and lexically among themselves
        left = _keyword_index(self.value)
        right = _keyword_index(other.value)
        if left == right == len(_KEYWORD_ORDER):
            return self.value < other.value
        return left < right


def _null_token(token: _Token) -> _Token:
    """Return the padding value that matches the prefix of ``token``."""
    if token.prefix == ".":
        # "sp" is the only qualifier after an empty value, so pad it with one
        return _Token(".", "" if token.value == "sp" else "0", True)
    if token.prefix == "-":
        return _Token("-", "", True)
    raise ValueError(f"unknown prefix '{token.prefix}' (value: '{token.value}')")


def _transitions(text: str) -> list[int]:
    """Positions where ``text`` switches between digits and non-digits."""
    points = [m.start() + 1 for m in _NON_DIGIT_THEN_DIGIT.finditer(text)]
    points += [m.start() + 1 for m in _DIGIT_THEN_NON_DIGIT.finditer(text)]
    return sorted(points)


def _normalize(current: str, followed_by_more: bool) -> str:
    current = current.lower() or "0"
    if current == "cr":
        current = "rc"
    if current in ("ga", "final", "release"):
        current = ""
    if followed_by_more:
        current = {"a": "alpha", "b": "beta", "m": "milestone"}.get(current, current)
    number = to_int(current)
    if number is not None:
        current = str(number)
    return current


def _tokenize(text: str) -> list[_Token]:
    pieces = _SEPARATORS.split(text)
    tokens: list[_Token] = []

    for position in range(0, len(pieces), 2):
        raw = pieces[position]
        prefix = pieces[position - 1] if position else ""
        start = 0
        ends = [*_transitions(raw), len(raw)]
        for number, end in enumerate(ends):
            if number:
                prefix = "-"
            value = _normalize(raw[start:end], end != len(raw))
            tokens.append(_Token(prefix, value))
            start = end

    return tokens


def _trim(tokens: list[_Token]) -> list[_Token]:
    # Trailing null values are removed, then again before each remaining hyphen.
    i = len(tokens) - 1
    while i > 0:
        if tokens[i].should_trim():
            del tokens[i]
            i -= 1
            continue
        while i >= 0 and tokens[i].prefix != "-":
            i -= 1
        i -= 1
    return tokens


@dataclass(frozen=True)
class MavenVersion(Version):
    """A Maven version, ordered as Maven's own comparator orders it."""

    tokens: tuple[_Token, ...]

    def _less_than(self, other: MavenVersion) -> bool:
        for left, right in zip_longest(self.tokens, other.tokens):
            if left is None:
                left = _null_token(right)
            if right is None:
                right = _null_token(left)
            if left == right:
                continue
            return left.less_than(right)
        return False

    def compare(self, other: MavenVersion) -> int:
        if self.tokens == other.tokens:
            return 0
        return -1 if self._less_than(other) else 1

    def compare_str(self, text: str) -> int:
        return self.compare(parse_maven_version(text))


def parse_maven_version(text: str) -> MavenVersion:
    """Parse ``text`` as a Maven version."""
    return MavenVersion(tuple(_trim(_tokenize(text))))