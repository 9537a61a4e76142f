"""Versions of packages in the PyPI ecosystem."""

from __future__ import annotations

import re
from dataclasses import dataclass

from osvscanner.semantic.components import Version, compare_components, to_int

_WS = r"[\t\n\f\r ]*"

_PEP440 = re.compile(
    _WS
    + r"v?"
    r"(?:"
    r"(?:(?P<epoch>[0-9]+)!)?"
    r"(?P<release>[0-9]+(?:\.[0-9]+)*)"
    r"(?P<pre>[-_\.]?(?P<pre_l>(a|b|c|rc|alpha|beta|pre|preview))[-_\.]?(?P<pre_n>[0-9]+)?)?"
    r"(?P<post>(?:-(?P<post_n1>[0-9]+))|(?:[-_\.]?(?P<post_l>post|rev|r)[-_\.]?(?P<post_n2>[0-9]+)?))?"
    r"(?P<dev>[-_\.]?(?P<dev_l>dev)[-_\.]?(?P<dev_n>[0-9]+)?)?"
    r")"
    r"(?:\+(?P<local>[a-z0-9]+(?:[-_\.][a-z0-9]+)*))?"
    + _WS
)
_LEGACY_PARTS = re.compile(r"[0-9]+|[a-z]+|\.|-")
_LOCAL_SEPARATORS = re.compile(r"[._-]")

_LETTER_SPELLINGS = {
    "alpha": "a",
    "beta": "b",
    "c": "rc",
    "pre": "rc",
    "preview": "rc",
    "rev": "post",
    "r": "post",
}
_PRE_ORDER = ("a", "b", "rc")
_LEGACY_SPELLINGS = {
    "pre": "c",
    "preview": "c",
    "-": "final-",
    "rc": "c",
    "dev": "@",
}


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True)
class _Segment:
    """A pre, post or dev segment: a letter and a number, or nothing at all."""

    letter: str = ""
    number: int | None = None


def _parse_segment(letter: str, number: str) -> _Segment:
    if letter:
        # an implicit 0 when no number is given
        letter = letter.lower()
        return _Segment(_LETTER_SPELLINGS.get(letter, letter), int(number or "0"))
    if number:
        # a number without a letter is the implicit post release syntax (1.0-1)
        return _Segment("post", int(number))
    return _Segment()


def _parse_local(local: str) -> tuple[str, ...]:
    return tuple(part.lower() for part in _LOCAL_SEPARATORS.split(local))


def _normalize_legacy_part(part: str) -> str:
    part = _LEGACY_SPELLINGS.get(part, part)
    if "0" <= part[:1] <= "9":
        # pad for numeric comparison
        return part.rjust(8, "0")
    return "*" + part


def _legacy_parts(text: str) -> tuple[str, ...]:
    parts: list[str] = []
    for raw in [*_LEGACY_PARTS.findall(text), "final"]:
        if raw in ("", "."):
            continue
        part = _normalize_legacy_part(raw)
        if part.startswith("*"):
            if part < "*final":
                while parts and parts[-1] == "*final-":
                    parts.pop()
            while parts and parts[-1] == "00000000":
                parts.pop()
        parts.append(part)
    return tuple(parts)


@dataclass(frozen=True)
class PyPIVersion(Version):
    """A PyPI version, ordered by PEP 440; versions PEP 440 cannot read are
    held as legacy parts and sort before all others."""

    epoch: int = -1
    release: tuple[int, ...] = ()
    pre: _Segment = _Segment()
    post: _Segment = _Segment()
    dev: _Segment = _Segment()
    local: tuple[str, ...] = ()
    legacy: tuple[str, ...] = ()

    def _pre_index(self) -> int:
        try:
            return _PRE_ORDER.index(self.pre.letter)
        except ValueError:
            raise ValueError(f"unknown prefix {self.pre.letter}") from None

    def _applies_pre_trick(self) -> bool:
        # puts 1.0.dev0 before 1.0a0
        return self.pre.number is None and self.post.number is None and self.dev.number is not None

    def _compare_legacy(self, other: PyPIVersion) -> int:
        if not self.legacy and not other.legacy:
            return 0
        if not self.legacy:
            return 1
        if not other.legacy:
            return -1
        return _cmp("".join(self.legacy), "".join(other.legacy))

    def _compare_pre(self, other: PyPIVersion) -> int:
        mine, theirs = self._applies_pre_trick(), other._applies_pre_trick()
        if mine and theirs:
            return 0
        if mine:
            return -1
        if theirs:
            return 1
        if self.pre.number is None and other.pre.number is None:
            return 0
        if self.pre.number is None:
            return 1
        if other.pre.number is None:
            return -1
        left, right = self._pre_index(), other._pre_index()
        if left == right:
            return _cmp(self.pre.number, other.pre.number)
        return _cmp(left, right)

    def _compare_post(self, other: PyPIVersion) -> int:
        if self.post.number is None and other.post.number is None:
            return 0
        if self.post.number is None:
            return -1
        if other.post.number is None:
            return 1
        return _cmp(self.post.number, other.post.number)

    def _compare_dev(self, other: PyPIVersion) -> int:
        if self.dev.number is None and other.dev.number is None:
            return 0
        if self.dev.number is None:
            return 1
        if other.dev.number is None:
            return -1
        return _cmp(self.dev.number, other.dev.number)

    def _compare_local(self, other: PyPIVersion) -> int:
        for x, y in zip(self.local, other.local):
            xi, yi = to_int(x), to_int(y)
            if xi is not None and yi is not None:
                result = _cmp(xi, yi)
            elif xi is None and yi is None:
                result = _cmp(x, y)
            elif xi is not None:
                # numeric segments compare greater than lexical ones
                result = 1
            else:
                result = -1
            if result:
                return result
        return _cmp(len(self.local), len(other.local))

    def compare(self, other: PyPIVersion) -> int:
        return (
            self._compare_legacy(other)
            or _cmp(self.epoch, other.epoch)
            or compare_components(self.release, other.release)
            or self._compare_pre(other)
            or self._compare_post(other)
            or self._compare_dev(other)
            or self._compare_local(other)
        )

    def compare_str(self, text: str) -> int:
        return self.compare(parse_pypi_version(text))


def parse_pypi_version(text: str) -> PyPIVersion:
    """Parse ``text`` as a PyPI version, falling back to legacy parsing."""
    text = text.lower()
    match = _PEP440.fullmatch(text)
    if match is None:
        return PyPIVersion(epoch=-1, legacy=_legacy_parts(text))

    def group(name: str) -> str:
        return match.group(name) or ""

    return PyPIVersion(
        epoch=int(group("epoch") or "0"),
        release=tuple(int(part) for part in group("release").split(".")),
        pre=_parse_segment(group("pre_l"), group("pre_n")),
        post=_parse_segment(group("post_l"), group("post_n1") or group("post_n2")),
        dev=_parse_segment(group("dev_l"), group("dev_n")),
        local=_parse_local(group("local")),
    )