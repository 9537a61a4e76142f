"""The messages that govulncheck writes in its JSON output."""

from __future__ import annotations

import json
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

_WHITESPACE = re.compile(r"\s*")


@dataclass(frozen=True)
class Position:
    """A position in a source file; valid when the line is above zero."""

    filename: str = ""
    offset: int = 0
    line: int = 0
    column: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Position:
        """Build a position from its decoded JSON form."""
        return cls(
            filename=data.get("filename", ""),
            offset=int(data.get("offset", 0)),
            line=int(data.get("line", 0)),
            column=int(data.get("column", 0)),
        )


@dataclass(frozen=True)
class Frame:
    """One entry in the trace of a finding."""

    module: str = ""
    version: str = ""
    package: str = ""
    function: str = ""
    receiver: str = ""
    position: Position | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Frame:
        """Build a frame from its decoded JSON form."""
        position = data.get("position")
        return cls(
            module=data.get("module", ""),
            version=data.get("version", ""),
            package=data.get("package", ""),
            function=data.get("function", ""),
            receiver=data.get("receiver", ""),
            position=Position.from_dict(position) if position else None,
        )


@dataclass(frozen=True)
class Finding:
    """A vulnerability found, with the trace from the vulnerable symbol outwards."""

    osv: str = ""
    fixed_version: str = ""
    trace: tuple[Frame, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Finding:
        """Build a finding from its decoded JSON form."""
        return cls(
            osv=data.get("osv", ""),
            fixed_version=data.get("fixed_version", ""),
            trace=tuple(Frame.from_dict(f) for f in data.get("trace") or []),
        )


@dataclass(frozen=True)
class Message:
    """An entry in the output stream; only findings are kept."""

    finding: Finding | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Message:
        """Build a message from its decoded JSON form; raises ValueError if it is not an object."""
        if not isinstance(data, Mapping):
            raise ValueError("message is not a JSON object")
        finding = data.get("finding")
        return cls(finding=Finding.from_dict(finding) if isinstance(finding, Mapping) else None)


def iter_messages(text: str) -> Iterator[Message]:
    """Yield the messages in a stream of concatenated JSON objects.

    Raises ValueError on malformed JSON.
    """
    decoder = json.JSONDecoder()
    index = _WHITESPACE.match(text, 0).end()
    while index < len(text):
        value, index = decoder.raw_decode(text, index)
        yield Message.from_dict(value)
        index = _WHITESPACE.match(text, index).end()