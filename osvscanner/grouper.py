"""Grouping of vulnerabilities that are aliases of one another."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any


@dataclass
class IDAliases:
    """The identifier of a vulnerability and its aliases."""

    id: str
    aliases: Sequence[str] = ()


@dataclass
class GroupInfo:
    """The identifiers of a group of related vulnerabilities and all their aliases."""

    ids: list[str] = field(default_factory=list)
    aliases: list[str] = field(default_factory=list)


def _intersects(a: IDAliases, b: IDAliases) -> bool:
    if set(a.aliases) & set(b.aliases):
        return True
    return b.id in a.aliases or a.id in b.aliases


def group(vulns: Iterable[IDAliases]) -> list[GroupInfo]:
    """Group ``vulns`` whose identifiers or aliases overlap.

    Groups come in the order of their first member; identifiers and aliases
    within a group are sorted, and the aliases include the identifiers.
    """
    vulns = list(vulns)
    groups = list(range(len(vulns)))

    for i, j in combinations(range(len(vulns)), 2):
        if _intersects(vulns[i], vulns[j]):
            # the smaller index represents the merged group
            groups[i] = min(groups[i], groups[j])
            groups[j] = groups[i]

    ids: defaultdict[int, list[str]] = defaultdict(list)
    aliases: defaultdict[int, list[str]] = defaultdict(list)
    for vuln, gid in zip(vulns, groups):
        ids[gid].append(vuln.id)
        aliases[gid].extend(vuln.aliases)

    return [
        GroupInfo(ids=sorted(ids[gid]), aliases=sorted(set(aliases[gid]) | set(ids[gid])))
        for gid in sorted(ids)
    ]


def convert_vulnerabilities_to_id_aliases(vulns: Iterable[Any]) -> list[IDAliases]:
    """Take the ``id`` and ``aliases`` of each vulnerability in ``vulns``."""
    return [IDAliases(id=vuln.id, aliases=list(vuln.aliases or ())) for vuln in vulns]