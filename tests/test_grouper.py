from types import SimpleNamespace

import pytest

from osvscanner.grouper import GroupInfo, IDAliases, convert_vulnerabilities_to_id_aliases, group

V1 = IDAliases(id="CVE-1", aliases=["FOO-1"])
V2 = IDAliases(id="FOO-1", aliases=[])
V3 = IDAliases(id="FOO-2", aliases=["FOO-1"])
V4 = IDAliases(id="BAR-1", aliases=["CVE-2", "CVE-3"])
V5 = IDAliases(id="BAR-2", aliases=["CVE-3", "CVE-4"])
V6 = IDAliases(id="BAR-3", aliases=["CVE-4"])
V7 = IDAliases(id="UNRELATED-1", aliases=["BAR-1337"])
V8 = IDAliases(id="UNRELATED-2", aliases=["BAR-1338"])
V9 = IDAliases(id="UNRELATED-3")
V10 = IDAliases(id="UNRELATED-4")

FOO_GROUP = GroupInfo(ids=[V1.id, V2.id, V3.id], aliases=[V1.id, V2.id, V3.id])
BAR_GROUP = GroupInfo(
    ids=[V4.id, V5.id, V6.id],
    aliases=[V4.id, V5.id, V6.id, V4.aliases[0], V4.aliases[1], V5.aliases[1]],
)
V7_GROUP = GroupInfo(ids=[V7.id], aliases=[V7.aliases[0], V7.id])
V8_GROUP = GroupInfo(ids=[V8.id], aliases=[V8.aliases[0], V8.id])
V9_GROUP = GroupInfo(ids=[V9.id], aliases=[V9.id])
V10_GROUP = GroupInfo(ids=[V10.id], aliases=[V10.id])


@pytest.mark.parametrize(
    ("vulns", "expected"),
    [
        (
            [V1, V2, V3, V4, V5, V6, V7, V8],
            [FOO_GROUP, BAR_GROUP, V7_GROUP, V8_GROUP],
        ),
        (
            [V8, V2, V1, V5, V7, V4, V6, V3, V9, V10],
            [V8_GROUP, FOO_GROUP, BAR_GROUP, V7_GROUP, V9_GROUP, V10_GROUP],
        ),
        (
            [V9, V10],
            [V9_GROUP, V10_GROUP],
        ),
    ],
)
def test_group(vulns, expected):
    assert group(vulns) == expected


def test_group_of_nothing():
    assert group([]) == []


def test_group_keeps_duplicate_ids_but_dedups_aliases():
    result = group([IDAliases("A", ["X"]), IDAliases("A", ["X"])])
    assert result == [GroupInfo(ids=["A", "A"], aliases=["A", "X"])]


def test_convert_vulnerabilities_to_id_aliases():
    vulns = [
        SimpleNamespace(id="GHSA-1", aliases=["CVE-1"]),
        SimpleNamespace(id="GHSA-2", aliases=None),
    ]
    assert convert_vulnerabilities_to_id_aliases(vulns) == [
        IDAliases(id="GHSA-1", aliases=["CVE-1"]),
        IDAliases(id="GHSA-2", aliases=[]),
    ]