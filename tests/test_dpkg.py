import pytest

from osvscanner.lockfile.dpkg import (
    DEBIAN_ECOSYSTEM,
    DpkgStatusExtractor,
    from_dpkg_status,
    parse_dpkg_status,
)
from osvscanner.lockfile.extractor import PackageDetails

SINGLE = """Package: sudo
Status: install ok installed
Priority: optional
Section: admin
Maintainer: Example Maintainer <maintainer@example.com>
Architecture: amd64
Version: 1.8.27-1+deb10u1
Description: Provide limited super user privileges to specific users
"""

SHUFFLED = """Version: 2.31-13+deb11u5
Source: glibc
Architecture: amd64
Status: install ok installed
Package: libc6
"""

MALFORMED = """Package: bash
Status: install ok installed
Architecture: amd64

Package: sudo
Status: install ok
Version: 1.8.27-1+deb10u1

Package: util-linux
Status: install ok installed
Version: 2.36.1-8+deb11u1
"""

MULTIPLE = """Package: bash
Status: install ok installed
Version: 5.1-2+deb11u1

Package: removed-thing
Status: deinstall ok not-installed
Version: 1.0

Package: util-linux
Status: install ok installed
Version: 2.36.1-8+deb11u1

Package: leftover-config
Status: deinstall ok config-files
Version: 2.0


Package: libc6
Status: install ok installed
Source: glibc
Version: 2.31-13+deb11u5
"""

SOURCE_VER_OVERRIDE = """Package: dmsetup
Status: install ok installed
Source: lvm2 (2.02.176-4.1ubuntu3)
Version: 2:1.02.145-4.1ubuntu3
"""


def _write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def _deb(name, version):
    return PackageDetails(
        name=name,
        version=version,
        ecosystem=DEBIAN_ECOSYSTEM,
        compare_as=DEBIAN_ECOSYSTEM,
    )


def test_file_does_not_exist(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_dpkg_status(str(tmp_path / "does-not-exist"))


def test_empty(tmp_path):
    assert parse_dpkg_status(_write(tmp_path, "empty_status", "")) == []


def test_not_a_status(tmp_path):
    path = _write(tmp_path, "not_status", "just some text\nthat is not a status file\n")
    assert parse_dpkg_status(path) == []


def test_malformed(tmp_path):
    path = _write(tmp_path, "malformed_status", MALFORMED)
    assert parse_dpkg_status(path) == [
        _deb("bash", ""),
        _deb("util-linux", "2.36.1-8+deb11u1"),
    ]


def test_single(tmp_path):
    path = _write(tmp_path, "single_status", SINGLE)
    assert parse_dpkg_status(path) == [_deb("sudo", "1.8.27-1+deb10u1")]


def test_shuffled(tmp_path):
    path = _write(tmp_path, "shuffled_status", SHUFFLED)
    assert parse_dpkg_status(path) == [_deb("glibc", "2.31-13+deb11u5")]


def test_multiple(tmp_path):
    path = _write(tmp_path, "multiple_status", MULTIPLE)
    assert parse_dpkg_status(path) == [
        _deb("bash", "5.1-2+deb11u1"),
        _deb("util-linux", "2.36.1-8+deb11u1"),
        _deb("glibc", "2.31-13+deb11u5"),
    ]


def test_source_version_overrides_version(tmp_path):
    path = _write(tmp_path, "source_ver_override_status", SOURCE_VER_OVERRIDE)
    assert parse_dpkg_status(path) == [_deb("lvm2", "2.02.176-4.1ubuntu3")]


def test_from_dpkg_status_sorts_packages(tmp_path):
    path = _write(tmp_path, "multiple_status", MULTIPLE)
    lockfile = from_dpkg_status(path)
    assert lockfile.parsed_as == "dpkg-status"
    assert lockfile.file_path == path
    assert [pkg.name for pkg in lockfile.packages] == ["bash", "glibc", "util-linux"]


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/var/lib/dpkg/status", True),
        ("var/lib/dpkg/status", False),
        ("/var/lib/dpkg/status.old", False),
        ("", False),
    ],
)
def test_should_extract(path, expected):
    assert DpkgStatusExtractor().should_extract(path) is expected