import os

import pytest

from osvscanner.lockfile.extractor import (
    DepFile,
    Extractor,
    LocalFile,
    Lockfile,
    PackageDetails,
    extract_from_file,
    known_ecosystems,
    open_local_dep_file,
    sort_packages,
)


class _LinesExtractor(Extractor):
    def should_extract(self, path):
        return path.endswith(".lines")

    def extract(self, dep_file):
        return [PackageDetails(name=line) for line in dep_file.read().splitlines() if line]


def test_open_local_dep_file_reads_content_and_absolute_path(tmp_path):
    target = tmp_path / "deps.txt"
    target.write_text("hello", encoding="utf-8")
    with open_local_dep_file(str(target)) as dep_file:
        assert dep_file.read() == "hello"
        assert os.path.isabs(dep_file.path)
        assert dep_file.path == str(target.resolve())


def test_open_local_dep_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_local_dep_file(str(tmp_path / "does-not-exist"))


def test_local_file_open_relative_path(tmp_path):
    (tmp_path / "a.txt").write_text("first", encoding="utf-8")
    (tmp_path / "b.txt").write_text("second", encoding="utf-8")
    with open_local_dep_file(str(tmp_path / "a.txt")) as first:
        with first.open("b.txt") as second:
            assert isinstance(second, LocalFile)
            assert second.read() == "second"


def test_local_file_open_absolute_path(tmp_path):
    (tmp_path / "a.txt").write_text("first", encoding="utf-8")
    other_dir = tmp_path / "other"
    other_dir.mkdir()
    (other_dir / "c.txt").write_text("third", encoding="utf-8")
    with open_local_dep_file(str(tmp_path / "a.txt")) as first:
        with first.open(str(other_dir / "c.txt")) as nested:
            assert nested.read() == "third"


def test_extract_from_file_runs_extractor(tmp_path):
    target = tmp_path / "deps.lines"
    target.write_text("alpha\nbeta\n", encoding="utf-8")
    packages = extract_from_file(str(target), _LinesExtractor())
    assert packages == [PackageDetails(name="alpha"), PackageDetails(name="beta")]


def test_extract_from_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        extract_from_file(str(tmp_path / "missing.lines"), _LinesExtractor())


def test_sort_packages_by_name_then_version():
    packages = [
        PackageDetails(name="b", version="1"),
        PackageDetails(name="a", version="2"),
        PackageDetails(name="a", version="1"),
    ]
    assert sort_packages(packages) == [
        PackageDetails(name="a", version="1"),
        PackageDetails(name="a", version="2"),
        PackageDetails(name="b", version="1"),
    ]


def test_sort_packages_is_a_new_list():
    packages = [PackageDetails(name="z"), PackageDetails(name="y")]
    result = sort_packages(packages)
    assert [p.name for p in packages] == ["z", "y"]
    assert [p.name for p in result] == ["y", "z"]


def test_lockfile_defaults_to_no_packages():
    assert Lockfile(file_path="-", parsed_as="-").packages == []


def test_dep_file_is_abstract():
    with pytest.raises(TypeError):
        DepFile()


def test_known_ecosystems_are_unique():
    ecosystems = known_ecosystems()
    assert len(ecosystems) == len(set(ecosystems))


def test_known_ecosystems_contents():
    ecosystems = known_ecosystems()
    assert "crates.io" in ecosystems
    assert "Packagist" in ecosystems
    assert "CRAN" in ecosystems
    assert "Alpine" not in ecosystems
    assert len(ecosystems) == 12