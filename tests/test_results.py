from osvscanner.results import SHORT_COMMIT_LEN, PackageInfo, pkg_to_string

COMMIT = "1234567890abcdefghij1234567890abcdefghij"


def test_named_commit_is_shortened():
    info = PackageInfo(name="github.com/google/osv-scanner", commit=COMMIT)
    assert pkg_to_string(info) == "github.com/google/osv-scanner@12345678"


def test_named_commit_uses_commit_prefix():
    info = PackageInfo(name="pkg", version="ignored", commit=COMMIT)
    name, _, short = pkg_to_string(info).partition("@")
    assert name == "pkg"
    assert short == COMMIT[:SHORT_COMMIT_LEN]
    assert len(short) == SHORT_COMMIT_LEN


def test_unnamed_commit_is_given_whole():
    assert pkg_to_string(PackageInfo(commit=COMMIT)) == COMMIT


def test_name_and_version():
    assert pkg_to_string(PackageInfo(name="abc", version="v1.2.3")) == "abc@v1.2.3"


def test_version_kept_verbatim():
    info = PackageInfo(name="left-pad", version="1.3.0", ecosystem="npm")
    assert pkg_to_string(info).split("@") == [info.name, info.version]