# osvscanner

Building blocks for checking a project's dependencies against
vulnerability advisories:

- **Version comparison** by the rules of the CRAN, Debian, Maven and
  PyPI ecosystems.
- **Lockfile extraction** for `Cargo.lock` and `composer.lock`, and for
  Alpine's `apk` installed database and Debian's `dpkg` status file.
- **Alias grouping** of advisories that describe the same issue.
- **Ignore configuration** read from an `osv-scanner.toml` next to the
  scanned files.
- **govulncheck output reading**: the findings in its JSON stream as
  Python objects.
- Small helpers for file URLs and for printing packages.

The package needs nothing outside the standard library and runs on
Python 3.11 or later.

## Comparing versions

Each ecosystem has a parse function in `osvscanner.semantic` and a
version class with `compare` (against another parsed version) and
`compare_str` (against a string). Both return `-1`, `0` or `1`:

```python
from osvscanner.semantic.cran import parse_cran_version
from osvscanner.semantic.debian import parse_debian_version
from osvscanner.semantic.maven import parse_maven_version
from osvscanner.semantic.pypi import parse_pypi_version

parse_debian_version("1:2.0-1").compare_str("3.0-1")     # 1: the epoch wins
parse_pypi_version("1.0.dev0").compare_str("1.0a0")      # -1
parse_maven_version("1.0-SNAPSHOT").compare_str("1.0")   # -1
parse_cran_version("1.0-1").compare_str("1.0")           # 1: more parts is greater
```

- `parse_pypi_version` follows PEP 440. Strings that PEP 440 cannot
  read are kept as legacy parts and sort before every PEP 440 version.
- `parse_debian_version` raises `ValueError` when the epoch is not a
  number. `compare_debian_versions` compares two upstream or revision
  strings directly.
- `parse_maven_version` treats qualifiers case-insensitively. It reads
  `cr` as `rc`, and `ga`, `final` and `release` as an empty qualifier.
- A CRAN part that is not a number cannot be compared. Reaching one
  raises `ValueError`.

`osvscanner.semantic.components` holds the shared pieces: the `Version`
base class, `compare_components`, `fetch_component` and `to_int`.

## Reading lockfiles

`extract_deps` picks an extractor from the file name, or uses the one you
name. It returns a `Lockfile` whose packages are sorted by name and then
by version:

```python
from osvscanner.lockfile.extract import extract_deps, list_extractors
from osvscanner.lockfile.extractor import open_local_dep_file

print(list_extractors())   # ['Cargo.lock', 'composer.lock']

with open_local_dep_file("path/to/Cargo.lock") as dep_file:
    lockfile = extract_deps(dep_file, "")

for package in lockfile.packages:
    print(package.name, package.version)
```

If no extractor fits, `ExtractorNotFoundError` is raised. `find_extractor`
returns the extractor and its name without running it. A file that
cannot be parsed raises `ValueError` with a message that starts with
`could not extract from`.

Each format also has its own function:

- `osvscanner.lockfile.cargo.parse_cargo_lock`
- `osvscanner.lockfile.composer.parse_composer_lock`. Packages from
  `packages-dev` carry the dependency group `dev`.
- `osvscanner.lockfile.apk.parse_apk_installed` and `from_apk_installed`.
- `osvscanner.lockfile.dpkg.parse_dpkg_status` and `from_dpkg_status`.
  Packages that are not installed, or that have only configuration
  files left, are skipped. The name and version come from the `Source`
  field when it is present.

The `parse_*` functions return packages in file order. The `from_*`
functions return a sorted `Lockfile`. The apk and dpkg extractors accept
only their system paths (`/lib/apk/db/installed`,
`/var/lib/dpkg/status`), and `extract_deps` does not choose them.

To add a format, subclass `Extractor` and implement `should_extract` and
`extract`. `extract` receives a `DepFile`, which can `read` itself and
`open` other files relative to itself.

## Grouping aliases

```python
from osvscanner.grouper import IDAliases, group

groups = group([
    IDAliases("CVE-1", ["FOO-1"]),
    IDAliases("FOO-1", []),
    IDAliases("BAR-1", ["CVE-2"]),
])
```

Advisories that share an alias, or that list each other's IDs, end up in
the same `GroupInfo`. Groups keep the order in which their first advisory
appeared. IDs and aliases inside a group are sorted, and the aliases
include the IDs. `convert_vulnerabilities_to_id_aliases` builds
`IDAliases` from any objects that have `id` and `aliases`.

## Ignoring advisories

An `osv-scanner.toml` placed beside the scanned file, or in the scanned
directory, can list advisories to ignore, optionally until a given date:

```toml
[[IgnoredVulns]]
id = "GO-2022-0968"
ignoreUntil = 2030-01-01
reason = "No fix available yet"
```

- `ConfigManager.get(target_path)` finds and caches the configuration
  for a path. It falls back to `default_config` when no file is found.
- `ConfigManager.use_override(path)` loads one file that then applies
  everywhere.
- `Config.should_ignore(vuln_id)` returns whether the advisory is
  ignored now, together with its `IgnoreEntry` (or `None`).
- `try_load_config` raises `ConfigLoadError` when the file is missing or
  malformed.

## govulncheck output

`osvscanner.sourceanalysis.govulncheck.iter_messages(text)` reads a
stream of concatenated JSON objects as written by `govulncheck -json`. It
yields a `Message` for each object. Each `Message` holds a `Finding`,
with its trace of `Frame`s and their `Position`s, or `None` for other
kinds of message. Malformed JSON raises `ValueError`.

## Smaller helpers

- `osvscanner.fileurl.from_file_path` turns an absolute path into a
  `file://` URL string. It raises `ValueError` for relative paths.
- `osvscanner.results.pkg_to_string` formats a `PackageInfo` as
  `name@version`. When the package has a commit, it formats it as
  `name@` followed by the first eight characters of the commit.

## What this package does not do

- It has no single entry point that picks a comparison by ecosystem
  name.
- It does not compare versions for semver-style ecosystems (npm,
  crates.io, Go, Hex, Pub, ConanCenter), NuGet, RubyGems or Packagist.
- It does not read CSV package lists.
- It has no advisory model, and it does not decide whether a package
  version falls within an advisory's affected ranges.
- It does not run govulncheck or merge its findings into scan results.
  It only reads govulncheck's output.
- It has no command-line program.