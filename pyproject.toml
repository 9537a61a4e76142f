[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osvscanner"
version = "1.5.0"
description = "Ecosystem version comparison, lockfile extraction, advisory alias grouping and ignore configuration for dependency scanning"
requires-python = ">=3.11"
dependencies = []
keywords = [
    "security",
    "vulnerability",
    "osv",
    "lockfile",
    "dependencies",
    "version-comparison",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["osvscanner"]

[tool.hatch.build.targets.sdist]
include = ["osvscanner", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
