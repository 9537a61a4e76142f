"""Version comparison, lockfile extraction, alias grouping and ignore configuration for dependency scanning."""

__version__ = "1.5.0"