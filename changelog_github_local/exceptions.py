"""Changelog-related exception classes.

Contains all exception classes raised by the formatter:
- ChangelogError: Base exception for changelog errors
- OptionsError: Base for rejected generator options
- MissingRepoError: Raised when the repo option is absent
- InvalidRepoFormatError: Raised when the repo option is malformed
- ConfigError: Raised when the changesets config cannot be read
"""


class ChangelogError(Exception):
    """Base exception for changelog-related errors."""

    pass


class OptionsError(ChangelogError):
    """Raised when the generator options are rejected."""

    pass


class MissingRepoError(OptionsError):
    """Raised when the options are absent or carry no repo."""

    pass


class InvalidRepoFormatError(OptionsError):
    """Raised when the repo option is not an "org/repo" string."""

    pass


class ConfigError(ChangelogError):
    """Raised when the changesets configuration cannot be read."""

    pass
