"""Validation of the generator options supplied by the host.

The host passes an untyped options value on every call. parse_options()
turns it into either a ValidOptions (holding a RepoOptions) or an
InvalidOptions (holding the error), and validate() raises on the latter.
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict

from changelog_github_local.config import PACKAGE_NAME
from changelog_github_local.exceptions import (
    InvalidRepoFormatError,
    MissingRepoError,
    OptionsError,
)


# Exactly one slash separating two non-empty, whitespace-free segments
ORG_REPO_REGEX = re.compile(r"[^/\s]+/[^/\s]+")

MISSING_REPO_MESSAGE = (
    "Please provide a repo for this changelog generator.\n"
    f'"example": ["{PACKAGE_NAME}", {{ "repo": "org/repo" }}]'
)

INVALID_REPO_MESSAGE = 'Invalid repo format. Please use the format "org/repo"'


class RepoOptions(BaseModel):
    """Validated generator options.

    Attributes:
        repo: GitHub repository identifier in "org/repo" form.
    """

    model_config = ConfigDict(frozen=True)

    repo: str


@dataclass(frozen=True)
class ValidOptions:
    """Successful parse result."""

    options: RepoOptions


@dataclass(frozen=True)
class InvalidOptions:
    """Failed parse result."""

    error: OptionsError


OptionsResult = Union[ValidOptions, InvalidOptions]


def _get_repo(raw: Any) -> Any:
    if isinstance(raw, Mapping):
        return raw.get("repo")
    return getattr(raw, "repo", None)


def _is_unset(repo: Any) -> bool:
    """Check for the scalar "no value" cases: None, empty string, False, zero.

    Empty containers are values, and fail the format check instead.
    """
    if repo is None or isinstance(repo, (str, bool)):
        return not repo
    if isinstance(repo, (int, float)):
        return repo == 0 or repo != repo  # NaN
    return False


def parse_options(raw: Any) -> OptionsResult:
    """Parse untyped host options.

    Args:
        raw: None, a mapping, or any object with a ``repo`` attribute.

    Returns:
        ValidOptions when ``repo`` is an "org/repo" string, otherwise
        InvalidOptions carrying a MissingRepoError or InvalidRepoFormatError.
    """
    if not raw:
        return InvalidOptions(MissingRepoError(MISSING_REPO_MESSAGE))

    repo = _get_repo(raw)
    if _is_unset(repo):
        return InvalidOptions(MissingRepoError(MISSING_REPO_MESSAGE))

    if not isinstance(repo, str) or not ORG_REPO_REGEX.fullmatch(repo):
        return InvalidOptions(InvalidRepoFormatError(INVALID_REPO_MESSAGE))

    return ValidOptions(RepoOptions(repo=repo))


def validate(raw: Any) -> RepoOptions:
    """Validate untyped host options.

    Args:
        raw: The options value supplied by the host.

    Returns:
        The validated RepoOptions.

    Raises:
        MissingRepoError: If the options are absent or have no repo.
        InvalidRepoFormatError: If repo is not an "org/repo" string.
    """
    result = parse_options(raw)
    if isinstance(result, InvalidOptions):
        raise result.error
    return result.options
