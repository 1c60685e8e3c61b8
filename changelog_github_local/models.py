"""Data models for changelog-github-local.

These Pydantic models mirror the records the changesets host passes to a
changelog generator. They accept the host's camelCase keys as well as the
snake_case field names.

Contains:
- BumpType: Semver bump kinds
- Release: A (package, bump type) pair affected by a changeset
- Changeset: A pending change with its summary and optional commit
- DependencyUpdate: A package bumped because one of its dependencies changed
"""

from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class BumpType(str, Enum):
    """Semver bump kinds a changeset can request.

    NONE is what the host records for packages listed in a changeset but
    not released.
    """

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    NONE = "none"


class _HostRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Release(_HostRecord):
    """A package affected by a changeset.

    Attributes:
        name: Package name.
        type: Bump requested for the package.
    """

    name: str
    type: BumpType


class Changeset(_HostRecord):
    """A pending change record.

    Attributes:
        id: Unique changeset identifier (usually the file slug).
        summary: Free-text, possibly multi-line summary.
        releases: Packages affected and their bump types, in order.
        commit: Full hash of the commit that added the changeset, if known.
    """

    id: str
    summary: str
    releases: list[Release] = Field(default_factory=list)
    commit: Optional[str] = None


class DependencyUpdate(_HostRecord):
    """A package whose version moved because a dependency was released.

    Attributes:
        name: Package name.
        type: Bump applied to the package.
        old_version: Version before the release.
        new_version: Version after the release.
        changesets: Identifiers of the changesets that caused the bump.
        package_json: The package manifest, passed through untouched.
        dir: Package source directory.
    """

    name: str
    type: BumpType
    old_version: str = Field(alias="oldVersion")
    new_version: str = Field(alias="newVersion")
    changesets: list[str] = Field(default_factory=list)
    package_json: dict[str, Any] = Field(default_factory=dict, alias="packageJson")
    dir: str = ""


def as_changeset(value: Union[Changeset, Mapping[str, Any]]) -> Changeset:
    """Coerce a host-supplied record into a Changeset."""
    if isinstance(value, Changeset):
        return value
    return Changeset.model_validate(value)


def as_dependency_update(value: Union[DependencyUpdate, Mapping[str, Any]]) -> DependencyUpdate:
    """Coerce a host-supplied record into a DependencyUpdate."""
    if isinstance(value, DependencyUpdate):
        return value
    return DependencyUpdate.model_validate(value)
