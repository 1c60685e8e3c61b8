"""GitHub-linked changelog lines for changesets, resolved from the local git repository."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("changelog-github-local")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"

from changelog_github_local.formatter import (
    ChangelogFunctions,
    GitHubChangelog,
    changelog_functions,
    get_dependency_release_line,
    get_release_line,
)

__all__ = [
    "__version__",
    "ChangelogFunctions",
    "GitHubChangelog",
    "changelog_functions",
    "get_dependency_release_line",
    "get_release_line",
]
