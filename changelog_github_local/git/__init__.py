"""Local git repository access for changelog-github-local.

This package provides:
- exceptions: GitError, RepositoryDiscoveryError, CommitLookupError
- runner: _run_git_command
- repository: Repository, CommitResolver, GitCommitResolver
"""

# Exceptions
from changelog_github_local.git.exceptions import (
    CommitLookupError,
    GitError,
    RepositoryDiscoveryError,
)

# Runner utilities
from changelog_github_local.git.runner import _run_git_command

# Repository access
from changelog_github_local.git.repository import (
    SHALLOW_CLONE_CI_WARNING,
    SHALLOW_CLONE_WARNING,
    CommitResolver,
    GitCommitResolver,
    Repository,
)


__all__ = [
    # Exceptions
    "GitError",
    "RepositoryDiscoveryError",
    "CommitLookupError",
    # Runner
    "_run_git_command",
    # Repository
    "Repository",
    "CommitResolver",
    "GitCommitResolver",
    "SHALLOW_CLONE_WARNING",
    "SHALLOW_CLONE_CI_WARNING",
]
