"""Git-related exception classes.

Contains all exception classes for repository access:
- GitError: Base exception for git-related errors
- RepositoryDiscoveryError: Raised when no repository can be opened
- CommitLookupError: Raised when a commit hash cannot be resolved
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class RepositoryDiscoveryError(GitError):
    """Raised when the local repository cannot be located or opened."""

    pass


class CommitLookupError(GitError):
    """Raised when a commit cannot be found in the local repository."""

    def __init__(self, commit_hash: str, cause: str):
        super().__init__(f"Failed to get commit message for {commit_hash}: {cause}")
        self.commit_hash = commit_hash
        self.cause = cause
