"""Read-only access to the local git repository.

Contains:
- Repository: A discovered repository that can read commit messages
- CommitResolver: Protocol for anything that resolves a commit's title
- GitCommitResolver: CommitResolver backed by a Repository
"""

import logging
from pathlib import Path
from typing import Optional, Protocol, Union

from changelog_github_local.config import CHECKOUT_HISTORY_URL, is_github_action
from changelog_github_local.git.exceptions import (
    CommitLookupError,
    GitError,
    RepositoryDiscoveryError,
)
from changelog_github_local.git.runner import _run_git_command
from changelog_github_local.summary import get_first_line

logger = logging.getLogger(__name__)

SHALLOW_CLONE_WARNING = "The repository is shallow cloned, so PR links may not work."
SHALLOW_CLONE_CI_WARNING = f"{SHALLOW_CLONE_WARNING} See {CHECKOUT_HISTORY_URL} to fetch all the history."


class Repository:
    """A local git repository, located from a working directory."""

    def __init__(self, root: Path):
        self.root = root

    @classmethod
    def discover(
        cls,
        cwd: Optional[Union[str, Path]] = None,
        log: Optional[logging.Logger] = None,
    ) -> "Repository":
        """Locate the repository containing ``cwd``.

        Warns (without failing) when the checkout is shallow, since older
        commits and therefore their PR numbers may be missing.

        Args:
            cwd: Directory to start from. Defaults to the current directory.
            log: Logger for the shallow clone warning.

        Returns:
            The discovered Repository.

        Raises:
            RepositoryDiscoveryError: If no repository contains ``cwd``.
        """
        log = log or logger
        cwd = Path(cwd) if cwd is not None else Path.cwd()

        try:
            root = Path(_run_git_command(["rev-parse", "--show-toplevel"], cwd=cwd))
        except GitError as e:
            raise RepositoryDiscoveryError(f"Repository discovery failed: {e}") from e

        repository = cls(root)
        if repository.is_shallow():
            if is_github_action():
                log.warning(SHALLOW_CLONE_CI_WARNING)
            else:
                log.warning(SHALLOW_CLONE_WARNING)

        return repository

    def is_shallow(self) -> bool:
        """Check whether the repository is a shallow clone.

        Git keeps the shallow boundary in a "shallow" file inside the git
        directory, which need not be <root>/.git (linked worktrees).
        """
        try:
            shallow_file = _run_git_command(["rev-parse", "--git-path", "shallow"], cwd=self.root)
        except GitError:
            return False
        return (self.root / shallow_file).exists()

    def commit_message(self, commit_hash: str) -> str:
        """Read the full message of a commit.

        Raises:
            CommitLookupError: If the hash does not name a commit here.
        """
        try:
            return _run_git_command(
                ["show", "-s", "--format=%B", "--end-of-options", f"{commit_hash}^{{commit}}", "--"],
                cwd=self.root,
            )
        except GitError as e:
            raise CommitLookupError(commit_hash, str(e)) from e


class CommitResolver(Protocol):
    """Resolves a commit hash to the first line of its message."""

    def resolve_commit_message(self, commit_hash: str) -> Optional[str]:
        """Return the commit title, or None if the message is empty.

        Raises:
            GitError: If the commit cannot be resolved.
        """
        ...


class GitCommitResolver:
    """CommitResolver reading commits through the git CLI."""

    def __init__(self, repository: Repository):
        self.repository = repository

    @classmethod
    def discover(
        cls,
        cwd: Optional[Union[str, Path]] = None,
        log: Optional[logging.Logger] = None,
    ) -> "GitCommitResolver":
        """Create a resolver for the repository containing ``cwd``."""
        return cls(Repository.discover(cwd, log=log))

    def resolve_commit_message(self, commit_hash: str) -> Optional[str]:
        return get_first_line(self.repository.commit_message(commit_hash))
