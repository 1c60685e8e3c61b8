"""GitHub URL and Markdown link builders.

Contains:
- get_repo_url, get_commit_url, get_pr_url: URL composition
- get_short_sha: Abbreviated commit hash for display
- get_suffix: Trailing link annotation for a changelog line
"""

from typing import Optional

from changelog_github_local.config import GITHUB_BASE_URL, SHORT_SHA_LENGTH
from changelog_github_local.options import RepoOptions


def get_repo_url(options: RepoOptions) -> str:
    """Build the repository URL.

    Example:
        >>> get_repo_url(RepoOptions(repo="owner/repo"))
        'https://github.com/owner/repo'
    """
    return f"{GITHUB_BASE_URL}/{options.repo}"


def get_commit_url(options: RepoOptions, commit_hash: str) -> str:
    """Build the URL of a commit, using the full hash."""
    return f"{get_repo_url(options)}/commit/{commit_hash}"


def get_pr_url(options: RepoOptions, pr_number: int) -> str:
    """Build the URL of a pull request."""
    return f"{get_repo_url(options)}/pull/{pr_number}"


def get_short_sha(commit_hash: str) -> str:
    """Return the first seven characters of a commit hash.

    Shorter hashes are returned unchanged.
    """
    return commit_hash[:SHORT_SHA_LENGTH]


def get_commit_link(options: RepoOptions, commit_hash: str) -> str:
    """Render a Markdown link to a commit, labelled with its short hash."""
    return f"[`{get_short_sha(commit_hash)}`]({get_commit_url(options, commit_hash)})"


def get_pr_link(options: RepoOptions, pr_number: int) -> str:
    """Render a Markdown link to a pull request, labelled #N."""
    return f"[#{pr_number}]({get_pr_url(options, pr_number)})"


def get_suffix(pr: Optional[int], commit_sha: Optional[str], options: RepoOptions) -> str:
    """Get the suffix for the first line of a changelog entry.

    A pull request link wins over a commit link. With neither available
    the suffix is empty.

    Args:
        pr: Pull request number, if one was found.
        commit_sha: Full commit hash, if known.
        options: Validated options.

    Returns:
        `` ([#N](...))``, `` ([`abc1234`](...))`` or an empty string.
    """
    if pr:
        return f" ({get_pr_link(options, pr)})"
    if commit_sha:
        return f" ({get_commit_link(options, commit_sha)})"
    return ""
