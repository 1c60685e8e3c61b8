"""Summary cleanup and pull request number extraction.

Contains:
- clean_summary: Strip generator-added metadata lines from a summary
- get_first_line: First line of a commit message, trimmed
- get_pr_number: Pull request number from a squash-merge commit title
"""

import re
from typing import Optional


# Only the first pr/pull/pull request line and the first commit line are
# removed; every author/user line is removed.
PR_LINE_REGEX = re.compile(r"^\s*(?:pr|pull|pull\s+request):\s*#?([0-9]+)", re.IGNORECASE | re.MULTILINE)
COMMIT_LINE_REGEX = re.compile(r"^\s*commit:\s*(\S+)", re.IGNORECASE | re.MULTILINE)
AUTHOR_LINE_REGEX = re.compile(r"^\s*(?:author|user):\s*@?(\S+)", re.IGNORECASE | re.MULTILINE)

# "(#123)" or "#123" at the end of the line, ASCII digits only
PR_NUMBER_REGEX = re.compile(r"\(#([0-9]+)\)$|#([0-9]+)\s*$")


def clean_summary(summary: str) -> str:
    """Remove "pr:", "commit:" and "author:" metadata from a changeset summary.

    Args:
        summary: The raw, possibly multi-line summary.

    Returns:
        The summary without metadata, stripped of surrounding whitespace.
    """
    summary = PR_LINE_REGEX.sub("", summary, count=1)
    summary = COMMIT_LINE_REGEX.sub("", summary, count=1)
    summary = AUTHOR_LINE_REGEX.sub("", summary)
    return summary.strip()


def get_first_line(message: Optional[str]) -> Optional[str]:
    """Return the trimmed first line of a message, or None if it is empty."""
    if not message:
        return None
    first_line = message.split("\n")[0].strip()
    return first_line or None


def get_pr_number(commit_message: Optional[str]) -> Optional[int]:
    """Extract the pull request number from a commit message.

    Only the first line is considered. GitHub squash merges append the pull
    request as a trailing ``(#N)``, so earlier references on the line
    (e.g. "closes #456") are ignored.

    Examples:
        >>> get_pr_number("fix: Correct the API endpoint (#123)")
        123
        >>> get_pr_number("feat: Add new feature (closes #456) (#789)")
        789
        >>> get_pr_number("docs: Update README") is None
        True

    Args:
        commit_message: Full commit message or its first line.

    Returns:
        The pull request number, or None if none is found.
    """
    first_line = get_first_line(commit_message)
    if first_line is None:
        return None

    match = PR_NUMBER_REGEX.search(first_line)
    if not match:
        return None

    pr_number = match.group(1) or match.group(2)
    return int(pr_number) if pr_number else None
