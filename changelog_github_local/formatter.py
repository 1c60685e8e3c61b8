"""Changelog line formatting for the changesets host.

The host calls two functions per release:
- get_release_line: one entry per changeset
- get_dependency_release_line: one block listing dependency bumps

Release lines link the pull request found in the squash-merge title of the
changeset's commit, falling back to the commit itself. Commits are read from
the local repository only, so no GitHub token or network access is needed.
"""

import logging
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence, Union

from changelog_github_local.git import CommitResolver, GitCommitResolver, GitError
from changelog_github_local.links import get_commit_link, get_suffix
from changelog_github_local.models import (
    BumpType,
    Changeset,
    DependencyUpdate,
    as_changeset,
    as_dependency_update,
)
from changelog_github_local.options import validate
from changelog_github_local.summary import clean_summary, get_pr_number

ChangesetLike = Union[Changeset, Mapping[str, Any]]
DependencyUpdateLike = Union[DependencyUpdate, Mapping[str, Any]]
ResolverFactory = Callable[[logging.Logger], CommitResolver]


class ChangelogFunctions(Protocol):
    """The pair of functions a changesets changelog generator provides."""

    def get_release_line(
        self,
        changeset: ChangesetLike,
        type: Union[BumpType, str],
        options: Any,
    ) -> str:
        ...

    def get_dependency_release_line(
        self,
        changesets: Sequence[ChangesetLike],
        dependencies_updated: Sequence[DependencyUpdateLike],
        options: Any,
    ) -> str:
        ...


def _discover_resolver(log: logging.Logger) -> CommitResolver:
    return GitCommitResolver.discover(log=log)


class GitHubChangelog:
    """Changelog generator linking to GitHub from local git history.

    Args:
        logger: Logger for non-fatal warnings. Defaults to this module's logger.
        resolver_factory: Builds the CommitResolver for a release line.
            Called only when the changeset has a commit. Defaults to
            discovering the repository from the current directory.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        resolver_factory: Optional[ResolverFactory] = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.resolver_factory = resolver_factory or _discover_resolver

    def _resolve_commit_message(self, commit_hash: str) -> Optional[str]:
        # Discovery errors propagate; only the lookup itself degrades
        resolver = self.resolver_factory(self.logger)
        try:
            return resolver.resolve_commit_message(commit_hash)
        except GitError as e:
            self.logger.warning("Failed to get commit message for %s: %s", commit_hash, e)
            return None

    def get_release_line(
        self,
        changeset: ChangesetLike,
        type: Union[BumpType, str],
        options: Any,
    ) -> str:
        """Render the changelog entry for one changeset.

        Steps:
        1) Validate the options
        2) Read the title of the changeset's commit, if it has one
        3) Clean metadata lines out of the summary
        4) Link the PR number from the commit title, else the commit itself
        5) Indent the remaining summary lines under the first

        Args:
            changeset: The changeset record.
            type: Bump type of the release. Not used in the output.
            options: Untyped generator options from the host.

        Returns:
            ``"\\n- {first line}{suffix}\\n"`` followed by the remaining
            summary lines, each indented by two spaces.
        """
        repo_options = validate(options)
        changeset = as_changeset(changeset)

        commit_message = None
        if changeset.commit:
            commit_message = self._resolve_commit_message(changeset.commit)

        summary = clean_summary(changeset.summary)
        first_line, *rest_of_lines = summary.split("\n")
        suffix = get_suffix(get_pr_number(commit_message), changeset.commit, repo_options)

        indented = "\n".join(f"  {line}" for line in rest_of_lines)
        return f"\n- {first_line}{suffix}\n{indented}"

    def get_dependency_release_line(
        self,
        changesets: Sequence[ChangesetLike],
        dependencies_updated: Sequence[DependencyUpdateLike],
        options: Any,
    ) -> str:
        """Render the "Updated dependencies" block.

        Args:
            changesets: Changesets in the release; each one with a commit
                contributes a commit link, in order.
            dependencies_updated: Packages bumped because of a dependency.
            options: Untyped generator options from the host.

        Returns:
            The header line followed by one ``  - name@version`` line per
            dependency, or an empty string if no dependency was updated.
        """
        repo_options = validate(options)

        if not dependencies_updated:
            return ""

        changesets = [as_changeset(c) for c in changesets]
        dependencies = [as_dependency_update(d) for d in dependencies_updated]

        commit_links = [
            get_commit_link(repo_options, c.commit) for c in changesets if c.commit
        ]
        header = "- Updated dependencies"
        if commit_links:
            header += f" [{', '.join(commit_links)}]"
        header += ":"

        updated_dependencies = [f"  - {d.name}@{d.new_version}" for d in dependencies]

        return "\n".join([header, *updated_dependencies])


changelog_functions = GitHubChangelog()


def get_release_line(changeset: ChangesetLike, type: Union[BumpType, str], options: Any) -> str:
    """Render a release line with the default generator."""
    return changelog_functions.get_release_line(changeset, type, options)


def get_dependency_release_line(
    changesets: Sequence[ChangesetLike],
    dependencies_updated: Sequence[DependencyUpdateLike],
    options: Any,
) -> str:
    """Render a dependency block with the default generator."""
    return changelog_functions.get_dependency_release_line(changesets, dependencies_updated, options)
