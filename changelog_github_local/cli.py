"""CLI entry point for changelog-github-local.

Renders changelog lines from JSON records, for use outside the changesets
host (scripts, CI steps, debugging a config).
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import typer

from changelog_github_local import __version__
from changelog_github_local.config import load_changeset_options
from changelog_github_local.exceptions import ChangelogError
from changelog_github_local.formatter import GitHubChangelog
from changelog_github_local.git import GitError, Repository
from changelog_github_local.models import BumpType

app = typer.Typer(
    name="changelog-github-local",
    help="Render changesets changelog lines with GitHub links from local git history",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"changelog-github-local {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Render changesets changelog lines."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _read_json(path: str) -> Any:
    """Read JSON from a file, or from stdin when path is '-'."""
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r") as f:
        return json.load(f)


def _find_repo_root() -> Path:
    """Get the repository root, or the current directory outside a repo."""
    try:
        return Repository.discover().root
    except GitError:
        return Path.cwd()


def _resolve_options(repo: Optional[str]) -> Any:
    """Use --repo if given, else the options in .changeset/config.json."""
    if repo is not None:
        return {"repo": repo}
    return load_changeset_options(_find_repo_root())


@app.command("release-line")
def release_line_command(
    input_file: str = typer.Argument(
        ...,
        metavar="INPUT",
        help="JSON file with one changeset, or '-' for stdin",
    ),
    bump_type: BumpType = typer.Option(
        BumpType.PATCH,
        "--type",
        "-t",
        help="Bump type of the release",
    ),
    repo: Optional[str] = typer.Option(
        None,
        "--repo",
        "-r",
        help="GitHub repository as org/repo (default: from .changeset/config.json)",
    ),
) -> None:
    """Print the changelog entry for a single changeset."""
    try:
        changeset = _read_json(input_file)
        options = _resolve_options(repo)
        line = GitHubChangelog().get_release_line(changeset, bump_type, options)
    except (ChangelogError, GitError, OSError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(line)


@app.command("dependency-release-line")
def dependency_release_line_command(
    input_file: str = typer.Argument(
        ...,
        metavar="INPUT",
        help='JSON file with "changesets" and "dependenciesUpdated", or \'-\' for stdin',
    ),
    repo: Optional[str] = typer.Option(
        None,
        "--repo",
        "-r",
        help="GitHub repository as org/repo (default: from .changeset/config.json)",
    ),
) -> None:
    """Print the "Updated dependencies" block for a release."""
    try:
        data = _read_json(input_file)
        if not isinstance(data, dict):
            raise ValueError("Input must be a JSON object")
        options = _resolve_options(repo)
        block = GitHubChangelog().get_dependency_release_line(
            data.get("changesets", []),
            data.get("dependenciesUpdated", []),
            options,
        )
    except (ChangelogError, GitError, OSError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(block)


if __name__ == "__main__":
    app()
