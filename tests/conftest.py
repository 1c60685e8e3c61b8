"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def valid_options():
    """Generator options as the host passes them."""
    return {"repo": "owner/repo"}


@pytest.fixture
def sample_changesets():
    """Two changesets from a prerelease of a small monorepo."""
    return [
        {
            "releases": [
                {"name": "@lekoarts/foo", "type": "patch"},
                {"name": "@lekoarts/bar", "type": "patch"},
            ],
            "summary": "Summary for this changeset",
            "id": "loose-bears-begin",
            "commit": "45e4d391a2a09fc70c48e4d60f505586ada1ba0e",
        },
        {
            "releases": [
                {"name": "@lekoarts/foo", "type": "patch"},
            ],
            "summary": "Another summary for this changeset",
            "id": "smooth-spies-tie",
            "commit": "7f3b8da6dd21c35d3672e44b4f5dd3502b8f8f92",
        },
    ]


@pytest.fixture
def sample_dependencies_updated():
    """Dependency bumps caused by sample_changesets."""
    return [
        {
            "name": "@lekoarts/foo",
            "type": "patch",
            "oldVersion": "0.15.3-alpha.5",
            "changesets": ["loose-bears-begin", "smooth-spies-tie"],
            "newVersion": "0.15.3-alpha.6",
            "packageJson": {"name": "@lekoarts/foo", "version": "0.15.3-alpha.5"},
            "dir": "/Users/lejoe/code/work/mastra/packages/core",
        },
        {
            "name": "@lekoarts/bar",
            "type": "patch",
            "oldVersion": "0.15.3-alpha.5",
            "changesets": ["loose-bears-begin"],
            "newVersion": "0.15.3-alpha.6",
            "packageJson": {"name": "@lekoarts/bar", "version": "0.15.3-alpha.5"},
            "dir": "/Users/lejoe/code/work/mastra/packages/deployer",
        },
    ]


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run


@pytest.fixture
def shallow_repo(temp_dir):
    """Create a repository root whose git directory marks a shallow clone."""
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    (git_dir / "shallow").write_text("45e4d391a2a09fc70c48e4d60f505586ada1ba0e\n")
    return temp_dir
