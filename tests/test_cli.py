"""Tests for changelog_github_local.cli module."""

import json

from typer.testing import CliRunner

from changelog_github_local.cli import app
from changelog_github_local.exceptions import ConfigError
from changelog_github_local.git import GitError


runner = CliRunner()


def _write_json(path, data):
    path.write_text(json.dumps(data))
    return str(path)


class TestVersion:
    """Tests for --version flag."""

    def test_prints_version(self):
        """Test the version output."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "changelog-github-local" in result.output


class TestReleaseLineCommand:
    """Tests for release-line command."""

    def test_prints_release_line(self, mocker, temp_dir):
        """Test rendering with --repo and a resolved commit."""
        resolver = mocker.MagicMock()
        resolver.resolve_commit_message.return_value = "Fix a bug (#12)"
        mocker.patch(
            "changelog_github_local.formatter.GitCommitResolver.discover",
            return_value=resolver,
        )
        path = _write_json(temp_dir / "changeset.json", {
            "id": "c1", "summary": "Fix a bug", "commit": "abc1234567890",
        })

        result = runner.invoke(app, ["release-line", path, "--repo", "owner/repo"])

        assert result.exit_code == 0
        assert "- Fix a bug ([#12](https://github.com/owner/repo/pull/12))" in result.output

    def test_reads_stdin(self, temp_dir):
        """Test reading the changeset from stdin."""
        result = runner.invoke(
            app,
            ["release-line", "-", "--repo", "owner/repo", "--type", "minor"],
            input=json.dumps({"id": "c1", "summary": "Add thing"}),
        )

        assert result.exit_code == 0
        assert "- Add thing" in result.output

    def test_repo_from_changeset_config(self, mocker, temp_dir):
        """Test falling back to .changeset/config.json."""
        mocker.patch("changelog_github_local.cli._find_repo_root", return_value=temp_dir)
        config_dir = temp_dir / ".changeset"
        config_dir.mkdir()
        _write_json(config_dir / "config.json", {
            "changelog": ["changesets-changelog-github-local", {"repo": "owner/repo"}],
        })
        path = _write_json(temp_dir / "changeset.json", {"id": "c1", "summary": "Add thing"})

        result = runner.invoke(app, ["release-line", path])

        assert result.exit_code == 0
        assert "- Add thing" in result.output

    def test_missing_repo(self, mocker, temp_dir):
        """Test the error when no repo is configured anywhere."""
        mocker.patch("changelog_github_local.cli._find_repo_root", return_value=temp_dir)
        path = _write_json(temp_dir / "changeset.json", {"id": "c1", "summary": "Add thing"})

        result = runner.invoke(app, ["release-line", path])

        assert result.exit_code == 1
        assert "Please provide a repo" in result.output

    def test_invalid_json(self, temp_dir):
        """Test the error for malformed input."""
        path = temp_dir / "changeset.json"
        path.write_text("{oops")

        result = runner.invoke(app, ["release-line", str(path), "--repo", "owner/repo"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_config_error(self, mocker, temp_dir):
        """Test the error for an unreadable changesets config."""
        mocker.patch(
            "changelog_github_local.cli.load_changeset_options",
            side_effect=ConfigError("Failed to load config"),
        )
        mocker.patch("changelog_github_local.cli._find_repo_root", return_value=temp_dir)
        path = _write_json(temp_dir / "changeset.json", {"id": "c1", "summary": "Add thing"})

        result = runner.invoke(app, ["release-line", path])

        assert result.exit_code == 1
        assert "Failed to load config" in result.output

    def test_git_error(self, mocker, temp_dir):
        """Test the error when the repository cannot be discovered."""
        mocker.patch(
            "changelog_github_local.formatter.GitCommitResolver.discover",
            side_effect=GitError("Repository discovery failed: not a git repository"),
        )
        path = _write_json(temp_dir / "changeset.json", {
            "id": "c1", "summary": "Fix", "commit": "abc1234567890",
        })

        result = runner.invoke(app, ["release-line", path, "--repo", "owner/repo"])

        assert result.exit_code == 1
        assert "Repository discovery failed" in result.output


class TestDependencyReleaseLineCommand:
    """Tests for dependency-release-line command."""

    def test_prints_block(self, temp_dir, sample_changesets, sample_dependencies_updated):
        """Test rendering of the dependency block."""
        path = _write_json(temp_dir / "release.json", {
            "changesets": sample_changesets,
            "dependenciesUpdated": sample_dependencies_updated,
        })

        result = runner.invoke(app, ["dependency-release-line", path, "--repo", "owner/repo"])

        assert result.exit_code == 0
        assert "- Updated dependencies [[`45e4d39`]" in result.output
        assert "  - @lekoarts/foo@0.15.3-alpha.6" in result.output
        assert "  - @lekoarts/bar@0.15.3-alpha.6" in result.output

    def test_rejects_non_object(self, temp_dir):
        """Test the error for a JSON array input."""
        path = _write_json(temp_dir / "release.json", [])

        result = runner.invoke(app, ["dependency-release-line", path, "--repo", "owner/repo"])

        assert result.exit_code == 1
        assert "JSON object" in result.output

    def test_invalid_repo(self, temp_dir):
        """Test the error for a malformed --repo."""
        path = _write_json(temp_dir / "release.json", {"changesets": [], "dependenciesUpdated": []})

        result = runner.invoke(app, ["dependency-release-line", path, "--repo", "owner"])

        assert result.exit_code == 1
        assert "Invalid repo format" in result.output
