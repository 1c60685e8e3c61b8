"""Configuration for changelog-github-local.

The formatter itself takes its options from the host on every call.
Only the CLI reads the changesets config file, via load_changeset_options().
"""

import json
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from changelog_github_local.exceptions import ConfigError


# ============================================================
# CONSTANTS
# ============================================================

PACKAGE_NAME = "changesets-changelog-github-local"

GITHUB_BASE_URL = "https://github.com"

# Number of characters shown for a commit hash
SHORT_SHA_LENGTH = 7

# Set by GitHub Actions for every step
CI_ENV_VAR = "GITHUB_ACTION"

CHECKOUT_HISTORY_URL = (
    "https://github.com/actions/checkout"
    "#fetch-all-history-for-all-tags-and-branches"
)

CHANGESET_CONFIG_PATH = Path(".changeset") / "config.json"


def is_github_action(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether we are running inside a GitHub Actions step.

    Args:
        environ: Environment to inspect. Defaults to os.environ.

    Returns:
        True if the CI indicator variable is set to a non-empty value.
    """
    env = os.environ if environ is None else environ
    return bool(env.get(CI_ENV_VAR))


def get_changeset_config_path(repo_root: Path) -> Path:
    """Get path to the changesets config file.

    Returns:
        Path to <repo_root>/.changeset/config.json
    """
    return repo_root / CHANGESET_CONFIG_PATH


def load_changeset_options(repo_root: Path) -> Optional[dict[str, Any]]:
    """Load this generator's options from .changeset/config.json.

    The changesets config names its changelog generator either as a bare
    string or as a ``[name, options]`` pair. Only the pair form carries
    options, and only when it names this package.

    Args:
        repo_root: The repository root directory.

    Returns:
        The options dictionary, or None if the file or entry is absent.

    Raises:
        ConfigError: If the file exists but is not valid JSON.
    """
    config_file = get_changeset_config_path(repo_root)

    if not config_file.exists():
        return None

    try:
        with open(config_file, "r") as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        return None

    changelog = config.get("changelog")
    if not isinstance(changelog, list) or len(changelog) != 2:
        return None

    name, options = changelog
    if name != PACKAGE_NAME or not isinstance(options, dict):
        return None

    return options
