"""
Environment overlay for the GitHub section of the configuration.

The environment is read once, when the configuration is loaded, and folded
into the resulting immutable Config.
"""

import subprocess
from typing import Any, Callable, Dict, Mapping, Optional

from pr_pair.log import get_logger, is_debug_enabled


def read_gh_cli_token() -> Optional[str]:
    """
    Get a token from the GitHub CLI (`gh auth token`).

    Returns:
        The token, or None if gh is not installed or not authenticated
    """
    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        # a missing token is reported later, only if publishing needs it
        return None
    return result.stdout.strip() or None


def apply_environment(
    github_section: Dict[str, Any],
    environ: Mapping[str, str],
    token_broker: Callable[[], Optional[str]] = read_gh_cli_token,
) -> Dict[str, Any]:
    """
    Overlay environment variables on the GitHub settings.

    - GITHUB_TOKEN replaces the configured token; without any token the
      token broker (the GitHub CLI) is asked for one
    - GITHUB_REPOSITORY ("owner/repo") sets owner and repo, split on the first "/"
    - PR_NUMBER sets the pull request number

    Args:
        github_section: Merged GitHub settings
        environ: Environment variables
        token_broker: Fallback token source

    Returns:
        New GitHub settings dictionary
    """
    logger = get_logger()
    github = dict(github_section)

    if environ.get("GITHUB_TOKEN"):
        github["token"] = environ["GITHUB_TOKEN"]

    if not github.get("token"):
        token = token_broker()
        if token:
            github["token"] = token
            if is_debug_enabled(environ):
                logger.info("Using GitHub CLI token for authentication")

    repository = environ.get("GITHUB_REPOSITORY")
    if repository:
        owner, _, repo = repository.partition("/")
        github["owner"] = owner
        github["repo"] = repo

    pr_number = environ.get("PR_NUMBER")
    if pr_number:
        try:
            github["pr_number"] = int(pr_number.strip())
        except ValueError:
            logger.warning(f"Ignoring PR_NUMBER={pr_number!r}: not an integer")

    return github
