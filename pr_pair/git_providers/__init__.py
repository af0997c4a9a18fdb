# AGPL-3.0 License

"""
Git-facing collaborators: the local repository as change source and GitHub as publish target.
"""

from pr_pair.git_providers.github_publisher import GithubPublisher
from pr_pair.git_providers.local_git_provider import LocalGitProvider

__all__ = [
    "GithubPublisher",
    "LocalGitProvider",
]
