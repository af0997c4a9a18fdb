# AGPL-3.0 License

"""
Publishes a checklist to a GitHub pull request through the REST API.
"""

from typing import Optional

import requests

from pr_pair.checklist.checklist_config import GitHubConfig
from pr_pair.errors import PublishError, PublishPreconditionError
from pr_pair.log import get_logger


class GithubPublisher:
    """
    Posts the checklist as a PR comment, or replaces the PR description.

    A single request is made; there are no retries.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Args:
            session: Optional requests session (a plain requests call is used otherwise)
        """
        self.session = session or requests
        self.logger = get_logger()

    @staticmethod
    def validate(github: GitHubConfig) -> None:
        """
        Check that everything needed to publish is configured.

        Raises:
            PublishPreconditionError: Naming the first missing setting
        """
        if not github.token:
            raise PublishPreconditionError("GitHub token is required", field="token")
        if not github.owner:
            raise PublishPreconditionError("GitHub repository owner is required", field="owner")
        if not github.repo:
            raise PublishPreconditionError("GitHub repository name is required", field="repo")
        if not github.pr_number:
            raise PublishPreconditionError("PR number is required", field="pr_number")

    @staticmethod
    def get_request(github: GitHubConfig) -> tuple[str, str]:
        """
        Get the HTTP method and URL for the configured publish mode.

        Returns:
            (method, url)
        """
        repo_url = f"{github.api_url}/repos/{github.owner}/{github.repo}"
        if github.add_as_comment:
            return "POST", f"{repo_url}/issues/{github.pr_number}/comments"
        return "PATCH", f"{repo_url}/pulls/{github.pr_number}"

    def publish(self, checklist: str, github: GitHubConfig) -> None:
        """
        Publish the checklist to the pull request.

        Args:
            checklist: Formatted checklist
            github: Destination, mode and credentials

        Raises:
            PublishPreconditionError: If the token, owner, repo or PR number is missing
            PublishError: If the request fails or GitHub answers with a non-2xx status
        """
        self.validate(github)

        method, url = self.get_request(github)
        headers = {
            "Authorization": f"Bearer {github.token}",
            "Accept": "application/vnd.github.v3+json",
            "Content-Type": "application/json",
        }

        self.logger.debug(f"{method} {url}")
        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                json={"body": checklist},
                timeout=github.timeout,
            )
        except requests.RequestException as e:
            raise PublishError(f"Failed to update PR: {e}")

        if not 200 <= response.status_code < 300:
            raise PublishError(
                f"Failed to update PR: {response.status_code} {response.reason}\n{response.text}",
                status_code=response.status_code,
                response_text=response.text,
            )

        if github.add_as_comment:
            self.logger.info(f"Checklist added as comment to PR #{github.pr_number}")
        else:
            self.logger.info(f"PR #{github.pr_number} description updated with checklist")
