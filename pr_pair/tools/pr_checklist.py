# AGPL-3.0 License

"""
PR Checklist tool - generates the checklist and optionally publishes it.
"""

import json
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from pr_pair.checklist.assembler import ChangeSource, generate_checklist
from pr_pair.checklist.checklist_config import Config
from pr_pair.config.config_resolver import load_config
from pr_pair.git_providers.github_publisher import GithubPublisher
from pr_pair.git_providers.local_git_provider import LocalGitProvider
from pr_pair.log import get_logger, is_debug_enabled, setup_logger_from_env

DEFAULT_BASE_REF = "HEAD~1"
DEFAULT_HEAD_REF = "HEAD"


class PRChecklist:
    """
    PR Checklist tool - builds the checklist for a ref range and reports it.
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        base_ref: Optional[str] = None,
        head_ref: Optional[str] = None,
        add_to_pr: bool = False,
        pr_number: Optional[int] = None,
        change_source: Optional[ChangeSource] = None,
        publisher: Optional[GithubPublisher] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the PR Checklist tool.

        Args:
            config_path: Configuration file (discovered in the current directory when None)
            base_ref: Base git reference (default HEAD~1)
            head_ref: Head git reference (default HEAD)
            add_to_pr: Publish the checklist to the pull request
            pr_number: PR number, overriding config and PR_NUMBER
            change_source: Changed files and diffs (default: local git repository)
            publisher: Publish target (default: GitHub)
            environ: Environment variables (default: os.environ)
        """
        self.config_path = config_path
        self.base_ref = base_ref or DEFAULT_BASE_REF
        self.head_ref = head_ref or DEFAULT_HEAD_REF
        self.add_to_pr = add_to_pr
        self.pr_number = pr_number
        self.change_source = change_source or LocalGitProvider()
        self.publisher = publisher or GithubPublisher()
        self.environ = os.environ if environ is None else environ
        self.logger = get_logger()
        self.config: Optional[Config] = None

    async def run(self) -> str:
        """
        Generate the checklist and publish it when requested.

        Returns:
            Formatted checklist

        Raises:
            PublishError: If publishing was requested and failed
        """
        self.config = load_config(
            self.config_path,
            environ=self.environ,
            github_overrides={"pr_number": self.pr_number},
        )

        if self.config.checklist.debug or is_debug_enabled(self.environ):
            if not is_debug_enabled(self.environ):
                setup_logger_from_env(self.environ, force_debug=True)
            self.logger.debug("Debug mode enabled")
            self.logger.debug(f"Configuration: {json.dumps(self.config.to_dict(), indent=2)}")

        self.logger.info(f"Generating checklist for {self.base_ref}..{self.head_ref}")
        checklist = generate_checklist(self.config, self.base_ref, self.head_ref, self.change_source)

        if self.add_to_pr:
            self.publisher.publish(checklist, self.config.github)

        return checklist
