# AGPL-3.0 License

"""
Change source backed by the local git repository.
"""

import subprocess
from pathlib import Path
from typing import Union

from pr_pair.log import get_logger


class LocalGitProvider:
    """
    Reads changed files and per-file diffs between two refs with the git CLI.

    Failures never propagate: an unreadable ref range yields no files (for
    example on the first commit, where HEAD~1 does not exist) and an
    unreadable diff yields an empty string.
    """

    def __init__(self, repo_dir: Union[str, Path] = "."):
        """
        Args:
            repo_dir: Working tree of the repository; git runs from here
        """
        self.repo_dir = Path(repo_dir)
        self.logger = get_logger()

    def _run_git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", *args],
            cwd=self.repo_dir,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout

    def get_changed_files(self, base_ref: str, head_ref: str) -> list[str]:
        """
        List files changed between two refs.

        Args:
            base_ref: Base git reference
            head_ref: Head git reference

        Returns:
            Changed file paths in git's order, or [] if git fails
        """
        try:
            diff_output = self._run_git("diff", "--name-only", base_ref, head_ref)
        except subprocess.CalledProcessError as e:
            self.logger.error(f"Error getting changed files between {base_ref} and {head_ref}: {e.stderr.strip()}")
            return []
        except OSError as e:
            self.logger.error(f"Error running git: {e}")
            return []

        changed_files = [line.strip() for line in diff_output.split("\n") if line.strip()]
        self.logger.debug(f"Changed files: {changed_files}")
        return changed_files

    def get_file_diff(self, file_path: str, base_ref: str, head_ref: str) -> str:
        """
        Get the diff of one file between two refs.

        Args:
            file_path: Path relative to the repository root
            base_ref: Base git reference
            head_ref: Head git reference

        Returns:
            Diff text, or "" if the file is not in the working tree or git fails
        """
        if not (self.repo_dir / file_path).exists():
            return ""

        try:
            return self._run_git("diff", base_ref, head_ref, "--", file_path)
        except subprocess.CalledProcessError as e:
            self.logger.error(f"Error getting diff for {file_path}: {e.stderr.strip()}")
            return ""
        except OSError as e:
            self.logger.error(f"Error running git for {file_path}: {e}")
            return ""
